"""
Scheduling Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    CollaboratorRole,
    CollaboratorStatus,
    MeetingProvider,
    RecurrenceRule,
    ReminderType,
    SessionStatus,
    SessionType,
)

# Export all entities
from .mentorship_session import MentorshipSession, ProposedTime, SessionOutcome
from .plan_collaborator import PlanCollaborator
from .session_reminder import SessionReminder

__all__ = [
    # Enums
    "CollaboratorRole",
    "CollaboratorStatus",
    "MeetingProvider",
    "RecurrenceRule",
    "ReminderType",
    "SessionStatus",
    "SessionType",
    # Value objects
    "ProposedTime",
    "SessionOutcome",
    # Entities
    "MentorshipSession",
    "PlanCollaborator",
    "SessionReminder",
]
