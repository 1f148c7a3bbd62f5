"""
Scheduling Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class SessionType(str, Enum):
    """Whether a session is a single meeting or part of a series"""

    one_time = "one_time"
    recurring = "recurring"


class SessionStatus(str, Enum):
    """Session lifecycle status"""

    proposed = "proposed"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"
    no_show = "no_show"


class RecurrenceRule(str, Enum):
    """Recurrence cadence (recorded only, never expanded)"""

    weekly = "weekly"
    biweekly = "biweekly"


class MeetingProvider(str, Enum):
    """Where the meeting takes place"""

    google_meet = "google_meet"
    zoom = "zoom"
    manual = "manual"


class ReminderType(str, Enum):
    """Reminder offset category"""

    hours_24 = "24_hours"
    hour_1 = "1_hour"
    custom = "custom"


class CollaboratorRole(str, Enum):
    """Role a collaborator holds on a plan"""

    mentor = "mentor"
    accountability_partner = "accountability_partner"
    viewer = "viewer"


class CollaboratorStatus(str, Enum):
    """Plan collaboration invite status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    revoked = "revoked"
