"""
Session Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the session scheduling domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.base import format_instant
from src.domain.entities import (
    MeetingProvider,
    MentorshipSession,
    ProposedTime,
    RecurrenceRule,
    SessionOutcome,
    SessionStatus,
    SessionType,
)


def _instant(value: Optional[datetime]) -> Optional[str]:
    return format_instant(value) if value is not None else None


# ============================================================================
# Command DTOs
# ============================================================================


class TimeWindow(BaseModel):
    """A {start, end} window supplied by a caller"""

    start: datetime
    end: datetime


class CreateSessionCommand(BaseModel):
    """
    Create session command - a host's proposal to an attendee

    Created by API layer after request parsing; business validation
    happens in the use case.
    """

    attendee_id: UUID
    plan_id: Optional[UUID] = None
    title: str
    description: Optional[str] = None
    session_type: SessionType = SessionType.one_time
    proposed_times: List[TimeWindow]
    duration_minutes: int
    timezone: str
    recurrence_rule: Optional[RecurrenceRule] = None
    recurrence_end_date: Optional[datetime] = None
    parent_session_id: Optional[UUID] = None
    meeting_provider: Optional[MeetingProvider] = None
    meeting_link: Optional[str] = None
    meeting_id: Optional[str] = None


class ConfirmSessionCommand(BaseModel):
    session_id: UUID
    selected_time: TimeWindow


class CancelSessionCommand(BaseModel):
    session_id: UUID
    reason: Optional[str] = None


class CompleteSessionCommand(BaseModel):
    session_id: UUID
    session_notes: Optional[str] = None
    outcomes: Optional[List[SessionOutcome]] = None
    actual_duration_minutes: Optional[int] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SessionResponse(BaseModel):
    """Session as returned to callers"""

    id: str
    host_id: str
    attendee_id: str
    plan_id: Optional[str]
    title: str
    description: Optional[str]
    session_type: str
    status: str
    proposed_times: List[ProposedTime]
    scheduled_start: Optional[str]
    scheduled_end: Optional[str]
    duration_minutes: int
    timezone: str
    recurrence_rule: Optional[str]
    recurrence_end_date: Optional[str]
    parent_session_id: Optional[str]
    meeting_provider: Optional[str]
    meeting_link: Optional[str]
    meeting_id: Optional[str]
    actual_duration_minutes: Optional[int]
    session_notes: Optional[str]
    outcomes: Optional[List[SessionOutcome]]
    confirmed_at: Optional[str]
    completed_at: Optional[str]
    cancelled_at: Optional[str]
    cancellation_reason: Optional[str]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, session: MentorshipSession) -> "SessionResponse":
        return cls(
            id=str(session.id),
            host_id=str(session.host_id),
            attendee_id=str(session.attendee_id),
            plan_id=str(session.plan_id) if session.plan_id else None,
            title=session.title,
            description=session.description,
            session_type=SessionType(session.session_type).value,
            status=SessionStatus(session.status).value,
            proposed_times=session.proposed_windows(),
            scheduled_start=_instant(session.scheduled_start),
            scheduled_end=_instant(session.scheduled_end),
            duration_minutes=session.duration_minutes,
            timezone=session.timezone,
            recurrence_rule=(
                RecurrenceRule(session.recurrence_rule).value
                if session.recurrence_rule
                else None
            ),
            recurrence_end_date=_instant(session.recurrence_end_date),
            parent_session_id=(
                str(session.parent_session_id) if session.parent_session_id else None
            ),
            meeting_provider=(
                MeetingProvider(session.meeting_provider).value
                if session.meeting_provider
                else None
            ),
            meeting_link=session.meeting_link,
            meeting_id=session.meeting_id,
            actual_duration_minutes=session.actual_duration_minutes,
            session_notes=session.session_notes,
            outcomes=(
                [SessionOutcome(**outcome) for outcome in session.outcomes]
                if session.outcomes is not None
                else None
            ),
            confirmed_at=_instant(session.confirmed_at),
            completed_at=_instant(session.completed_at),
            cancelled_at=_instant(session.cancelled_at),
            cancellation_reason=session.cancellation_reason,
            created_at=format_instant(session.created_at),
            updated_at=format_instant(session.updated_at),
        )


class DeleteSessionResponse(BaseModel):
    session_id: str
    status: str


class SessionStatsResponse(BaseModel):
    """Per-user session counts; upcoming covers proposed and confirmed"""

    total: int
    completed: int
    upcoming: int
    cancelled: int
