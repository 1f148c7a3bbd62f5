"""
MentorshipSession Entity

A one-off meeting negotiated between a host and an attendee.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import format_instant, parse_instant, utcnow

from .enums import MeetingProvider, RecurrenceRule, SessionStatus, SessionType


class ProposedTime(BaseModel):
    """Candidate meeting window; start/end are ISO-8601 UTC strings"""

    start: str
    end: str

    @classmethod
    def from_datetimes(cls, start: datetime, end: datetime) -> "ProposedTime":
        return cls(start=format_instant(start), end=format_instant(end))

    def start_at(self) -> datetime:
        return parse_instant(self.start)

    def end_at(self) -> datetime:
        return parse_instant(self.end)


class SessionOutcome(BaseModel):
    """Action item captured when a session completes"""

    id: str
    text: str
    completed: bool = False


class MentorshipSession(SQLModel, table=True):
    """
    MentorshipSession entity - a meeting negotiated between two collaborators.

    Business Rules:
    - Host and attendee must share an accepted plan collaboration
    - Created as proposed with one or more candidate windows
    - Confirmation fixes scheduled_start/end to one proposed window
    - Lifecycle only moves forward; cancelled/completed/no_show are terminal
    - Only proposed or cancelled sessions may be deleted
    """

    __tablename__ = "mentorship_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    host_id: UUID = Field(nullable=False, index=True)
    attendee_id: UUID = Field(nullable=False, index=True)
    plan_id: Optional[UUID] = Field(default=None, index=True)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    session_type: SessionType = Field(default=SessionType.one_time)
    status: SessionStatus = Field(default=SessionStatus.proposed)

    # Scheduling
    proposed_times: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    scheduled_start: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    scheduled_end: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    duration_minutes: int = Field(nullable=False)
    timezone: str = Field(max_length=64)

    # Recurrence (recorded, not expanded)
    recurrence_rule: Optional[RecurrenceRule] = Field(default=None)
    recurrence_end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    parent_session_id: Optional[UUID] = Field(default=None)

    # Meeting
    meeting_provider: Optional[MeetingProvider] = Field(default=None)
    meeting_link: Optional[str] = Field(default=None, max_length=2048)
    meeting_id: Optional[str] = Field(default=None, max_length=255)

    # Outcome capture
    actual_duration_minutes: Optional[int] = Field(default=None)
    session_notes: Optional[str] = Field(default=None)
    outcomes: Optional[List[dict]] = Field(default=None, sa_column=Column(JSON))

    # Lifecycle timestamps
    confirmed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    cancelled_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    cancellation_reason: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_mentorship_session_status", "status"),
        Index("idx_mentorship_session_scheduled_start", "scheduled_start"),
        Index("idx_mentorship_session_host_attendee", "host_id", "attendee_id"),
    )

    def proposed_windows(self) -> List[ProposedTime]:
        return [ProposedTime(**window) for window in (self.proposed_times or [])]

    def participant_ids(self) -> List[UUID]:
        return [self.host_id, self.attendee_id]

    def is_participant(self, user_id: UUID) -> bool:
        return user_id in (self.host_id, self.attendee_id)
