from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, FrozenSet, List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import MentorshipSession, SessionStatus


class SessionFilters(BaseModel):
    """
    Read filters for listing a user's sessions.

    Role flags default to "either": when both or neither are set the user
    may be host or attendee.
    """

    as_host: bool = False
    as_attendee: bool = False
    status: Optional[List[SessionStatus]] = None
    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    plan_id: Optional[UUID] = None


class SessionChanges(BaseModel):
    """Columns written by a lifecycle transition; only explicitly set fields are applied"""

    status: Optional[SessionStatus] = None
    scheduled_start: Optional[datetime] = None
    scheduled_end: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    session_notes: Optional[str] = None
    outcomes: Optional[List[dict]] = None
    actual_duration_minutes: Optional[int] = None


class IMentorshipSessionRepository(ABC):
    """Mentorship session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[MentorshipSession]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session: MentorshipSession) -> MentorshipSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: UUID, filters: SessionFilters
    ) -> List[MentorshipSession]:
        """
        Sessions where the user is host and/or attendee.

        Ordered by scheduled_start ascending with unscheduled sessions last,
        then created_at descending.
        """
        pass

    @abstractmethod
    async def list_upcoming(
        self, user_id: UUID, now: datetime, limit: int
    ) -> List[MentorshipSession]:
        """Proposed/confirmed sessions starting at or after `now`, or not yet scheduled"""
        pass

    @abstractmethod
    async def list_past(self, user_id: UUID, limit: int) -> List[MentorshipSession]:
        """Completed, no-show and cancelled sessions; unscheduled first, then latest scheduled_start"""
        pass

    @abstractmethod
    async def apply_transition(
        self,
        session_id: UUID,
        from_statuses: FrozenSet[SessionStatus],
        changes: SessionChanges,
    ) -> Optional[MentorshipSession]:
        """
        Atomically apply `changes` only if the current status is in `from_statuses`.

        Returns the updated session, or None when no row matched.
        """
        pass

    @abstractmethod
    async def delete_in_statuses(
        self, session_id: UUID, statuses: FrozenSet[SessionStatus]
    ) -> bool:
        """Delete the session only if its status is in `statuses`. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def count_by_status(self, user_id: UUID) -> Dict[SessionStatus, int]:
        """Number of the user's sessions per status"""
        pass
