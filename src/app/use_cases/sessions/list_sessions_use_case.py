"""
List Sessions Use Case

Read side of session scheduling: filtered listing plus the
"upcoming" and "past" views.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.mentorship_session_repository import SessionFilters
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc, utcnow

from .dtos import SessionResponse
from .errors import VALIDATION_ERROR

DEFAULT_UPCOMING_LIMIT = 5
DEFAULT_PAST_LIMIT = 20


class ListSessionsUseCase:
    """
    Use case for listing a user's sessions.

    Business Rules:
    - Only sessions where the user is host or attendee are returned
    - Default ordering: scheduled_start ascending, unscheduled last,
      then newest proposal first
    - Upcoming: proposed/confirmed, not started yet or not scheduled
    - Past: completed/no_show/cancelled, never-scheduled first, then latest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, filters: Optional[SessionFilters] = None
    ) -> Result[List[SessionResponse]]:
        filters = filters or SessionFilters()

        if (
            filters.from_date is not None
            and filters.to_date is not None
            and to_naive_utc(filters.from_date) > to_naive_utc(filters.to_date)
        ):
            return Return.err(Error(VALIDATION_ERROR, "from_date must not be after to_date"))

        async with self.uow:
            sessions = await self.uow.sessions.list_for_user(user_id, filters)
            return Return.ok([SessionResponse.from_entity(s) for s in sessions])

    async def upcoming(
        self,
        user_id: UUID,
        limit: int = DEFAULT_UPCOMING_LIMIT,
        now: Optional[datetime] = None,
    ) -> Result[List[SessionResponse]]:
        if limit <= 0:
            return Return.err(Error(VALIDATION_ERROR, "limit must be positive"))

        async with self.uow:
            sessions = await self.uow.sessions.list_upcoming(
                user_id, now or utcnow(), limit
            )
            return Return.ok([SessionResponse.from_entity(s) for s in sessions])

    async def past(
        self, user_id: UUID, limit: int = DEFAULT_PAST_LIMIT
    ) -> Result[List[SessionResponse]]:
        if limit <= 0:
            return Return.err(Error(VALIDATION_ERROR, "limit must be positive"))

        async with self.uow:
            sessions = await self.uow.sessions.list_past(user_id, limit)
            return Return.ok([SessionResponse.from_entity(s) for s in sessions])
