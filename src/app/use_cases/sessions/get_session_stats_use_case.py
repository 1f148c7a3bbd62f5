"""
Get Session Stats Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SessionStatus

from .dtos import SessionStatsResponse


class GetSessionStatsUseCase:
    """Counts of a user's sessions for dashboard summaries"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[SessionStatsResponse]:
        async with self.uow:
            counts = await self.uow.sessions.count_by_status(user_id)

            return Return.ok(
                SessionStatsResponse(
                    total=sum(counts.values()),
                    completed=counts.get(SessionStatus.completed, 0),
                    upcoming=counts.get(SessionStatus.proposed, 0)
                    + counts.get(SessionStatus.confirmed, 0),
                    cancelled=counts.get(SessionStatus.cancelled, 0),
                )
            )
