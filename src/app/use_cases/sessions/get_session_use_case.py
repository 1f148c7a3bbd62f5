"""
Get Session Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SessionResponse
from .errors import SESSION_NOT_FOUND


class GetSessionUseCase:
    """
    Use case for fetching one session.

    Non-participants get SESSION_NOT_FOUND so session IDs do not leak.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[SessionResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or not session.is_participant(user_id):
                return Return.err(Error(SESSION_NOT_FOUND, "Session not found"))

            return Return.ok(SessionResponse.from_entity(session))
