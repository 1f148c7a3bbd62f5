"""
Get Session Reminders Use Case
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions.errors import SESSION_NOT_FOUND

from .dtos import ReminderResponse


class GetSessionRemindersUseCase:
    """Lists a session's reminders, earliest first; participants only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, session_id: UUID
    ) -> Result[List[ReminderResponse]]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or not session.is_participant(user_id):
                return Return.err(Error(SESSION_NOT_FOUND, "Session not found"))

            reminders = await self.uow.reminders.get_by_session_id(session_id)
            return Return.ok([ReminderResponse.from_entity(r) for r in reminders])
