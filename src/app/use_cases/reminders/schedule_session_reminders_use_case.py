"""
Schedule Session Reminders Use Case

Best-effort follow-up to a confirmation: creates reminders for both
participants. Failures are logged and never surface as a failure of the
confirmation, which has already been committed.
"""

import logging
from typing import List, Mapping
from uuid import UUID

from src.app.services.unit_of_work import STORE_ERRORS, UnitOfWork
from src.domain.entities import ReminderType
from src.domain.reminder_schedule import DEFAULT_REMINDER_OFFSETS

from .create_reminders_use_case import CreateRemindersUseCase
from .dtos import ReminderResponse

logger = logging.getLogger(__name__)


class ScheduleSessionRemindersUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        offsets: Mapping[ReminderType, int] = DEFAULT_REMINDER_OFFSETS,
    ):
        self.uow = uow
        self.offsets = offsets

    async def execute(self, session_id: UUID) -> List[ReminderResponse]:
        """
        Create reminders for each participant of a confirmed session.

        Returns whatever was created; nothing when the session is gone or
        has no scheduled start.
        """
        try:
            async with self.uow:
                session = await self.uow.sessions.get_by_id(session_id)
                if session is None or session.scheduled_start is None:
                    logger.warning(
                        "No scheduled session %s to create reminders for", session_id
                    )
                    return []
                participant_ids = session.participant_ids()
                scheduled_start = session.scheduled_start
        except STORE_ERRORS:
            logger.exception("Failed to load session=%s for reminders", session_id)
            return []

        created: List[ReminderResponse] = []
        create_reminders = CreateRemindersUseCase(self.uow, self.offsets)

        for user_id in participant_ids:
            try:
                result = await create_reminders.execute(session_id, user_id, scheduled_start)
            except STORE_ERRORS:
                logger.exception(
                    "Failed to create reminders for session=%s user=%s", session_id, user_id
                )
                continue

            if result.is_err():
                logger.warning(
                    "Reminders not created for session=%s user=%s: %s",
                    session_id,
                    user_id,
                    result.error.code,
                )
                continue

            created.extend(result.value)

        return created
