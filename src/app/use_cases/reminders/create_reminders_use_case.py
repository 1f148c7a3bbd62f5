"""
Create Reminders Use Case

Records the intended reminder fire times for one participant of a
confirmed session.
"""

from datetime import datetime
from typing import List, Mapping, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions.errors import (
    INVALID_STATE_TRANSITION,
    NOT_A_PARTICIPANT,
    SESSION_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.domain.entities import ReminderType, SessionReminder, SessionStatus
from src.domain.reminder_schedule import DEFAULT_REMINDER_OFFSETS, compute_reminder_times

from .dtos import ReminderResponse


class CreateRemindersUseCase:
    """
    Use case for creating a participant's reminders.

    Business Rules:
    - Session must exist and be confirmed
    - user_id must be the host or the attendee
    - One reminder per configured offset, strictly before scheduled_start
    - Reminders already recorded for (session, user, type) are not duplicated
    - Past fire times are still recorded
    """

    def __init__(
        self,
        uow: UnitOfWork,
        offsets: Mapping[ReminderType, int] = DEFAULT_REMINDER_OFFSETS,
    ):
        self.uow = uow
        self.offsets = offsets

    async def execute(
        self, session_id: UUID, user_id: UUID, scheduled_start: Optional[datetime]
    ) -> Result[List[ReminderResponse]]:
        """
        Execute create reminders use case.

        Args:
            session_id: Confirmed session
            user_id: Participant to remind
            scheduled_start: Confirmed start time of the session

        Returns:
            Result with the newly created reminders, or Error
        """
        if scheduled_start is None:
            return Return.err(
                Error(VALIDATION_ERROR, "Cannot create reminders without a scheduled start")
            )

        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error(SESSION_NOT_FOUND, "Session not found"))

            if SessionStatus(session.status) != SessionStatus.confirmed:
                return Return.err(
                    Error(
                        INVALID_STATE_TRANSITION,
                        "Reminders can only be created for confirmed sessions",
                    )
                )

            if not session.is_participant(user_id):
                return Return.err(
                    Error(NOT_A_PARTICIPANT, "User is not a participant of this session")
                )

            existing = await self.uow.reminders.get_by_session_and_user(session_id, user_id)
            already_recorded = {ReminderType(r.reminder_type) for r in existing}

            reminders = [
                SessionReminder(
                    session_id=session_id,
                    user_id=user_id,
                    reminder_type=reminder_type,
                    reminder_time=fire_at,
                )
                for reminder_type, fire_at in compute_reminder_times(
                    scheduled_start, self.offsets
                )
                if reminder_type not in already_recorded
            ]

            if reminders:
                reminders = await self.uow.reminders.create_many(reminders)
                await self.uow.commit()

            return Return.ok([ReminderResponse.from_entity(r) for r in reminders])
