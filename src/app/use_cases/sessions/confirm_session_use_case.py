"""
Confirm Session Use Case

Handles picking one of the proposed windows for a session.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.mentorship_session_repository import SessionChanges
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc, utcnow
from src.domain.session_lifecycle import ConfirmPolicy, SessionTransition, may_confirm

from .dtos import ConfirmSessionCommand, SessionResponse
from .errors import CONFIRM_NOT_ALLOWED, VALIDATION_ERROR
from .lifecycle_use_case import SessionLifecycleUseCase


class ConfirmSessionUseCase(SessionLifecycleUseCase):
    """
    Use case for confirming a proposed session.

    Business Rules:
    - Only proposed sessions can be confirmed
    - By default only the attendee confirms; ConfirmPolicy.either lets the host too
    - The selected window must end after it starts
    - The selected window must match one of the proposed windows exactly
    - scheduled_start/end are copied from the selected window, confirmed_at is set

    Reminders are not created here; see ScheduleSessionRemindersUseCase.
    """

    transition = SessionTransition.confirm

    def __init__(self, uow: UnitOfWork, policy: ConfirmPolicy = ConfirmPolicy.attendee):
        super().__init__(uow)
        self.policy = policy

    async def execute(
        self, user_id: UUID, command: ConfirmSessionCommand
    ) -> Result[SessionResponse]:
        """
        Execute confirm session use case.

        Args:
            user_id: Authenticated caller
            command: Session ID and the selected window

        Returns:
            Result with SessionResponse DTO, or Error
        """
        selected_start = to_naive_utc(command.selected_time.start)
        selected_end = to_naive_utc(command.selected_time.end)
        if selected_end <= selected_start:
            return Return.err(
                Error(VALIDATION_ERROR, "Selected time must end after it starts")
            )

        async with self.uow:
            loaded = await self._load_for_transition(user_id, command.session_id)
            if loaded.is_err():
                return loaded
            session = loaded.value

            if not may_confirm(
                self.policy,
                is_host=session.host_id == user_id,
                is_attendee=session.attendee_id == user_id,
            ):
                return Return.err(
                    Error(CONFIRM_NOT_ALLOWED, "Only the attendee can confirm this session")
                )

            matches_proposal = any(
                window.start_at() == selected_start and window.end_at() == selected_end
                for window in session.proposed_windows()
            )
            if not matches_proposal:
                return Return.err(
                    Error(
                        VALIDATION_ERROR,
                        "Selected time is not one of the proposed times",
                    )
                )

            updated = await self._apply(
                session.id,
                SessionChanges(
                    scheduled_start=selected_start,
                    scheduled_end=selected_end,
                    confirmed_at=utcnow(),
                ),
            )
            if updated is None:
                return self._lost_race()

            await self.uow.commit()

            return Return.ok(SessionResponse.from_entity(updated))
