"""
Complete Session Use Case

Handles closing a confirmed session with notes and outcomes.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.mentorship_session_repository import SessionChanges
from src.domain.base import utcnow
from src.domain.session_lifecycle import SessionTransition

from .dtos import CompleteSessionCommand, SessionResponse
from .errors import VALIDATION_ERROR
from .lifecycle_use_case import SessionLifecycleUseCase


class CompleteSessionUseCase(SessionLifecycleUseCase):
    """
    Use case for completing a confirmed session.

    Business Rules:
    - Only confirmed sessions can be completed
    - Either participant may complete
    - Sets completed_at and stores notes, outcomes and actual duration
    """

    transition = SessionTransition.complete

    async def execute(
        self, user_id: UUID, command: CompleteSessionCommand
    ) -> Result[SessionResponse]:
        """
        Execute complete session use case.

        Args:
            user_id: Authenticated caller
            command: Session ID plus optional notes, outcomes and actual duration

        Returns:
            Result with SessionResponse DTO, or Error
        """
        if (
            command.actual_duration_minutes is not None
            and command.actual_duration_minutes <= 0
        ):
            return Return.err(
                Error(VALIDATION_ERROR, "Actual duration must be a positive number of minutes")
            )

        async with self.uow:
            loaded = await self._load_for_transition(user_id, command.session_id)
            if loaded.is_err():
                return loaded

            updated = await self._apply(
                command.session_id,
                SessionChanges(
                    completed_at=utcnow(),
                    session_notes=command.session_notes or None,
                    outcomes=(
                        [outcome.model_dump() for outcome in command.outcomes]
                        if command.outcomes is not None
                        else None
                    ),
                    actual_duration_minutes=command.actual_duration_minutes,
                ),
            )
            if updated is None:
                return self._lost_race()

            await self.uow.commit()

            return Return.ok(SessionResponse.from_entity(updated))
