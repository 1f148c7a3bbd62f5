"""
Cancel Session Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.mentorship_session_repository import SessionChanges
from src.domain.base import utcnow
from src.domain.session_lifecycle import SessionTransition

from .dtos import CancelSessionCommand, SessionResponse
from .lifecycle_use_case import SessionLifecycleUseCase


class CancelSessionUseCase(SessionLifecycleUseCase):
    """
    Use case for cancelling a proposed or confirmed session.

    Business Rules:
    - Either participant may cancel
    - Sets cancelled_at and stores the optional reason
    - Cancelled is terminal
    """

    transition = SessionTransition.cancel

    async def execute(
        self, user_id: UUID, command: CancelSessionCommand
    ) -> Result[SessionResponse]:
        async with self.uow:
            loaded = await self._load_for_transition(user_id, command.session_id)
            if loaded.is_err():
                return loaded

            updated = await self._apply(
                command.session_id,
                SessionChanges(
                    cancelled_at=utcnow(),
                    cancellation_reason=command.reason or None,
                ),
            )
            if updated is None:
                return self._lost_race()

            await self.uow.commit()

            return Return.ok(SessionResponse.from_entity(updated))
