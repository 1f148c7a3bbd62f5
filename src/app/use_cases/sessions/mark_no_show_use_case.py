"""
Mark No-Show Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.mentorship_session_repository import SessionChanges
from src.domain.base import utcnow
from src.domain.session_lifecycle import SessionTransition

from .dtos import SessionResponse
from .lifecycle_use_case import SessionLifecycleUseCase


class MarkNoShowUseCase(SessionLifecycleUseCase):
    """
    Use case for recording that a confirmed session did not happen.

    Business Rules:
    - Only confirmed sessions can be marked no-show
    - Sets completed_at; a second call fails because no_show is terminal
    """

    transition = SessionTransition.mark_no_show

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[SessionResponse]:
        async with self.uow:
            loaded = await self._load_for_transition(user_id, session_id)
            if loaded.is_err():
                return loaded

            updated = await self._apply(
                session_id,
                SessionChanges(completed_at=utcnow()),
            )
            if updated is None:
                return self._lost_race()

            await self.uow.commit()

            return Return.ok(SessionResponse.from_entity(updated))
