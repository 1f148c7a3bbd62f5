"""
Update Session Notes Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.mentorship_session_repository import SessionChanges
from src.domain.session_lifecycle import SessionTransition

from .dtos import SessionResponse
from .lifecycle_use_case import SessionLifecycleUseCase


class UpdateSessionNotesUseCase(SessionLifecycleUseCase):
    """
    Use case for rewriting session notes.

    Business Rules:
    - Allowed while confirmed or completed
    - Status is left unchanged
    """

    transition = SessionTransition.update_notes

    async def execute(
        self, user_id: UUID, session_id: UUID, notes: str
    ) -> Result[SessionResponse]:
        async with self.uow:
            loaded = await self._load_for_transition(user_id, session_id)
            if loaded.is_err():
                return loaded

            updated = await self._apply(session_id, SessionChanges(session_notes=notes))
            if updated is None:
                return self._lost_race()

            await self.uow.commit()

            return Return.ok(SessionResponse.from_entity(updated))
