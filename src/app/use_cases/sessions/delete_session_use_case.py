"""
Delete Session Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.domain.session_lifecycle import SessionTransition, allowed_sources

from .dtos import DeleteSessionResponse
from .lifecycle_use_case import SessionLifecycleUseCase


class DeleteSessionUseCase(SessionLifecycleUseCase):
    """
    Use case for deleting a session.

    Business Rules:
    - Only proposed or cancelled sessions can be deleted
    - Confirmed, completed and no-show sessions are kept
    - Reminder cleanup belongs to the delivery subsystem
    """

    transition = SessionTransition.delete

    async def execute(
        self, user_id: UUID, session_id: UUID
    ) -> Result[DeleteSessionResponse]:
        async with self.uow:
            loaded = await self._load_for_transition(user_id, session_id)
            if loaded.is_err():
                return loaded

            deleted = await self.uow.sessions.delete_in_statuses(
                session_id, allowed_sources(self.transition)
            )
            if not deleted:
                return self._lost_race()

            await self.uow.commit()

            return Return.ok(
                DeleteSessionResponse(session_id=str(session_id), status="deleted")
            )
