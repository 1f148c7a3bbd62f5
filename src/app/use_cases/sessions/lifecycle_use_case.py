"""
Shared plumbing for session lifecycle use cases.

Every transition follows the same shape: load the session, check the caller
is a participant, check the transition is legal from the current status,
then apply the change with a status-guarded update so a concurrent
transition can never be overwritten.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.mentorship_session_repository import SessionChanges
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MentorshipSession, SessionStatus
from src.domain.session_lifecycle import (
    SessionTransition,
    allowed_sources,
    can_apply,
    describe_illegal,
    target_status,
)

from .errors import INVALID_STATE_TRANSITION, NOT_A_PARTICIPANT, SESSION_NOT_FOUND


class SessionLifecycleUseCase:
    transition: SessionTransition

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _load_for_transition(
        self, user_id: UUID, session_id: UUID
    ) -> Result[MentorshipSession]:
        """Fetch the session and run the participant and source-state checks"""
        session = await self.uow.sessions.get_by_id(session_id)
        if session is None:
            return Return.err(Error(SESSION_NOT_FOUND, "Session not found"))

        if not session.is_participant(user_id):
            return Return.err(
                Error(NOT_A_PARTICIPANT, "Only the host or attendee can change this session")
            )

        status = SessionStatus(session.status)
        if not can_apply(self.transition, status):
            return Return.err(
                Error(INVALID_STATE_TRANSITION, describe_illegal(self.transition, status))
            )

        return Return.ok(session)

    async def _apply(
        self, session_id: UUID, changes: SessionChanges
    ) -> Optional[MentorshipSession]:
        """Guarded update; status comes from the transition table"""
        target = target_status(self.transition)
        if target is not None:
            changes.status = target
        return await self.uow.sessions.apply_transition(
            session_id, allowed_sources(self.transition), changes
        )

    @staticmethod
    def _lost_race() -> Result:
        return Return.err(
            Error(
                INVALID_STATE_TRANSITION,
                "Session not found or no longer in the expected state",
            )
        )
