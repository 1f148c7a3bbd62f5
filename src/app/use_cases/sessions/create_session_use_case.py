"""
Create Session Use Case

Handles a host proposing a session with candidate time windows.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.collaboration_authorizer import CollaborationAuthorizer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc
from src.domain.entities import (
    MentorshipSession,
    ProposedTime,
    SessionStatus,
)

from .dtos import CreateSessionCommand, SessionResponse
from .errors import NOT_COLLABORATORS, VALIDATION_ERROR


class CreateSessionUseCase:
    """
    Use case for proposing a session.

    Business Rules:
    - Title must be non-empty, duration positive
    - At least one proposed window, each ending after it starts
    - Host and attendee must be different users
    - Host and attendee must share an accepted collaboration (on plan_id when given)
    - Session starts as proposed with no scheduled window
    - Proposed windows are kept in the order the host supplied them
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _validate(self, host_id: UUID, command: CreateSessionCommand) -> Optional[Error]:
        if host_id == command.attendee_id:
            return Error(VALIDATION_ERROR, "Host and attendee must be different users")

        if not command.title or not command.title.strip():
            return Error(VALIDATION_ERROR, "Title is required")

        if command.duration_minutes <= 0:
            return Error(VALIDATION_ERROR, "Duration must be a positive number of minutes")

        if not command.proposed_times:
            return Error(VALIDATION_ERROR, "At least one proposed time is required")

        for index, window in enumerate(command.proposed_times):
            if to_naive_utc(window.end) <= to_naive_utc(window.start):
                return Error(
                    VALIDATION_ERROR,
                    f"Proposed time #{index + 1} must end after it starts",
                )

        if not command.timezone or not command.timezone.strip():
            return Error(VALIDATION_ERROR, "Timezone is required")

        return None

    async def execute(
        self, host_id: UUID, command: CreateSessionCommand
    ) -> Result[SessionResponse]:
        """
        Execute create session use case.

        Args:
            host_id: Authenticated caller proposing the session
            command: Proposal details

        Returns:
            Result with SessionResponse DTO, or Error
        """
        validation_error = self._validate(host_id, command)
        if validation_error is not None:
            return Return.err(validation_error)

        async with self.uow:
            authorizer = CollaborationAuthorizer(self.uow.collaborators)
            allowed = await authorizer.can_schedule_with(
                host_id, command.attendee_id, command.plan_id
            )
            if not allowed:
                return Return.err(
                    Error(
                        NOT_COLLABORATORS,
                        "Cannot schedule session: you must be a collaborator "
                        "on a plan with this user",
                    )
                )

            session = MentorshipSession(
                host_id=host_id,
                attendee_id=command.attendee_id,
                plan_id=command.plan_id,
                title=command.title.strip(),
                description=command.description or None,
                session_type=command.session_type,
                status=SessionStatus.proposed,
                proposed_times=[
                    ProposedTime.from_datetimes(window.start, window.end).model_dump()
                    for window in command.proposed_times
                ],
                duration_minutes=command.duration_minutes,
                timezone=command.timezone,
                recurrence_rule=command.recurrence_rule,
                recurrence_end_date=(
                    to_naive_utc(command.recurrence_end_date)
                    if command.recurrence_end_date
                    else None
                ),
                parent_session_id=command.parent_session_id,
                meeting_provider=command.meeting_provider,
                meeting_link=command.meeting_link or None,
                meeting_id=command.meeting_id or None,
            )
            session = await self.uow.sessions.create(session)

            await self.uow.commit()

            return Return.ok(SessionResponse.from_entity(session))
