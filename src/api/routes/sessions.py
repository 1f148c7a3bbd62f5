"""
Session Scheduling API Routes

Proposal, lifecycle transitions, read views and reminders for mentorship
sessions. The caller's identity always comes from the bearer token.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, raise_for_error
from src.app.repositories.mentorship_session_repository import SessionFilters
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.reminders import (
    GetSessionRemindersUseCase,
    ReminderResponse,
    ScheduleSessionRemindersUseCase,
)
from src.app.use_cases.sessions import (
    CancelSessionCommand,
    CancelSessionUseCase,
    CompleteSessionCommand,
    CompleteSessionUseCase,
    ConfirmSessionCommand,
    ConfirmSessionUseCase,
    CreateSessionCommand,
    CreateSessionUseCase,
    DeleteSessionResponse,
    DeleteSessionUseCase,
    GetSessionStatsUseCase,
    GetSessionUseCase,
    ListSessionsUseCase,
    MarkNoShowUseCase,
    SessionResponse,
    SessionStatsResponse,
    TimeWindow,
    UpdateSessionNotesUseCase,
)
from src.depends import (
    get_confirm_policy,
    get_current_user,
    get_reminder_offsets,
    get_unit_of_work,
)
from src.domain.entities import (
    MeetingProvider,
    RecurrenceRule,
    ReminderType,
    SessionOutcome,
    SessionStatus,
    SessionType,
)
from src.domain.session_lifecycle import ConfirmPolicy

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def parse_session_id(session_id: str) -> UUID:
    try:
        return UUID(session_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_SESSION_ID", "Invalid session ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class CreateSessionRequest(BaseModel):
    """
    Create session HTTP request payload

    Host proposes one or more candidate windows to an attendee.
    """

    attendee_id: UUID = Field(..., description="User invited to the session")
    plan_id: Optional[UUID] = Field(None, description="Shared plan the session belongs to")
    title: str = Field(..., description="Session title")
    description: Optional[str] = None
    session_type: SessionType = SessionType.one_time
    proposed_times: List[TimeWindow] = Field(..., description="Candidate windows, in order")
    duration_minutes: int = Field(..., description="Planned length in minutes")
    timezone: str = Field(..., description="Proposer's IANA timezone")
    recurrence_rule: Optional[RecurrenceRule] = None
    recurrence_end_date: Optional[datetime] = None
    parent_session_id: Optional[UUID] = None
    meeting_provider: Optional[MeetingProvider] = None
    meeting_link: Optional[str] = None
    meeting_id: Optional[str] = None


class ConfirmSessionRequest(BaseModel):
    selected_time: TimeWindow = Field(..., description="One of the proposed windows")


class CancelSessionRequest(BaseModel):
    reason: Optional[str] = Field(None, description="Why the session was cancelled")


class CompleteSessionRequest(BaseModel):
    session_notes: Optional[str] = None
    outcomes: Optional[List[SessionOutcome]] = None
    actual_duration_minutes: Optional[int] = None


class UpdateNotesRequest(BaseModel):
    notes: str


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SessionResponse)
async def create_session(
    request: CreateSessionRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Propose Session

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_COLLABORATORS
        - 503 Service Unavailable: store failure
    """
    host_id = UUID(current_user["user_id"])

    use_case = CreateSessionUseCase(uow)
    result = await use_case.execute(host_id, CreateSessionCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionResponse])
async def list_sessions(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    as_host: bool = Query(False, description="Only sessions the caller hosts"),
    as_attendee: bool = Query(False, description="Only sessions the caller attends"),
    session_status: Optional[List[SessionStatus]] = Query(None, alias="status"),
    from_date: Optional[datetime] = Query(None, description="scheduled_start lower bound"),
    to_date: Optional[datetime] = Query(None, description="scheduled_start upper bound"),
    plan_id: Optional[UUID] = Query(None),
):
    """
    List Sessions

    Sessions with a scheduled start come first in chronological order;
    unscheduled proposals follow, newest first.
    """
    user_id = UUID(current_user["user_id"])

    filters = SessionFilters(
        as_host=as_host,
        as_attendee=as_attendee,
        status=session_status,
        from_date=from_date,
        to_date=to_date,
        plan_id=plan_id,
    )

    use_case = ListSessionsUseCase(uow)
    result = await use_case.execute(user_id, filters)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/upcoming", status_code=status.HTTP_200_OK, response_model=List[SessionResponse]
)
async def list_upcoming_sessions(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(ApplicationConfig.UPCOMING_SESSIONS_LIMIT, ge=1, le=100),
):
    """Proposed or confirmed sessions that have not started yet"""
    user_id = UUID(current_user["user_id"])

    result = await ListSessionsUseCase(uow).upcoming(user_id, limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/past", status_code=status.HTTP_200_OK, response_model=List[SessionResponse])
async def list_past_sessions(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(ApplicationConfig.PAST_SESSIONS_LIMIT, ge=1, le=100),
):
    """Completed, no-show and cancelled sessions, most recent first"""
    user_id = UUID(current_user["user_id"])

    result = await ListSessionsUseCase(uow).past(user_id, limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=SessionStatsResponse)
async def get_session_stats(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    user_id = UUID(current_user["user_id"])

    result = await GetSessionStatsUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{session_id}", status_code=status.HTTP_200_OK, response_model=SessionResponse)
async def get_session(
    session_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Session

    Raises:
        - 400 Bad Request: Invalid session_id format
        - 404 Not Found: SESSION_NOT_FOUND (also for non-participants)
    """
    user_id = UUID(current_user["user_id"])

    result = await GetSessionUseCase(uow).execute(user_id, parse_session_id(session_id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{session_id}/confirm", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def confirm_session(
    session_id: str,
    request: ConfirmSessionRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: ConfirmPolicy = Depends(get_confirm_policy),
    offsets: Dict[ReminderType, int] = Depends(get_reminder_offsets),
):
    """
    Confirm Session

    Fixes the session to the selected proposed window, then records
    reminders for host and attendee. Reminder failures do not fail the
    confirmation.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (window not proposed, end <= start)
        - 403 Forbidden: NOT_A_PARTICIPANT, CONFIRM_NOT_ALLOWED
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: INVALID_STATE_TRANSITION
    """
    user_id = UUID(current_user["user_id"])

    command = ConfirmSessionCommand(
        session_id=parse_session_id(session_id),
        selected_time=request.selected_time,
    )
    result = await ConfirmSessionUseCase(uow, policy).execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    session = result.value
    reminders = await ScheduleSessionRemindersUseCase(uow, offsets).execute(UUID(session.id))
    logger.info(f"Session {session.id} confirmed with {len(reminders)} reminder(s)")

    return session


@router.post(
    "/{session_id}/cancel", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def cancel_session(
    session_id: str,
    request: CancelSessionRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Session

    Raises:
        - 403 Forbidden: NOT_A_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: INVALID_STATE_TRANSITION (already terminal)
    """
    user_id = UUID(current_user["user_id"])

    command = CancelSessionCommand(
        session_id=parse_session_id(session_id), reason=request.reason
    )
    result = await CancelSessionUseCase(uow).execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{session_id}/complete", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def complete_session(
    session_id: str,
    request: CompleteSessionRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Session

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: NOT_A_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: INVALID_STATE_TRANSITION (not confirmed)
    """
    user_id = UUID(current_user["user_id"])

    command = CompleteSessionCommand(
        session_id=parse_session_id(session_id), **request.model_dump()
    )
    result = await CompleteSessionUseCase(uow).execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{session_id}/no-show", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def mark_no_show(
    session_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    user_id = UUID(current_user["user_id"])

    result = await MarkNoShowUseCase(uow).execute(user_id, parse_session_id(session_id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{session_id}/notes", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def update_session_notes(
    session_id: str,
    request: UpdateNotesRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    user_id = UUID(current_user["user_id"])

    result = await UpdateSessionNotesUseCase(uow).execute(
        user_id, parse_session_id(session_id), request.notes
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{session_id}", status_code=status.HTTP_200_OK, response_model=DeleteSessionResponse
)
async def delete_session(
    session_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Session

    Only proposed or cancelled sessions can be deleted.

    Raises:
        - 403 Forbidden: NOT_A_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: INVALID_STATE_TRANSITION
    """
    user_id = UUID(current_user["user_id"])

    result = await DeleteSessionUseCase(uow).execute(user_id, parse_session_id(session_id))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{session_id}/reminders",
    status_code=status.HTTP_200_OK,
    response_model=List[ReminderResponse],
)
async def get_session_reminders(
    session_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    user_id = UUID(current_user["user_id"])

    result = await GetSessionRemindersUseCase(uow).execute(
        user_id, parse_session_id(session_id)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
