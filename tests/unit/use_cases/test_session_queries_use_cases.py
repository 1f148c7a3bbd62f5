"""
Unit tests for get / list / stats use cases
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from src.app.repositories.mentorship_session_repository import SessionFilters
from src.app.use_cases.sessions import (
    GetSessionStatsUseCase,
    GetSessionUseCase,
    ListSessionsUseCase,
)
from src.app.use_cases.sessions.errors import SESSION_NOT_FOUND, VALIDATION_ERROR
from src.domain.entities import SessionStatus


@pytest.mark.asyncio
async def test_get_session_as_participant(mock_uow, make_session, install_session):
    session = install_session(make_session())

    result = await GetSessionUseCase(mock_uow).execute(session.attendee_id, session.id)

    assert result.is_ok()
    assert result.value.id == str(session.id)
    assert result.value.proposed_times[0].start == "2025-03-01T10:00:00Z"


@pytest.mark.asyncio
async def test_get_session_hidden_from_outsider(mock_uow, make_session, install_session):
    session = install_session(make_session())

    result = await GetSessionUseCase(mock_uow).execute(uuid4(), session.id)

    assert result.is_err()
    assert result.error.code == SESSION_NOT_FOUND


@pytest.mark.asyncio
async def test_list_passes_filters_and_keeps_store_order(mock_uow, make_session):
    user_id = uuid4()
    first = make_session(SessionStatus.confirmed, host_id=user_id)
    second = make_session(SessionStatus.proposed, host_id=user_id)
    mock_uow.sessions.list_for_user.return_value = [first, second]
    filters = SessionFilters(as_host=True, status=[SessionStatus.confirmed, SessionStatus.proposed])

    result = await ListSessionsUseCase(mock_uow).execute(user_id, filters)

    assert result.is_ok()
    assert [s.id for s in result.value] == [str(first.id), str(second.id)]
    mock_uow.sessions.list_for_user.assert_called_once_with(user_id, filters)


@pytest.mark.asyncio
async def test_list_without_filters(mock_uow):
    user_id = uuid4()

    result = await ListSessionsUseCase(mock_uow).execute(user_id)

    assert result.is_ok()
    assert result.value == []
    _, filters = mock_uow.sessions.list_for_user.call_args.args
    assert filters == SessionFilters()


@pytest.mark.asyncio
async def test_list_rejects_inverted_date_range(mock_uow):
    filters = SessionFilters(
        from_date=datetime(2025, 4, 1, tzinfo=timezone.utc),
        to_date=datetime(2025, 3, 1, tzinfo=timezone.utc),
    )

    result = await ListSessionsUseCase(mock_uow).execute(uuid4(), filters)

    assert result.is_err()
    assert result.error.code == VALIDATION_ERROR
    mock_uow.sessions.list_for_user.assert_not_called()


@pytest.mark.asyncio
async def test_upcoming_uses_given_clock_and_limit(mock_uow):
    user_id = uuid4()
    now = datetime(2025, 3, 1, 8, 0)

    result = await ListSessionsUseCase(mock_uow).upcoming(user_id, limit=3, now=now)

    assert result.is_ok()
    mock_uow.sessions.list_upcoming.assert_called_once_with(user_id, now, 3)


@pytest.mark.asyncio
async def test_past_default_limit(mock_uow):
    user_id = uuid4()

    result = await ListSessionsUseCase(mock_uow).past(user_id)

    assert result.is_ok()
    mock_uow.sessions.list_past.assert_called_once_with(user_id, 20)


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, -1])
async def test_views_reject_non_positive_limit(mock_uow, limit):
    use_case = ListSessionsUseCase(mock_uow)

    upcoming = await use_case.upcoming(uuid4(), limit=limit)
    past = await use_case.past(uuid4(), limit=limit)

    assert upcoming.error.code == VALIDATION_ERROR
    assert past.error.code == VALIDATION_ERROR


@pytest.mark.asyncio
async def test_stats_rollup(mock_uow):
    mock_uow.sessions.count_by_status.return_value = {
        SessionStatus.proposed: 2,
        SessionStatus.confirmed: 1,
        SessionStatus.completed: 4,
        SessionStatus.cancelled: 3,
        SessionStatus.no_show: 1,
    }

    result = await GetSessionStatsUseCase(mock_uow).execute(uuid4())

    assert result.is_ok()
    stats = result.value
    assert stats.total == 11
    assert stats.upcoming == 3
    assert stats.completed == 4
    assert stats.cancelled == 3
