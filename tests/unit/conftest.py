import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from src.domain.entities import MentorshipSession, ProposedTime, SessionStatus


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock()
    uow.sessions.create = AsyncMock(side_effect=lambda s: s)
    uow.sessions.apply_transition = AsyncMock()
    uow.sessions.delete_in_statuses = AsyncMock()
    uow.sessions.list_for_user = AsyncMock(return_value=[])
    uow.sessions.list_upcoming = AsyncMock(return_value=[])
    uow.sessions.list_past = AsyncMock(return_value=[])
    uow.sessions.count_by_status = AsyncMock(return_value={})

    uow.reminders = MagicMock()
    uow.reminders.get_by_session_id = AsyncMock(return_value=[])
    uow.reminders.get_by_session_and_user = AsyncMock(return_value=[])
    uow.reminders.create_many = AsyncMock(side_effect=lambda reminders: reminders)

    uow.collaborators = MagicMock()
    uow.collaborators.has_accepted_grant = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def make_session():
    """Build an in-memory MentorshipSession with two proposed windows"""

    def _make(status: SessionStatus = SessionStatus.proposed, **overrides):
        fields = dict(
            id=uuid4(),
            host_id=uuid4(),
            attendee_id=uuid4(),
            plan_id=uuid4(),
            title="Resume review",
            status=status,
            proposed_times=[
                ProposedTime(start="2025-03-01T10:00:00Z", end="2025-03-01T10:30:00Z").model_dump(),
                ProposedTime(start="2025-03-02T10:00:00Z", end="2025-03-02T10:30:00Z").model_dump(),
            ],
            duration_minutes=30,
            timezone="Europe/Berlin",
        )
        if status != SessionStatus.proposed:
            fields.update(
                scheduled_start=datetime(2025, 3, 1, 10, 0),
                scheduled_end=datetime(2025, 3, 1, 10, 30),
                confirmed_at=datetime(2025, 2, 20, 9, 0),
            )
        fields.update(overrides)
        return MentorshipSession(**fields)

    return _make


@pytest.fixture
def install_session(mock_uow):
    """
    Make mock_uow.sessions behave like a one-row store holding `session`:
    get_by_id returns it and status-guarded updates/deletes honour from_statuses.
    """

    def _install(session: MentorshipSession):
        async def get_by_id(session_id):
            return session if session_id == session.id else None

        async def apply_transition(session_id, from_statuses, changes):
            if session_id != session.id or session.status not in from_statuses:
                return None
            for field, value in changes.model_dump(exclude_unset=True).items():
                setattr(session, field, value)
            return session

        async def delete_in_statuses(session_id, statuses):
            return session_id == session.id and session.status in statuses

        mock_uow.sessions.get_by_id = AsyncMock(side_effect=get_by_id)
        mock_uow.sessions.apply_transition = AsyncMock(side_effect=apply_transition)
        mock_uow.sessions.delete_in_statuses = AsyncMock(side_effect=delete_in_statuses)
        return session

    return _install
