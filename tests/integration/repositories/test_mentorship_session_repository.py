"""
Integration tests for the SQLModel session repositories
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.adapter.repositories.mentorship_session_repository import MentorshipSessionRepository
from src.adapter.repositories.plan_collaborator_repository import PlanCollaboratorRepository
from src.adapter.repositories.session_reminder_repository import SessionReminderRepository
from src.app.repositories.mentorship_session_repository import SessionChanges, SessionFilters
from src.domain.entities import (
    CollaboratorStatus,
    MentorshipSession,
    PlanCollaborator,
    ProposedTime,
    ReminderType,
    SessionReminder,
    SessionStatus,
)
from src.domain.session_lifecycle import SessionTransition, allowed_sources


def build_session(host_id, attendee_id, status=SessionStatus.proposed, start=None, **fields):
    window_start = start or datetime(2030, 1, 1, 9, 0)
    return MentorshipSession(
        host_id=host_id,
        attendee_id=attendee_id,
        title="Weekly check-in",
        status=status,
        proposed_times=[
            ProposedTime.from_datetimes(window_start, window_start + timedelta(minutes=30)).model_dump()
        ],
        duration_minutes=30,
        timezone="UTC",
        scheduled_start=start,
        scheduled_end=start + timedelta(minutes=30) if start else None,
        **fields,
    )


@pytest.mark.asyncio
async def test_list_for_user_ordering_and_filters(db_session):
    host_id, attendee_id, plan_id = uuid4(), uuid4(), uuid4()
    repo = MentorshipSessionRepository(db_session)

    march = await repo.create(
        build_session(host_id, attendee_id, SessionStatus.confirmed, datetime(2030, 3, 1, 9, 0))
    )
    unscheduled_old = await repo.create(
        build_session(host_id, attendee_id, created_at=datetime(2029, 1, 1))
    )
    january = await repo.create(
        build_session(
            attendee_id, host_id, SessionStatus.confirmed, datetime(2030, 1, 1, 9, 0), plan_id=plan_id
        )
    )
    unscheduled_new = await repo.create(
        build_session(host_id, attendee_id, created_at=datetime(2029, 6, 1))
    )
    await repo.create(build_session(uuid4(), uuid4()))
    await db_session.commit()

    everything = await repo.list_for_user(host_id, SessionFilters())
    assert [s.id for s in everything] == [
        january.id,
        march.id,
        unscheduled_new.id,
        unscheduled_old.id,
    ]

    hosted = await repo.list_for_user(host_id, SessionFilters(as_host=True))
    assert january.id not in {s.id for s in hosted}
    assert len(hosted) == 3

    attending = await repo.list_for_user(host_id, SessionFilters(as_attendee=True))
    assert [s.id for s in attending] == [january.id]

    in_february_onwards = await repo.list_for_user(
        host_id, SessionFilters(from_date=datetime(2030, 2, 1))
    )
    assert [s.id for s in in_february_onwards] == [march.id]

    on_plan = await repo.list_for_user(host_id, SessionFilters(plan_id=plan_id))
    assert [s.id for s in on_plan] == [january.id]

    proposed = await repo.list_for_user(
        host_id, SessionFilters(status=[SessionStatus.proposed])
    )
    assert {s.id for s in proposed} == {unscheduled_new.id, unscheduled_old.id}


@pytest.mark.asyncio
async def test_upcoming_and_past_views(db_session):
    host_id, attendee_id = uuid4(), uuid4()
    repo = MentorshipSessionRepository(db_session)
    now = datetime(2030, 2, 1, 12, 0)

    started = await repo.create(
        build_session(host_id, attendee_id, SessionStatus.confirmed, datetime(2030, 1, 31, 9, 0))
    )
    soon = await repo.create(
        build_session(host_id, attendee_id, SessionStatus.confirmed, datetime(2030, 2, 2, 9, 0))
    )
    pending = await repo.create(build_session(host_id, attendee_id))
    done_early = await repo.create(
        build_session(host_id, attendee_id, SessionStatus.completed, datetime(2030, 1, 10, 9, 0))
    )
    done_late = await repo.create(
        build_session(host_id, attendee_id, SessionStatus.no_show, datetime(2030, 1, 20, 9, 0))
    )
    dropped = await repo.create(build_session(host_id, attendee_id, SessionStatus.cancelled))
    await db_session.commit()

    upcoming = await repo.list_upcoming(host_id, now, limit=5)
    assert [s.id for s in upcoming] == [soon.id, pending.id]
    assert started.id not in {s.id for s in upcoming}

    past = await repo.list_past(host_id, limit=20)
    assert [s.id for s in past] == [dropped.id, done_late.id, done_early.id]

    assert len(await repo.list_past(host_id, limit=1)) == 1


@pytest.mark.asyncio
async def test_guarded_transition(db_session):
    repo = MentorshipSessionRepository(db_session)
    session = await repo.create(build_session(uuid4(), uuid4(), SessionStatus.cancelled))
    await db_session.commit()

    refused = await repo.apply_transition(
        session.id,
        allowed_sources(SessionTransition.complete),
        SessionChanges(status=SessionStatus.completed, completed_at=datetime(2030, 1, 1)),
    )
    assert refused is None

    reloaded = await repo.get_by_id(session.id)
    assert reloaded.status == SessionStatus.cancelled
    assert reloaded.completed_at is None


@pytest.mark.asyncio
async def test_transition_applies_only_set_fields(db_session):
    repo = MentorshipSessionRepository(db_session)
    session = await repo.create(
        build_session(
            uuid4(), uuid4(), SessionStatus.confirmed, datetime(2030, 1, 1, 9, 0),
            session_notes="first draft",
        )
    )
    await db_session.commit()

    updated = await repo.apply_transition(
        session.id,
        allowed_sources(SessionTransition.cancel),
        SessionChanges(status=SessionStatus.cancelled, cancelled_at=datetime(2029, 12, 30)),
    )

    assert updated.status == SessionStatus.cancelled
    assert updated.cancelled_at == datetime(2029, 12, 30)
    assert updated.session_notes == "first draft"
    assert updated.scheduled_start == datetime(2030, 1, 1, 9, 0)


@pytest.mark.asyncio
async def test_guarded_delete(db_session):
    repo = MentorshipSessionRepository(db_session)
    confirmed = await repo.create(
        build_session(uuid4(), uuid4(), SessionStatus.confirmed, datetime(2030, 1, 1, 9, 0))
    )
    proposed = await repo.create(build_session(uuid4(), uuid4()))
    await db_session.commit()

    deletable = allowed_sources(SessionTransition.delete)
    assert await repo.delete_in_statuses(confirmed.id, deletable) is False
    assert await repo.delete_in_statuses(proposed.id, deletable) is True
    await db_session.commit()

    assert await repo.get_by_id(confirmed.id) is not None
    assert await repo.get_by_id(proposed.id) is None


@pytest.mark.asyncio
async def test_count_by_status(db_session):
    user_id = uuid4()
    repo = MentorshipSessionRepository(db_session)
    await repo.create(build_session(user_id, uuid4()))
    await repo.create(build_session(uuid4(), user_id))
    await repo.create(build_session(user_id, uuid4(), SessionStatus.cancelled))
    await repo.create(build_session(uuid4(), uuid4(), SessionStatus.cancelled))
    await db_session.commit()

    counts = await repo.count_by_status(user_id)

    assert counts == {SessionStatus.proposed: 2, SessionStatus.cancelled: 1}


@pytest.mark.asyncio
async def test_collaboration_grant_is_symmetric(db_session):
    owner_id, mentor_id, plan_id = uuid4(), uuid4(), uuid4()
    db_session.add(
        PlanCollaborator(
            plan_id=plan_id,
            owner_id=owner_id,
            collaborator_id=mentor_id,
            status=CollaboratorStatus.accepted,
        )
    )
    db_session.add(
        PlanCollaborator(
            plan_id=uuid4(),
            owner_id=owner_id,
            collaborator_id=uuid4(),
            status=CollaboratorStatus.revoked,
        )
    )
    await db_session.commit()
    repo = PlanCollaboratorRepository(db_session)

    assert await repo.has_accepted_grant(owner_id, mentor_id) is True
    assert await repo.has_accepted_grant(mentor_id, owner_id) is True
    assert await repo.has_accepted_grant(mentor_id, owner_id, plan_id) is True
    assert await repo.has_accepted_grant(owner_id, mentor_id, uuid4()) is False
    assert await repo.has_accepted_grant(owner_id, uuid4()) is False


@pytest.mark.asyncio
async def test_reminders_ordered_by_fire_time(db_session):
    session_id, user_id = uuid4(), uuid4()
    repo = SessionReminderRepository(db_session)

    await repo.create_many(
        [
            SessionReminder(
                session_id=session_id,
                user_id=user_id,
                reminder_type=ReminderType.hour_1,
                reminder_time=datetime(2030, 1, 1, 8, 0),
            ),
            SessionReminder(
                session_id=session_id,
                user_id=user_id,
                reminder_type=ReminderType.hours_24,
                reminder_time=datetime(2029, 12, 31, 9, 0),
            ),
        ]
    )
    await db_session.commit()

    reminders = await repo.get_by_session_id(session_id)
    assert [ReminderType(r.reminder_type) for r in reminders] == [
        ReminderType.hours_24,
        ReminderType.hour_1,
    ]
    assert len(await repo.get_by_session_and_user(session_id, uuid4())) == 0
