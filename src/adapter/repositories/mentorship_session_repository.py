from datetime import datetime
from typing import Dict, FrozenSet, List, Optional
from uuid import UUID

from sqlalchemy import delete, func, or_
from sqlmodel import col, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.mentorship_session_repository import (
    IMentorshipSessionRepository,
    SessionChanges,
    SessionFilters,
)
from src.domain.base import to_naive_utc, utcnow
from src.domain.entities import MentorshipSession, SessionStatus
from src.domain.session_lifecycle import ACTIVE_STATUSES, TERMINAL_STATUSES


class MentorshipSessionRepository(IMentorshipSessionRepository):
    """Mentorship session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _participant_clause(self, user_id: UUID):
        return or_(
            MentorshipSession.host_id == user_id,
            MentorshipSession.attendee_id == user_id,
        )

    def _chronological_order(self):
        # Unscheduled sessions sort after scheduled ones, newest proposal first
        return (
            col(MentorshipSession.scheduled_start).is_(None),
            col(MentorshipSession.scheduled_start).asc(),
            col(MentorshipSession.created_at).desc(),
        )

    async def get_by_id(self, session_id: UUID) -> Optional[MentorshipSession]:
        """Get session by ID"""
        stmt = (
            select(MentorshipSession)
            .where(MentorshipSession.id == session_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: MentorshipSession) -> MentorshipSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def list_for_user(
        self, user_id: UUID, filters: SessionFilters
    ) -> List[MentorshipSession]:
        """List a user's sessions with role, status, date and plan filters"""
        stmt = select(MentorshipSession)

        if filters.as_host and not filters.as_attendee:
            stmt = stmt.where(MentorshipSession.host_id == user_id)
        elif filters.as_attendee and not filters.as_host:
            stmt = stmt.where(MentorshipSession.attendee_id == user_id)
        else:
            stmt = stmt.where(self._participant_clause(user_id))

        if filters.status:
            stmt = stmt.where(col(MentorshipSession.status).in_(filters.status))

        if filters.from_date is not None:
            stmt = stmt.where(
                col(MentorshipSession.scheduled_start) >= to_naive_utc(filters.from_date)
            )
        if filters.to_date is not None:
            stmt = stmt.where(
                col(MentorshipSession.scheduled_start) <= to_naive_utc(filters.to_date)
            )

        if filters.plan_id is not None:
            stmt = stmt.where(MentorshipSession.plan_id == filters.plan_id)

        stmt = stmt.order_by(*self._chronological_order())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_upcoming(
        self, user_id: UUID, now: datetime, limit: int
    ) -> List[MentorshipSession]:
        """List proposed/confirmed sessions that have not started yet"""
        stmt = (
            select(MentorshipSession)
            .where(
                self._participant_clause(user_id),
                col(MentorshipSession.status).in_(list(ACTIVE_STATUSES)),
                or_(
                    col(MentorshipSession.scheduled_start) >= to_naive_utc(now),
                    col(MentorshipSession.scheduled_start).is_(None),
                ),
            )
            .order_by(*self._chronological_order())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_past(self, user_id: UUID, limit: int) -> List[MentorshipSession]:
        """List finished sessions, most recent first"""
        stmt = (
            select(MentorshipSession)
            .where(
                self._participant_clause(user_id),
                col(MentorshipSession.status).in_(list(TERMINAL_STATUSES)),
            )
            .order_by(
                col(MentorshipSession.scheduled_start).desc().nulls_first(),
                col(MentorshipSession.created_at).desc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def apply_transition(
        self,
        session_id: UUID,
        from_statuses: FrozenSet[SessionStatus],
        changes: SessionChanges,
    ) -> Optional[MentorshipSession]:
        """Conditional single-statement update guarded on current status"""
        values = changes.model_dump(exclude_unset=True)
        values["updated_at"] = utcnow()

        stmt = (
            update(MentorshipSession)
            .where(
                MentorshipSession.id == session_id,
                col(MentorshipSession.status).in_(list(from_statuses)),
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount == 0:
            return None

        return await self.get_by_id(session_id)

    async def delete_in_statuses(
        self, session_id: UUID, statuses: FrozenSet[SessionStatus]
    ) -> bool:
        """Delete a session guarded on current status"""
        stmt = (
            delete(MentorshipSession)
            .where(
                MentorshipSession.id == session_id,
                col(MentorshipSession.status).in_(list(statuses)),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_status(self, user_id: UUID) -> Dict[SessionStatus, int]:
        """Count a user's sessions grouped by status"""
        stmt = (
            select(MentorshipSession.status, func.count())
            .where(self._participant_clause(user_id))
            .group_by(MentorshipSession.status)
        )
        result = await self.session.execute(stmt)
        return {SessionStatus(status): count for status, count in result.all()}
