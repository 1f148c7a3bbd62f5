from typing import List
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_reminder_repository import ISessionReminderRepository
from src.domain.entities import SessionReminder


class SessionReminderRepository(ISessionReminderRepository):
    """Session reminder repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_session_id(self, session_id: UUID) -> List[SessionReminder]:
        """Get all reminders for a session"""
        stmt = (
            select(SessionReminder)
            .where(SessionReminder.session_id == session_id)
            .order_by(col(SessionReminder.reminder_time).asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_session_and_user(
        self, session_id: UUID, user_id: UUID
    ) -> List[SessionReminder]:
        """Get a participant's reminders for a session"""
        stmt = select(SessionReminder).where(
            SessionReminder.session_id == session_id,
            SessionReminder.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_many(self, reminders: List[SessionReminder]) -> List[SessionReminder]:
        """Create reminders"""
        self.session.add_all(reminders)
        await self.session.flush()
        for reminder in reminders:
            await self.session.refresh(reminder)
        return reminders
