from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import SessionReminder


class ISessionReminderRepository(ABC):
    """Session reminder repository interface - application layer"""

    @abstractmethod
    async def get_by_session_id(self, session_id: UUID) -> List[SessionReminder]:
        """Get all reminders for a session, earliest reminder_time first"""
        pass

    @abstractmethod
    async def get_by_session_and_user(
        self, session_id: UUID, user_id: UUID
    ) -> List[SessionReminder]:
        """Get a participant's reminders for a session"""
        pass

    @abstractmethod
    async def create_many(self, reminders: List[SessionReminder]) -> List[SessionReminder]:
        """Create reminders"""
        pass
