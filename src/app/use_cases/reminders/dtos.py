"""
Reminder Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.base import format_instant
from src.domain.entities import ReminderType, SessionReminder


class ReminderResponse(BaseModel):
    """Reminder as returned to callers"""

    id: str
    session_id: str
    user_id: str
    reminder_type: str
    reminder_time: str
    email_sent: bool
    email_sent_at: Optional[str]
    in_app_sent: bool
    in_app_sent_at: Optional[str]

    @classmethod
    def from_entity(cls, reminder: SessionReminder) -> "ReminderResponse":
        return cls(
            id=str(reminder.id),
            session_id=str(reminder.session_id),
            user_id=str(reminder.user_id),
            reminder_type=ReminderType(reminder.reminder_type).value,
            reminder_time=format_instant(reminder.reminder_time),
            email_sent=reminder.email_sent,
            email_sent_at=(
                format_instant(reminder.email_sent_at) if reminder.email_sent_at else None
            ),
            in_app_sent=reminder.in_app_sent,
            in_app_sent_at=(
                format_instant(reminder.in_app_sent_at) if reminder.in_app_sent_at else None
            ),
        )
