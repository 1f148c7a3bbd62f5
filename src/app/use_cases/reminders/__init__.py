"""
Session Reminder Use Cases
"""

from .create_reminders_use_case import CreateRemindersUseCase
from .dtos import ReminderResponse
from .get_session_reminders_use_case import GetSessionRemindersUseCase
from .schedule_session_reminders_use_case import ScheduleSessionRemindersUseCase

__all__ = [
    "CreateRemindersUseCase",
    "GetSessionRemindersUseCase",
    "ScheduleSessionRemindersUseCase",
    "ReminderResponse",
]
