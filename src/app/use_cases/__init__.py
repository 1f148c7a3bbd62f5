"""
Use Cases

Organized by domain folder:
- sessions/: Session proposal, lifecycle transitions and read views
- reminders/: Reminder scheduling for confirmed sessions

Import from subdirectories for better organization.
"""

from .reminders import (
    CreateRemindersUseCase,
    GetSessionRemindersUseCase,
    ScheduleSessionRemindersUseCase,
)
from .sessions import (
    CancelSessionUseCase,
    CompleteSessionUseCase,
    ConfirmSessionUseCase,
    CreateSessionUseCase,
    DeleteSessionUseCase,
    GetSessionStatsUseCase,
    GetSessionUseCase,
    ListSessionsUseCase,
    MarkNoShowUseCase,
    UpdateSessionNotesUseCase,
)

__all__ = [
    # Sessions
    "CreateSessionUseCase",
    "ConfirmSessionUseCase",
    "CancelSessionUseCase",
    "CompleteSessionUseCase",
    "MarkNoShowUseCase",
    "UpdateSessionNotesUseCase",
    "DeleteSessionUseCase",
    "GetSessionUseCase",
    "ListSessionsUseCase",
    "GetSessionStatsUseCase",
    # Reminders
    "CreateRemindersUseCase",
    "GetSessionRemindersUseCase",
    "ScheduleSessionRemindersUseCase",
]
