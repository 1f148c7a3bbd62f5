"""
Session Scheduling Use Cases

Proposal, lifecycle transitions and read views for mentorship sessions.
"""

from .cancel_session_use_case import CancelSessionUseCase
from .complete_session_use_case import CompleteSessionUseCase
from .confirm_session_use_case import ConfirmSessionUseCase
from .create_session_use_case import CreateSessionUseCase
from .delete_session_use_case import DeleteSessionUseCase
from .dtos import (
    CancelSessionCommand,
    CompleteSessionCommand,
    ConfirmSessionCommand,
    CreateSessionCommand,
    DeleteSessionResponse,
    SessionResponse,
    SessionStatsResponse,
    TimeWindow,
)
from .get_session_stats_use_case import GetSessionStatsUseCase
from .get_session_use_case import GetSessionUseCase
from .list_sessions_use_case import ListSessionsUseCase
from .mark_no_show_use_case import MarkNoShowUseCase
from .update_session_notes_use_case import UpdateSessionNotesUseCase

__all__ = [
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
    "CreateSessionCommand",
    "ConfirmSessionCommand",
    "CancelSessionCommand",
    "CompleteSessionCommand",
    "TimeWindow",
    "SessionResponse",
    "DeleteSessionResponse",
    "SessionStatsResponse",
]
