"""
SessionReminder Entity

Intended fire times for reminders about a confirmed session.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ReminderType


class SessionReminder(SQLModel, table=True):
    """
    SessionReminder entity - one row per (session, participant, reminder type).

    Business Rules:
    - Created only after a session is confirmed with a scheduled start
    - reminder_time may already be in the past; delivery decides whether to send
    - email/in-app flags belong to the delivery subsystem
    """

    __tablename__ = "session_reminders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    session_id: UUID = Field(nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    reminder_type: ReminderType = Field(nullable=False)
    reminder_time: datetime = Field(sa_column=Column(DateTime, nullable=False))

    email_sent: bool = Field(default=False)
    email_sent_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    in_app_sent: bool = Field(default=False)
    in_app_sent_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_reminder_session_user_type",
            "session_id",
            "user_id",
            "reminder_type",
            unique=True,
        ),
        Index("idx_reminder_time", "reminder_time"),
    )
