"""
PlanCollaborator Entity

Grant linking a plan owner with a collaborator (mentor, partner, ...).
Owned by the collaboration subsystem; read-only for scheduling.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import CollaboratorRole, CollaboratorStatus


class PlanCollaborator(SQLModel, table=True):
    """
    PlanCollaborator entity - collaboration grant on a plan.

    Business Rules:
    - Only accepted grants allow scheduling
    - A grant links owner and collaborator in both directions
    """

    __tablename__ = "plan_collaborators"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    plan_id: UUID = Field(nullable=False, index=True)
    owner_id: UUID = Field(nullable=False, index=True)
    collaborator_id: UUID = Field(nullable=False, index=True)

    role: CollaboratorRole = Field(default=CollaboratorRole.mentor)
    status: CollaboratorStatus = Field(default=CollaboratorStatus.pending)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_plan_collaborator_pair", "owner_id", "collaborator_id"),
        Index("idx_plan_collaborator_status", "status"),
    )
