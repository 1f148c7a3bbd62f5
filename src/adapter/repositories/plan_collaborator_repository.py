from typing import Optional
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.plan_collaborator_repository import IPlanCollaboratorRepository
from src.domain.entities import CollaboratorStatus, PlanCollaborator


class PlanCollaboratorRepository(IPlanCollaboratorRepository):
    """Plan collaborator repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def has_accepted_grant(
        self, user_a: UUID, user_b: UUID, plan_id: Optional[UUID] = None
    ) -> bool:
        """Look for an accepted grant linking the two users in either direction"""
        stmt = select(PlanCollaborator.id).where(
            PlanCollaborator.status == CollaboratorStatus.accepted,
            or_(
                and_(
                    PlanCollaborator.owner_id == user_a,
                    PlanCollaborator.collaborator_id == user_b,
                ),
                and_(
                    PlanCollaborator.owner_id == user_b,
                    PlanCollaborator.collaborator_id == user_a,
                ),
            ),
        )
        if plan_id is not None:
            stmt = stmt.where(PlanCollaborator.plan_id == plan_id)

        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None
