from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class IPlanCollaboratorRepository(ABC):
    """Plan collaborator repository interface - application layer (read-only)"""

    @abstractmethod
    async def has_accepted_grant(
        self, user_a: UUID, user_b: UUID, plan_id: Optional[UUID] = None
    ) -> bool:
        """True if an accepted collaboration links the two users, optionally on a given plan"""
        pass
