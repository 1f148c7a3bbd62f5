"""
Collaboration Authorizer

Single predicate deciding whether two users may schedule a session together.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.repositories.plan_collaborator_repository import IPlanCollaboratorRepository
from src.app.services.unit_of_work import STORE_ERRORS

logger = logging.getLogger(__name__)


class CollaborationAuthorizer:
    """
    Checks that host and attendee share an accepted collaboration grant.

    Business Rules:
    - Grants are symmetric (plan owner <-> collaborator)
    - When plan_id is supplied the grant must be on that plan
    - A user cannot schedule with themselves
    - Store failures fail closed (not authorized)
    """

    def __init__(self, collaborators: IPlanCollaboratorRepository):
        self.collaborators = collaborators

    async def can_schedule_with(
        self, host_id: UUID, attendee_id: UUID, plan_id: Optional[UUID] = None
    ) -> bool:
        if host_id == attendee_id:
            return False

        try:
            return await self.collaborators.has_accepted_grant(
                host_id, attendee_id, plan_id
            )
        except STORE_ERRORS:
            logger.exception(
                "Collaboration lookup failed for host=%s attendee=%s plan=%s; denying",
                host_id,
                attendee_id,
                plan_id,
            )
            return False
