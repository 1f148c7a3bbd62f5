from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError

from src.app.repositories.mentorship_session_repository import IMentorshipSessionRepository
from src.app.repositories.plan_collaborator_repository import IPlanCollaboratorRepository
from src.app.repositories.session_reminder_repository import ISessionReminderRepository


# Failures of the backing store or the connection underneath it
STORE_ERRORS = (SQLAlchemyError, OSError)


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    sessions: IMentorshipSessionRepository
    reminders: ISessionReminderRepository
    collaborators: IPlanCollaboratorRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
