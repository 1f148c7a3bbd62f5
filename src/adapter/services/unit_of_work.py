from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.mentorship_session_repository import MentorshipSessionRepository
from src.adapter.repositories.plan_collaborator_repository import PlanCollaboratorRepository
from src.adapter.repositories.session_reminder_repository import SessionReminderRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.sessions = MentorshipSessionRepository(self.session)
        self.reminders = SessionReminderRepository(self.session)
        self.collaborators = PlanCollaboratorRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
