import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID, uuid4

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_unit_of_work
from src.domain.entities import CollaboratorRole, CollaboratorStatus, PlanCollaborator


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test_sessions.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def grant_collaboration(db_session):
    """Seed an accepted collaboration grant between a plan owner and a collaborator"""

    async def _grant(
        owner_id: UUID,
        collaborator_id: UUID,
        plan_id: UUID = None,
        status: CollaboratorStatus = CollaboratorStatus.accepted,
    ) -> PlanCollaborator:
        grant = PlanCollaborator(
            plan_id=plan_id or uuid4(),
            owner_id=owner_id,
            collaborator_id=collaborator_id,
            role=CollaboratorRole.mentor,
            status=status,
        )
        db_session.add(grant)
        await db_session.commit()
        return grant

    return _grant
