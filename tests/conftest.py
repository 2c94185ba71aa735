import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JOB_QUEUE_BACKEND"] = "database"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from agentcast.auth.jwt import create_access_token
from agentcast.database import Base, get_db
from agentcast.exceptions import QueueSubmissionError
from agentcast.geography import GeographicHierarchy
from agentcast.models import Agent, AgentCoverageArea, NotificationPreference
from agentcast.services.job_queue_base import JobQueue


class FakeJobQueue(JobQueue):
    """Records submitted batches; optionally fails like a broker outage."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.batches = []

    async def submit_batch(self, jobs):
        if self.fail:
            raise QueueSubmissionError("broker unavailable", job_count=len(jobs))
        self.batches.append(list(jobs))
        return len(jobs)

    @property
    def jobs(self):
        return [job for batch in self.batches for job in batch]


@pytest.fixture
def small_hierarchy():
    return GeographicHierarchy(
        state_names={"MA": "Massachusetts", "CT": "Connecticut", "TX": "Texas"},
        county_towns={
            "MA": {
                "Suffolk": ["Boston", "Chelsea", "Boston-Back Bay"],
                "Middlesex": ["Cambridge", "Newton", "Somerville"],
                "Norfolk": ["Brookline", "Newton"],
            },
        },
        cities_by_state={"TX": ["Dallas", "Austin", "Houston"]},
        sub_areas={
            ("MA", "Boston"): ["Back Bay", "Beacon Hill", "South End"],
            ("TX", "Dallas"): ["Deep Ellum", "Uptown"],
        },
    )


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def queue():
    return FakeJobQueue()


@pytest.fixture
def make_agent(db):
    """Create an agent with preferences and coverage rows."""

    async def _make_agent(
        email="agent@example.com",
        *,
        is_active=True,
        coverage=(),
        with_preferences=True,
        **preferences,
    ):
        agent = Agent(email=email, first_name="Test", last_name="Agent", is_active=is_active)
        db.add(agent)
        await db.flush()
        if with_preferences:
            db.add(NotificationPreference(agent_id=agent.id, **preferences))
        for row in coverage:
            db.add(AgentCoverageArea(agent_id=agent.id, **row))
        await db.commit()
        return agent

    return _make_agent


@pytest.fixture
def auth_headers():
    def _auth_headers(agent):
        return {"Authorization": f"Bearer {create_access_token(str(agent.id))}"}

    return _auth_headers


@pytest.fixture
async def client(db, queue):
    from agentcast.api.v1.broadcasts import get_queue
    from agentcast.main import app

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_queue] = lambda: queue
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
