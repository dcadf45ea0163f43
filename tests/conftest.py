"""
Shared fixtures for the quizboard test suite.

Storage tests run against a real in-memory SQLite database. Storage failure
paths use session factory doubles that raise SQLAlchemy errors.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from quizboard.config import Config
from quizboard.database.database import Database
from quizboard.services.leaderboard import LeaderboardService


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    """Keep test runs from writing daily log files."""
    monkeypatch.setattr(Config, "LOG_DIR", "")


class FakeClock:
    """Deterministic clock that advances one minute per reading."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(minutes=1)
        return current


class BrokenSession:
    """Session double whose queries fail like a dropped connection."""

    def __init__(self):
        self.rolled_back = False
        self.closed = False

    def add(self, obj):
        pass

    async def flush(self):
        raise OperationalError("INSERT INTO leaderboard", {}, Exception("disk I/O error"))

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT FROM leaderboard", {}, Exception("disk I/O error"))

    async def commit(self):
        pass

    async def rollback(self):
        self.rolled_back = True

    async def close(self):
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))


@pytest_asyncio.fixture
async def database():
    db = Database("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def service(database, clock):
    return LeaderboardService(database.session_factory, clock=clock)


@pytest.fixture
def broken_session():
    return BrokenSession()


@pytest.fixture
def broken_service(broken_session, clock):
    return LeaderboardService(lambda: broken_session, clock=clock)


@pytest.fixture
def unreachable_service(clock):
    def connect():
        raise OperationalError("connect", {}, Exception("unable to open database file"))
    return LeaderboardService(connect, clock=clock)
