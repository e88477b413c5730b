"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import random
from datetime import date
from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.leaderboard_repository import LeaderboardRepository
from src.db.repository import InMemoryStore
from src.db.schema import Base
from src.match.scheduler import ManualScheduler
from src.services.match_service import MatchService

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

FIXED_DAY = date(2024, 5, 1)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def leaderboard(memory_store: InMemoryStore) -> LeaderboardRepository:
    return LeaderboardRepository(memory_store)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def rng() -> random.Random:
    """Seeded, so decks come out the same on every run."""
    return random.Random(1234)


@pytest.fixture
def service(
    leaderboard: LeaderboardRepository, scheduler: ManualScheduler, rng: random.Random
) -> MatchService:
    return MatchService(
        leaderboard=leaderboard,
        scheduler=scheduler,
        reveal_delay=1.0,
        rng=rng,
        today=lambda: FIXED_DAY,
    )
