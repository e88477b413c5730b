"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import get_settings
from src.db.schema import Base


def create_session_factory(database_url: str | None = None) -> sessionmaker[Session]:
    """Engine + session factory for the configured database. Tables get created if missing."""
    engine: Engine = create_engine(database_url or get_settings().database_url)
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
