"""Unit tests for src/db/database.py"""

from src.db.database import create_session_factory, get_db
from src.db.sql_repository import SQLKeyValueStore


def test_session_factory_creates_tables() -> None:
    factory = create_session_factory("sqlite:///:memory:")
    sessions = get_db(factory)
    db = next(sessions)
    store = SQLKeyValueStore(db)
    assert store.get("highScores") is None
    sessions.close()
