"""Implementation of KeyValueStore using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.db.schema import DBEntry

logger = logging.getLogger(__name__)


class SQLKeyValueStore:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get(self, key: str) -> str | None:
        """Get the value stored under key, if any."""
        entry = self._fetch_entry(key)
        if entry:
            return entry.value
        return None

    def set(self, key: str, value: str) -> None:
        """Create or overwrite the value under key."""
        entry = self._fetch_entry(key)
        if entry is None:
            self.db.add(DBEntry(key=key, value=value))
        else:
            entry.value = value
        self._commit(f"set {key!r}")

    def remove(self, key: str) -> None:
        """Drop the key. Removing a missing key is not an error."""
        entry = self._fetch_entry(key)
        if not entry:
            return
        self.db.delete(entry)
        self._commit(f"remove {key!r}")

    def _fetch_entry(self, key: str) -> DBEntry | None:
        query = select(DBEntry).where(DBEntry.key == key)
        return self.db.scalar(query)

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as error:
            self.db.rollback()
            logger.error("Could not %s: %s", action, error)
            raise RepositoryError(f"Could not {action}.") from error
