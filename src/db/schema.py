"""Database tables / schema, plus the shape of the JSON that gets stored in them."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from sqlalchemy import Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBEntry(Base):
    __tablename__ = "kv_store"
    key: Mapped[str] = mapped_column(primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class StoredScoreEntry(BaseModel):
    """One leaderboard line as persisted: {"initials": "ABC", "turns": 12, "date": "2024-05-01"}"""

    initials: str = Field(min_length=3, max_length=3)
    turns: int = Field(ge=1)
    date: str
