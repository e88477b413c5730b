"""Leaderboard rules. Pure functions on lists of ScoreEntry, persistence lives in src/db/leaderboard_repository.py"""

from src.core.models import ScoreEntry

MAX_ENTRIES = 10
INITIALS_LENGTH = 3
DEFAULT_INITIALS = "AAA"
INITIALS_PADDING = "-"


def normalize_initials(raw: str | None) -> str:
    """Uppercase, default to AAA when empty, pad with '-' and cut to exactly 3 characters."""
    initials = (raw or "").strip().upper()
    if not initials:
        initials = DEFAULT_INITIALS
    return initials.ljust(INITIALS_LENGTH, INITIALS_PADDING)[:INITIALS_LENGTH]


def qualifies(
    entries: list[ScoreEntry], turns: int, max_entries: int = MAX_ENTRIES
) -> bool:
    """A board that is not full takes anything. A full board needs strictly fewer turns than the last place."""
    if len(entries) < max_entries:
        return True
    return turns < entries[-1].turns


def insert(
    entries: list[ScoreEntry], entry: ScoreEntry, max_entries: int = MAX_ENTRIES
) -> list[ScoreEntry]:
    """Return a new board with the entry added.

    sorted() is stable, so on a tie the older entry stays ahead.
    """
    ranked = sorted([*entries, entry], key=lambda e: e.turns)
    return ranked[:max_entries]


def best(entries: list[ScoreEntry]) -> int | None:
    if not entries:
        return None
    return min(entry.turns for entry in entries)
