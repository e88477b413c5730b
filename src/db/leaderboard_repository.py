"""
Leaderboard persistence on top of any KeyValueStore.

Every operation reads the stored board right before using it; nothing is cached between calls.
"""

import json
import logging

from pydantic import TypeAdapter, ValidationError

from src.core.exceptions import ConfirmationRequiredError, InvalidInputError
from src.core.models import Scope, ScoreEntry
from src.db.repository import KeyValueStore
from src.db.schema import StoredScoreEntry
from src.match import leaderboard as rules

logger = logging.getLogger(__name__)

GLOBAL_KEY = "highScores"
# Key used when only a single "best turns" integer was kept
LEGACY_RECORD_KEY = "record"
LEGACY_INITIALS = "---"

_BOARD_ADAPTER = TypeAdapter(list[StoredScoreEntry])


def scope_key(scope: Scope) -> str:
    """None / "" -> the global board, anything else -> a board per family."""
    return f"{GLOBAL_KEY}:{scope}" if scope else GLOBAL_KEY


class LeaderboardRepository:
    """Scoped top-N boards, serialized as JSON lists."""

    def __init__(self, store: KeyValueStore, max_entries: int = rules.MAX_ENTRIES) -> None:
        self.store = store
        self.max_entries = max_entries

    def load(self, scope: Scope = None) -> list[ScoreEntry]:
        """Stored board for the scope. Missing or unreadable data gives an empty board."""
        raw = self.store.get(scope_key(scope))
        if raw is None and not scope:
            raw = self.store.get(LEGACY_RECORD_KEY)
        if raw is None:
            return []
        return self._parse(raw, scope)

    def qualifies(self, scope: Scope, turns: int) -> bool:
        return rules.qualifies(self.load(scope), turns, self.max_entries)

    def insert(self, scope: Scope, initials: str, turns: int, date: str) -> list[ScoreEntry]:
        """Add a score (initials normalized first), keep the best max_entries, persist and return the board."""
        if turns < 1:
            raise InvalidInputError(f"A finished game takes at least one turn, got {turns}.")
        entry = ScoreEntry(
            initials=rules.normalize_initials(initials), turns=turns, date=date
        )
        board = rules.insert(self.load(scope), entry, self.max_entries)
        self._save(scope, board)
        logger.info("Recorded %s in %s turns on board %r", entry.initials, turns, scope_key(scope))
        return board

    def best(self, scope: Scope = None) -> int | None:
        return rules.best(self.load(scope))

    def clear(self, scope: Scope, confirmed: bool) -> None:
        """Wipe the scoped board. The caller has to pass confirmed=True, the repository never assumes it."""
        if not confirmed:
            raise ConfirmationRequiredError(
                f"Resetting the leaderboard {scope_key(scope)!r} needs explicit confirmation."
            )
        self.store.remove(scope_key(scope))
        if not scope:
            self.store.remove(LEGACY_RECORD_KEY)
        logger.info("Cleared board %r", scope_key(scope))

    # -- Internal helpers --
    def _save(self, scope: Scope, board: list[ScoreEntry]) -> None:
        stored = [StoredScoreEntry(initials=e.initials, turns=e.turns, date=e.date) for e in board]
        self.store.set(scope_key(scope), _BOARD_ADAPTER.dump_json(stored).decode())

    def _parse(self, raw: str, scope: Scope) -> list[ScoreEntry]:
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Unreadable leaderboard %r, treating it as empty.", scope_key(scope))
            return []

        # legacy store: a bare "best turns so far" number
        if isinstance(data, int) and not isinstance(data, bool) and data >= 1:
            return [ScoreEntry(initials=LEGACY_INITIALS, turns=data, date="")]

        try:
            stored = _BOARD_ADAPTER.validate_python(data)
        except ValidationError:
            logger.warning("Malformed leaderboard %r, treating it as empty.", scope_key(scope))
            return []
        board = [ScoreEntry(initials=s.initials, turns=s.turns, date=s.date) for s in stored]
        # someone else may have written it; restore the ordering and size guarantees
        return sorted(board, key=lambda e: e.turns)[: self.max_entries]
