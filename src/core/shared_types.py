"""
Type definitions used across layers
"""

from enum import StrEnum


class CardStatus(StrEnum):
    FACE_DOWN = "face down"
    FACE_UP = "face up"
    MATCHED = "matched"


class SessionStatus(StrEnum):
    """Status of a single round, as tracked by the domain layer."""

    PLAYING = "playing"
    RESOLVING = "resolving"
    VICTORY = "victory"


class GameStatus(StrEnum):
    """Status of the whole flow, as tracked by the service layer."""

    SELECTING = "selecting"
    PLAYING = "playing"
    RESOLVING = "resolving"
    AWAITING_INITIALS = "awaiting initials"
    VICTORY = "victory"


class FlipOutcome(StrEnum):
    IGNORED = "ignored"
    REVEALED = "revealed"
    MATCH = "match"
    MISMATCH = "mismatch"
    VICTORY = "victory"


class EventKind(StrEnum):
    NEW_GAME = "new game"
    FLIP = "flip"
    MATCH = "match"
    MISMATCH = "mismatch"
    CONCEAL = "conceal"
    VICTORY = "victory"
    NEEDS_INITIALS = "needs initials"
    SCORE_RECORDED = "score recorded"
    RECORD_RESET = "record reset"
