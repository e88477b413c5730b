"""
Boundary layer data model(s).

These objects are what the Service hands across boundaries:
the db layer stores ScoreEntry records, and the API layer / renderer reads GameState snapshots.
(Decouples the pydantic response models and the persisted JSON shape from the domain objects.)
"""

from dataclasses import dataclass, field

from src.core.shared_types import CardStatus, EventKind, GameStatus

# Type aliases to make the models easier to read
Identifier = str
Scope = str | None


@dataclass(frozen=True)
class ScoreEntry:
    """One leaderboard line."""

    initials: str
    turns: int
    date: str


@dataclass(frozen=True)
class CardView:
    """What a renderer may know about one card. The identifier stays hidden while the card is face down."""

    position: int
    status: CardStatus
    identifier: Identifier | None


@dataclass(frozen=True)
class VictoryResult:
    turns: int
    best: int | None
    new_record: bool


@dataclass(frozen=True)
class GameState:
    """Transport-safe snapshot of everything a renderer needs to draw the table."""

    status: GameStatus
    scope: Scope
    cards: list[CardView]
    turns: int
    matched: list[Identifier]
    locked: bool
    best: int | None
    leaderboard: list[ScoreEntry] = field(default_factory=list)
    victory: VictoryResult | None = None


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    state: GameState
