"""Requests and Response models exchanged with the renderer."""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import GameState, ScoreEntry
from src.core.shared_types import CardStatus, FlipOutcome, GameStatus


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    identifiers: list[str]
    family: Optional[str] = None

    @field_validator("identifiers")
    @classmethod
    def validate_identifiers(cls, value: list[str]) -> list[str]:
        if any(not identifier.strip() for identifier in value):
            raise InvalidRequestError("Identifiers cannot be blank.")
        if len(set(value)) != len(value):
            raise InvalidRequestError("Every identifier can only be listed once.")
        return value

    @field_validator("family")
    @classmethod
    def validate_family(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not value.strip():
            raise InvalidRequestError("Family name cannot be blank.")
        return value


class FlipRequest(BaseModel):
    position: int

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Card position cannot be negative: {value}")
        return value


class SubmitScoreRequest(BaseModel):
    initials: str = ""


class ResetRecordRequest(BaseModel):
    confirmed: bool = False


class LeaderboardRequest(BaseModel):
    family: Optional[str] = None


# --- RESPONSE MODELS ---
class CardResponse(BaseModel):
    position: int
    status: CardStatus
    identifier: Optional[str]


class ScoreResponse(BaseModel):
    initials: str
    turns: int
    date: str

    @classmethod
    def from_entry(cls, entry: ScoreEntry) -> Self:
        return cls(initials=entry.initials, turns=entry.turns, date=entry.date)


class VictoryResponse(BaseModel):
    turns: int
    best: Optional[int]
    new_record: bool


class GameStateResponse(BaseModel):
    status: GameStatus
    family: Optional[str]
    cards: list[CardResponse]
    turns: int
    matched: list[str]
    locked: bool
    best: Optional[int]
    leaderboard: list[ScoreResponse]
    needs_initials: bool
    victory: Optional[VictoryResponse] = None
    last_flip: Optional[FlipOutcome] = None

    @classmethod
    def from_state(cls, state: GameState, last_flip: Optional[FlipOutcome] = None) -> Self:
        victory = state.victory
        return cls(
            status=state.status,
            family=state.scope,
            cards=[
                CardResponse(position=c.position, status=c.status, identifier=c.identifier)
                for c in state.cards
            ],
            turns=state.turns,
            matched=state.matched,
            locked=state.locked,
            best=state.best,
            leaderboard=[ScoreResponse.from_entry(e) for e in state.leaderboard],
            needs_initials=state.status == GameStatus.AWAITING_INITIALS,
            victory=(
                VictoryResponse(turns=victory.turns, best=victory.best, new_record=victory.new_record)
                if victory
                else None
            ),
            last_flip=last_flip,
        )


class LeaderboardResponse(BaseModel):
    family: Optional[str]
    best: Optional[int]
    entries: list[ScoreResponse]
