"""Unit tests for src/api/models.py"""

import pytest

from src.api.models import FlipRequest, GameStateResponse, NewGameRequest
from src.core.exceptions import InvalidRequestError
from src.core.models import CardView, GameState, ScoreEntry, VictoryResult
from src.core.shared_types import CardStatus, GameStatus


# -- Validation - NewGameRequest --
def test_valid_identifiers() -> None:
    request = NewGameRequest(identifiers=["images/Gordon Bodily.jpg", "images/Robert Bodily Jr.jpg"])
    assert request.family is None
    assert len(request.identifiers) == 2


def test_empty_identifier_list_is_allowed() -> None:
    assert NewGameRequest(identifiers=[]).identifiers == []


@pytest.mark.parametrize(
    "identifiers",
    [
        ["Alice", "Alice"],  # duplicates cannot form pairs
        ["Alice", "  "],  # blank
    ],
)
def test_invalid_identifiers(identifiers: list[str]) -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(identifiers=identifiers)


def test_blank_family_name() -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(identifiers=["Alice"], family="")


# -- Validation - FlipRequest --
def test_negative_position() -> None:
    with pytest.raises(InvalidRequestError):
        _ = FlipRequest(position=-1)


# -- Conversion - GameStateResponse --
def test_response_from_state() -> None:
    state = GameState(
        status=GameStatus.AWAITING_INITIALS,
        scope="Bodily",
        cards=[
            CardView(position=0, status=CardStatus.MATCHED, identifier="Alice"),
            CardView(position=1, status=CardStatus.MATCHED, identifier="Alice"),
        ],
        turns=1,
        matched=["Alice"],
        locked=False,
        best=12,
        leaderboard=[ScoreEntry("ABC", 12, "2024-05-01")],
    )
    response = GameStateResponse.from_state(state)
    assert response.needs_initials
    assert response.family == "Bodily"
    assert response.leaderboard[0].initials == "ABC"
    assert response.victory is None
    assert response.cards[1].identifier == "Alice"


def test_response_with_victory() -> None:
    state = GameState(
        status=GameStatus.VICTORY,
        scope=None,
        cards=[],
        turns=0,
        matched=[],
        locked=False,
        best=None,
        victory=VictoryResult(turns=0, best=None, new_record=False),
    )
    response = GameStateResponse.from_state(state)
    assert not response.needs_initials
    assert response.victory is not None
    assert response.victory.turns == 0
