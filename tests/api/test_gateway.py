"""Unit tests for src/api/gateway.py"""

import pytest

from src.api.gateway import MatchGateway
from src.api.models import (
    FlipRequest,
    LeaderboardRequest,
    NewGameRequest,
    ResetRecordRequest,
    SubmitScoreRequest,
)
from src.core.exceptions import ConfirmationRequiredError
from src.core.shared_types import FlipOutcome, GameStatus
from src.services.match_service import MatchService


@pytest.fixture
def gateway(service: MatchService) -> MatchGateway:
    return MatchGateway(service)


def positions_of(service: MatchService, identifier: str) -> list[int]:
    assert service.session is not None
    return [card.position for card in service.session.deck if card.identifier == identifier]


def test_full_round_for_a_family(gateway: MatchGateway, service: MatchService) -> None:
    response = gateway.new_game(NewGameRequest(identifiers=["images/Gordon Bodily.jpg"], family="Bodily"))
    assert response.status == GameStatus.PLAYING
    assert response.family == "Bodily"

    first, second = positions_of(service, "images/Gordon Bodily.jpg")
    response = gateway.flip(FlipRequest(position=first))
    assert response.last_flip == FlipOutcome.REVEALED

    response = gateway.flip(FlipRequest(position=second))
    assert response.last_flip == FlipOutcome.VICTORY
    assert response.needs_initials
    assert response.matched == ["Gordon Bodily"]

    response = gateway.submit_score(SubmitScoreRequest(initials="gb"))
    assert response.status == GameStatus.VICTORY
    assert response.victory is not None and response.victory.new_record

    board = gateway.leaderboard(LeaderboardRequest(family="Bodily"))
    assert board.best == 1
    assert [e.initials for e in board.entries] == ["GB-"]
    assert gateway.leaderboard(LeaderboardRequest()).entries == []


def test_default_submit_uses_placeholder_initials(gateway: MatchGateway, service: MatchService) -> None:
    gateway.new_game(NewGameRequest(identifiers=["Alice"]))
    for position in positions_of(service, "Alice"):
        gateway.flip(FlipRequest(position=position))
    response = gateway.submit_score(SubmitScoreRequest())
    assert response.leaderboard[0].initials == "AAA"


def test_reset_record_passes_confirmation_through(gateway: MatchGateway, service: MatchService) -> None:
    service.leaderboard.insert(None, "abc", 9, "2024-05-01")
    gateway.new_game(NewGameRequest(identifiers=["Alice"]))

    with pytest.raises(ConfirmationRequiredError):
        gateway.reset_record(ResetRecordRequest())

    response = gateway.reset_record(ResetRecordRequest(confirmed=True))
    assert response.best is None
    assert gateway.get_state().leaderboard == []
