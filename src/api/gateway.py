"""Translate renderer requests into MatchService calls, and the resulting state into response models."""

from src.api.models import (
    FlipRequest,
    GameStateResponse,
    LeaderboardRequest,
    LeaderboardResponse,
    NewGameRequest,
    ResetRecordRequest,
    ScoreResponse,
    SubmitScoreRequest,
)
from src.services.match_service import MatchService


class MatchGateway:
    def __init__(self, service: MatchService) -> None:
        self.service = service

    def new_game(self, request: NewGameRequest) -> GameStateResponse:
        if request.family is not None:
            state = self.service.select_family(request.family, request.identifiers)
        else:
            state = self.service.new_game(request.identifiers)
        return GameStateResponse.from_state(state)

    def flip(self, request: FlipRequest) -> GameStateResponse:
        outcome = self.service.flip(request.position)
        return GameStateResponse.from_state(self.service.snapshot(), last_flip=outcome)

    def submit_score(self, request: SubmitScoreRequest) -> GameStateResponse:
        return GameStateResponse.from_state(self.service.submit_score(request.initials))

    def reset_record(self, request: ResetRecordRequest) -> GameStateResponse:
        return GameStateResponse.from_state(self.service.reset_record(request.confirmed))

    def get_state(self) -> GameStateResponse:
        return GameStateResponse.from_state(self.service.snapshot())

    def leaderboard(self, request: LeaderboardRequest) -> LeaderboardResponse:
        """Any board can be looked at, not only the one of the game being played."""
        entries = self.service.leaderboard.load(request.family)
        return LeaderboardResponse(
            family=request.family,
            best=entries[0].turns if entries else None,
            entries=[ScoreResponse.from_entry(e) for e in entries],
        )
