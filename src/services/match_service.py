"""Orchestration between the renderer, the game session (domain layer) and the leaderboard (persistence layer)."""

import logging
import random
from datetime import date
from typing import Callable, Sequence

from src.core.config import Settings, configure_logging, get_settings
from src.core.exceptions import GameStateError
from src.core.models import GameEvent, GameState, Scope, VictoryResult
from src.core.shared_types import EventKind, FlipOutcome, GameStatus, SessionStatus
from src.db.leaderboard_repository import LeaderboardRepository
from src.db.repository import KeyValueStore
from src.match.deck import MAX_IDENTIFIERS
from src.match.family import display_name
from src.match.game_session import GameSession
from src.match.scheduler import Handle, Scheduler

logger = logging.getLogger(__name__)

DEFAULT_REVEAL_DELAY = 1.0

Listener = Callable[[GameEvent], None]


class MatchService:
    """Runs one table: a game at a time, its leaderboard, and whoever is watching it."""

    def __init__(
        self,
        leaderboard: LeaderboardRepository,
        scheduler: Scheduler,
        reveal_delay: float = DEFAULT_REVEAL_DELAY,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
        require_selection: bool = False,
    ) -> None:
        self.leaderboard = leaderboard
        self.scheduler = scheduler
        self.reveal_delay = reveal_delay
        self.rng = rng
        self.today = today

        self.session: GameSession | None = None
        self.scope: Scope = None
        self.status = GameStatus.SELECTING if require_selection else GameStatus.PLAYING
        self.victory: VictoryResult | None = None

        # bumped on every new game, so a conceal scheduled for an older game knows it is stale
        self._generation = 0
        self._pending: Handle | None = None
        self._listeners: list[Listener] = []

    # -- Renderer facing API --
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register for a GameEvent after every state change. Returns a function that unsubscribes."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def new_game(self, identifiers: Sequence[str], scope: Scope = None) -> GameState:
        """Deal a fresh deck. Whatever was going on before (including a pending conceal) is dropped."""
        if len(identifiers) > MAX_IDENTIFIERS:
            logger.warning(
                "%s identifiers will not fit the grid nicely (max %s)", len(identifiers), MAX_IDENTIFIERS
            )
        session = GameSession.new_game(identifiers, self.rng)

        self._invalidate_pending()
        self.session = session
        self.scope = scope
        self.victory = None
        self.status = GameStatus.PLAYING
        logger.info("New game with %s pairs on board %r", session.total_pairs, scope)
        self._notify(EventKind.NEW_GAME)

        if session.is_won:
            self._on_victory(session)
        return self.snapshot()

    def select_family(self, family: str, identifiers: Sequence[str]) -> GameState:
        """Start a game for a family; its scores go to that family's board."""
        return self.new_game(identifiers, scope=family)

    def flip(self, position: int) -> FlipOutcome:
        """Flip the card at position. Anything that is not allowed right now is ignored."""
        if self.session is None or self.status not in (GameStatus.PLAYING, GameStatus.RESOLVING):
            logger.debug("Ignored flip at position %s, status: %s", position, self.status)
            return FlipOutcome.IGNORED

        outcome = self.session.flip(position)
        match outcome:
            case FlipOutcome.IGNORED:
                return outcome
            case FlipOutcome.REVEALED:
                self._notify(EventKind.FLIP)
            case FlipOutcome.MATCH:
                self._notify(EventKind.MATCH)
            case FlipOutcome.MISMATCH:
                self.status = GameStatus.RESOLVING
                self._schedule_conceal()
                self._notify(EventKind.MISMATCH)
            case FlipOutcome.VICTORY:
                self._notify(EventKind.MATCH)
                self._on_victory(self.session)
        return outcome

    def submit_score(self, initials: str) -> GameState:
        """Initials for a winning score that made the board."""
        if self.status != GameStatus.AWAITING_INITIALS or self.session is None:
            raise GameStateError(
                f"No score waiting for initials. status: {self.status}"
            )
        turns = self.session.turns
        previous_best = self.leaderboard.best(self.scope)
        board = self.leaderboard.insert(
            self.scope, initials, turns, self.today().isoformat()
        )
        self.victory = VictoryResult(
            turns=turns,
            best=board[0].turns,
            new_record=previous_best is None or turns < previous_best,
        )
        self.status = GameStatus.VICTORY
        self._notify(EventKind.SCORE_RECORDED)
        return self.snapshot()

    def reset_record(self, confirmed: bool) -> GameState:
        """Wipe the leaderboard of the current selection. The caller must have asked the user first."""
        if self.status == GameStatus.SELECTING:
            raise GameStateError("Pick a family first, there is no leaderboard selected to reset.")
        self.leaderboard.clear(self.scope, confirmed)
        self._notify(EventKind.RECORD_RESET)
        return self.snapshot()

    def snapshot(self) -> GameState:
        """Everything the renderer needs to draw the current state."""
        board = self.leaderboard.load(self.scope)
        session = self.session
        return GameState(
            status=self.status,
            scope=self.scope,
            cards=session.card_views() if session else [],
            turns=session.turns if session else 0,
            matched=[display_name(i) for i in session.matched] if session else [],
            locked=session.locked if session else False,
            best=board[0].turns if board else None,
            leaderboard=board,
            victory=self.victory,
        )

    # -- Internal helpers --
    def _on_victory(self, session: GameSession) -> None:
        """All pairs found: either ask for initials, or report the result straight away."""
        turns = session.turns
        # an empty deck is won without playing, so there is nothing worth recording
        if turns > 0 and self.leaderboard.qualifies(self.scope, turns):
            self.status = GameStatus.AWAITING_INITIALS
            logger.info("Won in %s turns, score makes the board %r", turns, self.scope)
            self._notify(EventKind.NEEDS_INITIALS)
            return

        self.victory = VictoryResult(
            turns=turns, best=self.leaderboard.best(self.scope), new_record=False
        )
        self.status = GameStatus.VICTORY
        logger.info("Won in %s turns", turns)
        self._notify(EventKind.VICTORY)

    def _schedule_conceal(self) -> None:
        generation = self._generation
        self._pending = self.scheduler.call_later(
            self.reveal_delay, lambda: self._conceal(generation)
        )

    def _conceal(self, generation: int) -> None:
        """Deferred part of a mismatch. A no-op when a new game started in the meantime."""
        if generation != self._generation or self.session is None:
            logger.debug("Dropped stale conceal from game %s", generation)
            return
        self._pending = None
        self.session.conceal_mismatch()
        if self.session.status == SessionStatus.PLAYING:
            self.status = GameStatus.PLAYING
        self._notify(EventKind.CONCEAL)

    def _invalidate_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _notify(self, kind: EventKind) -> None:
        if not self._listeners:
            return
        event = GameEvent(kind=kind, state=self.snapshot())
        for listener in list(self._listeners):
            listener(event)


def create_service(
    store: KeyValueStore,
    scheduler: Scheduler,
    settings: Settings | None = None,
    require_selection: bool = False,
) -> MatchService:
    """Wire a MatchService with the leaderboard size and reveal delay from the settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return MatchService(
        leaderboard=LeaderboardRepository(store, max_entries=settings.leaderboard_size),
        scheduler=scheduler,
        reveal_delay=settings.reveal_delay_seconds,
        require_selection=require_selection,
    )
