"""
The GameSession is the entrypoint into the domain layer for the service layer.
It owns one round: the deck, the face-up cards, the matched identifiers and the turn counter.

It does not know about time. A mismatch leaves the session locked in RESOLVING,
and the service decides when to call conceal_mismatch().
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Self, Sequence

from src.core.models import CardView
from src.core.shared_types import CardStatus, FlipOutcome, SessionStatus
from src.match.deck import Card, build_deck

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    deck: list[Card]
    turns: int = 0
    face_up: list[Card] = field(default_factory=list)
    matched: list[str] = field(default_factory=list)
    locked: bool = False
    status: SessionStatus = SessionStatus.PLAYING

    def __post_init__(self) -> None:
        # Nothing to match means the round is won before it starts
        if self.total_pairs == 0:
            self.status = SessionStatus.VICTORY

    @classmethod
    def new_game(
        cls, identifiers: Sequence[str], rng: random.Random | None = None
    ) -> Self:
        """Deal a fresh shuffled deck for the given identifiers."""
        return cls(deck=build_deck(identifiers, rng))

    @property
    def total_pairs(self) -> int:
        return len({card.identifier for card in self.deck})

    @property
    def is_won(self) -> bool:
        return self.status == SessionStatus.VICTORY

    def flip(self, position: int) -> FlipOutcome:
        """
        Attempt to turn a card face up.
        -----

        Ignored (no state change at all) when:
        * the session is locked (a mismatch is still on display)
        * there is no card at that position
        * the card is already face up or matched

        The second card of a pair completes a turn and gets the pair resolved immediately.
        """
        card = self._card_at(position)
        if self.locked or card is None or not card.is_face_down:
            logger.debug("Ignored flip at position %s (locked=%s)", position, self.locked)
            return FlipOutcome.IGNORED

        card.status = CardStatus.FACE_UP
        self.face_up.append(card)
        if len(self.face_up) < 2:
            return FlipOutcome.REVEALED

        self.turns += 1
        self.locked = True
        return self._resolve_pair()

    def conceal_mismatch(self) -> None:
        """Turn a mismatched pair back over and accept flips again."""
        if self.status != SessionStatus.RESOLVING:
            return
        for card in self.face_up:
            card.status = CardStatus.FACE_DOWN
        self.face_up.clear()
        self.locked = False
        self.status = SessionStatus.PLAYING

    def card_views(self) -> list[CardView]:
        return [
            CardView(
                position=card.position,
                status=card.status,
                identifier=None if card.is_face_down else card.identifier,
            )
            for card in self.deck
        ]

    # -- PRIVATE HELPERS ---
    def _card_at(self, position: int) -> Card | None:
        if 0 <= position < len(self.deck):
            return self.deck[position]
        return None

    def _resolve_pair(self) -> FlipOutcome:
        first, second = self.face_up
        if first.identifier != second.identifier:
            # both stay face up until conceal_mismatch() gets called
            self.status = SessionStatus.RESOLVING
            return FlipOutcome.MISMATCH

        first.status = CardStatus.MATCHED
        second.status = CardStatus.MATCHED
        self.matched.append(first.identifier)
        self.face_up.clear()
        self.locked = False

        if len(self.matched) == self.total_pairs:
            self.status = SessionStatus.VICTORY
            return FlipOutcome.VICTORY
        return FlipOutcome.MATCH
