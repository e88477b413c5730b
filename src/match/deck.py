"""Building the deck: every identifier becomes a pair of cards, laid out in random order."""

import random
from dataclasses import dataclass
from typing import MutableSequence, Sequence, TypeVar

from src.core.exceptions import InvalidInputError
from src.core.shared_types import CardStatus

T = TypeVar("T")

# Above this the cards no longer fit a readable grid. Not enforced, only logged by callers.
MAX_IDENTIFIERS = 15


@dataclass
class Card:
    identifier: str
    position: int
    status: CardStatus = CardStatus.FACE_DOWN

    @property
    def is_face_down(self) -> bool:
        return self.status == CardStatus.FACE_DOWN


def shuffle(items: MutableSequence[T], rng: random.Random | None = None) -> None:
    """
    Fisher-Yates shuffle, in place.

    Walk from the last index down to 1 and swap with a partner picked uniformly from [0, i],
    so every permutation is equally likely.
    """
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def build_deck(
    identifiers: Sequence[str], rng: random.Random | None = None
) -> list[Card]:
    """Double the identifiers, shuffle, and deal them out face down with sequential positions.

    An empty sequence is a legal (if dull) game: it gives an empty deck.
    """
    duplicates = sorted({i for i in identifiers if identifiers.count(i) > 1})
    if duplicates:
        raise InvalidInputError(
            f"Identifiers must be unique to form pairs. Duplicates: {', '.join(duplicates)}"
        )

    doubled = [*identifiers, *identifiers]
    shuffle(doubled, rng)
    return [
        Card(identifier=identifier, position=position)
        for position, identifier in enumerate(doubled)
    ]
