"""Card values and the random card supply.

There is no deck in Infinite Klondike: every card on the table is drawn
fresh from a card source when a column is created or a hidden card is
revealed. Cards are small immutable values, so they can be copied and
compared freely.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Protocol

NUM_RANKS = 13

RANK_TO_TEXT = {0: "A", 10: "J", 11: "Q", 12: "K"}
for _r in range(1, 10):
    RANK_TO_TEXT[_r] = str(_r + 1)


class Suit(IntEnum):
    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        return "♣♦♥♠"[self]

    def is_red(self) -> bool:
        return self in (Suit.DIAMOND, Suit.HEART)


@dataclass(frozen=True)
class Card:
    """A suit and a rank from 0 (Ace) to 12 (King)."""

    suit: Suit
    rank: int

    def __post_init__(self):
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"unknown suit {self.suit!r}") from None
        # Normalise plain ints so equality and hashing stay consistent.
        object.__setattr__(self, "suit", suit)
        if not isinstance(self.rank, int) or not 0 <= self.rank < NUM_RANKS:
            raise ValueError(f"rank must be in 0..{NUM_RANKS - 1}, got {self.rank!r}")

    @property
    def code(self) -> int:
        return int(self.suit) * NUM_RANKS + self.rank

    @classmethod
    def from_code(cls, code: int) -> "Card":
        if not 0 <= code < NUM_RANKS * len(Suit):
            raise ValueError(f"card code out of range: {code!r}")
        return cls(Suit(code // NUM_RANKS), code % NUM_RANKS)

    def is_ace(self) -> bool:
        return self.rank == 0

    def is_red(self) -> bool:
        return self.suit.is_red()

    def same_suit(self, other: "Card") -> bool:
        return self.suit == other.suit

    def is_next_card_of(self, other: "Card") -> bool:
        return self.rank == other.rank + 1

    def can_drop_on(self, other: "Card") -> bool:
        """Tableau rule: one rank lower than ``other`` and the opposite colour."""
        return other.is_next_card_of(self) and self.is_red() != other.is_red()

    def __str__(self) -> str:
        return f"{RANK_TO_TEXT[self.rank]}{self.suit.symbol}"


class CardSource(Protocol):
    def draw(self) -> Card: ...


class RandomCardSource:
    """Uniform card supply backed by :class:`random.Random`."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def draw(self) -> Card:
        suit = Suit(self.rng.randrange(len(Suit)))
        return Card(suit, self.rng.randrange(NUM_RANKS))
