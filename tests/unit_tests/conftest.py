from typing import List

import pytest

from infinite_klondike.cards import Card, RandomCardSource


class ScriptedCardSource:
    """Deals the given cards first, then falls back to a seeded random supply.

    Every card handed out is recorded in ``drawn``.
    """

    def __init__(self, *cards: Card, seed: int = 0):
        self._script: List[Card] = list(cards)
        self._fallback = RandomCardSource(seed)
        self.drawn: List[Card] = []

    def draw(self) -> Card:
        card = self._script.pop(0) if self._script else self._fallback.draw()
        self.drawn.append(card)
        return card


@pytest.fixture
def scripted():
    return ScriptedCardSource
