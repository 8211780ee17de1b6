"""Stacks, tableau columns and the foundation row."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from infinite_klondike.cards import Card, CardSource

logger = logging.getLogger(__name__)


class Stack:
    """Ordered pile of cards, bottom first.

    A stack enforces no rule about what it holds; callers decide legality.
    """

    __slots__ = ("cards",)

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self.cards: List[Card] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, idx: int) -> Card:
        return self.cards[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self.cards == other.cards

    def __repr__(self) -> str:
        return f"Stack([{', '.join(str(c) for c in self.cards)}])"

    def is_empty(self) -> bool:
        return not self.cards

    def push(self, card: Card) -> None:
        self.cards.append(card)

    def pop(self) -> Optional[Card]:
        if not self.cards:
            return None
        return self.cards.pop()

    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def bottom(self) -> Optional[Card]:
        return self.cards[0] if self.cards else None

    def split_off(self, index: int) -> "Stack":
        """Remove and return the cards from ``index`` to the top.

        Any contiguous suffix can be lifted; the run is not checked for
        alternating colours or descending ranks.
        """
        if index < 0:
            raise IndexError(f"split index must be non-negative, got {index}")
        taken = self.cards[index:]
        del self.cards[index:]
        return Stack(taken)

    def append(self, other: "Stack") -> None:
        """Move every card of ``other`` onto this stack, emptying ``other``."""
        if other is self:
            return
        self.cards.extend(other.cards)
        other.cards.clear()

    def can_stack(self, candidate: Card) -> bool:
        top = self.top()
        if top is None:
            return True
        return candidate.can_drop_on(top)


class Column:
    """One tableau pile: a count of face-down cards under a visible stack."""

    __slots__ = ("hidden_count", "visible")

    def __init__(self, hidden_count: int = 0, visible: Optional[Stack] = None):
        if hidden_count < 0:
            raise ValueError(f"hidden_count must be non-negative, got {hidden_count}")
        self.hidden_count = hidden_count
        self.visible = visible if visible is not None else Stack()

    @classmethod
    def new(cls, card_source: CardSource, index: int) -> "Column":
        # Deeper columns start with more face-down cards.
        return cls(hidden_count=index, visible=Stack([card_source.draw()]))

    def __repr__(self) -> str:
        return f"Column(hidden={self.hidden_count}, visible={self.visible!r})"

    @property
    def slot_count(self) -> int:
        return self.hidden_count + len(self.visible)

    def is_empty(self) -> bool:
        return self.hidden_count == 0 and self.visible.is_empty()

    def accepts(self, card: Card) -> bool:
        """True when ``card`` may be dropped here from another pile."""
        if self.visible.is_empty():
            return self.hidden_count == 0
        return self.visible.can_stack(card)

    def reveal_if_empty(self, card_source: CardSource) -> bool:
        if not self.visible.is_empty() or self.hidden_count == 0:
            return False
        card = card_source.draw()
        self.visible.push(card)
        self.hidden_count -= 1
        logger.debug("revealed %s, %d hidden left", card, self.hidden_count)
        return True

    def append(self, stack: Stack) -> None:
        self.visible.append(stack)

    def take_from(self, index: int) -> Stack:
        """Lift the visible cards from ``index`` upward.

        An index at or past the top lifts only the top card, or nothing
        when no card is visible.
        """
        if index >= len(self.visible):
            card = self.visible.pop()
            return Stack([card] if card is not None else [])
        return self.visible.split_off(index)


class FoundationSet:
    """Unbounded row of foundation piles, keeping only each pile's top card.

    Every pile is built from the Ace up in one suit, so the top card alone
    determines the whole pile.
    """

    def __init__(self):
        self._tops: Dict[int, Card] = {}

    def __len__(self) -> int:
        return len(self._tops)

    def __contains__(self, index) -> bool:
        return index in self._tops

    def __repr__(self) -> str:
        inner = ", ".join(f"{i}: {self._tops[i]}" for i in self.indices())
        return f"FoundationSet({{{inner}}})"

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0:
            raise IndexError(f"foundation index must be non-negative, got {index}")

    def indices(self) -> List[int]:
        return sorted(self._tops)

    def top_of(self, index: int) -> Optional[Card]:
        self._check_index(index)
        return self._tops.get(index)

    def can_place(self, index: int, card: Card) -> bool:
        top = self.top_of(index)
        if top is None:
            return card.is_ace()
        return top.same_suit(card) and card.is_next_card_of(top)

    def try_place(self, index: int, card: Card) -> bool:
        if not self.can_place(index, card):
            return False
        self._tops[index] = card
        return True

    def cards_on(self, index: int) -> List[Card]:
        """The full pile at ``index``, Ace first."""
        top = self.top_of(index)
        if top is None:
            return []
        return [Card(top.suit, rank) for rank in range(top.rank + 1)]
