"""The tableau and foundation row of one game."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from infinite_klondike.cards import CardSource, RandomCardSource
from infinite_klondike.piles import Column, FoundationSet

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_COLUMNS = 50


class Board:
    """Columns grow to the right on demand and are never removed or reordered."""

    def __init__(self, card_source: CardSource, width: int = 0):
        self.card_source = card_source
        self.columns: List[Column] = []
        self.foundations = FoundationSet()
        self.ensure_width(width)

    @classmethod
    def new_game(cls, seed: Optional[int] = None, width: int = DEFAULT_INITIAL_COLUMNS) -> "Board":
        return cls(RandomCardSource(seed), width=width)

    def __len__(self) -> int:
        return len(self.columns)

    def ensure_width(self, required: int) -> int:
        """Materialise columns up to ``required``; returns how many were added."""
        start = len(self.columns)
        for index in range(start, required):
            self.columns.append(Column.new(self.card_source, index))
        added = max(0, required - start)
        if added:
            logger.debug("board grew from %d to %d columns", start, len(self.columns))
        return added

    def column(self, index: int) -> Column:
        if not 0 <= index < len(self.columns):
            raise IndexError(f"column {index} is not materialised (width {len(self.columns)})")
        return self.columns[index]

    def columns_in(self, start: int, stop: int) -> Tuple[Column, ...]:
        if start < 0 or stop > len(self.columns) or start > stop:
            raise IndexError(f"column range {start}..{stop} outside 0..{len(self.columns)}")
        return tuple(self.columns[start:stop])
