"""Pick-up and drop handling for the cards under the pointer.

A :class:`GrabSession` is idle while it holds nothing. A click on a visible
card lifts it together with everything above it; the next click drops the
held cards. Every illegal drop sends the cards back to the column they came
from, so no half-finished move is ever observable.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from infinite_klondike.board import Board
from infinite_klondike.piles import Stack

logger = logging.getLogger(__name__)

# The foundation row starts three columns right of tableau column 0.
FOUNDATION_COLUMN_OFFSET = 3


class DropOutcome(Enum):
    CANCELLED = "cancelled"
    TABLEAU = "tableau"
    FOUNDATION = "foundation"


class GrabSession:
    def __init__(self):
        self.held = Stack()
        self.origin_column: Optional[int] = None

    def __repr__(self) -> str:
        return f"GrabSession(held={self.held!r}, origin_column={self.origin_column})"

    @property
    def is_holding(self) -> bool:
        return not self.held.is_empty()

    def click(
        self,
        board: Board,
        column_index: Optional[int],
        slot: int,
        on_foundation: bool,
    ) -> Optional[DropOutcome]:
        """Handle one click: pick up when idle, drop when holding.

        Returns the drop outcome, or None when the click was a pick-up attempt.
        """
        if self.is_holding:
            return self.drop(board, column_index, on_foundation)
        if column_index is not None:
            self.pick_up(board, column_index, slot)
        return None

    def pick_up(self, board: Board, column_index: int, slot: int) -> bool:
        if self.is_holding:
            raise RuntimeError("already holding cards")
        column = board.column(column_index)
        visible_index = slot - column.hidden_count
        if visible_index < 0:
            return False
        taken = column.take_from(visible_index)
        if taken.is_empty():
            return False
        self.held = taken
        self.origin_column = column_index
        logger.debug("picked up %r from column %d", self.held, column_index)
        return True

    def drop(self, board: Board, column_index: Optional[int], on_foundation: bool) -> DropOutcome:
        if not self.is_holding:
            raise RuntimeError("nothing is held")
        if column_index is None:
            return self.cancel(board)

        if on_foundation and len(self.held) == 1:
            foundation_index = column_index - FOUNDATION_COLUMN_OFFSET
            if foundation_index >= 0:
                return self._drop_on_foundation(board, foundation_index)

        target = board.column(column_index)
        if not target.accepts(self.held.bottom()):
            return self.cancel(board)
        moved = len(self.held)
        target.append(self.held)
        self._finish(board)
        logger.debug("dropped %d card(s) on column %d", moved, column_index)
        return DropOutcome.TABLEAU

    def _drop_on_foundation(self, board: Board, foundation_index: int) -> DropOutcome:
        card = self.held.top()
        if not board.foundations.try_place(foundation_index, card):
            return self.cancel(board)
        self.held.pop()
        self._finish(board)
        logger.debug("placed %s on foundation %d", card, foundation_index)
        return DropOutcome.FOUNDATION

    def _finish(self, board: Board) -> None:
        board.column(self.origin_column).reveal_if_empty(board.card_source)
        self.origin_column = None

    def cancel(self, board: Board) -> DropOutcome:
        """Return the held cards to their column in their original order."""
        if self.origin_column is not None:
            board.column(self.origin_column).append(self.held)
            logger.debug("returned cards to column %d", self.origin_column)
        self.origin_column = None
        return DropOutcome.CANCELLED
