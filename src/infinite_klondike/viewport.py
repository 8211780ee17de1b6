"""Mapping between screen pixels and logical board coordinates.

The board has no notion of pixels. The camera is the pixel position of the
logical origin on screen; scenes pan it and ask it which column, slot and
row lie under the pointer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from infinite_klondike.session import FOUNDATION_COLUMN_OFFSET

# Unscaled layout, matching the 22x32 card art drawn at double size.
CARD_W, CARD_H = 44, 64
COLUMN_PITCH = 48
SLOT_PITCH = 16
TABLEAU_TOP = 68
CAMERA_TOP = 2


@dataclass
class Camera:
    x: float = 0.0
    y: float = 0.0
    scale: int = 1

    @classmethod
    def initial(cls, screen_w: int, shown_columns: int = 7, scale: int = 1) -> "Camera":
        """Place the camera so ``shown_columns`` columns fill the right of the window."""
        pitch = COLUMN_PITCH * scale
        return cls(x=screen_w - (shown_columns - 1) * pitch, y=CAMERA_TOP * scale, scale=scale)

    @property
    def column_pitch(self) -> int:
        return COLUMN_PITCH * self.scale

    @property
    def slot_pitch(self) -> int:
        return SLOT_PITCH * self.scale

    @property
    def tableau_top(self) -> int:
        return TABLEAU_TOP * self.scale

    @property
    def card_size(self):
        return CARD_W * self.scale, CARD_H * self.scale

    def pan(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    # --- screen -> board ---
    def column_under(self, px: float) -> Optional[int]:
        x = px - self.x + self.column_pitch
        if x < 0:
            return None
        return int(x // self.column_pitch)

    def slot_under(self, py: float) -> int:
        return math.floor((py - self.y - self.tableau_top) / self.slot_pitch)

    def on_foundation_row(self, py: float) -> bool:
        return py - self.y < self.tableau_top

    def first_visible_column(self) -> int:
        return max(0, math.floor(-self.x / self.column_pitch))

    def visible_column_count(self, screen_w: int) -> int:
        """Number of columns, counted from column 0, needed to fill the screen."""
        return max(0, int(screen_w - self.x) // self.column_pitch + 2)

    # --- board -> screen ---
    def column_x(self, index: int) -> int:
        return int(self.x + self.column_pitch * (index - 1))

    def slot_y(self, slot: int) -> int:
        return int(self.y + self.tableau_top + self.slot_pitch * slot)

    def foundation_x(self, index: int) -> int:
        return self.column_x(index + FOUNDATION_COLUMN_OFFSET)

    def foundation_y(self) -> int:
        return int(self.y)
