import pygame
from typing import Callable, Optional, Tuple


class DragPanController:
    """Pan a camera while a mouse button is held down.

    The camera keeps the offset it had when the button went down plus the
    pointer's travel since then, so the board follows the pointer exactly.
    ``on_pan`` runs after every move; scenes use it to grow the board.
    """

    def __init__(self, *, button: int = 3) -> None:
        self.button = int(button)
        self._anchor: Optional[Tuple[int, int]] = None
        self._camera_anchor: Optional[Tuple[float, float]] = None

    @property
    def active(self) -> bool:
        return self._anchor is not None

    def handle_event(self, event, *, camera, on_pan: Callable[[], None]) -> bool:
        """Process a pygame event; returns True when it was consumed by panning."""

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == self.button:
            self._anchor = event.pos
            self._camera_anchor = (camera.x, camera.y)
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == self.button:
            if self.active:
                self._anchor = None
                self._camera_anchor = None
                return True
            return False

        if event.type == pygame.MOUSEMOTION and self.active:
            mx, my = event.pos
            ax, ay = self._anchor
            cx, cy = self._camera_anchor
            camera.x = cx + (mx - ax)
            camera.y = cy + (my - ay)
            on_pan()
            return True

        return False
