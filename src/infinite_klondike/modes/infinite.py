# infinite.py - the Infinite Klondike table: unbounded tableau, pan with the right mouse button
import logging
from typing import Optional, Tuple

import pygame

from infinite_klondike import common as C
from infinite_klondike import mechanics as M
from infinite_klondike.board import Board
from infinite_klondike.session import FOUNDATION_COLUMN_OFFSET, GrabSession
from infinite_klondike.viewport import Camera

logger = logging.getLogger(__name__)

HINTS = "Click: pick up / drop   Right drag: pan   N: New   Home: Recenter   Esc: Quit"


class InfiniteKlondikeScene(C.Scene):
    """
    Infinite Klondike
    - Columns continue forever to the right; column n starts with n face-down cards.
    - Any face-up card can be lifted together with the cards above it.
    - Build down in alternating colours; any card may go on a fully empty column.
    - Foundations are endless and each one builds up from an Ace in one suit.
    - A card is revealed whenever a column runs out of face-up cards.
    """

    def __init__(self, app, seed: Optional[int] = None, settings: Optional[dict] = None):
        super().__init__(app)
        settings = settings if settings is not None else C.get_current_settings()
        self.seed = seed
        self.initial_columns = int(settings["initial_columns"])
        self.shown_columns = int(settings["shown_columns"])
        self.scale = int(settings["card_scale"])
        self.drag_pan = M.DragPanController()
        self.camera = Camera.initial(C.SCREEN_W, self.shown_columns, self.scale)
        self.board: Board
        self.session: GrabSession
        self.deal_new()

    def deal_new(self):
        self.board = Board.new_game(self.seed, width=self.initial_columns)
        self.session = GrabSession()
        self.compute_layout()
        logger.info("new game, seed=%s, %d columns", self.seed, len(self.board))

    def recenter(self):
        self.camera = Camera.initial(C.SCREEN_W, self.shown_columns, self.scale)
        self.compute_layout()

    def compute_layout(self):
        # Called after panning and window resizes: make sure every on-screen column exists.
        self.board.ensure_width(self.camera.visible_column_count(C.SCREEN_W))

    def pointer_target(self, pos) -> Tuple[Optional[int], int, bool]:
        mx, my = pos
        column = self.camera.column_under(mx)
        if column is not None and column >= len(self.board):
            column = None
        return column, self.camera.slot_under(my), self.camera.on_foundation_row(my)

    # ---------- Event handling ----------
    def handle_event(self, e):
        if self.drag_pan.handle_event(e, camera=self.camera, on_pan=self.compute_layout):
            return
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            column, slot, on_foundation = self.pointer_target(e.pos)
            self.session.click(self.board, column, slot, on_foundation)
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_n:
                self.deal_new()
            elif e.key == pygame.K_HOME:
                self.recenter()
            elif e.key == pygame.K_ESCAPE:
                self.quit_requested = True

    # ---------- Drawing ----------
    def draw(self, screen):
        screen.fill(C.TABLE_BG)
        cam = self.camera
        size = cam.card_size
        stop = min(len(self.board), cam.visible_column_count(screen.get_width()))
        start = min(cam.first_visible_column(), stop)

        # Foundations
        fy = cam.foundation_y()
        for fi in range(max(0, start - FOUNDATION_COLUMN_OFFSET), max(0, stop - FOUNDATION_COLUMN_OFFSET)):
            top = self.board.foundations.top_of(fi)
            surf = C.get_card_surface(top, size) if top is not None else C.get_placeholder_surface(size)
            screen.blit(surf, (cam.foundation_x(fi), fy))

        # Tableau
        back = C.get_back_surface(size)
        for index, column in enumerate(self.board.columns_in(start, stop), start):
            x = cam.column_x(index)
            if column.is_empty():
                screen.blit(C.get_placeholder_surface(size), (x, cam.slot_y(0)))
                continue
            for slot in range(column.hidden_count):
                screen.blit(back, (x, cam.slot_y(slot)))
            for n, card in enumerate(column.visible):
                screen.blit(C.get_card_surface(card, size), (x, cam.slot_y(column.hidden_count + n)))

        # Held cards follow the pointer
        if self.session.is_holding:
            mx, my = pygame.mouse.get_pos()
            for n, card in enumerate(self.session.held):
                screen.blit(C.get_card_surface(card, size), (mx, my + cam.slot_pitch * n))

        h = C.FONT_UI.render(HINTS, True, C.WHITE)
        screen.blit(h, (10, screen.get_height() - h.get_height() - 8))
