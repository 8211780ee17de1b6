# __main__.py - entry point
import logging
import os
import pygame
from infinite_klondike import common as C
from infinite_klondike.modes.infinite import InfiniteKlondikeScene


def _initial_window_size():
    info = pygame.display.Info()
    # Keep a safety margin so the window never hides under taskbar
    margin_w, margin_h = 120, 140
    w = min(C.SCREEN_W, max(640, info.current_w - margin_w))
    h = min(C.SCREEN_H, max(480, info.current_h - margin_h))
    return w, h


def _setup_logging():
    level_name = os.environ.get("INFINITE_KLONDIKE_LOG", "WARNING").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main():
    _setup_logging()
    # Center window and init
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()

    # Pick a safe default size for this desktop
    w, h = _initial_window_size()
    C.SCREEN_W, C.SCREEN_H = w, h
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    pygame.display.set_caption("Infinite Klondike")
    settings = C.load_settings()
    C.setup_fonts(settings["card_scale"])
    clock = pygame.time.Clock()

    scene = InfiniteKlondikeScene(app=None, seed=C.seed_from_env(), settings=settings)

    running = True
    while running:
        clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                # Apply new size and let the scene grow the board to fill it
                C.SCREEN_W, C.SCREEN_H = e.size
                screen = pygame.display.set_mode((C.SCREEN_W, C.SCREEN_H), pygame.RESIZABLE)
                scene.compute_layout()
            else:
                scene.handle_event(e)
        if scene.quit_requested:
            running = False
        elif scene.next_scene is not None:
            scene = scene.next_scene
        scene.draw(screen)
        pygame.display.flip()
    pygame.quit()


if __name__ == "__main__":
    main()
