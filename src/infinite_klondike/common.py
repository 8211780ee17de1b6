# common.py - shared settings, drawing helpers and the base Scene
import os
import json
import logging
import pygame
from typing import Optional

from infinite_klondike.cards import RANK_TO_TEXT, Card, Suit

logger = logging.getLogger(__name__)

# --- Settings ---

# Defaults (may be overridden by persisted settings)
_DEFAULT_SETTINGS = {
    "initial_columns": 50,   # columns dealt at game start
    "shown_columns": 7,      # columns filling the window at start
    "card_scale": 2,         # 1 | 2 | 3
    "back_color": "Blue",    # Blue | Grey | Red
}

_INT_LIMITS = {
    "initial_columns": (1, 10000),
    "shown_columns": (1, 100),
    "card_scale": (1, 3),
}

_CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)

BACK_COLORS = {
    "Blue": (34, 96, 200),
    "Grey": (110, 110, 120),
    "Red": (170, 30, 40),
}


def _settings_dir() -> str:
    # Prefer %APPDATA% on Windows, else ~/.infinite_klondike
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "InfiniteKlondike")
    return os.path.join(os.path.expanduser("~"), ".infinite_klondike")


def _settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")


def _clean_settings(data: dict) -> dict:
    """Keep known keys with usable values; anything else falls back to the default."""
    out = {}
    for key, (lo, hi) in _INT_LIMITS.items():
        if key not in data:
            continue
        try:
            value = int(data[key])
        except (TypeError, ValueError):
            logger.warning("ignoring setting %s=%r", key, data[key])
            continue
        out[key] = min(hi, max(lo, value))
    if "back_color" in data:
        if data["back_color"] in BACK_COLORS:
            out["back_color"] = data["back_color"]
        else:
            logger.warning("ignoring setting back_color=%r", data["back_color"])
    return out


def get_current_settings():
    return dict(_CURRENT_SETTINGS)


def load_settings():
    global _CURRENT_SETTINGS
    _CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)
    path = _settings_path()
    if not os.path.isfile(path):
        return get_current_settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("could not read settings from %s: %s", path, exc)
        return get_current_settings()
    if isinstance(data, dict):
        _CURRENT_SETTINGS.update(_clean_settings(data))
    else:
        logger.warning("settings file %s does not hold an object", path)
    return get_current_settings()


def save_settings(new_values: dict):
    # Merge and write to disk
    _CURRENT_SETTINGS.update(_clean_settings(new_values))
    try:
        os.makedirs(_settings_dir(), exist_ok=True)
        with open(_settings_path(), "w", encoding="utf-8") as f:
            json.dump(_CURRENT_SETTINGS, f, indent=2)
    except OSError as exc:
        logger.warning("could not save settings: %s", exc)


def seed_from_env() -> Optional[int]:
    raw = os.environ.get("INFINITE_KLONDIKE_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("INFINITE_KLONDIKE_SEED=%r is not an integer, dealing randomly", raw)
        return None


# Load any persisted settings now
load_settings()


# ---------- Configuration ----------
SCREEN_W, SCREEN_H = 1280, 800
TABLE_BG = (0, 0, 0)

# Colors
BLACK = (20, 20, 20)
WHITE = (245, 245, 245)
RED = (200, 20, 20)
LIGHT = (220, 220, 220)
OUTLINE = (90, 90, 90)

# Fonts are initialized via setup_fonts() AFTER pygame.init()
FONT_UI = None
FONT_CORNER_RANK = None


def setup_fonts(scale: int = 1):
    global FONT_UI, FONT_CORNER_RANK
    # None selects pygame's bundled default font, available on every platform
    FONT_UI = pygame.font.Font(None, 24)
    FONT_CORNER_RANK = pygame.font.Font(None, 18 * scale)


def draw_suit_shape(surface, center, suit, color, size=16):
    x, y = center
    if suit == Suit.DIAMOND:
        half = size//2
        points = [(x, y - half), (x + half, y), (x, y + half), (x - half, y)]
        pygame.draw.polygon(surface, color, points)
    elif suit == Suit.HEART:
        r = size//3
        pygame.draw.circle(surface, color, (x - r, y - r), r)
        pygame.draw.circle(surface, color, (x + r, y - r), r)
        tri = [(x - 2*r, y - r), (x + 2*r, y - r), (x, y + 2*r)]
        pygame.draw.polygon(surface, color, tri)
    elif suit == Suit.SPADE:
        r = size//3
        pygame.draw.circle(surface, color, (x - r, y), r)
        pygame.draw.circle(surface, color, (x + r, y), r)
        tri = [(x - 2*r, y), (x + 2*r, y), (x, y - 2*r)]
        pygame.draw.polygon(surface, color, tri)
        stem_w = max(2, size//6)
        pygame.draw.rect(surface, color, (x - stem_w//2, y + r, stem_w, size//2))
    else:  # club
        r = size//3
        pygame.draw.circle(surface, color, (x, y - r), r)
        pygame.draw.circle(surface, color, (x - r, y + r//3), r)
        pygame.draw.circle(surface, color, (x + r, y + r//3), r)
        stem_w = max(2, size//6)
        pygame.draw.rect(surface, color, (x - stem_w//2, y + r, stem_w, size//2))


# Cache, keyed by pixel size so a scale change never reuses stale surfaces
_card_face_cache = {}   # (code, size) -> Surface
_card_back_cache = {}   # (color, size) -> Surface
_placeholder_cache = {}  # size -> Surface


def invalidate_card_caches():
    _card_face_cache.clear()
    _card_back_cache.clear()
    _placeholder_cache.clear()


def get_card_surface(card: Card, size):
    key = (card.code, size)
    if key in _card_face_cache:
        return _card_face_cache[key]
    w, h = size
    radius = max(2, w // 10)
    surf = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0, 0, w, h), border_radius=radius)
    pygame.draw.rect(surf, OUTLINE, (0, 0, w, h), width=1, border_radius=radius)
    color = RED if card.is_red() else BLACK
    margin = max(2, w // 16)
    rtxt = FONT_CORNER_RANK.render(RANK_TO_TEXT[card.rank], True, color)
    surf.blit(rtxt, (margin, margin))
    # Suit sits beside the rank so both stay readable in a fanned column
    pip = max(6, rtxt.get_height() - 2)
    draw_suit_shape(surf, (w - margin - pip // 2 - 1, margin + rtxt.get_height() // 2), card.suit, color, size=pip)
    draw_suit_shape(surf, (w // 2, h // 2 + margin), card.suit, color, size=w // 2)
    _card_face_cache[key] = surf
    return surf


def get_back_surface(size, back_color: Optional[str] = None):
    back_color = back_color or _CURRENT_SETTINGS["back_color"]
    key = (back_color, size)
    if key in _card_back_cache:
        return _card_back_cache[key]
    w, h = size
    radius = max(2, w // 10)
    surf = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0, 0, w, h), border_radius=radius)
    pygame.draw.rect(surf, OUTLINE, (0, 0, w, h), width=1, border_radius=radius)
    inset = max(2, w // 12)
    inner_rect = pygame.Rect(inset, inset, w - 2*inset, h - 2*inset)
    pygame.draw.rect(surf, BACK_COLORS.get(back_color, BACK_COLORS["Blue"]), inner_rect, border_radius=radius // 2)
    for i in range(-h, w, 8):
        pygame.draw.line(surf, LIGHT, (i, inset), (i + h, h - inset), 1)
    _card_back_cache[key] = surf
    return surf


def get_placeholder_surface(size):
    """Outline drawn where a pile is empty."""
    if size in _placeholder_cache:
        return _placeholder_cache[size]
    w, h = size
    surf = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.rect(surf, (255, 255, 255, 60), (0, 0, w, h), width=2, border_radius=max(2, w // 10))
    _placeholder_cache[size] = surf
    return surf


# ---------- Base Scene ----------
class Scene:
    def __init__(self, app):
        self.app = app
        self.next_scene = None
        self.quit_requested = False
    def handle_event(self, e): pass
    def update(self, dt): pass
    def draw(self, screen): pass
