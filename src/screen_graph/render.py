"""Text drawing helpers shared by the bundled screens."""

from __future__ import annotations

import pygame
from pygame import surface

from .log import get_logger

logger = get_logger(__name__)

_FONT_CACHE: dict[tuple[str | None, int], pygame.font.Font] = {}


def load_font(size: int, path: str | None = None) -> pygame.font.Font:
    """Load and cache a pygame font for the given file and size.

    ``path`` of None selects pygame's default font.
    """
    normalized_size = max(1, int(size))
    cache_key = (path, normalized_size)
    cached = _FONT_CACHE.get(cache_key)
    if cached is not None:
        return cached

    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(path, normalized_size)
    _FONT_CACHE[cache_key] = font
    return font


def clear_font_cache() -> None:
    _FONT_CACHE.clear()


def show_message(
    target: surface.Surface,
    text: str,
    size: int,
    color: tuple[int, int, int],
    position: tuple[int, int],
) -> pygame.Rect | None:
    """Draw ``text`` centered on ``position`` and return the covered rect."""
    try:
        font = load_font(size)
        text_surface = font.render(text, False, color)
        text_rect = text_surface.get_rect(center=position)
        target.blit(text_surface, text_rect)
        return text_rect
    except pygame.error as e:
        logger.warning("Error rendering text %r: %s", text, e)
        return None


__all__ = ["load_font", "clear_font_cache", "show_message"]
