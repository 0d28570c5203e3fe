"""Window and presentation helpers for screen_graph hosts."""

from __future__ import annotations

import pygame
from pygame import surface

from .log import get_logger

logger = get_logger(__name__)

WINDOW_SCALE_MIN = 1.0
WINDOW_SCALE_MAX = 4.0

current_window_size: tuple[int, int] | None = None

__all__ = [
    "WINDOW_SCALE_MIN",
    "WINDOW_SCALE_MAX",
    "open_window",
    "present",
]


def open_window(
    logical_size: tuple[int, int],
    scale: float = 1.0,
    *,
    caption: str | None = None,
) -> surface.Surface:
    """Create (or resize) the OS window; the logical render size stays fixed."""
    clamped_scale = max(WINDOW_SCALE_MIN, min(WINDOW_SCALE_MAX, scale))
    window_size = _normalize_window_size(
        (logical_size[0] * clamped_scale, logical_size[1] * clamped_scale)
    )
    window = pygame.display.set_mode(window_size, pygame.RESIZABLE)
    if caption:
        pygame.display.set_caption(caption)
    _update_window_size(window_size, source="open")
    return window


def present(logical_surface: surface.Surface) -> None:
    """Scale the logical surface to the window, letterboxing as needed, and flip."""
    window = pygame.display.get_surface()
    if window is None:
        return
    window_size = _normalize_window_size(window.get_size())
    _update_window_size(window_size, source="frame")
    logical_size = logical_surface.get_size()
    if window_size == logical_size:
        window.blit(logical_surface, (0, 0))
    else:
        # Preserve aspect ratio with letterboxing.
        scale_x = window_size[0] / max(1, logical_size[0])
        scale_y = window_size[1] / max(1, logical_size[1])
        scale = min(scale_x, scale_y)
        scaled_width = max(1, int(logical_size[0] * scale))
        scaled_height = max(1, int(logical_size[1] * scale))
        window.fill((0, 0, 0))
        if (scaled_width, scaled_height) == logical_size:
            scaled_surface = logical_surface
        elif scaled_width == logical_size[0] * 2 and scaled_height == logical_size[1] * 2:
            scaled_surface = pygame.transform.scale2x(logical_surface)
        else:
            scaled_surface = pygame.transform.scale(
                logical_surface, (scaled_width, scaled_height)
            )
        offset_x = (window_size[0] - scaled_width) // 2
        offset_y = (window_size[1] - scaled_height) // 2
        window.blit(scaled_surface, (offset_x, offset_y))
    pygame.display.flip()


def _normalize_window_size(size: tuple[float, float]) -> tuple[int, int]:
    width = max(1, int(size[0]))
    height = max(1, int(size[1]))
    return width, height


def _update_window_size(size: tuple[int, int], *, source: str) -> None:
    global current_window_size
    if size != current_window_size:
        logger.debug("Window size (%s): %dx%d", source, size[0], size[1])
        current_window_size = size
