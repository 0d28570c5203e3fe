"""Color palette shared by the bundled screens."""

from __future__ import annotations

# Basic palette
WHITE: tuple[int, int, int] = (255, 255, 255)
BLACK: tuple[int, int, int] = (0, 0, 0)
GRAY: tuple[int, int, int] = (100, 100, 100)
LIGHT_GRAY: tuple[int, int, int] = (200, 200, 200)
YELLOW: tuple[int, int, int] = (255, 255, 0)

# Menu colors
MENU_BACKGROUND: tuple[int, int, int] = BLACK
MENU_TITLE: tuple[int, int, int] = LIGHT_GRAY
MENU_OPTION: tuple[int, int, int] = WHITE
MENU_SELECTED: tuple[int, int, int] = YELLOW
MENU_HINT: tuple[int, int, int] = GRAY
