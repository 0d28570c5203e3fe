"""Message screen that finishes after a timeout or a key press."""

from __future__ import annotations

import pygame
from pygame import surface

from ..colors import BLACK, LIGHT_GRAY, MENU_HINT
from ..render import show_message
from . import TransitionScreen


class SplashScreen(TransitionScreen):
    """Show a message until a timeout runs out or, if skippable, a key is pressed.

    With ``duration_ms`` of None the screen waits for a key press.
    """

    def __init__(
        self,
        message: str,
        *,
        duration_ms: int | None = 2000,
        skippable: bool = True,
        hint: str | None = None,
        background: tuple[int, int, int] = BLACK,
    ) -> None:
        if duration_ms is None and not skippable:
            raise ValueError("A splash screen without a duration must be skippable")
        self.message = message
        self.duration_ms = duration_ms
        self.skippable = skippable
        self.hint = hint
        self.background = background
        self.elapsed_ms = 0
        self._finished = False

    def is_finished(self) -> bool:
        return self._finished

    def reset(self) -> None:
        self.elapsed_ms = 0
        self._finished = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if not self.skippable:
            return
        if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
            self._finished = True

    def update(self, dt_ms: int) -> None:
        if self._finished:
            return
        self.elapsed_ms += max(0, int(dt_ms))
        if self.duration_ms is not None and self.elapsed_ms >= self.duration_ms:
            self._finished = True

    def draw(self, target: surface.Surface) -> None:
        width, height = target.get_size()
        target.fill(self.background)
        show_message(target, self.message, 24, LIGHT_GRAY, (width // 2, height // 2))
        if self.hint:
            show_message(target, self.hint, 12, MENU_HINT, (width // 2, height - 30))
