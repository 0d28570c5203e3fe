"""Keyboard-driven menu that reports the picked option as a choice."""

from __future__ import annotations

from typing import Iterable, Sequence

import pygame
from pygame import surface

from ..colors import GRAY, MENU_BACKGROUND, MENU_HINT, MENU_OPTION, MENU_SELECTED, MENU_TITLE
from ..render import show_message
from . import CHOICE_PENDING, ChoiceScreen

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class MenuScreen(ChoiceScreen):
    """Vertical keyboard menu; the confirmed option index is the choice."""

    def __init__(
        self,
        title: str,
        options: Sequence[str],
        *,
        selected: int = 0,
        disabled: Iterable[int] = (),
        hint: str | None = None,
        line_height: int = 22,
    ) -> None:
        if not options:
            raise ValueError("A menu needs at least one option")
        self.title = title
        self.options = list(options)
        self.disabled = frozenset(disabled)
        self.hint = hint
        self.line_height = line_height
        self._initial_selected = selected % len(self.options)
        self.selected = self._initial_selected
        self._choice = CHOICE_PENDING

    def is_finished(self) -> bool:
        return self._choice != CHOICE_PENDING

    def get_choice(self) -> int:
        return self._choice

    def reset(self) -> None:
        self.selected = self._initial_selected
        self._choice = CHOICE_PENDING

    def move(self, step: int) -> None:
        self.selected = (self.selected + step) % len(self.options)

    def confirm(self) -> bool:
        """Confirm the highlighted option; disabled options are ignored."""
        if self.selected in self.disabled:
            return False
        self._choice = self.selected
        return True

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.is_finished() or event.type != pygame.KEYDOWN:
            return
        if event.key in UP_KEYS:
            self.move(-1)
        elif event.key in DOWN_KEYS:
            self.move(1)
        elif event.key in CONFIRM_KEYS:
            self.confirm()

    def draw(self, target: surface.Surface) -> None:
        width, height = target.get_size()
        target.fill(MENU_BACKGROUND)
        show_message(target, self.title, 32, MENU_TITLE, (width // 2, 40))

        start_y = 80
        for idx, label in enumerate(self.options):
            if idx in self.disabled:
                color = GRAY
            elif idx == self.selected:
                color = MENU_SELECTED
            else:
                color = MENU_OPTION
            show_message(target, label, 18, color, (width // 2, start_y + idx * self.line_height))

        if self.hint:
            show_message(target, self.hint, 11, MENU_HINT, (width // 2, height - 30))
