"""Frame loop that drives a :class:`ScreenController` with pygame."""

from __future__ import annotations

from typing import Any, Callable, Iterable

import pygame
from pygame import surface, time

from .controller import ScreenController
from .log import get_logger
from .windowing import present

logger = get_logger(__name__)


class ScreenRunner:
    """Feeds events to the active screen, draws it and advances the controller.

    The loop stops when a ``QUIT`` event arrives or when the active screen
    is one of ``exit_names``. The controller is disposed when :meth:`run`
    returns.
    """

    def __init__(
        self,
        controller: ScreenController,
        target: surface.Surface,
        *,
        fps: int = 60,
        exit_names: Iterable[str] = (),
        present_fn: Callable[[surface.Surface], None] = present,
        clock: time.Clock | None = None,
        dispose_inactive: bool = False,
    ) -> None:
        self.controller = controller
        self.target = target
        self.fps = fps
        self.exit_names = frozenset(exit_names)
        self.present_fn = present_fn
        self.clock = clock
        self.dispose_inactive = dispose_inactive
        self.frames = 0

    @classmethod
    def from_config(
        cls,
        controller: ScreenController,
        target: surface.Surface,
        config: dict[str, Any],
        **kwargs: Any,
    ) -> ScreenRunner:
        display = config.get("display", {})
        controller_cfg = config.get("controller", {})
        kwargs.setdefault("fps", int(display.get("fps", 60)))
        kwargs.setdefault("dispose_inactive", bool(controller_cfg.get("dispose_inactive", False)))
        return cls(controller, target, **kwargs)

    def should_exit(self) -> bool:
        return self.controller.current_name in self.exit_names

    def step(self, events: Iterable[pygame.event.Event], dt_ms: int) -> bool:
        """Run one frame. Returns False when the loop should stop."""
        if self.should_exit():
            return False
        screen = self.controller.current_screen
        for event in events:
            if event.type == pygame.QUIT:
                logger.info("Quit requested on screen %r", self.controller.current_name)
                return False
            if event.type == pygame.VIDEORESIZE:
                screen.resize(event.size)
            screen.handle_event(event)
        screen.update(dt_ms)
        screen.draw(self.target)
        self.present_fn(self.target)
        self.frames += 1
        if self.controller.advance():
            logger.debug("Advanced to %r after %d frames", self.controller.current_name, self.frames)
        return not self.should_exit()

    def run(self) -> str:
        """Loop until told to stop; return the name of the last active screen."""
        clock = self.clock or pygame.time.Clock()
        logger.info("Frame loop started on screen %r", self.controller.current_name)
        dt_ms = 0
        try:
            while self.step(pygame.event.get(), dt_ms):
                dt_ms = clock.tick(self.fps)
        finally:
            self.controller.dispose(include_inactive=self.dispose_inactive)
        logger.info(
            "Frame loop stopped on screen %r after %d frames",
            self.controller.current_name,
            self.frames,
        )
        return self.controller.current_name


__all__ = ["ScreenRunner"]
