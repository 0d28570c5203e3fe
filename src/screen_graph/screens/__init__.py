"""Screen framework types for screen_graph.

Every screen handed to the registries is either a transition screen (one
successor) or a choice screen (successor picked by an integer index). The
kind is carried as a tag on the class so registries and the builder can
dispatch on it without caring about the rest of the hierarchy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:  # pragma: no cover - typing only
    import pygame
    from pygame import surface

CHOICE_PENDING = -1


class ScreenKind(Enum):
    """Tag describing how a screen picks its successor."""

    TRANSITION = "transition"
    CHOICE = "choice"


class TransitionScreen(ABC):
    """A screen that can be completed and is always followed by the same screen.

    Only ``is_finished``, ``reset`` and ``dispose`` are used by the
    controller. The remaining hooks are called by :class:`ScreenRunner`
    once per frame and default to no-ops.
    """

    kind: ScreenKind = ScreenKind.TRANSITION

    @abstractmethod
    def is_finished(self) -> bool:
        """Return True once the screen has completed.

        Should keep returning True until :meth:`reset` is called.
        """

    @abstractmethod
    def reset(self) -> None:
        """Return the screen to its initial, unfinished state."""

    def dispose(self) -> None:
        """Release resources held by the screen."""

    def on_show(self) -> None:
        pass

    def on_hide(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> None:
        pass

    def update(self, dt_ms: int) -> None:
        pass

    def draw(self, target: surface.Surface) -> None:
        pass

    def resize(self, size: tuple[int, int]) -> None:
        pass


class ChoiceScreen(TransitionScreen):
    """A screen that is not always followed by the same screen, e.g. a menu."""

    kind: ScreenKind = ScreenKind.CHOICE

    @abstractmethod
    def get_choice(self) -> int:
        """Return the index of the next screen, or ``CHOICE_PENDING`` if unfinished."""


T = TypeVar("T", bound=TransitionScreen)

TransitionScreenFactory = Callable[[], TransitionScreen]
ChoiceScreenFactory = Callable[[], ChoiceScreen]
ScreenFactory = Callable[[], T]


def kind_of(obj: object) -> ScreenKind | None:
    """Return the kind tag of a screen instance or screen class."""
    if isinstance(obj, type):
        if issubclass(obj, TransitionScreen):
            return obj.kind
        return None
    if isinstance(obj, TransitionScreen):
        return obj.kind
    return None


__all__ = [
    "CHOICE_PENDING",
    "ScreenKind",
    "TransitionScreen",
    "ChoiceScreen",
    "TransitionScreenFactory",
    "ChoiceScreenFactory",
    "ScreenFactory",
    "kind_of",
]
