"""The screen controller: one active screen and the rules for leaving it."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .errors import InvalidStateError, UnknownStartingScreenError
from .log import get_logger
from .registry import ChoiceRegistry, TransitionRegistry
from .screens import ChoiceScreen, ScreenKind, TransitionScreen

logger = get_logger(__name__)

ScreenListener = Callable[[Optional[str], str], None]


class ScreenController:
    """Keeps track of the active screen of a screen graph.

    The driver calls :meth:`advance` once per frame. When the active screen
    reports that it has finished, the controller looks up the successor
    (directly for transition screens, by the reported choice for choice
    screens) and makes it active. A screen that becomes active again after
    having been active before is reset first.

    A failed :meth:`advance` leaves the active screen and the set of used
    screens untouched. The controller holds on to the screen objects it
    activated, so replacing a registration later does not change the active
    screen or what :meth:`dispose` releases.
    """

    def __init__(
        self,
        transitions: TransitionRegistry,
        choices: ChoiceRegistry,
        starting_screen: str,
        *,
        listeners: Iterable[ScreenListener] = (),
    ) -> None:
        self._transitions = transitions
        self._choices = choices
        self._current_name: str | None = None
        self._current_kind: ScreenKind | None = None
        self._current_screen: TransitionScreen | None = None
        # name -> handle of its latest activation, in activation order
        self._used: dict[str, TransitionScreen] = {}
        # every distinct handle ever activated, keyed by identity
        self._activated: dict[int, tuple[str, TransitionScreen]] = {}
        self._listeners: list[ScreenListener] = list(listeners)
        self._disposed: set[int] = set()
        if self._kind_of(starting_screen) is None:
            raise UnknownStartingScreenError(starting_screen)
        self._activate(starting_screen)

    @property
    def transitions(self) -> TransitionRegistry:
        return self._transitions

    @property
    def choices(self) -> ChoiceRegistry:
        return self._choices

    @property
    def current_name(self) -> str:
        if self._current_name is None:
            raise InvalidStateError(None, "The controller has no active screen")
        return self._current_name

    @property
    def current_kind(self) -> ScreenKind:
        if self._current_kind is None:
            raise InvalidStateError(self._current_name)
        return self._current_kind

    @property
    def current_screen(self) -> TransitionScreen:
        """Return the active screen."""
        if self._current_screen is None:
            raise InvalidStateError(self._current_name)
        return self._current_screen

    @property
    def used_screens(self) -> tuple[str, ...]:
        """Names of every screen that has been active, in activation order."""
        return tuple(self._used)

    def was_used(self, name: str) -> bool:
        return name in self._used

    def add_listener(self, listener: ScreenListener) -> None:
        """Call ``listener(previous_name, new_name)`` after every screen change.

        Pass listeners to the constructor to also see the initial activation.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: ScreenListener) -> None:
        self._listeners.remove(listener)

    def advance(self) -> bool:
        """Move to the next screen if the active one has finished.

        Returns True if the active screen changed during this call.
        """
        name = self.current_name
        screen = self.current_screen
        if not screen.is_finished():
            return False

        if self.current_kind is ScreenKind.TRANSITION:
            next_name = self._transitions.successor_of(name)
        else:
            if not isinstance(screen, ChoiceScreen):
                raise InvalidStateError(name, f"Screen {name!r} is not a choice screen")
            choice = screen.get_choice()
            if choice < 0:
                raise InvalidStateError(
                    name,
                    f"Choice screen {name!r} is finished but reported choice {choice}",
                )
            next_name = self._choices.successor_of(name, choice)

        self._activate(next_name)
        return True

    def dispose(self, *, include_inactive: bool = False) -> None:
        """Dispose every screen that has at some point been the active screen.

        With ``include_inactive`` materialized screens that were never
        activated are disposed as well. Factories that never fired are left
        alone. Each screen instance is disposed at most once, so calling this
        again only picks up screens activated since.
        """
        targets = list(self._activated.values())
        if include_inactive:
            for registry in (self._transitions, self._choices):
                for name, screen in registry.materialized().items():
                    if id(screen) not in self._activated:
                        targets.append((name, screen))

        disposed = 0
        for name, screen in targets:
            if id(screen) in self._disposed:
                continue
            self._disposed.add(id(screen))
            logger.debug("Disposing screen %r", name)
            screen.dispose()
            disposed += 1
        if not disposed:
            logger.debug("Nothing left to dispose")

    def __enter__(self) -> ScreenController:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _kind_of(self, name: str | None) -> ScreenKind | None:
        # A name registered as both kinds resolves as a transition screen.
        if self._transitions.has(name):
            return ScreenKind.TRANSITION
        if self._choices.has(name):
            return ScreenKind.CHOICE
        return None

    def _resolve(self, name: str | None) -> tuple[ScreenKind, TransitionScreen]:
        kind = self._kind_of(name)
        if kind is ScreenKind.TRANSITION:
            return kind, self._transitions.get(name)
        if kind is ScreenKind.CHOICE:
            return kind, self._choices.get(name)
        raise InvalidStateError(name)

    def _activate(self, name: str) -> None:
        kind, screen = self._resolve(name)
        if name in self._used:
            logger.debug("Resetting screen %r", name)
            screen.reset()

        previous_name = self._current_name
        previous_screen = self._current_screen
        if previous_screen is not None:
            previous_screen.on_hide()
        try:
            screen.on_show()
        except Exception:
            if previous_screen is not None:
                previous_screen.on_show()
            raise

        self._current_name = name
        self._current_kind = kind
        self._current_screen = screen
        self._used[name] = screen
        self._activated.setdefault(id(screen), (name, screen))
        logger.debug("Active screen: %r -> %r", previous_name, name)

        # The switch is committed; a failing listener must not undo it.
        for listener in list(self._listeners):
            try:
                listener(previous_name, name)
            except Exception:
                logger.exception(
                    "Screen listener %r failed on %r -> %r", listener, previous_name, name
                )


__all__ = ["ScreenController", "ScreenListener"]
