"""Named screen registries.

A registry slot holds either a materialized screen or a zero-argument
factory, never both. The first :meth:`get` of a factory-backed name calls
the factory once and turns the slot into an instance for good.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from .errors import NoSuccessorError, UnknownScreenError, WrongScreenKindError
from .log import get_logger
from .screens import ChoiceScreen, ScreenKind, TransitionScreen, kind_of

logger = get_logger(__name__)

S = TypeVar("S", bound=TransitionScreen)


class _ScreenRegistry(Generic[S]):
    kind: ScreenKind

    def __init__(self) -> None:
        self._screens: dict[str, S] = {}
        self._factories: dict[str, Callable[[], S]] = {}

    def add(self, name: str, screen: S) -> None:
        """Register an already constructed screen under ``name``."""
        self._check_kind(name, screen)
        self._factories.pop(name, None)
        self._screens[name] = screen

    def add_factory(self, name: str, factory: Callable[[], S]) -> None:
        """Register a factory that builds the screen on first use."""
        if not callable(factory):
            raise TypeError(f"Factory for {name!r} is not callable: {factory!r}")
        self._screens.pop(name, None)
        self._factories[name] = factory

    def has(self, name: str | None) -> bool:
        """Return True if ``name`` belongs to a screen or a pending factory."""
        if not name:
            return False
        return name in self._screens or name in self._factories

    def is_materialized(self, name: str | None) -> bool:
        return bool(name and name in self._screens)

    def get(self, name: str) -> S:
        """Return the screen for ``name``, materializing its factory if needed."""
        screen = self._screens.get(name)
        if screen is not None:
            return screen
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownScreenError(name)
        screen = factory()
        self._check_kind(name, screen)
        self._screens[name] = screen
        del self._factories[name]
        logger.debug("Materialized %s screen %r", self.kind.value, name)
        return screen

    def names(self) -> list[str]:
        return [*self._screens, *self._factories]

    def materialized(self) -> dict[str, S]:
        return dict(self._screens)

    def _check_kind(self, name: str, screen: object) -> None:
        if kind_of(screen) is not self.kind:
            raise WrongScreenKindError(name, type(screen), self.kind)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._screens) + len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


class TransitionRegistry(_ScreenRegistry[TransitionScreen]):
    """Transition screens and the single screen that follows each of them."""

    kind = ScreenKind.TRANSITION

    def __init__(self) -> None:
        super().__init__()
        self._successors: dict[str, str] = {}

    def set_successor(self, name: str, successor: str) -> None:
        """Set the screen to follow ``name``.

        ``successor`` does not have to be registered yet; it is resolved when
        the controller advances.
        """
        if not self.has(name):
            raise UnknownScreenError(name)
        self._successors[name] = successor

    def successor_of(self, name: str) -> str:
        try:
            return self._successors[name]
        except KeyError:
            raise NoSuccessorError(name) from None

    def edges(self) -> Iterator[tuple[str, str]]:
        yield from self._successors.items()


class ChoiceRegistry(_ScreenRegistry[ChoiceScreen]):
    """Choice screens and the screen each of their choices leads to."""

    kind = ScreenKind.CHOICE

    def __init__(self) -> None:
        super().__init__()
        self._choices: dict[tuple[str, int], str] = {}

    def set_choice(self, name: str, choice: int, successor: str) -> None:
        """Map ``choice`` of screen ``name`` to the screen named ``successor``."""
        if not self.has(name):
            raise UnknownScreenError(name)
        if isinstance(choice, bool) or not isinstance(choice, int) or choice < 0:
            raise ValueError(f"Choice must be a non-negative integer, got {choice!r}")
        self._choices[(name, choice)] = successor

    def successor_of(self, name: str, choice: int) -> str:
        try:
            return self._choices[(name, choice)]
        except KeyError:
            raise NoSuccessorError(name, choice) from None

    def choices_of(self, name: str) -> dict[int, str]:
        return {
            choice: successor
            for (source, choice), successor in self._choices.items()
            if source == name
        }

    def edges(self) -> Iterator[tuple[str, int, str]]:
        for (name, choice), successor in self._choices.items():
            yield name, choice, successor


__all__ = ["TransitionRegistry", "ChoiceRegistry"]
