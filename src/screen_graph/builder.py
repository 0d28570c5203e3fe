"""Fluent builder for :class:`ScreenController` instances."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .controller import ScreenController, ScreenListener
from .errors import (
    DuplicateScreenError,
    MissingStartingScreenError,
    UnknownScreenError,
    UnknownStartingScreenError,
    WrongScreenKindError,
)
from .log import get_logger
from .registry import ChoiceRegistry, TransitionRegistry
from .screens import ScreenKind, TransitionScreen, kind_of

logger = get_logger(__name__)

T = TypeVar("T", bound=TransitionScreen)

DanglingEdge = tuple[str, "int | None", str]


class ScreenControllerBuilder:
    """Collects screens and the edges between them, then builds a controller.

    Example::

        controller = (
            ScreenControllerBuilder()
            .register("loading", LoadingScreen())
            .register("menu", MenuScreen)
            .register("play", make_play_screen, kind=ScreenKind.TRANSITION)
            .set_succession("loading", "menu")
            .choice("menu", "play", 0)
            .with_starting_screen("loading")
            .build()
        )

    Edge sources are checked as soon as an edge is added; edge targets may be
    registered later and are only resolved when the controller advances
    (or at :meth:`build` time in strict mode).
    """

    def __init__(self, *, strict: bool = False, allow_overwrite: bool = True) -> None:
        self.strict = strict
        self.allow_overwrite = allow_overwrite
        self._transitions = TransitionRegistry()
        self._choices = ChoiceRegistry()
        self._starting_screen: str | None = None
        self._listeners: list[ScreenListener] = []

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> ScreenControllerBuilder:
        """Create a builder from the ``controller`` section of a config dict."""
        section = config.get("controller", {}) if config else {}
        return cls(
            strict=bool(section.get("strict", False)),
            allow_overwrite=bool(section.get("allow_overwrite", True)),
        )

    @property
    def starting_screen(self) -> str | None:
        return self._starting_screen

    def register(
        self,
        name: str,
        screen: TransitionScreen | Callable[[], TransitionScreen],
        *,
        kind: ScreenKind | None = None,
    ) -> ScreenControllerBuilder:
        """Register a screen, a screen class or a screen factory under ``name``.

        Instances and classes carry their own kind. Other callables are
        treated as factories and need ``kind`` to say what they produce.
        """
        if not name or not isinstance(name, str):
            raise ValueError(f"Screen name must be a non-empty string, got {name!r}")

        actual = kind_of(screen)
        if isinstance(screen, TransitionScreen):
            if kind is not None and kind is not actual:
                raise WrongScreenKindError(name, actual, kind)
            self._check_name_free(name, actual)
            self._registry(actual).add(name, screen)
            logger.debug("Registered %s screen %r", actual.value, name)
            return self

        if not callable(screen):
            raise TypeError(f"Cannot register {screen!r} as screen {name!r}")
        if actual is not None and kind is not None and kind is not actual:
            raise WrongScreenKindError(name, actual, kind)
        factory_kind = actual or kind
        if factory_kind is None:
            raise TypeError(
                f"Cannot tell what kind of screen the factory for {name!r} builds;"
                " pass kind=ScreenKind.TRANSITION or kind=ScreenKind.CHOICE"
            )
        self._check_name_free(name, factory_kind)
        self._registry(factory_kind).add_factory(name, screen)
        logger.debug("Registered %s screen factory %r", factory_kind.value, name)
        return self

    def set_succession(self, from_name: str, to_name: str) -> ScreenControllerBuilder:
        """Make ``to_name`` follow the transition screen ``from_name``."""
        if not self._transitions.has(from_name):
            raise UnknownScreenError(
                from_name, f"Cannot find a registered transition screen with name: {from_name!r}"
            )
        self._transitions.set_successor(from_name, to_name)
        return self

    follow = set_succession

    def choice(
        self, choice_screen_name: str, successor_name: str, choice: int
    ) -> ScreenControllerBuilder:
        """Make choice ``choice`` of ``choice_screen_name`` lead to ``successor_name``."""
        if not self._choices.has(choice_screen_name):
            raise UnknownScreenError(
                choice_screen_name,
                f"Cannot find a registered choice screen with name: {choice_screen_name!r}",
            )
        self._choices.set_choice(choice_screen_name, choice, successor_name)
        return self

    def add_listener(self, listener: ScreenListener) -> ScreenControllerBuilder:
        """Attach ``listener(previous_name, new_name)`` to the built controller.

        The listener also sees the activation of the starting screen, with
        ``previous_name`` of None.
        """
        self._listeners.append(listener)
        return self

    def with_starting_screen(self, name: str) -> ScreenControllerBuilder:
        if not self.is_registered(name):
            raise UnknownStartingScreenError(name)
        self._starting_screen = name
        return self

    def get(self, name: str, expected: type[T] | ScreenKind) -> T:
        """Return the screen registered as ``name`` after checking its type.

        ``expected`` is either a screen class or a :class:`ScreenKind`. A
        factory-backed screen is materialized by this call.
        """
        if self._transitions.has(name):
            screen = self._transitions.get(name)
        elif self._choices.has(name):
            screen = self._choices.get(name)
        else:
            raise UnknownScreenError(
                name, f"Could not find a screen registered with name: {name!r}"
            )

        if isinstance(expected, ScreenKind):
            if screen.kind is not expected:
                raise WrongScreenKindError(name, screen.kind, expected)
        elif not isinstance(screen, expected):
            raise WrongScreenKindError(name, type(screen), expected)
        return screen  # type: ignore[return-value]

    def is_registered(self, name: str | None) -> bool:
        return self._transitions.has(name) or self._choices.has(name)

    def dangling_edges(self) -> list[DanglingEdge]:
        """Return every edge whose target is not registered."""
        dangling: list[DanglingEdge] = []
        for source, target in self._transitions.edges():
            if not self.is_registered(target):
                dangling.append((source, None, target))
        for source, choice, target in self._choices.edges():
            if not self.is_registered(target):
                dangling.append((source, choice, target))
        return dangling

    def build(self, *, strict: bool | None = None) -> ScreenController:
        """Return a controller over this builder's registries.

        The registries are shared, not copied.
        """
        if self._starting_screen is None:
            raise MissingStartingScreenError()
        if self.strict if strict is None else strict:
            dangling = self.dangling_edges()
            if dangling:
                described = ", ".join(
                    f"{source}->{target}" if choice is None else f"{source}[{choice}]->{target}"
                    for source, choice, target in dangling
                )
                raise UnknownScreenError(
                    dangling[0][2], f"Edges lead to unregistered screens: {described}"
                )
        logger.debug("Building controller starting at %r", self._starting_screen)
        return ScreenController(
            self._transitions,
            self._choices,
            self._starting_screen,
            listeners=self._listeners,
        )

    def _registry(self, kind: ScreenKind) -> TransitionRegistry | ChoiceRegistry:
        return self._transitions if kind is ScreenKind.TRANSITION else self._choices

    def _check_name_free(self, name: str, kind: ScreenKind) -> None:
        other = self._choices if kind is ScreenKind.TRANSITION else self._transitions
        if other.has(name):
            raise DuplicateScreenError(
                name, f"{name!r} is already registered as a {other.kind.value} screen"
            )
        if self._registry(kind).has(name):
            if not self.allow_overwrite:
                raise DuplicateScreenError(name)
            logger.warning("Replacing screen registered as %r", name)


__all__ = ["ScreenControllerBuilder", "DanglingEdge"]
