"""Exceptions raised by the screen graph registries, builder and controller."""

from __future__ import annotations

__all__ = [
    "ScreenGraphError",
    "UnknownScreenError",
    "NoSuccessorError",
    "UnknownStartingScreenError",
    "MissingStartingScreenError",
    "WrongScreenKindError",
    "InvalidStateError",
    "DuplicateScreenError",
]


class ScreenGraphError(Exception):
    """Base class for every error raised by screen_graph."""


class UnknownScreenError(ScreenGraphError, LookupError):
    """A referenced name is not registered."""

    def __init__(self, name: str | None, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"No screen registered with name: {name!r}")


class NoSuccessorError(ScreenGraphError, LookupError):
    """A screen finished but no edge leads out of it."""

    def __init__(self, name: str, choice: int | None = None) -> None:
        self.name = name
        self.choice = choice
        if choice is None:
            message = f"No successor set for transition screen: {name!r}"
        else:
            message = f"Choice {choice} does not exist for screen: {name!r}"
        super().__init__(message)


class UnknownStartingScreenError(UnknownScreenError):
    """The starting screen is not registered."""

    def __init__(self, name: str | None) -> None:
        super().__init__(
            name, f"The starting screen {name!r} does not refer to any registered screen"
        )


class MissingStartingScreenError(ScreenGraphError, ValueError):
    """``build()`` was called before a starting screen was chosen."""

    def __init__(self) -> None:
        super().__init__("A starting screen must be set before building")


class WrongScreenKindError(ScreenGraphError, TypeError):
    """A screen is not of the kind or type the caller expected."""

    def __init__(self, name: str, actual: object, expected: object) -> None:
        self.name = name
        self.actual = actual
        self.expected = expected
        super().__init__(f"{name!r} screen is of type {actual} not of type {expected}")


class InvalidStateError(ScreenGraphError, RuntimeError):
    """The controller cannot resolve a name it was asked to activate."""

    def __init__(self, name: str | None, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"No screen found with name: {name!r}")


class DuplicateScreenError(ScreenGraphError, ValueError):
    """A name is already taken and may not be registered again."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"A screen is already registered with name: {name!r}")
