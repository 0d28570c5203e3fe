"""Directed graphs of pygame screens with one active screen at a time."""

from __future__ import annotations

from .__about__ import __version__
from .builder import ScreenControllerBuilder
from .controller import ScreenController
from .errors import (
    DuplicateScreenError,
    InvalidStateError,
    MissingStartingScreenError,
    NoSuccessorError,
    ScreenGraphError,
    UnknownScreenError,
    UnknownStartingScreenError,
    WrongScreenKindError,
)
from .registry import ChoiceRegistry, TransitionRegistry
from .screens import CHOICE_PENDING, ChoiceScreen, ScreenKind, TransitionScreen

__all__ = [
    "__version__",
    "CHOICE_PENDING",
    "ChoiceRegistry",
    "ChoiceScreen",
    "DuplicateScreenError",
    "InvalidStateError",
    "MissingStartingScreenError",
    "NoSuccessorError",
    "ScreenController",
    "ScreenControllerBuilder",
    "ScreenGraphError",
    "ScreenKind",
    "TransitionRegistry",
    "TransitionScreen",
    "UnknownScreenError",
    "UnknownStartingScreenError",
    "WrongScreenKindError",
]
