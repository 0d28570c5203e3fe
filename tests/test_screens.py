from __future__ import annotations

import pytest

from screen_graph.screens import CHOICE_PENDING, ChoiceScreen, ScreenKind, TransitionScreen, kind_of

from screen_fakes import FakeChoiceScreen, FakeTransitionScreen

pygame = pytest.importorskip("pygame")

from screen_graph.screens.menu import MenuScreen  # noqa: E402
from screen_graph.screens.splash import SplashScreen  # noqa: E402


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _init_pygame() -> None:
    if not pygame.get_init():
        pygame.init()


def test_kind_of_reads_instances_and_classes() -> None:
    assert kind_of(FakeTransitionScreen()) is ScreenKind.TRANSITION
    assert kind_of(FakeChoiceScreen()) is ScreenKind.CHOICE
    assert kind_of(FakeChoiceScreen) is ScreenKind.CHOICE
    assert kind_of(MenuScreen) is ScreenKind.CHOICE
    assert kind_of(SplashScreen) is ScreenKind.TRANSITION
    assert kind_of(object()) is None
    assert kind_of(int) is None
    assert kind_of(lambda: None) is None


def test_capability_classes_are_abstract() -> None:
    with pytest.raises(TypeError):
        TransitionScreen()  # type: ignore[abstract]
    with pytest.raises(TypeError):
        ChoiceScreen()  # type: ignore[abstract]


def test_menu_navigation_and_confirmation() -> None:
    menu = MenuScreen("Main", ["Play", "Options", "Quit"])
    assert not menu.is_finished()
    assert menu.get_choice() == CHOICE_PENDING

    menu.handle_event(_key(pygame.K_DOWN))
    menu.handle_event(_key(pygame.K_s))
    assert menu.selected == 2
    menu.handle_event(_key(pygame.K_DOWN))
    assert menu.selected == 0
    menu.handle_event(_key(pygame.K_UP))
    assert menu.selected == 2
    menu.handle_event(_key(pygame.K_w))
    menu.handle_event(_key(pygame.K_RETURN))

    assert menu.is_finished()
    assert menu.get_choice() == 1

    # Finished menus ignore further input until reset.
    menu.handle_event(_key(pygame.K_DOWN))
    assert menu.selected == 1

    menu.reset()
    assert menu.selected == 0
    assert menu.get_choice() == CHOICE_PENDING
    assert not menu.is_finished()


def test_menu_disabled_options_cannot_be_confirmed() -> None:
    menu = MenuScreen("Main", ["Locked", "Open"], disabled=[0])
    menu.handle_event(_key(pygame.K_SPACE))
    assert not menu.is_finished()

    menu.move(1)
    assert menu.confirm() is True
    assert menu.get_choice() == 1


def test_menu_requires_options() -> None:
    with pytest.raises(ValueError):
        MenuScreen("Empty", [])


def test_splash_finishes_after_duration() -> None:
    splash = SplashScreen("Loading", duration_ms=100, skippable=False)
    splash.handle_event(_key(pygame.K_SPACE))
    splash.update(60)
    assert not splash.is_finished()
    splash.update(40)
    assert splash.is_finished()

    splash.reset()
    assert not splash.is_finished()
    assert splash.elapsed_ms == 0


def test_splash_can_be_skipped_with_a_key() -> None:
    splash = SplashScreen("Press any key", duration_ms=None)
    splash.update(10_000)
    assert not splash.is_finished()
    splash.handle_event(_key(pygame.K_a))
    assert splash.is_finished()


def test_splash_without_duration_must_be_skippable() -> None:
    with pytest.raises(ValueError):
        SplashScreen("Stuck", duration_ms=None, skippable=False)


def test_screens_draw_onto_surface() -> None:
    _init_pygame()
    target = pygame.Surface((200, 150))
    MenuScreen("Main", ["Play", "Quit"], hint="hint", disabled=[1]).draw(target)
    SplashScreen("Hello", hint="press a key").draw(target)
    assert target.get_size() == (200, 150)


def test_bundled_screen_modules_are_documented() -> None:
    from screen_graph import colors
    from screen_graph.screens import menu, splash

    for module in (colors, menu, splash):
        assert module.__doc__ and module.__doc__.strip()
