from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from screen_graph import render, windowing  # noqa: E402


@pytest.fixture
def display():
    pygame.display.init()
    yield
    pygame.display.quit()


def test_open_window_clamps_scale(display) -> None:
    window = windowing.open_window((100, 50), 10.0, caption="Test")
    assert window.get_size() == (400, 200)
    assert pygame.display.get_caption()[0] == "Test"

    window = windowing.open_window((100, 50), 0.1)
    assert window.get_size() == (100, 50)


def test_present_letterboxes_logical_surface(display) -> None:
    window = windowing.open_window((100, 50), 2.0)
    logical = pygame.Surface((100, 50))
    logical.fill((255, 0, 0))

    windowing.present(logical)

    assert windowing.current_window_size == (200, 100)
    assert window.get_at((100, 50))[:3] == (255, 0, 0)


def test_font_cache_reuses_fonts() -> None:
    render.clear_font_cache()
    first = render.load_font(12)
    assert render.load_font(12) is first
    assert render.load_font(14) is not first
    render.clear_font_cache()
    assert render.load_font(12) is not first


def test_show_message_returns_centered_rect() -> None:
    target = pygame.Surface((100, 60))
    rect = render.show_message(target, "hi", 12, (255, 255, 255), (50, 30))
    assert rect is not None
    assert rect.center == (50, 30)
