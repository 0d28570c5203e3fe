"""Small example application: splash, a main menu and two sub screens."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Sequence

import pygame

from .builder import ScreenControllerBuilder
from .config import load_config, save_config
from .controller import ScreenController
from .log import get_logger, setup_logging
from .runner import ScreenRunner
from .screens import ScreenKind
from .screens.menu import MenuScreen
from .screens.splash import SplashScreen
from .windowing import open_window

logger = get_logger(__name__)

EXIT_SCREEN = "exit"
MENU_OPTIONS = ("Play", "About", "Quit")


def _main_menu() -> MenuScreen:
    return MenuScreen("Screen Graph", MENU_OPTIONS, hint="Up/Down to move, Enter to select")


def build_demo_controller(config: dict[str, Any] | None = None) -> ScreenController:
    """Wire the demo graph; no display is needed until screens are drawn."""
    builder = ScreenControllerBuilder.from_config(config or {})
    return (
        builder.register("splash", SplashScreen("Screen Graph", duration_ms=1500))
        .register("menu", _main_menu, kind=ScreenKind.CHOICE)
        .register(
            "play",
            lambda: SplashScreen("Playing... press any key", duration_ms=None),
            kind=ScreenKind.TRANSITION,
        )
        .register(
            "about",
            lambda: SplashScreen("A directed graph of screens", duration_ms=3000),
            kind=ScreenKind.TRANSITION,
        )
        .register(EXIT_SCREEN, SplashScreen("Goodbye", duration_ms=0, skippable=False))
        .set_succession("splash", "menu")
        .choice("menu", "play", 0)
        .choice("menu", "about", 1)
        .choice("menu", EXIT_SCREEN, 2)
        .set_succession("play", "menu")
        .set_succession("about", "menu")
        .with_starting_screen("splash")
        .build()
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the screen_graph demo.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a config JSON file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    config, config_path = load_config(args.config)
    if not config_path.exists():
        save_config(config, config_path)
    setup_logging(args.log_level or config["logging"]["level"])

    display = config["display"]
    logical_size = (int(display["width"]), int(display["height"]))

    pygame.init()
    try:
        open_window(logical_size, float(display["scale"]), caption=display["caption"])
        target = pygame.Surface(logical_size)
        controller = build_demo_controller(config)
        runner = ScreenRunner.from_config(
            controller, target, config, exit_names={EXIT_SCREEN}
        )
        last = runner.run()
        logger.info("Demo finished on screen %r", last)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
