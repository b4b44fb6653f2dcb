"""Command that starts the game."""

from __future__ import annotations

import argparse
import logging

from openempires.event_loop import EventLoop
from openempires.graphics_registry import GraphicsRegistry
from openempires.logger import init_logger
from openempires.renderer import Renderer
from openempires.resource_loader import DEFAULT_TEXTURE_PATH, ResourceLoader
from openempires.settings import GameSettings
from openempires.subsystem import SubSystemRegistry

log = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "build/logs/game.log"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="openempires", description="Run the game.")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="log file path")
    parser.add_argument(
        "--texture", default=DEFAULT_TEXTURE_PATH, help="bitmap to load as a texture"
    )
    parser.add_argument(
        "--run-for",
        type=float,
        default=None,
        metavar="SECONDS",
        help="stop after this many seconds instead of running until interrupted",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Start every subsystem and run until stopped."""
    args = _parse_args(argv)
    init_logger(args.log_file)
    log.info("Game started")
    log.info("Initializing subsystems...")

    settings = GameSettings()
    settings.set_window_dimensions(1024, 720)
    graphics_registry = GraphicsRegistry()
    renderer = Renderer(settings, graphics_registry)
    event_loop = EventLoop()
    resource_loader = ResourceLoader(
        settings, graphics_registry, renderer, texture_path=args.texture
    )

    registry = SubSystemRegistry.get_instance()
    registry.register("EventLoop", event_loop)
    registry.register("Renderer", renderer)
    registry.register("ResourceLoader", resource_loader)
    try:
        registry.init_all()
        registry.wait_for_all(args.run_for)
    finally:
        registry.shutdown_all()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())