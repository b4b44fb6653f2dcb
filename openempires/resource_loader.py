"""Loads the starting entities and their textures."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pygame

from openempires.components import ActionComponent, GraphicsComponent, TransformComponent
from openempires.game_state import Entity, GameState
from openempires.graphics_registry import GraphicsEntry, GraphicsID, GraphicsRegistry
from openempires.renderer import Renderer
from openempires.settings import GameSettings
from openempires.subsystem import SubSystem
from openempires.types import Direction
from openempires.vec2d import Vec2d

log = logging.getLogger(__name__)

DEFAULT_TEXTURE_PATH = "test.bmp"
TEXTURE_ID = GraphicsID(
    entity_type=1, action_type=1, frame=0, direction=Direction.NORTH
)


class ResourceLoader(SubSystem):
    """Creates the initial entities and registers their textures."""

    def __init__(
        self,
        settings: GameSettings,
        graphics_registry: GraphicsRegistry,
        renderer: Renderer,
        texture_path: str | Path = DEFAULT_TEXTURE_PATH,
        game_state: GameState | None = None,
        ready_timeout: float | None = None,
    ) -> None:
        self._settings = settings
        self._graphics_registry = graphics_registry
        self._renderer = renderer
        self._texture_path = Path(texture_path)
        self._game_state = game_state if game_state is not None else GameState.get_instance()
        self._ready_timeout = ready_timeout

    def load_textures(self) -> None:
        """Load the bitmap and register it as a texture for the display."""
        log.info("Loading textures...")
        try:
            surface = pygame.image.load(os.fspath(self._texture_path))
        except (pygame.error, OSError) as exc:
            log.error("Failed to load the bitmap: %s", exc)
            raise RuntimeError(f"Failed to load the bitmap {exc}") from exc

        screen = self._renderer.wait_ready(self._ready_timeout)
        log.debug("Display surface is obtained successfully.")

        try:
            texture = surface.convert(screen)
        except pygame.error as exc:
            log.error("Failed to create texture from surface: %s", exc)
            raise RuntimeError(f"Failed to create texture from surface {exc}") from exc

        self._graphics_registry.register(TEXTURE_ID, GraphicsEntry(texture, Vec2d(0, 0)))
        log.info("Texture loaded and registered successfully.")

    def load_entities(self) -> Entity:
        """Create the starting entity and return it."""
        log.info("Loading entities...")
        state = self._game_state
        entity = state.create_entity()
        state.add_component(entity, TransformComponent(Vec2d(100, 100)))
        state.add_component(entity, GraphicsComponent(TEXTURE_ID, 0))
        state.add_component(entity, ActionComponent(0))
        log.info("Entity loaded successfully.")
        return entity

    def init(self) -> None:
        self.load_entities()
        self.load_textures()

    def shutdown(self) -> None:
        """Nothing to release: loaded resources belong to the registries."""