"""Window and drawing loop for entities that carry a graphic."""

from __future__ import annotations

import logging
import threading

import pygame

from openempires.components import GraphicsComponent
from openempires.game_state import GameState
from openempires.graphics_registry import GraphicNotFoundError, GraphicsRegistry
from openempires.settings import GameSettings
from openempires.subsystem import SubSystem

log = logging.getLogger(__name__)

BACKGROUND_COLOR = (30, 30, 30)
DEST_RECT = pygame.Rect(100, 100, 100, 100)
DEFAULT_FRAME_DELAY = 0.016


class Renderer(SubSystem):
    """Opens the game window on a background thread and redraws it each frame."""

    def __init__(
        self,
        settings: GameSettings,
        graphics_registry: GraphicsRegistry,
        game_state: GameState | None = None,
        frame_delay: float = DEFAULT_FRAME_DELAY,
    ) -> None:
        self._settings = settings
        self._graphics_registry = graphics_registry
        self._game_state = game_state if game_state is not None else GameState.get_instance()
        self._frame_delay = frame_delay
        self._stop = threading.Event()
        self._ready = threading.Event()
        self._screen: pygame.Surface | None = None
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def init(self) -> None:
        """Start the rendering thread, unless it is already running."""
        if self.running:
            return
        self._stop.clear()
        self._ready.clear()
        self._error = None
        self._thread = threading.Thread(
            target=self._thread_entry, name="Renderer", daemon=True
        )
        self._thread.start()

    def shutdown(self) -> None:
        """Stop the rendering thread, re-raising any error it died with."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        error, self._error = self._error, None
        if error is not None:
            raise error

    def wait_ready(self, timeout: float | None = None) -> pygame.Surface:
        """Block until the window is open and return its surface."""
        if not self._ready.wait(timeout):
            raise TimeoutError("renderer did not become ready in time")
        if self._error is not None:
            raise RuntimeError("renderer failed to start") from self._error
        screen = self._screen
        if screen is None:
            raise RuntimeError("renderer is not running")
        return screen

    def render_frame(self) -> None:
        """Clear the window and draw every entity that has a graphic."""
        screen = self._screen
        if screen is None:
            raise RuntimeError("display is not open")
        screen.fill(BACKGROUND_COLOR)
        for entity, graphics in self._game_state.entities_with(GraphicsComponent):
            try:
                entry = self._graphics_registry.get(graphics.graphics_id)
            except GraphicNotFoundError as exc:
                log.warning("Skipping entity %s: %s", entity, exc)
                continue
            if entry.image is not None:
                image = pygame.transform.scale(entry.image, DEST_RECT.size)
                screen.blit(image, DEST_RECT.topleft)
        pygame.display.flip()

    def _thread_entry(self) -> None:
        try:
            self._open_display()
            self._rendering_loop()
        except BaseException as exc:
            log.error("Renderer stopped: %s", exc)
            self._error = exc
        finally:
            self._screen = None
            pygame.display.quit()
            self._ready.set()

    def _open_display(self) -> None:
        log.info("Initializing display...")
        size = tuple(self._settings.window_dimensions)
        try:
            pygame.display.init()
            screen = pygame.display.set_mode(size, 0, 32)
            pygame.display.set_caption(self._settings.title)
        except pygame.error as exc:
            log.error("Display initialisation failed: %s", exc)
            raise RuntimeError(f"display initialisation failed: {exc}") from exc
        self._screen = screen
        self._ready.set()
        log.info("Display initialized successfully")

    def _rendering_loop(self) -> None:
        log.info("Starting rendering loop...")
        while not self._stop.is_set():
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            self.render_frame()
            self._stop.wait(self._frame_delay)