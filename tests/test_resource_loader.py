import time

import pygame
import pytest

from openempires.components import ActionComponent, GraphicsComponent, TransformComponent
from openempires.game_state import GameState
from openempires.graphics_registry import GraphicNotFoundError, GraphicsID, GraphicsRegistry
from openempires.renderer import DEST_RECT, Renderer
from openempires.resource_loader import TEXTURE_ID, ResourceLoader
from openempires.settings import GameSettings
from openempires.types import Direction
from openempires.vec2d import Vec2d


@pytest.fixture(autouse=True)
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def state():
    return GameState()


@pytest.fixture
def graphics():
    return GraphicsRegistry()


@pytest.fixture
def settings():
    return GameSettings()


@pytest.fixture
def renderer(settings, graphics, state):
    r = Renderer(settings, graphics, game_state=state)
    r.init()
    yield r
    r.shutdown()


@pytest.fixture
def bitmap(tmp_path):
    path = tmp_path / "test.bmp"
    surface = pygame.Surface((4, 4))
    surface.fill((0, 0, 255))
    pygame.image.save(surface, str(path))
    return path


def _loader(settings, graphics, renderer, state, path):
    return ResourceLoader(
        settings, graphics, renderer, texture_path=path, game_state=state, ready_timeout=5
    )


def test_texture_id_matches_the_example_graphic():
    expected = GraphicsID(
        entity_type=1, action_type=1, frame=0, direction=Direction.NORTH
    )
    assert TEXTURE_ID == expected
    assert GraphicsID.from_hash(TEXTURE_ID.to_hash()) == expected


def test_load_entities_adds_components(settings, graphics, renderer, state, bitmap):
    loader = _loader(settings, graphics, renderer, state, bitmap)
    entity = loader.load_entities()
    assert state.is_entity_valid(entity)
    transform, graphic, action = state.get_components(
        entity, TransformComponent, GraphicsComponent, ActionComponent
    )
    assert transform.position == Vec2d(100, 100)
    assert graphic.graphics_id == TEXTURE_ID
    assert graphic.current_frame == 0
    assert action.action == 0


def test_load_textures_registers_image(settings, graphics, renderer, state, bitmap):
    loader = _loader(settings, graphics, renderer, state, bitmap)
    with pytest.raises(GraphicNotFoundError):
        graphics.get(TEXTURE_ID)
    loader.load_textures()
    entry = graphics.get(TEXTURE_ID)
    assert entry.image.get_size() == (4, 4)
    assert entry.anchor == Vec2d(0, 0)


def test_missing_bitmap_raises(settings, graphics, renderer, state, tmp_path):
    loader = _loader(settings, graphics, renderer, state, tmp_path / "absent.bmp")
    with pytest.raises(RuntimeError, match="Failed to load the bitmap"):
        loader.load_textures()
    assert TEXTURE_ID not in graphics


def test_init_draws_loaded_entity(settings, graphics, renderer, state, bitmap):
    loader = _loader(settings, graphics, renderer, state, bitmap)
    loader.init()
    screen = renderer.wait_ready(5)
    deadline = time.monotonic() + 5
    while time.monotonic() < deadline:
        if tuple(screen.get_at(DEST_RECT.center))[:3] == (0, 0, 255):
            break
        time.sleep(0.01)
    assert tuple(screen.get_at(DEST_RECT.center))[:3] == (0, 0, 255)
    assert len(state.entities_with(GraphicsComponent)) == 1