import pytest

from openempires.graphics_registry import (
    GraphicNotFoundError,
    GraphicsEntry,
    GraphicsID,
    GraphicsRegistry,
)
from openempires.types import Direction
from openempires.vec2d import Vec2d


def test_default_id_hashes_to_zero():
    assert GraphicsID().to_hash() == 0


def test_field_positions():
    assert GraphicsID(custom3=5).to_hash() == 5
    assert GraphicsID(entity_type=1).to_hash() == 1 << 46
    assert GraphicsID(action_type=1).to_hash() == 1 << 31


def test_to_string():
    graphics_id = GraphicsID(1, 2, 3, Direction.SOUTH, 5, 6, 7)
    assert str(graphics_id) == "GraphicsID(1, 2, 3, 4, 5, 6, 7)"


@pytest.mark.parametrize(
    "graphics_id",
    [
        GraphicsID(),
        GraphicsID(entity_type=1, action_type=1),
        GraphicsID(entity_type=32767, action_type=32767, custom1=1023),
        GraphicsID(entity_type=12, action_type=3, frame=5, custom1=17, custom3=6),
    ],
)
def test_hash_round_trip(graphics_id):
    assert GraphicsID.from_hash(graphics_id.to_hash()) == graphics_id


def test_equal_ids_share_a_key():
    a = GraphicsID(entity_type=3, frame=2)
    b = GraphicsID(entity_type=3, frame=2)
    assert a == b
    assert a.to_hash() == b.to_hash()


def test_register_and_get():
    registry = GraphicsRegistry()
    graphics_id = GraphicsID(entity_type=1, action_type=1)
    entry = GraphicsEntry(image="texture", anchor=Vec2d(4, 8))
    registry.register(graphics_id, entry)
    assert registry.get(graphics_id) is entry
    assert graphics_id in registry
    assert len(registry) == 1


def test_register_replaces():
    registry = GraphicsRegistry()
    graphics_id = GraphicsID(entity_type=2)
    registry.register(graphics_id, GraphicsEntry(image="old"))
    registry.register(graphics_id, GraphicsEntry(image="new"))
    assert registry.get(graphics_id).image == "new"
    assert len(registry) == 1


def test_get_missing_raises():
    registry = GraphicsRegistry()
    graphics_id = GraphicsID(entity_type=9)
    with pytest.raises(GraphicNotFoundError) as info:
        registry.get(graphics_id)
    assert str(graphics_id) in str(info.value)
    assert graphics_id not in registry


def test_entry_defaults():
    entry = GraphicsEntry()
    assert entry.image is None
    assert entry.anchor == Vec2d(0, 0)