"""Components attached to game entities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from openempires.game_state import Component
from openempires.graphics_registry import GraphicsID
from openempires.types import Direction
from openempires.vec2d import Vec2d


@dataclass
class ActionComponent(Component):
    """The action an entity is performing."""

    action: int = 0


@dataclass
class GraphicsComponent(Component):
    """Which graphic an entity is drawn with, and its current frame."""

    graphics_id: GraphicsID = field(default_factory=GraphicsID)
    current_frame: int = 0


@dataclass
class TransformComponent(Component):
    """Position in the world and rotation in degrees clockwise from north."""

    position: Vec2d = field(default_factory=Vec2d)
    rotation: int = 0

    def face(self, target: Vec2d | Direction) -> None:
        """Turn towards a world position or to a compass direction."""
        if isinstance(target, Direction):
            self.rotation = 45 * int(target)
            return
        delta_x = target.x - self.position.x
        delta_y = target.y - self.position.y
        self.rotation = int(math.atan2(delta_y, delta_x) * 180 / math.pi)

    @property
    def direction(self) -> Direction:
        """The compass direction the rotation falls in."""
        return Direction((self.rotation % 360) // 45)