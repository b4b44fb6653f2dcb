"""Graphic identifiers and the registry mapping them to images."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from openempires.types import Direction
from openempires.vec2d import Vec2d


class GraphicNotFoundError(KeyError):
    """Raised when a graphic id has no registered entry."""


@dataclass(frozen=True)
class GraphicsID:
    """Identifies one image by entity type, action, frame, direction and extras."""

    entity_type: int = 0
    action_type: int = 0
    frame: int = 0
    direction: Direction = Direction.NORTH
    custom1: int = 0
    custom2: int = 0
    custom3: int = 0

    def to_hash(self) -> int:
        """Pack the fields into a single integer key."""
        return (
            (self.entity_type << 46)
            | (self.action_type << 31)
            | (int(self.direction) << 26)
            | (self.frame << 23)
            | (self.custom1 << 13)
            | (self.custom2 << 3)
            | self.custom3
        )

    @classmethod
    def from_hash(cls, value: int) -> GraphicsID:
        """Unpack a key produced by ``to_hash``."""
        return cls(
            entity_type=(value >> 46) & 0x7FFF,
            action_type=(value >> 31) & 0x7FFF,
            direction=Direction((value >> 26) & 0x07),
            frame=(value >> 23) & 0x1F,
            custom1=(value >> 13) & 0x3FF,
            custom2=(value >> 3) & 0x3FF,
            custom3=value & 0x0F,
        )

    def __str__(self) -> str:
        fields = (
            self.entity_type,
            self.action_type,
            self.frame,
            int(self.direction),
            self.custom1,
            self.custom2,
            self.custom3,
        )
        return "GraphicsID(" + ", ".join(str(f) for f in fields) + ")"


@dataclass
class GraphicsEntry:
    """An image and the anchor point it is drawn from."""

    image: Any = None
    anchor: Vec2d = field(default_factory=Vec2d)


class GraphicsRegistry:
    """Maps graphic ids, by their packed key, to entries."""

    def __init__(self) -> None:
        self._entries: dict[int, GraphicsEntry] = {}

    def register(self, graphics_id: GraphicsID, entry: GraphicsEntry) -> None:
        """Store ``entry`` for ``graphics_id``, replacing any earlier one."""
        self._entries[graphics_id.to_hash()] = entry

    def get(self, graphics_id: GraphicsID) -> GraphicsEntry:
        """Return the entry for ``graphics_id``; GraphicNotFoundError if absent."""
        try:
            return self._entries[graphics_id.to_hash()]
        except KeyError:
            raise GraphicNotFoundError(
                f"Graphic ID not found in registry:{graphics_id}"
            ) from None

    def __contains__(self, graphics_id: object) -> bool:
        return (
            isinstance(graphics_id, GraphicsID)
            and graphics_id.to_hash() in self._entries
        )

    def __len__(self) -> int:
        return len(self._entries)