"""Shared enums, constants and small value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator

MAX_ENTITIES = 1_000_000
MAX_COMPONENTS = 64
TILE_SIZE = 256


class WorldSizeType(Enum):
    """Preset world sizes."""

    TINY = 0
    MEDIUM = 1
    GIANT = 2


class Direction(IntEnum):
    """Eight compass directions, clockwise from north."""

    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7


@dataclass
class WidthHeight:
    """A width and height pair."""

    width: int
    height: int

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height