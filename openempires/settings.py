"""Game settings: display, audio and world size."""

from __future__ import annotations

from dataclasses import dataclass, field

from openempires.types import TILE_SIZE, WidthHeight, WorldSizeType

_WORLD_SIZE_IN_TILES = {
    WorldSizeType.TINY: 120,
    WorldSizeType.MEDIUM: 180,
    WorldSizeType.GIANT: 240,
}


@dataclass
class GameSettings:
    """User-adjustable settings for a game session."""

    resolution: WidthHeight = field(default_factory=lambda: WidthHeight(800, 600))
    window_dimensions: WidthHeight = field(
        default_factory=lambda: WidthHeight(800, 600)
    )
    world_size_type: WorldSizeType = WorldSizeType.TINY
    fullscreen: bool = False
    vsync: bool = True
    volume: float = 1.0
    music_volume: float = 1.0
    title: str = "openEmipires"

    def set_resolution(self, width: int, height: int) -> None:
        self.resolution = WidthHeight(width, height)

    def set_window_dimensions(self, width: int, height: int) -> None:
        self.window_dimensions = WidthHeight(width, height)

    def world_size(self) -> WidthHeight:
        """World size in game distance units for the chosen world size type."""
        try:
            tiles = _WORLD_SIZE_IN_TILES[self.world_size_type]
        except KeyError:
            raise ValueError(
                f"unknown world size type: {self.world_size_type!r}"
            ) from None
        return WidthHeight(tiles * TILE_SIZE, tiles * TILE_SIZE)

    def world_size_in_tiles(self) -> WidthHeight:
        """World size measured in tiles."""
        size = self.world_size()
        return WidthHeight(size.width // TILE_SIZE, size.height // TILE_SIZE)