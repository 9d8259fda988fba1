# reelspin/domain/reel/entities/reel.py
import logging
import math
from typing import List, Iterator

from .tile import Tile, TileSnapshot


class Reel:
    """
    A horizontal strip of tiles laid out on a fixed pitch.

    The strip is finite but loops: a tile whose right edge leaves the
    visible window on the left is moved behind the last tile, so the same
    tiles can scroll forever. Tiles are created once and keep their
    identity; only their positions change.
    """
    def __init__(self, symbols: List[str], tile_size: float, reel_id: str = ""):
        """
        Initialize a reel with one tile per symbol.

        Args:
            symbols: Symbol keys in slot order
            tile_size: Pitch between adjacent tiles in pixels
            reel_id: Optional identifier for the reel
        """
        self.id = reel_id
        self.tile_size = tile_size
        self.tiles = [Tile(symbol, index * tile_size, tile_size) for index, symbol in enumerate(symbols)]
        self.length = len(self.tiles)
        self.logger = logging.getLogger("domain.reel")

    @property
    def extent(self) -> float:
        """Length of one full loop of the strip."""
        return self.tile_size * self.length

    def shift(self, tile: Tile, delta: float):
        """
        Move a tile left by delta and wrap it if it left the window.

        Args:
            tile: Tile owned by this reel
            delta: Distance in pixels, positive moves left
        """
        tile.x -= delta
        self.wrap(tile)

    def shift_all(self, delta: float):
        """Move every tile left by delta."""
        for tile in self.tiles:
            self.shift(tile, delta)

    def wrap(self, tile: Tile) -> bool:
        """
        Re-queue a tile behind the strip once its right edge is left of 0.

        Returns:
            True if the tile was moved
        """
        if tile.x + self.tile_size < 0:
            tile.x += self.extent
            return True
        return False

    def normalize(self):
        """Map every position into [0, extent), keeping the loop order."""
        extent = self.extent
        for tile in self.tiles:
            tile.x = math.fmod(tile.x, extent)
            if tile.x < 0:
                tile.x += extent

    def symbols(self) -> List[str]:
        """Symbol keys in slot order."""
        return [tile.symbol for tile in self.tiles]

    def snapshot(self) -> List[TileSnapshot]:
        """Positions of all tiles for a renderer."""
        return [TileSnapshot(tile.symbol, tile.x) for tile in self.tiles]

    def visual_order(self) -> List[str]:
        """Symbol keys sorted by on-screen position, left to right."""
        return [tile.symbol for tile in sorted(self.tiles, key=lambda t: t.x)]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        """Return the number of tiles on the reel."""
        return self.length

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"Reel(id={self.id}, length={self.length}, tile_size={self.tile_size})"
