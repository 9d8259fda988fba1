# reelspin/domain/reel/entities/tile.py
from dataclasses import dataclass


@dataclass(eq=False)
class Tile:
    """
    One symbol on the reel strip.

    ``x`` is the tile's left edge in reel coordinates, ``size`` its pitch.
    Tiles compare by identity: two tiles never share a symbol on one reel.
    """
    symbol: str
    x: float
    size: float

    @property
    def right(self) -> float:
        return self.x + self.size


@dataclass(frozen=True)
class TileSnapshot:
    """Immutable copy of a tile's identity and position for renderers."""
    symbol: str
    x: float
