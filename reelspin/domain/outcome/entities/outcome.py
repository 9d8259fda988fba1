# reelspin/domain/outcome/entities/outcome.py
import weakref
from dataclasses import dataclass, field
from typing import Optional

from reelspin.domain.reel.entities.tile import Tile


@dataclass
class Outcome:
    """
    Result of one spin cycle: the winning tile and the amount paid.

    The tile is held weakly; it belongs to the reel, not to the outcome.
    """
    session_id: int
    symbol: str
    payout: float
    tile_ref: Optional[weakref.ref] = field(default=None, repr=False, compare=False)

    @classmethod
    def for_tile(cls, session_id: int, tile: Tile, payout: float) -> "Outcome":
        return cls(session_id, tile.symbol, payout, weakref.ref(tile))

    @property
    def tile(self) -> Optional[Tile]:
        return self.tile_ref() if self.tile_ref is not None else None
