# reelspin/application/game/render_snapshot.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from reelspin.domain.reel.entities.tile import TileSnapshot


@dataclass(frozen=True)
class RenderSnapshot:
    """
    Everything a renderer needs to draw one frame.

    Plain values only; nothing here refers back to live game objects.
    """
    state: str
    tiles: List[TileSnapshot] = field(default_factory=list)
    tile_size: float = 0.0
    visible_count: int = 0
    win_frame_scale: float = 0.0
    winning_symbol: Optional[str] = None
    winning_symbol_visible: bool = False
    winning_symbol_bounds: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    message_text: str = ""
    message_visible: bool = False
    message_position: Tuple[float, float] = (0.0, 0.0)

    @property
    def win_frame_visible(self) -> bool:
        return self.win_frame_scale > 0
