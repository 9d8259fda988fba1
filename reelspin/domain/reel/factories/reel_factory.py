# reelspin/domain/reel/factories/reel_factory.py
import logging
from typing import Optional

from ..entities.reel import Reel
from ..entities.reel_config import ReelConfig


class ReelFactory:
    """
    Factory for creating Reel instances.
    """
    def __init__(self, rng):
        """
        Initialize the reel factory.

        Args:
            rng: RNG strategy used to shuffle the symbol order
        """
        self.logger = logging.getLogger("domain.reel.factory")
        self.rng = rng

    def create_reel(self, config: ReelConfig, reel_id: Optional[str] = None) -> Reel:
        """
        Create a reel holding every configured symbol once, in random order.

        Args:
            config: Reel configuration
            reel_id: Optional reel identifier

        Returns:
            New Reel with tiles laid out from x=0
        """
        order = self.rng.shuffle(config.symbols)
        reel = Reel(order, config.tile_size, reel_id or "reel")

        self.logger.info(f"Created {reel} with order {order}")
        return reel
