# reelspin/infrastructure/rng/rng_provider.py
import logging
from typing import Optional, Dict, Any

from .strategies.mersenne_rng import MersenneTwisterRNG
from .strategies.numpy_rng import NumpyRNG
from .strategies.rng_strategy import RNGStrategy


STRATEGY_TYPES = {
    "mersenne": MersenneTwisterRNG,
    "numpy": NumpyRNG,
}


class RNGProvider:
    """
    Creates the generator a game draws its reel order and payouts from.

    Every game gets its own generator, so a seed fixes one game's whole
    sequence no matter how many other games run in the same process.
    """
    def __init__(self, default_strategy: str = "mersenne"):
        self.logger = logging.getLogger("infrastructure.rng")
        self.default_strategy = default_strategy

    def get_rng(self, strategy_name: Optional[str] = None, seed: Optional[int] = None) -> RNGStrategy:
        """
        Create a generator by strategy name.

        Args:
            strategy_name: "mersenne" or "numpy", case-insensitive; the provider default if None
            seed: Seed for a reproducible sequence, None seeds from the OS

        Raises:
            ValueError: If the strategy name is unknown
        """
        name = (strategy_name or self.default_strategy).lower()
        strategy_type = STRATEGY_TYPES.get(name)
        if strategy_type is None:
            self.logger.error(f"Unknown RNG strategy: {name}")
            raise ValueError(f"Unknown RNG strategy: {name} (expected one of {', '.join(STRATEGY_TYPES)})")

        if seed is None:
            self.logger.debug(f"Creating {name} RNG without seed")
        else:
            self.logger.info(f"Creating {name} RNG with seed {seed}")
        return strategy_type(seed)

    def create_from_config(self, config: Dict[str, Any]) -> RNGStrategy:
        """
        Create a generator from the "rng" section of the game configuration.

        Example config:
            {"strategy": "numpy", "seed": 12345}
        """
        return self.get_rng(config.get("strategy"), config.get("seed"))
