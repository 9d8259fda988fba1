# reelspin/infrastructure/rng/strategies/mersenne_rng.py
import random
from typing import List, Optional, Any


class MersenneTwisterRNG:
    """
    Random number generator using the Mersenne Twister algorithm (Python's default).
    """
    def __init__(self, seed_value: Optional[int] = None):
        """
        Initialize the RNG with an optional seed.

        Args:
            seed_value: Optional seed value for reproducible random numbers
        """
        # Dedicated instance, the module-level generator stays untouched
        self._random = random.Random()

        if seed_value is not None:
            self.seed(seed_value)

    def random(self) -> float:
        """Get a random float in [0.0, 1.0)."""
        return self._random.random()

    def seed(self, seed_value: int) -> None:
        """
        Set the seed for the RNG.

        Args:
            seed_value: Seed value to use
        """
        self._random.seed(seed_value)

    def shuffle(self, items: List[Any]) -> List[Any]:
        """
        Randomly shuffle a list of items.

        Args:
            items: List of items to shuffle

        Returns:
            Shuffled copy of the list
        """
        items_copy = list(items)
        self._random.shuffle(items_copy)
        return items_copy
