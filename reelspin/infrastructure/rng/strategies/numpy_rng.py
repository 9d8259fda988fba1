# reelspin/infrastructure/rng/strategies/numpy_rng.py
import numpy as np
from typing import List, Optional, Any


class NumpyRNG:
    """
    Random number generator backed by NumPy's RandomState.
    """
    def __init__(self, seed_value: Optional[int] = None):
        """
        Initialize the RNG with an optional seed.

        Args:
            seed_value: Optional seed value for reproducible random numbers
        """
        self.rng = np.random.RandomState(seed_value)

    def random(self) -> float:
        """Get a random float in [0.0, 1.0)."""
        return float(self.rng.random_sample())

    def seed(self, seed_value: int) -> None:
        """
        Set the seed for the RNG.

        Args:
            seed_value: Seed value to use
        """
        self.rng.seed(seed_value)

    def shuffle(self, items: List[Any]) -> List[Any]:
        """
        Randomly shuffle a list of items.

        Args:
            items: List of items to shuffle

        Returns:
            Shuffled copy of the list, element types preserved
        """
        order = self.rng.permutation(len(items))
        return [items[int(i)] for i in order]
