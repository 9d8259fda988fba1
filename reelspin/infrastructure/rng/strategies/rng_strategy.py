# reelspin/infrastructure/rng/strategies/rng_strategy.py
from typing import List, Protocol, Any


class RNGStrategy(Protocol):
    """Protocol defining the interface for random number generators."""

    def random(self) -> float:
        """
        Get a random float in the half-open range [0.0, 1.0).

        Returns:
            Random float
        """
        ...

    def seed(self, seed_value: int) -> None:
        """
        Set the seed for the RNG.

        Args:
            seed_value: Seed value to use
        """
        ...

    def shuffle(self, items: List[Any]) -> List[Any]:
        """
        Return a randomly permuted copy of items.

        Args:
            items: List of items to shuffle

        Returns:
            Shuffled copy (the input list is left untouched)
        """
        ...
