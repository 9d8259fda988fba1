# reelspin/domain/outcome/services/outcome_evaluator.py
import logging
from typing import Iterable

from reelspin.domain.reel.entities.reel import Reel
from reelspin.domain.reel.entities.tile import Tile
from ..entities.outcome import Outcome


class OutcomeEvaluator:
    """
    Picks the winning tile of a settled reel and decides what it pays.
    """
    def __init__(self, rng, reference_point: float, max_payout: float = 100):
        """
        Initialize the evaluator.

        Args:
            rng: RNG strategy used by compute_payout
            reference_point: X coordinate a tile's left edge is compared to
            max_payout: Upper bound (exclusive) of the payout draw
        """
        self.logger = logging.getLogger("domain.outcome.evaluator")
        self.rng = rng
        self.reference_point = reference_point
        self.max_payout = max_payout

    @staticmethod
    def find_closest(tiles: Iterable[Tile], reference_point: float) -> Tile:
        """
        Return the tile whose position is nearest to reference_point.

        On equal distance the tile met first wins.

        Raises:
            ValueError: If tiles is empty
        """
        closest = None
        closest_distance = 0.0
        for tile in tiles:
            distance = abs(tile.x - reference_point)
            if closest is None or distance < closest_distance:
                closest = tile
                closest_distance = distance

        if closest is None:
            raise ValueError("Cannot pick a winner from an empty reel")
        return closest

    def compute_payout(self) -> float:
        """
        Amount won this cycle.

        A uniform draw in [0, max_payout); this is where a paytable lookup
        on the winning symbol belongs.
        """
        return self.rng.random() * self.max_payout

    def evaluate(self, reel: Reel, session_id: int) -> Outcome:
        """
        Build the outcome of a settled reel.

        Args:
            reel: Reel whose tiles are aligned
            session_id: Spin session the outcome belongs to

        Returns:
            Outcome with the winning tile and payout
        """
        winner = self.find_closest(reel.tiles, self.reference_point)
        payout = self.compute_payout()
        outcome = Outcome.for_tile(session_id, winner, payout)

        self.logger.info(f"Session {session_id}: {winner.symbol} at x={winner.x:.1f} wins {payout:.2f}")
        return outcome
