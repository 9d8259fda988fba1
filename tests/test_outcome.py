# tests/test_outcome.py
import gc
import unittest
import sys
import os

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from reelspin.domain.outcome.entities.outcome import Outcome
from reelspin.domain.outcome.services.outcome_evaluator import OutcomeEvaluator
from reelspin.domain.reel.entities.reel import Reel
from reelspin.domain.reel.entities.tile import Tile
from reelspin.infrastructure.rng.strategies.mersenne_rng import MersenneTwisterRNG


class FixedRNG:
    """RNG stub returning a fixed draw."""
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class TestFindClosest(unittest.TestCase):
    """Test cases for picking the winning tile."""

    def test_nearest_tile_wins(self):
        tiles = [Tile("a", 0, 156), Tile("b", 156, 156), Tile("c", 312, 156)]
        self.assertIs(OutcomeEvaluator.find_closest(tiles, 300), tiles[2])
        self.assertIs(OutcomeEvaluator.find_closest(tiles, 100), tiles[1])

    def test_tie_keeps_first_tile(self):
        """Equal distances never replace the earlier tile."""
        left = Tile("left", 0, 156)
        right = Tile("right", 312, 156)
        self.assertIs(OutcomeEvaluator.find_closest([left, right], 156), left)
        self.assertIs(OutcomeEvaluator.find_closest([right, left], 156), right)

    def test_negative_positions(self):
        tiles = [Tile("a", -150, 156), Tile("b", 6, 156)]
        self.assertIs(OutcomeEvaluator.find_closest(tiles, 0), tiles[1])

    def test_empty_rejected(self):
        with self.assertRaises(ValueError):
            OutcomeEvaluator.find_closest([], 0)


class TestOutcomeEvaluator(unittest.TestCase):
    """Test cases for payout and outcome construction."""

    def test_compute_payout_range(self):
        """Payouts are drawn from [0, max_payout)."""
        evaluator = OutcomeEvaluator(MersenneTwisterRNG(seed_value=12345), 312, max_payout=100)
        for _ in range(1000):
            payout = evaluator.compute_payout()
            self.assertGreaterEqual(payout, 0)
            self.assertLess(payout, 100)

    def test_compute_payout_scales_draw(self):
        evaluator = OutcomeEvaluator(FixedRNG(0.5), 312, max_payout=100)
        self.assertEqual(evaluator.compute_payout(), 50.0)

    def test_evaluate(self):
        """The outcome names the tile at the reference point."""
        reel = Reel(["a", "b", "c", "d", "e"], 156, "eval_reel")
        evaluator = OutcomeEvaluator(FixedRNG(0.25), 312)

        outcome = evaluator.evaluate(reel, session_id=3)

        self.assertEqual(outcome.session_id, 3)
        self.assertEqual(outcome.symbol, "c")
        self.assertEqual(outcome.payout, 25.0)
        self.assertIs(outcome.tile, reel.tiles[2])

    def test_outcome_holds_tile_weakly(self):
        """The outcome does not keep a discarded tile alive."""
        tile = Tile("a", 0, 156)
        outcome = Outcome.for_tile(1, tile, 10.0)
        self.assertIs(outcome.tile, tile)

        del tile
        gc.collect()
        self.assertIsNone(outcome.tile)
        self.assertEqual(outcome.symbol, "a")


if __name__ == "__main__":
    unittest.main()
