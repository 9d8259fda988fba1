# tests/test_reel.py
import unittest
import sys
import os

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from reelspin.domain.reel.entities.reel import Reel
from reelspin.domain.reel.entities.reel_config import ReelConfig, DEFAULT_SYMBOLS
from reelspin.domain.reel.factories.reel_factory import ReelFactory
from reelspin.infrastructure.rng.strategies.mersenne_rng import MersenneTwisterRNG


class TestReel(unittest.TestCase):
    """Test cases for the Reel class."""

    def test_basic_construction(self):
        """Tiles are laid out from 0 on the pitch."""
        reel = Reel(["a", "b", "c"], 100, "test_reel")

        self.assertEqual(reel.id, "test_reel")
        self.assertEqual(len(reel), 3)
        self.assertEqual([t.x for t in reel], [0, 100, 200])
        self.assertEqual(reel.symbols(), ["a", "b", "c"])
        self.assertEqual(reel.extent, 300)

    def test_shift_without_wrap(self):
        """A tile still partly visible is not moved to the back."""
        reel = Reel(["a", "b", "c"], 100)
        tile = reel.tiles[0]
        reel.shift(tile, 50)
        self.assertEqual(tile.x, -50)

        # Right edge exactly at 0 is not past the window yet
        reel.shift(tile, 50)
        self.assertEqual(tile.x, -100)

    def test_shift_with_wrap(self):
        """A tile whose right edge passes 0 reappears at p + P * N."""
        reel = Reel(["a", "b", "c"], 100)
        tile = reel.tiles[0]
        reel.shift(tile, 150)

        self.assertEqual(tile.x, -150 + 300)
        self.assertGreaterEqual(tile.x, 0)
        self.assertLess(tile.x, reel.extent)

    def test_wrap_rule_for_many_positions(self):
        """Every wrapped position lands inside [0, P * N)."""
        pitch, count = 156, 10
        reel = Reel([str(i) for i in range(count)], pitch)
        tile = reel.tiles[0]
        for p in [-156.01, -200, -255.9, -157.5]:
            tile.x = p
            self.assertTrue(reel.wrap(tile))
            self.assertAlmostEqual(tile.x, p + pitch * count)
            self.assertGreaterEqual(tile.x, 0)
            self.assertLess(tile.x, pitch * count)

    def test_wrapped_tile_follows_last_tile(self):
        """Wrapping keeps the spacing: the wrapped tile sits right after the last one."""
        reel = Reel(["a", "b", "c", "d"], 100)
        reel.shift_all(101)

        positions = {t.symbol: t.x for t in reel}
        self.assertAlmostEqual(positions["a"], positions["d"] + 100)
        self.assertEqual(reel.visual_order(), ["b", "c", "d", "a"])

    def test_normalize(self):
        """Normalize maps positions into [0, extent) without changing spacing."""
        reel = Reel(["a", "b", "c"], 100)
        reel.tiles[0].x = -100
        reel.tiles[1].x = 0
        reel.tiles[2].x = 300
        reel.normalize()

        self.assertEqual([t.x for t in reel], [200, 0, 0])

    def test_snapshot_is_detached(self):
        """Snapshots do not follow later moves."""
        reel = Reel(["a", "b"], 100)
        snapshot = reel.snapshot()
        reel.shift_all(10)

        self.assertEqual([(s.symbol, s.x) for s in snapshot], [("a", 0), ("b", 100)])

    def test_string_representation(self):
        """String representation."""
        reel = Reel(["a", "b", "c"], 156, "repr_reel")
        self.assertEqual(repr(reel), "Reel(id=repr_reel, length=3, tile_size=156)")


class TestReelFactory(unittest.TestCase):
    """Test cases for ReelFactory."""

    def test_random_permutation(self):
        """The reel holds every symbol exactly once."""
        factory = ReelFactory(MersenneTwisterRNG(seed_value=12345))
        reel = factory.create_reel(ReelConfig())

        self.assertEqual(len(reel), len(DEFAULT_SYMBOLS))
        self.assertEqual(sorted(reel.symbols()), sorted(DEFAULT_SYMBOLS))

    def test_seed_reproducible(self):
        """Equal seeds give equal orders."""
        first = ReelFactory(MersenneTwisterRNG(seed_value=7)).create_reel(ReelConfig())
        second = ReelFactory(MersenneTwisterRNG(seed_value=7)).create_reel(ReelConfig())
        self.assertEqual(first.symbols(), second.symbols())

    def test_config_symbols_untouched(self):
        """Shuffling does not reorder the configured list."""
        config = ReelConfig(symbols=["a", "b", "c", "d"])
        ReelFactory(MersenneTwisterRNG(seed_value=1)).create_reel(config)
        self.assertEqual(config.symbols, ["a", "b", "c", "d"])


if __name__ == "__main__":
    unittest.main()
