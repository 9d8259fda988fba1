# tests/test_easing.py
import unittest
import sys
import os

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from reelspin.domain.animation.easing import ease_in_out_expo, clamp01


class TestEasing(unittest.TestCase):
    """Test cases for the exponential easing curve."""

    def test_endpoints(self):
        """Curve starts at 0 and ends at 1."""
        self.assertEqual(ease_in_out_expo(0), 0)
        self.assertEqual(ease_in_out_expo(1), 1)

    def test_midpoint_is_continuous(self):
        """Both halves meet at 0.5."""
        self.assertAlmostEqual(ease_in_out_expo(0.5), 0.5)
        self.assertAlmostEqual(ease_in_out_expo(0.5 - 1e-9), 0.5, places=6)

    def test_monotonic(self):
        """Curve never decreases over [0, 1]."""
        samples = [ease_in_out_expo(i / 1000) for i in range(1001)]
        for previous, current in zip(samples, samples[1:]):
            self.assertLessEqual(previous, current)

    def test_range(self):
        """Curve stays inside [0, 1]."""
        for i in range(101):
            value = ease_in_out_expo(i / 100)
            self.assertGreaterEqual(value, 0.0)
            self.assertLessEqual(value, 1.0)

    def test_shape(self):
        """Slow start, fast middle, slow end."""
        self.assertAlmostEqual(ease_in_out_expo(0.25), 1 / 64)
        self.assertAlmostEqual(ease_in_out_expo(0.75), 1 - 1 / 64)
        self.assertAlmostEqual(ease_in_out_expo(0.45), 2 ** -1 / 2)
        self.assertAlmostEqual(ease_in_out_expo(0.55), 1 - 2 ** -1 / 2)

    def test_clamp(self):
        self.assertEqual(clamp01(-0.5), 0.0)
        self.assertEqual(clamp01(1.5), 1.0)
        self.assertEqual(clamp01(0.3), 0.3)


if __name__ == "__main__":
    unittest.main()
