# tests/test_headless_runner.py
import csv
import json
import os
import sys
import shutil
import tempfile
import unittest

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from reelspin.application.config.config_service import build_config
from reelspin.application.game.slot_game import SlotGame
from reelspin.application.simulation.headless_runner import HeadlessRunner
from reelspin.infrastructure.output.output_manager import OutputManager
from reelspin.main import main


class TestHeadlessRunner(unittest.TestCase):
    """Test cases for headless play and result output."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config = build_config({
            "reel": {"spin_duration": 1},
            "rng": {"strategy": "mersenne", "seed": 12345},
        })

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_run_collects_every_spin(self):
        game = SlotGame.from_config(self.config)
        results = HeadlessRunner(game).run(3)

        self.assertEqual(len(results["spins"]), 3)
        self.assertEqual([s["session_id"] for s in results["spins"]], [1, 2, 3])
        for spin in results["spins"]:
            self.assertIn(spin["symbol"], game.config.symbols)
            self.assertGreaterEqual(spin["payout"], 0)
            self.assertLess(spin["payout"], 100)
            self.assertFalse(spin["stopped_early"])
            for x in spin["positions"].values():
                self.assertEqual(x % 156, 0)

        summary = results["summary"]
        self.assertEqual(summary["spins"], 3)
        self.assertEqual(sum(summary["symbol_counts"].values()), 3)
        self.assertAlmostEqual(summary["total_payout"], sum(s["payout"] for s in results["spins"]))

    def test_early_stop(self):
        game = SlotGame.from_config(self.config)
        record = HeadlessRunner(game).play_spin(stop_after_frames=10)

        self.assertTrue(record.stopped_early)
        self.assertEqual(record.spin_frames, 10)
        self.assertIsNotNone(record.symbol)

    def test_same_seed_same_results(self):
        first = HeadlessRunner(SlotGame.from_config(self.config)).run(2)
        second = HeadlessRunner(SlotGame.from_config(self.config)).run(2)
        self.assertEqual(first["spins"], second["spins"])

    def test_output_manager_writes_files(self):
        game = SlotGame.from_config(self.config)
        results = HeadlessRunner(game).run(2)

        manager = OutputManager({"base_dir": self.temp_dir, "formats": ["json", "csv"]})
        written = manager.write_results(results)

        self.assertEqual(len(written), 2)
        with open(written[0], encoding='utf-8') as f:
            self.assertEqual(json.load(f)["summary"]["spins"], 2)
        with open(written[1], newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        self.assertEqual([row["session_id"] for row in rows], ["1", "2"])

    def test_output_disabled(self):
        manager = OutputManager({"enabled": False, "base_dir": self.temp_dir})
        self.assertEqual(manager.write_results({"spins": [], "summary": {}}), [])
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_cli_headless(self):
        config_path = os.path.join(self.temp_dir, "game.yaml")
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write("reel:\n  spin_duration: 0.5\nlogging:\n  level: WARNING\n  console_level: WARNING\n")

        status = main([
            "--config", config_path, "--headless", "--spins", "2", "--seed", "3",
            "--output-dir", os.path.join(self.temp_dir, "results"),
        ])

        self.assertEqual(status, 0)
        run_dirs = os.listdir(os.path.join(self.temp_dir, "results"))
        self.assertEqual(len(run_dirs), 1)

    def test_cli_bad_config(self):
        self.assertEqual(main(["--config", os.path.join(self.temp_dir, "missing.yaml"), "--headless"]), 1)


if __name__ == "__main__":
    unittest.main()
