# tests/test_log_mode.py
import argparse
import logging
import os
import sys
import unittest

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from reelspin.application.config.config_service import load_game_config
from reelspin.infrastructure.logging.log_manager import LogManager
from reelspin.main import apply_log_mode, parse_arguments


class TestLogMode(unittest.TestCase):
    """--log-mode and --verbose applied on top of the bundled logging config."""

    TOUCHED = ["domain", "application", "infrastructure", "domain.spin", "domain.reel", "infrastructure.timing"]

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = list(self.root.handlers)
        self.saved_level = self.root.level
        self.reset_levels()
        self.manager = LogManager()

    def tearDown(self):
        self.manager.shutdown()
        self.reset_levels()
        for handler in self.saved_handlers:
            self.root.addHandler(handler)
        self.root.setLevel(self.saved_level)

    def reset_levels(self):
        for name in self.TOUCHED:
            logging.getLogger(name).setLevel(logging.NOTSET)

    def configure(self, *argv):
        config = apply_log_mode(load_game_config(), parse_arguments(list(argv)))
        log_config = dict(config["logging"], console=False)
        self.manager.initialize(log_config)
        return config

    def level_of(self, name):
        return logging.getLogger(name).getEffectiveLevel()

    def test_app_mode_quiets_the_domain_layer(self):
        config = self.configure("--log-mode", "app")

        self.assertNotIn("domain.spin", config["logging"]["loggers"])
        self.assertGreaterEqual(self.level_of("domain.spin.controller.reel"), logging.WARNING)
        self.assertGreaterEqual(self.level_of("domain.reel"), logging.WARNING)
        self.assertEqual(self.level_of("application.game"), logging.DEBUG)

    def test_domain_mode_shows_domain_debug(self):
        self.configure("--log-mode", "domain")

        self.assertEqual(self.level_of("domain.spin.controller.reel"), logging.DEBUG)
        self.assertGreaterEqual(self.level_of("application.simulation.headless"), logging.WARNING)
        self.assertGreaterEqual(self.level_of("infrastructure.timing.scheduler"), logging.WARNING)

    def test_verbose_lowers_every_layer(self):
        self.configure("-v")

        for name in ("domain.spin.controller.reel", "infrastructure.timing.scheduler", "application.game"):
            self.assertEqual(self.level_of(name), logging.DEBUG)

    def test_no_flags_keep_file_levels(self):
        config = apply_log_mode(load_game_config(), parse_arguments([]))

        self.assertEqual(config["logging"]["loggers"]["domain.spin"], {"level": "INFO"})
        self.assertEqual(config["logging"]["loggers"]["infrastructure.timing"], {"level": "WARNING"})
        self.assertNotIn("domain", config["logging"]["loggers"])

    def test_unrelated_loggers_survive(self):
        config = load_game_config()
        config["logging"]["loggers"]["main"] = {"level": "ERROR"}
        apply_log_mode(config, argparse.Namespace(log_mode="none", verbose=False))

        self.assertEqual(config["logging"]["loggers"]["main"], {"level": "ERROR"})
        self.assertEqual(config["logging"]["loggers"]["domain"], {"level": "WARNING"})


if __name__ == "__main__":
    unittest.main()
