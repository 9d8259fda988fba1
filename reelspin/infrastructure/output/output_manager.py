# reelspin/infrastructure/output/output_manager.py
import os
import csv
import json
import time
import logging
from typing import Dict, List, Any, Optional


class OutputManager:
    """
    Writes headless run results into a timestamped results directory.
    """
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the output manager.

        Args:
            config: The "output" section of the game configuration
        """
        self.logger = logging.getLogger("infrastructure.output.manager")

        default_config = {
            "enabled": True,
            "base_dir": "results",
            "timestamp_format": "%Y%m%d-%H%M%S",
            "formats": ["json"],
            "indent": 2,
        }

        self.config = dict(default_config)
        if config:
            self.config.update(config)

        self.run_dir = None

    @property
    def enabled(self) -> bool:
        return bool(self.config.get("enabled", True))

    def initialize(self, run_name: str = "headless") -> str:
        """
        Create the directory of this run.

        Args:
            run_name: Prefix of the directory name

        Returns:
            Path of the run directory
        """
        if self.run_dir:
            return self.run_dir

        timestamp = time.strftime(self.config["timestamp_format"])
        self.run_dir = os.path.join(self.config["base_dir"], f"{run_name}_{timestamp}")
        os.makedirs(self.run_dir, exist_ok=True)

        self.logger.info(f"Output directory: {self.run_dir}")
        return self.run_dir

    def write_results(self, results: Dict[str, Any]) -> List[str]:
        """
        Write run results in every configured format.

        Args:
            results: Dictionary with "spins" (list of records) and "summary"

        Returns:
            Paths of the written files
        """
        if not self.enabled:
            self.logger.debug("Output disabled, nothing written")
            return []

        run_dir = self.initialize()
        written = []

        formats = self.config.get("formats") or ["json"]
        if "json" in formats:
            written.append(self._write_json(os.path.join(run_dir, "results.json"), results))
        if "csv" in formats:
            written.append(self._write_spins_csv(os.path.join(run_dir, "spins.csv"), results.get("spins", [])))

        return written

    def _write_json(self, path: str, data: Dict[str, Any]) -> str:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self.config.get("indent", 2), ensure_ascii=False)
        self.logger.debug(f"Wrote {path}")
        return path

    def _write_spins_csv(self, path: str, spins: List[Dict[str, Any]]) -> str:
        fieldnames = ["session_id", "symbol", "payout", "spin_frames", "align_frames", "stopped_early"]
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction='ignore')
            writer.writeheader()
            for spin in spins:
                writer.writerow(spin)
        self.logger.debug(f"Wrote {path}")
        return path
