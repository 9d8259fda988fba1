# reelspin/domain/reel/entities/reel_config.py
from dataclasses import dataclass, field, fields
from typing import Dict, List, Any, Optional, Tuple


DEFAULT_SYMBOLS = [
    "symbol_10", "symbol_9", "symbol_ace", "symbol_axe", "symbol_brain",
    "symbol_crow", "symbol_jack", "symbol_king", "symbol_queen", "symbol_rifle",
]


@dataclass
class ReelConfig:
    """Tuning constants of one reel and its spin cycle."""
    tile_size: float = 156
    visible_count: int = 5
    spin_duration: float = 4.0        # seconds
    align_threshold: float = 2.0      # pixels
    align_rate: float = 0.2
    reveal_step: float = 0.1
    settle_delay_ms: float = 500
    base_speed: float = 100           # pixels per frame at rest progress
    late_phase_start: float = 0.5
    late_boost_offset: float = 16
    late_boost_ceiling: float = 1.2
    max_payout: float = 100
    reference_point: Optional[float] = None
    symbols: List[str] = field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    badge_position: Tuple[float, float] = (600, 100)
    message_offset: float = 30

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> "ReelConfig":
        """
        Build a config from the "reel" section of the game configuration.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        config = config or {}
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in config.items() if key in known}

        if values.get("symbols") is not None:
            values["symbols"] = list(values["symbols"])
        if values.get("badge_position") is not None:
            values["badge_position"] = tuple(values["badge_position"])

        return cls(**values)

    @property
    def visible_width(self) -> float:
        return self.tile_size * self.visible_count

    @property
    def winning_reference(self) -> float:
        """X coordinate a tile's anchor is measured against to find the winner."""
        if self.reference_point is not None:
            return self.reference_point
        return self.tile_size * (self.visible_count // 2)

    def validate(self) -> List[str]:
        """
        Check the settings a spin relies on.

        Returns:
            List of error messages, empty when the config is usable
        """
        errors = []

        if self.tile_size <= 0:
            errors.append(f"tile_size must be positive, got {self.tile_size}")
        if self.visible_count <= 0:
            errors.append(f"visible_count must be positive, got {self.visible_count}")
        if self.spin_duration <= 0:
            errors.append(f"spin_duration must be positive, got {self.spin_duration}")
        if self.base_speed <= 0:
            errors.append(f"base_speed must be positive, got {self.base_speed}")
        if self.align_threshold <= 0:
            errors.append(f"align_threshold must be positive, got {self.align_threshold}")
        if not 0 < self.align_rate <= 1:
            errors.append(f"align_rate must be in (0, 1], got {self.align_rate}")
        if self.reveal_step <= 0:
            errors.append(f"reveal_step must be positive, got {self.reveal_step}")
        if self.settle_delay_ms < 0:
            errors.append(f"settle_delay_ms must not be negative, got {self.settle_delay_ms}")
        if self.max_payout < 0:
            errors.append(f"max_payout must not be negative, got {self.max_payout}")
        if not self.symbols:
            errors.append("symbols must contain at least one symbol")
        elif len(set(self.symbols)) != len(self.symbols):
            errors.append("symbols must be distinct")

        return errors
