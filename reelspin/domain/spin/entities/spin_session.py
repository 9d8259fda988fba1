# reelspin/domain/spin/entities/spin_session.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto


class SpinState(Enum):
    """Controller states; IDLE begins and ends every cycle."""
    IDLE = auto()
    SPINNING = auto()
    ALIGNING = auto()
    SETTLING = auto()


@dataclass
class SpinSession:
    """Timing of one spin cycle, from the spin request to settle."""
    session_id: int
    duration: float
    elapsed: float = 0.0
    phase: SpinState = SpinState.SPINNING
    spin_frames: int = 0
    align_frames: int = 0
    stopped_early: bool = False
    started_at: datetime = field(default_factory=datetime.now)

    @property
    def progress(self) -> float:
        return self.elapsed / self.duration

    def advance(self, delta_ms: float) -> float:
        """Add one frame's time and return the new progress."""
        self.elapsed += delta_ms / 1000.0
        self.spin_frames += 1
        return self.progress
