# reelspin/domain/events/spin_events.py
from enum import Enum, auto
from dataclasses import dataclass

from .event_types import DomainEvent


class SpinEventType(Enum):
    """Event types emitted over one spin cycle."""
    SPIN_STARTED = auto()
    STOP_REQUESTED = auto()
    ALIGNMENT_STARTED = auto()
    REEL_SETTLED = auto()
    OUTCOME_PRESENTED = auto()
    OUTCOME_DISCARDED = auto()
    SPIN_REJECTED = auto()


@dataclass
class SpinEvent(DomainEvent):
    """Event raised by the spin controller for one spin session."""
    session_id: int = 0
    reel_id: str = ""

    def __post_init__(self):
        super().__post_init__()

        self.data["session_id"] = self.session_id
        self.data["reel_id"] = self.reel_id
