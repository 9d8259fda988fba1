# reelspin/application/simulation/headless_runner.py
import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Any, Optional

from reelspin.application.game.slot_game import SlotGame
from reelspin.domain.events.spin_events import SpinEventType, SpinEvent
from reelspin.domain.spin.entities.spin_session import SpinState


@dataclass
class SpinRecord:
    """What happened in one simulated spin cycle."""
    session_id: int
    spin_frames: int = 0
    align_frames: int = 0
    stopped_early: bool = False
    symbol: Optional[str] = None
    payout: Optional[float] = None
    positions: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class HeadlessRunner:
    """
    Plays spin cycles on a SlotGame without a display, stepping its
    scheduler with a fixed frame delta.
    """
    def __init__(self, game: SlotGame, frame_delta_ms: float = 1000 / 60,
                 max_frames_per_spin: int = 10000):
        """
        Initialize the runner.

        Args:
            game: Game to drive
            frame_delta_ms: Length of every simulated frame
            max_frames_per_spin: Frame budget of one cycle, guards against a reel that never aligns
        """
        self.logger = logging.getLogger("application.simulation.headless")
        self.game = game
        self.frame_delta_ms = frame_delta_ms
        self.max_frames_per_spin = max_frames_per_spin
        self.records: Dict[int, SpinRecord] = {}

        dispatcher = game.event_dispatcher
        dispatcher.register(SpinEventType.REEL_SETTLED, self._on_settled)
        dispatcher.register(SpinEventType.OUTCOME_PRESENTED, self._on_outcome)

    def _record(self, session_id: int) -> SpinRecord:
        if session_id not in self.records:
            self.records[session_id] = SpinRecord(session_id)
        return self.records[session_id]

    def _on_settled(self, event: SpinEvent):
        record = self._record(event.session_id)
        record.spin_frames = event.data["spin_frames"]
        record.align_frames = event.data["align_frames"]
        record.stopped_early = event.data["stopped_early"]
        record.positions = dict(event.data["positions"])

    def _on_outcome(self, event: SpinEvent):
        record = self._record(event.session_id)
        record.symbol = event.data["symbol"]
        record.payout = event.data["payout"]

    def play_spin(self, stop_after_frames: Optional[int] = None) -> SpinRecord:
        """
        Play one full cycle and wait for its outcome.

        Args:
            stop_after_frames: Press the spin control again after this many frames

        Returns:
            Record of the cycle
        """
        scheduler = self.game.scheduler
        self.game.press_spin()
        session_id = self.game.controller.current_session_id

        if stop_after_frames is not None:
            frames = 0
            while frames < stop_after_frames and self.game.state == SpinState.SPINNING:
                scheduler.advance(self.frame_delta_ms)
                frames += 1
            if self.game.state == SpinState.SPINNING:
                self.game.press_spin()

        scheduler.run_until(
            lambda: self.game.controller.last_outcome is not None
            and self.game.controller.last_outcome.session_id == session_id,
            self.frame_delta_ms,
            self.max_frames_per_spin,
        )
        # Let the win frame finish growing so the next spin starts from a calm screen
        scheduler.run_until(lambda: not self.game.presentation.win_frame.revealing,
                            self.frame_delta_ms, self.max_frames_per_spin)

        return self.records[session_id]

    def run(self, spins: int, stop_after_frames: Optional[int] = None) -> Dict[str, Any]:
        """
        Play several cycles back to back.

        Args:
            spins: Number of cycles
            stop_after_frames: Optional early stop applied to every cycle

        Returns:
            Results dictionary with per-spin records and a summary
        """
        start_time = time.time()
        self.logger.info(f"Running {spins} headless spins at {self.frame_delta_ms:.3f} ms per frame")

        records = [self.play_spin(stop_after_frames) for _ in range(spins)]

        payouts = [r.payout for r in records if r.payout is not None]
        symbol_counts: Dict[str, int] = {}
        for record in records:
            symbol_counts[record.symbol] = symbol_counts.get(record.symbol, 0) + 1

        summary = {
            "spins": len(records),
            "total_payout": sum(payouts),
            "average_payout": sum(payouts) / len(payouts) if payouts else 0.0,
            "average_spin_frames": sum(r.spin_frames for r in records) / len(records) if records else 0.0,
            "average_align_frames": sum(r.align_frames for r in records) / len(records) if records else 0.0,
            "symbol_counts": symbol_counts,
            "frames_simulated": self.game.scheduler.frame_count,
            "elapsed_seconds": time.time() - start_time,
        }

        self.logger.info(f"Headless run finished: {summary['spins']} spins, "
                         f"total payout {summary['total_payout']:.2f}")

        return {"spins": [r.to_dict() for r in records], "summary": summary}
