# reelspin/domain/spin/services/spin_controller.py
import logging
import math
from typing import Optional, Tuple

from reelspin.domain.animation.easing import ease_in_out_expo, clamp01
from reelspin.domain.events.event_dispatcher import EventDispatcher
from reelspin.domain.events.spin_events import SpinEventType, SpinEvent
from reelspin.domain.outcome.entities.outcome import Outcome
from reelspin.domain.outcome.services.outcome_evaluator import OutcomeEvaluator
from reelspin.domain.presentation.services.presentation_feedback import PresentationFeedback
from reelspin.domain.reel.entities.reel import Reel
from reelspin.domain.reel.entities.reel_config import ReelConfig
from reelspin.domain.spin.entities.spin_session import SpinSession, SpinState
from reelspin.infrastructure.config.errors import InvalidConfigurationError
from reelspin.infrastructure.timing.frame_clock import FrameClock, FrameScheduler


def grid_target(x: float, pitch: float) -> float:
    """Nearest multiple of pitch, halves rounded up."""
    return math.floor(x / pitch + 0.5) * pitch


def align_position(x: float, pitch: float, threshold: float, rate: float) -> Tuple[float, bool]:
    """
    One alignment frame for a single position.

    Returns:
        (new position, whether it is now exactly on the grid)
    """
    target = grid_target(x, pitch)
    diff = target - x
    if abs(diff) > threshold:
        return x + diff * rate, False
    return target, True


class SpinController:
    """
    Runs the spin cycle of one reel.

    IDLE -> SPINNING -> ALIGNING -> SETTLING -> IDLE. Spinning and
    aligning each own a frame clock that exists only for that phase. The
    result is computed after a settle delay by a scheduled call that is
    tagged with its session id and dropped if another spin has started
    in the meantime.
    """
    def __init__(self, reel: Reel, config: ReelConfig, scheduler: FrameScheduler,
                 evaluator: OutcomeEvaluator, presentation: PresentationFeedback,
                 event_dispatcher: Optional[EventDispatcher] = None):
        self.reel = reel
        self.config = config
        self.scheduler = scheduler
        self.evaluator = evaluator
        self.presentation = presentation
        self.event_dispatcher = event_dispatcher
        self.logger = logging.getLogger(f"domain.spin.controller.{reel.id}")

        self.state = SpinState.IDLE
        self.session: Optional[SpinSession] = None
        self.last_session: Optional[SpinSession] = None
        self.last_outcome: Optional[Outcome] = None
        self._generation = 0
        self._spin_clock: Optional[FrameClock] = None
        self._align_clock: Optional[FrameClock] = None

    @property
    def is_idle(self) -> bool:
        return self.state == SpinState.IDLE

    @property
    def current_session_id(self) -> int:
        return self._generation

    def request_spin(self) -> SpinState:
        """
        Handle a press of the spin control.

        Starts a spin when idle and stops the reel early when spinning.
        Presses while the reel aligns are ignored.

        Returns:
            The state after handling the press

        Raises:
            InvalidConfigurationError: If the reel config cannot drive a spin;
                the controller stays IDLE
        """
        if self.state == SpinState.IDLE:
            self._start_spin()
        elif self.state == SpinState.SPINNING:
            self.logger.info(f"Stop requested for session {self.session.session_id}")
            self._begin_alignment(stopped_early=True)
        else:
            self.logger.debug(f"Spin request ignored while {self.state.name}")
        return self.state

    def compute_step(self, progress: float) -> float:
        """
        Distance in pixels the reel moves this frame.

        The eased speed falls off quickly after the midpoint, so past
        late_phase_start a constant is added and the result is scaled down
        linearly, keeping the reel visibly moving until progress reaches 1.
        """
        cfg = self.config
        step = (1 - ease_in_out_expo(clamp01(progress))) * cfg.base_speed
        if progress > cfg.late_phase_start:
            step = (step + cfg.late_boost_offset) * (cfg.late_boost_ceiling - progress)
        return step

    def _start_spin(self):
        errors = self.config.validate()
        if errors:
            error = InvalidConfigurationError(errors)
            self.logger.error(f"Spin rejected: {error.message}")
            self._dispatch(SpinEventType.SPIN_REJECTED, self._generation, errors=errors)
            raise error

        self.presentation.reset_for_spin()

        self._generation += 1
        self.session = SpinSession(self._generation, self.config.spin_duration)
        self.state = SpinState.SPINNING

        self._spin_clock = self.scheduler.create_clock(f"spin-{self._generation}").add(self._on_spin_frame)
        self._spin_clock.start()

        self.logger.info(f"Session {self.session.session_id} started, duration={self.session.duration}s")
        self._dispatch(SpinEventType.SPIN_STARTED, self.session.session_id)

    def _on_spin_frame(self, clock: FrameClock):
        if self._spin_clock is None or self.session is None:
            return

        progress = self.session.advance(clock.delta_ms)
        self.reel.shift_all(self.compute_step(progress))

        if progress >= 1:
            self._begin_alignment(stopped_early=False)

    def _begin_alignment(self, stopped_early: bool):
        self._stop_spin_clock()

        session = self.session
        session.phase = SpinState.ALIGNING
        session.stopped_early = stopped_early
        self.state = SpinState.ALIGNING

        if stopped_early:
            self._dispatch(SpinEventType.STOP_REQUESTED, session.session_id,
                           progress=session.progress)
        self.logger.debug(f"Session {session.session_id} aligning after {session.spin_frames} frames")
        self._dispatch(SpinEventType.ALIGNMENT_STARTED, session.session_id)

        self._align_clock = self.scheduler.create_clock(f"align-{session.session_id}").add(self._on_align_frame)
        self._align_clock.start()

    def _on_align_frame(self, clock: FrameClock):
        if self._align_clock is None or self.session is None:
            return

        self.session.align_frames += 1
        all_aligned = True
        for tile in self.reel:
            tile.x, aligned = align_position(
                tile.x, self.reel.tile_size, self.config.align_threshold, self.config.align_rate
            )
            all_aligned = all_aligned and aligned

        if all_aligned:
            self._stop_align_clock()
            self._settle()

    def _settle(self):
        session = self.session
        session.phase = SpinState.SETTLING
        self.state = SpinState.SETTLING

        self.reel.normalize()
        self.presentation.hide_win_frame()

        session_id = session.session_id
        self.scheduler.call_later(self.config.settle_delay_ms, lambda: self._resolve_outcome(session_id))

        self.logger.info(f"Session {session_id} settled: {self.reel.visual_order()}")
        self._dispatch(SpinEventType.REEL_SETTLED, session_id,
                       spin_frames=session.spin_frames,
                       align_frames=session.align_frames,
                       stopped_early=session.stopped_early,
                       positions={tile.symbol: tile.x for tile in self.reel})

        # Idle before the result is shown, so the player can spin again at once
        self.last_session = session
        self.session = None
        self.state = SpinState.IDLE

    def _resolve_outcome(self, session_id: int):
        if session_id != self._generation:
            self.logger.debug(f"Dropping outcome of session {session_id}, session {self._generation} is newer")
            self._dispatch(SpinEventType.OUTCOME_DISCARDED, session_id)
            return

        outcome = self.evaluator.evaluate(self.reel, session_id)
        self.last_outcome = outcome
        self.presentation.present(outcome)
        self._dispatch(SpinEventType.OUTCOME_PRESENTED, session_id,
                       symbol=outcome.symbol, payout=outcome.payout)

    def _stop_spin_clock(self):
        if self._spin_clock is not None:
            self._spin_clock.stop()
            self._spin_clock = None

    def _stop_align_clock(self):
        if self._align_clock is not None:
            self._align_clock.stop()
            self._align_clock = None

    def _dispatch(self, event_type: SpinEventType, session_id: int, **data):
        if self.event_dispatcher is None:
            return
        self.event_dispatcher.dispatch(
            SpinEvent(type=event_type, data=dict(data), session_id=session_id, reel_id=self.reel.id)
        )
