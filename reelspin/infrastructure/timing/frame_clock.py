# reelspin/infrastructure/timing/frame_clock.py
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional


class FrameClockError(RuntimeError):
    """Raised when a clock is misused, e.g. started without a callback."""
    pass


class FrameBudgetExceededError(RuntimeError):
    """Raised when a frame-driven condition does not become true within its frame budget."""
    pass


class FrameClock:
    """
    A recurring per-frame callback.

    The clock does nothing on its own: while started it is attached to a
    FrameScheduler, which invokes the callback once per frame with the clock
    itself as argument. ``delta_ms`` holds the milliseconds elapsed since the
    previous frame for the duration of the callback.
    """
    def __init__(self, scheduler: "FrameScheduler", name: str = "clock"):
        self.scheduler = scheduler
        self.name = name
        self.delta_ms = 0.0
        self.frames = 0
        self.running = False
        self._callback: Optional[Callable[["FrameClock"], None]] = None

    def add(self, callback: Callable[["FrameClock"], None]) -> "FrameClock":
        """
        Register the frame callback.

        Args:
            callback: Called as callback(clock) once per frame while running

        Returns:
            The clock, to allow chaining
        """
        self._callback = callback
        return self

    def start(self):
        """
        Begin receiving frames.

        Raises:
            FrameClockError: If no callback was registered
        """
        if self._callback is None:
            raise FrameClockError(f"Frame clock '{self.name}' started without a callback")
        if self.running:
            return
        self.running = True
        self.scheduler.attach(self)

    def stop(self):
        """Stop receiving frames. Safe to call more than once."""
        if not self.running:
            return
        self.running = False
        self.scheduler.detach(self)

    def tick(self, delta_ms: float):
        # A clock stopped earlier in the same frame must not fire
        if not self.running:
            return
        self.delta_ms = delta_ms
        self.frames += 1
        self._callback(self)

    def __repr__(self) -> str:
        return f"FrameClock(name={self.name}, running={self.running}, frames={self.frames})"


@dataclass(order=True)
class DelayedCall:
    """A fire-and-forget call due at a point in scheduler time."""
    due_ms: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)
    fired: bool = field(default=False, compare=False)


class FrameScheduler:
    """
    Host frame loop shared by all clocks of one game.

    Every frame runs the callbacks of the clocks running at the start of the
    frame, one after the other, and then the delayed calls that became due.
    Time only moves through ``advance``, so the scheduler can be driven by a
    real-time loop (pygame clock) or stepped deterministically.
    """
    def __init__(self):
        self.logger = logging.getLogger("infrastructure.timing.scheduler")
        self.now_ms = 0.0
        self.frame_count = 0
        self._clocks: List[FrameClock] = []
        self._timers: List[DelayedCall] = []
        self._sequence = itertools.count()

    def create_clock(self, name: str = "clock") -> FrameClock:
        """Create a new, stopped clock bound to this scheduler."""
        return FrameClock(self, name)

    def attach(self, clock: FrameClock):
        if clock not in self._clocks:
            self._clocks.append(clock)
            self.logger.debug(f"Clock '{clock.name}' attached ({len(self._clocks)} running)")

    def detach(self, clock: FrameClock):
        if clock in self._clocks:
            self._clocks.remove(clock)
            self.logger.debug(f"Clock '{clock.name}' detached ({len(self._clocks)} running)")

    @property
    def running_clocks(self) -> List[FrameClock]:
        return list(self._clocks)

    @property
    def pending_calls(self) -> int:
        return sum(1 for timer in self._timers if not timer.fired)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> DelayedCall:
        """
        Schedule callback to run once, delay_ms of frame time from now.

        Args:
            delay_ms: Delay in milliseconds
            callback: Zero-argument callable

        Returns:
            The scheduled call record
        """
        call = DelayedCall(self.now_ms + max(0.0, delay_ms), next(self._sequence), callback)
        heapq.heappush(self._timers, call)
        return call

    def advance(self, delta_ms: float):
        """
        Run one frame.

        Args:
            delta_ms: Milliseconds elapsed since the previous frame
        """
        self.now_ms += delta_ms
        self.frame_count += 1

        for clock in list(self._clocks):
            clock.tick(delta_ms)

        while self._timers and self._timers[0].due_ms <= self.now_ms:
            call = heapq.heappop(self._timers)
            call.fired = True
            call.callback()

    def run_frames(self, count: int, delta_ms: float):
        """Run count frames of delta_ms each."""
        for _ in range(count):
            self.advance(delta_ms)

    def run_until(self, predicate: Callable[[], bool], delta_ms: float, max_frames: int = 10000) -> int:
        """
        Run frames until predicate() is true.

        Args:
            predicate: Checked before every frame
            delta_ms: Frame length in milliseconds
            max_frames: Frame budget

        Returns:
            Number of frames run

        Raises:
            FrameBudgetExceededError: If the budget runs out first
        """
        frames = 0
        while not predicate():
            if frames >= max_frames:
                raise FrameBudgetExceededError(
                    f"Condition not reached within {max_frames} frames"
                )
            self.advance(delta_ms)
            frames += 1
        return frames
