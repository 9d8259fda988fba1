# reelspin/domain/presentation/entities/win_frame.py
import logging
from typing import Optional

from reelspin.infrastructure.timing.frame_clock import FrameClock, FrameScheduler


class WinFrame:
    """
    The frame drawn around the winning slot.

    ``reveal`` grows the scale by a fixed step every frame until it reaches
    1; the growth counts frames, not elapsed time. ``hide`` is immediate.
    """
    def __init__(self, scheduler: FrameScheduler, reveal_step: float = 0.1):
        self.scheduler = scheduler
        self.reveal_step = reveal_step
        self.scale = 0.0
        self._clock: Optional[FrameClock] = None
        self.logger = logging.getLogger("domain.presentation.win_frame")

    @property
    def visible(self) -> bool:
        return self.scale > 0

    @property
    def revealing(self) -> bool:
        return self._clock is not None and self._clock.running

    def reveal(self):
        """Animate the scale from 0 up to 1."""
        self._stop_clock()
        self.scale = 0.0
        self._clock = self.scheduler.create_clock("win-frame-reveal").add(self._on_frame)
        self._clock.start()

    def hide(self):
        """Cancel any reveal and collapse the frame."""
        self._stop_clock()
        self.scale = 0.0

    def _on_frame(self, clock: FrameClock):
        if self.scale < 1:
            self.scale = min(1.0, self.scale + self.reveal_step)
        if self.scale >= 1:
            self.scale = 1.0
            clock.stop()
            self.logger.debug(f"Win frame revealed after {clock.frames} frames")

    def _stop_clock(self):
        if self._clock is not None:
            self._clock.stop()
            self._clock = None
