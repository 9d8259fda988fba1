# reelspin/domain/presentation/services/presentation_feedback.py
import logging

from reelspin.domain.outcome.entities.outcome import Outcome
from reelspin.domain.reel.entities.reel_config import ReelConfig
from reelspin.infrastructure.timing.frame_clock import FrameScheduler
from ..entities.win_frame import WinFrame
from ..entities.payout_display import WinningSymbolBadge, PayoutMessage


class PresentationFeedback:
    """
    Everything shown to the player about a result: the win frame, the
    winning symbol badge and the payout message.
    """
    def __init__(self, scheduler: FrameScheduler, config: ReelConfig):
        self.logger = logging.getLogger("domain.presentation")
        self.win_frame = WinFrame(scheduler, config.reveal_step)
        self.badge = WinningSymbolBadge(tuple(config.badge_position), config.tile_size)
        self.message = PayoutMessage(config.message_offset)

    def reset_for_spin(self):
        """Remove every trace of the previous result before a new spin."""
        self.message.clear()
        self.badge.hide()
        self.win_frame.hide()

    def hide_win_frame(self):
        self.win_frame.hide()

    def present(self, outcome: Outcome):
        """Reveal the win frame and show the winning symbol with its payout."""
        self.win_frame.reveal()
        self.badge.show(outcome.symbol)
        self.message.show(outcome.payout, self.badge.bounds)
        self.logger.info(f"Showing '{self.message.text}' for {outcome.symbol}")
