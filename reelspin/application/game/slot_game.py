# reelspin/application/game/slot_game.py
import logging
from typing import Dict, Any, Optional

from reelspin.domain.events.event_dispatcher import EventDispatcher
from reelspin.domain.outcome.services.outcome_evaluator import OutcomeEvaluator
from reelspin.domain.presentation.services.presentation_feedback import PresentationFeedback
from reelspin.domain.reel.entities.reel_config import ReelConfig
from reelspin.domain.reel.factories.reel_factory import ReelFactory
from reelspin.domain.spin.entities.spin_session import SpinState
from reelspin.domain.spin.services.spin_controller import SpinController
from reelspin.infrastructure.rng.rng_provider import RNGProvider
from reelspin.infrastructure.timing.frame_clock import FrameScheduler
from .render_snapshot import RenderSnapshot


class SlotGame:
    """
    One playable reel: reel, controller, evaluator and presentation wired
    to a shared frame scheduler.

    The host calls ``press_spin`` on user input, advances ``scheduler``
    once per frame and draws ``snapshot()``.
    """
    def __init__(self, config: ReelConfig, rng, scheduler: Optional[FrameScheduler] = None,
                 event_dispatcher: Optional[EventDispatcher] = None, reel_id: str = "reel"):
        """
        Initialize the game.

        Args:
            config: Reel configuration
            rng: RNG strategy for the symbol order and payouts
            scheduler: Frame scheduler, a new one is created if omitted
            event_dispatcher: Dispatcher receiving spin events, created if omitted
            reel_id: Identifier of the reel
        """
        self.logger = logging.getLogger("application.game")
        self.config = config
        self.scheduler = scheduler or FrameScheduler()
        self.event_dispatcher = event_dispatcher or EventDispatcher()

        self.reel = ReelFactory(rng).create_reel(config, reel_id)
        self.evaluator = OutcomeEvaluator(rng, config.winning_reference, config.max_payout)
        self.presentation = PresentationFeedback(self.scheduler, config)
        self.controller = SpinController(
            self.reel, config, self.scheduler, self.evaluator, self.presentation, self.event_dispatcher
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any], rng_provider: Optional[RNGProvider] = None,
                    scheduler: Optional[FrameScheduler] = None,
                    event_dispatcher: Optional[EventDispatcher] = None) -> "SlotGame":
        """
        Build a game from a full (schema-validated) game configuration.

        Args:
            config: Dictionary with "reel" and "rng" sections
            rng_provider: Provider used to create the RNG strategy
            scheduler: Optional frame scheduler
            event_dispatcher: Optional event dispatcher
        """
        rng_provider = rng_provider or RNGProvider()
        rng = rng_provider.create_from_config(config.get("rng") or {})
        reel_config = ReelConfig.from_dict(config.get("reel"))
        return cls(reel_config, rng, scheduler, event_dispatcher)

    @property
    def state(self) -> SpinState:
        return self.controller.state

    def press_spin(self) -> SpinState:
        """Toggle the spin control: start a spin, or stop the running one."""
        return self.controller.request_spin()

    def advance(self, delta_ms: float):
        """Run one frame of delta_ms."""
        self.scheduler.advance(delta_ms)

    def snapshot(self) -> RenderSnapshot:
        """Current drawable state."""
        presentation = self.presentation
        bounds = presentation.badge.bounds

        return RenderSnapshot(
            state=self.controller.state.name,
            tiles=self.reel.snapshot(),
            tile_size=self.config.tile_size,
            visible_count=self.config.visible_count,
            win_frame_scale=presentation.win_frame.scale,
            winning_symbol=presentation.badge.symbol,
            winning_symbol_visible=presentation.badge.visible,
            winning_symbol_bounds=(bounds.x, bounds.y, bounds.width, bounds.height),
            message_text=presentation.message.text,
            message_visible=presentation.message.visible,
            message_position=presentation.message.position,
        )
