# reelspin/domain/events/event_dispatcher.py
import logging
from enum import Enum
from typing import Callable, Dict, List, Type

from .event_types import DomainEvent


Handler = Callable[[DomainEvent], None]


class EventDispatcher:
    """
    Delivers domain events synchronously to their observers.

    Handlers subscribe to one event type (e.g. SpinEventType.REEL_SETTLED)
    or to an event class. A class subscription also receives events of its
    subclasses, so a DomainEvent handler sees every spin event.
    """
    def __init__(self):
        self.logger = logging.getLogger("domain.events.dispatcher")
        self.handlers: Dict[Enum, List[Handler]] = {}
        self.class_handlers: Dict[Type[DomainEvent], List[Handler]] = {}

    def register(self, event_type: Enum, handler: Handler):
        """
        Subscribe handler to events of one type.

        Args:
            event_type: Event type member to handle
            handler: Called with the event
        """
        self.handlers.setdefault(event_type, []).append(handler)
        self.logger.debug(f"Registered handler for event type: {event_type.name}")

    def register_for_class(self, event_class: Type[DomainEvent], handler: Handler):
        """
        Subscribe handler to every event that is an instance of event_class.

        Args:
            event_class: DomainEvent subclass to handle
            handler: Called with the event
        """
        self.class_handlers.setdefault(event_class, []).append(handler)
        self.logger.debug(f"Registered handler for event class: {event_class.__name__}")

    def handlers_for(self, event: DomainEvent) -> List[Handler]:
        """Handlers of event in delivery order: type handlers, then class handlers from most specific."""
        matched = list(self.handlers.get(event.type, []))
        for cls in type(event).__mro__:
            matched.extend(self.class_handlers.get(cls, []))
        return matched

    def dispatch(self, event: DomainEvent):
        """
        Deliver event to its handlers.

        A failing handler is logged and the remaining handlers still run.

        Args:
            event: Event to dispatch
        """
        handlers = self.handlers_for(event)
        if not handlers:
            return

        self.logger.debug(f"Dispatching {event} to {len(handlers)} handlers")
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                self.logger.exception(f"Error in event handler for {event}")
