"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based handler registry.
Handlers run concurrently with asyncio.gather; a failing handler is logged
and never affects the publisher or the other handlers.

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(FormStateChanged, render)
    >>> await bus.publish(FormStateChanged(previous=old, current=new))
"""

import asyncio
from collections import defaultdict

from timecraft_auth.domain.events.base_event import DomainEvent
from timecraft_auth.domain.protocols.event_bus_protocol import EventHandler
from timecraft_auth.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        - NOT thread-safe (single event loop design)

    Attributes:
        _handlers: Event type → list of async handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async function to call when event is published.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> bool:
        """Remove a previously registered handler.

        Args:
            event_type: Class the handler was registered for.
            handler: Handler to remove (first registration only).

        Returns:
            True if the handler was registered and has been removed.
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log any handler exceptions (warning level)

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                    exc_info=result,
                )
