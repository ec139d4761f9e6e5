"""Event bus protocol (port) for domain events.

The domain defines the interface; infrastructure provides the adapter
(InMemoryEventBus). Presentation code subscribes to FormStateChanged through
this port instead of sharing mutable view fields.

Usage:
    >>> async def render(event: FormStateChanged) -> None:
    ...     screen.update(event.current)
    >>>
    >>> event_bus.subscribe(FormStateChanged, render)
    >>> await event_bus.publish(FormStateChanged(previous=old, current=new))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from timecraft_auth.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never reaches the publisher.
        2. **Async support**: All handlers are async.
        3. **Type-based routing**: Handlers registered for an event type only
           receive events of that exact type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (exact type match).
            handler: Async function called with the published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Notes:
            - No handlers = no-op
            - NEVER raises handler exceptions (fail-open guarantee)
        """
        ...
