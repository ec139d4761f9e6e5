"""Event bus adapters."""

from timecraft_auth.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
