"""Event handlers."""

from timecraft_auth.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
