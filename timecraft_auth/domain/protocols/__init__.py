"""Domain protocols (ports)."""

from timecraft_auth.domain.protocols.authenticator_protocol import (
    AuthenticatorProtocol,
)
from timecraft_auth.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from timecraft_auth.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AuthenticatorProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
]
