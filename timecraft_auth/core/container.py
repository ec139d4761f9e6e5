"""Dependency container (composition root).

Adapter selection and wiring live here; application code depends on
protocols only.

- get_logger(): app-scoped logger singleton
- get_event_bus(): app-scoped event bus with the logging handler subscribed
- create_auth_form_controller(): new controller per login screen

Usage:
    from timecraft_auth.core.container import create_auth_form_controller

    controller = create_auth_form_controller()
    result = await controller.attempt_login(credentials)
    ...
    controller.close()  # when the screen goes away
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from timecraft_auth.core.config import Settings, get_settings

if TYPE_CHECKING:
    from timecraft_auth.application.services import AuthFormController
    from timecraft_auth.domain.protocols import (
        AuthenticatorProtocol,
        EventBusProtocol,
        LoggerProtocol,
    )


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from timecraft_auth.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache
def get_event_bus() -> "EventBusProtocol":
    """Return the application-scoped event bus.

    LoggingEventHandler is subscribed to every login lifecycle event.

    Returns:
        EventBusProtocol: In-memory event bus.
    """
    from timecraft_auth.infrastructure.events.handlers import LoggingEventHandler
    from timecraft_auth.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).register(event_bus)
    return event_bus


def get_authenticator(settings: Settings | None = None) -> "AuthenticatorProtocol":
    """Build the authenticator configured by ``settings``.

    Args:
        settings: Settings to use (defaults to get_settings()).

    Returns:
        AuthenticatorProtocol: SimulatedAuthenticator for the demo pair.
    """
    from timecraft_auth.infrastructure.auth import SimulatedAuthenticator

    settings = settings or get_settings()
    return SimulatedAuthenticator(
        email=settings.demo_email,
        password=settings.demo_password,
        delay_seconds=settings.auth_delay_seconds,
    )


def create_auth_form_controller(
    *,
    settings: Settings | None = None,
    authenticator: "AuthenticatorProtocol | None" = None,
    event_bus: "EventBusProtocol | None" = None,
    logger: "LoggerProtocol | None" = None,
) -> "AuthFormController":
    """Create a controller for one login screen.

    Not cached: every screen owns its own FormState.

    Args:
        settings: Settings to use (defaults to get_settings()).
        authenticator: Override the configured authenticator.
        event_bus: Override the app-scoped event bus.
        logger: Override the app-scoped logger.

    Returns:
        AuthFormController: Fresh controller in the idle state.
    """
    from timecraft_auth.application.services import AuthFormController

    settings = settings or get_settings()
    return AuthFormController(
        authenticator=authenticator or get_authenticator(settings),
        event_bus=event_bus or get_event_bus(),
        logger=logger or get_logger(),
        redirect_delay_seconds=settings.redirect_delay_seconds,
    )
