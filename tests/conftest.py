"""Pytest configuration and shared fixtures.

Provides:
1. Settings isolation (cached settings cleared around each test)
2. Logger and event bus doubles
3. A controller wired to a fast simulated authenticator
"""

import asyncio
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from timecraft_auth.application.services import AuthFormController
from timecraft_auth.core.config import get_settings
from timecraft_auth.domain.events import DomainEvent
from timecraft_auth.domain.value_objects import Credentials
from timecraft_auth.infrastructure.auth import SimulatedAuthenticator
from timecraft_auth.infrastructure.events.in_memory_event_bus import InMemoryEventBus

DEMO_EMAIL = "demo@timecraft.com"
DEMO_PASSWORD = "demo123"

# Short enough to keep the suite fast, long enough to observe the pending window.
FAST_AUTH_DELAY = 0.05
FAST_REDIRECT_DELAY = 0.01


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Ensure every test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_logger():
    """Logger double; bind() returns the same mock so calls stay visible."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def event_bus(mock_logger):
    """Real in-memory bus with a mocked logger."""
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def published_events(event_bus):
    """Collect every event the controller publishes, in order."""
    from timecraft_auth.domain import events as login_events

    collected: list[DomainEvent] = []

    async def collect(event: DomainEvent) -> None:
        collected.append(event)

    for name in login_events.__all__:
        event_type = getattr(login_events, name)
        if event_type is not DomainEvent:
            event_bus.subscribe(event_type, collect)
    return collected


@pytest.fixture
def authenticator():
    """Simulated authenticator with a short delay."""
    return SimulatedAuthenticator(
        email=DEMO_EMAIL,
        password=DEMO_PASSWORD,
        delay_seconds=FAST_AUTH_DELAY,
    )


@pytest_asyncio.fixture
async def controller(authenticator, event_bus, mock_logger):
    """Controller wired to fast delays; closed after the test."""
    ctrl = AuthFormController(
        authenticator=authenticator,
        event_bus=event_bus,
        logger=mock_logger,
        redirect_delay_seconds=FAST_REDIRECT_DELAY,
    )
    yield ctrl
    ctrl.close()
    # Let cancelled tasks unwind before the loop closes.
    await asyncio.sleep(0)


@pytest.fixture
def demo_credentials():
    """The accepted credential pair."""
    return Credentials(email=DEMO_EMAIL, password=DEMO_PASSWORD)
