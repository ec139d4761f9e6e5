"""Logging event handler for login flow events.

Log Levels:
    - INFO: ATTEMPTED and SUCCEEDED events (normal operations)
    - WARNING: FAILED and CANCELLED events

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - attempt_id: Login attempt (when available)
    - email: Email address as entered
    - reason: Machine-readable error code (for FAILED events)

Passwords never reach this handler; events do not carry them.

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(event_bus)
"""

from timecraft_auth.domain.events import (
    LoginAttemptCancelled,
    LoginAttempted,
    LoginFailed,
    LoginRedirectReady,
    LoginSucceeded,
    LoginValidationFailed,
    PasswordResetRequested,
)
from timecraft_auth.domain.protocols import EventBusProtocol, LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of login events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event type.

        Args:
            event_bus: Bus to subscribe on.
        """
        event_bus.subscribe(LoginAttempted, self.handle_login_attempted)
        event_bus.subscribe(LoginValidationFailed, self.handle_login_validation_failed)
        event_bus.subscribe(LoginSucceeded, self.handle_login_succeeded)
        event_bus.subscribe(LoginFailed, self.handle_login_failed)
        event_bus.subscribe(LoginAttemptCancelled, self.handle_login_attempt_cancelled)
        event_bus.subscribe(LoginRedirectReady, self.handle_login_redirect_ready)
        event_bus.subscribe(PasswordResetRequested, self.handle_password_reset_requested)

    # =========================================================================
    # Login Event Handlers
    # =========================================================================

    async def handle_login_attempted(self, event: LoginAttempted) -> None:
        """Log login attempt (INFO level)."""
        self._logger.info(
            "login_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attempt_id=str(event.attempt_id),
            email=event.email,
            remember_me=event.remember_me,
        )

    async def handle_login_validation_failed(
        self, event: LoginValidationFailed
    ) -> None:
        """Log rejected form input (WARNING level)."""
        self._logger.warning(
            "login_validation_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            field=event.field,
            reason=event.reason,
        )

    async def handle_login_succeeded(self, event: LoginSucceeded) -> None:
        """Log successful login (INFO level)."""
        self._logger.info(
            "login_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attempt_id=str(event.attempt_id),
            email=event.email,
            remember_me=event.remember_me,
        )

    async def handle_login_failed(self, event: LoginFailed) -> None:
        """Log rejected credentials (WARNING level)."""
        self._logger.warning(
            "login_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attempt_id=str(event.attempt_id),
            email=event.email,
            reason=event.reason,
        )

    async def handle_login_attempt_cancelled(
        self, event: LoginAttemptCancelled
    ) -> None:
        """Log abandoned submission (WARNING level)."""
        self._logger.warning(
            "login_attempt_cancelled",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attempt_id=str(event.attempt_id),
            email=event.email,
        )

    async def handle_login_redirect_ready(self, event: LoginRedirectReady) -> None:
        """Log redirect to the welcome screen (INFO level)."""
        self._logger.info(
            "login_redirect_ready",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attempt_id=str(event.attempt_id),
            email=event.email,
        )

    # =========================================================================
    # Password Reset Event Handlers
    # =========================================================================

    async def handle_password_reset_requested(
        self, event: PasswordResetRequested
    ) -> None:
        """Log password reset request (INFO level)."""
        self._logger.info(
            "password_reset_requested",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
        )
