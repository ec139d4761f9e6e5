"""LoggerProtocol definition for structured logging.

Standardizes structured logging while remaining backend-agnostic.
Implementations MUST keep logs structured (key-value context) and safe.

Security:
    - NEVER log passwords
    - Log emails as entered; they are the only identifier the form has

Usage:
    from timecraft_auth.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("login_attempted", email=email)

    attempt_logger = logger.bind(attempt_id=str(attempt_id))
    attempt_logger.info("submission_started")  # attempt_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
