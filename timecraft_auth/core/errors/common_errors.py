"""Common error classes used across the login flow.

Error Types:
- ValidationError: A form field failed a local check
- AuthenticationError: The credentials were rejected, or the submission
  could not run (already pending, controller closed)

Usage:
    from timecraft_auth.core.errors import ValidationError
    from timecraft_auth.core.enums import ErrorCode
    from timecraft_auth.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.EMPTY_EMAIL,
        message="Please enter your email",
        field="email",
    ))
"""

from dataclasses import dataclass

from timecraft_auth.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Form field that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass
