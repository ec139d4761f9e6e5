"""Base domain error class.

DomainError is the base class for every error the login flow reports.
Errors are values returned inside ``Failure``, never raised, so the
presentation layer renders them uniformly.

Usage:
    from timecraft_auth.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from timecraft_auth.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable message, ready to show to the user.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
