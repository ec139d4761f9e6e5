"""Core errors package.

Usage:
    from timecraft_auth.core.errors import DomainError, ValidationError
"""

from timecraft_auth.core.enums import ErrorCode
from timecraft_auth.core.errors.common_errors import (
    AuthenticationError,
    ValidationError,
)
from timecraft_auth.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "DomainError",
    "ErrorCode",
    "ValidationError",
]
