"""Domain errors package.

Usage:
    from timecraft_auth.domain.errors import LoginAuthError, LoginValidationError
"""

from timecraft_auth.domain.errors.login_errors import (
    LoginAuthError,
    LoginValidationError,
)

__all__ = ["LoginAuthError", "LoginValidationError"]
