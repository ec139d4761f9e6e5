"""Credential validation rules.

Rules run in a fixed order and the first failing rule wins:

1. email is empty
2. password is empty
3. email does not match EMAIL_PATTERN

Values are checked exactly as entered (no trimming, no normalization).
"""

import re

from timecraft_auth.core.errors import ValidationError
from timecraft_auth.core.result import Failure, Success
from timecraft_auth.core.validation import validate_not_empty, validate_pattern
from timecraft_auth.domain.errors import LoginValidationError
from timecraft_auth.domain.value_objects import Credentials

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
"""Local part, ``@``, domain, dot, then a 2-64 letter suffix (full match)."""


def validate_email_format(v: str) -> bool:
    """Check whether an email address has an acceptable shape.

    Args:
        v: Email address as entered.

    Returns:
        True if the whole string matches EMAIL_PATTERN.

    Example:
        >>> validate_email_format("demo@timecraft.com")
        True
        >>> validate_email_format("not-an-email")
        False
    """
    return EMAIL_PATTERN.fullmatch(v) is not None


def validate_credentials(credentials: Credentials) -> ValidationError | None:
    """Run the login form rules against a credential pair.

    Args:
        credentials: Values from the form.

    Returns:
        The first failing rule's error, or None when every rule passes.

    Example:
        >>> validate_credentials(Credentials(email="", password="x"))
        ValidationError(code=<ErrorCode.EMPTY_EMAIL: 'empty_email'>, ...)
        >>> validate_credentials(Credentials(email="a@b.co", password="x")) is None
        True
    """
    checks = (
        lambda: validate_not_empty(
            credentials.email, error=LoginValidationError.EMPTY_EMAIL
        ),
        lambda: validate_not_empty(
            credentials.password, error=LoginValidationError.EMPTY_PASSWORD
        ),
        lambda: validate_pattern(
            credentials.email,
            EMAIL_PATTERN,
            error=LoginValidationError.INVALID_EMAIL_FORMAT,
        ),
    )
    for check in checks:
        match check():
            case Failure(error=error):
                return error
            case Success():
                continue
    return None
