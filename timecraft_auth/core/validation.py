"""Validation helpers for form input.

All helpers return Result types so callers can chain checks and stop at the
first failure.

Usage:
    from timecraft_auth.core.validation import validate_not_empty

    result = validate_not_empty(email, error=EMPTY_EMAIL)
    match result:
        case Success(value):
            ...
        case Failure(error):
            print(error.message)
"""

import re

from timecraft_auth.core.errors import ValidationError
from timecraft_auth.core.result import Failure, Result, Success


def validate_not_empty(
    value: str, *, error: ValidationError
) -> Result[str, ValidationError]:
    """Validate that a string has at least one character.

    Whitespace counts as content; values are checked exactly as entered.

    Args:
        value: String to validate.
        error: Error to report when the string is empty.

    Returns:
        Success with value if not empty, Failure with the given error otherwise.
    """
    if len(value) == 0:
        return Failure(error=error)
    return Success(value=value)


def validate_pattern(
    value: str, pattern: re.Pattern[str], *, error: ValidationError
) -> Result[str, ValidationError]:
    """Validate that the whole string matches a compiled pattern.

    Args:
        value: String to validate.
        pattern: Compiled regular expression, matched against the full string.
        error: Error to report when the string does not match.

    Returns:
        Success with value if it matches, Failure with the given error otherwise.
    """
    if pattern.fullmatch(value) is None:
        return Failure(error=error)
    return Success(value=value)
