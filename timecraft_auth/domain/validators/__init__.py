"""Validators package exports."""

from timecraft_auth.domain.validators.functions import (
    EMAIL_PATTERN,
    validate_credentials,
    validate_email_format,
)

__all__ = [
    "EMAIL_PATTERN",
    "validate_credentials",
    "validate_email_format",
]
