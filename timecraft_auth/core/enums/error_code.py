"""Machine-readable error codes for the login flow.

Codes follow the ENTITY_REASON naming convention and are carried by every
DomainError so callers can branch without parsing messages.

Categories:
- Validation errors (EMPTY_*, INVALID_*)
- Authentication errors (INVALID_CREDENTIALS, AUTHENTICATION_UNAVAILABLE)
- Submission lifecycle errors (SUBMISSION_*, CONTROLLER_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Login flow error codes (machine-readable)."""

    # Validation errors
    EMPTY_EMAIL = "empty_email"
    EMPTY_PASSWORD = "empty_password"
    INVALID_EMAIL_FORMAT = "invalid_email_format"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    AUTHENTICATION_UNAVAILABLE = "authentication_unavailable"

    # Submission lifecycle errors
    SUBMISSION_IN_PROGRESS = "submission_in_progress"
    CONTROLLER_CLOSED = "controller_closed"
