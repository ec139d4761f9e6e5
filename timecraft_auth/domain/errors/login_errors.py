"""Login form error values.

Every failure the login form can show is a ready-made error value. Messages
are the exact strings the login screen displays.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types and FormState.last_error
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from timecraft_auth.domain.errors import LoginValidationError

    if not credentials.email:
        return LoginValidationError.EMPTY_EMAIL
"""

from timecraft_auth.core.enums import ErrorCode
from timecraft_auth.core.errors import AuthenticationError, ValidationError


class LoginValidationError:
    """Validation error constants, checked in this order.

    Error Categories:
        - EMPTY_EMAIL: email field has zero length
        - EMPTY_PASSWORD: password field has zero length
        - INVALID_EMAIL_FORMAT: email does not look like local@domain.tld
    """

    EMPTY_EMAIL = ValidationError(
        code=ErrorCode.EMPTY_EMAIL,
        message="Please enter your email",
        field="email",
    )
    EMPTY_PASSWORD = ValidationError(
        code=ErrorCode.EMPTY_PASSWORD,
        message="Please enter your password",
        field="password",
    )
    INVALID_EMAIL_FORMAT = ValidationError(
        code=ErrorCode.INVALID_EMAIL_FORMAT,
        message="Please enter a valid email address",
        field="email",
    )


class LoginAuthError:
    """Authentication and submission error constants.

    Error Categories:
        - INVALID_CREDENTIALS: the authenticator rejected the pair
        - AUTHENTICATION_UNAVAILABLE: the authenticator raised instead of
          answering (network down, backend error)
        - SUBMISSION_IN_PROGRESS: a submission is already pending
        - CONTROLLER_CLOSED: the owning screen was torn down
    """

    INVALID_CREDENTIALS = AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message="Invalid email or password",
    )
    AUTHENTICATION_UNAVAILABLE = AuthenticationError(
        code=ErrorCode.AUTHENTICATION_UNAVAILABLE,
        message="Unable to sign in right now. Please try again",
    )
    SUBMISSION_IN_PROGRESS = AuthenticationError(
        code=ErrorCode.SUBMISSION_IN_PROGRESS,
        message="A sign-in is already in progress",
    )
    CONTROLLER_CLOSED = AuthenticationError(
        code=ErrorCode.CONTROLLER_CLOSED,
        message="Login form is closed",
    )
