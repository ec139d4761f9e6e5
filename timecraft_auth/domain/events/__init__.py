"""Domain events package."""

from timecraft_auth.domain.events.base_event import DomainEvent
from timecraft_auth.domain.events.login_events import (
    FormStateChanged,
    LoginAttemptCancelled,
    LoginAttempted,
    LoginFailed,
    LoginRedirectReady,
    LoginSucceeded,
    LoginValidationFailed,
    PasswordResetRequested,
)

__all__ = [
    "DomainEvent",
    "FormStateChanged",
    "LoginAttemptCancelled",
    "LoginAttempted",
    "LoginFailed",
    "LoginRedirectReady",
    "LoginSucceeded",
    "LoginValidationFailed",
    "PasswordResetRequested",
]
