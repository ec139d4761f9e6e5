"""Login form domain events.

Pattern: 3 events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: User initiated action (before the simulated round trip)
- *Succeeded: Credentials accepted (after FormState is updated)
- *Failed: Credentials rejected or form invalid (after FormState is updated)

Every event of one login attempt shares the same ``attempt_id``.

Handlers:
- LoggingEventHandler: all lifecycle events
- Presentation layer: FormStateChanged (re-render)
"""

from dataclasses import dataclass
from uuid import UUID

from timecraft_auth.domain.entities import FormState
from timecraft_auth.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Login (Workflow 1)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class LoginAttempted(DomainEvent):
    """Login submission started.

    Triggers:
    - LoggingEventHandler: Log attempt

    Attributes:
        attempt_id: Identifier shared by all events of this attempt.
        email: Email address attempted.
        remember_me: State of the "Remember me" toggle.
    """

    attempt_id: UUID
    email: str
    remember_me: bool = False


@dataclass(frozen=True, kw_only=True)
class LoginValidationFailed(DomainEvent):
    """Form input failed a local rule; nothing was submitted.

    Attributes:
        email: Email address as entered.
        field: Form field that failed.
        reason: Error code value (e.g. "empty_email").
    """

    email: str
    field: str | None
    reason: str


@dataclass(frozen=True, kw_only=True)
class LoginSucceeded(DomainEvent):
    """Credentials accepted.

    Triggers:
    - LoggingEventHandler: Log success

    Attributes:
        attempt_id: Identifier shared by all events of this attempt.
        email: Email address that signed in.
        remember_me: State of the "Remember me" toggle.
    """

    attempt_id: UUID
    email: str
    remember_me: bool = False


@dataclass(frozen=True, kw_only=True)
class LoginFailed(DomainEvent):
    """Credentials rejected.

    Triggers:
    - LoggingEventHandler: Log failure

    Attributes:
        attempt_id: Identifier shared by all events of this attempt.
        email: Email address attempted.
        reason: Error code value (e.g. "invalid_credentials").
    """

    attempt_id: UUID
    email: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class LoginAttemptCancelled(DomainEvent):
    """A pending submission was abandoned before it resolved.

    Attributes:
        attempt_id: Identifier shared by all events of this attempt.
        email: Email address attempted.
    """

    attempt_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class LoginRedirectReady(DomainEvent):
    """Redirect delay after a successful login elapsed.

    Attributes:
        attempt_id: Identifier of the successful attempt.
        email: Email address that signed in.
    """

    attempt_id: UUID
    email: str


# ═══════════════════════════════════════════════════════════════
# Password Reset (Workflow 2)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequested(DomainEvent):
    """Password reset link requested from the login form.

    Attributes:
        email: Email address the reset link is addressed to (as entered).
    """

    email: str


# ═══════════════════════════════════════════════════════════════
# View State
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class FormStateChanged(DomainEvent):
    """The controller replaced its FormState snapshot.

    Presentation code subscribes to this event to re-render.

    Attributes:
        previous: Snapshot before the transition.
        current: Snapshot after the transition.
    """

    previous: FormState
    current: FormState
