"""FormState snapshot for the login form.

FormState is the only record of what the login form should currently show:
a spinner, an error banner, a success banner, or the welcome screen.
Snapshots are immutable; AuthFormController swaps in a new one on every
transition and publishes both sides of the change.

Invariants:
    - At most one of ``last_error`` / ``last_success`` is set.
    - ``is_submitting`` is only true while a submission is pending
      (enforced by the controller, not the snapshot).
"""

from dataclasses import dataclass, replace

from timecraft_auth.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class FormState:
    """Immutable view state of the login form.

    Attributes:
        is_submitting: A submission is waiting on the authenticator.
        last_error: Error from the current attempt (validation or auth).
        last_success: Confirmation message from the current attempt.
        is_logged_in: The post-login redirect has elapsed; the
            presentation layer should show the welcome screen.

    Raises:
        ValueError: If both last_error and last_success are set.

    Example:
        >>> state = FormState()
        >>> state.with_error(LoginAuthError.INVALID_CREDENTIALS).last_success is None
        True
    """

    is_submitting: bool = False
    last_error: DomainError | None = None
    last_success: str | None = None
    is_logged_in: bool = False

    def __post_init__(self) -> None:
        """Enforce the single-message invariant.

        Raises:
            ValueError: If both an error and a success message are present.
        """
        if self.last_error is not None and self.last_success is not None:
            raise ValueError("FormState cannot hold both an error and a success")

    @property
    def is_idle(self) -> bool:
        """True when nothing is pending and no message is displayed."""
        return (
            not self.is_submitting
            and self.last_error is None
            and self.last_success is None
        )

    def cleared(self) -> "FormState":
        """Return a copy for the start of a new attempt.

        Both messages are removed and is_logged_in is reset.
        """
        return replace(self, last_error=None, last_success=None, is_logged_in=False)

    def with_error(self, error: DomainError) -> "FormState":
        """Return a copy showing ``error`` (clears any success message)."""
        return replace(self, last_error=error, last_success=None)

    def with_success(self, message: str) -> "FormState":
        """Return a copy showing ``message`` (clears any error)."""
        return replace(self, last_error=None, last_success=message)
