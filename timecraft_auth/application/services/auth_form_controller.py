"""Login form controller.

Owns the login form's FormState, validates credentials, runs the simulated
authentication round trip and publishes every state transition so the
presentation layer can re-render.

Flow (attempt_login):
1. Reject if the controller is closed or a submission is pending
2. Validate credentials (empty email → empty password → email format)
3. If invalid: record last_error, emit LoginValidationFailed, return Failure
4. Set is_submitting, emit LoginAttempted
5. Await the authenticator (fixed delay, cancellable)
6. Record last_success/last_error, clear is_submitting
7. Emit LoginSucceeded/LoginFailed
8. On success, schedule the redirect (is_logged_in after a delay)

Cancellation:
- cancel()/close() or cancelling the awaiting task abandons the pending
  round trip; FormState goes back to the snapshot taken before the attempt
  and asyncio.CancelledError reaches the caller.
- After close() the controller publishes nothing further and never
  records an outcome.

Architecture:
- Application layer ONLY imports from domain/core
- Authenticator, event bus and logger are injected via protocols
"""

import asyncio
from dataclasses import replace
from uuid import UUID

from uuid_extensions import uuid7

from timecraft_auth.core.errors import DomainError, ValidationError
from timecraft_auth.core.result import Failure, Result, Success
from timecraft_auth.domain.entities import FormState
from timecraft_auth.domain.errors import LoginAuthError
from timecraft_auth.domain.events import (
    DomainEvent,
    FormStateChanged,
    LoginAttemptCancelled,
    LoginAttempted,
    LoginFailed,
    LoginRedirectReady,
    LoginSucceeded,
    LoginValidationFailed,
    PasswordResetRequested,
)
from timecraft_auth.domain.protocols import (
    AuthenticatorProtocol,
    EventBusProtocol,
    LoggerProtocol,
)
from timecraft_auth.domain.validators import validate_credentials
from timecraft_auth.domain.value_objects import Credentials

PASSWORD_RESET_MESSAGE = "Password reset link sent to your email"

type AuthResult = Result[str, DomainError]


class AuthFormController:
    """Controller behind one login form instance.

    Create one controller per login screen and call close() when the screen
    is torn down. Not thread-safe: use from a single event loop.

    Attributes:
        _state: Current FormState snapshot (replaced, never mutated).
        _submission: Pending authenticator task, if any.
        _redirect: Pending post-login redirect task, if any.
        _closed: Set by close(); blocks further mutations.
    """

    def __init__(
        self,
        authenticator: AuthenticatorProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        *,
        redirect_delay_seconds: float = 1.5,
    ) -> None:
        """Initialize controller with dependencies.

        Args:
            authenticator: Resolves submissions (simulated or real).
            event_bus: Receives FormStateChanged and lifecycle events.
            logger: Structured logger.
            redirect_delay_seconds: Delay between a successful login and
                is_logged_in becoming true.

        Raises:
            ValueError: If redirect_delay_seconds is negative.
        """
        if redirect_delay_seconds < 0:
            raise ValueError("redirect_delay_seconds must be >= 0")
        self._authenticator = authenticator
        self._event_bus = event_bus
        self._logger = logger.bind(component="auth_form_controller")
        self._redirect_delay_seconds = redirect_delay_seconds
        self._state = FormState()
        self._submission: asyncio.Task[Result[str, DomainError]] | None = None
        self._redirect: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def state(self) -> FormState:
        """Current FormState snapshot."""
        return self._state

    @property
    def is_closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    # =========================================================================
    # Public operations
    # =========================================================================

    def validate(self, credentials: Credentials) -> ValidationError | None:
        """Check form input without submitting it.

        Does not touch FormState.

        Args:
            credentials: Values from the form.

        Returns:
            First failing rule's error, or None if the input is acceptable.
        """
        return validate_credentials(credentials)

    async def submit(self, credentials: Credentials) -> AuthResult:
        """Run the simulated authentication round trip.

        The caller is expected to have validated ``credentials`` first.

        Args:
            credentials: Validated values from the form.

        Returns:
            Success(confirmation message) when the pair is accepted.
            Failure(AuthenticationError) when rejected, when the
            authenticator raises (AUTHENTICATION_UNAVAILABLE), when another
            submission is pending, or when the controller is closed.

        Raises:
            asyncio.CancelledError: If the attempt is cancelled before it
                resolves. FormState is restored first.

        Side Effects:
            - Publishes FormStateChanged on every transition.
            - Publishes LoginAttempted, then LoginSucceeded/LoginFailed
              (or LoginAttemptCancelled).
            - Schedules the redirect on success.
        """
        if (rejection := self._reject_reason()) is not None:
            return Failure(error=rejection)

        # No await between the is_submitting check above and this swap.
        self._cancel_redirect()
        attempt_id = uuid7()
        before = self._state
        changed = self._swap_state(replace(before.cleared(), is_submitting=True))
        submission = asyncio.create_task(
            self._authenticator.authenticate(credentials),
            name=f"login-submission-{attempt_id}",
        )
        self._submission = submission

        try:
            await self._publish(changed)
            await self._publish(
                LoginAttempted(
                    attempt_id=attempt_id,
                    email=credentials.email,
                    remember_me=credentials.remember_me,
                )
            )
            result = await submission
        except asyncio.CancelledError:
            submission.cancel()
            await self._abandon(attempt_id, credentials.email, before)
            raise
        except Exception as exc:
            submission.cancel()
            self._logger.error(
                "authenticator_failed", error=exc, attempt_id=str(attempt_id)
            )
            result = Failure(error=LoginAuthError.AUTHENTICATION_UNAVAILABLE)
        finally:
            if self._submission is submission:
                self._submission = None

        if self._closed:
            # Resolved after the screen was torn down: drop the outcome.
            self._swap_state(before)
            return Failure(error=LoginAuthError.CONTROLLER_CLOSED)

        await self._resolve(attempt_id, credentials, result)
        return result

    async def attempt_login(self, credentials: Credentials) -> AuthResult:
        """Validate and, if the input is acceptable, submit.

        State machine per attempt:
            Idle → Validating → Invalid | Submitting → Success | Failure

        Args:
            credentials: Values from the form.

        Returns:
            Failure(ValidationError) immediately for invalid input,
            otherwise the result of submit().

        Raises:
            asyncio.CancelledError: See submit().
        """
        if (rejection := self._reject_reason()) is not None:
            return Failure(error=rejection)

        error = self.validate(credentials)
        if error is None:
            return await self.submit(credentials)

        self._cancel_redirect()
        changed = self._swap_state(self._state.cleared().with_error(error))
        await self._publish(changed)
        await self._publish(
            LoginValidationFailed(
                email=credentials.email,
                field=error.field,
                reason=error.code.value,
            )
        )
        return Failure(error=error)

    async def request_password_reset(self, email: str) -> Result[str, DomainError]:
        """Handle "Forgot password?".

        Stub: no email is sent and the address is not validated.

        Args:
            email: Address as entered (may be empty).

        Returns:
            Always Success(PASSWORD_RESET_MESSAGE).

        Side Effects:
            - Records the message as last_success unless a submission is
              pending or the controller is closed.
            - Publishes PasswordResetRequested (unless closed).
        """
        if self._closed:
            return Success(value=PASSWORD_RESET_MESSAGE)

        if not self._state.is_submitting:
            changed = self._swap_state(self._state.with_success(PASSWORD_RESET_MESSAGE))
            await self._publish(changed)
        await self._publish(PasswordResetRequested(email=email))
        return Success(value=PASSWORD_RESET_MESSAGE)

    async def wait_for_redirect(self) -> bool:
        """Wait for a pending redirect, if any.

        Returns:
            True if the user is logged in once the redirect settles.
        """
        redirect = self._redirect
        if redirect is not None and not redirect.done():
            try:
                await asyncio.shield(redirect)
            except asyncio.CancelledError:
                if not redirect.cancelled():
                    raise
        return self._state.is_logged_in

    def cancel(self) -> bool:
        """Cancel the pending submission and redirect.

        Returns:
            True if anything was pending.
        """
        pending = False
        for task in (self._submission, self._redirect):
            if task is not None and not task.done():
                task.cancel()
                pending = True
        if pending:
            self._logger.info("login_pending_work_cancelled")
        return pending

    def close(self) -> None:
        """Tear down: cancel pending work and stop publishing.

        Idempotent.
        """
        if self._closed:
            return
        self._closed = True
        self.cancel()
        self._logger.debug("auth_form_controller_closed")

    # =========================================================================
    # Internals
    # =========================================================================

    def _reject_reason(self) -> DomainError | None:
        if self._closed:
            self._logger.warning("login_rejected", reason="controller_closed")
            return LoginAuthError.CONTROLLER_CLOSED
        if self._state.is_submitting:
            self._logger.warning("login_rejected", reason="submission_in_progress")
            return LoginAuthError.SUBMISSION_IN_PROGRESS
        return None

    def _swap_state(self, new_state: FormState) -> FormStateChanged:
        """Replace the snapshot synchronously and describe the change."""
        previous = self._state
        self._state = new_state
        self._logger.debug(
            "form_state_changed",
            is_submitting=new_state.is_submitting,
            has_error=new_state.last_error is not None,
            has_success=new_state.last_success is not None,
            is_logged_in=new_state.is_logged_in,
        )
        return FormStateChanged(previous=previous, current=new_state)

    async def _publish(self, event: DomainEvent) -> None:
        if self._closed:
            return
        await self._event_bus.publish(event)

    async def _resolve(
        self, attempt_id: UUID, credentials: Credentials, result: AuthResult
    ) -> None:
        settled = replace(self._state, is_submitting=False)
        match result:
            case Success(value=message):
                changed = self._swap_state(settled.with_success(message))
                self._schedule_redirect(attempt_id, credentials.email)
                await self._publish(changed)
                await self._publish(
                    LoginSucceeded(
                        attempt_id=attempt_id,
                        email=credentials.email,
                        remember_me=credentials.remember_me,
                    )
                )
            case Failure(error=error):
                changed = self._swap_state(settled.with_error(error))
                await self._publish(changed)
                await self._publish(
                    LoginFailed(
                        attempt_id=attempt_id,
                        email=credentials.email,
                        reason=error.code.value,
                    )
                )

    async def _abandon(self, attempt_id: UUID, email: str, before: FormState) -> None:
        changed = self._swap_state(before)
        self._logger.info("login_attempt_abandoned", attempt_id=str(attempt_id))
        await self._publish(changed)
        await self._publish(LoginAttemptCancelled(attempt_id=attempt_id, email=email))

    def _schedule_redirect(self, attempt_id: UUID, email: str) -> None:
        if self._closed:
            return
        self._redirect = asyncio.create_task(
            self._redirect_after_delay(attempt_id, email),
            name=f"login-redirect-{attempt_id}",
        )

    def _cancel_redirect(self) -> None:
        if self._redirect is not None and not self._redirect.done():
            self._redirect.cancel()
        self._redirect = None

    async def _redirect_after_delay(self, attempt_id: UUID, email: str) -> None:
        await asyncio.sleep(self._redirect_delay_seconds)
        if self._closed:
            return
        changed = self._swap_state(replace(self._state, is_logged_in=True))
        await self._publish(changed)
        await self._publish(LoginRedirectReady(attempt_id=attempt_id, email=email))
