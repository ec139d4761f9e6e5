"""Authenticator protocol (port) for login submissions.

AuthFormController awaits an AuthenticatorProtocol to resolve a submission.
The shipped adapter (SimulatedAuthenticator) waits a fixed delay and checks
one hard-coded credential pair; a real backend client satisfies the same
protocol without changes to the controller.
"""

from typing import Protocol

from timecraft_auth.core.errors import AuthenticationError
from timecraft_auth.core.result import Result
from timecraft_auth.domain.value_objects import Credentials


class AuthenticatorProtocol(Protocol):
    """Protocol for credential checks that take a round trip."""

    async def authenticate(
        self, credentials: Credentials
    ) -> Result[str, AuthenticationError]:
        """Check a credential pair.

        Implementations must be cancellable: cancelling the awaiting task
        abandons the check without side effects.

        Args:
            credentials: Pair that already passed form validation.

        Returns:
            Success(confirmation message) or Failure(AuthenticationError).
        """
        ...
