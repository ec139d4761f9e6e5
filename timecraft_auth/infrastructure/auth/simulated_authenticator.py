"""Simulated authenticator.

Stand-in for a real login API: waits a fixed delay to model the network
round trip, then compares against a single hard-coded credential pair.
The comparison is exact and case-sensitive.
"""

import asyncio

from timecraft_auth.core.errors import AuthenticationError
from timecraft_auth.core.result import Failure, Result, Success
from timecraft_auth.domain.errors import LoginAuthError
from timecraft_auth.domain.value_objects import Credentials

LOGIN_SUCCESS_MESSAGE = "Login successful! Redirecting..."


class SimulatedAuthenticator:
    """Fixed-delay, single-account authenticator.

    Implements AuthenticatorProtocol. Cancelling the awaiting task during
    the delay abandons the check (asyncio.sleep is cancellable).

    Attributes:
        delay_seconds: Simulated round trip before the result is known.
    """

    def __init__(
        self,
        *,
        email: str,
        password: str,
        delay_seconds: float,
    ) -> None:
        """Initialize authenticator.

        Args:
            email: The only accepted email.
            password: The only accepted password.
            delay_seconds: Simulated round trip, must be >= 0.

        Raises:
            ValueError: If delay_seconds is negative.
        """
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self._email = email
        self._password = password
        self.delay_seconds = delay_seconds

    async def authenticate(
        self, credentials: Credentials
    ) -> Result[str, AuthenticationError]:
        """Wait the configured delay, then check the pair.

        Args:
            credentials: Pair to check.

        Returns:
            Success(LOGIN_SUCCESS_MESSAGE) on exact match,
            Failure(LoginAuthError.INVALID_CREDENTIALS) otherwise.
        """
        await asyncio.sleep(self.delay_seconds)

        if credentials.email == self._email and credentials.password == self._password:
            return Success(value=LOGIN_SUCCESS_MESSAGE)
        return Failure(error=LoginAuthError.INVALID_CREDENTIALS)
