"""Authenticator adapters."""

from timecraft_auth.infrastructure.auth.simulated_authenticator import (
    LOGIN_SUCCESS_MESSAGE,
    SimulatedAuthenticator,
)

__all__ = ["LOGIN_SUCCESS_MESSAGE", "SimulatedAuthenticator"]
