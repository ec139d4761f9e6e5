"""Credentials value object.

Immutable email/password pair held only while a login attempt is in flight.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Credentials:
    """Email/password pair submitted from the login form.

    Values are stored exactly as entered: no trimming, no case folding.
    Format checks live in ``validate_credentials``; constructing a
    Credentials never fails, so an empty form can still be represented.

    Attributes:
        email: Email address as typed.
        password: Password as typed (plain text, never logged).
        remember_me: State of the "Remember me" toggle. Carried onto events,
            does not influence authentication.

    Example:
        >>> creds = Credentials(email="demo@timecraft.com", password="demo123")
        >>> creds
        Credentials(email='demo@timecraft.com', password='*******', remember_me=False)
    """

    email: str
    password: str
    remember_me: bool = False

    def __repr__(self) -> str:
        """Return repr for debugging (password masked).

        Returns:
            str: Masked representation.
        """
        return (
            f"Credentials(email={self.email!r}, "
            f"password='{'*' * len(self.password)}', "
            f"remember_me={self.remember_me})"
        )

    __str__ = __repr__
