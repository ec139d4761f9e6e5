"""Unit tests for credential validation rules.

Tests cover:
- validate_email_format: accepted and rejected shapes
- validate_credentials: rule order and short-circuiting
- No trimming or normalization
"""

import pytest

from timecraft_auth.core.enums import ErrorCode
from timecraft_auth.domain.errors import LoginValidationError
from timecraft_auth.domain.validators import (
    validate_credentials,
    validate_email_format,
)
from timecraft_auth.domain.value_objects import Credentials


@pytest.mark.unit
class TestValidateEmailFormat:
    """Test validate_email_format function."""

    @pytest.mark.parametrize(
        "email",
        [
            "demo@timecraft.com",
            "user.name+tag@example.co",
            "USER_1%x@mail.example.org",
            "a-b@sub-domain.example.museum",
            "x@y.zz",
        ],
    )
    def test_accepts_well_formed_addresses(self, email):
        """Test addresses with local part, domain and letter suffix pass."""
        assert validate_email_format(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "not-an-email",
            "userexample.com",
            "user@",
            "@example.com",
            "user@example",
            "user@example.c",
            "user@example.c0m",
            "user @example.com",
            " user@example.com",
            "user@example.com ",
            "user@exa_mple.com",
        ],
    )
    def test_rejects_malformed_addresses(self, email):
        """Test missing parts, bad suffixes and stray whitespace fail."""
        assert validate_email_format(email) is False

    def test_suffix_length_bounds(self):
        """Test the suffix must be between 2 and 64 letters."""
        assert validate_email_format("a@b." + "c" * 64) is True
        assert validate_email_format("a@b." + "c" * 65) is False


@pytest.mark.unit
class TestValidateCredentials:
    """Test validate_credentials function."""

    def test_empty_email_wins_regardless_of_password(self):
        """Test EMPTY_EMAIL is reported even when the password is empty too."""
        for password in ("", "x", "demo123"):
            error = validate_credentials(Credentials(email="", password=password))

            assert error == LoginValidationError.EMPTY_EMAIL

    def test_empty_password_checked_before_format(self):
        """Test EMPTY_PASSWORD wins over a malformed email."""
        error = validate_credentials(Credentials(email="not-an-email", password=""))

        assert error == LoginValidationError.EMPTY_PASSWORD
        assert error.field == "password"

    def test_malformed_email(self):
        """Test INVALID_EMAIL_FORMAT once both fields are filled."""
        error = validate_credentials(Credentials(email="not-an-email", password="x"))

        assert error is not None
        assert error.code == ErrorCode.INVALID_EMAIL_FORMAT
        assert error.message == "Please enter a valid email address"

    def test_whitespace_is_not_empty(self):
        """Test a blank-looking value counts as entered (no trimming)."""
        assert (
            validate_credentials(Credentials(email=" ", password="x"))
            == LoginValidationError.INVALID_EMAIL_FORMAT
        )
        assert validate_credentials(Credentials(email="a@b.co", password=" ")) is None

    def test_valid_credentials(self):
        """Test None when every rule passes."""
        assert (
            validate_credentials(
                Credentials(email="demo@timecraft.com", password="wrong")
            )
            is None
        )
