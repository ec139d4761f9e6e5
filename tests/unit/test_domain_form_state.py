"""Unit tests for FormState and Credentials.

Tests cover:
- Single-message invariant
- Transition helpers (cleared, with_error, with_success)
- Immutability
- Credentials masking
"""

from dataclasses import FrozenInstanceError

import pytest

from timecraft_auth.domain.entities import FormState
from timecraft_auth.domain.errors import LoginAuthError, LoginValidationError
from timecraft_auth.domain.value_objects import Credentials


@pytest.mark.unit
class TestFormState:
    """Test FormState snapshot."""

    def test_default_is_idle(self):
        """Test a fresh snapshot shows nothing."""
        state = FormState()

        assert state.is_idle is True
        assert state.is_logged_in is False

    def test_error_and_success_together_rejected(self):
        """Test at most one message can be set."""
        with pytest.raises(ValueError, match="both an error and a success"):
            FormState(last_error=LoginAuthError.INVALID_CREDENTIALS, last_success="ok")

    def test_with_success_clears_error(self):
        """Test a success message replaces an error."""
        state = FormState(last_error=LoginValidationError.EMPTY_EMAIL)

        updated = state.with_success("done")

        assert updated.last_error is None
        assert updated.last_success == "done"
        assert state.last_error == LoginValidationError.EMPTY_EMAIL

    def test_with_error_clears_success(self):
        """Test an error replaces a success message."""
        state = FormState(last_success="done")

        updated = state.with_error(LoginAuthError.INVALID_CREDENTIALS)

        assert updated.last_success is None
        assert updated.last_error == LoginAuthError.INVALID_CREDENTIALS

    def test_cleared_keeps_submitting_flag(self):
        """Test cleared() drops messages but not the pending flag."""
        state = FormState(is_submitting=True, last_success="done")

        cleared = state.cleared()

        assert cleared == FormState(is_submitting=True)

    def test_cleared_forgets_previous_login(self):
        """Test a new attempt starts logged out."""
        state = FormState(last_success="done", is_logged_in=True)

        cleared = state.cleared()

        assert cleared.is_logged_in is False
        assert cleared.with_error(LoginAuthError.INVALID_CREDENTIALS).is_logged_in is False

    def test_is_idle_false_while_submitting(self):
        """Test a pending submission is not idle."""
        assert FormState(is_submitting=True).is_idle is False

    def test_snapshot_is_immutable(self):
        """Test fields cannot be assigned."""
        state = FormState()

        with pytest.raises(FrozenInstanceError):
            state.is_submitting = True


@pytest.mark.unit
class TestCredentials:
    """Test Credentials value object."""

    def test_values_kept_as_entered(self):
        """Test no trimming or case folding."""
        creds = Credentials(email=" Demo@TimeCraft.com ", password=" pw ")

        assert creds.email == " Demo@TimeCraft.com "
        assert creds.password == " pw "
        assert creds.remember_me is False

    def test_repr_masks_password(self):
        """Test the password never appears in repr/str."""
        creds = Credentials(email="demo@timecraft.com", password="demo123")

        assert "demo123" not in repr(creds)
        assert "demo123" not in str(creds)
        assert "*******" in repr(creds)
        assert "demo@timecraft.com" in repr(creds)

    def test_equality(self):
        """Test value semantics."""
        assert Credentials(email="a@b.co", password="x") == Credentials(
            email="a@b.co", password="x"
        )
        assert Credentials(email="a@b.co", password="x") != Credentials(
            email="a@b.co", password="x", remember_me=True
        )
