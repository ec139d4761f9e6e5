"""Unit tests for core validation helpers.

Tests cover:
- validate_not_empty: zero-length vs. whitespace
- validate_pattern: full-match semantics
- Result type returns (Success/Failure)
"""

import re

import pytest

from timecraft_auth.core.enums import ErrorCode
from timecraft_auth.core.errors import ValidationError
from timecraft_auth.core.result import Failure, Success
from timecraft_auth.core.validation import validate_not_empty, validate_pattern

FIELD_ERROR = ValidationError(
    code=ErrorCode.EMPTY_EMAIL, message="Please enter your email", field="email"
)


@pytest.mark.unit
class TestValidateNotEmpty:
    """Test validate_not_empty function."""

    def test_with_value(self):
        """Test validation passes with non-empty string."""
        result = validate_not_empty("hello", error=FIELD_ERROR)

        assert result == Success(value="hello")

    def test_fails_with_empty_string(self):
        """Test validation fails with the supplied error."""
        result = validate_not_empty("", error=FIELD_ERROR)

        assert isinstance(result, Failure)
        assert result.error is FIELD_ERROR

    def test_whitespace_counts_as_content(self):
        """Test no trimming happens."""
        assert isinstance(validate_not_empty("   ", error=FIELD_ERROR), Success)


@pytest.mark.unit
class TestValidatePattern:
    """Test validate_pattern function."""

    def test_full_match_required(self):
        """Test a partial match is not enough."""
        pattern = re.compile(r"[a-z]+")

        assert isinstance(validate_pattern("abc", pattern, error=FIELD_ERROR), Success)
        assert isinstance(
            validate_pattern("abc1", pattern, error=FIELD_ERROR), Failure
        )

    def test_failure_carries_error(self):
        """Test the supplied error is returned unchanged."""
        result = validate_pattern("1", re.compile(r"[a-z]"), error=FIELD_ERROR)

        assert result == Failure(error=FIELD_ERROR)
        assert str(result.error) == "empty_email: Please enter your email"
