"""Core enums package."""

from timecraft_auth.core.enums.environment import Environment
from timecraft_auth.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
