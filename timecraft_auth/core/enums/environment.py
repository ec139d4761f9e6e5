"""Application environment types.

Environments:
- DEVELOPMENT: Local development, human-readable console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Embedded in a shipped presentation layer, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
