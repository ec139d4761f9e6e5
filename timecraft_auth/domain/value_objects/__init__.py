"""Domain value objects."""

from timecraft_auth.domain.value_objects.credentials import Credentials

__all__ = ["Credentials"]
