"""Domain entities."""

from timecraft_auth.domain.entities.form_state import FormState

__all__ = ["FormState"]
