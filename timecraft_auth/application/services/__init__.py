"""Application services."""

from timecraft_auth.application.services.auth_form_controller import (
    PASSWORD_RESET_MESSAGE,
    AuthFormController,
    AuthResult,
)

__all__ = ["PASSWORD_RESET_MESSAGE", "AuthFormController", "AuthResult"]
