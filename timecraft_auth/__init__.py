"""Credential validation and simulated authentication for the TimeCraft login form.

Usage:
    from timecraft_auth import Credentials, create_auth_form_controller

    controller = create_auth_form_controller()
    result = await controller.attempt_login(
        Credentials(email="demo@timecraft.com", password="demo123")
    )
"""

from timecraft_auth.application.services import (
    PASSWORD_RESET_MESSAGE,
    AuthFormController,
    AuthResult,
)
from timecraft_auth.core.container import create_auth_form_controller
from timecraft_auth.core.result import Failure, Result, Success
from timecraft_auth.domain.entities import FormState
from timecraft_auth.domain.errors import LoginAuthError, LoginValidationError
from timecraft_auth.domain.events import FormStateChanged
from timecraft_auth.domain.value_objects import Credentials

__all__ = [
    "PASSWORD_RESET_MESSAGE",
    "AuthFormController",
    "AuthResult",
    "Credentials",
    "Failure",
    "FormState",
    "FormStateChanged",
    "LoginAuthError",
    "LoginValidationError",
    "Result",
    "Success",
    "create_auth_form_controller",
]
