"""Result types for the login flow.

Every outcome the presentation layer has to render (a validation problem,
rejected credentials, a confirmation message) travels as a value instead of
an exception, so a single ``match`` statement covers all of them.

Usage:
    result = await controller.submit(credentials)
    match result:
        case Success(value=message):
            banner.show(message)
        case Failure(error=error):
            banner.show_error(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
