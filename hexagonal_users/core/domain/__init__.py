"""
Domain Entities and Errors.

`User` is the only entity; `exceptions` defines the closed error taxonomy
shared by every layer above storage.
"""

from .exceptions import (
    DomainError,
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    UnexpectedError,
)
from .models import User

__all__ = [
    "DomainError",
    "ErrorKind",
    "InvalidInputError",
    "NotFoundError",
    "UnexpectedError",
    "User",
]
