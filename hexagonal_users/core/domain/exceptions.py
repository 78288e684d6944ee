# hexagonal_users/core/domain/exceptions.py
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """
    The closed set of failure kinds.
    The HTTP adapter keeps one response per member.
    """
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    OTHER = "other"


class DomainError(Exception):
    """Base class for all domain-level exceptions."""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# --- Entity Not Found Errors ---

class NotFoundError(DomainError):
    """Raised when no record exists for the requested key."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "not found"):
        super().__init__(message)


# --- Validation Errors ---

class InvalidInputError(DomainError):
    """Raised when input fails a domain invariant (e.g. an empty user name)."""

    kind = ErrorKind.VALIDATION


# --- Unclassified Failures ---

class UnexpectedError(DomainError):
    """
    Wraps a backend failure that has no better classification.

    The original exception is kept on `cause` for logging only; it must never
    be rendered to API clients.
    """

    kind = ErrorKind.OTHER

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(str(cause) if cause is not None else "unexpected error")
        self.__cause__ = cause
