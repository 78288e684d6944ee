"""Storage adapters implementing `IUserRepository`."""

from .in_memory_repo import InMemoryUserRepository
from .rwlock import AsyncRWLock

__all__ = [
    "AsyncRWLock",
    "InMemoryUserRepository",
]
