"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement, so the use cases can reach storage without knowing which
backend is wired in.
"""

from .user_repository import IUserRepository

__all__ = [
    "IUserRepository",
]
