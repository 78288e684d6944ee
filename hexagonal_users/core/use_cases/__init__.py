"""
Core Use Cases (Application Logic).

The user service is the seam between the HTTP adapter and the
domain/storage side. It validates input through the domain constructor and
delegates persistence to the repository port, passing domain errors through
untouched.
"""

from .user_service import IUserService, UserService

__all__ = [
    "IUserService",
    "UserService",
]
