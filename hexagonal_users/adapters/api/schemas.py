# hexagonal_users/adapters/api/schemas.py
from pydantic import BaseModel, Field

from hexagonal_users.core.domain.models import User


# --- Request Models ---

class CreateUserRequest(BaseModel):
    id: str = Field(..., description="Caller-supplied user identifier")
    name: str = Field(..., description="Display name; must not be blank")


# --- Response Models ---

class OkResponse(BaseModel):
    ok: bool = True


class UserResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name)


class ErrorResponse(BaseModel):
    error: str
