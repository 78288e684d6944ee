# hexagonal_users/core/domain/models.py
from pydantic import BaseModel, ConfigDict, Field

from hexagonal_users.core.domain.exceptions import InvalidInputError


class User(BaseModel):
    """
    Represents one identity record.

    Instances are frozen: once saved, a record only changes by being
    overwritten wholesale with a new `User` under the same id.
    Build new users through `User.create` so the name invariant holds.
    """
    id: str = Field(..., description="Caller-supplied identifier, used as the storage key")
    name: str = Field(..., description="Display name, kept exactly as supplied")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls, id: str, name: str) -> "User":
        """
        Validating constructor.

        The name is checked after trimming surrounding whitespace, but the
        stored value is the name as originally supplied.

        Raises:
            InvalidInputError: if the trimmed name is empty.
        """
        if not name.strip():
            raise InvalidInputError("name is empty")
        return cls(id=id, name=name)
