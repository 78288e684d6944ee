# tests/core/test_domain_models.py
import pytest
from pydantic import ValidationError

from hexagonal_users.core.domain.exceptions import (
    DomainError,
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    UnexpectedError,
)
from hexagonal_users.core.domain.models import User


class TestUserModel:
    def test_create_valid_user(self):
        user = User.create("u1", "Ann")
        assert user.id == "u1"
        assert user.name == "Ann"

    @pytest.mark.parametrize("name", ["", " ", "   ", "\t\n", " \r\n\t "])
    def test_create_rejects_blank_name(self, name):
        """Empty or whitespace-only names fail the domain invariant."""
        with pytest.raises(InvalidInputError) as excinfo:
            User.create("u1", name)

        assert excinfo.value.message == "name is empty"
        assert excinfo.value.kind == ErrorKind.VALIDATION

    @pytest.mark.parametrize("name", ["a", "  Ann  ", "\tBob", "名前", "x y"])
    def test_create_accepts_non_blank_name(self, name):
        assert User.create("u1", name).name == name

    def test_name_is_stored_untrimmed(self):
        """Validation looks at the trimmed name; the stored value is the original."""
        user = User.create("u1", "  Ann  ")
        assert user.name == "  Ann  "

    def test_user_is_immutable(self):
        user = User.create("u1", "Ann")
        with pytest.raises(ValidationError):
            user.name = "Bob"

    def test_serializes_to_id_and_name(self):
        assert User.create("u1", "Ann").model_dump() == {"id": "u1", "name": "Ann"}


class TestDomainErrors:
    def test_error_kinds_are_closed(self):
        assert {k.value for k in ErrorKind} == {"not_found", "validation", "other"}

    def test_not_found_default_message(self):
        err = NotFoundError()
        assert err.kind == ErrorKind.NOT_FOUND
        assert str(err) == "not found"

    def test_unexpected_error_keeps_cause(self):
        cause = OSError("disk on fire")
        err = UnexpectedError(cause)

        assert err.kind == ErrorKind.OTHER
        assert err.cause is cause
        assert err.__cause__ is cause
        assert isinstance(err, DomainError)

    def test_unexpected_error_without_cause(self):
        err = UnexpectedError()
        assert err.cause is None
        assert err.message == "unexpected error"
