"""Typed inputs for user write operations."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from users_api.domain.errors import UserValidationError


def _number_to_text(value: object) -> object:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


class NewUser(BaseModel):
    """Fields accepted when creating a user."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    age: int | None = Field(default=None, ge=0)
    is_active: bool = Field(default=True, alias="isActive")

    @field_validator("name", "email", mode="before")
    @classmethod
    def number_as_text(cls, value: object) -> object:
        return _number_to_text(value)

    @field_validator("is_active", mode="before")
    @classmethod
    def default_active(cls, value: object) -> object:
        return True if value is None else value

    def to_document(self) -> dict[str, object]:
        """Return the stored representation, omitting an absent age."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserChanges(BaseModel):
    """Subset of fields accepted by a partial update."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, ge=0)
    is_active: bool | None = Field(default=None, alias="isActive")

    @field_validator("name", "email", mode="before")
    @classmethod
    def number_as_text(cls, value: object) -> object:
        return _number_to_text(value)

    @model_validator(mode="after")
    def reject_null_required(self) -> "UserChanges":
        for field_name in ("name", "email", "is_active"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f"{field_name} cannot be null")
        return self

    def to_fields(self) -> dict[str, object]:
        """Return only the keys present in the request, keyed as stored."""
        return self.model_dump(by_alias=True, exclude_unset=True)


def parse_new_user(payload: object) -> NewUser:
    """Validate a raw request body for user creation."""
    if payload is None:
        payload = {}
    try:
        return NewUser.model_validate(payload)
    except ValidationError as exc:
        raise UserValidationError(str(exc)) from exc


def parse_user_changes(payload: object) -> UserChanges:
    """Validate a raw request body for a partial update."""
    if payload is None:
        payload = {}
    try:
        return UserChanges.model_validate(payload)
    except ValidationError as exc:
        raise UserValidationError(str(exc)) from exc
