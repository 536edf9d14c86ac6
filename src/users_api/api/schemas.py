"""Wire representations of user records and write results."""

from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.models import DeleteOutcome, UpdateOutcome, UserRecord


class UserResponse(BaseModel):
    """User record as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    age: int | None = None
    is_active: bool = Field(alias="isActive")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            age=record.age,
            is_active=record.is_active,
        )

    def to_json(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class UpdateResultResponse(BaseModel):
    """Result descriptor for update and deactivate."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")

    @classmethod
    def from_outcome(cls, outcome: UpdateOutcome) -> "UpdateResultResponse":
        return cls(
            matched_count=outcome.matched_count,
            modified_count=outcome.modified_count,
        )

    def to_json(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


class DeleteResultResponse(BaseModel):
    """Result descriptor for delete."""

    model_config = ConfigDict(populate_by_name=True)

    deleted_count: int = Field(alias="deletedCount")

    @classmethod
    def from_outcome(cls, outcome: DeleteOutcome) -> "DeleteResultResponse":
        return cls(deleted_count=outcome.deleted_count)

    def to_json(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
