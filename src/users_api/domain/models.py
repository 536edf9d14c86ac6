"""Domain models for user records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    name: str
    email: str
    age: int | None
    is_active: bool


@dataclass(frozen=True)
class UpdateOutcome:
    """Effect of a single-record update."""

    matched_count: int
    modified_count: int


@dataclass(frozen=True)
class DeleteOutcome:
    """Effect of a single-record delete."""

    deleted_count: int
