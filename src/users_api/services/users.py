"""User record business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from users_api.domain.inputs import NewUser, parse_new_user, parse_user_changes
from users_api.domain.models import DeleteOutcome, UpdateOutcome, UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user records."""

    async def list_users(self, active_only: bool = False) -> list[UserRecord]:
        """Return users, optionally only the active ones."""

    async def insert_user(self, user: NewUser) -> UserRecord:
        """Persist a new user and return it with its assigned id."""

    async def update_user(
        self, user_id: str, fields: dict[str, object]
    ) -> UpdateOutcome:
        """Set the given fields on the user matching the id."""

    async def delete_user(self, user_id: str) -> DeleteOutcome:
        """Remove the user matching the id."""


@dataclass
class UserService:
    """Application service for user CRUD."""

    repository: UserRepository

    async def list_all(self) -> list[UserRecord]:
        """Return every user."""
        return await self.repository.list_users()

    async def list_active(self) -> list[UserRecord]:
        """Return users whose isActive flag is set."""
        return await self.repository.list_users(active_only=True)

    async def create(self, payload: object) -> UserRecord:
        """Validate and persist a new user."""
        new_user = parse_new_user(payload)
        created = await self.repository.insert_user(new_user)
        _logger.info("Created user: id=%s email=%s", created.id, created.email)
        return created

    async def update_by_id(self, user_id: str, payload: object) -> UpdateOutcome:
        """Apply the fields present in the payload to one user."""
        changes = parse_user_changes(payload)
        return await self.repository.update_user(user_id, changes.to_fields())

    async def deactivate_by_id(self, user_id: str) -> UpdateOutcome:
        """Clear the isActive flag of one user."""
        return await self.repository.update_user(user_id, {"isActive": False})

    async def delete_by_id(self, user_id: str) -> DeleteOutcome:
        """Delete one user."""
        return await self.repository.delete_user(user_id)
