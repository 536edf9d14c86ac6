"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest
from bson import ObjectId

from users_api.adapters.mongo_user_repository import to_object_id
from users_api.config import Settings
from users_api.containers import AppContainer
from users_api.domain.errors import EmailConflictError
from users_api.domain.inputs import NewUser
from users_api.domain.models import DeleteOutcome, UpdateOutcome, UserRecord
from users_api.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    documents: dict[str, dict[str, object]] = field(default_factory=dict)

    async def list_users(self, active_only: bool = False) -> list[UserRecord]:
        return [
            _to_record(user_id, document)
            for user_id, document in self.documents.items()
            if not active_only or document["isActive"] is True
        ]

    async def insert_user(self, user: NewUser) -> UserRecord:
        document = user.to_document()
        self._check_email(document["email"], exclude=None)
        user_id = str(ObjectId())
        self.documents[user_id] = document
        return _to_record(user_id, document)

    async def update_user(
        self, user_id: str, fields: dict[str, object]
    ) -> UpdateOutcome:
        key = str(to_object_id(user_id))
        document = self.documents.get(key)
        if document is None:
            return UpdateOutcome(matched_count=0, modified_count=0)
        if "email" in fields:
            self._check_email(fields["email"], exclude=key)
        updated = dict(document)
        for name, value in fields.items():
            if value is None:
                updated.pop(name, None)
            else:
                updated[name] = value
        self.documents[key] = updated
        return UpdateOutcome(
            matched_count=1, modified_count=int(updated != document)
        )

    async def delete_user(self, user_id: str) -> DeleteOutcome:
        key = str(to_object_id(user_id))
        removed = self.documents.pop(key, None)
        return DeleteOutcome(deleted_count=0 if removed is None else 1)

    def _check_email(self, email: object, exclude: str | None) -> None:
        for user_id, document in self.documents.items():
            if user_id != exclude and document["email"] == email:
                raise EmailConflictError(str(email))


def _to_record(user_id: str, document: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=user_id,
        name=document["name"],
        email=document["email"],
        age=document.get("age"),
        is_active=document["isActive"],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(atlas_url="mongodb://localhost:27017/users_test")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def container(settings: Settings, user_service: UserService) -> AppContainer:
    async def open_resources() -> None:
        return None

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        open_resources=open_resources,
        close_resources=close_resources,
    )
