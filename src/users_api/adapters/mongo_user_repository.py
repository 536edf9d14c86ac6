"""MongoDB-backed user repository."""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import ConnectionFailure, DuplicateKeyError

from users_api.config import DEFAULT_DATABASE
from users_api.domain.errors import (
    EmailConflictError,
    MalformedIdentifierError,
    StoreUnavailableError,
)
from users_api.domain.inputs import NewUser
from users_api.domain.models import DeleteOutcome, UpdateOutcome, UserRecord
from users_api.services.users import UserRepository

USERS_COLLECTION = "users"

_logger = logging.getLogger(__name__)


def to_object_id(user_id: str) -> ObjectId:
    """Convert a path identifier into the store's identifier type."""
    if not ObjectId.is_valid(user_id):
        raise MalformedIdentifierError(user_id)
    return ObjectId(user_id)


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except ConnectionFailure as exc:
        _logger.error("MongoDB unavailable: %s", exc)
        raise StoreUnavailableError(str(exc)) from exc


def _to_record(document: Mapping[str, Any]) -> UserRecord:
    return UserRecord(
        id=str(document["_id"]),
        name=document["name"],
        email=document["email"],
        age=document.get("age"),
        is_active=document.get("isActive", True),
    )


@dataclass
class MongoUserRepository(UserRepository):
    """MongoDB implementation for user persistence."""

    collection: AsyncCollection

    @classmethod
    def create(
        cls, client: AsyncMongoClient, database_name: str | None = None
    ) -> "MongoUserRepository":
        """Bind a repository to the users collection of the configured database."""
        if database_name:
            database = client.get_database(database_name)
        else:
            database = client.get_default_database(default=DEFAULT_DATABASE)
        return cls(collection=database[USERS_COLLECTION])

    async def ensure_indexes(self) -> None:
        """Create the unique index backing email uniqueness."""
        with _store_errors():
            await self.collection.create_index("email", unique=True)

    async def list_users(self, active_only: bool = False) -> list[UserRecord]:
        """Return users, optionally only the active ones."""
        query: dict[str, object] = {"isActive": True} if active_only else {}
        with _store_errors():
            documents = await self.collection.find(query).to_list()
        return [_to_record(document) for document in documents]

    async def insert_user(self, user: NewUser) -> UserRecord:
        """Insert a user document and return it with the assigned id."""
        document = user.to_document()
        with _store_errors():
            try:
                result = await self.collection.insert_one(document)
            except DuplicateKeyError as exc:
                raise EmailConflictError(user.email) from exc
        return _to_record({**document, "_id": result.inserted_id})

    async def update_user(
        self, user_id: str, fields: dict[str, object]
    ) -> UpdateOutcome:
        """Set the given fields on one user; a None age removes the field."""
        query = {"_id": to_object_id(user_id)}
        to_set = {key: value for key, value in fields.items() if value is not None}
        to_unset = {key: "" for key, value in fields.items() if value is None}
        update: dict[str, object] = {}
        if to_set:
            update["$set"] = to_set
        if to_unset:
            update["$unset"] = to_unset
        with _store_errors():
            if not update:
                matched = await self.collection.count_documents(query, limit=1)
                return UpdateOutcome(matched_count=matched, modified_count=0)
            try:
                result = await self.collection.update_one(query, update)
            except DuplicateKeyError as exc:
                raise EmailConflictError(str(fields.get("email", ""))) from exc
        return UpdateOutcome(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    async def delete_user(self, user_id: str) -> DeleteOutcome:
        """Delete one user document."""
        query = {"_id": to_object_id(user_id)}
        with _store_errors():
            result = await self.collection.delete_one(query)
        return DeleteOutcome(deleted_count=result.deleted_count)
