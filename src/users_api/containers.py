"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pymongo import AsyncMongoClient

from users_api.adapters.mongo_user_repository import MongoUserRepository
from users_api.config import Settings
from users_api.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    open_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mongo_client: AsyncMongoClient = AsyncMongoClient(resolved_settings.atlas_url)
    user_repository = MongoUserRepository.create(
        mongo_client, resolved_settings.database_name
    )
    user_service = UserService(user_repository)

    async def open_resources() -> None:
        await mongo_client.admin.command("ping")
        await user_repository.ensure_indexes()

    async def close_resources() -> None:
        await mongo_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        open_resources=open_resources,
        close_resources=close_resources,
    )
