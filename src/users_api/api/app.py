"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from users_api.api.users import router as users_router
from users_api.app_logging import configure_logging
from users_api.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.open_resources()
            logger.info("Connected to MongoDB")
        except Exception:
            logger.exception("Error connecting to MongoDB")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(users_router)

    @app.get("/", response_class=PlainTextResponse)
    async def greeting() -> str:
        """Plain text greeting."""
        return "Hello, World!"

    return app
