"""Run the users API with uvicorn."""

import logging

import uvicorn

from users_api.api.app import create_app
from users_api.containers import build_container

HOST = "0.0.0.0"
PORT = 3000

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the application on the fixed port."""
    app = create_app(build_container())
    logger.info("Server is running at http://localhost:%s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
