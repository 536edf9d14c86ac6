"""ASGI entrypoint for the users API."""

from users_api.api.app import create_app
from users_api.containers import build_container

app = create_app(build_container())
