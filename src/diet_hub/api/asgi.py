"""ASGI entrypoint for the DietHub API."""

from diet_hub.api.app import create_app
from diet_hub.containers import build_container

app = create_app(build_container())
