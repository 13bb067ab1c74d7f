"""ASGI entrypoint for the sugar counter API."""

from sugar_counter.api.app import create_app
from sugar_counter.containers import build_container

app = create_app(build_container())
