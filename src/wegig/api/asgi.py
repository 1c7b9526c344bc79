"""ASGI entrypoint for the WeGig API."""

from wegig.api.app import create_app
from wegig.containers import build_container

app = create_app(build_container())
