"""Shared FastAPI dependencies.

The store and settings are owned by the application instance (``app.state``)
rather than module globals, so every app built by ``create_app`` is isolated.
"""

from fastapi import Request

from lumen.config import Settings, get_settings
from lumen.errors import StoreUnbound
from lumen.store import KVStore


def get_store(request: Request) -> KVStore:
    """Return the app's store adapter, or fail with KV_NOT_BOUND."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnbound()
    return store


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()
