"""Store protocol, key names and adapter factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lumen.config import Settings

CITIES_KEY = "global:cities"
STATS_KEY = "global:stats"
LEADERBOARD_KEY = "global:leaderboard"


def user_key(user_id: str) -> str:
    """Build the store key for a player record."""
    return f"user:{user_id}"


@runtime_checkable
class KVStore(Protocol):
    """Minimal string key-value interface every adapter implements."""

    async def get(self, key: str) -> str | None: ...

    async def put(self, key: str, value: str) -> None: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


def build_store(settings: Settings) -> KVStore | None:
    """Create the store adapter selected by settings, or None when unbound."""
    from lumen.store.memory_store import MemoryStore
    from lumen.store.redis_store import RedisStore

    if settings.store_backend == "redis":
        return RedisStore.from_url(settings.redis_url, max_connections=settings.redis_max_connections)
    if settings.store_backend == "memory":
        return MemoryStore()
    return None
