"""Key-value store adapters.

All game state lives in a plain get/put store as JSON text. There is no
multi-key transaction and no locking: concurrent writers may lose updates.
"""

from lumen.store.base import (
    CITIES_KEY,
    LEADERBOARD_KEY,
    STATS_KEY,
    KVStore,
    build_store,
    user_key,
)
from lumen.store.memory_store import MemoryStore
from lumen.store.redis_store import RedisStore

__all__ = [
    "CITIES_KEY",
    "LEADERBOARD_KEY",
    "STATS_KEY",
    "KVStore",
    "MemoryStore",
    "RedisStore",
    "build_store",
    "user_key",
]
