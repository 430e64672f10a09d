"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lumen.config import Settings
from lumen.main import create_app
from lumen.store import CITIES_KEY, LEADERBOARD_KEY, STATS_KEY, MemoryStore

FIXED_NOW = 1_767_225_600_000  # 2026-01-01T00:00:00Z

# Tokyo's nearest neighbours: Osaka (~400 km), Seoul (~1150 km), Shanghai (~1760 km).
WORLD: dict[str, dict] = {
    "tokyo": {"name": "Tokyo", "lat": 35.6762, "lng": 139.6503, "brightness": 60},
    "osaka": {"name": "Osaka", "lat": 34.6937, "lng": 135.5023, "brightness": 20},
    "seoul": {"name": "Seoul", "lat": 37.5665, "lng": 126.9780, "brightness": 40},
    "shanghai": {"name": "上海", "lat": 31.2304, "lng": 121.4737, "brightness": 100},
    "london": {"name": "London", "lat": 51.5074, "lng": -0.1278, "brightness": 0},
}


def seed_world(
    store: MemoryStore,
    cities: dict[str, dict] | None = None,
    stats: dict | None = None,
    leaderboard: list | dict | None = None,
) -> None:
    """Write raw store records the way a deployed store would hold them."""
    data = store._data
    data[CITIES_KEY] = json.dumps(WORLD if cities is None else cities)
    data[STATS_KEY] = json.dumps(
        stats if stats is not None else {"totalPurifications": 0, "totalPlayers": 0, "totalEnergy": 0, "lastUpdate": 0}
    )
    data[LEADERBOARD_KEY] = json.dumps(leaderboard if leaderboard is not None else [])


def read_json(store: MemoryStore, key: str):
    raw = store._data.get(key)
    return None if raw is None else json.loads(raw)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, store_backend="memory", log_format="console", log_level="WARNING")


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def seeded_store(store: MemoryStore) -> MemoryStore:
    seed_world(store)
    return store


async def _client_for(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client(settings: Settings, store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against an app wired to the in-memory store fixture."""
    async for ac in _client_for(create_app(settings, store=store)):
        yield ac


@pytest_asyncio.fixture
async def unbound_client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against an app with no store configured."""
    unbound = Settings(_env_file=None, store_backend="none", log_format="console")
    async for ac in _client_for(create_app(unbound)):
        yield ac
