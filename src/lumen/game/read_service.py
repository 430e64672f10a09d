"""Read-only views over the game store: status, stats, leaderboard, players."""

from __future__ import annotations

from lumen.errors import NotInitialized, PlayerNotFound
from lumen.game.clock import now_ms
from lumen.game.records import (
    CitySet,
    LeaderboardRecord,
    PlayerRecord,
    load_cities,
    load_leaderboard,
    load_player,
    load_stats,
)
from lumen.game.schemas import (
    CityActivity,
    CityStatus,
    LeaderboardEntry,
    LeaderboardResponse,
    StatsResponse,
    StatusResponse,
)
from lumen.store import CITIES_KEY, LEADERBOARD_KEY, STATS_KEY, KVStore, user_key

MOST_ACTIVE_CITIES = 5


def average_brightness(cities: CitySet) -> int:
    """Rounded mean brightness, 0 for an empty set."""
    if not cities:
        return 0
    # Half-up rounding, so 62.5 renders as 63.
    mean = sum(c.brightness for c in cities.values()) / len(cities)
    return int(mean + 0.5)


def rank_leaderboard(records: list[LeaderboardRecord]) -> list[LeaderboardRecord]:
    """Sort by total energy, then cities purified, both descending. Stable."""
    return sorted(records, key=lambda e: (-e.total_energy, -e.cities_purified))


async def _require(store: KVStore, key: str) -> str:
    raw = await store.get(key)
    if not raw:
        raise NotInitialized()
    return raw


async def get_status(store: KVStore) -> StatusResponse:
    cities = load_cities(await _require(store, CITIES_KEY))
    return StatusResponse(
        timestamp=now_ms(),
        cities=[
            CityStatus(name=c.name, lat=c.lat, lng=c.lng, brightness=c.brightness, guardians=c.guardians)
            for c in cities.values()
        ],
        total_brightness=average_brightness(cities),
    )


async def get_stats(store: KVStore) -> StatsResponse:
    stats = load_stats(await _require(store, STATS_KEY))
    cities = load_cities(await _require(store, CITIES_KEY))

    most_active = sorted(cities.values(), key=lambda c: -c.purifications)[:MOST_ACTIVE_CITIES]
    return StatsResponse(
        total_players=stats.total_players,
        total_energy_collected=stats.total_energy,
        total_purifications=stats.total_purifications,
        average_brightness=average_brightness(cities),
        most_active_cities=[CityActivity(name=c.name, purifications=c.purifications) for c in most_active],
        recent_activities=stats.recent_activities,
    )


async def get_leaderboard(store: KVStore, limit: int = 100, user_id: str | None = None) -> LeaderboardResponse:
    """Ranked leaderboard. Rank is computed here, never stored."""
    ranked = rank_leaderboard(load_leaderboard(await _require(store, LEADERBOARD_KEY)))

    user_rank = None
    if user_id:
        user_rank = next((idx + 1 for idx, e in enumerate(ranked) if e.user_id == user_id), None)

    entries = [
        LeaderboardEntry(
            rank=idx + 1,
            user_id=e.user_id,
            nickname=e.nickname,
            total_energy=e.total_energy,
            cities_purified=e.cities_purified,
            country=e.country or "",
        )
        for idx, e in enumerate(ranked[:limit])
    ]
    return LeaderboardResponse(timestamp=now_ms(), entries=entries, user_rank=user_rank)


async def get_player(store: KVStore, user_id: str) -> PlayerRecord:
    raw = await store.get(user_key(user_id))
    if not raw:
        raise PlayerNotFound()
    return load_player(raw)
