"""Default world data and store initialization (idempotent)."""

from __future__ import annotations

import logging

from lumen.game.clock import now_ms
from lumen.game.records import CityRecord, StatsRecord, dump_cities, dump_leaderboard, load_cities
from lumen.game.schemas import InitData, InitResponse
from lumen.store import CITIES_KEY, LEADERBOARD_KEY, STATS_KEY, KVStore

logger = logging.getLogger(__name__)

# key -> (display name, lat, lng). Keys are stable identifiers; names are what clients send.
DEFAULT_CITIES: dict[str, tuple[str, float, float]] = {
    # China
    "beijing": ("北京", 39.9042, 116.4074),
    "shanghai": ("上海", 31.2304, 121.4737),
    "guangzhou": ("广州", 23.1291, 113.2644),
    "shenzhen": ("深圳", 22.5431, 114.0579),
    "chengdu": ("成都", 30.5728, 104.0668),
    "hangzhou": ("杭州", 30.2741, 120.1551),
    "wuhan": ("武汉", 30.5928, 114.3055),
    "xian": ("西安", 34.3416, 108.9398),
    # Rest of Asia
    "tokyo": ("Tokyo", 35.6762, 139.6503),
    "osaka": ("Osaka", 34.6937, 135.5023),
    "seoul": ("Seoul", 37.5665, 126.9780),
    "singapore": ("Singapore", 1.3521, 103.8198),
    "bangkok": ("Bangkok", 13.7563, 100.5018),
    "mumbai": ("Mumbai", 19.0760, 72.8777),
    "delhi": ("Delhi", 28.7041, 77.1025),
    "dubai": ("Dubai", 25.2048, 55.2708),
    # Europe
    "london": ("London", 51.5074, -0.1278),
    "paris": ("Paris", 48.8566, 2.3522),
    "berlin": ("Berlin", 52.5200, 13.4050),
    "madrid": ("Madrid", 40.4168, -3.7038),
    "rome": ("Rome", 41.9028, 12.4964),
    "moscow": ("Moscow", 55.7558, 37.6173),
    "amsterdam": ("Amsterdam", 52.3676, 4.9041),
    # North America
    "newyork": ("New York", 40.7128, -74.0060),
    "losangeles": ("Los Angeles", 34.0522, -118.2437),
    "chicago": ("Chicago", 41.8781, -87.6298),
    "toronto": ("Toronto", 43.6532, -79.3832),
    "sanfrancisco": ("San Francisco", 37.7749, -122.4194),
    # South America
    "saopaulo": ("São Paulo", -23.5505, -46.6333),
    "buenosaires": ("Buenos Aires", -34.6037, -58.3816),
    # Oceania
    "sydney": ("Sydney", -33.8688, 151.2093),
    "melbourne": ("Melbourne", -37.8136, 144.9631),
    # Africa
    "cairo": ("Cairo", 30.0444, 31.2357),
    "lagos": ("Lagos", 6.5244, 3.3792),
}


def build_default_cities(brightness: float = 100) -> dict[str, CityRecord]:
    return {
        key: CityRecord(name=name, lat=lat, lng=lng, brightness=brightness)
        for key, (name, lat, lng) in DEFAULT_CITIES.items()
    }


async def initialize_store(store: KVStore, brightness: float = 100) -> InitResponse:
    """Write the initial city set, an empty leaderboard and zeroed stats.

    Does nothing when the city set already exists.
    """
    existing = await store.get(CITIES_KEY)
    if existing:
        return InitResponse(
            status="already_initialized",
            message="Data already exists.",
            cities_count=len(load_cities(existing)),
        )

    cities = build_default_cities(brightness)
    stats = StatsRecord(last_update=now_ms())

    await store.put(CITIES_KEY, dump_cities(cities))
    await store.put(LEADERBOARD_KEY, dump_leaderboard([]))
    await store.put(STATS_KEY, stats.to_json())
    logger.info("Initialized game store with %d cities", len(cities))

    return InitResponse(
        status="success",
        message="KV data initialized successfully",
        data=InitData(cities_count=len(cities), leaderboard=[], stats=stats),
    )
