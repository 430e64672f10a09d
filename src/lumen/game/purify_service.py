"""Purify transaction engine.

One purification event is a read-modify-write over four independent store
records: the city set, the player, the global stats and the leaderboard.
The store offers no multi-key atomicity, so concurrent events on the same
city or player can lose updates, and a failed later write leaves earlier
writes applied. Neither case is detected or compensated here.
"""

from __future__ import annotations

import math

import structlog

from lumen.errors import CityNotFound, InvalidRequest, NotInitialized
from lumen.game.clock import Clock, now_ms
from lumen.game.records import (
    ActivityRecord,
    CityRecord,
    CitySet,
    LeaderboardRecord,
    PlayerRecord,
    StatsRecord,
    dump_cities,
    dump_leaderboard,
    load_cities,
    load_leaderboard,
    load_player,
    load_stats,
)
from lumen.game.relay import FULL_BRIGHTNESS, select_relay_target
from lumen.game.schemas import PurifyRequest, PurifyResponse, RelayTarget
from lumen.store import CITIES_KEY, LEADERBOARD_KEY, STATS_KEY, KVStore, user_key

logger = structlog.get_logger()

ANONYMOUS_USER_ID = "anonymous"
DEFAULT_NICKNAME = "Anonymous"
ACTIVITY_NICKNAME_MAX = 40

# The feed is trimmed twice: to 50 before the new entry goes in, then to 30.
RECENT_ACTIVITY_PRE_CAP = 50
RECENT_ACTIVITY_CAP = 30


def clamp_energy(energy: float | None) -> float:
    """Negative energy counts as 0, and so does NaN or infinity."""
    if energy is None or not math.isfinite(energy):
        return 0.0
    return max(0.0, energy)


def format_brightness(value: float) -> str:
    """Render 70.0 as "70" and 70.5 as "70.5"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def find_city_key(cities: CitySet, city_name: str) -> str | None:
    """Resolve a city by display name. The first matching entry wins."""
    for key, city in cities.items():
        if city.name == city_name:
            return key
    return None


class PurifyEngine:
    """Applies purification events against a store."""

    def __init__(self, store: KVStore, clock: Clock = now_ms) -> None:
        self.store = store
        self.clock = clock

    async def purify(self, request: PurifyRequest) -> PurifyResponse:
        """Run one purify transaction and describe the outcome."""
        if not request.city_name or request.energy is None:
            raise InvalidRequest()

        cities_raw = await self.store.get(CITIES_KEY)
        stats_raw = await self.store.get(STATS_KEY)
        leaderboard_raw = await self.store.get(LEADERBOARD_KEY)
        if not cities_raw or not stats_raw or not leaderboard_raw:
            raise NotInitialized()

        cities = load_cities(cities_raw)
        city_key = find_city_key(cities, request.city_name)
        if city_key is None:
            raise CityNotFound()

        city = cities[city_key]
        energy = clamp_energy(request.energy)
        new_brightness = min(FULL_BRIGHTNESS, city.brightness + energy)
        now = self.clock()

        user_id = request.user_id or None
        player: PlayerRecord | None = None
        is_new_player = False
        first_visit = False
        if user_id:
            player, is_new_player = await self._load_or_create_player(user_id, request, now)
            first_visit = self._credit_player(player, city_key, request, energy, now)

        cities[city_key] = city.model_copy(
            update={
                "brightness": new_brightness,
                "purifications": city.purifications + 1,
                "guardians": city.guardians + 1 if first_visit else city.guardians,
            }
        )

        relay_city: CityRecord | None = None
        if new_brightness >= FULL_BRIGHTNESS:
            relay_city = select_relay_target(city_key, cities)
            if relay_city is not None and player is not None:
                player.relay_count += 1

        nickname = request.nickname or (player.nickname if player else None) or DEFAULT_NICKNAME
        nickname = nickname[:ACTIVITY_NICKNAME_MAX]

        stats = load_stats(stats_raw)
        self._apply_stats(stats, request, energy, nickname, is_new_player, now)

        leaderboard = load_leaderboard(leaderboard_raw)
        if player is not None:
            self._apply_leaderboard(leaderboard, player, request, energy, nickname, now)

        if player is not None:
            await self.store.put(user_key(player.user_id), player.to_json())
        await self.store.put(CITIES_KEY, dump_cities(cities))
        await self.store.put(STATS_KEY, stats.to_json())
        await self.store.put(LEADERBOARD_KEY, dump_leaderboard(leaderboard))

        logger.info(
            "purify_applied",
            city_key=city_key,
            user_id=user_id,
            energy=energy,
            brightness=new_brightness,
            new_player=is_new_player,
            first_visit=first_visit,
            relay_target=relay_city.name if relay_city else None,
        )

        relay_target = None
        if relay_city is not None:
            relay_target = RelayTarget(name=relay_city.name, lat=relay_city.lat, lng=relay_city.lng)
            message = f"{request.city_name} fully lit! Energy relayed to {relay_city.name}!"
        else:
            message = f"{request.city_name} brightness increased to {format_brightness(new_brightness)}%"

        return PurifyResponse(
            city_name=request.city_name,
            new_brightness=new_brightness,
            message=message,
            relay_target=relay_target,
        )

    async def _load_or_create_player(
        self, user_id: str, request: PurifyRequest, now: int,
    ) -> tuple[PlayerRecord, bool]:
        raw = await self.store.get(user_key(user_id))
        if raw:
            return load_player(raw), False
        player = PlayerRecord(
            user_id=user_id,
            nickname=request.nickname or DEFAULT_NICKNAME,
            country=request.country,
            last_active=now,
            joined_at=now,
        )
        return player, True

    @staticmethod
    def _credit_player(
        player: PlayerRecord, city_key: str, request: PurifyRequest, energy: float, now: int,
    ) -> bool:
        """Apply the event to the player. Returns True on the player's first visit to the city."""
        player.nickname = request.nickname or player.nickname
        if request.country:
            player.country = request.country
        player.total_energy += energy
        player.last_active = now

        if player.cities_seen.get(city_key):
            return False
        player.cities_seen[city_key] = True
        player.cities_purified += 1
        return True

    @staticmethod
    def _apply_stats(
        stats: StatsRecord,
        request: PurifyRequest,
        energy: float,
        nickname: str,
        is_new_player: bool,
        now: int,
    ) -> None:
        stats.total_purifications += 1
        stats.total_energy += energy
        if is_new_player:
            stats.total_players += 1
        stats.last_update = now

        activity = ActivityRecord(
            type="purify",
            user_id=request.user_id or ANONYMOUS_USER_ID,
            nickname=nickname,
            city=request.city_name or "",
            timestamp=now,
        )
        recent = stats.recent_activities[:RECENT_ACTIVITY_PRE_CAP]
        recent.insert(0, activity)
        stats.recent_activities = recent[:RECENT_ACTIVITY_CAP]

    @staticmethod
    def _apply_leaderboard(
        leaderboard: list[LeaderboardRecord],
        player: PlayerRecord,
        request: PurifyRequest,
        energy: float,
        nickname: str,
        now: int,
    ) -> None:
        """Update the player's entry in place, or append one. Never duplicates a user."""
        entry = next((e for e in leaderboard if e.user_id == player.user_id), None)
        if entry is None:
            entry = LeaderboardRecord(
                user_id=player.user_id,
                nickname=nickname,
                country=request.country,
                last_active=now,
            )
            leaderboard.append(entry)

        entry.nickname = nickname
        entry.total_energy += energy
        entry.cities_purified = player.cities_purified
        if request.country:
            entry.country = request.country
        entry.last_active = now
