"""Stored record models and their JSON codecs.

Records are persisted as camelCase JSON under fixed store keys. Counters
missing or null in records written by older code load as zero, and
unknown fields are carried through untouched.
"""

from __future__ import annotations

import json
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, TypeAdapter
from pydantic.alias_generators import to_camel

ActivityType = Literal["purify", "relay", "achievement"]


def _zero_if_null(value):
    return 0 if value is None else value


def _whole_if_integral(value: float):
    return int(value) if float(value).is_integer() else value


# Counters written as null by older code load as 0.
Counter = Annotated[int, BeforeValidator(_zero_if_null)]
# Brightness and energy: 25.0 is written back as 25.
Amount = Annotated[float, BeforeValidator(_zero_if_null), PlainSerializer(_whole_if_integral)]


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredRecord(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class CityRecord(StoredRecord):
    name: str
    lat: float
    lng: float
    brightness: Amount = 0
    guardians: Counter = 0
    purifications: Counter = 0


class PlayerRecord(StoredRecord):
    user_id: str
    nickname: str = "Anonymous"
    country: str | None = None
    total_energy: Amount = 0
    cities_purified: Counter = 0
    cities_seen: dict[str, bool] = Field(default_factory=dict)
    last_active: int = 0
    joined_at: int | None = None
    relay_count: Counter = 0


class LeaderboardRecord(StoredRecord):
    user_id: str
    nickname: str = "Anonymous"
    total_energy: Amount = 0
    cities_purified: Counter = 0
    country: str | None = None
    last_active: int | None = None


class ActivityRecord(StoredRecord):
    type: ActivityType
    user_id: str
    nickname: str
    city: str
    timestamp: int


class StatsRecord(StoredRecord):
    total_purifications: Counter = 0
    total_players: Counter = 0
    total_energy: Amount = 0
    last_update: int = 0
    recent_activities: list[ActivityRecord] = Field(default_factory=list)


CitySet = dict[str, CityRecord]

_city_set = TypeAdapter(CitySet)
_leaderboard = TypeAdapter(list[LeaderboardRecord])


def load_cities(raw: str) -> CitySet:
    return _city_set.validate_json(raw)


def dump_cities(cities: CitySet) -> str:
    return _city_set.dump_json(cities, by_alias=True, exclude_none=True).decode("utf-8")


def load_leaderboard(raw: str) -> list[LeaderboardRecord]:
    """Parse the leaderboard list, accepting the legacy ``{"entries": [...]}`` wrapper."""
    parsed = json.loads(raw)
    if isinstance(parsed, dict):
        parsed = parsed.get("entries") or []
    return _leaderboard.validate_python(parsed)


def dump_leaderboard(entries: list[LeaderboardRecord]) -> str:
    return _leaderboard.dump_json(entries, by_alias=True, exclude_none=True).decode("utf-8")


def load_stats(raw: str) -> StatsRecord:
    return StatsRecord.model_validate_json(raw)


def load_player(raw: str) -> PlayerRecord:
    return PlayerRecord.model_validate_json(raw)
