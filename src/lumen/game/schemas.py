"""Pydantic request/response models for the game API (camelCase on the wire)."""

from __future__ import annotations

from pydantic import StrictFloat, StrictInt

from lumen.game.records import ActivityRecord, Amount, CamelModel, StatsRecord


# --- Purify ---


class PurifyRequest(CamelModel):
    # Presence of city_name and energy is checked by the engine so the
    # transport and direct callers get the same InvalidRequest.
    # Energy must be a JSON number: "50" and true are rejected, not coerced.
    city_name: str | None = None
    energy: StrictInt | StrictFloat | None = None
    user_id: str | None = None
    nickname: str | None = None
    country: str | None = None


class RelayTarget(CamelModel):
    name: str
    lat: float
    lng: float


class PurifyResponse(CamelModel):
    success: bool = True
    city_name: str
    new_brightness: Amount
    message: str
    relay_target: RelayTarget | None = None


# --- Status ---


class CityStatus(CamelModel):
    name: str
    lat: float
    lng: float
    brightness: Amount
    guardians: int


class StatusResponse(CamelModel):
    timestamp: int
    cities: list[CityStatus]
    total_brightness: int


# --- Stats ---


class CityActivity(CamelModel):
    name: str
    purifications: int


class StatsResponse(CamelModel):
    total_players: int
    total_energy_collected: Amount
    total_purifications: int
    average_brightness: int
    most_active_cities: list[CityActivity]
    recent_activities: list[ActivityRecord]


# --- Leaderboard ---


class LeaderboardEntry(CamelModel):
    rank: int
    user_id: str
    nickname: str
    total_energy: Amount
    cities_purified: int
    country: str


class LeaderboardResponse(CamelModel):
    timestamp: int
    entries: list[LeaderboardEntry]
    user_rank: int | None = None


# --- Init ---


class InitData(CamelModel):
    cities_count: int
    leaderboard: list[dict]
    stats: StatsRecord


class InitResponse(CamelModel):
    status: str  # success, already_initialized
    message: str
    cities_count: int | None = None
    data: InitData | None = None


# --- Analytics ---


class AnalyticsEvent(CamelModel):
    category: str
    action: str
    label: str | None = None
    value: float | None = None
    timestamp: float


class AnalyticsPayload(CamelModel):
    session_id: str
    events: list[AnalyticsEvent]


class AnalyticsResponse(CamelModel):
    success: bool = True
    message: str
    events_processed: int


# --- Achievements ---


class AchievementOut(CamelModel):
    id: str
    name: str
    description: str
    icon: str
    reward: int


class AchievementsResponse(CamelModel):
    user_id: str
    unlocked: list[AchievementOut]
    total: int
    unlocked_count: int
    percentage: int
