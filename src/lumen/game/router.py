"""Game API: purify, status, stats, leaderboard, init, analytics, players."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, Query, Response

from lumen.config import Settings
from lumen.dependencies import get_app_settings, get_store
from lumen.game.achievements import ACHIEVEMENTS, PlayerProgress, completion_percentage, unlocked_achievements
from lumen.game.clock import now_ms
from lumen.game.purify_service import PurifyEngine
from lumen.game.read_service import get_leaderboard, get_player, get_stats, get_status
from lumen.game.records import PlayerRecord
from lumen.game.schemas import (
    AchievementOut,
    AchievementsResponse,
    AnalyticsPayload,
    AnalyticsResponse,
    InitResponse,
    LeaderboardResponse,
    PurifyRequest,
    PurifyResponse,
    StatsResponse,
    StatusResponse,
)
from lumen.game.seed import initialize_store
from lumen.store import KVStore

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Game"])


@router.post("/purify", response_model=PurifyResponse, response_model_exclude_none=True)
async def purify(
    body: PurifyRequest,
    store: KVStore = Depends(get_store),
):
    """Apply a purification event to a city and report any relay target."""
    return await PurifyEngine(store).purify(body)


@router.get("/status", response_model=StatusResponse)
async def status(store: KVStore = Depends(get_store)):
    """Brightness of every city plus the global mean."""
    return await get_status(store)


@router.get("/stats", response_model=StatsResponse)
async def stats(
    response: Response,
    store: KVStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Global counters, the most active cities and the recent activity feed."""
    response.headers["Cache-Control"] = f"public, max-age={settings.stats_cache_seconds}"
    return await get_stats(store)


@router.get("/leaderboard", response_model=LeaderboardResponse, response_model_exclude_none=True)
async def leaderboard(
    response: Response,
    user_id: str | None = Query(None, alias="userId"),
    store: KVStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Top players by total energy; ``userId`` adds that player's rank."""
    response.headers["Cache-Control"] = f"public, max-age={settings.leaderboard_cache_seconds}"
    return await get_leaderboard(store, limit=settings.leaderboard_size, user_id=user_id)


@router.api_route("/init", methods=["GET", "POST"], response_model=InitResponse, response_model_exclude_none=True)
async def init(
    store: KVStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Seed the store on first deployment. Safe to call repeatedly."""
    return await initialize_store(store, brightness=settings.seed_brightness)


@router.post("/analytics", response_model=AnalyticsResponse)
async def analytics(body: AnalyticsPayload):
    """Accept a batch of client analytics events. Logged only, nothing is stored."""
    logger.info("analytics_received", session_id=body.session_id, events=len(body.events))
    return AnalyticsResponse(message="Analytics data received", events_processed=len(body.events))


@router.get("/players/{user_id}", response_model=PlayerRecord, response_model_exclude_none=True)
async def player(user_id: str, store: KVStore = Depends(get_store)):
    """Stored progress for one player."""
    return await get_player(store, user_id)


@router.get("/players/{user_id}/achievements", response_model=AchievementsResponse)
async def player_achievements(user_id: str, store: KVStore = Depends(get_store)):
    """Achievements the player's current progress unlocks."""
    record = await get_player(store, user_id)
    unlocked = unlocked_achievements(PlayerProgress.from_player(record, now_ms()))
    return AchievementsResponse(
        user_id=user_id,
        unlocked=[
            AchievementOut(id=a.id, name=a.name, description=a.description, icon=a.icon, reward=a.reward)
            for a in unlocked
        ],
        total=len(ACHIEVEMENTS),
        unlocked_count=len(unlocked),
        percentage=completion_percentage(len(unlocked)),
    )
