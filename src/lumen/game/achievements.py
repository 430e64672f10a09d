"""Player achievements.

Each achievement is a tagged threshold over a ``PlayerProgress`` snapshot,
so unlocking is a pure function of stored player data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lumen.game.records import PlayerRecord

VETERAN_PLAY_TIME_MS = 30 * 60 * 1000


class AchievementKind(str, Enum):
    CITIES_PURIFIED = "cities_purified"
    TOTAL_ENERGY = "total_energy"
    PLAY_TIME = "play_time"
    RELAY_COUNT = "relay_count"


@dataclass(frozen=True)
class PlayerProgress:
    """Everything an achievement predicate may look at."""

    cities_purified: int
    total_energy: float
    relay_count: int
    play_time_ms: int

    @classmethod
    def from_player(cls, player: PlayerRecord, now: int) -> PlayerProgress:
        joined_at = player.joined_at if player.joined_at is not None else now
        return cls(
            cities_purified=player.cities_purified,
            total_energy=player.total_energy,
            relay_count=player.relay_count,
            play_time_ms=max(0, now - joined_at),
        )


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    description: str
    icon: str
    kind: AchievementKind
    threshold: float
    reward: int

    def is_unlocked(self, progress: PlayerProgress) -> bool:
        if self.kind is AchievementKind.CITIES_PURIFIED:
            return progress.cities_purified >= self.threshold
        if self.kind is AchievementKind.TOTAL_ENERGY:
            return progress.total_energy >= self.threshold
        if self.kind is AchievementKind.PLAY_TIME:
            return progress.play_time_ms > self.threshold
        if self.kind is AchievementKind.RELAY_COUNT:
            return progress.relay_count >= self.threshold
        raise ValueError(f"Unknown achievement kind: {self.kind}")


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement("first_purify", "First Purification", "Purify your first city", "✨",
                AchievementKind.CITIES_PURIFIED, 1, 10),
    Achievement("energy_collector", "Energy Collector", "Collect 1000 energy in total", "⚡",
                AchievementKind.TOTAL_ENERGY, 1000, 50),
    Achievement("city_savior", "City Savior", "Purify 5 different cities", "🌆",
                AchievementKind.CITIES_PURIFIED, 5, 100),
    Achievement("global_guardian", "Global Guardian", "Purify 10 different cities", "🌍",
                AchievementKind.CITIES_PURIFIED, 10, 200),
    Achievement("veteran", "Veteran", "Play for more than 30 minutes", "🏆",
                AchievementKind.PLAY_TIME, VETERAN_PLAY_TIME_MS, 150),
    Achievement("energy_master", "Energy Master", "Collect 5000 energy in total", "💎",
                AchievementKind.TOTAL_ENERGY, 5000, 300),
    Achievement("relay_champion", "Relay Champion", "Trigger 10 light relays", "🔗",
                AchievementKind.RELAY_COUNT, 10, 250),
)


def unlocked_achievements(progress: PlayerProgress) -> list[Achievement]:
    return [a for a in ACHIEVEMENTS if a.is_unlocked(progress)]


def completion_percentage(unlocked: int, total: int = len(ACHIEVEMENTS)) -> int:
    if total == 0:
        return 0
    return round(unlocked / total * 100)
