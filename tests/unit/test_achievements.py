"""Achievement predicate tests."""

import pytest

from lumen.game.achievements import (
    ACHIEVEMENTS,
    VETERAN_PLAY_TIME_MS,
    Achievement,
    AchievementKind,
    PlayerProgress,
    completion_percentage,
    unlocked_achievements,
)
from lumen.game.records import PlayerRecord


def _progress(cities=0, energy=0.0, relays=0, play_ms=0) -> PlayerProgress:
    return PlayerProgress(cities_purified=cities, total_energy=energy, relay_count=relays, play_time_ms=play_ms)


def _ids(progress: PlayerProgress) -> set[str]:
    return {a.id for a in unlocked_achievements(progress)}


class TestCatalogue:
    def test_ids_unique(self):
        ids = [a.id for a in ACHIEVEMENTS]
        assert len(ids) == len(set(ids))

    def test_fresh_player_unlocks_nothing(self):
        assert _ids(_progress()) == set()


class TestPredicates:
    def test_first_purify(self):
        assert _ids(_progress(cities=1)) == {"first_purify"}

    def test_city_thresholds(self):
        assert {"first_purify", "city_savior"} <= _ids(_progress(cities=5))
        assert "global_guardian" not in _ids(_progress(cities=9))
        assert "global_guardian" in _ids(_progress(cities=10))

    def test_energy_thresholds(self):
        assert "energy_collector" not in _ids(_progress(energy=999.9))
        assert "energy_collector" in _ids(_progress(energy=1000))
        assert "energy_master" in _ids(_progress(energy=5000))

    def test_veteran_needs_strictly_more_than_30_minutes(self):
        assert "veteran" not in _ids(_progress(play_ms=VETERAN_PLAY_TIME_MS))
        assert "veteran" in _ids(_progress(play_ms=VETERAN_PLAY_TIME_MS + 1))

    def test_relay_champion(self):
        assert "relay_champion" not in _ids(_progress(relays=9))
        assert "relay_champion" in _ids(_progress(relays=10))

    def test_custom_achievement(self):
        achievement = Achievement("relay_1", "Relay", "First relay", "*", AchievementKind.RELAY_COUNT, 1, 5)
        assert achievement.is_unlocked(_progress(relays=1))
        assert not achievement.is_unlocked(_progress(relays=0))


class TestProgressSnapshot:
    def test_from_player(self):
        player = PlayerRecord(user_id="u1", cities_purified=3, total_energy=42, relay_count=2, joined_at=1_000)
        progress = PlayerProgress.from_player(player, now=61_000)
        assert progress == _progress(cities=3, energy=42, relays=2, play_ms=60_000)

    def test_missing_join_time_counts_as_zero_play_time(self):
        player = PlayerRecord(user_id="u1")
        assert PlayerProgress.from_player(player, now=5_000).play_time_ms == 0


@pytest.mark.parametrize(("unlocked", "expected"), [(0, 0), (1, 14), (7, 100)])
def test_completion_percentage(unlocked, expected):
    assert completion_percentage(unlocked) == expected
