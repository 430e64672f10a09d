"""Stored record codec tests."""

import json

from lumen.game.records import (
    PlayerRecord,
    StatsRecord,
    dump_cities,
    load_cities,
    load_leaderboard,
    load_player,
    load_stats,
)


class TestRecords:
    def test_city_defaults_for_missing_counters(self):
        cities = load_cities('{"tokyo": {"name": "Tokyo", "lat": 35.6, "lng": 139.6, "brightness": 50}}')
        assert cities["tokyo"].guardians == 0
        assert cities["tokyo"].purifications == 0

    def test_cities_dump_camel_case_and_keep_order(self):
        raw = '{"b": {"name": "B", "lat": 1, "lng": 2}, "a": {"name": "A", "lat": 3, "lng": 4}}'
        dumped = json.loads(dump_cities(load_cities(raw)))
        assert list(dumped) == ["b", "a"]
        assert set(dumped["a"]) == {"name", "lat", "lng", "brightness", "guardians", "purifications"}

    def test_stats_without_feed(self):
        stats = load_stats('{"totalPurifications": 3, "totalPlayers": 1, "totalEnergy": 9, "lastUpdate": 5}')
        assert stats.recent_activities == []
        assert stats.total_purifications == 3

    def test_player_round_trip_omits_absent_country(self):
        player = PlayerRecord(user_id="u1", nickname="Alice")
        data = json.loads(player.to_json())
        assert "country" not in data
        assert data["userId"] == "u1"
        assert load_player(player.to_json()) == player

    def test_leaderboard_list_and_wrapper(self):
        assert load_leaderboard("[]") == []
        assert load_leaderboard('{"entries": []}') == []
        assert load_leaderboard("{}") == []
        entries = load_leaderboard('[{"userId": "u1", "nickname": "A"}]')
        assert entries[0].total_energy == 0

    def test_stats_to_json_is_camel_case(self):
        data = json.loads(StatsRecord(total_players=2).to_json())
        assert data["totalPlayers"] == 2
        assert data["recentActivities"] == []

    def test_null_counters_load_as_zero(self):
        cities = load_cities(
            '{"tokyo": {"name": "Tokyo", "lat": 35.6, "lng": 139.6,'
            ' "brightness": null, "guardians": null, "purifications": null}}'
        )
        assert cities["tokyo"].brightness == 0
        assert cities["tokyo"].guardians == 0
        assert cities["tokyo"].purifications == 0
        player = load_player('{"userId": "u1", "totalEnergy": null, "citiesPurified": null}')
        assert player.total_energy == 0
        assert player.cities_purified == 0

    def test_whole_amounts_written_without_fraction(self):
        raw = '{"tokyo": {"name": "Tokyo", "lat": 35.6, "lng": 139.6, "brightness": 25.0}}'
        dumped = dump_cities(load_cities(raw))
        assert '"brightness":25,' in dumped
        assert '"lat":35.6' in dumped

        half = dump_cities(load_cities(raw.replace("25.0", "25.5")))
        assert '"brightness":25.5' in half
