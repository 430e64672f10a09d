"""Relay target selection: nearest city that is not yet fully lit."""

from __future__ import annotations

from lumen.game.geo import haversine_km
from lumen.game.records import CityRecord, CitySet

FULL_BRIGHTNESS = 100


def select_relay_target(source_key: str, cities: CitySet) -> CityRecord | None:
    """Pick the city closest to ``cities[source_key]`` with brightness below 100.

    Scans in the mapping's iteration order; on equal distance the first city
    seen wins. Returns None when every other city is fully lit or the set has
    no other member.
    """
    source = cities[source_key]
    nearest: CityRecord | None = None
    min_distance = float("inf")

    for key, city in cities.items():
        if key == source_key:
            continue
        if city.brightness >= FULL_BRIGHTNESS:
            continue
        distance = haversine_km(source.lat, source.lng, city.lat, city.lng)
        if distance < min_distance:
            min_distance = distance
            nearest = city

    return nearest
