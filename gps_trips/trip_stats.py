"""Per-trip kinematic statistics."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from .models import Trip, TripStats
from .segmentation import jump_km


def round_half_away(value: float, places: int = 2) -> float:
    """Round ``value`` half away from zero on its shortest decimal form.

    ``round(0.125, 2)`` gives ``0.12`` (half-to-even) and ``round(2.675, 2)``
    gives ``2.67`` (binary representation); this returns ``0.13`` and ``2.68``.
    """

    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def segment_distances(trip: Trip) -> List[float]:
    """Return the haversine length of every consecutive pair in ``trip``."""

    points = trip.points
    return [jump_km(prev, curr) for prev, curr in zip(points, points[1:])]


def compute_trip_stats(trip: Trip) -> TripStats:
    """Return distance, duration and speed figures for a trip.

    Every segment counts toward the total distance, but only segments with a
    positive elapsed time produce a speed sample. The average speed is the
    plain mean of those samples, not weighted by distance.
    """

    points = trip.points
    if len(points) < 2:
        return TripStats()

    total_distance = 0.0
    max_speed = 0.0
    speeds: List[float] = []
    for prev, curr in zip(points, points[1:]):
        distance = jump_km(prev, curr)
        total_distance += distance
        hours = (curr.instant - prev.instant).total_seconds() / 3600
        if hours > 0:
            speed = distance / hours
            speeds.append(speed)
            max_speed = max(max_speed, speed)

    duration = (points[-1].instant - points[0].instant).total_seconds() / 60
    avg_speed = sum(speeds) / len(speeds) if speeds else 0.0

    return TripStats(
        total_distance_km=round_half_away(total_distance),
        duration_min=round_half_away(duration),
        avg_speed_kmh=round_half_away(avg_speed),
        max_speed_kmh=round_half_away(max_speed),
    )


__all__ = ["compute_trip_stats", "round_half_away", "segment_distances"]
