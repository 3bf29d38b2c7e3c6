"""Chronological ordering and trip segmentation."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .geo import haversine_km
from .models import CleanedPoint, Trip

# Trip boundary rule: split on a pause longer than this ...
MAX_GAP_MINUTES = 25.0
# ... or a jump longer than this.
MAX_JUMP_KM = 2.0


def sort_chronologically(points: Iterable[CleanedPoint]) -> List[CleanedPoint]:
    """Return points ordered by instant; equal instants keep their input order."""

    # sorted() is stable, which is what keeps tied fixes in input order.
    return sorted(points, key=lambda point: point.instant)


def gap_minutes(prev: CleanedPoint, curr: CleanedPoint) -> float:
    return (curr.instant - prev.instant).total_seconds() / 60


def jump_km(prev: CleanedPoint, curr: CleanedPoint) -> float:
    return haversine_km(prev.lat, prev.lon, curr.lat, curr.lon)


def segment_trips(
    points: Sequence[CleanedPoint],
    *,
    max_gap_minutes: float = MAX_GAP_MINUTES,
    max_jump_km: float = MAX_JUMP_KM,
) -> List[Trip]:
    """Split chronologically sorted points into trips.

    A new trip starts whenever a point is more than ``max_gap_minutes`` after,
    or more than ``max_jump_km`` away from, the point immediately before it.
    Devices are not separated: the comparison is always with the preceding
    point in the merged stream. Ids are 1-based in segmentation order.
    """

    if not points:
        return []

    trips: List[Trip] = []
    current: List[CleanedPoint] = [points[0]]
    trip_id = 1
    for prev, curr in zip(points, points[1:]):
        if (
            gap_minutes(prev, curr) > max_gap_minutes
            or jump_km(prev, curr) > max_jump_km
        ):
            trips.append(Trip(id=trip_id, points=tuple(current)))
            trip_id += 1
            current = [curr]
        else:
            current.append(curr)
    trips.append(Trip(id=trip_id, points=tuple(current)))
    return trips


__all__ = [
    "MAX_GAP_MINUTES",
    "MAX_JUMP_KM",
    "gap_minutes", "jump_km", "segment_trips", "sort_chronologically"]
