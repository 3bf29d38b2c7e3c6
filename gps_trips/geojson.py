"""Render trips as a GeoJSON ``FeatureCollection`` of styled line strings."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from .models import Trip, TripStats
from .trip_stats import compute_trip_stats

TRIP_COLORS = (
    "#FF0000",
    "#00FF00",
    "#0000FF",
    "#FFFF00",
    "#FF00FF",
    "#00FFFF",
    "#FFA500",
    "#800080",
    "#008000",
    "#FFC0CB",
)
STROKE_WIDTH = 3

Feature = Dict[str, Any]


def build_feature(trip: Trip, stats: TripStats, color: str) -> Feature:
    """Return one LineString feature; coordinates are ``[lon, lat]``."""

    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[point.lon, point.lat] for point in trip.points],
        },
        "properties": {
            "trip_name": trip.name,
            "total_distance_km": stats.total_distance_km,
            "duration_min": stats.duration_min,
            "avg_speed_kmh": stats.avg_speed_kmh,
            "max_speed_kmh": stats.max_speed_kmh,
            "stroke": color,
            "stroke-width": STROKE_WIDTH,
            "point_count": len(trip.points),
        },
    }


def build_feature_collection(
    trips: Sequence[Trip],
    stats: Optional[Mapping[int, TripStats]] = None,
) -> Dict[str, Any]:
    """Serialize trips in id order, skipping those with fewer than two points.

    Skipped trips do not consume a palette slot, and emitted features keep
    their original trip id in ``trip_name`` even when that leaves gaps.
    """

    features = []
    color_index = 0
    for trip in trips:
        if len(trip.points) < 2:
            continue
        trip_stats = stats.get(trip.id) if stats is not None else None
        if trip_stats is None:
            trip_stats = compute_trip_stats(trip)
        color = TRIP_COLORS[color_index % len(TRIP_COLORS)]
        features.append(build_feature(trip, trip_stats, color))
        color_index += 1
    return {"type": "FeatureCollection", "features": features}


__all__ = [
    "STROKE_WIDTH",
    "TRIP_COLORS",
    "build_feature",
    "build_feature_collection",
]
