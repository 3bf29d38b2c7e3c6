"""Clean → sort → segment → stats → serialize, as one pure pass.

The pipeline owns no state between calls; everything it produces is returned
in a :class:`PipelineResult`.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .cleaning import clean_records
from .geojson import build_feature_collection
from .models import NumberedRecord, PipelineResult, Trip, TripStats
from .segmentation import (
    MAX_GAP_MINUTES,
    MAX_JUMP_KM,
    segment_trips,
    sort_chronologically,
)
from .trip_stats import compute_trip_stats

LOGGER = logging.getLogger(__name__)


def format_trip_summary(trip: Trip, stats: TripStats) -> str:
    """Return the one-line console summary for a trip."""

    return (
        f"{trip.name}: {len(trip.points)} points, "
        f"{stats.total_distance_km:.2f} km, {stats.duration_min:.2f} min, "
        f"avg {stats.avg_speed_kmh:.2f} km/h, max {stats.max_speed_kmh:.2f} km/h"
    )


def process_records(
    records: Iterable[NumberedRecord],
    *,
    max_gap_minutes: float = MAX_GAP_MINUTES,
    max_jump_km: float = MAX_JUMP_KM,
) -> PipelineResult:
    """Run the full trip pipeline over numbered raw records."""

    result = PipelineResult()
    result.points, result.rejects = clean_records(records)
    LOGGER.info(
        "Cleaned data: %d valid rows (%d rejected)",
        len(result.points),
        len(result.rejects),
    )

    result.sorted_points = sort_chronologically(result.points)
    result.trips = segment_trips(
        result.sorted_points,
        max_gap_minutes=max_gap_minutes,
        max_jump_km=max_jump_km,
    )
    LOGGER.info("Created %d trips", len(result.trips))

    for trip in result.trips:
        result.stats[trip.id] = compute_trip_stats(trip)

    result.collection = build_feature_collection(result.trips, result.stats)
    LOGGER.info(
        "Serialized %d of %d trips (single-point trips are omitted)",
        result.feature_count,
        len(result.trips),
    )
    return result


__all__ = ["format_trip_summary", "process_records"]
