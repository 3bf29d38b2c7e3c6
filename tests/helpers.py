"""Point, trip and record factories shared by the test modules."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from gps_trips.models import CleanedPoint, RawRecord, Trip

T0 = datetime(2025, 5, 13, 5, 0, 0, tzinfo=timezone.utc)


def make_point(lat, lon, seconds=0, device_id="dev1"):
    instant = T0 + timedelta(seconds=seconds)
    return CleanedPoint(
        device_id=device_id,
        lat=float(lat),
        lon=float(lon),
        timestamp_text=instant.strftime("%Y-%m-%dT%H:%M:%SZ"),
        instant=instant,
    )


def make_trip(trip_id, *points):
    return Trip(id=trip_id, points=tuple(points))


def make_record(device_id="dev1", lat="52.0", lon="4.0", timestamp="2025-05-13T05:15:30"):
    return RawRecord(device_id=device_id, lat=lat, lon=lon, timestamp=timestamp)
