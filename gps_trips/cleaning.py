"""Row validation: turn raw fixes into cleaned points or categorised rejects.

Checks run in a fixed order and the first failure wins:

1. all four fields present and non-empty (``MissingFields``)
2. latitude/longitude numeric and inside their ranges (``InvalidCoordinates``)
3. timestamp matching one of the accepted formats (``InvalidTimestamp``)

Nothing here raises for a bad row; the caller decides what to do with the
returned :class:`RejectEntry`.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple, Union

from .models import CleanedPoint, NumberedRecord, RawRecord, RejectEntry, RejectReason

LOGGER = logging.getLogger(__name__)

# Priority order matters: the first format that parses is used.
TIMESTAMP_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%S.%f",
)

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

ValidationResult = Union[CleanedPoint, RejectEntry]


def _is_blank(value: object) -> bool:
    return value is None or str(value).strip() == ""


def _parse_number(text: str) -> Optional[float]:
    candidate = text.strip()
    if not _NUMERIC_RE.match(candidate):
        return None
    value = float(candidate)
    if not math.isfinite(value):
        return None
    return value


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse ``text`` with the first matching accepted format.

    Values without an explicit offset are taken as UTC so that every parsed
    instant can be compared with every other one.
    """

    candidate = text.strip()
    for fmt in TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def validate_record(record: RawRecord, line_ref: int) -> ValidationResult:
    """Classify one raw record as a :class:`CleanedPoint` or a :class:`RejectEntry`."""

    fields = (record.device_id, record.lat, record.lon, record.timestamp)
    if any(_is_blank(value) for value in fields):
        return RejectEntry(
            line_ref, RejectReason.MISSING_FIELDS, "Missing required fields"
        )

    lat_text = str(record.lat).strip()
    lon_text = str(record.lon).strip()
    lat = _parse_number(lat_text)
    lon = _parse_number(lon_text)
    if lat is None or lon is None or not -90 <= lat <= 90 or not -180 <= lon <= 180:
        return RejectEntry(
            line_ref,
            RejectReason.INVALID_COORDINATES,
            f"Invalid coordinates ({lat_text}, {lon_text})",
        )

    timestamp_text = str(record.timestamp).strip()
    instant = parse_timestamp(timestamp_text)
    if instant is None:
        return RejectEntry(
            line_ref,
            RejectReason.INVALID_TIMESTAMP,
            f"Invalid timestamp ({timestamp_text})",
        )

    return CleanedPoint(
        device_id=str(record.device_id).strip(),
        lat=lat,
        lon=lon,
        timestamp_text=timestamp_text,
        instant=instant,
    )


def clean_records(
    records: Iterable[NumberedRecord],
) -> Tuple[List[CleanedPoint], List[RejectEntry]]:
    """Split numbered raw records into accepted points and rejects, keeping input order."""

    points: List[CleanedPoint] = []
    rejects: List[RejectEntry] = []
    for line_ref, record in records:
        result = validate_record(record, line_ref)
        if isinstance(result, RejectEntry):
            LOGGER.debug("Rejected %s", result.describe())
            rejects.append(result)
        else:
            points.append(result)
    return points, rejects


__all__ = [
    "TIMESTAMP_FORMATS",
    "clean_records",
    "parse_timestamp",
    "validate_record",
]
