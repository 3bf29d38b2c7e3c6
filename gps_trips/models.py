"""Dataclasses describing raw fixes, cleaned points, trips and their stats."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(slots=True)
class RawRecord:
    """One untyped input row; any field may be missing."""

    device_id: Optional[str] = None
    lat: Optional[str] = None
    lon: Optional[str] = None
    timestamp: Optional[str] = None


# (line_ref, record) pairs as produced by the ingestion layer.
NumberedRecord = Tuple[int, RawRecord]


@dataclass(frozen=True, slots=True)
class CleanedPoint:
    """A validated GPS fix with a parsed, timezone-aware instant."""

    device_id: str
    lat: float
    lon: float
    timestamp_text: str
    instant: datetime


class RejectReason(str, Enum):
    MISSING_FIELDS = "MissingFields"
    INVALID_COORDINATES = "InvalidCoordinates"
    INVALID_TIMESTAMP = "InvalidTimestamp"


@dataclass(frozen=True, slots=True)
class RejectEntry:
    line_ref: int
    reason: RejectReason
    detail: str

    def describe(self) -> str:
        """Return the reject-log line for this entry."""

        return f"Line {self.line_ref}: {self.detail}"


@dataclass(frozen=True, slots=True)
class Trip:
    """Contiguous run of chronologically ordered points."""

    id: int
    points: Tuple[CleanedPoint, ...]

    @property
    def name(self) -> str:
        return f"trip_{self.id}"

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class TripStats:
    total_distance_km: float = 0.0
    duration_min: float = 0.0
    avg_speed_kmh: float = 0.0
    max_speed_kmh: float = 0.0


@dataclass
class PipelineResult:
    """Everything produced by one pass of the trip pipeline."""

    points: List[CleanedPoint] = field(default_factory=list)
    sorted_points: List[CleanedPoint] = field(default_factory=list)
    trips: List[Trip] = field(default_factory=list)
    stats: Dict[int, TripStats] = field(default_factory=dict)
    rejects: List[RejectEntry] = field(default_factory=list)
    collection: Dict[str, Any] = field(default_factory=dict)

    @property
    def feature_count(self) -> int:
        return len(self.collection.get("features", []))
