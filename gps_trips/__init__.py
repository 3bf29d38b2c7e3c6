"""GPS trip builder package."""

from .main import main
from .models import CleanedPoint, RawRecord, RejectEntry, RejectReason, Trip, TripStats
from .errors import GPSTripsError, InputFormatError
from .pipeline import process_records

__all__ = [
    "main",
    "CleanedPoint",
    "RawRecord",
    "RejectEntry",
    "RejectReason",
    "Trip",
    "TripStats",
    "GPSTripsError",
    "InputFormatError",
    "process_records",
]
