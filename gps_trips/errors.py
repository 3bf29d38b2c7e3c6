"""Central error types used across the application."""

from __future__ import annotations


class GPSTripsError(RuntimeError):
    """Base error for fatal trip builder failures."""


class InputFormatError(GPSTripsError):
    """Raised when the input file header or overall layout is unusable."""


__all__ = [
    "GPSTripsError",
    "InputFormatError",
]
