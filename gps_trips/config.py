"""Central configuration for the GPS trip builder.

All values are constants imported by the rest of the package. Each one can be
overridden through an environment variable (optionally via a local `.env`);
command-line flags take precedence over both.
"""

from __future__ import annotations

import importlib
import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except ImportError:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Input/Output
# ---------------------------------------------------------------------------
# Paths can be absolute or relative.
INPUT_FILE = os.getenv("GPS_TRIPS_INPUT_FILE", "gps_data.csv")
OUTPUT_FILE = os.getenv("GPS_TRIPS_OUTPUT_FILE", "trips.geojson")
REJECTS_FILE = os.getenv("GPS_TRIPS_REJECTS_FILE", "rejects.log")

# Indentation used when pretty-printing the GeoJSON output.
GEOJSON_INDENT = _env_int("GPS_TRIPS_GEOJSON_INDENT", 4)


# ---------------------------------------------------------------------------
# Trip segmentation (command-line defaults)
# ---------------------------------------------------------------------------
# Only the CLI reads these; the library functions keep the fixed 25 min / 2 km
# rule unless a caller passes thresholds explicitly. A new trip starts when
# consecutive fixes are more than this many minutes apart ...
MAX_GAP_MINUTES = _env_float("GPS_TRIPS_MAX_GAP_MINUTES", 25.0)

# ... or more than this many kilometres apart.
MAX_JUMP_KM = _env_float("GPS_TRIPS_MAX_JUMP_KM", 2.0)


# ---------------------------------------------------------------------------
# Map preview
# ---------------------------------------------------------------------------
MAP_ZOOM_START = _env_int("GPS_TRIPS_MAP_ZOOM_START", 13)
