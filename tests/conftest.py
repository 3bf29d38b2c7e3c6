"""Global pytest fixtures & helpers.

Adds project root to path and provides the sample points, records and CSV
input shared by the cleaning, segmentation, statistics and serialization
tests. Plain factories live in ``helpers.py``.
"""
from __future__ import annotations

import os
import sys
import pytest

HERE = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(HERE, ".."))
for path in (ROOT, HERE):
    if path not in sys.path:
        sys.path.insert(0, path)

from helpers import make_point, make_record


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def abc_points():
    """Two fixes 1.1 km apart, then a 60+ km jump at the same instant."""
    a = make_point(52.0, 4.0, 0)
    b = make_point(52.01, 4.0, 300)
    c = make_point(52.5, 4.5, 300)
    return [a, b, c]


@pytest.fixture
def mixed_records():
    """Shuffled rows from two devices plus one reject of each kind."""
    return [
        (2, make_record("dev2", "52.3700", "4.8900", "2025-05-13T07:05:00Z")),
        (3, make_record("dev1", "52.0000", "4.0000", "2025-05-13T05:00:00")),
        (4, make_record("dev1", "", "4.0000", "2025-05-13T05:01:00")),
        (5, make_record("dev1", "52.0050", "4.0000", "2025-05-13 05:02:00")),
        (6, make_record("dev2", "95.0", "4.8900", "2025-05-13T07:00:00")),
        (7, make_record("dev2", "52.3710", "4.8900", "2025-05-13T07:06:00.500Z")),
        (8, make_record("dev1", "52.0100", "4.0000", "2025-05-13T05:04:00+00:00")),
        (9, make_record("dev1", "52.0150", "4.0000", "13/05/2025 05:06")),
        (10, make_record("dev3", "48.8566", "2.3522", "2025-05-13T09:00:00")),
    ]


GPS_CSV = """device_id,lat,lon,timestamp
dev2,52.3700,4.8900,2025-05-13T07:05:00Z
dev1,52.0000,4.0000,2025-05-13T05:00:00
dev1,,4.0000,2025-05-13T05:01:00
dev1,52.0050,4.0000,2025-05-13 05:02:00
dev2,95.0,4.8900,2025-05-13T07:00:00
dev2,52.3710,4.8900,2025-05-13T07:06:00.500Z
dev1,52.0100,4.0000,2025-05-13T05:04:00+00:00
dev1,52.0150,4.0000,not-a-time
dev3,48.8566,2.3522,2025-05-13T09:00:00
"""


@pytest.fixture
def gps_csv(tmp_path):
    path = tmp_path / "gps_data.csv"
    path.write_text(GPS_CSV, encoding="utf-8")
    return path
