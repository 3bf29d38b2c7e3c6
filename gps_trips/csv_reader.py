"""Input reading layer: CSV files and the concatenated fallback format.

Produces ``(line_ref, RawRecord)`` pairs for the pipeline. Line references
start at 2 (the header is line 1) and are assigned to the records kept, in
file order.
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import List, Union

import pandas as pd

from .errors import InputFormatError
from .models import NumberedRecord, RawRecord

LOGGER = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("device_id", "lat", "lon", "timestamp")
FIRST_LINE_REF = 2

# Rows exported without separators, e.g. ``dev152.37074.8952025-05-13T05:15:30``.
_CONCATENATED_ROW_RE = re.compile(r"^([a-zA-Z0-9]+)([0-9.-]+)([0-9.-]+)([0-9T:-]+)$")

PathLike = Union[str, Path]


def _cell(value: object) -> str | None:
    if value is None or pd.isna(value):
        return None
    return str(value)


def is_concatenated_format(content: str) -> bool:
    """Return True when the file has no separators but still carries a header."""

    return "," not in content and "device_id" in content


def parse_concatenated(content: str) -> List[RawRecord]:
    """Recover rows from separator-less input; unmatched lines are dropped."""

    records: List[RawRecord] = []
    for line in content.strip().split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        match = _CONCATENATED_ROW_RE.match(stripped)
        if match is None:
            continue
        device_id, lat, lon, timestamp = match.groups()
        records.append(
            RawRecord(device_id=device_id, lat=lat, lon=lon, timestamp=timestamp)
        )
    return records


def parse_csv(content: str) -> List[RawRecord]:
    """Parse CSV text; raises :class:`InputFormatError` on an unusable header."""

    try:
        frame = pd.read_csv(
            io.StringIO(content),
            dtype=str,
            keep_default_na=False,
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError as exc:
        raise InputFormatError(
            "CSV must have columns: " + ", ".join(REQUIRED_COLUMNS)
        ) from exc

    frame.columns = [str(col).strip() for col in frame.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        raise InputFormatError(
            "CSV must have columns: "
            + ", ".join(REQUIRED_COLUMNS)
            + f" (missing: {', '.join(missing)})"
        )

    records: List[RawRecord] = []
    for row in frame[list(REQUIRED_COLUMNS)].itertuples(index=False, name=None):
        device_id, lat, lon, timestamp = (_cell(value) for value in row)
        records.append(
            RawRecord(device_id=device_id, lat=lat, lon=lon, timestamp=timestamp)
        )
    return records


def read_gps_records(path: PathLike) -> List[NumberedRecord]:
    """Read raw GPS fixes from ``path`` and number them from line 2.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InputFormatError: If a CSV header lacks any required column.
    """

    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File '{file_path}' not found")
    content = file_path.read_text(encoding="utf-8")

    if is_concatenated_format(content):
        LOGGER.info("No separators found in %s; using concatenated row format", path)
        records = parse_concatenated(content)
    else:
        records = parse_csv(content)

    return list(enumerate(records, start=FIRST_LINE_REF))


__all__ = [
    "REQUIRED_COLUMNS",
    "is_concatenated_format",
    "parse_concatenated",
    "parse_csv",
    "read_gps_records",
]
