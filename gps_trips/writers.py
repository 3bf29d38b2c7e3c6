"""Output persistence: GeoJSON collection and reject log."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Sequence, Union

from .config import GEOJSON_INDENT
from .models import RejectEntry

PathLike = Union[str, Path]


def write_geojson(
    path: PathLike, collection: Dict[str, Any], *, indent: int = GEOJSON_INDENT
) -> Path:
    """Write ``collection`` as pretty-printed JSON and return the output path."""

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(collection, indent=indent), encoding="utf-8")
    return output_path


def read_geojson(path: PathLike) -> Dict[str, Any]:
    """Load a collection written by :func:`write_geojson`."""

    return json.loads(Path(path).read_text(encoding="utf-8"))


def write_rejects_log(path: PathLike, rejects: Sequence[RejectEntry]) -> bool:
    """Write one line per reject; returns False (and writes nothing) when empty."""

    if not rejects:
        return False
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    lines = "\n".join(entry.describe() for entry in rejects)
    output_path.write_text(lines + "\n", encoding="utf-8")
    return True


__all__ = ["read_geojson", "write_geojson", "write_rejects_log"]
