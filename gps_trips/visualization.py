"""Interactive map preview of a trip FeatureCollection."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import folium  # Using folium to build an interactive Leaflet map.

from .config import MAP_ZOOM_START

LatLon = Tuple[float, float]
PathLike = Union[str, Path]


def _feature_latlon(feature: Dict[str, Any]) -> List[LatLon]:
    """GeoJSON stores ``[lon, lat]``; folium expects ``(lat, lon)``."""

    coordinates = feature.get("geometry", {}).get("coordinates", [])
    return [(float(lat), float(lon)) for lon, lat in coordinates]


def _popup_html(properties: Dict[str, Any]) -> str:
    return (
        f"<strong>{properties.get('trip_name', '?')}</strong><br>"
        f"Points: {properties.get('point_count', 0)}<br>"
        f"Distance: {properties.get('total_distance_km', 0):.2f} km<br>"
        f"Duration: {properties.get('duration_min', 0):.2f} min<br>"
        f"Avg speed: {properties.get('avg_speed_kmh', 0):.2f} km/h<br>"
        f"Max speed: {properties.get('max_speed_kmh', 0):.2f} km/h"
    )


def create_trip_map(
    collection: Dict[str, Any],
    *,
    zoom_start: int = MAP_ZOOM_START,
    output_html_path: Optional[PathLike] = None,
) -> folium.Map:
    """Draw every trip feature as a polyline in its own stroke colour.

    Args:
        collection: FeatureCollection built by :func:`build_feature_collection`.
        zoom_start: Initial Leaflet zoom level.
        output_html_path: Optional path to persist the map as an HTML file.

    Returns:
        A :class:`folium.Map` centred on the mean of all trip coordinates.

    Raises:
        ValueError: If the collection holds no coordinates to draw.
    """

    tracks = [
        (feature, _feature_latlon(feature))
        for feature in collection.get("features", [])
    ]
    all_points = [point for _, points in tracks for point in points]
    if not all_points:
        raise ValueError("FeatureCollection has no trip coordinates to draw")

    center = (
        sum(lat for lat, _ in all_points) / len(all_points),
        sum(lon for _, lon in all_points) / len(all_points),
    )
    folium_map = folium.Map(location=center, zoom_start=zoom_start, control_scale=True)
    for feature, points in tracks:
        properties = feature.get("properties", {})
        folium.PolyLine(
            points,
            color=properties.get("stroke", "#3388ff"),
            weight=properties.get("stroke-width", 3),
            opacity=0.8,
            tooltip=properties.get("trip_name"),
            popup=folium.Popup(html=_popup_html(properties), max_width=300),
        ).add_to(folium_map)

    if output_html_path is not None:
        output_path = Path(output_html_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        folium_map.save(str(output_path))

    return folium_map


__all__ = ["create_trip_map"]
