"""
Purpose: Route geometry returned by the routing service.
What it does:
- Parses one trip of an optimization response into a RouteGeometry.
- Handles the three shape formats the service can return:
    geojson    -> {"type": "LineString", "coordinates": [[lon, lat], ...]}
    polyline   -> encoded string, precision 5
    polyline6  -> encoded string, precision 6
- Converts to a GeoJSON Feature for export.

Coordinates are stored in render order (lat, lon).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import polyline

from .coordinates import to_render_path, to_service_path

LatLon = Tuple[float, float]

GEOMETRY_FORMATS = ("geojson", "polyline", "polyline6")
_POLYLINE_PRECISION = {"polyline": 5, "polyline6": 6}


class GeometryFormatError(ValueError):
    """Raised when a trip geometry cannot be decoded."""
    pass


@dataclass(frozen=True)
class RouteGeometry:
    """
    An ordered path for the current waypoint set.
    waypoint_order[i] is the input index of the i-th visited waypoint.
    """
    coordinates: Tuple[LatLon, ...]
    distance_m: Optional[float] = None
    duration_s: Optional[float] = None
    waypoint_order: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def start(self) -> LatLon:
        return self.coordinates[0]

    @property
    def end(self) -> LatLon:
        return self.coordinates[-1]

    def to_feature(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {
                "distance": self.distance_m,
                "duration": self.duration_s,
            },
            "geometry": {
                "type": "LineString",
                "coordinates": [list(point) for point in to_service_path(self.coordinates)],
            },
        }

    @staticmethod
    def from_trip(
        trip: Mapping[str, Any],
        waypoints: Sequence[Mapping[str, Any]] = (),
        geometries: str = "geojson",
    ) -> RouteGeometry:
        if not isinstance(trip, Mapping):
            raise GeometryFormatError(f"Expected a trip object, got {type(trip).__name__}.")
        coordinates = decode_geometry(trip.get("geometry"), geometries)
        if len(coordinates) < 2:
            raise GeometryFormatError("Trip geometry has fewer than two points.")

        #waypoints come back in input order, each tagged with its visiting position
        order: List[int] = []
        if waypoints:
            positions = []
            for i, waypoint in enumerate(waypoints):
                if not isinstance(waypoint, Mapping):
                    raise GeometryFormatError(f"Expected a waypoint object, got {type(waypoint).__name__}.")
                position = waypoint.get("waypoint_index", i)
                if not isinstance(position, int):
                    raise GeometryFormatError(f"Waypoint {i} has a non-integer waypoint_index.")
                positions.append(position)
            order = sorted(range(len(positions)), key=lambda i: positions[i])

        return RouteGeometry(
            coordinates=tuple(coordinates),
            distance_m=trip.get("distance"),
            duration_s=trip.get("duration"),
            waypoint_order=tuple(order),
        )


def decode_geometry(geometry: Any, geometries: str = "geojson") -> List[LatLon]:
    """Decode a trip geometry into (lat, lon) pairs."""
    if geometries not in GEOMETRY_FORMATS:
        raise GeometryFormatError(f"Unsupported geometry format: {geometries}")

    if geometries == "geojson":
        if not isinstance(geometry, Mapping) or geometry.get("type") != "LineString":
            raise GeometryFormatError("Expected a GeoJSON LineString geometry.")
        try:
            return [(float(lat), float(lon)) for lat, lon in to_render_path(geometry["coordinates"])]
        except (KeyError, TypeError, ValueError) as e:
            raise GeometryFormatError(f"Malformed LineString coordinates: {e}") from e

    if not isinstance(geometry, str) or not geometry:
        raise GeometryFormatError(f"Expected an encoded {geometries} string.")
    try:
        #polyline.decode already yields (lat, lon)
        return [tuple(point) for point in polyline.decode(geometry, _POLYLINE_PRECISION[geometries])]
    except (IndexError, TypeError, ValueError) as e:
        raise GeometryFormatError(f"Could not decode {geometries} shape: {e}") from e
