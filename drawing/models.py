"""
Purpose: Domain models for user-placed points.
What it does:
- Waypoint: a (lat, lon) routing input with its placement index.
- PointFeature: the drawing widget's stored point, GeoJSON flavoured.

Rule: no drawing logic, no routing calls. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple
import uuid

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Waypoint:
    """
    A single user-placed coordinate. index is the placement order,
    which is also the visiting order sent to the routing service.
    """
    lat: float
    lon: float
    index: int = 0

    @property
    def coordinates(self) -> LatLon:
        return (self.lat, self.lon)


@dataclass
class PointFeature:
    id: str
    #GeoJSON order (lon, lat)
    coordinates: Tuple[float, float]

    @staticmethod
    def new(lat: float, lon: float) -> PointFeature:
        return PointFeature(id=uuid.uuid4().hex, coordinates=(lon, lat))

    def to_feature(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": "Feature",
            "properties": {},
            "geometry": {"type": "Point", "coordinates": list(self.coordinates)},
        }
