"""
Purpose: The point-drawing widget (a map control).
What it does:
- Owns the store of user-placed points, in placement order.
- Fires "draw.create" when a point is finalised and "draw.delete" when
  points are removed through the UI. Events go through the map the widget
  is attached to, so listeners subscribe on the map.
- delete_all() is the programmatic clear used by reset; it fires nothing.
- Renders its points onto a folium map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import folium

from .models import PointFeature, Waypoint

logger = logging.getLogger(__name__)

DRAW_CREATE = "draw.create"
DRAW_DELETE = "draw.delete"


@dataclass(frozen=True)
class DrawStyles:
    radius: int = 5
    color: str = "#FF5F52"


class DrawWidget:
    def __init__(self, styles: DrawStyles | None = None):
        self.styles = styles or DrawStyles()
        self._map = None
        self._features: Dict[str, PointFeature] = {}  #dict keeps insertion (placement) order

    def on_add(self, map_surface) -> None:
        self._map = map_surface

    def _fire(self, event: str, features: List[PointFeature]) -> None:
        if self._map is None:
            logger.warning(f"{event} dropped: draw widget is not attached to a map")
            return
        self._map.fire(event, {"features": [feature.to_feature() for feature in features]})

    #----------------
    # user interactions
    #----------------
    def add_point(self, lat: float, lon: float) -> PointFeature:
        """
        Store a point and fire draw.create. Listeners that start a route
        request (the orchestrator, from the 2nd point on) need a running
        asyncio event loop and raise RuntimeError without one.
        """
        feature = PointFeature.new(lat, lon)
        self._features[feature.id] = feature
        logger.debug(f"point {feature.id} placed at ({lat}, {lon})")
        self._fire(DRAW_CREATE, [feature])
        return feature

    def delete(self, feature_ids: Iterable[str]) -> List[PointFeature]:
        removed = [self._features.pop(fid) for fid in list(feature_ids) if fid in self._features]
        if removed:
            self._fire(DRAW_DELETE, removed)
        return removed

    #----------------
    # programmatic API
    #----------------
    def get_all(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [feature.to_feature() for feature in self._features.values()],
        }

    def waypoints(self) -> List[Waypoint]:
        return [
            Waypoint(lat=feature.coordinates[1], lon=feature.coordinates[0], index=index)
            for index, feature in enumerate(self._features.values())
        ]

    def delete_all(self) -> None:
        self._features.clear()

    def __len__(self) -> int:
        return len(self._features)

    def render(self, folium_map: folium.Map) -> None:
        for index, feature in enumerate(self._features.values()):
            lon, lat = feature.coordinates
            folium.CircleMarker(
                location=[lat, lon],
                radius=self.styles.radius,
                color=self.styles.color,
                fill=True,
                fill_color=self.styles.color,
                fill_opacity=1.0,
                tooltip=f"Waypoint {index + 1}",
            ).add_to(folium_map)
