"""
Purpose: The map rendering surface.
What it does:
- Keeps the line layers currently drawn on the map, keyed by layer id.
- Hosts controls (the point-drawing widget) and relays their events.
- Exports the current picture to a folium map / HTML file.

Layer coordinates are kept in render order (lat, lon), the order folium
and Leaflet draw with. GeoJSON output flips them back to (lon, lat).

Rule: no routing calls here. The surface only draws what it is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import folium

from .events import EventEmitter

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


class MapSurfaceError(Exception):
    """Raised on invalid layer operations (duplicate id, missing layer)."""
    pass


@dataclass(frozen=True)
class MapConfig:
    # starting position, Philadelphia
    center: LatLon = (39.952583, -75.165222)
    zoom: int = 10
    tiles: str = "CartoDB dark_matter"


@dataclass(frozen=True)
class LinePaint:
    line_color: str = "#ff6347"
    line_width: int = 8
    line_join: str = "round"
    line_cap: str = "round"


@dataclass(frozen=True)
class LineLayer:
    """
    A single named line drawn on the map.
    coordinates are (lat, lon) pairs in drawing order.
    """
    id: str
    coordinates: Tuple[LatLon, ...]
    paint: LinePaint = field(default_factory=LinePaint)

    def to_feature(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {"id": self.id},
            "geometry": {
                "type": "LineString",
                "coordinates": [[lon, lat] for lat, lon in self.coordinates],
            },
        }


class MapSurface(EventEmitter):
    """
    In-memory map. Layers are unique by id: adding an id that is already
    present is an error, so callers must remove before re-adding.
    """
    def __init__(self, config: MapConfig | None = None):
        super().__init__()
        self.config = config or MapConfig()
        self._layers: Dict[str, LineLayer] = {}
        self._controls: List[Tuple[Any, str]] = []

    #----------------
    # layers
    #----------------
    def add_layer(self, layer: LineLayer) -> None:
        if layer.id in self._layers:
            raise MapSurfaceError(f"Layer '{layer.id}' already exists on the map.")
        self._layers[layer.id] = layer
        logger.debug(f"added layer {layer.id} ({len(layer.coordinates)} points)")

    def remove_layer(self, layer_id: str) -> None:
        if layer_id not in self._layers:
            raise MapSurfaceError(f"Layer '{layer_id}' does not exist on the map.")
        del self._layers[layer_id]
        logger.debug(f"removed layer {layer_id}")

    def get_layer(self, layer_id: str) -> LineLayer | None:
        return self._layers.get(layer_id)

    def has_layer(self, layer_id: str) -> bool:
        return layer_id in self._layers

    @property
    def layers(self) -> List[str]:
        return list(self._layers)

    #----------------
    # controls
    #----------------
    def add_control(self, control: Any, position: str = "top-left") -> None:
        self._controls.append((control, position))
        on_add = getattr(control, "on_add", None)
        if on_add is not None:
            on_add(self)

    #----------------
    # export
    #----------------
    def to_folium(self) -> folium.Map:
        folium_map = folium.Map(
            location=list(self.config.center),
            zoom_start=self.config.zoom,
            tiles=self.config.tiles,
        )
        for layer in self._layers.values():
            folium.PolyLine(
                [list(point) for point in layer.coordinates],
                color=layer.paint.line_color,
                weight=layer.paint.line_width,
                line_join=layer.paint.line_join,
                line_cap=layer.paint.line_cap,
                tooltip=layer.id,
            ).add_to(folium_map)

        for control, _position in self._controls:
            render = getattr(control, "render", None)
            if render is not None:
                render(folium_map)
        return folium_map

    def save(self, path: str) -> None:
        self.to_folium().save(path)
        logger.info(f"map written to {path}")
