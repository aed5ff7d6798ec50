"""
Map rendering surface package.

Public API:
- MapSurface, LineLayer, MapConfig (named line layers + folium export)
- ControlPanel, UserNotice (UI controls and user-visible notices)
- EventEmitter (event subscription used by the map and its controls)
"""
from .events import EventEmitter
from .surface import MapSurface, MapSurfaceError, LineLayer, LinePaint, MapConfig
from .controls import ControlPanel, UserNotice, ADD_POINT, RESET

__all__ = [
    "EventEmitter",
    "MapSurface",
    "MapSurfaceError",
    "LineLayer",
    "LinePaint",
    "MapConfig",
    "ControlPanel",
    "UserNotice",
    "ADD_POINT",
    "RESET",
]
