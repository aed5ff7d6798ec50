#Marks routing as a package.
#Re-exports the public API (MapboxOptimizationClient, RouteGeometry, coordinate helpers)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .mapbox_client import MapboxOptimizationClient, RemoteServiceError
from .geometry import RouteGeometry, GeometryFormatError, decode_geometry
from .coordinates import to_service_order, to_render_order, format_coordinates
from .async_adapter import ThreadedRouteProvider, route_provider_from_client

__all__ = [
    "MapboxOptimizationClient",
    "RemoteServiceError",
    "RouteGeometry",
    "GeometryFormatError",
    "decode_geometry",
    "to_service_order",
    "to_render_order",
    "format_coordinates",
    "ThreadedRouteProvider",
    "route_provider_from_client",
]
