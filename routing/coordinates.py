#Purpose: coordinate axis conversion between the two boundaries.
#Internal / render order: (lat, lon)  - folium, Leaflet, Waypoint
#Service order:           (lon, lat)  - Mapbox URLs, GeoJSON
#Both directions are the same pairwise swap, so converting there and back is the identity.

from typing import Iterable, List, Sequence, Tuple

LatLon = Tuple[float, float]
LonLat = Tuple[float, float]


def swap_axes(pair: Sequence[float]) -> Tuple[float, float]:
    first, second = pair
    return (second, first)


def to_service_order(point: LatLon) -> LonLat:
    return swap_axes(point)


def to_render_order(point: LonLat) -> LatLon:
    return swap_axes(point)


def to_service_path(points: Iterable[LatLon]) -> List[LonLat]:
    return [to_service_order(point) for point in points]


def to_render_path(points: Iterable[LonLat]) -> List[LatLon]:
    return [to_render_order(point) for point in points]


def format_coordinates(points: Iterable[LatLon]) -> str:
    """Convert list of (lat, lon) to the URL form 'lon,lat;lon,lat;...'"""
    return ";".join(f"{lon},{lat}" for lon, lat in to_service_path(points))
