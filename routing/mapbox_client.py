#Purpose: The Mapbox Optimization "adapter/client".
#Sole responsibility: talk to the optimized-trips API via HTTP and return a RouteGeometry.
#Encapsulates Mapbox-specific details:
#coordinate formatting (lon,lat)
#URL construction (/optimized-trips/v1/mapbox/{profile}/...)
#timeouts and error handling
#parsing response JSON into RouteGeometry
#It should not contain UI or map logic.


from dotenv import load_dotenv
import logging
import os
from typing import Any, Dict, List, Optional, Tuple
import requests

from .coordinates import format_coordinates
from .geometry import GEOMETRY_FORMATS, GeometryFormatError, RouteGeometry

# Read the access token from environment
# Example in .env:
# MAPBOX_ACCESS_TOKEN=pk.xxxx
# MAPBOX_BASE_URL=https://api.mapbox.com
load_dotenv()
DEFAULT_BASE_URL = "https://api.mapbox.com"

logger = logging.getLogger(__name__)

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class RemoteServiceError(Exception):
    """Network failure, non-success HTTP status, or an unusable response body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MapboxOptimizationClient:
    """
    Optimization API Adapter / Client

    Sole responsibility:
    - Talk to Mapbox via HTTP
    - Convert internal (lat, lon) -> Mapbox (lon,lat)
    - Return the first (optimized) trip as a RouteGeometry

    The first waypoint is fixed as origin and the last as destination;
    the service may reorder the ones in between.
    """
    # the optimization API accepts at most 12 input coordinates
    MAX_COORDINATES = 12

    def __init__(
        self,
        access_token: Optional[str] = None,
        profile: str = "driving",
        geometries: str = "geojson",
        timeout: int = 10,
        base_url: Optional[str] = None,
    ):
        self.access_token = access_token or os.getenv("MAPBOX_ACCESS_TOKEN")
        self.base_url = (base_url or os.getenv("MAPBOX_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.profile = profile  #driving, driving-traffic, walking, cycling
        self.geometries = geometries
        self.timeout = timeout  #seconds to wait for Mapbox before giving up

        if not self.access_token:
            raise ValueError("Mapbox access token not set. Please set MAPBOX_ACCESS_TOKEN in the .env file.")
        if geometries not in GEOMETRY_FORMATS:
            raise ValueError(f"geometries must be one of {GEOMETRY_FORMATS}, got {geometries!r}")

    #----------------
    # Internal helpers
    #----------------
    def build_url(self, coordinates: List[LatLon]) -> str:
        return f"{self.base_url}/optimized-trips/v1/mapbox/{self.profile}/{format_coordinates(coordinates)}"

    def build_params(self) -> Dict[str, str]:
        return {
            "source": "first",
            "destination": "last",
            "roundtrip": "false",
            "geometries": self.geometries,
            "overview": "full",
            "access_token": self.access_token,
        }

    def _get_json(self, url: str) -> Dict[str, Any]:
        try:
            response = requests.get(url, params=self.build_params(), timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteServiceError(f"Mapbox request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            message = data.get("message") if isinstance(data, dict) else None
            raise RemoteServiceError(
                f"Mapbox returned HTTP {response.status_code}: {message or response.reason}",
                status_code=response.status_code,
            )
        if not isinstance(data, dict):
            raise RemoteServiceError("Mapbox returned a body that is not a JSON object.", status_code=response.status_code)
        return data

    #----------------
    # Public methods
    #----------------
    def optimized_trip(self, coordinates: List[LatLon]) -> RouteGeometry:
        """
        calls the optimized-trips endpoint with all waypoints in placement order
        and returns the geometry of the first trip.
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")
        if len(coordinates) > self.MAX_COORDINATES:
            raise RemoteServiceError(
                f"Mapbox optimization accepts at most {self.MAX_COORDINATES} coordinates, got {len(coordinates)}."
            )

        url = self.build_url(coordinates)
        logger.info(f"requesting optimized trip for {len(coordinates)} waypoints")
        data = self._get_json(url)

        #validating Mapbox response
        if data.get("code") != "Ok":
            raise RemoteServiceError(f"Mapbox error: {data.get('message', data.get('code', 'Unknown error'))}")

        trips = data.get("trips") or []
        if not isinstance(trips, list):
            raise RemoteServiceError(f"Mapbox trips field is a {type(trips).__name__}, expected a list.")
        if not trips:
            raise RemoteServiceError("Mapbox response contained no trips.")

        waypoints = data.get("waypoints") or []
        if not isinstance(waypoints, list):
            raise RemoteServiceError(f"Mapbox waypoints field is a {type(waypoints).__name__}, expected a list.")

        try:
            return RouteGeometry.from_trip(trips[0], waypoints, self.geometries)
        except GeometryFormatError as e:
            raise RemoteServiceError(f"Mapbox trip geometry unusable: {e}") from e
