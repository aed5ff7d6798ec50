import asyncio

import pytest

from routing.geometry import RouteGeometry


class StraightLineRouter:
    """Answers immediately with a line through the waypoints in the order given."""
    def __init__(self):
        self.calls = []

    async def __call__(self, coordinates):
        self.calls.append(list(coordinates))
        return RouteGeometry(coordinates=tuple(coordinates))


class ControlledRouter:
    """
    Each call parks on a future the test resolves by hand, so tests decide
    in which order responses arrive.
    """
    def __init__(self):
        self.calls = []
        self.futures = []

    async def __call__(self, coordinates):
        future = asyncio.get_running_loop().create_future()
        self.calls.append(list(coordinates))
        self.futures.append(future)
        return await future

    def respond(self, index, geometry):
        if not self.futures[index].done():
            self.futures[index].set_result(geometry)

    def fail(self, index, exc):
        if not self.futures[index].done():
            self.futures[index].set_exception(exc)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def optimized_trip_payload(coordinates_lonlat, waypoint_index=None):
    """Mapbox-shaped body for a single trip through the given (lon, lat) points."""
    waypoint_index = waypoint_index or list(range(len(coordinates_lonlat)))
    return {
        "code": "Ok",
        "waypoints": [
            {"waypoint_index": position, "trips_index": 0, "location": list(point)}
            for point, position in zip(coordinates_lonlat, waypoint_index)
        ],
        "trips": [
            {
                "geometry": {"type": "LineString", "coordinates": [list(p) for p in coordinates_lonlat]},
                "distance": 6120.4,
                "duration": 702.1,
                "legs": [],
            }
        ],
    }


@pytest.fixture
def point_a():
    return (39.95, -75.16)


@pytest.fixture
def point_b():
    return (39.90, -75.20)


@pytest.fixture
def straight_router():
    return StraightLineRouter()


@pytest.fixture
def controlled_router():
    return ControlledRouter()
