import pytest
import requests

from routing import mapbox_client
from routing.mapbox_client import MapboxOptimizationClient, RemoteServiceError
from conftest import FakeResponse, optimized_trip_payload


@pytest.fixture
def client():
    return MapboxOptimizationClient(access_token="pk.test", base_url="https://mapbox.test/", timeout=3)


@pytest.fixture
def captured(monkeypatch):
    """Replaces requests.get; tests set captured['response'] (or 'error') before calling."""
    state = {"calls": []}

    def fake_get(url, params=None, timeout=None):
        state["calls"].append({"url": url, "params": params, "timeout": timeout})
        if "error" in state:
            raise state["error"]
        return state["response"]

    monkeypatch.setattr(mapbox_client.requests, "get", fake_get)
    return state


def test_missing_token_is_rejected(monkeypatch):
    monkeypatch.delenv("MAPBOX_ACCESS_TOKEN", raising=False)
    with pytest.raises(ValueError):
        MapboxOptimizationClient()


def test_token_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "pk.from-env")
    monkeypatch.delenv("MAPBOX_BASE_URL", raising=False)
    client = MapboxOptimizationClient()
    assert client.access_token == "pk.from-env"
    assert client.base_url == "https://api.mapbox.com"


def test_unknown_geometry_format_is_rejected():
    with pytest.raises(ValueError):
        MapboxOptimizationClient(access_token="pk.test", geometries="wkt")


def test_request_fixes_origin_and_destination(client, captured, point_a, point_b):
    captured["response"] = FakeResponse(payload=optimized_trip_payload([(-75.16, 39.95), (-75.20, 39.90)]))

    client.optimized_trip([point_a, point_b])

    call = captured["calls"][0]
    assert call["url"] == "https://mapbox.test/optimized-trips/v1/mapbox/driving/-75.16,39.95;-75.2,39.9"
    assert call["params"]["source"] == "first"
    assert call["params"]["destination"] == "last"
    assert call["params"]["roundtrip"] == "false"
    assert call["params"]["geometries"] == "geojson"
    assert call["params"]["access_token"] == "pk.test"
    assert call["timeout"] == 3


def test_route_endpoints_come_back_in_render_order(client, captured, point_a, point_b):
    captured["response"] = FakeResponse(
        payload=optimized_trip_payload([(-75.16, 39.95), (-75.18, 39.93), (-75.20, 39.90)])
    )

    route = client.optimized_trip([point_a, point_b])

    assert route.start == point_a
    assert route.end == point_b
    assert route.distance_m == 6120.4


def test_too_few_coordinates(client, captured, point_a):
    with pytest.raises(ValueError):
        client.optimized_trip([point_a])
    assert captured["calls"] == []


def test_too_many_coordinates_is_a_service_error(client, captured):
    points = [(39.9 + i * 0.001, -75.1) for i in range(MapboxOptimizationClient.MAX_COORDINATES + 1)]
    with pytest.raises(RemoteServiceError):
        client.optimized_trip(points)
    assert captured["calls"] == []


def test_http_500_is_a_service_error(client, captured, point_a, point_b):
    captured["response"] = FakeResponse(status_code=500, payload=None, reason="Internal Server Error")

    with pytest.raises(RemoteServiceError) as excinfo:
        client.optimized_trip([point_a, point_b])

    assert excinfo.value.status_code == 500


def test_http_error_message_is_kept(client, captured, point_a, point_b):
    captured["response"] = FakeResponse(status_code=401, payload={"message": "Not Authorized - Invalid Token"})

    with pytest.raises(RemoteServiceError, match="Invalid Token"):
        client.optimized_trip([point_a, point_b])


def test_network_failure_is_a_service_error(client, captured, point_a, point_b):
    captured["error"] = requests.ConnectionError("connection refused")

    with pytest.raises(RemoteServiceError):
        client.optimized_trip([point_a, point_b])


@pytest.mark.parametrize(
    "payload",
    [
        {"code": "NoTrips", "message": "No trips found"},
        {"code": "Ok", "trips": []},
        {"code": "Ok", "trips": [{"geometry": "not-a-linestring"}]},
        ["not", "an", "object"],
        {"code": "Ok", "trips": [None]},
        {"code": "Ok", "trips": "abc"},
        {"code": "Ok", "trips": {"0": {"geometry": {"type": "LineString", "coordinates": [[0, 1], [2, 3]]}}}},
        {
            "code": "Ok",
            "trips": [{"geometry": {"type": "LineString", "coordinates": [[0, 1], [2, 3]]}}],
            "waypoints": [None, None],
        },
        {
            "code": "Ok",
            "trips": [{"geometry": {"type": "LineString", "coordinates": [[0, 1], [2, 3]]}}],
            "waypoints": "abc",
        },
    ],
)
def test_unusable_bodies_are_service_errors(client, captured, point_a, point_b, payload):
    captured["response"] = FakeResponse(payload=payload)

    with pytest.raises(RemoteServiceError):
        client.optimized_trip([point_a, point_b])
