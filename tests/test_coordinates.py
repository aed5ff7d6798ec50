import random

from routing.coordinates import (
    format_coordinates,
    swap_axes,
    to_render_order,
    to_render_path,
    to_service_order,
    to_service_path,
)


def test_service_order_is_lon_lat(point_a):
    assert to_service_order(point_a) == (-75.16, 39.95)


def test_conversion_round_trips_exactly():
    rng = random.Random(7)
    for _ in range(200):
        point = (rng.uniform(-90, 90), rng.uniform(-180, 180))
        assert to_render_order(to_service_order(point)) == point
        assert to_service_order(to_render_order(point)) == point


def test_swap_accepts_lists():
    assert swap_axes([1.5, 2.5]) == (2.5, 1.5)


def test_paths_keep_their_order():
    path = [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)]
    assert to_service_path(path) == [(2.0, 1.0), (4.0, 3.0), (6.0, 5.0)]
    assert to_render_path(to_service_path(path)) == path


def test_format_coordinates(point_a, point_b):
    assert format_coordinates([point_a, point_b]) == "-75.16,39.95;-75.2,39.9"
