from __future__ import annotations

import asyncio
from typing import List, Sequence, Tuple

from .geometry import RouteGeometry

LatLon = Tuple[float, float]


class ThreadedRouteProvider:
    """
    Adapts the blocking MapboxOptimizationClient into an awaitable route
    provider. Each call runs the HTTP request in a worker thread so the
    event loop keeps handling map events while the request is in flight.
    """
    def __init__(self, client):
        self.client = client

    async def __call__(self, coordinates: Sequence[LatLon]) -> RouteGeometry:
        points: List[LatLon] = list(coordinates)
        return await asyncio.to_thread(self.client.optimized_trip, points)


def route_provider_from_client(client) -> ThreadedRouteProvider:
    return ThreadedRouteProvider(client)
