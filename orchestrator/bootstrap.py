"""
Purpose: Startup wiring.
What it does:
Builds the map, attaches the drawing widget, creates the controls and the
routing client, and subscribes a RouteOrchestrator to all of them.
One call per page; tests can pass a fake router for an isolated instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from drawing.widget import DrawWidget
from mapview.controls import ControlPanel
from mapview.surface import MapConfig, MapSurface
from routing.async_adapter import route_provider_from_client
from routing.mapbox_client import MapboxOptimizationClient

from .config import OrchestratorConfig
from .route_orchestrator import RouteOrchestrator, RouteProvider


@dataclass
class RouteApp:
    map: MapSurface
    draw: DrawWidget
    controls: ControlPanel
    orchestrator: RouteOrchestrator


def build_route_app(
    router: Optional[RouteProvider] = None,
    *,
    access_token: Optional[str] = None,
    map_config: Optional[MapConfig] = None,
    config: Optional[OrchestratorConfig] = None,
) -> RouteApp:
    if router is None:
        router = route_provider_from_client(MapboxOptimizationClient(access_token=access_token))

    map_surface = MapSurface(map_config)
    draw = DrawWidget()
    map_surface.add_control(draw, "top-left")
    controls = ControlPanel()

    orchestrator = RouteOrchestrator(map_surface, draw, router, controls, config)
    return RouteApp(map=map_surface, draw=draw, controls=controls, orchestrator=orchestrator)
