"""
Purpose: Central configuration for the route orchestrator.
What it does:

Stores the tunables for when and how a route is requested and drawn:

ROUTE_LAYER_ID = "route"
MIN_WAYPOINTS = 2

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from mapview.surface import LinePaint


@dataclass(frozen=True)
class OrchestratorConfig:
    """
    Central configuration for route requests and route display.
    """

    # --- Route layer ---
    # Single layer id; re-rendering replaces this layer instead of stacking a new one.
    route_layer_id: str = "route"
    route_paint: LinePaint = field(default_factory=LinePaint)

    # --- Request trigger ---
    # A route is requested whenever a point is added and at least this many exist.
    min_waypoints: int = 2

    # --- In-flight requests ---
    # Cancel the previous in-flight request when a newer waypoint set is sent.
    # Stale responses are discarded by sequence number either way.
    cancel_stale_requests: bool = True

    # --- Controls ---
    # Off by default: ROUTED -> ROUTED re-renders happen when a 3rd..nth point is
    # added, which needs the "add point" control while a route is shown.
    # True gives the stricter "add point only while idle" layout.
    hide_add_point_when_routed: bool = False

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not self.route_layer_id:
            raise ValueError("route_layer_id must be a non-empty string")

        if self.min_waypoints < 2:
            raise ValueError("min_waypoints must be >= 2; a route needs an origin and a destination")

        if self.route_paint.line_width <= 0:
            raise ValueError("route_paint.line_width must be > 0")


def default_orchestrator_config() -> OrchestratorConfig:
    """
    Convenience factory for the default config.
    """
    c = OrchestratorConfig()
    c.validate()
    return c
