"""
Purpose: Orchestrator (the "glue") between the drawing widget, the routing
service and the map.
What it does:
- Listens for "draw.create" and reads the full current waypoint set each time.
- Requests an optimized trip once 2 or more waypoints exist, without blocking
  the event loop, and redraws the single route layer with the response.
- Applies only the response of the latest request (sequence numbers).
- Resets waypoints, route layer and controls back to the initial page state.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from drawing.models import Waypoint
from drawing.widget import DRAW_CREATE, DRAW_DELETE, DrawWidget
from mapview.controls import ADD_POINT, RESET, ControlPanel
from mapview.surface import LineLayer, MapSurface
from routing.geometry import RouteGeometry
from routing.mapbox_client import RemoteServiceError

from .config import OrchestratorConfig, default_orchestrator_config
from .display_state import DisplayState, transition_to_idle, transition_to_routed

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]
RouteProvider = Callable[[Sequence[LatLon]], Awaitable[RouteGeometry]]


class InsufficientWaypoints(Exception):
    """Fewer waypoints than a route needs. Guarded, never shown to the user."""
    pass


class StaleResponse(Exception):
    """A response for a waypoint set that a later request has superseded."""
    pass


class RouteOrchestrator:
    """
    Owns the displayed route and the display state. Waypoints live in the
    drawing widget and are read from it on demand.

    Construct one per map; tests build fresh instances with fake collaborators.
    """
    def __init__(
        self,
        map_surface: MapSurface,
        draw: DrawWidget,
        router: RouteProvider,
        controls: ControlPanel,
        config: Optional[OrchestratorConfig] = None,
    ):
        self.map = map_surface
        self.draw = draw
        self.router = router
        self.controls = controls
        self.config = config or default_orchestrator_config()
        self.config.validate()

        self.state = DisplayState.IDLE
        self._request_seq = 0
        self._pending: Optional[asyncio.Task] = None

        map_surface.on(DRAW_CREATE, self.on_point_added)
        map_surface.on(DRAW_DELETE, self.on_points_deleted)
        controls.on_click(RESET, self.reset)

    #----------------
    # state
    #----------------
    def waypoints(self) -> List[Waypoint]:
        return self.draw.waypoints()

    @property
    def route_layer(self) -> Optional[LineLayer]:
        return self.map.get_layer(self.config.route_layer_id)

    @property
    def pending(self) -> Optional[asyncio.Task]:
        if self._pending is not None and self._pending.done():
            return None
        return self._pending

    #----------------
    # events
    #----------------
    def on_point_added(self, event: Optional[Dict[str, Any]] = None) -> Optional[asyncio.Task]:
        """
        Must be called from inside a running event loop when it may schedule
        a request (2 or more waypoints).
        """
        waypoints = self.waypoints()
        if waypoints:
            self.controls.show(RESET)

        if len(waypoints) < self.config.min_waypoints:
            logger.debug(f"{len(waypoints)} waypoint(s), no route requested")
            return None
        return self._schedule(waypoints)

    def on_points_deleted(self, event: Optional[Dict[str, Any]] = None) -> None:
        # TODO: decide whether deleting a point re-routes the remaining set or requires a reset
        features = (event or {}).get("features", [])
        logger.info(f"{len(features)} point(s) deleted; route left as is")

    #----------------
    # routing
    #----------------
    def _schedule(self, waypoints: List[Waypoint]) -> asyncio.Task:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise RuntimeError(
                "Route requests need a running asyncio event loop; add points from inside one."
            ) from e

        self._request_seq += 1
        seq = self._request_seq

        previous = self.pending
        if previous is not None and self.config.cancel_stale_requests:
            logger.debug(f"cancelling superseded route request before #{seq}")
            previous.cancel()

        task = loop.create_task(self._route_and_render(seq, waypoints))
        self._pending = task
        return task

    async def request_route(self, waypoints: Sequence[Waypoint]) -> RouteGeometry:
        """
        Ask the routing service for an optimized trip over all waypoints,
        in placement order: first fixed as origin, last as destination.
        """
        if len(waypoints) < self.config.min_waypoints:
            raise InsufficientWaypoints(
                f"Need at least {self.config.min_waypoints} waypoints, got {len(waypoints)}"
            )
        ordered = sorted(waypoints, key=lambda waypoint: waypoint.index)
        return await self.router([waypoint.coordinates for waypoint in ordered])

    def _ensure_current(self, seq: int) -> None:
        if seq != self._request_seq:
            raise StaleResponse(f"request #{seq} superseded by #{self._request_seq}")

    async def _route_and_render(self, seq: int, waypoints: List[Waypoint]) -> Optional[RouteGeometry]:
        try:
            geometry = await self.request_route(waypoints)
            self._ensure_current(seq)
        except StaleResponse as e:
            logger.debug(f"discarding stale response: {e}")
            return None
        except RemoteServiceError as e:
            if seq != self._request_seq:
                logger.debug(f"ignoring failure of superseded request #{seq}: {e}")
                return None
            logger.warning(f"route request #{seq} failed: {e}")
            self.controls.notify("error", f"Could not compute a route: {e}")
            return None
        except Exception as e:
            if seq != self._request_seq:
                logger.debug(f"ignoring failure of superseded request #{seq}: {e!r}")
                return None
            logger.exception(f"route request #{seq} failed unexpectedly")
            self.controls.notify("error", f"Could not compute a route: {e}")
            return None

        self.render_route(geometry)
        logger.info(f"route #{seq} drawn through {len(waypoints)} waypoints")
        return geometry

    async def wait_for_pending(self) -> Optional[RouteGeometry]:
        """Wait until no route request is in flight; returns the last task's result."""
        result = None
        while self.pending is not None:
            task = self._pending
            await asyncio.wait({task})
            result = None if task.cancelled() else task.result()
        return result

    #----------------
    # display
    #----------------
    def render_route(self, geometry: RouteGeometry) -> LineLayer:
        """Replace the displayed route layer. Never leaves two route layers."""
        layer = LineLayer(
            id=self.config.route_layer_id,
            coordinates=tuple(geometry.coordinates),
            paint=self.config.route_paint,
        )
        if self.map.has_layer(layer.id):
            self.map.remove_layer(layer.id)
        self.map.add_layer(layer)

        self.state = transition_to_routed(self.state)
        self.controls.show(RESET)
        if self.config.hide_add_point_when_routed:
            self.controls.hide(ADD_POINT)
        return layer

    def reset(self) -> None:
        """Back to the initial page state: no waypoints, no route, idle controls."""
        #invalidate whatever is still in flight
        self._request_seq += 1
        pending = self.pending
        if pending is not None:
            pending.cancel()
        self._pending = None

        self.draw.delete_all()
        if self.map.has_layer(self.config.route_layer_id):
            self.map.remove_layer(self.config.route_layer_id)

        self.state = transition_to_idle(self.state)
        self.controls.show(ADD_POINT)
        self.controls.hide(RESET)
        self.controls.clear_notices()
        logger.info("map reset")
