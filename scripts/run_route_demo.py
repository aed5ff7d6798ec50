import asyncio
import logging
import os

from orchestrator.bootstrap import build_route_app
from routing.mapbox_client import RemoteServiceError

# Sample waypoints around Philadelphia, (lat, lon)
SAMPLE_POINTS = [
    (39.952583, -75.165222),  # City Hall
    (39.949610, -75.150282),  # Independence Hall
    (39.965570, -75.180966),  # Art Museum
    (39.900000, -75.200000),
]


async def run_demo(output_path: str) -> None:
    app = build_route_app()

    for lat, lon in SAMPLE_POINTS:
        app.draw.add_point(lat, lon)  # fires draw.create, orchestrator reacts
        await app.orchestrator.wait_for_pending()

        layer = app.orchestrator.route_layer
        print(
            f"{len(app.draw)} waypoint(s) | state={app.orchestrator.state.value} "
            f"| route points={len(layer.coordinates) if layer else 0}"
        )

    for notice in app.controls.notices:
        print(f"[{notice.level.upper()}] {notice.message}")

    app.map.save(output_path)
    print(f"Map written to '{output_path}'.")

    app.controls.click("reset")
    print(f"After reset: {len(app.draw)} waypoint(s), layers={app.map.layers}, state={app.orchestrator.state.value}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    try:
        asyncio.run(run_demo(os.path.join(base_dir, "map.html")))
    except (ValueError, RemoteServiceError) as e:
        raise SystemExit(f"Demo failed: {e}")
