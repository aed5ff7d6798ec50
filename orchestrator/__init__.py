#Expose the orchestration pieces:
#Route orchestrator (the "one object" entry point)
#Display state transitions
#Configuration

from .route_orchestrator import RouteOrchestrator, InsufficientWaypoints, StaleResponse
from .display_state import DisplayState, DisplayStateException
from .config import OrchestratorConfig, default_orchestrator_config

__all__ = [
    "RouteOrchestrator",
    "InsufficientWaypoints",
    "StaleResponse",
    "DisplayState",
    "DisplayStateException",
    "OrchestratorConfig",
    "default_orchestrator_config",
]
