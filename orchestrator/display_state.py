from enum import Enum


class DisplayState(str, Enum):
    """
    UI mode gating control visibility.
    IDLE: no route drawn. ROUTED: a route layer is on the map.
    """
    IDLE = "idle"
    ROUTED = "routed"


class DisplayStateException(Exception):
    """Raised when an invalid display transition is attempted."""
    pass


def transition_to_routed(state: DisplayState) -> DisplayState:
    """
    Called once a route layer has been drawn.
    ROUTED -> ROUTED is a re-render for the 3rd..nth point.
    """
    if state not in (DisplayState.IDLE, DisplayState.ROUTED):
        raise DisplayStateException(f"Cannot transition to ROUTED from {state}")
    return DisplayState.ROUTED


def transition_to_idle(state: DisplayState) -> DisplayState:
    """
    Called by reset. IDLE -> IDLE is allowed so reset can be repeated.
    """
    if state not in (DisplayState.IDLE, DisplayState.ROUTED):
        raise DisplayStateException(f"Cannot transition to IDLE from {state}")
    return DisplayState.IDLE
