#Marks drawing as a package and re-exports the point-drawing widget.

from .models import Waypoint, PointFeature
from .widget import DrawWidget, DrawStyles, DRAW_CREATE, DRAW_DELETE

__all__ = [
    "Waypoint",
    "PointFeature",
    "DrawWidget",
    "DrawStyles",
    "DRAW_CREATE",
    "DRAW_DELETE",
]
