#Expose the dashboard pieces:
#Session state (selection, filters, current route)
#Controller (the "one call" entry point for UI events)
#Presentation helpers (layers, formatting)

from .state import MapSession, DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM
from .controller import DashboardController
from .layers import MarkerStyle, RouteLayer, marker_styles, route_layers
from .formatting import format_duration, format_distance, format_fare

__all__ = [
    "MapSession",
    "DEFAULT_MAP_CENTER",
    "DEFAULT_MAP_ZOOM",
    "DashboardController",
    "MarkerStyle",
    "RouteLayer",
    "marker_styles",
    "route_layers",
    "format_duration",
    "format_distance",
    "format_fare",
]
