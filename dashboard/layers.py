"""
Purpose: What the map should draw, without drawing it.
What it does:
- marker_styles: one tint per visible location
    route destination -> green, selected -> blue, else category color
- route_layers: one polyline per route alternative
    selected route is highlighted; a selected route that is not among the
    alternatives is still drawn as the primary layer

The renderer consumes these and emits select events back to the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from locations.catalog import LocationCatalog
from locations.models import Location
from routing.models import LatLon, RouteAlternative

DESTINATION_COLOR = "#22c55e"
SELECTED_COLOR = "#3b82f6"
FALLBACK_CATEGORY_COLOR = "#6b7280"
ALTERNATIVE_ROUTE_COLOR = "#94a3b8"


@dataclass(frozen=True)
class MarkerStyle:
    location_id: str
    coordinates: LatLon
    color: str
    is_selected: bool
    is_route_destination: bool


@dataclass(frozen=True)
class RouteLayer:
    route_id: str
    coordinates: Tuple[LatLon, ...]
    color: str
    width: int
    opacity: float
    is_selected: bool


def marker_color(location: Location, catalog: LocationCatalog,
                 selected_id: Optional[str], destination_id: Optional[str]) -> str:
    if location.id == destination_id:
        return DESTINATION_COLOR
    if location.id == selected_id:
        return SELECTED_COLOR
    category = catalog.get_category(location.category_id)
    return category.color if category and category.color else FALLBACK_CATEGORY_COLOR


def marker_styles(locations: Iterable[Location], catalog: LocationCatalog,
                  selected_id: Optional[str] = None,
                  destination_id: Optional[str] = None) -> List[MarkerStyle]:
    return [
        MarkerStyle(
            location_id=location.id,
            coordinates=location.coordinates,
            color=marker_color(location, catalog, selected_id, destination_id),
            is_selected=location.id == selected_id,
            is_route_destination=location.id == destination_id,
        )
        for location in locations
    ]


def route_layers(alternatives: Iterable[RouteAlternative],
                 selected: Optional[RouteAlternative] = None) -> List[RouteLayer]:
    selected_id = selected.route_id if selected else None
    layers = []
    for route in alternatives:
        is_selected = route.route_id == selected_id
        layers.append(
            RouteLayer(
                route_id=route.route_id,
                coordinates=route.coordinates,
                color=SELECTED_COLOR if is_selected else ALTERNATIVE_ROUTE_COLOR,
                width=6 if is_selected else 5,
                opacity=1.0 if is_selected else 0.6,
                is_selected=is_selected,
            )
        )

    # selected route that is not one of the alternatives: draw it on its own
    if selected is not None and not any(layer.is_selected for layer in layers):
        layers.append(
            RouteLayer(
                route_id=selected.route_id,
                coordinates=selected.coordinates,
                color=SELECTED_COLOR,
                width=6,
                opacity=1.0,
                is_selected=True,
            )
        )
    return layers
