"""
Purpose: Owns the dashboard's UI selection state.
What it does:
- Holds selection (selected location, route destination), transport mode,
  safety toggle, user location, viewport, active filters and the current
  route estimate + selected route id.

Provides operations:
   - select_location / set_route_destination / clear_route
   - set_transport_mode / set_safety_mode
   - set_user_location / set_viewport
   - set_filter / toggle_category / toggle_tag / set_search / filtered_locations
   - begin_route_request / apply_estimate / select_route / selected_route

Rule: Session owns state transitions, routing owns estimation logic.
The session is passed around explicitly, there is no global store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional, Tuple

from locations.catalog import LocationCatalog
from locations.filters import LocationFilter, filter_locations
from locations.models import Location
from routing.models import LatLon, RouteAlternative, RouteEstimate, TransportMode

log = logging.getLogger(__name__)

DEFAULT_MAP_CENTER: LatLon = (20.0, 0.0)
DEFAULT_MAP_ZOOM: float = 2.0


@dataclass
class MapSession:
    """
    In-memory state for one dashboard.

    Route results are applied through apply_estimate only, which drops
    responses older than the latest issued request.
    """
    catalog: LocationCatalog

    selected_location_id: Optional[str] = None
    route_destination_id: Optional[str] = None
    transport_mode: TransportMode = TransportMode.CAR
    safety_mode_enabled: bool = False
    user_location: Optional[LatLon] = None
    map_center: LatLon = DEFAULT_MAP_CENTER
    map_zoom: float = DEFAULT_MAP_ZOOM
    location_filter: LocationFilter = field(default_factory=LocationFilter)

    _estimate: Optional[RouteEstimate] = field(default=None, init=False, repr=False)
    _selected_route_id: Optional[str] = field(default=None, init=False, repr=False)

    # request sequencing: every route request gets the next number
    _last_issued_sequence: int = field(default=0, init=False, repr=False)
    _last_applied_sequence: int = field(default=0, init=False, repr=False)

    # --- Selection ---

    def _require_location(self, location_id: str) -> Location:
        location = self.catalog.get_location(location_id)
        if location is None:
            raise ValueError(f"Unknown location id: {location_id}")
        return location

    def select_location(self, location_id: Optional[str]) -> None:
        if location_id is not None:
            self._require_location(location_id)
        self.selected_location_id = location_id

    def selected_location(self) -> Optional[Location]:
        return self.catalog.get_location(self.selected_location_id)

    def set_route_destination(self, location_id: str) -> None:
        """
        Start routing to a location. A new destination invalidates any
        route computed for the previous one.
        """
        self._require_location(location_id)
        if location_id != self.route_destination_id:
            self._estimate = None
            self._selected_route_id = None
            # responses still in flight were routed to the old destination
            self._last_applied_sequence = self._last_issued_sequence
        self.route_destination_id = location_id

    def route_destination(self) -> Optional[Location]:
        return self.catalog.get_location(self.route_destination_id)

    def clear_route(self) -> None:
        self.route_destination_id = None
        self._estimate = None
        self._selected_route_id = None
        # responses still in flight belong to the cleared route
        self._last_applied_sequence = self._last_issued_sequence

    # --- Route options ---

    def set_transport_mode(self, mode: TransportMode) -> None:
        self.transport_mode = TransportMode(mode)

    def set_safety_mode(self, enabled: bool) -> None:
        self.safety_mode_enabled = bool(enabled)

    # --- Position / viewport ---

    def set_user_location(self, location: LatLon) -> None:
        self.user_location = (float(location[0]), float(location[1]))

    def set_viewport(self, center: LatLon, zoom: Optional[float] = None) -> None:
        self.map_center = (float(center[0]), float(center[1]))
        if zoom is not None:
            self.map_zoom = float(zoom)

    def is_default_center(self) -> bool:
        return self.map_center == DEFAULT_MAP_CENTER

    # --- Filters ---

    def set_filter(self, criteria: LocationFilter) -> None:
        self.location_filter = criteria

    def toggle_category(self, category_id: str) -> None:
        self.location_filter = self.location_filter.toggle_category(category_id)

    def toggle_tag(self, tag_id: str) -> None:
        self.location_filter = self.location_filter.toggle_tag(tag_id)

    def set_search(self, search: str) -> None:
        self.location_filter = self.location_filter.with_search(search)

    def filtered_locations(self) -> List[Location]:
        return filter_locations(self.catalog.locations, self.location_filter)

    # --- Routes ---

    def begin_route_request(self) -> int:
        """
        Issue the next request sequence number. Pass it to the estimator
        and hand the result back to apply_estimate.
        """
        self._last_issued_sequence += 1
        return self._last_issued_sequence

    def apply_estimate(self, estimate: Optional[RouteEstimate]) -> bool:
        """
        Commit an estimate as the current route.

        - None (failed/empty estimate): nothing changes
        - older than the latest issued request: discarded
        - otherwise: becomes current; the previously selected route stays
          selected if it came back, else the primary route is selected

        Returns True if the estimate was applied.
        """
        if estimate is None:
            return False

        if estimate.sequence < self._last_issued_sequence or estimate.sequence <= self._last_applied_sequence:
            log.debug(
                "Discarding stale estimate #%d (latest issued #%d)",
                estimate.sequence, self._last_issued_sequence,
            )
            return False

        previous_route_id = self._selected_route_id
        self._estimate = estimate
        self._last_applied_sequence = estimate.sequence

        if previous_route_id is not None and estimate.find(previous_route_id) is not None:
            self._selected_route_id = previous_route_id
        else:
            self._selected_route_id = estimate.primary.route_id
        return True

    @property
    def route_estimate(self) -> Optional[RouteEstimate]:
        return self._estimate

    @property
    def route_alternatives(self) -> Tuple[RouteAlternative, ...]:
        return self._estimate.alternatives if self._estimate else ()

    @property
    def selected_route_id(self) -> Optional[str]:
        return self._selected_route_id

    def select_route(self, route_id: str) -> None:
        if self._estimate is None or self._estimate.find(route_id) is None:
            raise ValueError(f"Unknown route id: {route_id}")
        self._selected_route_id = route_id

    def selected_route(self) -> Optional[RouteAlternative]:
        if self._estimate is None or self._selected_route_id is None:
            return None
        return self._estimate.find(self._selected_route_id)
