"""
Purpose: Orchestrator / event pipeline (the "glue").
What it does:
Takes user intent events from the rendering layer (select destination,
change mode, toggle safety, reroute, locate me), runs the route estimator
or geolocation lookup, and commits results to the MapSession.

Flow is one way: event -> estimate -> session -> render.
"""

import logging
from typing import Callable, Optional

from routing.geolocation import DeviceLocator, IPGeolocationClient, resolve_user_location
from routing.models import LatLon, RouteEstimate, TransportMode
from routing.route_service import RouteEstimator

from .state import MapSession

log = logging.getLogger(__name__)


class DashboardController:
    """
    Coordinates one MapSession with the routing services.

    is_loading is True only while a route request is out. on_loading is
    called with True before the request and False after it (also on
    failure), so a renderer can show and hide its spinner.
    """
    def __init__(self, session: MapSession, estimator: RouteEstimator,
                 ip_client: Optional[IPGeolocationClient] = None,
                 on_loading: Optional[Callable[[bool], None]] = None):
        self.session = session
        self.estimator = estimator
        self.ip_client = ip_client
        self.on_loading = on_loading
        self.is_loading = False

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        if self.on_loading is not None:
            self.on_loading(loading)

    # --- Route events ---

    def request_route(self) -> Optional[RouteEstimate]:
        """
        Re-estimate the route to the current destination using the current
        mode/safety settings. Returns the estimate if it was applied.
        Failures leave the session's route untouched.
        """
        destination = self.session.route_destination()
        if destination is None or self.session.user_location is None:
            return None

        sequence = self.session.begin_route_request()
        self._set_loading(True)
        try:
            estimate = self.estimator.estimate(
                self.session.user_location,
                destination.coordinates,
                self.session.transport_mode,
                self.session.safety_mode_enabled,
                sequence=sequence,
            )
        finally:
            self._set_loading(False)

        if not self.session.apply_estimate(estimate):
            return None
        return estimate

    def start_route_to(self, location_id: str) -> Optional[RouteEstimate]:
        self.session.set_route_destination(location_id)
        return self.request_route()

    def change_transport_mode(self, mode: TransportMode) -> Optional[RouteEstimate]:
        self.session.set_transport_mode(mode)
        return self.request_route()

    def toggle_safety_mode(self, enabled: Optional[bool] = None) -> Optional[RouteEstimate]:
        if enabled is None:
            enabled = not self.session.safety_mode_enabled
        self.session.set_safety_mode(enabled)
        return self.request_route()

    def reroute(self) -> Optional[RouteEstimate]:
        return self.request_route()

    def clear_route(self) -> None:
        self.session.clear_route()

    # --- Position events ---

    def locate_user(self, device_locator: Optional[DeviceLocator] = None) -> Optional[LatLon]:
        """
        Resolve the user's position (device first, then IP). Recenters the
        map when it is still on the default view.
        """
        position = resolve_user_location(device_locator, self.ip_client)
        if position is None:
            log.info("User location unknown, keeping current state")
            return None

        self.session.set_user_location(position)
        if self.session.is_default_center():
            self.session.set_viewport(position)
        return position
