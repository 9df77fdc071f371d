#Purpose: Route computation for downstream use.
#Returns the route information needed by:
#map display / polyline geometry
#route panel (duration, fare, safety per alternative)
#Uses OSRM /route with alternatives (one call per estimate).
#ETA rules live in eta_service.py, fare rules in fare_service.py.

from __future__ import annotations

from dataclasses import replace
import logging
from typing import List, Optional

import requests

from .eta_service import estimate_duration_s, estimate_safety_score
from .fare_service import estimate_fare
from .models import LatLon, RouteAlternative, RouteCandidate, RouteEstimate, TransportMode
from .osrm_client import OSRMClient, OSRMError
from .policy import EstimatePolicy, default_estimate_policy

log = logging.getLogger(__name__)


def build_alternative(candidate: RouteCandidate, mode: TransportMode, safety_mode: bool,
                      policy: EstimatePolicy) -> RouteAlternative:
    """Apply duration/fare/safety rules to one OSRM candidate."""
    route_id = candidate.route_id
    return RouteAlternative(
        route_id=route_id,
        coordinates=candidate.geometry,
        duration_s=estimate_duration_s(candidate.duration_s, mode, safety_mode, policy),
        distance_m=candidate.distance_m,
        cost=estimate_fare(mode, candidate.distance_km, policy),
        safety_score=estimate_safety_score(route_id, safety_mode, policy),
        mode=mode,
    )


def with_time_saved(routes: List[RouteAlternative]) -> List[RouteAlternative]:
    """
    time_saved_s = slowest alternative duration - this route's duration.
    """
    if not routes:
        return []
    slowest = max(route.duration_s for route in routes)
    return [replace(route, time_saved_s=slowest - route.duration_s) for route in routes]


class RouteEstimator:
    """
    Fetches driving routes from OSRM and turns them into per-mode estimates.

    One HTTP call per estimate, no retries. Any failure is logged and
    reported as None so callers keep whatever route they already show.
    """
    def __init__(self, osrm: OSRMClient, policy: Optional[EstimatePolicy] = None):
        self.osrm = osrm
        self.policy = policy or default_estimate_policy()

    def estimate(
            self,
            origin: Optional[LatLon],
            destination: Optional[LatLon],
            mode: TransportMode = TransportMode.CAR,
            safety_mode: bool = False,
            *,
            sequence: int = 0,
    ) -> Optional[RouteEstimate]:
        """
        Args:
            origin: user (lat, lon)
            destination: destination (lat, lon)
            mode: transport mode used for duration/fare
            safety_mode: safety toggle
            sequence: request number issued by the caller, echoed back so
                      stale responses can be told apart

        Returns:
            RouteEstimate with primary == alternatives[0], or None when
            there is nothing to route or the request failed.
        """
        if origin is None or destination is None:
            return None

        mode = TransportMode(mode)

        try:
            candidates = self.osrm.compute_route_alternatives([origin, destination])
        except (requests.RequestException, OSRMError, KeyError, TypeError, ValueError) as exc:
            log.error("Failed to fetch route %s -> %s: %s", origin, destination, exc)
            return None

        if not candidates:
            log.warning("No route found %s -> %s", origin, destination)
            return None

        routes = [build_alternative(candidate, mode, safety_mode, self.policy) for candidate in candidates]
        routes = with_time_saved(routes)

        log.info(
            "Estimated %d route(s) for %s (safety=%s), primary %ss / %s",
            len(routes), mode.value, safety_mode, routes[0].duration_s, routes[0].cost,
        )
        return RouteEstimate(sequence=sequence, alternatives=tuple(routes))
