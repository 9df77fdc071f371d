"""
Purpose: Domain models for the routing capability.
What it does:
- Defines TransportMode (car | bus | train | rickshaw)
- Defines RouteCandidate: a raw OSRM route normalized to internal shape
- Defines RouteAlternative: a candidate after mode/fare/safety estimation
- Defines RouteEstimate: primary route + full alternative list for one request

Rule: No HTTP calls, no estimation math. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import hashlib

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class TransportMode(str, Enum):
    CAR = "car"
    BUS = "bus"
    TRAIN = "train"
    RICKSHAW = "rickshaw"


@dataclass(frozen=True)
class RouteCandidate:
    """
    One route returned by OSRM, before any mode specific adjustment.
    geometry is in internal (lat, lon) order.
    """
    geometry: Tuple[LatLon, ...]
    distance_m: float
    duration_s: float  # driving duration as reported by OSRM

    @property
    def distance_km(self) -> float:
        return self.distance_m / 1000

    @property
    def route_id(self) -> str:
        """
        Stable id derived from geometry + distance, so the same road
        comes back with the same id after a mode or safety toggle.
        """
        digest = hashlib.sha1()
        for lat, lon in self.geometry:
            digest.update(f"{lat:.6f},{lon:.6f};".encode())
        digest.update(f"{self.distance_m:.1f}".encode())
        return digest.hexdigest()[:16]


@dataclass(frozen=True)
class RouteAlternative:
    route_id: str
    coordinates: Tuple[LatLon, ...]
    duration_s: int
    distance_m: float
    cost: int
    safety_score: int
    mode: TransportMode
    time_saved_s: int = 0


@dataclass(frozen=True)
class RouteEstimate:
    """
    Output of one estimation call.
    primary is always alternatives[0].
    """
    sequence: int
    alternatives: Tuple[RouteAlternative, ...]

    @property
    def primary(self) -> RouteAlternative:
        return self.alternatives[0]

    def find(self, route_id: str) -> Optional[RouteAlternative]:
        for route in self.alternatives:
            if route.route_id == route_id:
                return route
        return None
