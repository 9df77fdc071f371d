#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat) in both directions
#URL construction (/route)
#timeouts and status validation
#parsing response JSON into RouteCandidate
#It should not contain fare, ETA or safety rules.

from dotenv import load_dotenv
import logging
import os
from typing import List, Dict, Any, Optional
import requests

from .models import LatLon, RouteCandidate

# Read OSRM base URL from environment
# Example in .env:
# OSRM_BASE_URL=https://router.project-osrm.org
load_dotenv()
DEFAULT_BASE_URL = "https://router.project-osrm.org"
BASE_URL = os.getenv("OSRM_BASE_URL", DEFAULT_BASE_URL)

log = logging.getLogger(__name__)


def timeout_from_env(value: Optional[str], default: float = 5.0) -> float:
    """Parse OSRM_TIMEOUT; a missing, malformed or non-positive value falls back to default."""
    if value is None or not value.strip():
        return default
    try:
        timeout = float(value)
    except ValueError:
        log.warning("Ignoring malformed OSRM_TIMEOUT=%r, using %ss", value, default)
        return default
    if timeout <= 0:
        log.warning("Ignoring non-positive OSRM_TIMEOUT=%r, using %ss", value, default)
        return default
    return timeout


DEFAULT_TIMEOUT = timeout_from_env(os.getenv("OSRM_TIMEOUT"))


class OSRMError(Exception):
    """Raised when OSRM answers with a non "Ok" code or an unreadable body."""
    pass


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat) and back
    - Return normalized outputs

    """
    def __init__(self, profile: str = "driving", timeout: float = DEFAULT_TIMEOUT,
                 base_url: Optional[str] = None):
        self.base_url = (base_url if base_url is not None else BASE_URL).rstrip("/")
        self.timeout = timeout  # seconds to wait for OSRM before giving up
        self.profile = profile  # driving, walking, cycling

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _route_url(self, coordinates: List[LatLon]) -> str:
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")
        return f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"

    def _get(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        log.debug("GET %s params=%s", url, params)
        response = requests.get(url, params=params, timeout=self.timeout)

        try:
            data = response.json()
        except ValueError as exc:
            raise OSRMError(
                f"OSRM returned a non-JSON response (HTTP {response.status_code})"
            ) from exc

        #validating OSRM response
        if not isinstance(data, dict) or data.get("code") != "Ok":
            message = data.get("message", "Unknown error") if isinstance(data, dict) else "Unknown error"
            raise OSRMError(f"OSRM error: {message}")
        return data

    @staticmethod
    def _parse_candidate(route: Dict[str, Any]) -> RouteCandidate:
        # GeoJSON geometry is [[lon, lat], ...]; flip to internal (lat, lon)
        geometry = route.get("geometry") or {}
        points = geometry.get("coordinates", []) if isinstance(geometry, dict) else []
        return RouteCandidate(
            geometry=tuple((float(lat), float(lon)) for lon, lat in points),
            distance_m=float(route["distance"]),
            duration_s=float(route["duration"]),
        )

    #----------------
    # Public methods
    #----------------
    def compute_route_alternatives(self, coordinates: List[LatLon]) -> List[RouteCandidate]:
        """
        calls the OSRM /route endpoint asking for full GeoJSON geometry and
        alternatives. Order is OSRM's order (best first).

        Returns an empty list when OSRM found the points but no route.
        """
        params = {
            "overview": "full",
            "geometries": "geojson",
            "alternatives": "true",
        }
        data = self._get(self._route_url(coordinates), params)

        candidates = [self._parse_candidate(route) for route in data.get("routes", [])]
        log.debug("OSRM returned %d route(s)", len(candidates))
        return candidates
