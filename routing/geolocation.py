"""
Purpose: Find where the user is.
What it does:
- Tries the device/browser locator first (it may be denied or unavailable)
- Falls back to an IP geolocation lookup (ipapi.co by default)
- Best effort: failures are logged and resolve to None, never raised to the UI
"""

from dotenv import load_dotenv
import logging
import os
from typing import Callable, Optional

import requests

from .models import LatLon

# Example in .env:
# GEOLOCATION_URL=https://ipapi.co/json/
load_dotenv()
GEOLOCATION_URL = os.getenv("GEOLOCATION_URL", "https://ipapi.co/json/")

log = logging.getLogger(__name__)

# A device locator returns (lat, lon) or raises GeolocationError
DeviceLocator = Callable[[], LatLon]


class GeolocationError(Exception):
    """Raised when a locator cannot produce a position (denied, unavailable, no data)."""
    pass


class IPGeolocationClient:
    """
    Looks up an approximate position from the caller's public IP.
    """
    def __init__(self, url: Optional[str] = None, timeout: float = 5):
        self.url = url or GEOLOCATION_URL
        self.timeout = timeout

    def lookup(self) -> LatLon:
        response = requests.get(self.url, timeout=self.timeout)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise GeolocationError("IP geolocation returned a non-JSON response") from exc

        if not isinstance(data, dict):
            raise GeolocationError("IP geolocation returned an unexpected payload")

        latitude = data.get("latitude")
        longitude = data.get("longitude")
        # 0.0 is a real coordinate, only missing values are rejected
        if latitude is None or longitude is None:
            raise GeolocationError(data.get("reason") or "IP geolocation returned no coordinates")
        return (float(latitude), float(longitude))


def resolve_user_location(
        device_locator: Optional[DeviceLocator],
        ip_client: Optional[IPGeolocationClient],
) -> Optional[LatLon]:
    """
    Device position if we can get it, otherwise IP position, otherwise None.
    """
    if device_locator is not None:
        try:
            return device_locator()
        except GeolocationError as exc:
            # permission denied / timeout: silently fall back to IP lookup
            log.info("Device geolocation unavailable (%s), falling back to IP lookup", exc)

    if ip_client is None:
        return None

    try:
        return ip_client.lookup()
    except (requests.RequestException, GeolocationError, ValueError, TypeError) as exc:
        log.warning("IP geolocation failed: %s", exc)
        return None
