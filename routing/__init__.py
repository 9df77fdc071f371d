#Marks routing as a package.
#Re-exports the public API (OSRMClient, RouteEstimator, estimate_fare, ...)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .models import LatLon, TransportMode, RouteCandidate, RouteAlternative, RouteEstimate
from .policy import EstimatePolicy, default_estimate_policy
from .osrm_client import OSRMClient, OSRMError
from .fare_service import estimate_fare
from .eta_service import estimate_duration_s, estimate_safety_score
from .route_service import RouteEstimator
from .geolocation import GeolocationError, IPGeolocationClient, resolve_user_location

__all__ = [
    "LatLon",
    "TransportMode",
    "RouteCandidate",
    "RouteAlternative",
    "RouteEstimate",
    "EstimatePolicy",
    "default_estimate_policy",
    "OSRMClient",
    "OSRMError",
    "estimate_fare",
    "estimate_duration_s",
    "estimate_safety_score",
    "RouteEstimator",
    "GeolocationError",
    "IPGeolocationClient",
    "resolve_user_location",
]
