import pytest

from locations.catalog import LocationCatalog
from locations.models import Category, Location, Tag
from routing.models import RouteCandidate


@pytest.fixture
def catalog():
    locations = (
        Location("cafe", "Blue Tokai Cafe", "12 Church Street, Bengaluru", (12.9752, 77.6050), "food",
                 frozenset({"wifi", "open-late"})),
        Location("park", "Cubbon Park", "Kasturba Road, Bengaluru", (12.9763, 77.5929), "park",
                 frozenset({"family"})),
        Location("station", "KSR City Junction", "Railway Colony, Bengaluru", (12.9784, 77.5698), "transit",
                 frozenset()),
        Location("hospital", "Bowring Hospital", "Shivaji Nagar, Bengaluru", (12.9830, 77.6046), "health",
                 frozenset({"wheelchair", "open-late"})),
    )
    categories = {
        "food": Category("food", "Food & Drink", "#f97316"),
        "park": Category("park", "Parks", "#22c55e"),
        "transit": Category("transit", "Transit", "#3b82f6"),
    }
    tags = {
        "wifi": Tag("wifi", "Free Wi-Fi"),
        "family": Tag("family", "Family friendly"),
        "open-late": Tag("open-late", "Open late"),
    }
    return LocationCatalog(locations=locations, categories=categories, tags=tags)


@pytest.fixture
def short_candidate():
    # 2.0 km, 5 min driving
    return RouteCandidate(
        geometry=((12.9716, 77.5946), (12.9650, 77.5900), (12.9507, 77.5848)),
        distance_m=2000.0,
        duration_s=300.0,
    )


@pytest.fixture
def long_candidate():
    # 3.0 km, 7 min driving
    return RouteCandidate(
        geometry=((12.9716, 77.5946), (12.9600, 77.6000), (12.9507, 77.5848)),
        distance_m=3000.0,
        duration_s=420.0,
    )


class MockOSRM:
    """Returns canned candidates and records every call."""
    def __init__(self, candidates=None, error=None):
        self.candidates = list(candidates or [])
        self.error = error
        self.calls = []

    def compute_route_alternatives(self, coordinates):
        self.calls.append(list(coordinates))
        if self.error is not None:
            raise self.error
        return list(self.candidates)


@pytest.fixture
def osrm_factory():
    return MockOSRM


@pytest.fixture
def mock_osrm(short_candidate, long_candidate):
    return MockOSRM([short_candidate, long_candidate])
