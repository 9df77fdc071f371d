import pytest

from dashboard.state import DEFAULT_MAP_CENTER, MapSession
from locations.filters import LocationFilter
from routing.models import TransportMode
from routing.route_service import RouteEstimator

ORIGIN = (12.9716, 77.5946)


@pytest.fixture
def session(catalog):
    s = MapSession(catalog=catalog)
    s.set_user_location(ORIGIN)
    return s


@pytest.fixture
def estimator(mock_osrm):
    return RouteEstimator(mock_osrm)


def estimate_for(session, estimator, sequence, mode=TransportMode.CAR):
    destination = session.route_destination().coordinates
    return estimator.estimate(session.user_location, destination, mode, sequence=sequence)


def test_defaults(catalog):
    s = MapSession(catalog=catalog)
    assert s.transport_mode == TransportMode.CAR
    assert s.safety_mode_enabled is False
    assert s.map_center == DEFAULT_MAP_CENTER
    assert s.is_default_center()
    assert s.route_alternatives == ()
    assert s.selected_route() is None


def test_selection_validates_ids(session):
    session.select_location("park")
    assert session.selected_location().name == "Cubbon Park"

    with pytest.raises(ValueError):
        session.select_location("nowhere")
    with pytest.raises(ValueError):
        session.set_route_destination("nowhere")

    session.select_location(None)
    assert session.selected_location() is None


def test_apply_estimate_selects_primary(session, estimator):
    session.set_route_destination("park")
    sequence = session.begin_route_request()
    estimate = estimate_for(session, estimator, sequence)

    assert session.apply_estimate(estimate) is True
    assert session.route_estimate is estimate
    assert session.selected_route() == estimate.primary
    assert session.route_alternatives[0] == estimate.primary


def test_failed_estimate_leaves_route_unchanged(session, estimator):
    session.set_route_destination("park")
    estimate = estimate_for(session, estimator, session.begin_route_request())
    session.apply_estimate(estimate)

    session.begin_route_request()
    assert session.apply_estimate(None) is False
    assert session.route_estimate is estimate
    assert session.selected_route_id == estimate.primary.route_id


def test_out_of_order_response_is_discarded(session, estimator):
    session.set_route_destination("park")
    first = session.begin_route_request()
    second = session.begin_route_request()

    newer = estimate_for(session, estimator, second, TransportMode.BUS)
    older = estimate_for(session, estimator, first, TransportMode.CAR)

    # the later request answers first, the slow earlier one arrives after
    assert session.apply_estimate(newer) is True
    assert session.apply_estimate(older) is False
    assert session.route_estimate is newer
    assert session.selected_route().mode == TransportMode.BUS


def test_older_response_discarded_while_newer_pending(session, estimator):
    session.set_route_destination("park")
    first = session.begin_route_request()
    session.begin_route_request()

    assert session.apply_estimate(estimate_for(session, estimator, first)) is False
    assert session.route_estimate is None


def test_selected_route_survives_recompute(session, estimator):
    session.set_route_destination("park")
    session.apply_estimate(estimate_for(session, estimator, session.begin_route_request()))

    second_route = session.route_alternatives[1]
    session.select_route(second_route.route_id)

    recomputed = estimate_for(session, estimator, session.begin_route_request(), TransportMode.RICKSHAW)
    session.apply_estimate(recomputed)

    assert session.selected_route_id == second_route.route_id
    assert session.selected_route().mode == TransportMode.RICKSHAW


def test_selection_falls_back_to_primary_when_route_disappears(session, estimator, short_candidate, osrm_factory):
    session.set_route_destination("park")
    session.apply_estimate(estimate_for(session, estimator, session.begin_route_request()))
    session.select_route(session.route_alternatives[1].route_id)

    only_short = RouteEstimator(osrm_factory([short_candidate]))
    session.apply_estimate(estimate_for(session, only_short, session.begin_route_request()))

    assert session.selected_route_id == short_candidate.route_id


def test_select_unknown_route(session):
    with pytest.raises(ValueError):
        session.select_route("does-not-exist")


def test_new_destination_drops_old_route(session, estimator):
    session.set_route_destination("park")
    session.apply_estimate(estimate_for(session, estimator, session.begin_route_request()))

    session.set_route_destination("park")
    assert session.route_estimate is not None

    session.set_route_destination("station")
    assert session.route_estimate is None
    assert session.selected_route() is None


def test_clear_route_discards_in_flight_responses(session, estimator):
    session.set_route_destination("park")
    sequence = session.begin_route_request()
    in_flight = estimate_for(session, estimator, sequence)

    session.clear_route()

    assert session.apply_estimate(in_flight) is False
    assert session.route_destination_id is None
    assert session.route_alternatives == ()


def test_new_destination_discards_in_flight_responses(session, estimator):
    session.set_route_destination("park")
    in_flight = estimate_for(session, estimator, session.begin_route_request())

    session.set_route_destination("station")

    # 1. the answer for the old destination is dropped
    assert session.apply_estimate(in_flight) is False
    assert session.route_estimate is None
    assert session.route_destination_id == "station"

    # 2. a request for the new destination still applies
    fresh = estimate_for(session, estimator, session.begin_route_request())
    assert session.apply_estimate(fresh) is True
    assert session.route_estimate is fresh


def test_same_destination_keeps_in_flight_responses(session, estimator):
    session.set_route_destination("park")
    in_flight = estimate_for(session, estimator, session.begin_route_request())

    session.set_route_destination("park")

    assert session.apply_estimate(in_flight) is True


def test_internal_state_is_not_a_constructor_argument(catalog):
    with pytest.raises(TypeError):
        MapSession(catalog=catalog, _estimate=None)
    with pytest.raises(TypeError):
        MapSession(catalog=catalog, _last_issued_sequence=5)

    assert "_estimate" not in repr(MapSession(catalog=catalog))

def test_filters_through_session(session):
    session.toggle_category("food")
    session.toggle_category("health")
    assert [l.id for l in session.filtered_locations()] == ["cafe", "hospital"]

    session.toggle_tag("wifi")
    assert [l.id for l in session.filtered_locations()] == ["cafe"]

    session.set_filter(LocationFilter())
    session.set_search("junction")
    assert [l.id for l in session.filtered_locations()] == ["station"]


def test_viewport(session):
    session.set_viewport((12.9, 77.6), zoom=13)
    assert session.map_center == (12.9, 77.6)
    assert session.map_zoom == 13.0
    assert not session.is_default_center()

    session.set_viewport((13.0, 77.7))
    assert session.map_zoom == 13.0
