import pytest

from routing.eta_service import (
    baseline_safety_score,
    estimate_duration_s,
    estimate_safety_score,
    speed_factor,
)
from routing.models import TransportMode
from routing.policy import EstimatePolicy, default_estimate_policy


def test_speed_factors_relative_to_car():
    assert speed_factor(TransportMode.CAR) == 1.0
    assert speed_factor(TransportMode.BUS) == pytest.approx(1.6)
    assert speed_factor(TransportMode.TRAIN) == pytest.approx(40 / 60)
    assert speed_factor(TransportMode.RICKSHAW) == pytest.approx(40 / 30)


def test_duration_scaled_by_mode():
    assert estimate_duration_s(600, TransportMode.CAR) == 600
    assert estimate_duration_s(600, TransportMode.BUS) == 960
    assert estimate_duration_s(600, TransportMode.TRAIN) == 400
    assert estimate_duration_s(600, TransportMode.RICKSHAW) == 800


def test_safety_mode_slows_bus_and_rickshaw_only():
    assert estimate_duration_s(600, TransportMode.BUS, safety_mode=True) == 1056
    assert estimate_duration_s(600, TransportMode.RICKSHAW, safety_mode=True) == 880
    assert estimate_duration_s(600, TransportMode.CAR, safety_mode=True) == 600
    assert estimate_duration_s(600, TransportMode.TRAIN, safety_mode=True) == 400


@pytest.mark.parametrize("mode", list(TransportMode))
@pytest.mark.parametrize("driving_s", [0, 1, 59, 300, 1234.5, 7200])
def test_safety_mode_never_shortens_duration(mode, driving_s):
    assert estimate_duration_s(driving_s, mode, True) >= estimate_duration_s(driving_s, mode, False)


def test_baseline_safety_score_in_range_and_deterministic():
    for index in range(300):
        route_id = f"route-{index}"
        score = baseline_safety_score(route_id)
        assert 70 <= score <= 99
        assert baseline_safety_score(route_id) == score


def test_safety_mode_never_lowers_score():
    for index in range(300):
        route_id = f"route-{index}"
        plain = estimate_safety_score(route_id, safety_mode=False)
        safe = estimate_safety_score(route_id, safety_mode=True)
        assert safe >= plain
        assert safe == min(100, plain + 10)
        assert safe <= 100


def test_default_policy_is_valid():
    default_estimate_policy().validate()


def test_policy_rejects_missing_speed():
    policy = EstimatePolicy(speeds_kmh={TransportMode.CAR: 40.0})
    with pytest.raises(ValueError):
        policy.validate()


def test_policy_rejects_score_range_above_cap():
    with pytest.raises(ValueError):
        EstimatePolicy(safety_score_min=80, safety_score_span=30).validate()


def test_policy_rejects_speedup_in_safety_mode():
    with pytest.raises(ValueError):
        EstimatePolicy(safety_duration_factor=0.9).validate()
