#Purpose: ETA + safety estimation policy.
#Converts a driving route from OSRM into a mode specific duration.
#OSRM is only queried with the driving profile, so other modes are scaled by
#the ratio car speed / mode speed (train is faster than car, bus slower).
#Safety mode slows some modes down and bumps the safety score.
#Keeps ETA logic separate from route computation (route_service.py).

import random
from typing import Optional

from .fare_service import round_half_up
from .models import TransportMode
from .policy import EstimatePolicy, default_estimate_policy


def speed_factor(mode: TransportMode, policy: Optional[EstimatePolicy] = None) -> float:
    """
    Multiplier applied to the driving duration for a mode.
    car -> 1.0, bus -> 1.6, train -> 0.667, rickshaw -> 1.333 with default speeds.
    """
    policy = policy or default_estimate_policy()
    mode = TransportMode(mode)
    car_speed = policy.speeds_kmh[TransportMode.CAR]
    return car_speed / policy.speeds_kmh.get(mode, car_speed)


def raw_duration_s(driving_duration_s: float, mode: TransportMode, safety_mode: bool = False,
                   policy: Optional[EstimatePolicy] = None) -> float:
    """Unrounded mode duration in seconds."""
    policy = policy or default_estimate_policy()
    mode = TransportMode(mode)

    duration_s = driving_duration_s * speed_factor(mode, policy)
    if safety_mode and mode in policy.safety_slowed_modes:
        duration_s *= policy.safety_duration_factor
    return duration_s


def estimate_duration_s(driving_duration_s: float, mode: TransportMode, safety_mode: bool = False,
                        policy: Optional[EstimatePolicy] = None) -> int:
    """
    Mode duration in whole seconds.
    Durations stay in seconds end to end (the minutes round trip adds nothing).
    """
    return round_half_up(raw_duration_s(driving_duration_s, mode, safety_mode, policy))


def baseline_safety_score(route_id: str, policy: Optional[EstimatePolicy] = None) -> int:
    """
    Baseline score in [min, min + span). Seeded from the route id so the
    same route scores the same on every re-estimation.
    """
    policy = policy or default_estimate_policy()
    rng = random.Random(route_id)
    return policy.safety_score_min + int(rng.random() * policy.safety_score_span)


def estimate_safety_score(route_id: str, safety_mode: bool = False,
                          policy: Optional[EstimatePolicy] = None) -> int:
    policy = policy or default_estimate_policy()
    score = baseline_safety_score(route_id, policy)
    if safety_mode:
        score = min(policy.safety_score_cap, score + policy.safety_score_bonus)
    return score
