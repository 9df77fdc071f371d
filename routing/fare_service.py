#Purpose: Fare estimation policy.
#Converts a route distance into an approximate fare per transport mode.
#Rickshaw: flat base fare up to base km, then per km
#Car: per km
#Bus: base fare + per km
#Train: flat
#No HTTP here. Tunables live in routing/policy.py.

import math
from typing import Optional

from .models import TransportMode
from .policy import EstimatePolicy, default_estimate_policy


def round_half_up(value: float) -> int:
    """Round .5 up: 32.5 -> 33 (builtin round() gives 32)."""
    return int(math.floor(value + 0.5))


def raw_fare(mode: TransportMode, distance_km: float,
             policy: Optional[EstimatePolicy] = None) -> float:
    """
    Unrounded fare for a trip of distance_km in the given mode.
    """
    policy = policy or default_estimate_policy()
    mode = TransportMode(mode)

    if distance_km < 0:
        raise ValueError("distance_km must be >= 0")

    if mode == TransportMode.RICKSHAW:
        if distance_km <= policy.rickshaw_base_km:
            return policy.rickshaw_base_fare
        return policy.rickshaw_base_fare + (distance_km - policy.rickshaw_base_km) * policy.rickshaw_per_km

    if mode == TransportMode.CAR:
        return distance_km * policy.car_per_km

    if mode == TransportMode.BUS:
        return policy.bus_base_fare + distance_km * policy.bus_per_km

    # train: flat fare regardless of distance
    return policy.train_flat_fare


def estimate_fare(mode: TransportMode, distance_km: float,
                  policy: Optional[EstimatePolicy] = None) -> int:
    """
    Fare in whole currency units.

    Example:
        estimate_fare(TransportMode.RICKSHAW, 2.0) -> round(26 + 0.5 * 15) = 34
    """
    return round_half_up(raw_fare(mode, distance_km, policy))
