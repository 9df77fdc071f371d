"""
Purpose: Central configuration for route estimation (single source of truth).
What it does:

Stores all tunable speeds/fares/safety parameters:

SPEEDS_KMH = car 40, bus 25, train 60, rickshaw 30

SAFETY_DURATION_PENALTY = 1.10 (bus, rickshaw)

SAFETY_SCORE = 70..99 baseline, +10 bonus capped at 100

RICKSHAW = 26 flat up to 1.5 km, then 15 per km

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet

from .models import TransportMode


@dataclass(frozen=True)
class EstimatePolicy:
    """
    Central configuration for turning one driving route into
    mode specific duration, fare and safety estimates.

    Notes:
    - OSRM is only queried with the driving profile. Other modes are an
      approximation: duration * (car speed / mode speed).
    - Fares are in rupees.
    """

    # --- Average speeds (km/h) ---
    speeds_kmh: Dict[TransportMode, float] = field(default_factory=lambda: {
        TransportMode.CAR: 40.0,
        TransportMode.BUS: 25.0,
        TransportMode.TRAIN: 60.0,
        TransportMode.RICKSHAW: 30.0,
    })

    # --- Safety mode ---
    # Modes that get slower when safety mode is on (safer but longer roads).
    safety_slowed_modes: FrozenSet[TransportMode] = frozenset(
        {TransportMode.BUS, TransportMode.RICKSHAW}
    )
    safety_duration_factor: float = 1.10

    # Baseline score is drawn from [safety_score_min, safety_score_min + safety_score_span)
    safety_score_min: int = 70
    safety_score_span: int = 30
    safety_score_bonus: int = 10
    safety_score_cap: int = 100

    # --- Fares ---
    rickshaw_base_fare: float = 26.0
    rickshaw_base_km: float = 1.5
    rickshaw_per_km: float = 15.0

    car_per_km: float = 20.0

    bus_base_fare: float = 5.0
    bus_per_km: float = 2.0

    train_flat_fare: float = 10.0

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup if you want.
        """
        missing = [mode.value for mode in TransportMode if mode not in self.speeds_kmh]
        if missing:
            raise ValueError(f"speeds_kmh is missing modes: {', '.join(missing)}")

        for mode, speed in self.speeds_kmh.items():
            if speed <= 0:
                raise ValueError(f"speed for {mode.value} must be > 0")

        if self.safety_duration_factor < 1.0:
            raise ValueError("safety_duration_factor must be >= 1.0")

        if self.safety_score_span <= 0:
            raise ValueError("safety_score_span must be > 0")

        if self.safety_score_bonus < 0:
            raise ValueError("safety_score_bonus must be >= 0")

        if not 0 <= self.safety_score_min <= self.safety_score_cap <= 100:
            raise ValueError("safety scores must satisfy 0 <= min <= cap <= 100")

        # baseline must never exceed the cap, otherwise the bonus could lower it
        if self.safety_score_min + self.safety_score_span - 1 > self.safety_score_cap:
            raise ValueError("safety_score_min + safety_score_span - 1 must be <= safety_score_cap")

        if self.rickshaw_base_km < 0:
            raise ValueError("rickshaw_base_km must be >= 0")

        fares = (
            self.rickshaw_base_fare,
            self.rickshaw_per_km,
            self.car_per_km,
            self.bus_base_fare,
            self.bus_per_km,
            self.train_flat_fare,
        )
        if any(fare < 0 for fare in fares):
            raise ValueError("fares must be >= 0")


def default_estimate_policy() -> EstimatePolicy:
    """
    Convenience factory for the default policy.
    """
    p = EstimatePolicy()
    p.validate()
    return p
