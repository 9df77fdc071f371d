"""
Purpose: Reference data models for the map.
What it does:
- Location (id, name, address, coordinates, category, tags)
- Category (id, label, color) used for marker tinting
- Tag (id, name)

Immutable: loaded once at startup, never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Category:
    id: str
    label: str
    color: str  # hex, e.g. "#ef4444"


@dataclass(frozen=True)
class Tag:
    id: str
    name: str


@dataclass(frozen=True)
class Location:
    """
    A point of interest shown as a marker.
    """
    id: str
    name: str
    address: str
    coordinates: LatLon
    category_id: str
    tags: FrozenSet[str] = field(default_factory=frozenset)
