"""
Purpose: The filtered-location query behind the marker layer and the list panel.
What it does:
Linear scan over the static location list. A location passes when it matches
every active criterion:
- category: no active categories, or its category is active
- tags: no active tags, or it carries at least one active tag
- search: empty search, or the text occurs in its name or address (case-insensitive)

Input order is preserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List

from .models import Location


@dataclass(frozen=True)
class LocationFilter:
    category_ids: FrozenSet[str] = field(default_factory=frozenset)
    tag_ids: FrozenSet[str] = field(default_factory=frozenset)
    search: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.category_ids and not self.tag_ids and not self.search.strip()

    def toggle_category(self, category_id: str) -> LocationFilter:
        return replace(self, category_ids=self.category_ids ^ {category_id})

    def toggle_tag(self, tag_id: str) -> LocationFilter:
        return replace(self, tag_ids=self.tag_ids ^ {tag_id})

    def with_search(self, search: str) -> LocationFilter:
        return replace(self, search=search)


def matches(location: Location, criteria: LocationFilter) -> bool:
    if criteria.category_ids and location.category_id not in criteria.category_ids:
        return False

    if criteria.tag_ids and not (location.tags & criteria.tag_ids):
        return False

    needle = criteria.search.strip().casefold()
    if needle:
        if needle not in location.name.casefold() and needle not in location.address.casefold():
            return False

    return True


def filter_locations(locations: Iterable[Location], criteria: LocationFilter) -> List[Location]:
    if criteria.is_empty:
        return list(locations)
    return [location for location in locations if matches(location, criteria)]
