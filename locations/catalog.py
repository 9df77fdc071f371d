"""
Purpose: Load and hold the map's reference data.
What it does:
Reads three CSV files from a data directory (sampledata/ by default):

- locations.csv  : id, name, address, lat, lon, category_id, tags ("t1;t2")
- categories.csv : id, label, color
- tags.csv       : id, name

and exposes lookups by id. Loaded once at startup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pandas as pd

from .models import Category, Location, Tag

log = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "sampledata"
TAG_SEPARATOR = ";"


@dataclass(frozen=True)
class LocationCatalog:
    locations: Tuple[Location, ...] = ()
    categories: Dict[str, Category] = field(default_factory=dict)
    tags: Dict[str, Tag] = field(default_factory=dict)

    def get_location(self, location_id: Optional[str]) -> Optional[Location]:
        if location_id is None:
            return None
        for location in self.locations:
            if location.id == location_id:
                return location
        return None

    def get_category(self, category_id: str) -> Optional[Category]:
        return self.categories.get(category_id)

    def tag_name(self, tag_id: str) -> str:
        """Display name for a tag; unknown ids render as the id itself."""
        tag = self.tags.get(tag_id)
        return tag.name if tag else tag_id


def _split_tags(value) -> frozenset:
    if pd.isna(value):
        return frozenset()
    return frozenset(part.strip() for part in str(value).split(TAG_SEPARATOR) if part.strip())


def load_categories(path: Union[str, Path]) -> Dict[str, Category]:
    df = pd.read_csv(path, dtype=str).fillna("")
    return {
        row["id"]: Category(id=row["id"], label=row["label"], color=row["color"])
        for _, row in df.iterrows()
    }


def load_tags(path: Union[str, Path]) -> Dict[str, Tag]:
    df = pd.read_csv(path, dtype=str).fillna("")
    return {row["id"]: Tag(id=row["id"], name=row["name"]) for _, row in df.iterrows()}


def load_locations(path: Union[str, Path]) -> Tuple[Location, ...]:
    df = pd.read_csv(path, dtype=str)

    missing = {"id", "name", "lat", "lon", "category_id"} - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(sorted(missing))}")

    # rows without coordinates cannot be placed on the map
    unplaced = df["lat"].isna() | df["lon"].isna()
    if unplaced.any():
        log.warning("Skipping %d location(s) without coordinates in %s", int(unplaced.sum()), path)
        df = df[~unplaced]

    locations = []
    for _, row in df.iterrows():
        locations.append(
            Location(
                id=str(row["id"]),
                name=str(row["name"]),
                address="" if pd.isna(row.get("address")) else str(row.get("address")),
                coordinates=(float(row["lat"]), float(row["lon"])),
                category_id=str(row["category_id"]),
                tags=_split_tags(row.get("tags")),
            )
        )
    return tuple(locations)


def load_catalog(data_dir: Union[str, Path, None] = None) -> LocationCatalog:
    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR

    catalog = LocationCatalog(
        locations=load_locations(data_dir / "locations.csv"),
        categories=load_categories(data_dir / "categories.csv"),
        tags=load_tags(data_dir / "tags.csv"),
    )
    log.info(
        "Loaded %d locations, %d categories, %d tags from %s",
        len(catalog.locations), len(catalog.categories), len(catalog.tags), data_dir,
    )
    return catalog
