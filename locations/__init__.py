"""
Locations domain package.

Public API:
- Reference models: Location, Category, Tag
- Loading: LocationCatalog, load_catalog
- Query: LocationFilter, filter_locations
"""
from .models import Location, Category, Tag
from .catalog import LocationCatalog, load_catalog
from .filters import LocationFilter, filter_locations

__all__ = ["Location",
           "Category",
           "Tag",
           "LocationCatalog",
           "load_catalog",
           "LocationFilter",
           "filter_locations",
           ]
