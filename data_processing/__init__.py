# halmoni_project_root/data_processing/__init__.py
# HAL-MONI - EXPLICIT PACKAGE API

"""
Initializes the data_processing package, defining its public API.

Reference data (regions, archetypes), the immutable record models, and the
geometric predicates used for region membership.
"""

# --- Domain Models from models.py ---
from .models import (
    Archetype,
    BoundingBox,
    Coordinate,
    CoordinatePolicy,
    PersonRecord,
    PopulationConfig,
    Region,
    RiskLevel,
)

# --- Geofence Predicates from geometry.py ---
from .geometry import point_in_polygon, point_in_rectangle

# --- Region Catalog from regions.py ---
from .regions import all_regions, locate_region, region_contains, region_ids, region_info

# --- Seed Data from archetypes.py ---
from .archetypes import ARCHETYPES

# --- Tabular Helpers from helpers.py ---
from .helpers import hash_population, population_to_dataframe


__all__ = [
    # models.py
    "Archetype",
    "BoundingBox",
    "Coordinate",
    "CoordinatePolicy",
    "PersonRecord",
    "PopulationConfig",
    "Region",
    "RiskLevel",

    # geometry.py
    "point_in_polygon",
    "point_in_rectangle",

    # regions.py
    "all_regions",
    "locate_region",
    "region_contains",
    "region_ids",
    "region_info",

    # archetypes.py
    "ARCHETYPES",

    # helpers.py
    "hash_population",
    "population_to_dataframe",
]
