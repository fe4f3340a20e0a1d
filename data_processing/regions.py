# halmoni_project_root/data_processing/regions.py
# HAL-MONI - REGION CATALOG

"""
Static lookup of the pilot regions (county-level catchment areas).

The catalog is built once from settings and never changes for the life of
the process. Region order matters: the population synthesizer assigns
records to regions round-robin in catalog order.
"""

import logging
from functools import lru_cache
from typing import Dict, Optional, Tuple

from config import settings
from .geometry import point_in_polygon, point_in_rectangle
from .models import BoundingBox, Region

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _catalog() -> Dict[str, Region]:
    # settings has already rejected overlapping bounds and stray outline vertices
    regions = {
        region_id: Region(
            region_id=region_id, korean_name=cfg.korean_name, color=cfg.color,
            bounds=BoundingBox(**cfg.bounds.model_dump()),
            boundary=tuple(tuple(v) for v in cfg.boundary),
        )
        for region_id, cfg in settings.REGIONS.items()
    }
    logger.debug(f"Region catalog built with {len(regions)} regions: {', '.join(regions)}")
    return regions


def region_ids() -> Tuple[str, ...]:
    """Region identifiers in catalog order."""
    return tuple(_catalog())


def all_regions() -> Tuple[Region, ...]:
    return tuple(_catalog().values())


def region_info(region_id: str) -> Region:
    """Returns the region's color and bounds. Unknown identifiers raise ValueError."""
    try:
        return _catalog()[region_id]
    except KeyError:
        raise ValueError(f"Unknown region '{region_id}'. Known regions: {', '.join(region_ids())}") from None


def region_contains(region: Region, lat: float, lng: float, use_boundary: bool = False) -> bool:
    """
    Membership test for a coordinate. By default the rectangular bounds are
    used; with `use_boundary` the drawn outline is used where one exists.
    """
    if use_boundary and region.boundary:
        return point_in_polygon(lat, lng, region.boundary)
    return point_in_rectangle(lat, lng, region.bounds)


def locate_region(lat: float, lng: float) -> Optional[str]:
    """The region whose bounds contain the point, or None. Bounds are disjoint."""
    for region in _catalog().values():
        if point_in_rectangle(lat, lng, region.bounds):
            return region.region_id
    return None
