# halmoni_project_root/analytics/assignment.py
# HAL-MONI - ASSIGNMENT FILTER (CARE WORKER WORKLIST)

import logging
from typing import Iterable, Tuple

from data_processing.models import PersonRecord
from data_processing.regions import region_contains, region_info

logger = logging.getLogger(__name__)


def sort_by_risk(records: Iterable[PersonRecord]) -> Tuple[PersonRecord, ...]:
    """
    Orders records High, then Moderate, then Low. The sort is stable, so
    records of the same level keep their original relative order.
    """
    return tuple(sorted(records, key=lambda p: -p.risk_level.rank))


def filter_by_region(population: Iterable[PersonRecord], region_id: str) -> Tuple[PersonRecord, ...]:
    """
    Records assigned to `region_id`, prioritized by descending risk level.
    Raises ValueError for an unknown region; returns an empty tuple when
    nothing matches.
    """
    region_info(region_id)
    worklist = sort_by_risk(p for p in population if p.region == region_id)
    logger.debug(f"Worklist for {region_id}: {len(worklist)} records.")
    return worklist


def records_in_jurisdiction(
    population: Iterable[PersonRecord],
    region_id: str,
    use_boundary: bool = False
) -> Tuple[PersonRecord, ...]:
    """
    Geofence variant of filter_by_region: selects by coordinate rather than
    by the assigned region label, then prioritizes by risk level.
    """
    region = region_info(region_id)
    inside = sort_by_risk(
        p for p in population if region_contains(region, p.latitude, p.longitude, use_boundary=use_boundary)
    )
    logger.debug(f"Geofence {region_id} (boundary={use_boundary}): {len(inside)} records inside.")
    return inside
