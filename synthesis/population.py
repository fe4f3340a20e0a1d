# halmoni_project_root/synthesis/population.py
# HAL-MONI - POPULATION SYNTHESIZER

"""
Builds the synthetic resident population the dashboard runs on.

Records are produced by cycling through the archetype templates and the
region catalog by index:

- archetype = archetypes[i mod len(archetypes)]
- region    = regions[i mod len(regions)] (round-robin, not weighted)
- score     = clamp(baseline + (i mod 7) - 3, 15, 95)
- id        = i + 1

Placement depends on the coordinate policy. "deterministic-offset" adds an
entry of a fixed offset table to the region center, so repeated builds are
identical. "uniform-random" samples uniformly inside the region rectangle
from the supplied random source; only coordinates vary between builds.
Either way every coordinate is checked against its region's bounds.
"""

import logging
from collections import Counter
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from analytics.risk_classification import classify_risk
from config import settings
from data_processing.archetypes import ARCHETYPES
from data_processing.models import (Archetype, Coordinate, CoordinatePolicy,
                                    PersonRecord, PopulationConfig, Region)
from data_processing.regions import all_regions, region_contains

logger = logging.getLogger(__name__)

ConfigLike = Union[PopulationConfig, dict, None]


def default_population_config() -> PopulationConfig:
    return PopulationConfig(
        total=settings.SYNTHESIS.default_total,
        coordinate_policy=settings.SYNTHESIS.default_coordinate_policy,
    )


def _resolve_config(config: ConfigLike) -> PopulationConfig:
    if config is None:
        return default_population_config()
    if isinstance(config, PopulationConfig):
        return config
    if isinstance(config, dict):
        base = default_population_config().model_dump()
        base.update(config)
        return PopulationConfig.model_validate(base)
    raise TypeError(f"config must be a PopulationConfig or dict, got {type(config).__name__}")


def jitter(index: int) -> int:
    """Symmetric perturbation in [-3, +3], cycling with period 7."""
    cfg = settings.SYNTHESIS
    return (index % cfg.jitter_modulus) - cfg.jitter_center


def composite_score(baseline: int, index: int) -> int:
    cfg = settings.SYNTHESIS
    return max(cfg.score_floor, min(cfg.score_ceiling, baseline + jitter(index)))


def _offset_coordinate(region: Region, index: int) -> Coordinate:
    offsets = settings.SYNTHESIS.offset_table
    if not offsets:
        raise ValueError("The deterministic-offset policy needs a non-empty offset table")
    dlat, dlng = offsets[index % len(offsets)]
    center = region.bounds.center
    return Coordinate(latitude=center.latitude + dlat, longitude=center.longitude + dlng)


def _uniform_coordinate(region: Region, rng: np.random.Generator) -> Coordinate:
    b = region.bounds
    return Coordinate(
        latitude=b.min_lat + rng.random() * (b.max_lat - b.min_lat),
        longitude=b.min_lng + rng.random() * (b.max_lng - b.min_lng),
    )


def build_population(
    config: ConfigLike = None,
    rng: Optional[np.random.Generator] = None,
    archetypes: Sequence[Archetype] = ARCHETYPES,
    regions: Optional[Sequence[Region]] = None
) -> Tuple[PersonRecord, ...]:
    """
    Returns a freshly built, immutable sequence of `total` records.

    `rng` is only consumed by the uniform-random policy. When omitted, a
    generator seeded from `settings.SYNTHESIS.random_seed` is created; with
    no seed configured the coordinates differ on every call. Pass a seeded
    `np.random.default_rng(seed)` for reproducible output.
    """
    cfg = _resolve_config(config)
    regions = tuple(regions) if regions is not None else all_regions()
    if not archetypes:
        raise ValueError("At least one archetype is required to build a population")
    if not regions:
        raise ValueError("At least one region is required to build a population")

    if cfg.coordinate_policy is CoordinatePolicy.UNIFORM_RANDOM and rng is None:
        rng = np.random.default_rng(settings.SYNTHESIS.random_seed)

    synth = settings.SYNTHESIS
    records = []
    for i in range(cfg.total):
        archetype_index = i % len(archetypes)
        archetype = archetypes[archetype_index]
        region = regions[i % len(regions)]
        score = composite_score(archetype.baseline_score, i)

        if cfg.coordinate_policy is CoordinatePolicy.DETERMINISTIC_OFFSET:
            point = _offset_coordinate(region, i)
        else:
            point = _uniform_coordinate(region, rng)
        if not region_contains(region, point.latitude, point.longitude):
            raise ValueError(
                f"Record {i + 1} placed at ({point.latitude:.5f}, {point.longitude:.5f}) "
                f"falls outside region '{region.region_id}'"
            )

        age_offset = ((i // len(archetypes)) % synth.age_cycle) * synth.age_step_years
        records.append(PersonRecord(
            id=i + 1,
            name=archetype.name,
            name_en=archetype.name_en,
            age=archetype.age + age_offset,
            region=region.region_id,
            risk_score=score,
            risk_level=classify_risk(score),
            health=archetype.health,
            social=archetype.social,
            economic=archetype.economic,
            last_contact=archetype.last_contact,
            alerts=archetype.alerts,
            history=archetype.history,
            latitude=point.latitude,
            longitude=point.longitude,
            archetype_index=archetype_index,
        ))

    split = Counter(r.region for r in records)
    logger.info(
        f"Built population of {len(records)} records ({cfg.coordinate_policy.value}); "
        f"region split: {dict(split)}"
    )
    return tuple(records)
