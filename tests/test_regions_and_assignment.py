# halmoni_project_root/tests/test_regions_and_assignment.py
# HAL-MONI - REGION CATALOG, GEOFENCE & WORKLIST TESTS

import pytest

from analytics import filter_by_region, records_in_jurisdiction, sort_by_risk
from data_processing import (BoundingBox, PersonRecord, RiskLevel, all_regions, locate_region,
                             point_in_polygon, point_in_rectangle,
                             region_contains, region_ids, region_info)

# Fixtures are sourced from conftest.py

def _record(record_id: int, level: RiskLevel, region: str = "Inje-gun", score: int = 50) -> PersonRecord:
    center = region_info(region).bounds.center
    return PersonRecord(
        id=record_id, name="테스트", name_en=f"Test {record_id}", age=80, region=region,
        risk_score=score, risk_level=level, health=50, social=50, economic=50,
        last_contact="Today", latitude=center.latitude, longitude=center.longitude, archetype_index=0,
    )

# --- Geometry Predicates ---
def test_point_in_rectangle_includes_edges():
    box = BoundingBox(min_lat=0, max_lat=1, min_lng=0, max_lng=2)
    assert point_in_rectangle(0.5, 1.0, box)
    assert point_in_rectangle(0, 0, box)
    assert point_in_rectangle(1, 2, box)
    assert not point_in_rectangle(1.01, 1.0, box)
    assert not point_in_rectangle(0.5, -0.1, box)

def test_point_in_polygon_concave_shape():
    # U-shape open at the top: the notch between the arms is outside.
    u_shape = [(0, 0), (0, 3), (3, 3), (3, 2), (1, 2), (1, 1), (3, 1), (3, 0)]
    assert point_in_polygon(0.5, 1.5, u_shape)
    assert point_in_polygon(2, 0.5, u_shape)
    assert not point_in_polygon(2, 1.5, u_shape)
    assert not point_in_polygon(5, 5, u_shape)

def test_point_in_polygon_needs_three_vertices():
    assert not point_in_polygon(0, 0, [(0, 0), (1, 1)])

def test_empty_bounding_box_is_rejected():
    with pytest.raises(ValueError):
        BoundingBox(min_lat=1, max_lat=1, min_lng=0, max_lng=1)

# --- Region Catalog ---
def test_catalog_order_and_contents():
    assert region_ids() == ("Jeongseon-gun", "Yanggu-gun", "Inje-gun")
    for region in all_regions():
        assert region.color.startswith("#")
        assert region.bounds.min_lat < region.bounds.max_lat

def test_region_bounds_are_disjoint():
    for region in all_regions():
        b = region.bounds
        corners = [(b.min_lat, b.min_lng), (b.min_lat, b.max_lng), (b.max_lat, b.min_lng), (b.max_lat, b.max_lng)]
        assert all(locate_region(lat, lng) == region.region_id for lat, lng in corners)

def test_region_boundaries_lie_inside_bounds():
    for region in all_regions():
        assert region.boundary
        for lat, lng in region.boundary:
            assert point_in_rectangle(lat, lng, region.bounds)

def test_region_info_unknown_region_raises():
    with pytest.raises(ValueError, match="Unknown region"):
        region_info("Seoul")

def test_locate_region():
    for region in all_regions():
        center = region.bounds.center
        assert locate_region(center.latitude, center.longitude) == region.region_id
        assert region_contains(region, center.latitude, center.longitude, use_boundary=True)
    assert locate_region(35.1, 129.0) is None

def test_every_synthesized_record_locates_to_its_region(random_population):
    for record in random_population:
        assert locate_region(record.latitude, record.longitude) == record.region

# --- Assignment Filter ---
def test_filter_by_region_returns_only_that_region(random_population):
    worklist = filter_by_region(random_population, "Inje-gun")
    assert worklist
    assert all(p.region == "Inje-gun" for p in worklist)
    assert len(worklist) == sum(1 for p in random_population if p.region == "Inje-gun")

def test_filter_by_region_orders_high_moderate_low(random_population):
    for region_id in region_ids():
        ranks = [p.risk_level.rank for p in filter_by_region(random_population, region_id)]
        assert ranks == sorted(ranks, reverse=True)

def test_filter_by_region_is_stable_within_level():
    records = [
        _record(1, RiskLevel.LOW), _record(2, RiskLevel.HIGH), _record(3, RiskLevel.MODERATE),
        _record(4, RiskLevel.HIGH), _record(5, RiskLevel.LOW), _record(6, RiskLevel.MODERATE),
        _record(7, RiskLevel.HIGH, region="Yanggu-gun"),
    ]
    assert [p.id for p in filter_by_region(records, "Inje-gun")] == [2, 4, 3, 6, 1, 5]

def test_filter_by_region_is_repeatable(random_population):
    assert filter_by_region(random_population, "Yanggu-gun") == filter_by_region(random_population, "Yanggu-gun")

def test_filter_by_region_no_matches_returns_empty():
    assert filter_by_region([_record(1, RiskLevel.HIGH, region="Inje-gun")], "Jeongseon-gun") == ()
    assert filter_by_region([], "Inje-gun") == ()

def test_filter_by_region_unknown_region_raises(random_population):
    with pytest.raises(ValueError):
        filter_by_region(random_population, "Gangneung-si")

def test_filter_does_not_mutate_population(random_population):
    before = list(random_population)
    filter_by_region(random_population, "Jeongseon-gun")
    assert list(random_population) == before

def test_sort_by_risk_accepts_generators():
    ordered = sort_by_risk(r for r in [_record(1, RiskLevel.LOW), _record(2, RiskLevel.HIGH)])
    assert [p.id for p in ordered] == [2, 1]

# --- Geofence Jurisdiction ---
def test_jurisdiction_agrees_with_region_label(random_population):
    for region_id in region_ids():
        assert records_in_jurisdiction(random_population, region_id) == filter_by_region(random_population, region_id)

def test_jurisdiction_unknown_region_raises(random_population):
    with pytest.raises(ValueError):
        records_in_jurisdiction(random_population, "Nowhere-gun")
