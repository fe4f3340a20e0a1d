# halmoni_project_root/tests/test_settings.py
# HAL-MONI - CONFIGURATION VALIDATION TESTS

import pytest
from pydantic import ValidationError

from config.settings import BoundsConfig, RegionConfig, RiskThresholdsConfig, Settings


def _region(min_lat, max_lat, min_lng, max_lng, boundary=()):
    return RegionConfig(
        color="#000000", korean_name="테스트",
        bounds=BoundsConfig(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng),
        boundary=list(boundary),
    )


def test_default_settings_load():
    s = Settings()
    assert list(s.REGIONS) == ["Jeongseon-gun", "Yanggu-gun", "Inje-gun"]
    assert s.RISK_THRESHOLDS.high_threshold == 70
    assert s.RISK_THRESHOLDS.moderate_threshold == 40


def test_overlapping_region_bounds_are_rejected():
    regions = {"A-gun": _region(37.0, 37.5, 128.0, 128.5), "B-gun": _region(37.4, 37.9, 128.4, 128.9)}
    with pytest.raises(ValidationError, match="overlapping bounds"):
        Settings(REGIONS=regions)


def test_touching_region_bounds_are_rejected():
    # Shared edges count as overlap: a point on the edge would belong to both.
    regions = {"A-gun": _region(37.0, 37.5, 128.0, 128.5), "B-gun": _region(37.5, 38.0, 128.0, 128.5)}
    with pytest.raises(ValidationError, match="overlapping bounds"):
        Settings(REGIONS=regions)


def test_outline_vertex_outside_bounds_is_rejected():
    regions = {"A-gun": _region(37.0, 37.5, 128.0, 128.5, boundary=[(37.1, 128.1), (37.4, 128.1), (37.6, 128.4)])}
    with pytest.raises(ValidationError, match="lies outside its bounds"):
        Settings(REGIONS=regions)


def test_empty_region_bounds_are_rejected():
    with pytest.raises(ValidationError, match="empty bounds"):
        Settings(REGIONS={"A-gun": _region(37.5, 37.5, 128.0, 128.5)})


def test_empty_region_catalog_is_rejected():
    with pytest.raises(ValidationError, match="at least one region"):
        Settings(REGIONS={})


def test_disjoint_custom_regions_load():
    regions = {"A-gun": _region(37.0, 37.5, 128.0, 128.5), "B-gun": _region(37.6, 38.0, 128.0, 128.5)}
    assert list(Settings(REGIONS=regions).REGIONS) == ["A-gun", "B-gun"]


def test_risk_band_order_is_enforced():
    with pytest.raises(ValidationError):
        RiskThresholdsConfig(high_threshold=40, moderate_threshold=70)
