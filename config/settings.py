# halmoni_project_root/config/settings.py
# HAL-MONI - CENTRALIZED CONFIGURATION HUB

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

settings_logger = logging.getLogger(__name__)

# --- Nested Models for Structured Configuration ---
class RiskThresholdsConfig(BaseModel):
    """Lower bounds (inclusive) of the Moderate and High risk bands."""
    high_threshold: float = 70.0
    moderate_threshold: float = 40.0

    @model_validator(mode='after')
    def check_band_order(self) -> 'RiskThresholdsConfig':
        if self.moderate_threshold >= self.high_threshold:
            raise ValueError(
                f"moderate_threshold ({self.moderate_threshold}) must be below high_threshold ({self.high_threshold})"
            )
        return self

class SynthesisConfig(BaseModel):
    default_total: int = Field(50, gt=0)
    default_coordinate_policy: Literal["deterministic-offset", "uniform-random"] = "uniform-random"
    # score jitter for record i is (i mod jitter_modulus) - jitter_center
    jitter_modulus: int = Field(7, gt=0)
    jitter_center: int = 3
    # jittered scores are clamped to [score_floor, score_ceiling]
    score_floor: int = 15; score_ceiling: int = 95
    # age offset is ((i // archetype_count) mod age_cycle) * age_step_years
    age_step_years: int = 1
    age_cycle: int = Field(5, gt=0)
    # seeds the default generator of the uniform-random policy; None is unseeded
    random_seed: Optional[int] = None
    # (dlat, dlng) in degrees, applied to the region center
    offset_table: List[Tuple[float, float]] = [
        (0.0, 0.0), (0.04, 0.03), (-0.03, 0.04), (0.02, -0.05),
        (-0.05, -0.02), (0.05, 0.05), (-0.04, -0.05), (0.01, 0.02),
    ]

class BoundsConfig(BaseModel):
    min_lat: float; max_lat: float
    min_lng: float; max_lng: float

class RegionConfig(BaseModel):
    color: str
    korean_name: str
    bounds: BoundsConfig
    boundary: List[Tuple[float, float]] = Field(default_factory=list)

# --- Main Settings Class ---
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='HALMONI_', case_sensitive=False, env_file='.env', env_file_encoding='utf-8', env_nested_delimiter='__', extra='ignore')

    PROJECT_ROOT_DIR: Path = Path(__file__).resolve().parent.parent
    APP_NAME: str = "HAL-MONI Risk Index"; APP_VERSION: str = "1.2.0"
    APP_TAGLINE: str = "Healthy Ageing Link - Model for Organized Network Integration"
    ORGANIZATION_NAME: str = "HAL-MONI Pilot Program - Gangwon Province"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    STYLE_CSS_PATH: Path = Path(__file__).resolve().parent.parent / "assets" / "style.css"

    RISK_THRESHOLDS: RiskThresholdsConfig = RiskThresholdsConfig()
    SYNTHESIS: SynthesisConfig = SynthesisConfig()

    # Round-robin assignment follows this order.
    REGIONS: Dict[str, RegionConfig] = {
        "Jeongseon-gun": RegionConfig(
            color="#2563EB", korean_name="정선군",
            bounds=BoundsConfig(min_lat=37.25, max_lat=37.55, min_lng=128.55, max_lng=128.95),
            boundary=[(37.54, 128.62), (37.52, 128.88), (37.42, 128.94), (37.28, 128.86),
                      (37.26, 128.68), (37.35, 128.56), (37.47, 128.57)],
        ),
        "Yanggu-gun": RegionConfig(
            color="#9333EA", korean_name="양구군",
            bounds=BoundsConfig(min_lat=38.05, max_lat=38.25, min_lng=127.85, max_lng=128.10),
            boundary=[(38.24, 127.90), (38.23, 128.06), (38.15, 128.09), (38.06, 128.05),
                      (38.06, 127.90), (38.12, 127.86)],
        ),
        "Inje-gun": RegionConfig(
            color="#059669", korean_name="인제군",
            bounds=BoundsConfig(min_lat=37.95, max_lat=38.25, min_lng=128.15, max_lng=128.55),
            boundary=[(38.24, 128.20), (38.22, 128.45), (38.12, 128.54), (37.98, 128.48),
                      (37.96, 128.28), (38.05, 128.16)],
        ),
    }

    CARE_WORKER_NAME: str = "Jung Min-ji"; CARE_WORKER_REGION: str = "Inje-gun"

    MAP_STYLE: str = "carto-positron"; MAP_DEFAULT_CENTER: Tuple[float, float] = (37.85, 128.35); MAP_DEFAULT_ZOOM: int = 8
    WEB_MAP_DEFAULT_HEIGHT: int = 600

    COLOR_PRIMARY: str = "#2563EB"; COLOR_SECONDARY: str = "#7C3AED"; COLOR_ACCENT: str = "#0D9488"
    COLOR_BACKGROUND_PAGE: str = "#F9FAFB"; COLOR_BACKGROUND_CONTENT: str = "#FFFFFF"
    COLOR_TEXT_PRIMARY: str = "#374151"; COLOR_TEXT_HEADINGS: str = "#1F2937"; COLOR_TEXT_MUTED: str = "#6B7280"
    COLOR_RISK_HIGH: str = "#EF4444"; COLOR_RISK_MODERATE: str = "#EAB308"; COLOR_RISK_LOW: str = "#22C55E"
    PLOTLY_COLORWAY: List[str] = [COLOR_PRIMARY, COLOR_SECONDARY, COLOR_ACCENT, COLOR_RISK_MODERATE, COLOR_RISK_HIGH]

    @model_validator(mode='after')
    def check_region_catalog(self) -> 'Settings':
        """Rectangles must be non-empty and pairwise disjoint; outlines must sit inside their rectangle."""
        if not self.REGIONS:
            raise ValueError("REGIONS must define at least one region")
        for region_id, cfg in self.REGIONS.items():
            b = cfg.bounds
            if b.min_lat >= b.max_lat or b.min_lng >= b.max_lng:
                raise ValueError(f"Region '{region_id}' has empty bounds")
            for lat, lng in cfg.boundary:
                if not (b.min_lat <= lat <= b.max_lat and b.min_lng <= lng <= b.max_lng):
                    raise ValueError(f"Boundary vertex ({lat}, {lng}) of '{region_id}' lies outside its bounds")
        items = list(self.REGIONS.items())
        for i, (id_a, a) in enumerate(items):
            for id_b, b in items[i + 1:]:
                if (a.bounds.min_lat <= b.bounds.max_lat and b.bounds.min_lat <= a.bounds.max_lat and
                        a.bounds.min_lng <= b.bounds.max_lng and b.bounds.min_lng <= a.bounds.max_lng):
                    raise ValueError(f"Regions '{id_a}' and '{id_b}' have overlapping bounds")
        return self

    @computed_field
    @property
    def RISK_LEVEL_COLORS(self) -> Dict[str, str]:
        return {"High": self.COLOR_RISK_HIGH, "Moderate": self.COLOR_RISK_MODERATE, "Low": self.COLOR_RISK_LOW}

    @computed_field
    @property
    def APP_FOOTER_TEXT(self) -> str: return f"© {datetime.now().year} {self.ORGANIZATION_NAME}. " + " • ".join(self.REGIONS)

try:
    settings = Settings()
    settings_logger.info(f"HAL-MONI settings loaded successfully. App: {settings.APP_NAME} v{settings.APP_VERSION}")
except Exception as e:
    settings_logger.critical(f"FATAL: Could not initialize Pydantic settings. Error: {e}", exc_info=True)
    raise
