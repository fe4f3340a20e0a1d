# halmoni_project_root/data_processing/models.py
# HAL-MONI - IMMUTABLE DOMAIN MODELS

"""
Domain records for the vulnerability index.

Every model is frozen: a population is built once and then only read.
Rebuilding means calling the synthesizer again, never editing a record.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RiskLevel(str, Enum):
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Position in the total order High > Moderate > Low."""
        return _RISK_RANKS[self]


_RISK_RANKS = {RiskLevel.HIGH: 2, RiskLevel.MODERATE: 1, RiskLevel.LOW: 0}


class CoordinatePolicy(str, Enum):
    DETERMINISTIC_OFFSET = "deterministic-offset"
    UNIFORM_RANDOM = "uniform-random"


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class BoundingBox(BaseModel):
    """Axis-aligned latitude/longitude rectangle, inclusive on every edge."""
    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @model_validator(mode='after')
    def check_non_empty(self) -> 'BoundingBox':
        if self.min_lat >= self.max_lat or self.min_lng >= self.max_lng:
            raise ValueError(f"Bounding box is empty: {self!r}")
        return self

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            latitude=(self.min_lat + self.max_lat) / 2,
            longitude=(self.min_lng + self.max_lng) / 2,
        )


class Region(BaseModel):
    model_config = ConfigDict(frozen=True)

    region_id: str
    korean_name: str
    color: str
    bounds: BoundingBox
    # Display outline, (lat, lng) vertices in drawing order.
    boundary: Tuple[Tuple[float, float], ...] = ()


class Archetype(BaseModel):
    """A canned prototype resident the synthesizer cycles through."""
    model_config = ConfigDict(frozen=True)

    name: str
    name_en: str
    age: int = Field(gt=0)
    baseline_score: int
    health: int = Field(ge=0, le=100)
    social: int = Field(ge=0, le=100)
    economic: int = Field(ge=0, le=100)
    last_contact: str
    alerts: Tuple[str, ...] = ()
    history: Tuple[str, ...] = ()


class PersonRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    name_en: str
    age: int = Field(gt=0)
    region: str
    risk_score: int
    risk_level: RiskLevel
    health: int
    social: int
    economic: int
    last_contact: str
    alerts: Tuple[str, ...] = ()
    history: Tuple[str, ...] = ()
    latitude: float
    longitude: float
    archetype_index: int = Field(ge=0)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class PopulationConfig(BaseModel):
    """Options recognised by the population synthesizer."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    total: int = Field(50, gt=0, strict=True)
    coordinate_policy: CoordinatePolicy = CoordinatePolicy.UNIFORM_RANDOM


__all__ = [
    "RiskLevel", "CoordinatePolicy", "Coordinate", "BoundingBox",
    "Region", "Archetype", "PersonRecord", "PopulationConfig",
]
