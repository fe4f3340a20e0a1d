# halmoni_project_root/analytics/risk_classification.py
# HAL-MONI - RISK CLASSIFIER

import logging
import math
import numbers
from decimal import Decimal

import numpy as np
import pandas as pd

from config import settings
from data_processing.models import RiskLevel

logger = logging.getLogger(__name__)


def classify_risk(score: float) -> RiskLevel:
    """
    Maps a composite score to a risk level. Each band is inclusive at its
    lower bound: >= 70 is High, >= 40 is Moderate, anything below is Low.
    No clamping is applied, so scores outside 0-100 are classified as-is.
    Decimal and Fraction scores are compared exactly; complex numbers are rejected.
    """
    if isinstance(score, bool) or not isinstance(score, (numbers.Real, Decimal)):
        raise TypeError(f"Risk score must be a real number, got {type(score).__name__}")
    if math.isnan(score):
        raise ValueError("Risk score must not be NaN")

    thresholds = settings.RISK_THRESHOLDS
    if score >= thresholds.high_threshold:
        return RiskLevel.HIGH
    if score >= thresholds.moderate_threshold:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def classify_risk_series(scores: pd.Series) -> pd.Series:
    """Vectorized classify_risk for a Series of scores. NaN stays NaN."""
    if not isinstance(scores, pd.Series):
        raise TypeError("classify_risk_series expects a pandas Series")

    numeric = pd.to_numeric(scores, errors='coerce')
    thresholds = settings.RISK_THRESHOLDS
    conditions = [(numeric >= thresholds.high_threshold).to_numpy(), (numeric >= thresholds.moderate_threshold).to_numpy()]
    choices = [RiskLevel.HIGH.value, RiskLevel.MODERATE.value]
    levels = pd.Series(np.select(conditions, choices, default=RiskLevel.LOW.value), index=scores.index, dtype=object)
    levels = levels.where(numeric.notna(), np.nan)

    logger.debug(f"Classified {numeric.notna().sum()} of {len(scores)} scores.")
    return levels
