# halmoni_project_root/analytics/summary.py
# HAL-MONI - POPULATION RISK SUMMARY

import logging
from collections import Counter
from typing import Dict, Iterable

import pandas as pd

from data_processing.helpers import population_to_dataframe
from data_processing.models import PersonRecord, RiskLevel
from data_processing.regions import region_ids

logger = logging.getLogger(__name__)


def count_by_risk_level(population: Iterable[PersonRecord]) -> Dict[RiskLevel, int]:
    """Counts per level, ordered High, Moderate, Low. Absent levels count zero."""
    counts = Counter(p.risk_level for p in population)
    return {level: counts.get(level, 0) for level in (RiskLevel.HIGH, RiskLevel.MODERATE, RiskLevel.LOW)}


def summarize_by_region(population: Iterable[PersonRecord]) -> pd.DataFrame:
    """
    One row per catalog region (catalog order), including regions with no
    records: record count, mean composite score and a count per risk level.
    """
    df = population_to_dataframe(population)
    level_cols = [level.value for level in (RiskLevel.HIGH, RiskLevel.MODERATE, RiskLevel.LOW)]

    if df.empty:
        level_counts = pd.DataFrame(0, index=pd.Index([], name='region'), columns=level_cols)
        stats = pd.DataFrame(index=pd.Index([], name='region'), columns=['records', 'avg_risk_score'])
    else:
        level_counts = pd.crosstab(df['region'], df['risk_level']).reindex(columns=level_cols, fill_value=0)
        stats = df.groupby('region').agg(records=('id', 'count'), avg_risk_score=('risk_score', 'mean'))

    summary = (stats.join(level_counts, how='outer')
               .reindex(list(region_ids()))
               .rename_axis('region')
               .reset_index())
    count_cols = ['records'] + level_cols
    summary[count_cols] = summary[count_cols].fillna(0).astype(int)
    summary['avg_risk_score'] = pd.to_numeric(summary['avg_risk_score'], errors='coerce').round(1)

    logger.debug(f"Summarized {int(summary['records'].sum())} records across {len(summary)} regions.")
    return summary
