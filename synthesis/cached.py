# halmoni_project_root/synthesis/cached.py
# HAL-MONI - STREAMLIT CACHING LAYER

from typing import Tuple

import pandas as pd
import streamlit as st

from analytics.summary import summarize_by_region
from data_processing.helpers import hash_population, population_to_dataframe
from data_processing.models import CoordinatePolicy, PersonRecord, PopulationConfig
from .population import build_population


@st.cache_resource(show_spinner="Building resident population...")
def get_cached_population(total: int, coordinate_policy: str) -> Tuple[PersonRecord, ...]:
    """
    Process-wide population, built once per (total, policy) and shared by
    every page and session. Records are immutable, so sharing is safe.
    """
    config = PopulationConfig(total=total, coordinate_policy=CoordinatePolicy(coordinate_policy))
    return build_population(config)


@st.cache_data(hash_funcs={tuple: hash_population})
def get_cached_population_frame(population: Tuple[PersonRecord, ...]) -> pd.DataFrame:
    """Cached wrapper for population_to_dataframe."""
    return population_to_dataframe(population)


@st.cache_data(hash_funcs={tuple: hash_population})
def get_cached_region_summary(population: Tuple[PersonRecord, ...]) -> pd.DataFrame:
    """Cached wrapper for summarize_by_region."""
    return summarize_by_region(population)
