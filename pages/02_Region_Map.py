# halmoni_project_root/pages/02_Region_Map.py
# Regional resident map for HAL-MONI

import logging

import streamlit as st

from analytics import filter_by_region
from config import settings
from data_processing import all_regions, region_ids
from synthesis.cached import get_cached_population, get_cached_population_frame, get_cached_region_summary
from visualization import plot_region_map

logger = logging.getLogger(__name__)

st.title("🗺️ Region Map")
st.markdown(f"**Resident locations across the pilot regions - {settings.APP_NAME}**")
st.divider()

population = get_cached_population(settings.SYNTHESIS.default_total, settings.SYNTHESIS.default_coordinate_policy)

ALL_REGIONS_LABEL = "All Regions"
selected = st.selectbox("Show residents in:", options=[ALL_REGIONS_LABEL] + list(region_ids()))

shown = population if selected == ALL_REGIONS_LABEL else filter_by_region(population, selected)
residents_df = get_cached_population_frame(shown)

st.plotly_chart(plot_region_map(residents_df, all_regions(), f"Residents: {selected}"), use_container_width=True)
logger.info(f"Region map rendered for '{selected}' with {len(residents_df)} residents.")

st.subheader("Regional Summary")
st.dataframe(get_cached_region_summary(population), hide_index=True, use_container_width=True)
