# halmoni_project_root/pages/01_Care_Worker_Dashboard.py
# Care Worker worklist view for HAL-MONI

import html
import logging

import streamlit as st

from analytics import filter_by_region, recommend_actions
from config import settings
from data_processing import PersonRecord, region_ids, region_info
from synthesis.cached import get_cached_population
from visualization import render_domain_score, render_risk_badge

logger = logging.getLogger(__name__)

st.title("🧑‍⚕️ Care Worker Dashboard")
st.markdown("Monitor and respond to elderly residents in your assigned area")
st.divider()

population = get_cached_population(settings.SYNTHESIS.default_total, settings.SYNTHESIS.default_coordinate_policy)

# --- Sidebar: Assigned Region ---
with st.sidebar:
    st.header("Assignment")
    regions = list(region_ids())
    default_idx = regions.index(settings.CARE_WORKER_REGION) if settings.CARE_WORKER_REGION in regions else 0
    selected_region = st.selectbox("Assigned Region:", options=regions, index=default_idx,
                                   format_func=lambda r: f"{r} ({region_info(r).korean_name})")
    st.caption(f"Care worker: {settings.CARE_WORKER_NAME}")

worklist = filter_by_region(population, selected_region)
logger.info(f"Rendering worklist for {selected_region}: {len(worklist)} residents.")

if not worklist:
    st.info(f"No residents are assigned to {selected_region}.")
    st.stop()


def _render_record_details(elder: PersonRecord) -> None:
    score_cols = st.columns(3)
    with score_cols[0]: render_domain_score("Health", elder.health)
    with score_cols[1]: render_domain_score("Social", elder.social)
    with score_cols[2]: render_domain_score("Economic", elder.economic)

    st.markdown("**Recommended Actions:**")
    recommendations = recommend_actions(elder.risk_level)
    action_cols = st.columns(3)
    for idx, rec in enumerate(recommendations):
        with action_cols[idx % 3]:
            st.button(f"{rec.action.icon} {rec.action.label}", key=f"action_{elder.id}_{idx}",
                      type="primary" if rec.is_priority else "secondary", use_container_width=True)

    st.markdown("**History & Notes:**")
    st.markdown("\n".join(f"- {html.escape(note)}" for note in elder.history))


for elder in worklist:
    with st.container(border=True):
        head_cols = st.columns([0.8, 0.2])
        with head_cols[0]:
            st.markdown(f"### {html.escape(elder.name)} ({html.escape(elder.name_en)})")
            render_risk_badge(elder.risk_level)
            st.caption(f"📍 {elder.region} • Age: {elder.age} • Last Contact: {elder.last_contact}")
            for alert in elder.alerts:
                st.error(f"🔔 {alert}")
        with head_cols[1]:
            st.metric("Risk Score", elder.risk_score)

        with st.expander("Details"):
            _render_record_details(elder)
