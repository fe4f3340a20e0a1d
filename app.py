# halmoni_project_root/app.py
# HAL-MONI - APPLICATION ENTRY POINT (SYSTEM OVERVIEW)

import logging
import sys
from pathlib import Path
import html

try:
    _project_root = Path(__file__).resolve().parent
    if str(_project_root) not in sys.path:
        sys.path.insert(0, str(_project_root))

    import streamlit as st
    from config import settings
    from analytics import count_by_risk_level
    from synthesis.cached import get_cached_population, get_cached_region_summary
    from visualization import (load_and_inject_css, plot_region_risk_bar_chart,
                               plot_risk_donut_chart, render_risk_count_card, set_plotly_theme)

except ImportError as e:
    print(f"FATAL ERROR in app.py: A core module failed to import.", file=sys.stderr)
    print("1. Install the project with `pip install -e .`", file=sys.stderr)
    print("2. Run the app from the project root: `streamlit run app.py`", file=sys.stderr)
    print(f"\nPython Path: {sys.path}\nOriginal ImportError: {e}", file=sys.stderr)
    sys.exit(1)

# --- Global Configuration ---
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
    datefmt=settings.LOG_DATE_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=f"{settings.APP_NAME} - Overview",
    page_icon="👵",
    layout="wide", initial_sidebar_state="expanded",
    menu_items={"About": f"### {settings.APP_NAME} (v{settings.APP_VERSION})\n{settings.APP_FOOTER_TEXT}"}
)

load_and_inject_css(settings.STYLE_CSS_PATH)
set_plotly_theme()

population = get_cached_population(settings.SYNTHESIS.default_total, settings.SYNTHESIS.default_coordinate_policy)

# --- Application Header ---
st.title("HAL-MONI (할머니)")
st.subheader(settings.APP_TAGLINE)
st.caption("Predictive Risk Index for Rural Elder Care in Gangwon Province")
st.divider()

# --- Risk Level Cards ---
counts = count_by_risk_level(population)
card_cols = st.columns(3)
for col, (level, count) in zip(card_cols, counts.items()):
    with col:
        render_risk_count_card(level, count, total=len(population))

chart_cols = st.columns(2)
with chart_cols[0]:
    st.plotly_chart(plot_risk_donut_chart(counts, "Residents by Risk Level"), use_container_width=True)
with chart_cols[1]:
    st.plotly_chart(plot_region_risk_bar_chart(get_cached_region_summary(population), "Risk Levels by Region"), use_container_width=True)

# --- Vulnerability Index Components ---
st.header("Vulnerability Index Components")
components = {
    "🩺 Health Factors": ["Physical mobility", "Chronic conditions", "Medication adherence", "Recent hospitalizations"],
    "👥 Social Factors": ["Living situation", "Family contact frequency", "Community participation", "Social network size"],
    "💰 Economic Factors": ["Income stability", "Housing conditions", "Access to services", "Financial vulnerability"],
}
component_cols = st.columns(3)
for col, (heading, factors) in zip(component_cols, components.items()):
    with col:
        with st.container(border=True):
            st.subheader(heading)
            st.markdown("\n".join(f"- {html.escape(f)}" for f in factors))

st.divider()

with st.sidebar:
    st.header(f"{settings.APP_NAME}")
    st.caption(f"v{settings.APP_VERSION}")
    st.divider()
    st.info("Use the page list to open the Care Worker worklist or the Region Map.")
    st.divider()
    st.markdown(f"**{html.escape(settings.ORGANIZATION_NAME)}**")
    st.caption(settings.APP_FOOTER_TEXT)

logger.info("Overview page loaded successfully.")
