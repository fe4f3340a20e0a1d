# halmoni_project_root/visualization/__init__.py
# HAL-MONI - EXPLICIT PACKAGE API

"""
Initializes the visualization package, defining its public API.
This file explicitly exports all public-facing functions from its submodules,
providing a single, consistent import point for the rest of the application.
"""

# --- Core Plotting Functions from plots.py ---
from .plots import (
    set_plotly_theme,
    create_empty_figure,
    plot_risk_donut_chart,
    plot_region_risk_bar_chart,
    plot_region_map,
)

# --- Custom UI Element Renderers from ui_elements.py ---
from .ui_elements import (
    load_and_inject_css,
    render_risk_count_card,
    render_risk_badge,
    render_domain_score,
)

# --- Define the canonical public API for the package ---
__all__ = [
    # from plots.py
    "set_plotly_theme",
    "create_empty_figure",
    "plot_risk_donut_chart",
    "plot_region_risk_bar_chart",
    "plot_region_map",

    # from ui_elements.py
    "load_and_inject_css",
    "render_risk_count_card",
    "render_risk_badge",
    "render_domain_score",
]
