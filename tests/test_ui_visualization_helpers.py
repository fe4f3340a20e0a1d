# halmoni_project_root/tests/test_ui_visualization_helpers.py
# HAL-MONI - VISUALIZATION & UI TESTS

from unittest.mock import MagicMock, patch

import plotly.graph_objects as go
import pytest

from analytics import count_by_risk_level, summarize_by_region
from config import settings
from data_processing import RiskLevel, all_regions
from visualization import (create_empty_figure, plot_region_map,
                           plot_region_risk_bar_chart, plot_risk_donut_chart,
                           render_domain_score, render_risk_badge, render_risk_count_card,
                           set_plotly_theme)

# Fixtures are sourced from conftest.py

@pytest.fixture(scope="module", autouse=True)
def apply_theme():
    """Apply the custom Plotly theme for all tests in this module."""
    set_plotly_theme()

# --- Plotting Tests ---
def test_create_empty_figure_properties():
    fig = create_empty_figure(title="Empty Test", message="No data here.")
    assert isinstance(fig, go.Figure)
    assert "Empty Test" in fig.layout.title.text
    assert fig.layout.annotations[0].text == "No data here."

def test_risk_donut_chart_structure(random_population):
    fig = plot_risk_donut_chart(count_by_risk_level(random_population), "Residents by Risk Level")
    assert len(fig.data) == 1 and fig.data[0].type == 'pie'
    assert fig.data[0].hole > 0.4
    assert "Residents by Risk Level" in fig.layout.title.text

def test_risk_donut_chart_empty_counts():
    fig = plot_risk_donut_chart({level: 0 for level in RiskLevel}, "Nothing")
    assert fig.layout.annotations[0].text == "No data available."

def test_region_bar_chart_structure(random_population):
    fig = plot_region_risk_bar_chart(summarize_by_region(random_population), "Risk Levels by Region")
    assert all(trace.type == 'bar' for trace in fig.data)
    assert {trace.name for trace in fig.data} == {"High", "Moderate", "Low"}

def test_region_map_has_outline_per_region_and_risk_markers(population_df):
    fig = plot_region_map(population_df, all_regions(), "Pilot Regions")
    outlines = [t for t in fig.data if t.mode == 'lines']
    markers = [t for t in fig.data if t.mode == 'markers']
    assert len(outlines) == len(all_regions())
    assert sum(len(t.lat) for t in markers) == len(population_df)
    assert all(t.type == 'scattermap' for t in fig.data)
    assert fig.layout.map.style == settings.MAP_STYLE
    assert fig.layout.map.zoom == settings.MAP_DEFAULT_ZOOM

def test_region_map_without_residents_still_draws_regions():
    fig = plot_region_map(None, all_regions(), "Empty Map")
    assert len(fig.data) == len(all_regions())

# --- UI Element Tests ---
@patch('visualization.ui_elements.st')
def test_render_risk_count_card_html(mock_st):
    mock_st.markdown = MagicMock()
    render_risk_count_card(RiskLevel.HIGH, 12, total=50)
    html_output = mock_st.markdown.call_args[0][0]
    assert 'class="kpi-card status-high"' in html_output
    assert '<div class="kpi-title">High Risk</div>' in html_output
    assert '12<span class="kpi-units"> residents</span>' in html_output
    assert '24% of 50' in html_output
    assert 'title="Requires immediate attention"' in html_output

@patch('visualization.ui_elements.st')
def test_render_risk_count_card_empty_population(mock_st):
    mock_st.markdown = MagicMock()
    render_risk_count_card("Low", 0, total=0)
    html_output = mock_st.markdown.call_args[0][0]
    assert 'status-low' in html_output
    assert 'no residents' in html_output

@patch('visualization.ui_elements.st')
def test_render_risk_badge_uses_level_color(mock_st):
    mock_st.markdown = MagicMock()
    render_risk_badge("Moderate")
    html_output = mock_st.markdown.call_args[0][0]
    assert settings.COLOR_RISK_MODERATE in html_output
    assert 'Moderate Risk' in html_output

@pytest.mark.parametrize("score, band", [(85, "High"), (70, "High"), (45, "Moderate"), (39, "Low")])
@patch('visualization.ui_elements.st')
def test_render_domain_score_colors_by_band(mock_st, score, band):
    mock_st.markdown = MagicMock()
    render_domain_score("Health", score)
    html_output = mock_st.markdown.call_args[0][0]
    assert f'domain-score domain-{band.lower()}' in html_output
    assert f'width:{score}%;background-color:{settings.RISK_LEVEL_COLORS[band]}' in html_output
    assert f'{score}<span class="domain-score-scale">/100</span>' in html_output
