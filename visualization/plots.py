# halmoni_project_root/visualization/plots.py
# HAL-MONI - CENTRALIZED PLOTTING FACTORY

import logging
from typing import Any, Dict, Iterable, Optional

import html
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import plotly.io as pio

from config import settings
from data_processing.models import Region, RiskLevel

logger = logging.getLogger(__name__)

# --- Helper Functions ---
def _hex_to_rgba(hex_color: str, alpha: float) -> str:
    """Converts a hex color string to an rgba string for Plotly compatibility."""
    hex_color = hex_color.lstrip('#')
    if len(hex_color) != 6: return 'rgba(0,0,0,0.1)'
    try:
        rgb = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
        return f'rgba({rgb[0]}, {rgb[1]}, {rgb[2]}, {alpha})'
    except ValueError:
        return 'rgba(0,0,0,0.1)'

# --- Theme Setup ---
def set_plotly_theme():
    """Sets the custom HAL-MONI theme as the default for all Plotly charts."""
    base_layout = {
        'font': {'family': "sans-serif", 'size': 12, 'color': settings.COLOR_TEXT_PRIMARY},
        'title': {'x': 0.5, 'xanchor': 'center', 'font': {'size': 18, 'color': settings.COLOR_TEXT_HEADINGS}},
        'paper_bgcolor': settings.COLOR_BACKGROUND_CONTENT,
        'plot_bgcolor': settings.COLOR_BACKGROUND_CONTENT,
        'margin': dict(l=60, r=40, t=60, b=60),
        'legend': dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1, font={'size': 10}),
        'xaxis': {'showgrid': False, 'zeroline': False},
        'yaxis': {'gridcolor': '#e9ecef', 'zeroline': False},
    }
    halmoni_template = go.layout.Template(layout=base_layout)
    halmoni_template.layout.colorway = settings.PLOTLY_COLORWAY
    pio.templates['halmoni'] = halmoni_template
    pio.templates.default = 'halmoni'
    logger.debug("Custom 'halmoni' Plotly theme applied.")

# --- Factory Functions for Charts ---
def create_empty_figure(title: str, message: str = "No data available.") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        title_text=f"<b>{html.escape(title)}</b>",
        xaxis={"visible": False}, yaxis={"visible": False},
        annotations=[{"text": html.escape(message), "xref": "paper", "yref": "paper", "showarrow": False, "font": {"size": 14, "color": settings.COLOR_TEXT_MUTED}}]
    )
    return fig

def plot_risk_donut_chart(counts: Dict[RiskLevel, int], title: str) -> go.Figure:
    """Donut of residents per risk level, colored with the risk palette."""
    if not counts or sum(counts.values()) == 0: return create_empty_figure(title)
    try:
        df = pd.DataFrame({'risk_level': [RiskLevel(k).value for k in counts], 'count': list(counts.values())})
        fig = px.pie(df, names='risk_level', values='count', title=f"<b>{html.escape(title)}</b>", hole=0.5,
                     color='risk_level', color_discrete_map=settings.RISK_LEVEL_COLORS)
        fig.update_traces(textinfo='percent+label', textposition='inside', marker_line_width=2, marker_line_color=settings.COLOR_BACKGROUND_CONTENT, hovertemplate='<b>%{label}</b><br>Residents: %{value}<br>Share: %{percent}<extra></extra>')
        fig.update_layout(legend_title_text="Risk Level"); return fig
    except Exception as e: logger.error(f"Failed to create donut chart '{title}': {e}", exc_info=True); return create_empty_figure(title, "Error generating chart.")

def plot_region_risk_bar_chart(summary_df: pd.DataFrame, title: str) -> go.Figure:
    """Stacked bars of risk levels per region, from summarize_by_region output."""
    if not isinstance(summary_df, pd.DataFrame) or summary_df.empty: return create_empty_figure(title)
    try:
        level_cols = [level.value for level in RiskLevel if level.value in summary_df.columns]
        long_df = summary_df.melt(id_vars='region', value_vars=level_cols, var_name='risk_level', value_name='residents')
        fig = px.bar(long_df, x='region', y='residents', color='risk_level', title=f"<b>{html.escape(title)}</b>",
                     color_discrete_map=settings.RISK_LEVEL_COLORS, labels={'region': 'Region', 'residents': 'Residents', 'risk_level': 'Risk Level'})
        fig.update_yaxes(tickformat='d', range=[0, None])
        fig.update_layout(barmode='stack'); return fig
    except Exception as e: logger.error(f"Failed to create bar chart '{title}': {e}", exc_info=True); return create_empty_figure(title, "Error generating chart.")

def plot_region_map(
    residents_df: pd.DataFrame, regions: Iterable[Region], title: str,
    map_height: Optional[int] = None, **layout_kwargs: Any
) -> go.Figure:
    """
    Region outlines filled in each region's color, with one marker per
    resident colored by risk level. Regions without an outline are drawn
    as their bounding rectangle.
    """
    try:
        fig = go.Figure()
        for region in regions:
            b = region.bounds
            ring = list(region.boundary) or [(b.min_lat, b.min_lng), (b.min_lat, b.max_lng), (b.max_lat, b.max_lng), (b.max_lat, b.min_lng)]
            ring = ring + [ring[0]]
            fig.add_trace(go.Scattermap(
                lat=[v[0] for v in ring], lon=[v[1] for v in ring], mode='lines', fill='toself',
                fillcolor=_hex_to_rgba(region.color, 0.2), line=dict(color=region.color, width=2),
                name=f"{region.region_id} ({region.korean_name})", hoverinfo='name'
            ))

        if isinstance(residents_df, pd.DataFrame) and not residents_df.empty:
            for level in RiskLevel:
                subset = residents_df[residents_df['risk_level'] == level.value]
                if subset.empty: continue
                hover_text = subset.apply(lambda r: f"<b>{html.escape(str(r['name_en']))}</b> ({html.escape(str(r['name']))})<br>Age: {r['age']}<br>Risk Score: {r['risk_score']}", axis=1)
                fig.add_trace(go.Scattermap(
                    lat=subset['latitude'], lon=subset['longitude'], mode='markers',
                    marker=dict(size=11, color=settings.RISK_LEVEL_COLORS[level.value]),
                    name=f"{level.value} Risk", text=hover_text, hovertemplate='%{text}<extra></extra>'
                ))

        fig.update_layout(
            title_text=f"<b>{html.escape(title)}</b>",
            map=dict(style=settings.MAP_STYLE, zoom=settings.MAP_DEFAULT_ZOOM,
                        center={"lat": settings.MAP_DEFAULT_CENTER[0], "lon": settings.MAP_DEFAULT_CENTER[1]}),
            margin={"r": 0, "t": 40, "l": 0, "b": 0}, height=map_height or settings.WEB_MAP_DEFAULT_HEIGHT,
            **layout_kwargs
        )
        return fig
    except Exception as e: logger.error(f"Failed to create region map '{title}': {e}", exc_info=True); return create_empty_figure(title, "Error generating map.")
