# halmoni_project_root/visualization/ui_elements.py
# HAL-MONI - THEME-AWARE UI COMPONENTS

import html
import logging
from pathlib import Path
from typing import Mapping, Union

import streamlit as st

from analytics.risk_classification import classify_risk
from config import settings
from data_processing.models import RiskLevel

logger = logging.getLogger(__name__)

LEVEL_CARD_TEXT: Mapping[RiskLevel, tuple] = {
    RiskLevel.HIGH: ("🚨", "Requires immediate attention"),
    RiskLevel.MODERATE: ("📈", "Monitor closely"),
    RiskLevel.LOW: ("💚", "Regular check-ins"),
}


@st.cache_resource
def load_and_inject_css(css_path: Union[str, Path]) -> None:
    """Injects the dashboard stylesheet. A missing stylesheet leaves pages unstyled."""
    path = Path(css_path)
    try:
        css = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Stylesheet {path} could not be read, pages will render unstyled: {e}")
        return
    st.markdown(f'<style>{css}</style>', unsafe_allow_html=True)
    logger.debug(f"Injected stylesheet {path} ({len(css)} chars).")


def render_risk_count_card(level: Union[RiskLevel, str], count: int, total: int) -> None:
    """
    Overview card for one risk band: how many residents fall in it and what
    share of the monitored population that is. The left edge takes the band
    color through the `status-<level>` class.
    """
    level = RiskLevel(level)
    icon, guidance = LEVEL_CARD_TEXT[level]
    share = f"{count / total:.0%} of {total:,}" if total else "no residents"

    card_html = f"""
    <div class="kpi-card status-{level.value.lower()}" title="{html.escape(guidance)}">
        <div class="kpi-header">
            <span class="kpi-icon">{icon}</span>
            <div class="kpi-title">{html.escape(level.value)} Risk</div>
        </div>
        <p class="kpi-value">{count:,}<span class="kpi-units"> residents</span></p>
        <div class="kpi-share">{html.escape(share)}</div>
    </div>
    """
    st.markdown(card_html, unsafe_allow_html=True)


def render_risk_badge(risk_level: Union[RiskLevel, str]) -> None:
    """Renders a pill-shaped '<Level> Risk' badge in the level's color."""
    level = RiskLevel(risk_level)
    color = settings.RISK_LEVEL_COLORS[level.value]
    badge_html = (
        f'<span class="risk-badge risk-{level.value.lower()}" style="background-color:{color};">'
        f'{html.escape(level.value)} Risk</span>'
    )
    st.markdown(badge_html, unsafe_allow_html=True)


def render_domain_score(label: str, score: int) -> None:
    """
    One sub-domain score (health, social or economic) on its 0-100 scale.
    The fill is colored by the band the score would fall in.
    """
    band = classify_risk(score)
    color = settings.RISK_LEVEL_COLORS[band.value]
    fill = min(max(score, 0), 100)

    score_html = f"""
    <div class="domain-score domain-{band.value.lower()}">
        <div class="domain-score-label">{html.escape(label)}</div>
        <div class="domain-score-value">{score}<span class="domain-score-scale">/100</span></div>
        <div class="domain-score-track"><div class="domain-score-fill" style="width:{fill}%;background-color:{color};"></div></div>
    </div>
    """
    st.markdown(score_html, unsafe_allow_html=True)
