# halmoni_project_root/synthesis/__init__.py
# HAL-MONI - EXPLICIT PACKAGE API

"""
Initializes the synthesis package. The Streamlit cache wrapper lives in
`synthesis.cached` and is imported by the UI layer only, so the core can be
used without Streamlit.
"""

from .population import build_population, composite_score, default_population_config, jitter

__all__ = [
    "build_population",
    "composite_score",
    "default_population_config",
    "jitter",
]
