# halmoni_project_root/analytics/__init__.py
# HAL-MONI - EXPLICIT PACKAGE API

"""
Initializes the analytics package, making key functions and classes
available at the top level for easier importing.

This __init__.py defines the public API for the package.
"""

# From risk_classification.py
from .risk_classification import classify_risk, classify_risk_series

# From assignment.py
from .assignment import filter_by_region, records_in_jurisdiction, sort_by_risk

# From interventions.py
from .interventions import INTERVENTION_ACTIONS, ActionPriority, InterventionAction, Recommendation, recommend_actions

# From summary.py
from .summary import count_by_risk_level, summarize_by_region

# --- Define the public API for the analytics package ---
__all__ = [
    # Classification
    "classify_risk",
    "classify_risk_series",

    # Worklist assignment
    "filter_by_region",
    "records_in_jurisdiction",
    "sort_by_risk",

    # Interventions
    "INTERVENTION_ACTIONS",
    "ActionPriority",
    "InterventionAction",
    "Recommendation",
    "recommend_actions",

    # Summaries
    "count_by_risk_level",
    "summarize_by_region",
]
