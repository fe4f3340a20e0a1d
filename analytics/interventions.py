# halmoni_project_root/analytics/interventions.py
# HAL-MONI - RECOMMENDED INTERVENTIONS

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from data_processing.models import RiskLevel


class ActionPriority(Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class InterventionAction:
    label: str
    icon: str
    priority: ActionPriority


@dataclass(frozen=True)
class Recommendation:
    action: InterventionAction
    is_priority: bool


INTERVENTION_ACTIONS: Tuple[InterventionAction, ...] = (
    InterventionAction("Emergency Call", "📞", ActionPriority.URGENT),
    InterventionAction("Home Visit", "🏠", ActionPriority.URGENT),
    InterventionAction("Health Check-up", "🩺", ActionPriority.HIGH),
    InterventionAction("Community Event", "👥", ActionPriority.MEDIUM),
    InterventionAction("Schedule Follow-up", "📅", ActionPriority.MEDIUM),
    InterventionAction("Wellness Check", "❤️", ActionPriority.LOW),
)


def recommend_actions(risk_level: RiskLevel) -> List[Recommendation]:
    """All actions in display order; urgent ones are flagged only for High risk."""
    level = RiskLevel(risk_level)
    return [
        Recommendation(action=a, is_priority=(level is RiskLevel.HIGH and a.priority is ActionPriority.URGENT))
        for a in INTERVENTION_ACTIONS
    ]
