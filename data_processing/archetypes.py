# halmoni_project_root/data_processing/archetypes.py
# HAL-MONI - ARCHETYPE SEED DATA

"""
Prototype residents used to seed the synthetic population.

The sub-domain scores (health, social, economic) are copied verbatim onto
every record built from an archetype; only the composite score is jittered.
"""

from typing import Tuple

from .models import Archetype

ARCHETYPES: Tuple[Archetype, ...] = (
    Archetype(
        name="김영희", name_en="Kim Young-hee", age=78, baseline_score=82,
        health=72, social=85, economic=77, last_contact="5 days ago",
        alerts=("No water usage for 36 hours", "Missed weekly check-in call"),
        history=("Lives alone", "Decreased mobility", "Limited family contact"),
    ),
    Archetype(
        name="박철수", name_en="Park Chul-soo", age=82, baseline_score=48,
        health=55, social=42, economic=38, last_contact="2 days ago",
        alerts=("Reduced social activity participation",),
        history=("Regular community center visits", "Good family support"),
    ),
    Archetype(
        name="이순자", name_en="Lee Soon-ja", age=74, baseline_score=28,
        health=28, social=30, economic=18, last_contact="1 day ago",
        alerts=(),
        history=("Active in community", "Regular medical check-ups"),
    ),
    Archetype(
        name="최말순", name_en="Choi Mal-soon", age=86, baseline_score=76,
        health=81, social=66, economic=70, last_contact="4 days ago",
        alerts=("Fall reported by neighbour", "Electricity usage dropped sharply overnight"),
        history=("Widowed", "Hip surgery last year", "Son lives in Seoul"),
    ),
    Archetype(
        name="정만식", name_en="Jung Man-sik", age=79, baseline_score=58,
        health=62, social=51, economic=57, last_contact="3 days ago",
        alerts=("Missed blood pressure medication refill",),
        history=("Hypertension", "Farms a small plot", "Lives with spouse"),
    ),
    Archetype(
        name="강복남", name_en="Kang Bok-nam", age=71, baseline_score=35,
        health=38, social=33, economic=29, last_contact="1 day ago",
        alerts=(),
        history=("Volunteers at village hall", "Daughter visits weekly"),
    ),
    Archetype(
        name="윤옥자", name_en="Yoon Ok-ja", age=91, baseline_score=89,
        health=88, social=90, economic=84, last_contact="8 days ago",
        alerts=("No movement detected since yesterday morning", "Heating not used during cold snap",
                "Missed two check-in calls"),
        history=("Lives alone in remote hamlet", "Early-stage dementia", "No nearby relatives"),
    ),
    Archetype(
        name="한동일", name_en="Han Dong-il", age=76, baseline_score=52,
        health=46, social=61, economic=49, last_contact="2 days ago",
        alerts=("Stopped attending senior centre lunches",),
        history=("Recently widowed", "Manages diabetes"),
    ),
    Archetype(
        name="서금자", name_en="Seo Geum-ja", age=73, baseline_score=22,
        health=21, social=26, economic=31, last_contact="Today",
        alerts=(),
        history=("Walking group member", "Lives with daughter's family"),
    ),
    Archetype(
        name="오영식", name_en="Oh Young-sik", age=84, baseline_score=67,
        health=71, social=58, economic=65, last_contact="3 days ago",
        alerts=("Water usage irregular for 3 days",),
        history=("COPD", "Limited bus access to clinic", "Lives alone"),
    ),
)
