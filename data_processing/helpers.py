# halmoni_project_root/data_processing/helpers.py
# HAL-MONI - TABULAR CONVERSION HELPERS

"""
Converts immutable population records into pandas structures for the
dashboard and map layers, and hashes them for caching. Records themselves
are never modified here.
"""
import hashlib
import logging
from typing import Iterable, List, Optional

import pandas as pd

from .models import PersonRecord

logger = logging.getLogger(__name__)

POPULATION_COLUMNS: List[str] = [
    'id', 'name', 'name_en', 'age', 'region', 'risk_score', 'risk_level',
    'health', 'social', 'economic', 'last_contact', 'alert_count',
    'alerts', 'history', 'latitude', 'longitude',
]


def population_to_dataframe(population: Iterable[PersonRecord]) -> pd.DataFrame:
    """
    One row per record. `risk_level` is the plain string value, alerts and
    history are joined with '; ' so the frame stays hashable for caching.
    """
    rows = [
        {
            'id': p.id, 'name': p.name, 'name_en': p.name_en, 'age': p.age,
            'region': p.region, 'risk_score': p.risk_score, 'risk_level': p.risk_level.value,
            'health': p.health, 'social': p.social, 'economic': p.economic,
            'last_contact': p.last_contact, 'alert_count': len(p.alerts),
            'alerts': '; '.join(p.alerts), 'history': '; '.join(p.history),
            'latitude': p.latitude, 'longitude': p.longitude,
        }
        for p in population
    ]
    df = pd.DataFrame(rows, columns=POPULATION_COLUMNS)
    logger.debug(f"Converted {len(df)} population records to a DataFrame.")
    return df


def hash_population(population: Optional[Iterable[PersonRecord]]) -> Optional[str]:
    """
    SHA256 over the records' JSON, in population order. Equal populations
    hash equal across processes, so this can key Streamlit's data cache.
    """
    if population is None:
        return None
    digest = hashlib.sha256()
    count = 0
    for record in population:
        if not isinstance(record, PersonRecord):
            raise TypeError(f"hash_population expects PersonRecord items, got {type(record).__name__}")
        digest.update(record.model_dump_json().encode('utf-8'))
        digest.update(b'\n')
        count += 1
    digest.update(f"records:{count}".encode('utf-8'))
    return digest.hexdigest()
