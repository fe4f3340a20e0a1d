# halmoni_project_root/tests/conftest.py
# HAL-MONI - PYTEST FIXTURES

import sys
from pathlib import Path

# --- Path Setup for Module Imports ---
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import numpy as np
import pandas as pd
import pytest

from data_processing import PopulationConfig, population_to_dataframe
from synthesis import build_population

# --- Core Data Fixtures ---

@pytest.fixture
def seeded_rng() -> np.random.Generator:
    """A fresh, seeded random source for reproducible uniform-random builds."""
    return np.random.default_rng(20240601)


@pytest.fixture(scope="session")
def deterministic_population():
    """The default-sized population placed with the fixed offset table."""
    return build_population(PopulationConfig(total=50, coordinate_policy="deterministic-offset"))


@pytest.fixture(scope="session")
def random_population():
    """The default-sized population placed uniformly at random (seeded)."""
    return build_population(
        PopulationConfig(total=50, coordinate_policy="uniform-random"),
        rng=np.random.default_rng(7),
    )


# --- Transformed Fixtures ---

@pytest.fixture(scope="session")
def population_df(random_population) -> pd.DataFrame:
    """Tabular view of the random population, as the dashboard sees it."""
    return population_to_dataframe(random_population)
