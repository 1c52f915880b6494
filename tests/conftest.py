import datetime
from pathlib import Path

import pytest

from planner_kit.models import DocumentMargins, DocumentProfile, PlannerPreferences

ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = ROOT / "config"


@pytest.fixture
def config_dir() -> Path:
    return CONFIG_DIR


@pytest.fixture
def binding_margins() -> DocumentMargins:
    return DocumentMargins(top=36, bottom=54, inside=54, outside=36)


@pytest.fixture
def letter_profile(binding_margins) -> DocumentProfile:
    return DocumentProfile(
        description="US Letter, coil bound",
        page_width=612,
        page_height=792,
        margins=binding_margins,
        facing_pages=True,
    )


@pytest.fixture
def preferences_2024() -> PlannerPreferences:
    return PlannerPreferences(start_date=datetime.date(2024, 1, 1))
