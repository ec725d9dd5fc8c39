"""
Shared pytest fixtures for the training quote test suite.
"""
import logging
from datetime import datetime, timezone

import pytest

from training_quote.constants import TrainerLocation, TrainerRole
from training_quote.models import TrainerLine, TravelDetails


FIXED_NOW = datetime(2026, 10, 19, 9, 36, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def traveling_lead():
    """Two traveling lead trainers, each flying in for two nights."""
    return TrainerLine(
        id=1,
        role=TrainerRole.LEAD,
        count=2,
        location=TrainerLocation.TRAVELING,
        travel=TravelDetails(
            needs_flight=True,
            flight_cost=400,
            lodging_nights=2,
            lodging_cost_per_night=150,
            mileage_cost=50,
            meal_allowance=75,
            other_expenses=25,
        ),
    )


@pytest.fixture
def local_apprentice():
    return TrainerLine(id=2, role=TrainerRole.APPRENTICE, count=1)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
