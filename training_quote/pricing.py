"""
pricing.py

Price breakdown for a training quote. Every call recomputes the whole
breakdown from the selection; nothing is cached between reruns.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from training_quote.constants import (
    ADMIN_PERCENTAGE,
    MEAL_ALLOWANCE_PER_DAY,
    MILEAGE_RATE,
    PM_RATE,
    TRAINER_RATES,
    TRAVEL_FEES,
    TrainerLocation,
    TravelCosting,
)
from training_quote.models import Breakdown, Selection, TrainerLine

logger = logging.getLogger(__name__)


# =========================================================
# TRAINER FEES
# =========================================================
def trainer_rate(selection: Selection, line: TrainerLine) -> float:
    return TRAINER_RATES[selection.training_type][selection.duration][line.role]


def trainer_fee(selection: Selection, line: TrainerLine) -> float:
    return trainer_rate(selection, line) * line.count


# =========================================================
# TRAVEL COSTING STRATEGIES
# =========================================================
def _itemized_per_person(line: TrainerLine) -> float:
    t = line.travel
    flight = t.flight_cost if t.needs_flight else 0
    lodging = t.lodging_nights * t.lodging_cost_per_night
    return flight + lodging + t.mileage_cost + t.meal_allowance + t.other_expenses


def _itemized_travel(selection: Selection, line: TrainerLine) -> float:
    if line.location is TrainerLocation.LOCAL:
        return 0
    return _itemized_per_person(line) * line.count


def _flat_fee_travel(selection: Selection, line: TrainerLine) -> float:
    # Every head pays the bucket fee; this costing has no local/traveling split
    return TRAVEL_FEES[selection.travel_time] * line.count


TRAVEL_STRATEGIES: Dict[TravelCosting, Callable[[Selection, TrainerLine], float]] = {
    TravelCosting.ITEMIZED: _itemized_travel,
    TravelCosting.FLAT_FEE: _flat_fee_travel,
}


def trainer_travel_cost(selection: Selection, line: TrainerLine) -> float:
    """Travel cost for one roster line (all heads on the line)."""
    if not selection.is_in_person:
        return 0
    return TRAVEL_STRATEGIES[selection.travel_costing](selection, line)


def is_traveling(selection: Selection, line: TrainerLine) -> bool:
    if not selection.is_in_person:
        return False
    if selection.travel_costing is TravelCosting.FLAT_FEE:
        return TRAVEL_FEES[selection.travel_time] > 0
    return line.location is TrainerLocation.TRAVELING


def traveling_count(selection: Selection) -> int:
    return sum(t.count for t in selection.trainers if is_traveling(selection, t))


def travel_components(line: TrainerLine) -> List[Tuple[str, float]]:
    """
    Non-zero itemized travel parts for a line, each already multiplied
    by the line's head count. Used for the per-trainer detail display.
    """
    t = line.travel
    parts = []
    if t.needs_flight:
        parts.append(("Flight", t.flight_cost * line.count))
    if t.lodging_nights > 0:
        parts.append(("Lodging", t.lodging_nights * t.lodging_cost_per_night * line.count))
    if t.mileage_cost > 0:
        parts.append(("Mileage", t.mileage_cost * line.count))
    if t.meal_allowance > 0:
        parts.append(("Meals", t.meal_allowance * line.count))
    if t.other_expenses > 0:
        parts.append(("Other", t.other_expenses * line.count))
    return parts


def suggested_mileage_cost(miles) -> float:
    return round(miles * MILEAGE_RATE, 2)


def suggested_meal_allowance(days) -> float:
    return days * MEAL_ALLOWANCE_PER_DAY


# =========================================================
# BREAKDOWN
# =========================================================
def compute_breakdown(selection: Selection) -> Breakdown:
    trainers_cost = sum(trainer_fee(selection, t) for t in selection.trainers)
    travel_price = sum(trainer_travel_cost(selection, t) for t in selection.trainers)
    pm_cost = selection.pm_hours * PM_RATE

    subtotal = trainers_cost + travel_price + pm_cost
    admin_cost = subtotal * ADMIN_PERCENTAGE
    total = subtotal + admin_cost

    logger.debug(
        "Breakdown %s/%s: trainers=%s travel=%s pm=%s total=%s",
        selection.training_type.value, selection.duration.value,
        trainers_cost, travel_price, pm_cost, total,
    )

    return Breakdown(
        trainers_cost=trainers_cost,
        travel_price=travel_price,
        traveling_count=traveling_count(selection),
        pm_cost=pm_cost,
        subtotal=subtotal,
        admin_cost=admin_cost,
        total=total,
    )
