"""
models.py

Form state records for the training price calculator: the trainer
roster, per-person travel details and the overall selection, plus the
derived cost breakdown. All records are immutable; roster helpers
return new tuples instead of mutating in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Tuple

from training_quote.constants import (
    DEFAULT_FLIGHT_COST,
    DEFAULT_LODGING_COST_PER_NIGHT,
    DurationBucket,
    TrainerLocation,
    TrainerRole,
    TrainingType,
    TravelCosting,
    TravelTime,
)

logger = logging.getLogger(__name__)


# =========================================================
# INPUT COERCION
# =========================================================
def parse_count(value: Any) -> int:
    """Trainer count from raw input; anything unusable becomes 1."""
    try:
        count = int(float(value))
    except (TypeError, ValueError):
        return 1
    return count if count >= 1 else 1


def parse_amount(value: Any) -> float:
    """Non-negative money amount from raw input; anything unusable becomes 0."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN fails every comparison
    if not amount >= 0:
        return 0.0
    return amount


def parse_nights(value: Any) -> int:
    try:
        nights = int(float(value))
    except (TypeError, ValueError):
        return 0
    return max(nights, 0)


# PM hours allow half-hour steps, so they share the amount rules
parse_hours = parse_amount


# =========================================================
# RECORDS
# =========================================================
@dataclass(frozen=True)
class TravelDetails:
    needs_flight: bool = False
    flight_cost: float = DEFAULT_FLIGHT_COST
    lodging_nights: int = 0
    lodging_cost_per_night: float = DEFAULT_LODGING_COST_PER_NIGHT
    mileage_cost: float = 0
    meal_allowance: float = 0
    other_expenses: float = 0


@dataclass(frozen=True)
class TrainerLine:
    id: int
    role: TrainerRole = TrainerRole.TRAINER
    count: int = 1
    location: TrainerLocation = TrainerLocation.LOCAL
    travel: TravelDetails = field(default_factory=TravelDetails)

    def __post_init__(self):
        # Tags may arrive as raw strings from widgets
        object.__setattr__(self, "role", TrainerRole(self.role))
        object.__setattr__(self, "location", TrainerLocation(self.location))


@dataclass(frozen=True)
class Selection:
    training_type: TrainingType = TrainingType.IN_PERSON
    duration: DurationBucket = DurationBucket.MIN_60
    trainers: Tuple[TrainerLine, ...] = ()
    pm_hours: float = 0
    travel_costing: TravelCosting = TravelCosting.ITEMIZED
    travel_time: TravelTime = TravelTime.LOCAL

    def __post_init__(self):
        object.__setattr__(self, "training_type", TrainingType(self.training_type))
        object.__setattr__(self, "duration", DurationBucket(self.duration))
        object.__setattr__(self, "travel_costing", TravelCosting(self.travel_costing))
        object.__setattr__(self, "travel_time", TravelTime(self.travel_time))
        object.__setattr__(self, "trainers", tuple(self.trainers))

    @property
    def is_in_person(self) -> bool:
        return self.training_type is TrainingType.IN_PERSON


@dataclass(frozen=True)
class Breakdown:
    trainers_cost: float
    travel_price: float
    traveling_count: int
    pm_cost: float
    subtotal: float
    admin_cost: float
    total: float


# =========================================================
# ROSTER OPERATIONS
# =========================================================
def default_selection(travel_costing=TravelCosting.ITEMIZED) -> Selection:
    """Form state at mount: one local lead trainer for a 60 minute in-person session."""
    return Selection(
        trainers=(TrainerLine(id=1, role=TrainerRole.LEAD),),
        travel_costing=travel_costing,
    )


def add_trainer(trainers) -> Tuple[TrainerLine, ...]:
    new_id = max((t.id for t in trainers), default=0) + 1
    logger.debug("Adding trainer line %d", new_id)
    return tuple(trainers) + (TrainerLine(id=new_id),)


def remove_trainer(trainers, trainer_id: int) -> Tuple[TrainerLine, ...]:
    """Drop a roster line; the last remaining line is never removed."""
    trainers = tuple(trainers)
    if len(trainers) <= 1:
        return trainers
    return tuple(t for t in trainers if t.id != trainer_id)


def update_trainer(trainers, trainer_id: int, **changes) -> Tuple[TrainerLine, ...]:
    if "count" in changes:
        changes["count"] = parse_count(changes["count"])
    return tuple(
        replace(t, **changes) if t.id == trainer_id else t
        for t in trainers
    )


def update_travel(trainers, trainer_id: int, **changes) -> Tuple[TrainerLine, ...]:
    for key, value in changes.items():
        if key == "needs_flight":
            changes[key] = bool(value)
        elif key == "lodging_nights":
            changes[key] = parse_nights(value)
        else:
            changes[key] = parse_amount(value)
    return tuple(
        replace(t, travel=replace(t.travel, **changes)) if t.id == trainer_id else t
        for t in trainers
    )
