"""
constants.py

Fixed pricing tags and rate tables for training quotes.
These values are set by the published training price sheet and
are not editable from the form.
"""

from enum import Enum
from types import MappingProxyType

# =========================================================
# APPLICATION METADATA
# =========================================================
APP_VERSION = "v1.2.0"
APP_TITLE = "Training Price Calculator"


# =========================================================
# ENUMERATED TAGS
# =========================================================
class TrainingType(str, Enum):
    IN_PERSON = "in-person"
    VIRTUAL = "virtual"


class DurationBucket(str, Enum):
    MIN_60 = "60"
    MIN_90 = "90"
    MIN_240 = "240"
    MIN_480 = "480"


class TrainerRole(str, Enum):
    LEAD = "lead"
    TRAINER = "trainer"
    APPRENTICE = "apprentice"


class TrainerLocation(str, Enum):
    LOCAL = "local"
    TRAVELING = "traveling"


class TravelTime(str, Enum):
    LOCAL = "Local"
    HALF_DAY = "Half day"
    FULL_DAY = "Full day"
    EXTENDED = "Extended"
    NOT_APPLICABLE = "N/A"


class TravelCosting(str, Enum):
    ITEMIZED = "itemized"
    FLAT_FEE = "flat-fee"


# =========================================================
# TRAINER RATES (USD per trainer per session)
# =========================================================
_IP = TrainingType.IN_PERSON
_VI = TrainingType.VIRTUAL
_L, _T, _A = TrainerRole.LEAD, TrainerRole.TRAINER, TrainerRole.APPRENTICE

TRAINER_RATES = MappingProxyType({
    _IP: MappingProxyType({
        DurationBucket.MIN_60: MappingProxyType({_L: 500, _T: 350, _A: 150}),
        DurationBucket.MIN_90: MappingProxyType({_L: 750, _T: 500, _A: 200}),
        DurationBucket.MIN_240: MappingProxyType({_L: 1000, _T: 750, _A: 300}),
        DurationBucket.MIN_480: MappingProxyType({_L: 1500, _T: 1000, _A: 400}),
    }),
    _VI: MappingProxyType({
        DurationBucket.MIN_60: MappingProxyType({_L: 300, _T: 210, _A: 90}),
        DurationBucket.MIN_90: MappingProxyType({_L: 450, _T: 300, _A: 120}),
        DurationBucket.MIN_240: MappingProxyType({_L: 600, _T: 450, _A: 180}),
        DurationBucket.MIN_480: MappingProxyType({_L: 900, _T: 600, _A: 240}),
    }),
})

# =========================================================
# FLAT TRAVEL FEES (USD per person, flat-fee costing)
# =========================================================
TRAVEL_FEES = MappingProxyType({
    TravelTime.LOCAL: 0,
    TravelTime.HALF_DAY: 250,
    TravelTime.FULL_DAY: 500,
    TravelTime.EXTENDED: 1000,
    TravelTime.NOT_APPLICABLE: 0,
})

# =========================================================
# PROJECT MANAGEMENT / ADMINISTRATION
# =========================================================
PM_RATE = 125
ADMIN_PERCENTAGE = 0.30

# =========================================================
# TRAVEL ASSUMPTIONS (itemized costing)
# =========================================================
# IRS standard mileage rate, shown as a hint next to mileage cost
MILEAGE_RATE = 0.67
MEAL_ALLOWANCE_PER_DAY = 75

DEFAULT_FLIGHT_COST = 400
DEFAULT_LODGING_COST_PER_NIGHT = 150

# =========================================================
# DISPLAY LABELS
# =========================================================
TRAINING_TYPE_LABELS = MappingProxyType({
    TrainingType.IN_PERSON: "In Person",
    TrainingType.VIRTUAL: "Virtual",
})

DURATION_LABELS = MappingProxyType({
    DurationBucket.MIN_60: "60 minutes",
    DurationBucket.MIN_90: "90 minutes",
    DurationBucket.MIN_240: "2-4 hours",
    DurationBucket.MIN_480: "5-8 hours",
})

ROLE_LABELS = MappingProxyType({
    TrainerRole.LEAD: "Lead Trainer",
    TrainerRole.TRAINER: "Trainer",
    TrainerRole.APPRENTICE: "Apprentice",
})

LOCATION_LABELS = MappingProxyType({
    TrainerLocation.LOCAL: "Local",
    TrainerLocation.TRAVELING: "Traveling",
})

TRAVEL_COSTING_LABELS = MappingProxyType({
    TravelCosting.ITEMIZED: "Itemized per person",
    TravelCosting.FLAT_FEE: "Flat fee by travel time",
})
