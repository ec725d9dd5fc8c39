"""
config.py

Runtime settings read from the environment. Rate tables are fixed in
constants.py; only operational knobs live here.
"""

import logging
import os
from dataclasses import dataclass

from training_quote.constants import TravelCosting

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    travel_costing: TravelCosting = TravelCosting.ITEMIZED
    log_level: str = "INFO"
    json_logs: bool = False


def load_settings(environ=None) -> Settings:
    env = os.environ if environ is None else environ

    raw_costing = env.get("TRAINING_QUOTE_TRAVEL_COSTING", TravelCosting.ITEMIZED.value).strip().lower()
    try:
        travel_costing = TravelCosting(raw_costing)
    except ValueError:
        logger.warning("Unknown TRAINING_QUOTE_TRAVEL_COSTING %r, using itemized", raw_costing)
        travel_costing = TravelCosting.ITEMIZED

    log_level = env.get("LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown LOG_LEVEL %r, using INFO", log_level)
        log_level = "INFO"

    json_logs = env.get("TRAINING_QUOTE_JSON_LOGS", "").strip().lower() in _TRUTHY

    return Settings(travel_costing=travel_costing, log_level=log_level, json_logs=json_logs)
