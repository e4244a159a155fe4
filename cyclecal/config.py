"""Environment-driven settings for cyclecal.

Values come from the process environment, with a local ``.env`` file loaded
once on import.
"""

import logging
import os
from datetime import date

from dotenv import load_dotenv

from cyclecal.models.constants import DEFAULT_REST_WEEKS, DEFAULT_WEEK_STARTS_ON, DEFAULT_WORK_WEEKS
from cyclecal.models.cycle_config import CycleConfig, WeekStartDay

load_dotenv()

CYCLE_START_DATE = os.getenv("CYCLE_START_DATE", "2026-01-01")
WORK_WEEKS = int(os.getenv("WORK_WEEKS", str(DEFAULT_WORK_WEEKS)))
REST_WEEKS = int(os.getenv("REST_WEEKS", str(DEFAULT_REST_WEEKS)))
WEEK_STARTS_ON = int(os.getenv("WEEK_STARTS_ON", str(DEFAULT_WEEK_STARTS_ON)))
CALENDAR_YEAR = int(os.getenv("CALENDAR_YEAR", "2026"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def default_cycle_config() -> CycleConfig:
    """Build the CycleConfig described by the environment."""
    return CycleConfig(
        cycle_start_date=date.fromisoformat(CYCLE_START_DATE),
        work_weeks=WORK_WEEKS,
        rest_weeks=REST_WEEKS,
        week_starts_on=WeekStartDay(WEEK_STARTS_ON),
    )


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
