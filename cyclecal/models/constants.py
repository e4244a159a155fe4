"""Constants for cyclecal.

This module centralizes default values used throughout the application.
"""

from datetime import timedelta


# Cycle defaults (6 work weeks + 1 rest week)
DEFAULT_WORK_WEEKS = 6
DEFAULT_REST_WEEKS = 1
DEFAULT_WEEK_STARTS_ON = 1  # Monday

DAYS_PER_WEEK = 7
ONE_WEEK = timedelta(days=DAYS_PER_WEEK)
ONE_DAY = timedelta(days=1)

# Fallback label for cycles without a user-defined name
CYCLE_LABEL_PREFIX = "Cycle"

# Storage key template for per-year cycle names
CYCLE_NAMES_KEY_TEMPLATE = "cycle-names-{year}"
