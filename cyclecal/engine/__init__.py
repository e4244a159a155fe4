"""Block generation and query engine for cyclecal."""

from cyclecal.engine.errors import CycleCalendarError, InvalidConfiguration
from cyclecal.engine.generator import cached_year_blocks, generate_year_blocks, start_of_week
from cyclecal.engine.query import (
    count_distinct_cycles,
    cycle_number_for_date,
    filter_by_cycle,
    filter_by_type,
    find_block_for_date,
    is_rest_week,
    is_work_week,
)
from cyclecal.engine.filtering import apply_filters

__all__ = [
    "CycleCalendarError",
    "InvalidConfiguration",
    "generate_year_blocks",
    "cached_year_blocks",
    "start_of_week",
    "find_block_for_date",
    "cycle_number_for_date",
    "filter_by_type",
    "filter_by_cycle",
    "count_distinct_cycles",
    "is_work_week",
    "is_rest_week",
    "apply_filters",
]
