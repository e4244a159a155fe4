"""Block generation for cyclecal.

Builds the ordered sequence of weekly work/rest blocks covering one calendar
year. The first cycle may start before January 1st so that a cycle spanning
the year boundary is represented by its in-year weeks; blocks are clipped to
the year on both ends.
"""

import logging
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from functools import lru_cache
from typing import List, Tuple

from cyclecal.engine.errors import InvalidConfiguration
from cyclecal.models.block import Block, BlockType
from cyclecal.models.constants import DAYS_PER_WEEK, ONE_WEEK
from cyclecal.models.cycle_config import CycleConfig, WeekStartDay

logger = logging.getLogger(__name__)


def start_of_week(day: date, week_starts_on: WeekStartDay = WeekStartDay.MONDAY) -> date:
    """Return the first day of the week containing ``day``.

    Args:
        day: Any date (datetimes are truncated to their date)
        week_starts_on: 0 for Sunday-based weeks, 1 for Monday-based weeks

    Returns:
        The Sunday or Monday on or before ``day``
    """
    if isinstance(day, datetime):
        day = day.date()
    # Python weekday: Monday=0 ... Sunday=6; shift so Sunday=0 ... Saturday=6
    sunday_based = (day.weekday() + 1) % DAYS_PER_WEEK
    offset = (sunday_based - int(week_starts_on)) % DAYS_PER_WEEK
    return day - timedelta(days=offset)


def validate_config(config: CycleConfig) -> None:
    """Raise InvalidConfiguration unless both work and rest weeks are positive."""
    if config.work_weeks < 1:
        raise InvalidConfiguration(f"work_weeks must be >= 1; got {config.work_weeks}.")
    if config.rest_weeks < 1:
        raise InvalidConfiguration(f"rest_weeks must be >= 1; got {config.rest_weeks}.")


def _first_anchor(config: CycleConfig, year_start: date) -> Tuple[date, int]:
    """Locate the start of the cycle containing ``year_start``.

    Returns the anchor date together with the cycle number it carries when
    counting from the (possibly rewound) configured anchor.
    """
    span = ONE_WEEK * config.cycle_length
    span_days = span.days
    anchor = start_of_week(config.cycle_start_date, config.week_starts_on)

    # Rewind whole cycles until the anchor is on or before January 1st.
    if anchor > year_start:
        cycles_back = -(-(anchor - year_start).days // span_days)
        anchor -= span * cycles_back

    # Cycles ending on or before January 1st emit nothing but are still counted.
    skipped = (year_start - anchor).days // span_days
    anchor += span * skipped
    return anchor, skipped + 1


def generate_year_blocks(config: CycleConfig, year: int) -> List[Block]:
    """Generate work/rest blocks for a calendar year.

    Cycle numbering starts at 1 from the configured anchor, or from the
    rewound anchor when the configured one lies after January 1st.

    Args:
        config: Cycle configuration (start date, week counts, week start day)
        year: Target calendar year

    Returns:
        Chronologically sorted blocks covering exactly [Jan 1, next Jan 1)

    Raises:
        InvalidConfiguration: If work_weeks or rest_weeks is below 1, or the
            year or cycle span does not fit the supported date range
    """
    validate_config(config)
    if not MINYEAR < year < MAXYEAR:
        raise InvalidConfiguration(f"year must be between {MINYEAR + 1} and {MAXYEAR - 1}; got {year}.")

    year_start = date(year, 1, 1)
    year_end = date(year + 1, 1, 1)

    try:
        cursor, cycle_number = _first_anchor(config, year_start)
    except OverflowError:
        raise InvalidConfiguration(
            f"{config.work_weeks}+{config.rest_weeks} week cycles anchored at "
            f"{config.cycle_start_date.isoformat()} do not fit the supported date range for {year}."
        ) from None
    logger.debug(
        f"Generating {config.work_weeks}+{config.rest_weeks} blocks for {year} "
        f"from anchor {cursor.isoformat()} (cycle {cycle_number})"
    )

    blocks: List[Block] = []
    while cursor < year_end:
        week_start = cursor
        for week_in_cycle in range(1, config.cycle_length + 1):
            if week_start >= year_end:
                break
            week_end = week_start + ONE_WEEK
            if week_end > year_start and week_start < year_end:
                blocks.append(
                    Block(
                        type=BlockType.WORK if week_in_cycle <= config.work_weeks else BlockType.REST,
                        cycle_number=cycle_number,
                        week_in_cycle=week_in_cycle,
                        start=max(week_start, year_start),
                        end=min(week_end, year_end),
                    )
                )
            week_start = week_end

        cursor = week_start
        cycle_number += 1

    logger.debug(f"Generated {len(blocks)} blocks for {year}")
    return blocks


@lru_cache(maxsize=64)
def cached_year_blocks(config: CycleConfig, year: int) -> Tuple[Block, ...]:
    """Memoized generate_year_blocks keyed by (config, year)."""
    return tuple(generate_year_blocks(config, year))
