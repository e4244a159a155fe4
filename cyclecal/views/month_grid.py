"""Month grid data: whole weeks of days, each tagged with its block."""

import calendar
from datetime import date
from typing import List, Sequence

from cyclecal.engine.generator import start_of_week
from cyclecal.engine.query import find_block_for_date
from cyclecal.models.block import Block
from cyclecal.models.constants import DAYS_PER_WEEK, ONE_DAY
from cyclecal.models.cycle_config import WeekStartDay
from cyclecal.models.views import GridDay, MonthGrid


def _month_bounds(year: int, month: int):
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def cycles_in_month(year: int, month: int, blocks: Sequence[Block]) -> List[int]:
    """Sorted distinct cycle numbers covering any day of the month."""
    first, last = _month_bounds(year, month)
    cycles = set()
    day = first
    while day <= last:
        block = find_block_for_date(day, blocks)
        if block is not None:
            cycles.add(block.cycle_number)
        day += ONE_DAY
    return sorted(cycles)


def build_month_grid(
    year: int,
    month: int,
    blocks: Sequence[Block],
    week_starts_on: WeekStartDay = WeekStartDay.MONDAY,
) -> MonthGrid:
    """Lay out a month as rows of 7 days.

    The grid starts at the first day of the week containing the 1st and ends
    with the week containing the last day of the month. Padding days from
    adjacent months still carry their block when one exists.
    """
    first, last = _month_bounds(year, month)
    day = start_of_week(first, week_starts_on)

    weeks: List[List[GridDay]] = []
    while day <= last:
        row = []
        for _ in range(DAYS_PER_WEEK):
            row.append(
                GridDay(
                    day=day,
                    in_month=day.month == month and day.year == year,
                    block=find_block_for_date(day, blocks),
                )
            )
            day += ONE_DAY
        weeks.append(row)

    return MonthGrid(year=year, month=month, weeks=weeks, cycles=cycles_in_month(year, month, blocks))


def can_navigate(year: int, current_year: int, current_month: int, step: int) -> bool:
    """Whether moving ``step`` months from the shown month stays inside ``year``."""
    target = current_year * 12 + (current_month - 1) + step
    return target // 12 == year
