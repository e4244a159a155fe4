"""Year timeline data: per-cycle summaries and month spans."""

from datetime import date
from typing import Dict, List, Optional, Sequence

from cyclecal.engine.query import DateLike, find_block_for_date, to_day
from cyclecal.models.block import Block, BlockType
from cyclecal.models.views import CycleSummary, MonthRange
from cyclecal.naming import CycleNameStore, display_cycle_name


def group_by_cycle(blocks: Sequence[Block]) -> Dict[int, List[Block]]:
    """Group blocks by cycle number, preserving first-seen cycle order."""
    grouped: Dict[int, List[Block]] = {}
    for block in blocks:
        grouped.setdefault(block.cycle_number, []).append(block)
    return grouped


def summarize_cycles(
    blocks: Sequence[Block],
    names: Optional[CycleNameStore] = None,
) -> List[CycleSummary]:
    """Summarize each cycle present in ``blocks``.

    Only in-year weeks are counted, so edge cycles may report fewer work or
    rest weeks than the configured pattern.
    """
    summaries: List[CycleSummary] = []
    for cycle_number, weeks in group_by_cycle(blocks).items():
        rest = [w for w in weeks if w.type == BlockType.REST]
        summaries.append(
            CycleSummary(
                cycle_number=cycle_number,
                start=weeks[0].start,
                end=weeks[-1].end,
                rest_start=rest[0].start if rest else None,
                work_weeks=len(weeks) - len(rest),
                rest_weeks=len(rest),
                name=names.get(cycle_number) if names is not None else None,
                display_name=display_cycle_name(names, cycle_number),
            )
        )
    return summaries


def month_ranges(blocks: Sequence[Block]) -> List[MonthRange]:
    """Group consecutive blocks by the month their start falls in.

    Months in which no block starts are skipped.
    """
    ranges: List[MonthRange] = []
    for index, block in enumerate(blocks):
        month = block.start.month
        if ranges and ranges[-1].month == month:
            ranges[-1].width += 1
        else:
            ranges.append(MonthRange(month=month, start_index=index, width=1))
    return ranges


def current_cycle(blocks: Sequence[Block], today: Optional[DateLike] = None) -> Optional[int]:
    """Cycle number containing ``today`` (defaults to the current date)."""
    block = find_block_for_date(to_day(today) if today is not None else date.today(), blocks)
    return block.cycle_number if block else None
