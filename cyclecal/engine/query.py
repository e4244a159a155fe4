"""Point and aggregate queries over generated blocks.

All functions expect blocks in generation (chronological) order and never
re-sort or mutate them. "No match" is a normal outcome: lookups return None
and filters return an empty list.
"""

from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from cyclecal.engine.errors import InvalidConfiguration
from cyclecal.models.block import Block, BlockType
from cyclecal.models.constants import DAYS_PER_WEEK

DateLike = Union[date, datetime]


def to_day(value: DateLike) -> date:
    """Normalize a date or datetime to a plain date (start of day)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def weeks_between(later: DateLike, earlier: DateLike) -> int:
    """Count whole weeks from ``earlier`` to ``later``, truncated toward zero.

    Negative when ``later`` precedes ``earlier``.
    """
    days = (to_day(later) - to_day(earlier)).days
    if days >= 0:
        return days // DAYS_PER_WEEK
    return -(-days // DAYS_PER_WEEK)


def find_block_for_date(day: DateLike, blocks: Sequence[Block]) -> Optional[Block]:
    """Locate the block containing ``day``.

    Args:
        day: Date to locate (datetimes are normalized to their date)
        blocks: Blocks to search through

    Returns:
        The block with start <= day < end, or None if the day is outside all blocks
    """
    target = to_day(day)
    for block in blocks:
        if block.start <= target < block.end:
            return block
    return None


def cycle_number_for_date(day: DateLike, cycle_start_date: DateLike, cycle_length: int = 7) -> int:
    """Project a date onto a cycle number without generating blocks.

    Dates before ``cycle_start_date`` can yield values <= 0; callers should
    treat those as out of range.

    Raises:
        InvalidConfiguration: If cycle_length is below 1
    """
    if cycle_length < 1:
        raise InvalidConfiguration(f"cycle_length must be >= 1; got {cycle_length}.")
    return weeks_between(day, cycle_start_date) // cycle_length + 1


def filter_by_type(blocks: Sequence[Block], block_type: BlockType) -> List[Block]:
    """Filters blocks by type (work/rest)."""
    return [block for block in blocks if block.type == block_type]


def filter_by_cycle(blocks: Sequence[Block], cycle_number: int) -> List[Block]:
    """Filters blocks belonging to a specific cycle number."""
    return [block for block in blocks if block.cycle_number == cycle_number]


def count_distinct_cycles(blocks: Sequence[Block]) -> int:
    return len({block.cycle_number for block in blocks})


def is_work_week(day: DateLike, blocks: Sequence[Block]) -> bool:
    block = find_block_for_date(day, blocks)
    return block is not None and block.type == BlockType.WORK


def is_rest_week(day: DateLike, blocks: Sequence[Block]) -> bool:
    block = find_block_for_date(day, blocks)
    return block is not None and block.type == BlockType.REST
