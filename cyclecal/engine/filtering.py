"""Combined block filtering for views."""

from typing import List, Sequence

from cyclecal.engine.query import filter_by_cycle, filter_by_type
from cyclecal.models.block import Block
from cyclecal.models.filters import FilterOptions


def apply_filters(blocks: Sequence[Block], options: FilterOptions) -> List[Block]:
    """Apply type then cycle filters; unset criteria keep every block.

    Args:
        blocks: Blocks in generation order
        options: Filter criteria

    Returns:
        New list in the original order
    """
    result = list(blocks)
    if options.block_type is not None:
        result = filter_by_type(result, options.block_type)
    if options.cycle_number:
        result = filter_by_cycle(result, options.cycle_number)
    return result
