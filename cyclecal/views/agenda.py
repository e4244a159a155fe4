"""Agenda list data."""

from datetime import date
from typing import List, Optional, Sequence

from cyclecal.engine.query import DateLike, to_day
from cyclecal.models.block import Block
from cyclecal.models.constants import ONE_DAY
from cyclecal.models.views import AgendaEntry
from cyclecal.naming import CycleNameStore


def build_agenda(
    blocks: Sequence[Block],
    today: Optional[DateLike] = None,
    names: Optional[CycleNameStore] = None,
) -> List[AgendaEntry]:
    """One agenda entry per block, flagging the week that contains ``today``.

    ``last_day`` is the inclusive end shown to users (the exclusive ``end``
    minus one day).
    """
    current = to_day(today) if today is not None else date.today()
    return [
        AgendaEntry(
            block=block,
            last_day=block.end - ONE_DAY,
            day_count=block.day_count,
            is_current=block.contains(current),
            cycle_name=names.get(block.cycle_number) if names is not None else None,
        )
        for block in blocks
    ]
