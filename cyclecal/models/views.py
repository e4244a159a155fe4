"""Data models for the timeline, month grid and agenda views."""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

from cyclecal.models.block import Block


class CycleSummary(BaseModel):
    """One cycle as shown on the year timeline (only its in-year weeks)."""

    cycle_number: int
    start: date = Field(..., description="Start of the first in-year block")
    end: date = Field(..., description="Exclusive end of the last in-year block")
    rest_start: Optional[date] = Field(None, description="Start of the first rest week, if it falls in the year")
    work_weeks: int = Field(..., description="Work weeks of this cycle inside the year")
    rest_weeks: int = Field(..., description="Rest weeks of this cycle inside the year")
    name: Optional[str] = Field(None, description="User-defined cycle name")
    display_name: str


class MonthRange(BaseModel):
    """Span of blocks starting in one calendar month."""

    month: int = Field(..., ge=1, le=12)
    start_index: int = Field(..., description="Index of the first block starting in this month")
    width: int = Field(..., description="Number of blocks starting in this month")


class GridDay(BaseModel):
    day: date
    in_month: bool
    block: Optional[Block] = None


class MonthGrid(BaseModel):
    """Weeks of a month view, padded to whole weeks."""

    year: int
    month: int
    weeks: List[List[GridDay]]
    cycles: List[int] = Field(default_factory=list, description="Cycle numbers touching in-month days")


class AgendaEntry(BaseModel):
    block: Block
    last_day: date = Field(..., description="Last day inside the block (inclusive)")
    day_count: int
    is_current: bool = False
    cycle_name: Optional[str] = None
