"""Data models for cyclecal."""

from cyclecal.models.block import Block, BlockType
from cyclecal.models.cycle_config import CycleConfig, WeekStartDay
from cyclecal.models.filters import FilterOptions
from cyclecal.models.views import AgendaEntry, CycleSummary, GridDay, MonthGrid, MonthRange

__all__ = [
    "Block",
    "BlockType",
    "CycleConfig",
    "WeekStartDay",
    "FilterOptions",
    "AgendaEntry",
    "CycleSummary",
    "GridDay",
    "MonthGrid",
    "MonthRange",
]
