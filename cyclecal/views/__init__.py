"""View data builders (timeline, month grid, agenda) for cyclecal."""

from cyclecal.views.agenda import build_agenda
from cyclecal.views.month_grid import build_month_grid, can_navigate, cycles_in_month
from cyclecal.views.timeline import current_cycle, month_ranges, summarize_cycles

__all__ = [
    "build_agenda",
    "build_month_grid",
    "can_navigate",
    "cycles_in_month",
    "current_cycle",
    "month_ranges",
    "summarize_cycles",
]
