"""Cycle configuration model for cyclecal."""

from datetime import date
from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field

from cyclecal.models.constants import DEFAULT_REST_WEEKS, DEFAULT_WORK_WEEKS


class WeekStartDay(IntEnum):
    """First day of the week (0 = Sunday, 1 = Monday)."""
    SUNDAY = 0
    MONDAY = 1


class CycleConfig(BaseModel):
    """Repeating work/rest pattern anchored at a start date.

    Week counts are deliberately not range-checked here; the generator
    rejects non-positive values with ``InvalidConfiguration``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cycle_start_date: date = Field(..., alias="cycleStartDate", description="Any day in the first work week")
    work_weeks: int = Field(DEFAULT_WORK_WEEKS, alias="workWeeks", description="Consecutive work weeks per cycle")
    rest_weeks: int = Field(DEFAULT_REST_WEEKS, alias="restWeeks", description="Consecutive rest weeks per cycle")
    week_starts_on: WeekStartDay = Field(WeekStartDay.MONDAY, alias="weekStartsOn", description="0 = Sunday, 1 = Monday")

    @property
    def cycle_length(self) -> int:
        return self.work_weeks + self.rest_weeks
