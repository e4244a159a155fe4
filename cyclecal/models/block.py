"""Block data model for cyclecal."""

from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """Block type enumeration."""
    WORK = "work"
    REST = "rest"


class Block(BaseModel):
    """One week of a cycle, tagged work or rest.

    Interval semantics are half-open: ``start`` is the first day in the block,
    ``end`` is the first day NOT in the block.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: BlockType = Field(..., description="Work or rest week")
    cycle_number: int = Field(..., ge=1, alias="cycleNumber", description="1-indexed cycle this week belongs to")
    week_in_cycle: int = Field(..., ge=1, alias="weekInCycle", description="Position of this week inside its cycle")
    start: date = Field(..., description="First day of the block (inclusive)")
    end: date = Field(..., description="First day after the block (exclusive)")

    @property
    def day_count(self) -> int:
        """Number of calendar days covered (less than 7 for clipped edge weeks)."""
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end
