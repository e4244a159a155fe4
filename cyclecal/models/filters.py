"""Block filter options."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from cyclecal.models.block import BlockType


class FilterOptions(BaseModel):
    """Criteria for narrowing the visible blocks.

    ``block_type=None`` means all types; a missing or zero ``cycle_number``
    means all cycles.
    """

    model_config = ConfigDict(populate_by_name=True)

    block_type: Optional[BlockType] = Field(None, alias="blockType")
    cycle_number: Optional[int] = Field(None, alias="cycleNumber")

