"""FastAPI web application for cyclecal."""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from cyclecal.config import CALENDAR_YEAR, default_cycle_config, setup_logging
from cyclecal.database.cycle_name_repository import CycleNameRepository
from cyclecal.database.database import get_db, init_db
from cyclecal.engine.errors import InvalidConfiguration
from cyclecal.engine.filtering import apply_filters
from cyclecal.engine.generator import cached_year_blocks
from cyclecal.engine.query import count_distinct_cycles, find_block_for_date
from cyclecal.models.block import Block, BlockType
from cyclecal.models.cycle_config import CycleConfig, WeekStartDay
from cyclecal.models.filters import FilterOptions
from cyclecal.models.views import AgendaEntry, CycleSummary, MonthGrid, MonthRange
from cyclecal.views.agenda import build_agenda
from cyclecal.views.month_grid import build_month_grid
from cyclecal.views.timeline import current_cycle, month_ranges, summarize_cycles

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info("cyclecal API started")
    yield


app = FastAPI(
    title="cyclecal API",
    description="Work/rest cycle calendar: N work weeks followed by M rest weeks, repeated over the year",
    version="0.1.0",
    lifespan=lifespan,
)


# Response models
class BlocksResponse(BaseModel):
    """Response for block listing."""
    year: int
    total_cycles: int = Field(..., description="Distinct cycles in the unfiltered year")
    blocks: List[Block]


class CycleNameRequest(BaseModel):
    name: str = Field(..., description="New name; blank clears it")


class CycleNameResponse(BaseModel):
    cycle_number: int
    name: Optional[str]


class TimelineResponse(BaseModel):
    """Response for the year timeline view."""
    year: int
    cycles: List[CycleSummary]
    months: List[MonthRange]
    current_cycle: Optional[int]


def get_cycle_config(
    start: Optional[date] = Query(None, description="Override cycle start date"),
    work_weeks: Optional[int] = Query(None, description="Override work weeks per cycle"),
    rest_weeks: Optional[int] = Query(None, description="Override rest weeks per cycle"),
    week_starts_on: Optional[WeekStartDay] = Query(None, description="0 = Sunday, 1 = Monday"),
) -> CycleConfig:
    """Default config from the environment with optional per-request overrides."""
    config = default_cycle_config()
    overrides = {
        "cycle_start_date": start,
        "work_weeks": work_weeks,
        "rest_weeks": rest_weeks,
        "week_starts_on": week_starts_on,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def _year_blocks(config: CycleConfig, year: int) -> List[Block]:
    try:
        return list(cached_year_blocks(config, year))
    except InvalidConfiguration as e:
        logger.warning(f"Rejected cycle configuration: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/config", response_model=CycleConfig)
async def get_config(config: CycleConfig = Depends(get_cycle_config)):
    """Active cycle configuration."""
    return config


@app.get("/blocks", response_model=BlocksResponse)
async def list_blocks(
    year: int = Query(CALENDAR_YEAR),
    block_type: Optional[BlockType] = Query(None, alias="type"),
    cycle: Optional[int] = Query(None, ge=1),
    config: CycleConfig = Depends(get_cycle_config),
):
    """List the year's blocks, optionally filtered by type and cycle."""
    blocks = _year_blocks(config, year)
    filtered = apply_filters(blocks, FilterOptions(block_type=block_type, cycle_number=cycle))
    return BlocksResponse(year=year, total_cycles=count_distinct_cycles(blocks), blocks=filtered)


@app.get("/blocks/lookup", response_model=Block)
async def lookup_block(
    day: date = Query(..., alias="date"),
    config: CycleConfig = Depends(get_cycle_config),
):
    """Block containing a date."""
    block = find_block_for_date(day, _year_blocks(config, day.year))
    if block is None:
        raise HTTPException(status_code=404, detail=f"No block contains {day.isoformat()}")
    return block


@app.get("/cycles", response_model=List[CycleSummary])
async def list_cycles(
    year: int = Query(CALENDAR_YEAR),
    config: CycleConfig = Depends(get_cycle_config),
    db: Session = Depends(get_db),
):
    """Per-cycle summaries with user-defined names."""
    names = CycleNameRepository.for_year(db, year)
    return summarize_cycles(_year_blocks(config, year), names)


@app.get("/cycles/{year}/{cycle_number}/name", response_model=CycleNameResponse)
async def get_cycle_name(year: int, cycle_number: int, db: Session = Depends(get_db)):
    if cycle_number < 1:
        raise HTTPException(status_code=400, detail="cycle_number must be >= 1")
    names = CycleNameRepository.for_year(db, year)
    return CycleNameResponse(cycle_number=cycle_number, name=names.get(cycle_number))


@app.put("/cycles/{year}/{cycle_number}/name", response_model=CycleNameResponse)
async def set_cycle_name(
    year: int,
    cycle_number: int,
    request: CycleNameRequest,
    db: Session = Depends(get_db),
):
    """Rename a cycle (blank name clears it)."""
    if cycle_number < 1:
        raise HTTPException(status_code=400, detail="cycle_number must be >= 1")
    names = CycleNameRepository.for_year(db, year)
    try:
        names.set(cycle_number, request.name)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to save cycle name: {str(e)}")
    return CycleNameResponse(cycle_number=cycle_number, name=names.get(cycle_number))


@app.get("/views/timeline", response_model=TimelineResponse)
async def timeline_view(
    year: int = Query(CALENDAR_YEAR),
    today: Optional[date] = Query(None),
    config: CycleConfig = Depends(get_cycle_config),
    db: Session = Depends(get_db),
):
    blocks = _year_blocks(config, year)
    names = CycleNameRepository.for_year(db, year)
    return TimelineResponse(
        year=year,
        cycles=summarize_cycles(blocks, names),
        months=month_ranges(blocks),
        current_cycle=current_cycle(blocks, today),
    )


@app.get("/views/month", response_model=MonthGrid)
async def month_view(
    year: int = Query(CALENDAR_YEAR),
    month: int = Query(..., ge=1, le=12),
    config: CycleConfig = Depends(get_cycle_config),
):
    return build_month_grid(year, month, _year_blocks(config, year), config.week_starts_on)


@app.get("/views/agenda", response_model=List[AgendaEntry])
async def agenda_view(
    year: int = Query(CALENDAR_YEAR),
    today: Optional[date] = Query(None),
    config: CycleConfig = Depends(get_cycle_config),
    db: Session = Depends(get_db),
):
    names = CycleNameRepository.for_year(db, year)
    return build_agenda(_year_blocks(config, year), today, names)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
