"""SQLAlchemy database models for cyclecal."""

from datetime import datetime
import uuid
from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint

from cyclecal.database.database import Base


class CycleNameDB(Base):
    """User-defined name for one cycle of one calendar."""

    __tablename__ = "cycle_names"
    __table_args__ = (
        UniqueConstraint("calendar_key", "cycle_number", name="uq_cycle_name_per_calendar"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Calendar scope, e.g. "cycle-names-2026"
    calendar_key = Column(String, nullable=False, index=True)
    cycle_number = Column(Integer, nullable=False)
    name = Column(String, nullable=False)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
