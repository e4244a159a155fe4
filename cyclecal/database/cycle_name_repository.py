"""Repository for cycle name database operations."""

import logging
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy.orm import Session

from cyclecal.database.models import CycleNameDB
from cyclecal.models.constants import CYCLE_NAMES_KEY_TEMPLATE
from cyclecal.naming import normalize_name

logger = logging.getLogger(__name__)


def calendar_key_for_year(year: int) -> str:
    return CYCLE_NAMES_KEY_TEMPLATE.format(year=year)


class CycleNameRepository:
    """Persistent CycleNameStore scoped to one calendar key."""

    def __init__(self, db: Session, calendar_key: str):
        self.db = db
        self.calendar_key = calendar_key

    @classmethod
    def for_year(cls, db: Session, year: int) -> "CycleNameRepository":
        return cls(db, calendar_key_for_year(year))

    def _row(self, cycle_number: int) -> Optional[CycleNameDB]:
        return (
            self.db.query(CycleNameDB)
            .filter(
                CycleNameDB.calendar_key == self.calendar_key,
                CycleNameDB.cycle_number == cycle_number,
            )
            .first()
        )

    def get(self, cycle_number: int) -> Optional[str]:
        row = self._row(cycle_number)
        return row.name if row else None

    def set(self, cycle_number: int, name: str) -> None:
        """Store a name; a blank name removes the stored entry."""
        try:
            cleaned = normalize_name(name)
            row = self._row(cycle_number)
            if cleaned is None:
                if row is not None:
                    self.db.delete(row)
                    logger.debug(f"Cleared name of cycle {cycle_number} in {self.calendar_key}")
            elif row is None:
                self.db.add(
                    CycleNameDB(
                        calendar_key=self.calendar_key,
                        cycle_number=cycle_number,
                        name=cleaned,
                    )
                )
                logger.debug(f"Named cycle {cycle_number} in {self.calendar_key}: {cleaned[:50]}")
            else:
                row.name = cleaned
                row.updated_at = datetime.utcnow()
                logger.debug(f"Renamed cycle {cycle_number} in {self.calendar_key}: {cleaned[:50]}")
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to save name of cycle {cycle_number}: {type(e).__name__}: {str(e)}")
            raise

    def all(self) -> Dict[int, str]:
        rows = (
            self.db.query(CycleNameDB)
            .filter(CycleNameDB.calendar_key == self.calendar_key)
            .order_by(CycleNameDB.cycle_number)
            .all()
        )
        return {row.cycle_number: row.name for row in rows}
