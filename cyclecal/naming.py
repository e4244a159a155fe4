"""User-defined cycle names.

Views look names up through a small key-value interface so the storage
backend (in-memory for tests, SQLAlchemy for the API) can be swapped.
"""

from typing import Dict, Optional, Protocol

from cyclecal.models.constants import CYCLE_LABEL_PREFIX


class CycleNameStore(Protocol):
    """Key-value store of cycle names keyed by cycle number."""

    def get(self, cycle_number: int) -> Optional[str]:
        ...

    def set(self, cycle_number: int, name: str) -> None:
        ...

    def all(self) -> Dict[int, str]:
        ...


def normalize_name(name: Optional[str]) -> Optional[str]:
    """Strip whitespace; blank names mean "no name"."""
    if name is None:
        return None
    name = name.strip()
    return name or None


class InMemoryCycleNameStore:
    """Dict-backed CycleNameStore."""

    def __init__(self, names: Optional[Dict[int, str]] = None):
        self._names: Dict[int, str] = {}
        for cycle_number, name in (names or {}).items():
            self.set(cycle_number, name)

    def get(self, cycle_number: int) -> Optional[str]:
        return self._names.get(cycle_number)

    def set(self, cycle_number: int, name: str) -> None:
        cleaned = normalize_name(name)
        if cleaned is None:
            self._names.pop(cycle_number, None)
        else:
            self._names[cycle_number] = cleaned

    def all(self) -> Dict[int, str]:
        return dict(self._names)


def display_cycle_name(store: Optional[CycleNameStore], cycle_number: int) -> str:
    """Return the stored name for a cycle, or "Cycle N" when unnamed."""
    name = store.get(cycle_number) if store is not None else None
    return name or f"{CYCLE_LABEL_PREFIX} {cycle_number}"
