"""Exceptions raised by cyclecal."""


class CycleCalendarError(Exception):
    """Base exception for all cycle calendar errors."""


class InvalidConfiguration(CycleCalendarError, ValueError):
    """Raised when a cycle configuration cannot produce a block sequence.

    A cycle needs at least one work week and one rest week. Raised before any
    block is generated, so callers never see partial output.
    """
