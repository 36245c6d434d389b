"""
TimeProviderPort - Clock interface

Use cases ask this port for "today" instead of calling date.today()
directly, so day offsets can be pinned in tests.

Implementations:
- SystemTimeAdapter: system clock
- FixedTimeAdapter: fixed time (tests)
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import date, datetime


class TimeProviderPort(ABC):
    """Clock port."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time."""
        pass

    def today(self) -> date:
        """Current date."""
        return self.now().date()


class SystemTimeAdapter(TimeProviderPort):
    """System clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedTimeAdapter(TimeProviderPort):
    """
    Fixed clock for tests.

    Returns the same instant until set_time() moves it.
    """

    def __init__(self, fixed_time: datetime):
        self._fixed_time = fixed_time

    @classmethod
    def on(cls, day: date) -> FixedTimeAdapter:
        """Clock pinned to midnight of the given date."""
        return cls(datetime(day.year, day.month, day.day))

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = new_time

    def now(self) -> datetime:
        return self._fixed_time
