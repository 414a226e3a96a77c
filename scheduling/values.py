from __future__ import annotations
from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True, order=True)
class Interval:
    """Half-open ``[start, end)`` time-of-day range."""

    start: time
    end: time

    def contains(self, t: time) -> bool:
        return self.start <= t < self.end

    def as_dict(self) -> dict[str, str]:
        return {"start": self.start.strftime("%H:%M"), "end": self.end.strftime("%H:%M")}


@dataclass(frozen=True)
class WindowRule:
    """Read-only snapshot of an availability window row."""

    id: int
    employee_id: int
    starts_on: date
    until: Optional[date]
    start_time: time
    end_time: time
    repeat_on: frozenset[int]
    is_active: bool = True

    @property
    def interval(self) -> Interval:
        return Interval(self.start_time, self.end_time)

    def is_well_formed(self) -> bool:
        if self.start_time >= self.end_time:
            return False
        if not self.repeat_on:
            return False
        if self.until is not None and self.until < self.starts_on:
            return False
        return True


@dataclass(frozen=True)
class LeaveRange:
    """Read-only snapshot of a leave block row."""

    id: int
    employee_id: int
    leave_type_id: int
    starts_on: date
    until: date
