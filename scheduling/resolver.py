"""
Availability resolution.

Given an employee and a calendar date, work out which time-of-day intervals
the employee is scheduled to work: the union of every active weekly window
that applies on that date, or nothing at all when a leave block covers it.
Leave is whole-day; it is never subtracted hour by hour.
"""
from __future__ import annotations
import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence

from .errors import EmployeeNotFound, InvalidDateRange
from .leave_overlap import covered_by_leave, overlaps_range
from .recurrence import applies
from .store import AvailabilityStore
from .values import Interval, LeaveRange, WindowRule

logger = logging.getLogger(__name__)


class AvailabilityResolver:
    def __init__(self, store: AvailabilityStore, *, org_id: int):
        self.store = store
        self.org_id = org_id

    # ---------- public API ----------

    def resolve(self, employee_id: int, on: date) -> list[Interval]:
        windows, leaves = self._load(employee_id)
        return self._resolve_day(employee_id, windows, leaves, on)

    def is_available_at(self, employee_id: int, at: datetime) -> bool:
        # wall-clock value only; aware datetimes are not converted
        t = at.time().replace(tzinfo=None)
        return any(i.contains(t) for i in self.resolve(employee_id, at.date()))

    def resolve_range(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        max_days: Optional[int] = None,
    ) -> dict[date, list[Interval]]:
        """Resolve each date in ``[start, end]`` with a single fetch of windows and leave."""
        if end < start:
            raise InvalidDateRange("end date must be on or after start date")
        span = (end - start).days + 1
        if max_days is not None and span > max_days:
            raise InvalidDateRange(f"date range cannot exceed {max_days} days")

        windows, leaves = self._load(employee_id)
        leaves = [lv for lv in leaves if overlaps_range(lv, start, end)]

        out: dict[date, list[Interval]] = {}
        day = start
        while day <= end:
            out[day] = self._resolve_day(employee_id, windows, leaves, day)
            day += timedelta(days=1)
        return out

    def resolve_many(self, employee_ids: Iterable[int], on: date) -> dict[int, list[Interval]]:
        """Resolve one date for several employees; each employee is resolved independently."""
        out: dict[int, list[Interval]] = {}
        for employee_id in employee_ids:
            if employee_id in out:
                continue
            out[employee_id] = self.resolve(employee_id, on)
        return out

    # ---------- internals ----------

    def _load(self, employee_id: int) -> tuple[list[WindowRule], list[LeaveRange]]:
        if not self.store.employee_exists(employee_id, self.org_id):
            raise EmployeeNotFound(employee_id, self.org_id)
        windows = self.store.list_active_windows(employee_id, self.org_id)
        leaves = self.store.list_leave_blocks(employee_id, self.org_id)
        return windows, leaves

    def _resolve_day(
        self,
        employee_id: int,
        windows: Sequence[WindowRule],
        leaves: Sequence[LeaveRange],
        on: date,
    ) -> list[Interval]:
        matching = [w for w in windows if self._usable(w) and applies(w, on)]
        if not matching:
            return []

        blocking = next((lv for lv in leaves if covered_by_leave(lv, on)), None)
        if blocking is not None:
            logger.debug("employee %s on leave %s covering %s", employee_id, blocking.id, on)
            return []

        return self._collect(matching)

    def _usable(self, window: WindowRule) -> bool:
        if window.is_well_formed():
            return True
        # fail closed: a row that slipped past write-time validation never matches
        logger.warning("ignoring malformed availability window %s (employee %s)", window.id, window.employee_id)
        return False

    def _collect(self, windows: Sequence[WindowRule]) -> list[Interval]:
        # Union policy: overlapping or duplicate windows are returned as-is, sorted, never merged.
        return sorted(w.interval for w in windows)
