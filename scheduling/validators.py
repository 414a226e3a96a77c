"""
Write-time checks for availability windows and leave blocks.

Both validators collect every problem they find into a ValidationResult
instead of raising, so scheduling forms can highlight each failing field.
The only I/O is one existence lookup per referenced row.
"""
from __future__ import annotations
import re
from datetime import date, time
from typing import Iterable, Optional, Protocol

from .errors import ErrorCode, ValidationResult

# hour may omit its leading zero ("9:30")
HHMM_RE = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")


class ReferenceChecker(Protocol):
    def employee_exists(self, employee_id: int, org_id: int) -> bool: ...

    def leave_type_exists(self, leave_type_id: int, org_id: int) -> bool: ...


class WindowDraft(Protocol):
    employee_id: int
    starts_on: date
    until: Optional[date]
    start_time: str | time
    end_time: str | time
    repeat_on: Iterable[int]


class LeaveDraft(Protocol):
    employee_id: int
    leave_type_id: int
    starts_on: date
    until: date


def parse_hhmm(value: str | time | None) -> Optional[time]:
    """Parse an ``HH:mm`` string; returns None when it does not match."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    if not isinstance(value, str):
        return None
    m = HHMM_RE.match(value.strip())
    if not m:
        return None
    return time(int(m.group(1)), int(m.group(2)))


def validate_window(window: WindowDraft, *, org_id: int, store: ReferenceChecker) -> ValidationResult:
    result = ValidationResult()

    if window.until is not None and window.until < window.starts_on:
        result.add(ErrorCode.INVALID_RANGE, "until", "until cannot be earlier than starts_on")

    start = parse_hhmm(window.start_time)
    end = parse_hhmm(window.end_time)
    if start is None:
        result.add(ErrorCode.INVALID_TIME_FORMAT, "start_time", "start_time must be in HH:mm format")
    if end is None:
        result.add(ErrorCode.INVALID_TIME_FORMAT, "end_time", "end_time must be in HH:mm format")
    if start is not None and end is not None and end <= start:
        result.add(ErrorCode.INVALID_TIME_FORMAT, "end_time", "end_time must be after start_time")

    if not list(window.repeat_on or []):
        result.add(ErrorCode.EMPTY_RECURRENCE, "repeat_on", "at least one weekday must be selected")

    if not store.employee_exists(window.employee_id, org_id):
        result.add(ErrorCode.NOT_FOUND, "employee_id", "employee not found")

    return result


def validate_leave_block(block: LeaveDraft, *, org_id: int, store: ReferenceChecker) -> ValidationResult:
    result = ValidationResult()

    if block.until < block.starts_on:
        result.add(ErrorCode.INVALID_RANGE, "until", "until cannot be earlier than starts_on")

    if not store.employee_exists(block.employee_id, org_id):
        result.add(ErrorCode.NOT_FOUND, "employee_id", "employee not found")

    if not store.leave_type_exists(block.leave_type_id, org_id):
        result.add(ErrorCode.NOT_FOUND, "leave_type_id", "leave type not found")

    return result
