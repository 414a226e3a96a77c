from __future__ import annotations
from datetime import date

from .values import LeaveRange


def covered_by_leave(block: LeaveRange, on: date) -> bool:
    return block.starts_on <= on <= block.until


def overlaps_range(block: LeaveRange, range_start: date, range_end: date) -> bool:
    # inclusive on both ends
    return block.starts_on <= range_end and block.until >= range_start
