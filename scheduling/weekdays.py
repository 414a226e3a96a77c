"""
Weekday representation.

Canonical form is the ISO-style index used by ``date.weekday()``:
0=Monday .. 6=Sunday. Names are only accepted and produced at the API
boundary; the evaluator works on integers.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Iterable


class Weekday(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.lower()


def parse_weekday(value: int | str) -> int:
    """Map a weekday name ("monday") or index (0..6) to its canonical index."""
    if isinstance(value, bool):
        raise ValueError(f"invalid weekday: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 6:
            raise ValueError("weekday must be between 0 (Mon) and 6 (Sun)")
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key.isdigit():
            return parse_weekday(int(key))
        try:
            return int(Weekday[key])
        except KeyError:
            raise ValueError(
                "weekday must be one of: monday, tuesday, wednesday, thursday, friday, saturday, sunday"
            ) from None
    raise ValueError(f"invalid weekday: {value!r}")


def parse_weekdays(values: Iterable[int | str]) -> list[int]:
    """Normalize to a sorted list of unique weekday indexes."""
    return sorted({parse_weekday(v) for v in values})


def weekday_names(values: Iterable[int]) -> list[str]:
    return [Weekday(v).label for v in sorted(set(values))]
