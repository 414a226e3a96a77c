from __future__ import annotations
from datetime import date as Date
from pydantic import BaseModel, Field

from .values import Interval


class IntervalSchema(BaseModel):
    start: str = Field(..., examples=["09:00"])
    end: str = Field(..., examples=["18:00"])

    @classmethod
    def from_interval(cls, interval: Interval) -> "IntervalSchema":
        return cls(**interval.as_dict())


class DayAvailabilitySchema(BaseModel):
    employee_id: int
    date: Date
    intervals: list[IntervalSchema]


class AvailableAtSchema(BaseModel):
    employee_id: int
    available: bool
