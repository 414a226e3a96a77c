from __future__ import annotations
from datetime import date, datetime, time
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from employee.schema import EmployeeBrief
from scheduling.weekdays import parse_weekdays, weekday_names


def _hhmm(v):
    return v.strftime("%H:%M") if isinstance(v, time) else v


def _trim(v: Optional[str]) -> Optional[str]:
    return v.strip() if isinstance(v, str) else v


class AvailabilitySchema(BaseModel):
    id: int
    org_id: int
    employee_id: int
    employee: Optional[EmployeeBrief] = None
    starts_on: date
    until: Optional[date] = None
    start_time: str
    end_time: str
    repeat_on: list[str]
    note: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def format_time(cls, v):
        return _hhmm(v)

    @field_validator("repeat_on", mode="before")
    @classmethod
    def format_weekdays(cls, v):
        return weekday_names(v or [])


# PUBLIC payload (what clients send).
# Times and weekday sets are checked by scheduling.validators so that
# every failing field is reported together.
class AvailabilityCreatePayload(BaseModel):
    employee_id: int
    starts_on: date
    until: Optional[date] = Field(None, description="inclusive; null = open-ended")
    start_time: str = Field(..., description="HH:mm", examples=["09:00"])
    end_time: str = Field(..., description="HH:mm", examples=["18:00"])
    repeat_on: list[int] = Field(..., description="weekday names or 0=Mon .. 6=Sun", examples=[["monday", "friday"]])
    note: Optional[str] = Field(None, max_length=500)
    is_active: bool = True
    model_config = ConfigDict(extra="forbid")

    @field_validator("repeat_on", mode="before")
    @classmethod
    def parse_repeat_on(cls, v):
        return parse_weekdays(v) if isinstance(v, (list, tuple, set)) else v

    @field_validator("note", mode="before")
    @classmethod
    def trim_note(cls, v):
        return _trim(v)


# INTERNAL DTO for the service
class AvailabilityCreate(BaseModel):
    org_id: int
    employee_id: int
    starts_on: date
    until: Optional[date] = None
    start_time: str
    end_time: str
    repeat_on: list[int]
    note: Optional[str] = None
    is_active: bool = True


class AvailabilityUpdate(BaseModel):
    starts_on: Optional[date] = None
    until: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    repeat_on: Optional[list[int]] = None
    note: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator("repeat_on", mode="before")
    @classmethod
    def parse_repeat_on(cls, v):
        return parse_weekdays(v) if isinstance(v, (list, tuple, set)) else v

    @field_validator("note", mode="before")
    @classmethod
    def trim_note(cls, v):
        return _trim(v)
