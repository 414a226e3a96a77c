from __future__ import annotations
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from employee.schema import EmployeeBrief
from leavetype.schema import LeaveTypeBrief


class LeaveSchema(BaseModel):
    id: int
    org_id: int
    employee_id: int
    leave_type_id: int
    employee: Optional[EmployeeBrief] = None
    leave_type: Optional[LeaveTypeBrief] = None
    starts_on: date
    until: date
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class OnLeaveSchema(BaseModel):
    employee_id: int
    on: date = Field(..., alias="date")
    on_leave: bool
    model_config = ConfigDict(populate_by_name=True)


# PUBLIC payload (what clients send)
# starts_on <= until is checked by scheduling.validators, not here
class LeaveCreatePayload(BaseModel):
    employee_id: int
    leave_type_id: int
    starts_on: date = Field(..., description="inclusive")
    until: date = Field(..., description="inclusive")
    note: Optional[str] = Field(None, max_length=500)
    model_config = ConfigDict(extra="forbid")

    @field_validator("note", mode="before")
    @classmethod
    def trim_note(cls, v):
        return v.strip() if isinstance(v, str) else v


# INTERNAL DTO for the service
class LeaveCreate(BaseModel):
    org_id: int
    employee_id: int
    leave_type_id: int
    starts_on: date
    until: date
    note: Optional[str] = None


class LeaveUpdate(BaseModel):
    leave_type_id: Optional[int] = None
    starts_on: Optional[date] = None
    until: Optional[date] = None
    note: Optional[str] = Field(None, max_length=500)
    model_config = ConfigDict(extra="forbid")

    @field_validator("note", mode="before")
    @classmethod
    def trim_note(cls, v):
        return v.strip() if isinstance(v, str) else v
