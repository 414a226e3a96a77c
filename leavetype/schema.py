from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

_COLOR = r"^#[0-9A-Fa-f]{6}$"


class LeaveTypeSchema(BaseModel):
    id: int
    org_id: int
    name: str
    code: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    is_paid: bool
    is_active: bool
    order: int
    model_config = ConfigDict(from_attributes=True)

# Compact form embedded in leave responses
class LeaveTypeBrief(BaseModel):
    id: int
    name: str
    code: Optional[str] = None
    color: Optional[str] = None
    is_paid: bool
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload
class LeaveTypeCreatePayload(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    code: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = None
    color: Optional[str] = Field(None, pattern=_COLOR)
    is_paid: bool = True
    is_active: bool = True
    order: int = Field(0, ge=0)
    model_config = ConfigDict(extra="forbid")

# INTERNAL DTO for the service
class LeaveTypeCreate(LeaveTypeCreatePayload):
    org_id: int

class LeaveTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    code: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = None
    color: Optional[str] = Field(None, pattern=_COLOR)
    is_paid: Optional[bool] = None
    is_active: Optional[bool] = None
    order: Optional[int] = Field(None, ge=0)
    model_config = ConfigDict(extra="forbid")
