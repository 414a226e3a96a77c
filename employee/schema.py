from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class EmployeeSchema(BaseModel):
    id: int
    org_id: int
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    user_id: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)

# Compact form embedded in availability / leave responses
class EmployeeBrief(BaseModel):
    id: int
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload, what clients send
class EmployeeCreatePayload(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    middle_name: Optional[str] = Field(None, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    user_id: Optional[int] = None
    model_config = ConfigDict(extra="forbid")


# INTERNAL DTO for the service
class EmployeeCreate(BaseModel):
    org_id: int
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    user_id: Optional[int] = None

class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    middle_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    user_id: Optional[int] = None
    model_config = ConfigDict(extra="forbid")
