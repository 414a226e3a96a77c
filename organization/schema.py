from typing import Optional
from pydantic import BaseModel, ConfigDict

class OrganizationSchema(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)

class OrganizationUpdate(BaseModel):
    name: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
