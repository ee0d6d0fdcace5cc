# app/schemas/employee.py
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class EmployeeBase(BaseModel):
    name: str
    role: str

class EmployeeIn(EmployeeBase):
    # Accepted for compatibility with clients that echo records back.
    # The server never takes identity from the body, so any value passes.
    id: Optional[Any] = Field(None, description="Ignored; identity comes from the server or the URL")

class EmployeeOut(EmployeeBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
