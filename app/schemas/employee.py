# app/schemas/employee.py
from pydantic import BaseModel, Field

from app.utils.object_id import OBJECT_ID_EXAMPLE

class EmployeeBase(BaseModel):
    # omitted fields fall back to their zero value; updates replace all three
    name: str = ""
    salary: float = 0.0
    age: int = Field(default=0, description="Whole years; fractional values are rejected")

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeOut(EmployeeBase):
    id: str = Field(
        description="ObjectId string representation",
        examples=[OBJECT_ID_EXAMPLE],
    )

    class Config:
        from_attributes = True
        populate_by_name = True
