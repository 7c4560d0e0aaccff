# app/models/employee.py
from typing import Any, Dict
from pydantic import BaseModel, Field

class EmployeeModel(BaseModel):
    """Employee as stored in the ``employees`` collection."""
    id: str = Field(default="", alias="_id")
    name: str = ""
    salary: float = 0.0
    age: int = 0

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "EmployeeModel":
        return cls(**{**document, "_id": str(document["_id"])})
