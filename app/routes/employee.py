# app/routes/employee.py
import logging
from typing import List, Dict, Any, NoReturn, Optional
from fastapi import APIRouter, HTTPException, Depends
from pymongo.errors import PyMongoError
from app.exceptions import EmployeeNotFound, InvalidEmployeeId
from app.models.employee import EmployeeModel
from app.repositories.employee import EmployeeRepository, get_employee_repository
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from app.utils.object_id import OBJECT_ID_EXAMPLE

logger = logging.getLogger(__name__)

router = APIRouter()

def create_error_response(
    message: str, 
    details: Optional[str] = None, 
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response

def invalid_id(exc: InvalidEmployeeId) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail=create_error_response(
            message="Invalid employee ID format",
            details=exc.message,
            example=f"Expected format: '{OBJECT_ID_EXAMPLE}' (24 characters, hexadecimal)"
        )
    )

def not_found(exc: EmployeeNotFound) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=create_error_response(
            message="Employee not found",
            details=exc.message,
            example="Please ensure you're using a valid employee ID"
        )
    )

def store_failure(action: str, exc: PyMongoError) -> NoReturn:
    logger.exception("Failed to %s employee", action)
    raise HTTPException(
        status_code=500,
        detail=create_error_response(message=f"Failed to {action} employee", details=str(exc))
    )

def to_out(employee: EmployeeModel) -> EmployeeOut:
    return EmployeeOut(**employee.model_dump())

@router.get("/employee", response_model=List[EmployeeOut])
async def list_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    try:
        employees = await repo.list()
    except PyMongoError as e:
        store_failure("list", e)
    return [to_out(employee) for employee in employees]

@router.post("/employee", response_model=EmployeeOut)
async def create_employee(employee: EmployeeCreate, repo: EmployeeRepository = Depends(get_employee_repository)):
    try:
        created = await repo.create(employee)
    except EmployeeNotFound as e:
        raise not_found(e)
    except PyMongoError as e:
        store_failure("create", e)
    return to_out(created)

@router.put("/employee/{employee_id}", response_model=EmployeeOut)
async def update_employee(employee_id: str, employee: EmployeeUpdate, repo: EmployeeRepository = Depends(get_employee_repository)):
    try:
        return await repo.update(employee_id, employee)
    except InvalidEmployeeId as e:
        raise invalid_id(e)
    except EmployeeNotFound as e:
        raise not_found(e)
    except PyMongoError as e:
        store_failure("update", e)

@router.delete("/employee/{employee_id}")
async def delete_employee(employee_id: str, repo: EmployeeRepository = Depends(get_employee_repository)):
    try:
        await repo.delete(employee_id)
    except InvalidEmployeeId as e:
        raise invalid_id(e)
    except EmployeeNotFound as e:
        raise not_found(e)
    except PyMongoError as e:
        store_failure("delete", e)

    return "record deleted"
