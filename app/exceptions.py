# app/exceptions.py
"""Domain errors raised by the employee repository.

Routes translate these into HTTP responses; store failures surface as
``pymongo.errors.PyMongoError`` and are handled separately.
"""


class EmployeeError(Exception):
    """Base class for employee domain errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidEmployeeId(EmployeeError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"The provided ID '{value}' is not a valid MongoDB ObjectId")


class EmployeeNotFound(EmployeeError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"No employee found with ID: {employee_id}")
