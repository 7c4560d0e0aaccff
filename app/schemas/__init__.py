# app/schemas/__init__.py
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
