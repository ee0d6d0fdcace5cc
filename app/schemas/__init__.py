# app/schemas/__init__.py
from .employee import EmployeeIn, EmployeeOut
