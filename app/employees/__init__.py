"""Employees module for the badge directory."""

from app.employees.router import router
from app.employees.service import EmployeeService, get_employee_service

__all__ = ["router", "EmployeeService", "get_employee_service"]
