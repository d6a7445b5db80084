"""Employee API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies import DbSession
from app.employees.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeStatus,
    EmployeeUpdate,
)
from app.employees.service import (
    DuplicateEmployeeNumberError,
    EmployeeService,
    get_employee_service,
)

router = APIRouter()

NOT_FOUND = "Employee not found."


def get_service(db: DbSession) -> EmployeeService:
    """Get employee service dependency."""
    return get_employee_service(db)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    service: Annotated[EmployeeService, Depends(get_service)],
    q: str | None = Query(None, max_length=120),
    status_filter: EmployeeStatus = Query(EmployeeStatus.ACTIVE, alias="status"),
):
    """List employees, optionally filtered by name and status."""
    return service.list_employees(q, status_filter)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeCreate,
    service: Annotated[EmployeeService, Depends(get_service)],
):
    """Create an employee.

    Returns:
        EmployeeResponse: The new employee.

    Raises:
        HTTPException: 409 if the employee number is taken.
    """
    try:
        return service.create_employee(data)
    except DuplicateEmployeeNumberError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_service)],
):
    """Get one employee, active or not."""
    employee = service.get_employee(employee_id)
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: Annotated[EmployeeService, Depends(get_service)],
):
    """Replace an employee's name and number.

    Raises:
        HTTPException: 404 if not found, 409 if the number is taken.
    """
    try:
        employee = service.update_employee(employee_id, data)
    except DuplicateEmployeeNumberError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee


@router.delete("/{employee_id}", response_model=EmployeeResponse)
async def deactivate_employee(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_service)],
):
    """Soft-delete an employee by marking it inactive."""
    employee = service.set_active(employee_id, False)
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee


@router.patch("/{employee_id}/activate", response_model=EmployeeResponse)
async def activate_employee(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_service)],
):
    """Reactivate a deactivated employee."""
    employee = service.set_active(employee_id, True)
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee
