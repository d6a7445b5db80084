"""Employee directory service."""

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import Employee
from app.employees.schemas import EmployeeCreate, EmployeeStatus, EmployeeUpdate
from app.security import escape_like

logger = logging.getLogger(__name__)


class DuplicateEmployeeNumberError(ValueError):
    """Raised when an employee number is already taken."""

    def __init__(self, employee_number: str):
        super().__init__("Employee number must be unique.")
        self.employee_number = employee_number


class EmployeeService:
    """CRUD operations on the employee directory.

    Args:
        db: Database session.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_employees(
        self,
        query: str | None = None,
        status: EmployeeStatus = EmployeeStatus.ACTIVE,
    ) -> list[Employee]:
        """List employees ordered by name.

        Args:
            query: Optional case-insensitive substring of the name.
            status: Which employees to include.

        Returns:
            list[Employee]: Matching employees.
        """
        q = self.db.query(Employee)
        query = (query or "").strip()
        if query:
            q = q.filter(Employee.name.ilike(f"%{escape_like(query)}%", escape="\\"))
        if status == EmployeeStatus.ACTIVE:
            q = q.filter(Employee.active.is_(True))
        elif status == EmployeeStatus.INACTIVE:
            q = q.filter(Employee.active.is_(False))
        return q.order_by(Employee.name).all()

    def get_employee(self, employee_id: str) -> Employee | None:
        """Get an employee by ID."""
        return self.db.query(Employee).filter(Employee.id == employee_id).first()

    def get_employees(self, employee_ids: list[str]) -> dict[str, Employee]:
        """Look up several employees at once.

        Args:
            employee_ids: IDs to resolve.

        Returns:
            dict[str, Employee]: Resolved employees keyed by ID. Unknown IDs
            are absent.
        """
        if not employee_ids:
            return {}
        rows = self.db.query(Employee).filter(Employee.id.in_(employee_ids)).all()
        return {e.id: e for e in rows}

    def create_employee(self, data: EmployeeCreate) -> Employee:
        """Create an employee.

        Raises:
            DuplicateEmployeeNumberError: If the employee number is taken.
        """
        employee = Employee(name=data.name, employee_number=data.employee_number)
        self.db.add(employee)
        self._commit(data.employee_number)
        self.db.refresh(employee)
        logger.info("Created employee %s (%s)", employee.id, employee.employee_number)
        return employee

    def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Employee | None:
        """Update name and employee number.

        Returns:
            Employee | None: Updated employee, or None if not found.

        Raises:
            DuplicateEmployeeNumberError: If the new number is taken.
        """
        employee = self.get_employee(employee_id)
        if not employee:
            return None
        employee.name = data.name
        employee.employee_number = data.employee_number
        employee.updated_at = datetime.utcnow()
        self._commit(data.employee_number)
        self.db.refresh(employee)
        return employee

    def set_active(self, employee_id: str, active: bool) -> Employee | None:
        """Deactivate or reactivate an employee.

        Returns:
            Employee | None: Updated employee, or None if not found.
        """
        employee = self.get_employee(employee_id)
        if not employee:
            return None
        employee.active = active
        employee.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(employee)
        logger.info("Employee %s %s", employee.id, "activated" if active else "deactivated")
        return employee

    def _commit(self, employee_number: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEmployeeNumberError(employee_number) from e


def get_employee_service(db: Session) -> EmployeeService:
    """Factory for the employee service."""
    return EmployeeService(db)
