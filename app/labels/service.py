"""Label sheet service."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.config import Settings
from app.db.models import Employee
from app.employees.service import EmployeeService
from app.labels.barcodes import render_barcode
from app.labels.exceptions import EmployeeNotFoundError
from app.labels.formatting import slugify_filename
from app.labels.image import render_label_card
from app.labels.schemas import EmployeeRef, LabelRequest, LabelSheet
from app.labels.selection import Selection, parse_selection
from app.labels.sheet import clamp_label_count, label_content, layout_sheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelCard:
    """Rendered PNG label and its download filename."""

    content: bytes
    filename: str


def employee_ref(employee: Employee) -> EmployeeRef:
    return EmployeeRef(display_name=employee.name, barcode_value=employee.employee_number)


class LabelService:
    """Resolves employees into printable label sheets.

    Args:
        db: Database session.
        settings: Application settings (barcode rendering options).
    """

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.employees = EmployeeService(db)

    def sheet_for_copies(self, employee_id: str, count: int) -> LabelSheet:
        """Build a sheet with ``count`` copies of one employee.

        Args:
            employee_id: Employee to print.
            count: Copies, already clamped to the sheet size.

        Raises:
            EmployeeNotFoundError: If the employee does not exist.
        """
        employee = self.employees.get_employee(employee_id)
        if not employee:
            raise EmployeeNotFoundError([employee_id])
        ref = employee_ref(employee)
        return layout_sheet(LabelRequest(entries=[ref] * count))

    def sheet_for_selection(self, selection: Selection) -> LabelSheet:
        """Build a sheet with one label per selected employee.

        IDs that do not resolve are dropped; the remaining employees keep
        their relative order.

        Raises:
            EmployeeNotFoundError: If no selected ID resolves.
        """
        found = self.employees.get_employees(list(selection))
        refs = [employee_ref(found[i]) for i in selection if i in found]
        missing = [i for i in selection if i not in found]
        if missing:
            logger.info("Dropping %d unresolved employee id(s) from label sheet", len(missing))
        if not refs:
            raise EmployeeNotFoundError(list(selection))
        return layout_sheet(LabelRequest(entries=refs))

    def sheet_from_params(
        self,
        employee_id: str | None = None,
        count: str | int | None = None,
        ids: str | list[str] | None = None,
    ) -> LabelSheet:
        """Build a sheet from print-page query parameters.

        ``ids`` (multi-select) takes precedence over ``employee_id`` plus
        ``count`` (copies of one employee).

        Raises:
            EmployeeNotFoundError: If nothing resolves or no ID was given.
        """
        selection = parse_selection(ids)
        if selection:
            return self.sheet_for_selection(selection)
        employee_id = (employee_id or "").strip()
        if not employee_id:
            raise EmployeeNotFoundError([])
        return self.sheet_for_copies(employee_id, clamp_label_count(count))

    def label_card(self, employee_id: str) -> LabelCard:
        """Render a downloadable PNG card for one employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist.
            BarcodeGenerationError: If the barcode cannot be rendered.
        """
        employee = self.employees.get_employee(employee_id)
        if not employee:
            raise EmployeeNotFoundError([employee_id])
        content = label_content(employee_ref(employee))
        symbol = render_barcode(
            content.barcode_value,
            symbology=self.settings.barcode_symbology,
            scale=self.settings.barcode_scale,
            height=self.settings.barcode_height,
        )
        return LabelCard(
            content=render_label_card(content, symbol.content),
            filename=f"{slugify_filename(content.name)}.png",
        )


def get_label_service(db: Session, settings: Settings) -> LabelService:
    """Factory for the label service."""
    return LabelService(db, settings)
