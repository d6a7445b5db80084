"""Lay out a label request on the fixed sheet grid."""

from urllib.parse import urlencode

from app.labels.formatting import format_employee_barcode, format_employee_name
from app.labels.schemas import (
    EmployeeRef,
    LabelContent,
    LabelRequest,
    LabelSheet,
    SheetGeometry,
    SheetSlot,
    SLOTS_PER_SHEET,
)

DEFAULT_GEOMETRY = SheetGeometry()


def barcode_url(value: str) -> str:
    """Return the image URL for a barcode value."""
    return f"/api/barcode?{urlencode({'text': value})}"


def label_content(ref: EmployeeRef) -> LabelContent:
    """Format an employee for printing."""
    value = format_employee_barcode(ref.barcode_value)
    return LabelContent(
        name=format_employee_name(ref.display_name),
        barcode_value=value,
        barcode_url=barcode_url(value),
    )


def layout_sheet(request: LabelRequest, geometry: SheetGeometry = DEFAULT_GEOMETRY) -> LabelSheet:
    """Place each request entry in the slot with the same index.

    Every slot of the sheet is returned. Slots past the end of the request
    stay blank so partial sheets line up with pre-cut label stock.

    Args:
        request: Employees to print, in order.
        geometry: Sheet layout.

    Returns:
        LabelSheet: All slots, row-major.

    Raises:
        ValueError: If the request has more entries than the sheet has slots.
    """
    entries = request.entries
    if len(entries) > geometry.slot_count:
        raise ValueError(
            f"{len(entries)} labels requested but the sheet holds {geometry.slot_count}"
        )

    slots = []
    for index in range(geometry.slot_count):
        row, column = geometry.slot_position(index)
        x, y = geometry.slot_origin(index)
        label = label_content(entries[index]) if index < len(entries) else None
        slots.append(SheetSlot(index=index, row=row, column=column, x=x, y=y, label=label))
    return LabelSheet(geometry=geometry, slots=slots)


def clamp_label_count(raw: str | int | None) -> int:
    """Parse a requested copy count and clamp it to ``1..SLOTS_PER_SHEET``.

    Missing or non-numeric input gives 1.
    """
    try:
        count = int(raw) if raw is not None else 1
    except (TypeError, ValueError):
        return 1
    return min(SLOTS_PER_SHEET, max(1, count))
