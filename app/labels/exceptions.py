"""Errors raised while building and rendering labels."""


class LabelError(Exception):
    """Base class for label errors."""


class EmployeeNotFoundError(LabelError):
    """None of the requested employees could be resolved."""

    def __init__(self, employee_ids: list[str]):
        super().__init__("Employee not found.")
        self.employee_ids = employee_ids


class InvalidBarcodeTextError(LabelError, ValueError):
    """Barcode text is empty or not purely numeric."""

    def __init__(self, text: str):
        super().__init__("Invalid barcode text. Use digits only.")
        self.text = text


class BarcodeGenerationError(LabelError):
    """The barcode image could not be produced."""
