"""Print sequencing: trigger the print dialog once content is ready."""

from app.printing.controller import PrintController, PrintDocument
from app.printing.popup import (
    PopupBlockedError,
    PopupOutcome,
    PopupPrinter,
    PrintAttempt,
    PrintWindow,
    WindowHost,
    print_selection,
    sheet_url,
)
from app.printing.states import PrintEvent, PrintState, transition
from app.printing.timing import PrintTiming

__all__ = [
    "PrintController",
    "PrintDocument",
    "PopupBlockedError",
    "PopupOutcome",
    "PopupPrinter",
    "PrintAttempt",
    "PrintWindow",
    "WindowHost",
    "print_selection",
    "sheet_url",
    "PrintEvent",
    "PrintState",
    "transition",
    "PrintTiming",
]
