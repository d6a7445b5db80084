"""Text formatting for badge labels."""

import re

_WHITESPACE = re.compile(r"\s+")
_BARCODE_TEXT = re.compile(r"[0-9]+")


def format_employee_name(name: str) -> str:
    """Format a name as ``Surname, Given names`` for the label.

    Whitespace is collapsed and trimmed first. A name that already contains
    a comma is treated as ``Surname, rest`` and only normalised; otherwise
    the last word is moved to the front. Single words pass through.

    Args:
        name: Raw name as stored in the directory.

    Returns:
        str: Display name for the label.

    Examples:
        >>> format_employee_name("  Avery   Cole  ")
        'Cole, Avery'
        >>> format_employee_name("Cole, Avery")
        'Cole, Avery'
    """
    collapsed = _WHITESPACE.sub(" ", name).strip()
    if not collapsed:
        return ""

    if "," in collapsed:
        surname, remainder = collapsed.split(",", 1)
        surname, remainder = surname.strip(), remainder.strip()
        return f"{surname}, {remainder}" if remainder else surname

    parts = collapsed.split(" ")
    if len(parts) == 1:
        return collapsed
    return f"{parts[-1]}, {' '.join(parts[:-1])}"


def format_employee_barcode(employee_number: str) -> str:
    """Return the value encoded in the barcode symbol.

    Kept apart from name formatting: symbol content must never pick up
    cosmetic changes.
    """
    return employee_number.strip()


def is_valid_barcode_text(text: str) -> bool:
    """Return True for a non-empty string of ASCII digits."""
    return _BARCODE_TEXT.fullmatch(text) is not None


def slugify_filename(value: str, default: str = "employee-label") -> str:
    """Turn a display name into a safe download filename stem."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.strip().lower()).strip("-")
    return slug or default
