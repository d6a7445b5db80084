"""Selection state for the multi-select label builder.

The selection is an immutable tuple of employee IDs kept in the page URL,
so a failed print never loses it. Every function here returns a new tuple.
"""

from app.labels.schemas import SLOTS_PER_SHEET

Selection = tuple[str, ...]


def parse_selection(raw: str | list[str] | None, limit: int = SLOTS_PER_SHEET) -> Selection:
    """Build a selection from a comma-separated string or repeated params.

    Blank entries and repeats are dropped, first occurrence wins, and the
    result is capped at ``limit``.
    """
    if raw is None:
        return ()
    chunks = raw if isinstance(raw, list) else [raw]
    ids: list[str] = []
    for chunk in chunks:
        for part in chunk.split(","):
            part = part.strip()
            if part and part not in ids:
                ids.append(part)
    return tuple(ids[:limit])


def is_full(selection: Selection, limit: int = SLOTS_PER_SHEET) -> bool:
    return len(selection) >= limit


def toggle(selection: Selection, employee_id: str, limit: int = SLOTS_PER_SHEET) -> Selection:
    """Add an employee, or remove it if already selected.

    Adding to a full selection is a no-op.
    """
    if employee_id in selection:
        return remove(selection, employee_id)
    if is_full(selection, limit):
        return selection
    return selection + (employee_id,)


def remove(selection: Selection, employee_id: str) -> Selection:
    return tuple(i for i in selection if i != employee_id)


def clear(selection: Selection) -> Selection:
    return ()


def to_query(selection: Selection) -> str:
    """Serialise for the ``ids`` query parameter."""
    return ",".join(selection)
