"""Input sanitization helpers."""


def escape_like(value: str) -> str:
    """Escape SQL LIKE/ILIKE wildcard characters in user input.

    Keeps a name search for ``50%`` or ``a_b`` literal. Uses backslash as the
    escape character.

    Args:
        value: Raw user input string.

    Returns:
        Escaped string safe for use in LIKE/ILIKE patterns.
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
