"""
Field accessors for loosely-typed song records.

Every read of a song field goes through one of these so that facet building,
filtering and the detail view never fail on absent or malformed values.
"""

from typing import Any, Optional, Union

Number = Union[int, float]


def text(value: Any) -> str:
    """Return value if it is a string, else the empty string."""
    return value if isinstance(value, str) else ""


def number(value: Any) -> Optional[Number]:
    """Return value if it is a real number (bools excluded), else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def flag(value: Any) -> bool:
    """True only for a literal boolean true."""
    return value is True


def normalize_terms(value: Any) -> list[str]:
    """Normalize a polymorphic genre/tags field to trimmed, non-empty strings.

    Arrays keep their elements (each trimmed, empties and non-strings dropped);
    a string is split on commas; anything else yields an empty list.

    Example:
        normalize_terms("Pop, British") -> ["Pop", "British"]
        normalize_terms([" Soul ", "", None]) -> ["Soul"]
    """
    if isinstance(value, (list, tuple)):
        parts = [item for item in value if isinstance(item, str)]
    elif isinstance(value, str):
        parts = value.split(",")
    else:
        return []

    return [part.strip() for part in parts if part.strip()]


def split_keys(value: Any) -> list[str]:
    """Split an originalKey value like "C, Em" into ["C", "Em"]."""
    return [part.strip() for part in text(value).split(",") if part.strip()]


def display_value(value: Any) -> str:
    """Render a scalar field for display; absent or structured values become ""."""
    if value is None or isinstance(value, (dict, list, tuple)):
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def string_list(value: Any) -> list[str]:
    """Render an array field (souKeys, chords) as display strings."""
    if not isinstance(value, (list, tuple)):
        return []
    return [display_value(item) for item in value if display_value(item)]
