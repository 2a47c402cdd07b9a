"""Material availability status normalization."""

from typing import Any

YES_VALUES = frozenset({"yes", "true", "y", "1"})
DRAFT_VALUES = frozenset({"draft", "wip", "work in progress"})
NO_VALUES = frozenset({"no", "false", "n", "0"})


def normalize_status(raw: Any) -> str:
    """Map a free-text availability marker to "Yes", "Draft" or "No".

    Empty or absent input gives "". Anything unrecognised is returned
    unchanged (untrimmed) so it can still be shown verbatim.

    Example:
        normalize_status(" WIP ") -> "Draft"
        normalize_status("maybe") -> "maybe"
    """
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raw = str(raw).lower() if isinstance(raw, bool) else str(raw)

    value = raw.strip().lower()
    if not value:
        return ""
    if value in YES_VALUES:
        return "Yes"
    if value in DRAFT_VALUES:
        return "Draft"
    if value in NO_VALUES:
        return "No"
    return raw
