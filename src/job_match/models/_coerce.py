"""Shared coercion helpers for loosely-shaped profile and job records."""

from typing import Any


def coerce_to_list(v: Any) -> list[str]:
    """Coerce various inputs to a list of strings.

    ``None`` becomes an empty list and a comma-separated string (as sent by
    simple form fields) is split into its trimmed items.
    """
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(item) for item in v]
    if isinstance(v, str):
        v = v.strip()
        if "," in v:
            return [item.strip() for item in v.split(",") if item.strip()]
        return [v] if v else []
    return [str(v)]


def coerce_to_str(v: Any) -> Any:
    """Map ``None`` to an empty string, leave everything else to pydantic."""
    if v is None:
        return ""
    return v
