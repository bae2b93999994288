"""Helpers for reading untyped provider JSON."""

from typing import Any

from pydantic import ValidationError

from wheels_router_mcp.models.trip import UnknownLeg


def as_dict(value: Any) -> dict | None:
    """Return value if it is a JSON object, else None."""
    return value if isinstance(value, dict) else None


def as_list(value: Any) -> list:
    """Return value if it is a JSON array, else an empty list."""
    return value if isinstance(value, list) else []


def first_non_empty(*values: Any) -> Any:
    """Return the first value that is not None or empty."""
    for value in values:
        if value not in (None, ""):
            return value
    return None


def fallback_leg(leg_type: Any, duration: Any) -> UnknownLeg:
    """Build the fallback leg for an unrecognized or unreadable leg object.

    The upstream tag is kept when it is a non-empty string. A duration that
    cannot be read is left out.
    """
    tag = leg_type if isinstance(leg_type, str) and leg_type else "unknown"
    try:
        return UnknownLeg(type=tag, duration_seconds=duration)
    except ValidationError:
        return UnknownLeg(type=tag)
