"""Helpers for validating and merging request fields."""

from typing import Any, Mapping

from authapi.errors import ArgumentError


def is_blank(value: Any) -> bool:
    """Returns True unless the value is a string with non-whitespace content."""
    return not isinstance(value, str) or not value.strip()


def require_string(value: Any, message: str) -> str:
    if is_blank(value):
        raise ArgumentError(message)
    return value


def require_mapping(value: Any, message: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ArgumentError(message)
    return value


def merge_fields(
    defaults: Mapping[str, Any],
    data: Mapping[str, Any],
    forced: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Builds a request payload from layered field sets.

    Args:
        defaults: Fields taken from the client configuration. Keys whose value
            is None are left out of the payload.
        data: Fields supplied by the caller, which override the defaults.
        forced: Fields fixed by the operation, which override both.

    Returns:
        A new dictionary; none of the inputs are modified.
    """
    merged = {key: value for key, value in defaults.items() if value is not None}
    merged.update(data)
    if forced:
        merged.update(forced)
    return merged
