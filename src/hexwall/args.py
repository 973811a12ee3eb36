"""Argument checks shared by the public entry points."""

__all__ = ["as_string_list"]

from collections.abc import Iterable

from .errors import InvalidArgumentError


def as_string_list(value: str | Iterable[str], name: str) -> list[str]:
    """
    Normalize a string or iterable of strings to a non-empty list.

    A bare string counts as a single item.

    Raises:
        InvalidArgumentError: If the value is empty or holds non-strings
    """
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, Iterable) and not isinstance(value, (bytes, dict)):
        items = list(value)
    else:
        raise InvalidArgumentError(f"{name} must be a non-empty list of strings")

    if not items or not all(isinstance(item, str) for item in items):
        raise InvalidArgumentError(f"{name} must be a non-empty list of strings")

    return items
