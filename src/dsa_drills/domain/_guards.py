"""Input guards shared by the algorithm modules.

Each guard returns its input (normalised where noted) or raises
:class:`~dsa_drills.domain.errors.InvalidArgumentError`.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import InvalidArgumentError


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a meaningful algorithm input
    return isinstance(value, int) and not isinstance(value, bool)


def require_text(value: object, *, name: str = "text") -> str:
    """Return *value* when it is a string.

    Example:
        >>> require_text("abc")
        'abc'
        >>> require_text(None)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidArgumentError: text must be a string, got NoneType
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def require_integer(value: object, *, name: str = "n") -> int:
    """Return *value* when it is an integer (booleans excluded)."""
    if not _is_int(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    return value  # type: ignore[return-value]


def require_non_negative(value: object, *, name: str = "n") -> int:
    """Return *value* when it is an integer >= 0."""
    number = require_integer(value, name=name)
    if number < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {number}")
    return number


def require_integers(values: object, *, name: str = "values") -> list[int]:
    """Return a list copy of *values* when it is a sequence of integers.

    Strings are rejected even though they are sequences.

    Example:
        >>> require_integers((3, 1, 2))
        [3, 1, 2]
    """
    if values is None or isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidArgumentError(f"{name} must be a sequence of integers, got {type(values).__name__}")
    items = list(values)
    for index, item in enumerate(items):
        if not _is_int(item):
            raise InvalidArgumentError(f"{name}[{index}] must be an integer, got {type(item).__name__}")
    return items


__all__ = [
    "require_integer",
    "require_integers",
    "require_non_negative",
    "require_text",
]
