"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Malformed or out-of-domain input to an algorithm.

    Raised for inputs the algorithms cannot give a meaningful answer for:
    a missing string, a negative count, unsorted input where sorted input
    is required. "Valid input, no answer" is never an error; those cases
    return ``None``, ``False`` or an empty list instead.

    Inherits from ValueError so plain ``except ValueError`` handlers keep
    working.

    Example:
        >>> from dsa_drills.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("count must be non-negative, got -1")
        >>> str(err)
        'count must be non-negative, got -1'
        >>> isinstance(err, ValueError)
        True
    """


__all__ = ["InvalidArgumentError"]
