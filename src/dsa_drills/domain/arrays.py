"""Array operations: concatenation, duplicate detection, two-sum, second largest.

All functions are pure. Input sequences are never mutated; results are
fresh lists or tuples. "No answer" is ``None``, ``False`` or ``[]``.
"""

from __future__ import annotations

from collections.abc import Sequence

from ._guards import require_integer, require_integers
from .errors import InvalidArgumentError

IndexPair = tuple[int, int]


def concat_array(values: Sequence[int]) -> list[int]:
    """Return *values* followed by *values* again.

    Example:
        >>> concat_array([1, 2, 3, 4])
        [1, 2, 3, 4, 1, 2, 3, 4]
        >>> concat_array([])
        []
    """
    items = require_integers(values)
    size = len(items)
    output = [0] * (2 * size)
    for index, value in enumerate(items):
        output[index] = value
        output[index + size] = value
    return output


def has_non_unique_element(values: Sequence[int]) -> bool:
    """Return True when any value occurs more than once.

    Example:
        >>> has_non_unique_element([1, 2, 3, 1])
        True
        >>> has_non_unique_element([1, 2, 3])
        False
    """
    items = require_integers(values)
    seen: set[int] = set()
    for value in items:
        seen.add(value)
    return len(seen) < len(items)


def has_adjacent_duplicate(values: Sequence[int]) -> bool:
    """Return True when two neighbouring elements of a sorted sequence are equal.

    Args:
        values: Integers sorted in ascending order.

    Raises:
        InvalidArgumentError: If *values* is not sorted ascending.

    Example:
        >>> has_adjacent_duplicate([1, 2, 2, 5])
        True
        >>> has_adjacent_duplicate([1, 2, 5])
        False
    """
    items = require_integers(values)
    found = False
    for index in range(len(items) - 1):
        current, following = items[index], items[index + 1]
        if following < current:
            raise InvalidArgumentError(f"values must be sorted ascending; index {index + 1} breaks the order")
        if current == following:
            found = True
    return found


def find_duplicate_values(values: Sequence[int]) -> list[int]:
    """Return every value occurring more than once, each listed once, ascending.

    Example:
        >>> find_duplicate_values([3, 1, 3, 2, 2, 3])
        [2, 3]
        >>> find_duplicate_values([])
        []
    """
    ordered = sorted(require_integers(values))
    duplicates: list[int] = []
    for index in range(len(ordered) - 1):
        if ordered[index] == ordered[index + 1] and (not duplicates or duplicates[-1] != ordered[index]):
            duplicates.append(ordered[index])
    return duplicates


def two_sum_brute_force(values: Sequence[int], target: int) -> IndexPair | None:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values sum to *target*.

    Pairs are tried by lowest ``i`` first, then lowest ``j``. Quadratic.

    Example:
        >>> two_sum_brute_force([4, 5, 6], 10)
        (0, 2)
        >>> two_sum_brute_force([4, 5, 6], 99) is None
        True
    """
    items = require_integers(values)
    goal = require_integer(target, name="target")
    size = len(items)
    for i in range(size - 1):
        for j in range(i + 1, size):
            if items[i] + items[j] == goal:
                return (i, j)
    return None


def two_sum_complement(values: Sequence[int], target: int) -> IndexPair | None:
    """Return ``(earlier_index, current_index)`` of the first pair summing to *target*.

    Single pass keeping a value -> index map of everything seen so far; the
    pair is reported as soon as the current element's complement
    (``target - value``) is in the map. Every element, the last one
    included, is tried as the second index.

    Example:
        >>> two_sum_complement([4, 5, 6], 10)
        (0, 2)
        >>> two_sum_complement([1, 2], 5) is None
        True
    """
    items = require_integers(values)
    goal = require_integer(target, name="target")
    seen: dict[int, int] = {}
    for index, value in enumerate(items):
        complement = goal - value
        if complement in seen:
            return (seen[complement], index)
        seen[value] = index
    return None


def second_largest(values: Sequence[int]) -> int | None:
    """Return the largest value strictly below the maximum.

    Returns ``None`` for fewer than two elements or when every element is
    equal to the maximum.

    Example:
        >>> second_largest([10, 40, 20, 30, 50])
        40
        >>> second_largest([5, 5]) is None
        True
    """
    items = require_integers(values)
    if len(items) < 2:
        return None
    first: int | None = None
    second: int | None = None
    for value in items:
        if first is None or value > first:
            second = first
            first = value
        elif value != first and (second is None or value > second):
            second = value
    return second


__all__ = [
    "IndexPair",
    "concat_array",
    "find_duplicate_values",
    "has_adjacent_duplicate",
    "has_non_unique_element",
    "second_largest",
    "two_sum_brute_force",
    "two_sum_complement",
]
