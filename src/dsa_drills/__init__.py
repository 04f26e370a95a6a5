"""Public package surface: the algorithm functions, catalogue, and metadata.

Everything importable from here is pure domain code except
:func:`get_config` (wired configuration) and :func:`print_info` (metadata).

Example:
    >>> from dsa_drills import two_sum_complement, find_duplicate_values
    >>> two_sum_complement([4, 5, 6], 10)
    (0, 2)
    >>> find_duplicate_values([1, 2, 2, 3, 3, 3])
    [2, 3]
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    DEMO_CASES,
    MAX_FACTORIAL_ARGUMENT,
    OPERATIONS,
    InvalidArgumentError,
    Operation,
    are_anagrams,
    concat_array,
    factorial,
    fibonacci,
    find_duplicate_values,
    get_operation,
    has_adjacent_duplicate,
    has_non_unique_element,
    invoke,
    is_palindrome,
    is_prime_number,
    is_self_reverse,
    reverse_string,
    second_largest,
    smallest_word_first,
    smallest_word_last,
    swap_without_temp,
    two_sum_brute_force,
    two_sum_complement,
)

__all__ = [
    "DEMO_CASES",
    "MAX_FACTORIAL_ARGUMENT",
    "OPERATIONS",
    "InvalidArgumentError",
    "Operation",
    "are_anagrams",
    "concat_array",
    "factorial",
    "fibonacci",
    "find_duplicate_values",
    "get_config",
    "get_operation",
    "has_adjacent_duplicate",
    "has_non_unique_element",
    "invoke",
    "is_palindrome",
    "is_prime_number",
    "is_self_reverse",
    "print_info",
    "reverse_string",
    "second_largest",
    "smallest_word_first",
    "smallest_word_last",
    "swap_without_temp",
    "two_sum_brute_force",
    "two_sum_complement",
]
