"""Domain layer - pure algorithms with no I/O or framework dependencies.

Contents:
    * :mod:`.arrays` - Concatenation, duplicate detection, two-sum, second largest
    * :mod:`.strings` - Reversal, palindrome and anagram checks, smallest words
    * :mod:`.numbers` - Fibonacci, primality, factorial, arithmetic swap
    * :mod:`.catalogue` - Fixed operation-name to function mapping
    * :mod:`.enums` - Domain enumerations (OutputFormat, ArgumentKind)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .arrays import (
    concat_array,
    find_duplicate_values,
    has_adjacent_duplicate,
    has_non_unique_element,
    second_largest,
    two_sum_brute_force,
    two_sum_complement,
)
from .catalogue import DEMO_CASES, OPERATIONS, Operation, get_operation, invoke, parse_arguments
from .enums import ArgumentKind, OutputFormat
from .errors import InvalidArgumentError
from .numbers import MAX_FACTORIAL_ARGUMENT, factorial, fibonacci, is_prime_number, swap_without_temp
from .strings import (
    are_anagrams,
    is_palindrome,
    is_self_reverse,
    reverse_string,
    smallest_word_first,
    smallest_word_last,
)

__all__ = [
    # Arrays
    "concat_array",
    "find_duplicate_values",
    "has_adjacent_duplicate",
    "has_non_unique_element",
    "second_largest",
    "two_sum_brute_force",
    "two_sum_complement",
    # Strings
    "are_anagrams",
    "is_palindrome",
    "is_self_reverse",
    "reverse_string",
    "smallest_word_first",
    "smallest_word_last",
    # Numbers
    "MAX_FACTORIAL_ARGUMENT",
    "factorial",
    "fibonacci",
    "is_prime_number",
    "swap_without_temp",
    # Catalogue
    "DEMO_CASES",
    "OPERATIONS",
    "Operation",
    "get_operation",
    "invoke",
    "parse_arguments",
    # Enums
    "ArgumentKind",
    "OutputFormat",
    # Errors
    "InvalidArgumentError",
]
