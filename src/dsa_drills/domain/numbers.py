"""Number operations: fibonacci, primality, factorial, swap."""

from __future__ import annotations

from math import isqrt
from typing import Final

from ._guards import require_integer, require_non_negative
from .errors import InvalidArgumentError

#: Largest argument :func:`factorial` accepts; keeps the recursion well
#: below the interpreter's default recursion limit.
MAX_FACTORIAL_ARGUMENT: Final[int] = 500


def fibonacci(count: int) -> list[int]:
    """Return the first *count* Fibonacci numbers, starting ``0, 1``.

    Example:
        >>> fibonacci(10)
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
        >>> fibonacci(1)
        [0]
        >>> fibonacci(0)
        []
    """
    size = require_non_negative(count, name="count")
    sequence = [0, 1]
    for index in range(2, size):
        sequence.append(sequence[index - 1] + sequence[index - 2])
    return sequence[:size]


def is_prime_number(n: int) -> bool:
    """Return True when *n* is a prime number.

    Trial division by every candidate from 2 up to the integer square root.

    Example:
        >>> is_prime_number(29)
        True
        >>> is_prime_number(9)
        False
        >>> is_prime_number(1)
        False
    """
    number = require_integer(n)
    if number <= 1:
        return False
    return all(number % divisor != 0 for divisor in range(2, isqrt(number) + 1))


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively.

    Raises:
        InvalidArgumentError: If *n* is negative or above
            :data:`MAX_FACTORIAL_ARGUMENT`.

    Example:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
    """
    number = require_non_negative(n)
    if number > MAX_FACTORIAL_ARGUMENT:
        raise InvalidArgumentError(f"n must be at most {MAX_FACTORIAL_ARGUMENT}, got {number}")
    return _factorial(number)


def _factorial(n: int) -> int:
    return 1 if n == 0 else n * _factorial(n - 1)


def swap_without_temp(first: int, second: int) -> tuple[int, int]:
    """Swap two integers using arithmetic only, without a temporary variable.

    Example:
        >>> swap_without_temp(5, 10)
        (10, 5)
    """
    a = require_integer(first, name="first")
    b = require_integer(second, name="second")
    a = a + b
    b = a - b
    a = a - b
    return (a, b)


__all__ = [
    "MAX_FACTORIAL_ARGUMENT",
    "factorial",
    "fibonacci",
    "is_prime_number",
    "swap_without_temp",
]
