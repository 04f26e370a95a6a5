"""Fixed catalogue mapping operation names to the algorithm functions.

The catalogue is what the CLI exercises: it knows each operation's argument
kinds, turns command-line text into typed arguments, and carries the sample
inputs used by the ``demo`` command.

Contents:
    * :class:`Operation` - Name, callable, argument kinds and summary.
    * :data:`OPERATIONS` - Read-only mapping of every operation by name.
    * :func:`get_operation` / :func:`parse_arguments` / :func:`invoke`.
    * :data:`DEMO_CASES` - Sample inputs for every operation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final

from . import arrays, numbers, strings
from .enums import ArgumentKind
from .errors import InvalidArgumentError

_INTS = ArgumentKind.INTEGERS
_INT = ArgumentKind.INTEGER
_TEXT = ArgumentKind.TEXT


@dataclass(frozen=True, slots=True)
class Operation:
    """A named algorithm together with the argument kinds it expects."""

    name: str
    func: Callable[..., Any]
    arguments: tuple[ArgumentKind, ...]
    summary: str

    def __call__(self, *args: Any) -> Any:
        return self.func(*args)

    @property
    def usage(self) -> str:
        """Argument kinds as shown in help text, e.g. ``<integers> <integer>``."""
        return " ".join(f"<{kind.value}>" for kind in self.arguments)


_CATALOGUE: tuple[Operation, ...] = (
    Operation("is-self-reverse", strings.is_self_reverse, (_TEXT,), "String equals its own reversal"),
    Operation("are-anagrams", strings.are_anagrams, (_TEXT, _TEXT), "Two strings share a character frequency"),
    Operation("concat-array", arrays.concat_array, (_INTS,), "Array followed by itself"),
    Operation("has-non-unique-element", arrays.has_non_unique_element, (_INTS,), "Array contains a duplicate"),
    Operation(
        "has-adjacent-duplicate", arrays.has_adjacent_duplicate, (_INTS,), "Sorted array has equal neighbours"
    ),
    Operation("find-duplicate-values", arrays.find_duplicate_values, (_INTS,), "Repeated values, ascending"),
    Operation("two-sum-brute-force", arrays.two_sum_brute_force, (_INTS, _INT), "Index pair summing to target, O(n^2)"),
    Operation("two-sum-complement", arrays.two_sum_complement, (_INTS, _INT), "Index pair summing to target, O(n)"),
    Operation("is-palindrome", strings.is_palindrome, (_TEXT,), "Palindrome ignoring case and punctuation"),
    Operation("fibonacci", numbers.fibonacci, (_INT,), "First n Fibonacci numbers"),
    Operation("is-prime-number", numbers.is_prime_number, (_INT,), "Primality by trial division"),
    Operation("factorial", numbers.factorial, (_INT,), "n! computed recursively"),
    Operation("reverse-string", strings.reverse_string, (_TEXT,), "Characters in reverse order"),
    Operation("second-largest", arrays.second_largest, (_INTS,), "Largest value below the maximum"),
    Operation("smallest-word-first", strings.smallest_word_first, (_TEXT,), "First shortest word"),
    Operation("smallest-word-last", strings.smallest_word_last, (_TEXT,), "Last shortest word"),
    Operation("swap-without-temp", numbers.swap_without_temp, (_INT, _INT), "Swap two integers arithmetically"),
)

OPERATIONS: Final[Mapping[str, Operation]] = MappingProxyType({op.name: op for op in _CATALOGUE})


def get_operation(name: str) -> Operation:
    """Return the operation registered under *name*.

    Raises:
        InvalidArgumentError: If no operation has that name.

    Example:
        >>> get_operation("fibonacci").arguments
        (<ArgumentKind.INTEGER: 'integer'>,)
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise InvalidArgumentError(f"Unknown operation: {name!r}") from None


def parse_integer(raw: str) -> int:
    """Parse a single integer, tolerating surrounding blanks.

    Example:
        >>> parse_integer(" -7 ")
        -7
    """
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidArgumentError(f"Not an integer: {raw!r}") from None


def parse_integers(raw: str) -> list[int]:
    """Parse comma-separated integers; blank text is the empty sequence.

    Example:
        >>> parse_integers("4, 5,6")
        [4, 5, 6]
        >>> parse_integers("")
        []
    """
    if not raw.strip():
        return []
    return [parse_integer(item) for item in raw.split(",")]


_PARSERS: Final[Mapping[ArgumentKind, Callable[[str], Any]]] = MappingProxyType(
    {
        ArgumentKind.INTEGERS: parse_integers,
        ArgumentKind.INTEGER: parse_integer,
        ArgumentKind.TEXT: str,
    }
)


def parse_arguments(operation: Operation, raw: Sequence[str]) -> list[Any]:
    """Convert command-line strings into the typed arguments *operation* takes.

    Raises:
        InvalidArgumentError: On wrong argument count or unparsable values.
    """
    if len(raw) != len(operation.arguments):
        raise InvalidArgumentError(
            f"{operation.name} expects {len(operation.arguments)} argument(s) "
            f"({operation.usage}), got {len(raw)}"
        )
    return [_PARSERS[kind](value) for kind, value in zip(operation.arguments, raw, strict=True)]


def invoke(name: str, raw: Sequence[str]) -> Any:
    """Look up *name*, parse *raw* and return the operation's result.

    Example:
        >>> invoke("two-sum-brute-force", ["4,5,6", "10"])
        (0, 2)
    """
    operation = get_operation(name)
    return operation(*parse_arguments(operation, raw))


#: Sample inputs for every operation, as command-line strings.
DEMO_CASES: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("is-self-reverse", ("racecar",)),
    ("are-anagrams", ("listen", "silent")),
    ("concat-array", ("1,2,3,4",)),
    ("has-non-unique-element", ("1,2,3,1",)),
    ("has-adjacent-duplicate", ("1,2,2,3",)),
    ("find-duplicate-values", ("1,2,2,3,3,3",)),
    ("two-sum-brute-force", ("4,5,6", "10")),
    ("two-sum-complement", ("4,5,6", "10")),
    ("is-palindrome", ("Madam",)),
    ("fibonacci", ("10",)),
    ("is-prime-number", ("29",)),
    ("factorial", ("5",)),
    ("reverse-string", ("Kotlin",)),
    ("second-largest", ("10,40,20,30,50",)),
    ("smallest-word-first", ("I am word best coder",)),
    ("smallest-word-last", ("I am word best coder",)),
    ("swap-without-temp", ("5", "10")),
)


__all__ = [
    "DEMO_CASES",
    "OPERATIONS",
    "Operation",
    "get_operation",
    "invoke",
    "parse_arguments",
    "parse_integer",
    "parse_integers",
]
