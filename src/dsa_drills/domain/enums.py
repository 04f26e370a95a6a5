"""Type-safe domain enums for output formats and operation arguments."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for results and configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Plain, human-readable text.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class ArgumentKind(str, Enum):
    """Kinds of argument an operation in the catalogue accepts.

    Attributes:
        INTEGERS: A sequence of integers, written as comma-separated text.
        INTEGER: A single integer.
        TEXT: A string, passed through unchanged.

    Example:
        >>> ArgumentKind.INTEGERS.value
        'integers'
        >>> ArgumentKind.TEXT == "text"
        True
    """

    INTEGERS = "integers"
    INTEGER = "integer"
    TEXT = "text"


__all__ = [
    "ArgumentKind",
    "OutputFormat",
]
