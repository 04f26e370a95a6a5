"""Render operation results as human-readable text or JSON."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import orjson

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def render_human(result: Any) -> str:
    """Format *result* for the terminal.

    Examples:
        >>> render_human(True), render_human(None)
        ('true', 'none')
        >>> render_human([0, 1, 1])
        '[0, 1, 1]'
        >>> render_human((0, 2))
        '(0, 2)'
        >>> render_human("niltoK")
        'niltoK'
    """
    if isinstance(result, bool):
        return "true" if result else "false"
    if result is None:
        return "none"
    if isinstance(result, list):
        return "[" + ", ".join(render_human(item) for item in result) + "]"
    if isinstance(result, tuple):
        return "(" + ", ".join(render_human(item) for item in result) + ")"
    return str(result)


def result_payload(operation: str, arguments: Sequence[str], result: Any) -> dict[str, Any]:
    """Bundle one invocation into the JSON document shape."""
    return {"operation": operation, "arguments": list(arguments), "result": result}


def _widen(value: Any) -> Any:
    """Replace integers orjson cannot encode with their decimal string."""
    if isinstance(value, int) and not isinstance(value, bool) and not _INT64_MIN <= value <= _INT64_MAX:
        return str(value)
    if isinstance(value, dict):
        return {key: _widen(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_widen(item) for item in value]
    return value


def render_json(payload: Any) -> str:
    """Serialise *payload* with orjson; tuples become arrays.

    Integers beyond the signed 64-bit range (large factorials) are emitted
    as strings.

    Examples:
        >>> render_json(result_payload("two-sum-complement", ["4,5,6", "10"], (0, 2)))
        '{"operation":"two-sum-complement","arguments":["4,5,6","10"],"result":[0,2]}'
        >>> render_json({"result": 2**64})
        '{"result":"18446744073709551616"}'
    """
    return orjson.dumps(_widen(payload)).decode("utf-8")


__all__ = [
    "render_human",
    "render_json",
    "result_payload",
]
