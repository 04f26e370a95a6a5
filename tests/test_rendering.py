"""Result rendering: human text and orjson documents."""

from __future__ import annotations

import orjson
import pytest

from dsa_drills.adapters.cli.rendering import render_human, render_json, result_payload


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (None, "none"),
        (40, "40"),
        ([], "[]"),
        ([2, 3], "[2, 3]"),
        ((0, 2), "(0, 2)"),
        ("niltoK", "niltoK"),
    ],
)
def test_render_human_formats_each_result_shape(result: object, expected: str) -> None:
    assert render_human(result) == expected


@pytest.mark.os_agnostic
def test_render_json_emits_tuples_as_arrays() -> None:
    document = orjson.loads(render_json(result_payload("two-sum-brute-force", ("4,5,6", "10"), (0, 2))))

    assert document == {"operation": "two-sum-brute-force", "arguments": ["4,5,6", "10"], "result": [0, 2]}


@pytest.mark.os_agnostic
def test_render_json_keeps_absent_results_as_null() -> None:
    assert orjson.loads(render_json(result_payload("second-largest", ["5,5"], None)))["result"] is None


@pytest.mark.os_agnostic
def test_render_json_writes_huge_integers_as_strings() -> None:
    document = orjson.loads(render_json(result_payload("factorial", ["25"], 15511210043330985984000000)))

    assert document["result"] == "15511210043330985984000000"


@pytest.mark.os_agnostic
def test_render_json_keeps_machine_sized_integers_numeric() -> None:
    assert orjson.loads(render_json(result_payload("factorial", ["20"], 2432902008176640000)))["result"] == (
        2432902008176640000
    )
