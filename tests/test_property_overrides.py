"""Property-based tests for CLI configuration overrides.

``parse_override`` and ``coerce_value`` must hold their contracts for every
representable string, not only hand-picked examples.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dsa_drills.adapters.config.overrides import coerce_value, parse_override

IDENTIFIER = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)
ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_reads_integers(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(raw=IDENTIFIER.filter(lambda s: s not in ("true", "false", "null")))
@settings(max_examples=200)
def test_coerce_value_keeps_identifiers_as_text(raw: str) -> None:
    assert coerce_value(raw) == raw


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, keys=st.lists(IDENTIFIER, min_size=1, max_size=4), value=st.text(max_size=50))
@settings(max_examples=200)
def test_parse_override_splits_section_keys_and_value(section: str, keys: list[str], value: str) -> None:
    result = parse_override(f"{section}.{'.'.join(keys)}={value}")

    assert result.section == section
    assert result.key_path == tuple(keys)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
@settings(max_examples=200)
def test_parse_override_rejects_strings_without_equals(raw: str) -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)


@pytest.mark.os_agnostic
@given(
    key_part=st.text(min_size=1).filter(lambda s: "." not in s and "=" not in s),
    value=st.text(max_size=20),
)
@settings(max_examples=200)
def test_parse_override_rejects_keys_without_section(key_part: str, value: str) -> None:
    with pytest.raises(ValueError, match="must contain at least one dot"):
        parse_override(f"{key_part}={value}")
