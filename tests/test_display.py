"""Integration tests for the config display wrapper.

The wrapper flushes pending log records, then delegates to
lib_layered_config's renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from dsa_drills.adapters.config.display import display_config
from dsa_drills.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    config = config_factory({"dsa_drills": {"output_format": "human"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(Config({"dsa_drills": {"output_format": "json"}}, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[dsa_drills]" in output
    assert 'output_format = "json"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(Config({"dsa_drills": {"output_format": "json"}}, {}), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"dsa_drills"' in output
    assert '"output_format": "json"' in output


@pytest.mark.os_agnostic
def test_display_config_shows_section_with_falsey_values(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"section": {"count": 0, "enabled": False}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="section")

    output = capsys.readouterr().out
    assert "count = 0" in output
    assert "enabled = false" in output
