"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from dsa_drills import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for dsa_drills:" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_matches_pyproject() -> None:
    from dsa_drills import __init__conf__

    project = cast(dict[str, Any], _load_pyproject()["project"])
    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert __init__conf__.shell_command in project["scripts"]


@pytest.mark.os_agnostic
def test_py_typed_marker_exists_and_ships_in_wheel() -> None:
    wheel = _wheel_table()
    package_dir = PROJECT_ROOT / cast(list[str], wheel["packages"])[0]

    assert (package_dir / "py.typed").is_file()
    assert any("py.typed" in entry for entry in cast(list[str], wheel.get("include", [])))


@pytest.mark.os_agnostic
def test_default_config_ships_in_wheel() -> None:
    assert any("defaultconfig.toml" in entry for entry in cast(list[str], _wheel_table().get("include", [])))
