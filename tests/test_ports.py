"""Port behavioral contract tests for the in-memory adapters and composition wiring."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from dsa_drills.adapters.memory import (
    display_config_in_memory,
    displayed_configs,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
)
from dsa_drills.domain.enums import OutputFormat

if TYPE_CHECKING:
    from dsa_drills.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


@pytest.fixture
def display_config_impl() -> DisplayConfig:
    return display_config_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_dict(get_config_impl: GetConfig) -> None:
    config = get_config_impl()
    assert isinstance(config, Config)
    assert isinstance(config.as_dict(), dict)


@pytest.mark.os_agnostic
def test_get_default_config_path_returns_toml_path(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    path = get_default_config_path_impl()
    assert isinstance(path, Path)
    assert path.suffix == ".toml"


@pytest.mark.os_agnostic
def test_display_config_records_the_request(display_config_impl: DisplayConfig) -> None:
    config = Config({"dsa_drills": {"output_format": "json"}}, {})
    before = len(displayed_configs)

    display_config_impl(config, output_format=OutputFormat.JSON, section="dsa_drills")

    assert displayed_configs[before:] == [(config, OutputFormat.JSON, "dsa_drills", None)]


@pytest.mark.os_agnostic
def test_init_logging_leaves_an_initialised_runtime(
    init_logging_impl: InitLogging,
    logging_runtime_reset: None,
) -> None:
    init_logging_impl(Config({}, {}))
    init_logging_impl(Config({}, {}))

    assert lib_log_rich.runtime.is_initialised()


# ======================== Composition Wiring Tests ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("builder_name", ["build_production", "build_testing"])
def test_builders_return_fully_callable_app_services(builder_name: str) -> None:
    from dsa_drills import composition

    services = getattr(composition, builder_name)()
    assert isinstance(services, composition.AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))
