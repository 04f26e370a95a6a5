"""In-memory configuration adapters for tests.

Same Protocols as the production adapters, but nothing touches the
filesystem. Displayed configurations are recorded instead of printed.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat

#: Every call to :func:`display_config_in_memory`, oldest first.
displayed_configs: list[tuple[Config, OutputFormat, str | None, str | None]] = []


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "dsa_drills" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Record the request in :data:`displayed_configs`."""
    displayed_configs.append((config, output_format, section, profile))


__all__ = [
    "display_config_in_memory",
    "displayed_configs",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
