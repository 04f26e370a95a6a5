"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Catalogue commands from :mod:`.operations`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .operations import cli_demo, cli_list, cli_run

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_info",
    "cli_list",
    "cli_run",
]
