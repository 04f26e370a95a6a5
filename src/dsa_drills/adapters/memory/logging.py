"""In-memory logging adapter for tests.

Commands bind log context through ``lib_log_rich.runtime.bind``, which needs
an initialised runtime. This adapter provides one without reading ``.env``
files or configuration, with console output limited to critical records.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from dsa_drills import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Initialise a console-quiet lib_log_rich runtime; later calls are no-ops.

    *config* is ignored so tests behave the same whatever the configuration.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
