"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; the ``version`` line is the
one patched on releases.

Contents:
    * Project identity (``name``, ``title``, ``version``, ``shell_command``).
    * Layered configuration identifiers used by ``lib_layered_config``.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "dsa_drills"
title: Final[str] = "Array and string micro-algorithm drills"
version = "1.0.0"
homepage: Final[str] = "https://github.com/dsa-drills/dsa-drills"
author: Final[str] = "dsa-drills maintainers"
author_email: Final[str] = "maintainers@dsa-drills.dev"
shell_command: Final[str] = "dsa-drills"

#: Vendor, application and slug identifiers for platform config directories.
LAYEREDCONF_VENDOR: Final[str] = "dsa-drills"
LAYEREDCONF_APP: Final[str] = "dsa-drills"
LAYEREDCONF_SLUG: Final[str] = "dsa-drills"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for dsa_drills:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
