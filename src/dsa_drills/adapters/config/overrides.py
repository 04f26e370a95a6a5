"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or a path
            component is empty.

    Examples:
        >>> override = parse_override("dsa_drills.output_format=json")
        >>> override.section, override.key_path, override.value
        ('dsa_drills', ('output_format',), 'json')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Read *raw* as JSON when possible, otherwise keep it as text.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("WARNING")
        (True, 42, 'WARNING')
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` override deep-merged in.

    The original instance is returned untouched when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"dsa_drills": {"output_format": "human"}}, {})
        >>> apply_overrides(cfg, ("dsa_drills.output_format=json",))["dsa_drills"]["output_format"]
        'json'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    nested: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(nested, parse_override(raw))
    return config.with_overrides(nested)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
