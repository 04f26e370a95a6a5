"""Typed view of the ``[dsa_drills]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from dsa_drills.domain.enums import OutputFormat


class DrillsConfigModel(BaseModel):
    """Pydantic model for the [dsa_drills] config section.

    Unknown keys are rejected so typos surface as configuration errors.

    Example:
        >>> DrillsConfigModel().output_format
        <OutputFormat.HUMAN: 'human'>
        >>> DrillsConfigModel(output_format="json").output_format.value
        'json'
    """

    output_format: OutputFormat = OutputFormat.HUMAN

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_drills_settings(config: Config) -> DrillsConfigModel:
    """Parse the ``[dsa_drills]`` section of *config*.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.

    Example:
        >>> load_drills_settings(Config({}, {})).output_format.value
        'human'
    """
    raw: object = config.get("dsa_drills", default={})
    return DrillsConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "DrillsConfigModel",
    "load_drills_settings",
]
