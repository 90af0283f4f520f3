"""
Contrast component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from preset_color.core.entities import Preflight, Rule

DEFAULT_SUFFIX = "foreground"
DEFAULT_DELTA = 60

Sign = Literal["", "+", "-"]


class ContrastOptions(BaseModel):
    """
    Options for contrast-based text colors.

    ``suffix`` names the utility tail (``text-accent-<suffix>``);
    ``default_delta`` is the lightness shift (0-100) used when the utility
    carries none. Values are not range-checked.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    suffix: str = DEFAULT_SUFFIX
    default_delta: int = Field(default=DEFAULT_DELTA, alias="defaultDelta")


ContrastSetting = bool | ContrastOptions | Mapping[str, Any] | None


@dataclass(frozen=True)
class BuildContrastInput:
    """Input for building contrast rules."""

    options: ContrastOptions = field(default_factory=ContrastOptions)


@dataclass(frozen=True)
class BuildContrastOutput:
    """Rules and preflights to register with the host."""

    rules: list[Rule]
    preflights: list[Preflight]
