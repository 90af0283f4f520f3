"""
Preset component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from preset_color.components.contrast.models import ContrastOptions
from preset_color.core.entities import Preflight, Rule


def _normalize_colors(colors: Mapping[Any, Any], path: str) -> dict[str, Any]:
    """Stringify keys and numeric leaves; reject anything else."""
    normalized: dict[str, Any] = {}
    for key, value in colors.items():
        name = str(key)
        if isinstance(value, Mapping):
            normalized[name] = _normalize_colors(value, f"{path}.{name}")
        elif isinstance(value, str):
            normalized[name] = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            normalized[name] = str(value)
        else:
            raise ValueError(
                f"{path}.{name}: expected a color string or mapping, got {type(value).__name__}"
            )
    return normalized


class PresetColorOptions(BaseModel):
    """
    Preset options.

    Attributes:
        colors: Color mapping; hyphenated keys are split into nesting
        contrast: Enable contrast text colors (``True`` or ContrastOptions;
            ``None`` or ``False`` disable them)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    colors: dict[str, Any] | None = None
    contrast: bool | ContrastOptions | None = False

    @field_validator("colors", mode="before")
    @classmethod
    def _check_colors(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise ValueError("colors must be a mapping")
        return _normalize_colors(value, "colors")


@dataclass(frozen=True)
class Preset:
    """
    Preset handed to the host.

    ``rules`` are consumed in registration order; ``preflights`` are
    emitted regardless of which utilities matched.
    """

    name: str
    theme: dict[str, Any]
    rules: list[Rule] = field(default_factory=list)
    preflights: list[Preflight] = field(default_factory=list)


@dataclass(frozen=True)
class BuildPresetInput:
    """Input for building the preset."""

    options: PresetColorOptions = field(default_factory=PresetColorOptions)


@dataclass(frozen=True)
class BuildPresetOutput:
    """Output from building the preset."""

    preset: Preset
