"""
Split-colors component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from preset_color.core.entities import ColorMapping, ColorValue


@dataclass(frozen=True)
class SplitColorsInput:
    """Input for splitting a flat color mapping."""

    colors: Mapping[str, ColorValue]


@dataclass(frozen=True)
class SplitColorsOutput:
    """Output from splitting: a new nested color mapping."""

    colors: ColorMapping
