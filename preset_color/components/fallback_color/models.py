"""
Fallback-color component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from preset_color.core.ports.host import CSSObject


@dataclass(frozen=True)
class FallbackColorInput:
    """
    Input for emitting a color fallback chain.

    ``colors[0]`` is the authoritative value, later entries are fallbacks
    for engines that do not understand it.
    """

    css: CSSObject
    colors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FallbackColorOutput:
    """CSS text with one ``color:`` declaration per candidate."""

    css: str
