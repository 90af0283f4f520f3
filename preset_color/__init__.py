"""
preset-color: color preset for utility-first CSS hosts.

- Splits flat hyphenated color tokens into nested theme colors
- Registers ``text-<bg>-foreground`` style utilities whose text color is
  computed from the background with CSS relative-color syntax
"""

from preset_color.components.contrast import ContrastOptions
from preset_color.components.fallback_color import fallback_color
from preset_color.components.preset import Preset, PresetColorOptions, preset_color
from preset_color.components.split_colors import split_colors
from preset_color.core.entities import Preflight, Rule, UtilityMatch

__all__ = [
    "ContrastOptions",
    "Preflight",
    "Preset",
    "PresetColorOptions",
    "Rule",
    "UtilityMatch",
    "fallback_color",
    "preset_color",
    "split_colors",
]
