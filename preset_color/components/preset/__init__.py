"""
Preset component - Theme colors, contrast rules and preflights.
"""

from .component import PRESET_NAME, preset_color, run
from .models import (
    BuildPresetInput,
    BuildPresetOutput,
    Preset,
    PresetColorOptions,
)

__all__ = [
    # Entry points
    "run",
    "preset_color",
    # Models
    "BuildPresetInput",
    "BuildPresetOutput",
    "Preset",
    "PresetColorOptions",
    # Constants
    "PRESET_NAME",
]
