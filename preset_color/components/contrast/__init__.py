"""
Contrast component - Relative-color text contrast utilities.
"""

from .component import (
    CONTRAST_VAR,
    DARK_THEME_SELECTOR,
    build_contrast_rules,
    contrast_color,
    contrast_color_resolver,
    contrast_patterns,
    contrast_preflight_css,
    resolve_contrast_options,
    run,
)
from .models import (
    DEFAULT_DELTA,
    DEFAULT_SUFFIX,
    BuildContrastInput,
    BuildContrastOutput,
    ContrastOptions,
    ContrastSetting,
)

__all__ = [
    # Entry points
    "run",
    "build_contrast_rules",
    "contrast_color",
    "contrast_color_resolver",
    "contrast_patterns",
    "contrast_preflight_css",
    "resolve_contrast_options",
    # Models
    "BuildContrastInput",
    "BuildContrastOutput",
    "ContrastOptions",
    "ContrastSetting",
    # Constants
    "CONTRAST_VAR",
    "DARK_THEME_SELECTOR",
    "DEFAULT_DELTA",
    "DEFAULT_SUFFIX",
]
