"""
Preset component - Build the preset handed to the utility-CSS host.

Wires the split-colors and contrast components together from user
options: the split colors become ``theme["colors"]``, contrast rules and
their preflight are registered only when contrast is enabled.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from preset_color.adapters.theme_colors import theme_color_resolver
from preset_color.components.contrast import (
    BuildContrastInput,
    resolve_contrast_options,
)
from preset_color.components.contrast import run as run_contrast
from preset_color.components.split_colors import split_colors
from preset_color.core.entities import ColorMapping, Preflight, Rule
from preset_color.core.ports.host import ColorResolverFactory

from .models import BuildPresetInput, BuildPresetOutput, Preset, PresetColorOptions

logger = logging.getLogger(__name__)

PRESET_NAME = "preset-color"


def _coerce_options(options: PresetColorOptions | Mapping[str, Any] | None) -> PresetColorOptions:
    if options is None:
        return PresetColorOptions()
    if isinstance(options, PresetColorOptions):
        return options
    return PresetColorOptions.model_validate(options)


def preset_color(
    options: PresetColorOptions | Mapping[str, Any] | None = None,
    *,
    color_resolver: ColorResolverFactory | None = None,
) -> Preset:
    """
    Build the color preset.

    Args:
        options: ``{"colors": ..., "contrast": bool | {...}}`` or a model
        color_resolver: Host color-resolution capability; defaults to the
            theme-backed resolver

    Returns:
        Preset with the split theme colors, contrast rules and preflights

    Raises:
        pydantic.ValidationError: If a mapping of options is malformed
    """
    opts = _coerce_options(options)

    colors: ColorMapping = split_colors(opts.colors) if opts.colors else {}
    rules: list[Rule] = []
    preflights: list[Preflight] = []

    contrast = resolve_contrast_options(opts.contrast)
    if contrast is not None:
        built = run_contrast(
            BuildContrastInput(options=contrast),
            color_resolver=color_resolver or theme_color_resolver,
        )
        rules.extend(built.rules)
        preflights.extend(built.preflights)

    logger.debug(
        f"Built {PRESET_NAME}: {len(colors)} top-level colors, "
        f"{len(rules)} rules, {len(preflights)} preflights"
    )
    return Preset(
        name=PRESET_NAME,
        theme={"colors": colors},
        rules=rules,
        preflights=preflights,
    )


def run(
    inp: BuildPresetInput,
    *,
    color_resolver: ColorResolverFactory | None = None,
) -> BuildPresetOutput:
    """
    Build the preset from validated options.

    This is the main entry point for the preset component.
    """
    return BuildPresetOutput(preset=preset_color(inp.options, color_resolver=color_resolver))
