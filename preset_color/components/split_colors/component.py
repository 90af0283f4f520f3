"""
Split-colors component - Explode hyphenated color keys into nesting.

Turns a flat token map such as ``{"text-secondary-foreground": "yellow"}``
into the nested theme shape the host expects
(``{"text": {"secondary": {"foreground": "yellow"}}}``).

Key behaviors:
- A string leaf that later needs a child becomes ``{"DEFAULT": <string>}``
- Mapping values are normalized recursively
- The caller's mapping is copied, never mutated
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from preset_color.core.entities import DEFAULT_KEY, ColorMapping, ColorValue

from .models import SplitColorsInput, SplitColorsOutput

logger = logging.getLogger(__name__)

SEPARATOR = "-"


def _copy_tree(colors: Mapping[str, ColorValue]) -> ColorMapping:
    return {
        key: _copy_tree(value) if isinstance(value, Mapping) else value
        for key, value in colors.items()
    }


def _descend(node: ColorMapping, segment: str) -> ColorMapping:
    """Return the child mapping at ``segment``, creating or promoting it."""
    child = node.get(segment)
    if child is None:
        child = node[segment] = {}
    elif not isinstance(child, dict):
        child = node[segment] = {DEFAULT_KEY: child}
    return child


def _attach(node: ColorMapping, leaf: str, value: ColorValue) -> None:
    current = node.get(leaf)

    if isinstance(current, dict):
        if isinstance(value, dict):
            current.update(value)
        else:
            current[DEFAULT_KEY] = value
    elif current is not None and isinstance(value, dict):
        node[leaf] = {DEFAULT_KEY: current, **value}
    else:
        # last write wins
        node[leaf] = value


def _split_in_place(colors: ColorMapping) -> ColorMapping:
    for key in list(colors):
        value = colors[key]

        if SEPARATOR in key:
            *parents, leaf = key.split(SEPARATOR)
            del colors[key]

            node = colors
            for segment in parents:
                node = _descend(node, segment)

            if isinstance(value, dict):
                value = _split_in_place(value)
            _attach(node, leaf, value)
            logger.debug(f"Split color key '{key}' into {[*parents, leaf]}")

        elif isinstance(value, dict):
            _split_in_place(value)

    return colors


def split_colors(colors: Mapping[str, ColorValue]) -> ColorMapping:
    """
    Split a color mapping into a nested mapping.

    Example:
        split_colors({
            "bg-primary": "red",
            "bg-primary-hover": "blue",
            "text-secondary": "green",
            "text-secondary-underline": "yellow",
        })
        # {"bg": {"primary": {"DEFAULT": "red", "hover": "blue"}},
        #  "text": {"secondary": {"DEFAULT": "green", "underline": "yellow"}}}

    Args:
        colors: Color mapping; keys may be hyphen-segmented

    Returns:
        New nested mapping. Splitting it again returns an equal mapping.
    """
    return _split_in_place(_copy_tree(colors))


def run(inp: SplitColorsInput) -> SplitColorsOutput:
    """
    Split colors.

    Pure function - no I/O operations.
    """
    return SplitColorsOutput(colors=split_colors(inp.colors))
