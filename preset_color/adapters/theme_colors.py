"""
Theme color resolver adapter.

Implements ColorResolverFactory against the theme carried by the rule
context, the way utility hosts resolve ``text-<token>`` bodies:

- ``[#123456]`` arbitrary values (``_`` stands for a space)
- keywords ``transparent``, ``current``, ``inherit``
- ``theme[theme_key]`` first, then ``theme["colors"]``
- hyphenated bodies walk nested mappings, longest key first, and a
  mapping hit resolves to its ``DEFAULT``
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from preset_color.core.entities import DEFAULT_KEY, UtilityMatch
from preset_color.core.ports.host import ColorResolver, CSSObject, RuleContext

logger = logging.getLogger(__name__)

ARBITRARY_VALUE_RE = re.compile(r"^\[(?P<value>[^\]]+)\]$")

COLOR_KEYWORDS = {
    "transparent": "transparent",
    "current": "currentColor",
    "inherit": "inherit",
}


def _leaf(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping) and isinstance(value.get(DEFAULT_KEY), str):
        return value[DEFAULT_KEY]
    return None


def lookup_color(colors: Mapping[str, Any], body: str) -> str | None:
    """
    Find the color for a hyphenated body in a nested color mapping.

    Both ``{"sidebar-primary": ...}`` and ``{"sidebar": {"primary": ...}}``
    resolve ``sidebar-primary``.
    """
    segments = body.split("-")

    for i in range(len(segments), 0, -1):
        head = "-".join(segments[:i])
        if head not in colors:
            continue

        value = colors[head]
        rest = segments[i:]
        if not rest:
            found = _leaf(value)
        elif isinstance(value, Mapping):
            found = lookup_color(value, "-".join(rest))
        else:
            found = None

        if found is not None:
            return found

    return None


def theme_color_resolver(property_name: str, prefix: str, theme_key: str) -> ColorResolver:
    """Return a resolver emitting ``{property_name: <color>}`` for a match body."""

    def resolve(match: UtilityMatch, ctx: RuleContext) -> CSSObject | None:
        body = match.body
        if not body:
            return None

        arbitrary = ARBITRARY_VALUE_RE.match(body)
        if arbitrary:
            return {property_name: arbitrary.group("value").replace("_", " ")}

        if body in COLOR_KEYWORDS:
            return {property_name: COLOR_KEYWORDS[body]}

        for key in (theme_key, "colors"):
            palette = ctx.theme.get(key)
            if isinstance(palette, Mapping):
                color = lookup_color(palette, body)
                if color is not None:
                    return {property_name: color}

        logger.debug(f"No {prefix} color '{body}' in theme")
        return None

    return resolve
