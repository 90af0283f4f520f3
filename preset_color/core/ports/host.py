"""
Host Capability Interfaces.

Protocol-based interfaces for what the utility-CSS host supplies to a
preset at generation time. No implementations here; see
``preset_color.adapters`` for the theme-backed ones.

Key requirements:
- construct_css drops entries whose value is None
- Color resolvers return None when the token cannot be resolved,
  which the host treats as "rule did not match"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeAlias

from preset_color.core.entities import UtilityMatch

CSSValue: TypeAlias = str | int | float | None
CSSObject: TypeAlias = dict[str, CSSValue]


class RuleContext(Protocol):
    """Rendering context passed to every resolver invocation."""

    @property
    def theme(self) -> Mapping[str, Any]:
        """Theme the host was configured with (``theme["colors"]`` etc.)."""
        ...

    def construct_css(self, css: CSSObject) -> str:
        """
        Serialize a CSS property mapping for the current selector.

        Args:
            css: Ordered property mapping; None values are omitted

        Returns:
            CSS text with semicolon-joined declarations
        """
        ...


class ColorResolver(Protocol):
    """Resolves the color body of a match to a property mapping."""

    def __call__(self, match: UtilityMatch, ctx: RuleContext) -> CSSObject | None: ...


class ColorResolverFactory(Protocol):
    """
    Host's standard color-resolution mechanism.

    Args:
        property_name: CSS property to emit (e.g. ``color``)
        prefix: Utility prefix, used for diagnostics
        theme_key: Theme section consulted before ``colors`` (e.g. ``textColor``)
    """

    def __call__(self, property_name: str, prefix: str, theme_key: str) -> ColorResolver: ...
