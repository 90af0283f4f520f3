"""
Contrast component - Text colors computed from their background.

Registers utilities such as ``text-primary-foreground`` that derive a
readable text color from the ``primary`` background with CSS
relative-color syntax::

    oklch(from <bg> calc(l - var(--contrast-dark) * <sign>.<delta>) c h)

``--contrast-dark`` is ``1`` at ``:root`` and ``-1`` under the dark theme,
so the same formula darkens in light mode and lightens in dark mode.

Utility surface:
- ``text-<bg>-<suffix>``, ``text-color-<bg>-<suffix>``
- ``color-<bg>-<suffix>``, ``c-<bg>-<suffix>``
- each with an optional ``-<sign><delta>`` tail (``-+20``, ``--20``, ``-20``)

See https://developer.chrome.com/blog/css-relative-color-syntax#contrast_a_color
"""

from __future__ import annotations

import logging
import re

from preset_color.components.fallback_color import fallback_color
from preset_color.core.entities import Preflight, Resolver, Rule, UtilityMatch
from preset_color.core.ports.host import (
    ColorResolverFactory,
    CSSObject,
    RuleContext,
)

from .models import (
    DEFAULT_DELTA,
    BuildContrastInput,
    BuildContrastOutput,
    ContrastOptions,
    ContrastSetting,
    Sign,
)

logger = logging.getLogger(__name__)

REMOVE_COMMENT_RE = re.compile(r"/\*.*?\*/")

# Lightness sign flip between light and dark themes
CONTRAST_VAR = "--contrast-dark"
DARK_THEME_SELECTOR = '[data-kb-theme="dark"]'


def resolve_contrast_options(contrast: ContrastSetting) -> ContrastOptions | None:
    """
    Merge user contrast settings with defaults.

    ``None``/``False`` disable contrast rules, ``True`` enables them with
    defaults, a mapping is validated into ContrastOptions.
    """
    if contrast is None or contrast is False:
        return None
    if contrast is True:
        return ContrastOptions()
    if isinstance(contrast, ContrastOptions):
        return contrast
    return ContrastOptions.model_validate(contrast)


def contrast_patterns(suffix: str) -> list[re.Pattern[str]]:
    """
    Build the utility patterns for ``suffix``.

    Group 1 is always the background token (``bg``) so host color
    resolvers can read it positionally.
    """
    tail = rf"-(?P<suffix>{re.escape(suffix)})(?:-(?P<sign>[+-])?(?P<delta>\d+))?$"
    return [
        re.compile(rf"^text-(?:color-)?(?P<bg>.+){tail}"),
        re.compile(rf"^(?:color|c)-(?P<bg>.+){tail}"),
    ]


def contrast_color(
    css: CSSObject,
    delta: int | str = DEFAULT_DELTA,
    sign: Sign = "",
) -> list[str] | None:
    """
    Build contrast expressions for the ``color`` of ``css``.

    Args:
        css: Resolved background color mapping
        delta: Lightness shift (0-100), substituted as text
        sign: ``+``, ``-`` or empty

    Returns:
        ``[oklch, lch]`` expressions, or None when ``css`` has no string color
    """
    color = css.get("color")
    if not color or not isinstance(color, str):
        return None
    color = REMOVE_COMMENT_RE.sub("", color).strip()

    # oklch's l is from 0 to 1
    oklch = f"oklch(from {color} calc(l - var({CONTRAST_VAR}) * {sign}.{delta}) c h)"
    # lch's l is from 0 to 100
    lch = f"lch(from {color} calc(l - var({CONTRAST_VAR}) * {sign}{delta}) c h)"
    return [oklch, lch]


def contrast_color_resolver(
    color_resolver: ColorResolverFactory,
    default_delta: int = DEFAULT_DELTA,
) -> Resolver:
    """
    Return a rule resolver producing a contrast color fallback chain.

    The background is resolved through the host's text color resolver. When
    the theme also defines ``<bg>-<suffix>`` explicitly, that color is added
    as the oldest fallback. Returns None (no match) when the background
    cannot be resolved.
    """
    resolve_text_color = color_resolver("color", "text", "textColor")

    def resolver(match: re.Match[str], ctx: RuleContext) -> str | None:
        utility = UtilityMatch.from_match(match)

        bg_css = resolve_text_color(utility, ctx)
        if not bg_css:
            logger.debug(f"No background color for '{utility.text}'")
            return None

        delta = utility.group("delta")
        raw_sign = utility.group("sign")
        sign: Sign = "+" if raw_sign == "+" else "-" if raw_sign == "-" else ""
        contrasts = contrast_color(bg_css, default_delta if delta is None else delta, sign)
        if contrasts is None:
            return None

        named = f"{utility.group('bg')}-{utility.group('suffix')}"
        named_css = resolve_text_color(utility.with_body(named), ctx)
        named_color = named_css.get("color") if named_css else None
        if isinstance(named_color, str):
            logger.debug(f"Using theme color '{named}' as fallback for '{utility.text}'")
            contrasts.append(named_color)

        return fallback_color(bg_css, contrasts, ctx)

    return resolver


def contrast_preflight_css() -> str:
    """Declare ``--contrast-dark`` for light and dark themes."""
    return (
        ":root {\n"
        f"  {CONTRAST_VAR}: 1;\n"
        "}\n"
        f"{DARK_THEME_SELECTOR} {{\n"
        f"  {CONTRAST_VAR}: -1;\n"
        "}\n"
    )


def build_contrast_rules(
    options: ContrastOptions,
    *,
    color_resolver: ColorResolverFactory,
) -> list[Rule]:
    resolver = contrast_color_resolver(color_resolver, options.default_delta)
    return [Rule(pattern, resolver) for pattern in contrast_patterns(options.suffix)]


def run(
    inp: BuildContrastInput,
    *,
    color_resolver: ColorResolverFactory,
) -> BuildContrastOutput:
    """
    Build contrast rules and the preflight that backs them.

    Args:
        inp: Input containing contrast options.
        color_resolver: Host color-resolution capability.

    Returns:
        BuildContrastOutput with rules in registration order.
    """
    return BuildContrastOutput(
        rules=build_contrast_rules(inp.options, color_resolver=color_resolver),
        preflights=[Preflight(get_css=contrast_preflight_css)],
    )
