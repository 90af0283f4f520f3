"""
Dev Host Adapter.

Minimal stand-in for the utility-CSS host, used by the CLI and by
integration tests. It tries the preset's rules in registration order and
emits the first result; there is no specificity, variant handling or
caching.

Key behaviors:
- Preflights are emitted before any utility CSS
- A resolver returning None falls through to the next rule
- Dict results go through ``construct_css``; strings are emitted as-is
- Unmatched utilities are skipped and logged at DEBUG
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from preset_color.core.ports.host import CSSObject

if TYPE_CHECKING:
    from preset_color.components.preset.models import Preset

logger = logging.getLogger(__name__)

SELECTOR_ESCAPE_RE = re.compile(r"([^A-Za-z0-9_-])")


def escape_class(name: str) -> str:
    """Escape a utility name for use as a class selector."""
    return SELECTOR_ESCAPE_RE.sub(r"\\\1", name)


@dataclass
class DevRuleContext:
    """
    RuleContext for one utility.

    Implements the RuleContext protocol.
    """

    theme: Mapping[str, Any]
    selector: str = ""

    def construct_css(self, css: CSSObject) -> str:
        body = "".join(f"{key}:{value};" for key, value in css.items() if value is not None)
        return f"{self.selector}{{{body}}}"


@dataclass
class DevHost:
    """Runs a preset's rules and preflights over a list of utilities."""

    preset: Preset
    # Utilities that matched no rule in the latest render, for test assertions
    unmatched: list[str] = field(default_factory=list)

    def context_for(self, utility: str) -> DevRuleContext:
        return DevRuleContext(theme=self.preset.theme, selector=f".{escape_class(utility)}")

    def preflight_css(self) -> str:
        return "".join(preflight.get_css() for preflight in self.preset.preflights)

    def resolve(self, utility: str) -> str | None:
        """Return CSS for one utility, or None when no rule produces any."""
        ctx = self.context_for(utility)

        for rule in self.preset.rules:
            match = rule.pattern.match(utility)
            if match is None:
                continue

            result = rule.resolver(match, ctx)
            if result is None:
                continue

            return result if isinstance(result, str) else ctx.construct_css(result)

        logger.debug(f"No rule produced CSS for '{utility}'")
        self.unmatched.append(utility)
        return None

    def render(self, utilities: Iterable[str]) -> str:
        """
        Render preflights followed by one line per resolved utility.

        ``unmatched`` is reset so it lists only this call's misses.
        """
        self.unmatched.clear()
        parts: list[str] = []

        preflight = self.preflight_css()
        if preflight:
            parts.append(preflight.rstrip("\n"))

        for utility in utilities:
            css = self.resolve(utility)
            if css:
                parts.append(css)

        return "\n".join(parts)
