"""
Fallback-color component - Duplicate ``color`` declarations as a fallback chain.

Browsers apply the last ``color`` declaration they understand, so the
candidates are written least-preferred first and the most advanced
syntax last.

Key behaviors:
- The original ``color`` entry is omitted from the output
- Candidates are injected reversed under ``color$fallback<i>`` names,
  serialized by the host, then renamed back to ``color``
- Other properties keep the order the host serializer gives them
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from preset_color.core.ports.host import CSSObject, RuleContext

from .models import FallbackColorInput, FallbackColorOutput

FALLBACK_PROPERTY = "color$fallback"
FALLBACK_DECLARATION_RE = re.compile(r"color\$fallback\d+:")


def fallback_color(css: CSSObject, colors: Sequence[str], ctx: RuleContext) -> str:
    """
    Serialize ``css`` with ``color`` replaced by a fallback chain.

    Args:
        css: Property mapping; not modified
        colors: Candidates, authoritative first; not modified
        ctx: Rule context providing ``construct_css``

    Returns:
        CSS text from the host serializer with every candidate declared as
        its own ``color:`` entry
    """
    body: CSSObject = dict(css)
    if "color" in body:
        body["color"] = None

    for i, color in enumerate(reversed(colors)):
        body[f"{FALLBACK_PROPERTY}{i}"] = color

    return FALLBACK_DECLARATION_RE.sub("color:", ctx.construct_css(body))


def run(inp: FallbackColorInput, *, ctx: RuleContext) -> FallbackColorOutput:
    """
    Emit a fallback chain.

    Args:
        inp: Property mapping and candidate colors.
        ctx: Rule context providing the host CSS constructor.

    Returns:
        FallbackColorOutput with the serialized CSS.
    """
    return FallbackColorOutput(css=fallback_color(inp.css, inp.colors, ctx))
