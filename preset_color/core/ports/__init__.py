# preset-color — Ports (Protocol Interfaces)
# Capabilities consumed from the utility-CSS host; no implementations here

from preset_color.core.ports.host import (
    ColorResolver,
    ColorResolverFactory,
    CSSObject,
    CSSValue,
    RuleContext,
)

__all__ = [
    "ColorResolver",
    "ColorResolverFactory",
    "CSSObject",
    "CSSValue",
    "RuleContext",
]
