"""
Adapters implementing the host ports.
"""

from .dev_host import DevHost, DevRuleContext, escape_class
from .theme_colors import lookup_color, theme_color_resolver

__all__ = [
    "DevHost",
    "DevRuleContext",
    "escape_class",
    "lookup_color",
    "theme_color_resolver",
]
