"""
Core entities shared by the preset components.

Key types:
- ColorValue: a color leaf (string) or a nested color mapping
- UtilityMatch: immutable view of a matched utility class name
- Rule: (pattern, resolver) pair registered with the host
- Preflight: lazily produced CSS emitted regardless of matched utilities
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, NamedTuple, TypeAlias, Union

if TYPE_CHECKING:
    from preset_color.core.ports.host import CSSObject, RuleContext

ColorValue: TypeAlias = Union[str, "ColorMapping"]
ColorMapping: TypeAlias = dict[str, ColorValue]

DEFAULT_KEY = "DEFAULT"


@dataclass(frozen=True)
class UtilityMatch:
    """
    Matched utility class name.

    Positional groups follow the host convention: group 1 is the color
    body handed to color resolvers. Deriving a match with another body
    returns a new object; the original regex match is never touched.
    """

    text: str
    groups: tuple[str | None, ...] = ()
    named: Mapping[str, str | None] = field(default_factory=dict)

    @classmethod
    def from_match(cls, match: re.Match[str]) -> UtilityMatch:
        return cls(text=match.group(0), groups=match.groups(), named=match.groupdict())

    @property
    def body(self) -> str | None:
        return self.groups[0] if self.groups else None

    def group(self, name: str) -> str | None:
        return self.named.get(name)

    def with_body(self, body: str) -> UtilityMatch:
        """Return a copy whose color body (group 1) is ``body``."""
        return replace(self, groups=(body, *self.groups[1:]))


Resolver: TypeAlias = Callable[
    [re.Match[str], "RuleContext"], Union["CSSObject", str, None]
]


class Rule(NamedTuple):
    """Pattern/resolver pair; unpacks like the host's ``[regex, fn]`` tuples."""

    pattern: re.Pattern[str]
    resolver: Resolver


@dataclass(frozen=True)
class Preflight:
    """CSS text emitted unconditionally by the host."""

    get_css: Callable[[], str]
