"""Style token resolution.

Nodes reference shared styles (colors, typography) by opaque id. The
resolver turns such a reference into the style's display name through a
host-provided lookup capability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class StyleRecord(Protocol):
    """Anything exposing a style display name."""

    name: str


class StyleLookup(Protocol):
    """Host capability returning the style registered under an id."""

    def get_style(self, style_id: str) -> StyleRecord | None: ...


@dataclass(frozen=True)
class Style:
    """Shared style definition.

    Attributes:
        id: Opaque style reference as stored on nodes.
        name: Display name, e.g. "Color/Primary/500".
    """

    id: str
    name: str


class StyleRegistry:
    """Dict-backed StyleLookup.

    Example:
        >>> registry = StyleRegistry({"S:1": "Color/Primary"})
        >>> registry.get_style("S:1").name
        'Color/Primary'
    """

    def __init__(self, names: dict[str, str] | None = None):
        self._styles: dict[str, Style] = {}
        for style_id, name in (names or {}).items():
            self.register(style_id, name)

    def register(self, style_id: str, name: str) -> Style:
        style = Style(id=style_id, name=name)
        self._styles[style_id] = style
        return style

    def get_style(self, style_id: str) -> Style | None:
        return self._styles.get(style_id)

    def __len__(self) -> int:
        return len(self._styles)


class TokenResolver:
    """Maps style references to token names.

    Args:
        lookup: Host style lookup capability.
    """

    def __init__(self, lookup: StyleLookup):
        self._lookup = lookup

    def resolve(self, style_ref: str | None) -> str | None:
        """Resolve a style reference to its display name.

        Args:
            style_ref: Opaque style id, possibly empty or None.

        Returns:
            The style name, or None when the reference is empty or unknown.
        """
        if not style_ref:
            return None
        style = self._lookup.get_style(style_ref)
        return style.name if style else None


__all__ = [
    "StyleRecord",
    "StyleLookup",
    "Style",
    "StyleRegistry",
    "TokenResolver",
]
