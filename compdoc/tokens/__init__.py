"""Style token resolution for fill and text style references."""

from .lib import Style, StyleLookup, StyleRecord, StyleRegistry, TokenResolver

__all__ = [
    "Style",
    "StyleLookup",
    "StyleRecord",
    "StyleRegistry",
    "TokenResolver",
]
