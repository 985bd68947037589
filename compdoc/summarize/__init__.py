"""Attribute summarizers producing metadata record fragments."""

from .lib import (
    TEXT_NODE_SUMMARY,
    describe_child,
    extract_auto_layout,
    extract_fills,
    extract_subcomponents,
    extract_text_styles,
    extract_variant_data,
    summarize_fill,
    summarize_text_node,
)

__all__ = [
    # Fills
    "summarize_fill",
    "extract_fills",
    # Layout
    "extract_auto_layout",
    # Typography
    "summarize_text_node",
    "extract_text_styles",
    # Structure
    "TEXT_NODE_SUMMARY",
    "describe_child",
    "extract_subcomponents",
    "extract_variant_data",
]
