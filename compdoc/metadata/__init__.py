"""Metadata assembler: selection, base variant resolution and record assembly."""

from .lib import (
    MetadataError,
    SelectionResult,
    SelectionSource,
    build_metadata,
    derive_semantic_role,
    extract_metadata,
    get_base_component,
    get_selected_primary_node,
)

__all__ = [
    # Errors
    "MetadataError",
    # Selection
    "SelectionSource",
    "SelectionResult",
    "get_selected_primary_node",
    # Assembly
    "get_base_component",
    "derive_semantic_role",
    "build_metadata",
    "extract_metadata",
]
