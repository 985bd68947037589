"""Metadata record schema - the JSON shape streamed to the documentation panel."""

from .lib import (
    NO_DESCRIPTION,
    AutoLayoutDescriptor,
    ComponentMetadata,
    CopyResult,
    Direction,
    FillSummary,
    MetadataResult,
    Padding,
    SubcomponentDescriptor,
    TextStyleEntry,
    VariantDescriptor,
    export_json_schema,
)

__all__ = [
    # Fragments
    "Direction",
    "VariantDescriptor",
    "Padding",
    "AutoLayoutDescriptor",
    "FillSummary",
    "TextStyleEntry",
    "SubcomponentDescriptor",
    # Records
    "NO_DESCRIPTION",
    "ComponentMetadata",
    "MetadataResult",
    "CopyResult",
    # Schema generation
    "export_json_schema",
]
