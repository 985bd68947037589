"""Design node models: node kinds, tri-state facets and snapshot parsing."""

from .lib import (
    MIXED,
    NODE_KINDS,
    RGB,
    AxisAlign,
    ComponentNode,
    ComponentRef,
    ComponentSetNode,
    Facet,
    FacetState,
    FrameNode,
    InstanceNode,
    LayoutMode,
    LineHeight,
    LineHeightUnit,
    NodeType,
    Paint,
    PaintType,
    SceneNode,
    TextNode,
    parse_node,
    to_facet,
)

__all__ = [
    # Tags
    "NodeType",
    "LayoutMode",
    "AxisAlign",
    "PaintType",
    "LineHeightUnit",
    # Facets
    "MIXED",
    "FacetState",
    "Facet",
    "to_facet",
    # Value types
    "RGB",
    "Paint",
    "LineHeight",
    "ComponentRef",
    # Node kinds
    "SceneNode",
    "FrameNode",
    "ComponentNode",
    "ComponentSetNode",
    "InstanceNode",
    "TextNode",
    "NODE_KINDS",
    "parse_node",
]
