"""Attribute summarizers.

Each summarizer reads one node (or its subtree) and produces a normalized
fragment of the metadata record. Summarizers never mutate the node tree.

Summarizers:
    - summarize_fill / extract_fills: fill list and fill style token
    - extract_auto_layout: auto-layout rules
    - extract_text_styles: deduplicated typography of a subtree
    - extract_subcomponents: structural roster of direct children
    - extract_variant_data: variant names and property combinations
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from compdoc.node import (
    AxisAlign,
    ComponentNode,
    ComponentSetNode,
    FrameNode,
    InstanceNode,
    LayoutMode,
    LineHeight,
    LineHeightUnit,
    Paint,
    PaintType,
    SceneNode,
    TextNode,
)
from compdoc.schema import (
    AutoLayoutDescriptor,
    Direction,
    FillSummary,
    Padding,
    SubcomponentDescriptor,
    TextStyleEntry,
    VariantDescriptor,
)
from compdoc.tokens import TokenResolver

TEXT_NODE_SUMMARY = "텍스트 노드, 글자 수: {count}"


# =============================================================================
# Fills
# =============================================================================


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _channel(value: float) -> int:
    return min(255, max(0, _round_half_up(value * 255)))


def _round_opacity(value: float) -> float:
    # Half-up on the shortest decimal form, so 0.125 becomes 0.13
    bounded = min(1.0, max(0.0, value))
    return float(Decimal(repr(bounded)).quantize(Decimal("0.01"), ROUND_HALF_UP))


def summarize_fill(paint: Paint) -> FillSummary:
    """Summarize a single paint.

    Args:
        paint: Fill entry of a node.

    Returns:
        FillSummary with opacity rounded to 2 decimals (default 1) and,
        for solid paints, an ``rgb(r, g, b)`` color string.
    """
    opacity = 1
    if paint.opacity is not None:
        opacity = _round_opacity(paint.opacity)

    color = None
    if paint.type == PaintType.SOLID and paint.color is not None:
        r, g, b = (_channel(c) for c in (paint.color.r, paint.color.g, paint.color.b))
        color = f"rgb({r}, {g}, {b})"

    return FillSummary(
        type=paint.type, opacity=opacity, color=color, visible=paint.visible
    )


def extract_fills(node: SceneNode, resolver: TokenResolver) -> list[FillSummary]:
    """Summarize every fill of a node.

    Returns an empty list when the fills facet is absent or mixed, or holds
    something other than a list. The node's fill style, when uniform and
    resolvable, is attached as ``token`` to each summary.
    """
    paints = node.fills.get()
    if not node.fills.is_uniform or not isinstance(paints, list):
        return []

    token = resolver.resolve(node.fill_style_id.get())

    summaries = [summarize_fill(paint) for paint in paints]
    if token:
        summaries = [s.model_copy(update={"token": token}) for s in summaries]
    return summaries


# =============================================================================
# Auto-Layout
# =============================================================================


def _number_or_zero(value: int | float | None) -> int | float:
    return value if isinstance(value, (int, float)) else 0


def extract_auto_layout(node: SceneNode) -> AutoLayoutDescriptor | None:
    """Describe the auto-layout of a node.

    Returns:
        AutoLayoutDescriptor, or None when the node has no layout mode or
        the mode is NONE.
    """
    if not isinstance(node, FrameNode):
        return None
    if node.layout_mode is None or node.layout_mode == LayoutMode.NONE:
        return None

    padding = Padding(
        top=_number_or_zero(node.padding_top),
        right=_number_or_zero(node.padding_right),
        bottom=_number_or_zero(node.padding_bottom),
        left=_number_or_zero(node.padding_left),
    )

    if node.primary_axis_align_items == AxisAlign.SPACE_BETWEEN:
        alignment = "Space Between"
    else:
        # Raw enum values, including "None" when one side is not exported
        alignment = f"{node.primary_axis_align_items}/{node.counter_axis_align_items}"

    return AutoLayoutDescriptor(
        direction=(
            Direction.HORIZONTAL
            if node.layout_mode == LayoutMode.HORIZONTAL
            else Direction.VERTICAL
        ),
        spacing=_number_or_zero(node.item_spacing),
        padding=padding,
        alignment=alignment,
    )


# =============================================================================
# Text Styles
# =============================================================================


def _number_label(value: int | float | None) -> int | float | None:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _line_height_label(node: TextNode) -> str | int | float | None:
    line_height = node.line_height.get()
    if not isinstance(line_height, LineHeight):
        return None
    if line_height.unit == LineHeightUnit.AUTO:
        return "AUTO"
    if line_height.unit == LineHeightUnit.PERCENT:
        return f"{_number_label(line_height.value)}%"
    if line_height.unit == LineHeightUnit.PIXELS:
        return _number_label(line_height.value)
    return None


def summarize_text_node(node: TextNode, resolver: TokenResolver) -> TextStyleEntry:
    """Describe the typography of one text layer."""
    token = None
    if node.text_style_id.is_uniform:
        token = resolver.resolve(node.text_style_id.get())

    # A zero font size counts as unset
    return TextStyleEntry(
        token=token,
        font_size=node.font_size.get() or None,
        line_height=_line_height_label(node),
    )


def extract_text_styles(
    component: SceneNode, resolver: TokenResolver
) -> list[TextStyleEntry]:
    """Collect the distinct text styles used in a subtree.

    Every text node under ``component`` (itself included) is summarized;
    structurally identical entries are dropped, keeping first-seen order.
    """
    unique: list[TextStyleEntry] = []
    seen: set[tuple] = set()
    for node in component.find_all(lambda n: isinstance(n, TextNode)):
        entry = summarize_text_node(node, resolver)
        if entry.key() in seen:
            continue
        seen.add(entry.key())
        unique.append(entry)
    return unique


# =============================================================================
# Subcomponents
# =============================================================================


def describe_child(child: SceneNode) -> str:
    """Human-readable one-line summary of a node."""
    if isinstance(child, InstanceNode) and child.main_component is not None:
        return f"Instance of {child.main_component.name}"
    if isinstance(child, TextNode):
        return TEXT_NODE_SUMMARY.format(count=len(child.characters))
    if child.children is not None:
        return f"{child.type.lower()} ({len(child.children)} children)"
    return child.type.lower()


def extract_subcomponents(component: SceneNode) -> list[SubcomponentDescriptor]:
    """Describe the direct children of a component.

    Only one level is described; nested structure shows up as a child count.
    """
    if component.children is None:
        return []

    return [
        SubcomponentDescriptor(
            role=child.name,
            node_type=child.type,
            description=describe_child(child),
        )
        for child in component.children
    ]


# =============================================================================
# Variants
# =============================================================================


def _variant_of(node: SceneNode) -> VariantDescriptor:
    properties = node.variant_properties if isinstance(node, ComponentNode) else None
    return VariantDescriptor(name=node.name, properties=dict(properties or {}))


def extract_variant_data(node: SceneNode) -> list[VariantDescriptor]:
    """List the variants represented by a node.

    A component set yields one descriptor per child in order. A component
    carrying its own variant properties yields itself. Anything else yields
    an empty list.
    """
    if isinstance(node, ComponentSetNode):
        return [_variant_of(child) for child in node.children or ()]
    if isinstance(node, ComponentNode) and node.variant_properties is not None:
        return [_variant_of(node)]
    return []


__all__ = [
    "TEXT_NODE_SUMMARY",
    "summarize_fill",
    "extract_fills",
    "extract_auto_layout",
    "summarize_text_node",
    "extract_text_styles",
    "describe_child",
    "extract_subcomponents",
    "extract_variant_data",
]
