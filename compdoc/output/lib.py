"""Output formatting for metadata review.

Generates human-readable text representations of ComponentMetadata records
for terminal output and as plain-text documentation guides.
"""

from dataclasses import dataclass, field

from compdoc.schema import (
    AutoLayoutDescriptor,
    ComponentMetadata,
    FillSummary,
    SubcomponentDescriptor,
    TextStyleEntry,
    VariantDescriptor,
)


@dataclass
class TreeItem:
    """One line of the rendered tree and its nested lines."""

    label: str
    children: list["TreeItem"] = field(default_factory=list)


def format_metadata_tree(metadata: ComponentMetadata) -> str:
    """Format a ComponentMetadata record as a human-readable tree.

    Example output:
        Button/Primary [Primary]
        ├── Description: Primary call to action
        ├── Variants (2)
        │   ├── State=Default [State=Default]
        │   └── State=Hover [State=Hover]
        ├── Auto Layout [Horizontal, spacing 8, padding 8/16/8/16, CENTER/CENTER]
        ├── Fills (1)
        │   └── SOLID rgb(255, 0, 0) 50% [Color/Brand/Primary]
        ├── Text Styles (1)
        │   └── Text/Label/M [16px, line 24]
        └── Subcomponents (1)
            └── Label [TEXT] 텍스트 노드, 글자 수: 7

    Args:
        metadata: Record to format.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    _format_item(build_tree(metadata), lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def build_tree(metadata: ComponentMetadata) -> TreeItem:
    """Arrange a record into tree items; empty sections are left out."""
    root = TreeItem(f"{metadata.name} [{metadata.semantic_role}]")
    root.children.append(TreeItem(f"Description: {metadata.description}"))

    if metadata.variants:
        root.children.append(
            _section("Variants", [_variant_label(v) for v in metadata.variants])
        )
    if metadata.auto_layout is not None:
        root.children.append(TreeItem(_auto_layout_label(metadata.auto_layout)))
    if metadata.fills:
        root.children.append(
            _section("Fills", [_fill_label(f) for f in metadata.fills])
        )
    if metadata.text_styles:
        root.children.append(
            _section("Text Styles", [_text_style_label(t) for t in metadata.text_styles])
        )
    if metadata.subcomponents:
        root.children.append(
            _section(
                "Subcomponents",
                [_subcomponent_label(s) for s in metadata.subcomponents],
            )
        )
    return root


def _section(title: str, labels: list[str]) -> TreeItem:
    return TreeItem(f"{title} ({len(labels)})", [TreeItem(label) for label in labels])


def _variant_label(variant: VariantDescriptor) -> str:
    if not variant.properties:
        return variant.name
    props = ", ".join(f"{key}={value}" for key, value in variant.properties.items())
    return f"{variant.name} [{props}]"


def _auto_layout_label(layout: AutoLayoutDescriptor) -> str:
    padding = layout.padding
    attrs = [
        str(layout.direction),
        f"spacing {layout.spacing}",
        f"padding {padding.top}/{padding.right}/{padding.bottom}/{padding.left}",
        layout.alignment,
    ]
    return f"Auto Layout [{', '.join(attrs)}]"


def _fill_label(fill: FillSummary) -> str:
    parts = [fill.type]
    if fill.color:
        parts.append(fill.color)
    parts.append(f"{round(fill.opacity * 100)}%")
    if fill.visible is False:
        parts.append("hidden")
    label = " ".join(parts)
    return f"{label} [{fill.token}]" if fill.token else label


def _text_style_label(style: TextStyleEntry) -> str:
    attrs = []
    if style.font_size is not None:
        attrs.append(f"{style.font_size}px")
    if style.line_height is not None:
        attrs.append(f"line {style.line_height}")
    name = style.token or "(no token)"
    return f"{name} [{', '.join(attrs)}]" if attrs else name


def _subcomponent_label(sub: SubcomponentDescriptor) -> str:
    return f"{sub.role} [{sub.node_type}] {sub.description}"


def _format_item(
    item: TreeItem,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format an item and its children."""
    # Build connector
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    lines.append(f"{prefix}{connector}{item.label}")

    for i, child in enumerate(item.children):
        _format_item(child, lines, child_prefix, i == len(item.children) - 1)


__all__ = [
    "TreeItem",
    "build_tree",
    "format_metadata_tree",
]
