"""Metadata assembler.

Selects the primary node from the current selection, resolves its base
variant and folds the summarizer outputs into one ComponentMetadata record.
Failures are returned as data (``MetadataResult.failure``), never raised.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from compdoc.node import ComponentNode, ComponentSetNode, SceneNode
from compdoc.schema import NO_DESCRIPTION, ComponentMetadata, MetadataResult
from compdoc.summarize import (
    extract_auto_layout,
    extract_fills,
    extract_subcomponents,
    extract_text_styles,
    extract_variant_data,
)
from compdoc.tokens import TokenResolver

logger = logging.getLogger(__name__)


class MetadataError(str, Enum):
    """Extraction failures; values are the user-facing messages."""

    NO_SELECTION = "컴포넌트를 선택해 주세요."
    UNSUPPORTED_TYPE = "Component 또는 Component Set만 지원합니다."
    NO_DEFAULT_VARIANT = "기본 Variant를 찾지 못했습니다."


class SelectionSource(Protocol):
    """Host capability returning the ordered current selection."""

    def get_selection(self) -> Sequence[SceneNode]: ...


@dataclass(frozen=True)
class SelectionResult:
    """Primary selected node, or the reason there is none.

    Exactly one of ``node`` and ``error`` is set.
    """

    node: ComponentNode | ComponentSetNode | None = None
    error: MetadataError | None = None

    @property
    def ok(self) -> bool:
        return self.node is not None


def get_selected_primary_node(selection: Sequence[SceneNode]) -> SelectionResult:
    """Pick the first selected node if it can be documented.

    Args:
        selection: Current selection in host order.

    Returns:
        SelectionResult with the node, or NO_SELECTION / UNSUPPORTED_TYPE.
    """
    if not selection:
        return SelectionResult(error=MetadataError.NO_SELECTION)

    node = selection[0]
    if not isinstance(node, (ComponentNode, ComponentSetNode)):
        logger.debug(f"Unsupported selection type: {node.type}")
        return SelectionResult(error=MetadataError.UNSUPPORTED_TYPE)
    return SelectionResult(node=node)


def get_base_component(node: ComponentNode | ComponentSetNode) -> SceneNode | None:
    """Resolve the representative variant of a node.

    A component is its own base. A component set uses its designated
    default variant when that child exists, else its first child.

    Returns:
        The base node, or None for a component set without children.
    """
    if isinstance(node, ComponentNode):
        return node

    children = node.children or []
    if node.default_variant_id is not None:
        for child in children:
            if child.id == node.default_variant_id:
                return child
        logger.debug(
            f"Default variant {node.default_variant_id} not among children of "
            f"'{node.name}', using first child"
        )
    return children[0] if children else None


def derive_semantic_role(name: str) -> str:
    """Last "/"-delimited segment of a component name.

    Example:
        >>> derive_semantic_role("Button/Primary")
        'Primary'
    """
    return name.split("/")[-1]


def build_metadata(
    node: ComponentNode | ComponentSetNode,
    base: SceneNode,
    resolver: TokenResolver,
) -> ComponentMetadata:
    """Assemble the record of ``node`` using ``base`` for non-variant fields."""
    description = base.description if isinstance(base, ComponentNode) else ""
    return ComponentMetadata(
        name=node.name,
        semantic_role=derive_semantic_role(node.name),
        variants=extract_variant_data(node),
        auto_layout=extract_auto_layout(base),
        fills=extract_fills(base, resolver),
        text_styles=extract_text_styles(base, resolver),
        description=description or NO_DESCRIPTION,
        subcomponents=extract_subcomponents(base),
        usage_notes=[],
    )


def extract_metadata(
    selection_source: SelectionSource,
    resolver: TokenResolver,
) -> MetadataResult:
    """Extract the documentation record of the current selection.

    Args:
        selection_source: Host selection capability.
        resolver: Style token resolver.

    Returns:
        MetadataResult with the record, or with one of the MetadataError
        messages.
    """
    selected = get_selected_primary_node(selection_source.get_selection())
    if not selected.ok:
        return MetadataResult.failure(selected.error.value)

    base = get_base_component(selected.node)
    if base is None:
        return MetadataResult.failure(MetadataError.NO_DEFAULT_VARIANT.value)

    return MetadataResult.success(build_metadata(selected.node, base, resolver))


__all__ = [
    "MetadataError",
    "SelectionSource",
    "SelectionResult",
    "get_selected_primary_node",
    "get_base_component",
    "derive_semantic_role",
    "build_metadata",
    "extract_metadata",
]
