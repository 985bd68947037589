"""Design node models for component documentation extraction.

A design document is a tree of nodes. Each node kind carries an explicit set
of optional capabilities (fills, auto-layout, text properties, style
references, children). Capabilities the design tool can report as
heterogeneous across a multi-node context are modelled as a tri-state
:class:`Facet` instead of being compared against a magic value.

Nodes are parsed from the JSON shape the design tool exports (camelCase keys).
The string ``"__mixed__"`` marks a mixed facet in that JSON.

Example:
    >>> node = parse_node({"type": "COMPONENT", "name": "Button"})
    >>> isinstance(node, ComponentNode)
    True
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Sentinel used by snapshot JSON for values that differ across a selection.
MIXED = "__mixed__"


class NodeType(str, Enum):
    """Type tags of design nodes.

    Only COMPONENT and COMPONENT_SET can be documented; the remaining tags
    appear as descendants and are described structurally.
    """

    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    TEXT = "TEXT"
    FRAME = "FRAME"
    GROUP = "GROUP"
    SECTION = "SECTION"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    POLYGON = "POLYGON"
    STAR = "STAR"
    LINE = "LINE"
    VECTOR = "VECTOR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"


class LayoutMode(str, Enum):
    """Auto-layout direction modes."""

    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class AxisAlign(str, Enum):
    """Auto-layout primary/counter axis alignment values."""

    MIN = "MIN"
    CENTER = "CENTER"
    MAX = "MAX"
    SPACE_BETWEEN = "SPACE_BETWEEN"
    BASELINE = "BASELINE"


class PaintType(str, Enum):
    """Paint (fill) kinds."""

    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"


class LineHeightUnit(str, Enum):
    """Units of a unit-tagged line height."""

    AUTO = "AUTO"
    PERCENT = "PERCENT"
    PIXELS = "PIXELS"


# =============================================================================
# Facets
# =============================================================================


class FacetState(str, Enum):
    """State of a node capability."""

    UNIFORM = "uniform"  # One value across the node
    MIXED = "mixed"  # Several values, no single answer
    ABSENT = "absent"  # Node does not carry the capability


class Facet(Generic[T]):
    """Tri-state capability value: ``Uniform(value) | Mixed | Absent``.

    Example:
        >>> Facet.uniform(16).get()
        16
        >>> Facet.mixed().get(default=0)
        0
    """

    __slots__ = ("state", "value")

    def __init__(self, state: FacetState, value: T | None = None):
        self.state = state
        self.value = value if state == FacetState.UNIFORM else None

    @classmethod
    def uniform(cls, value: T) -> Facet[T]:
        return cls(FacetState.UNIFORM, value)

    @classmethod
    def mixed(cls) -> Facet[T]:
        return cls(FacetState.MIXED)

    @classmethod
    def absent(cls) -> Facet[T]:
        return cls(FacetState.ABSENT)

    @property
    def is_uniform(self) -> bool:
        return self.state == FacetState.UNIFORM

    @property
    def is_mixed(self) -> bool:
        return self.state == FacetState.MIXED

    @property
    def is_absent(self) -> bool:
        return self.state == FacetState.ABSENT

    def get(self, default: Any = None) -> Any:
        """Return the uniform value, or ``default`` when mixed or absent."""
        return self.value if self.is_uniform else default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Facet):
            return NotImplemented
        return self.state == other.state and self.value == other.value

    def __repr__(self) -> str:
        if self.is_uniform:
            return f"Facet.uniform({self.value!r})"
        return f"Facet.{self.state.value}()"


def to_facet(value: Any, parse: Callable[[Any], Any] | None = None) -> Facet:
    """Wrap a raw exported value in a Facet.

    Args:
        value: Raw value, the mixed sentinel, None, or an existing Facet.
        parse: Optional converter applied to uniform values.

    Returns:
        Facet in the matching state.
    """
    if isinstance(value, Facet):
        return value
    if value is None:
        return Facet.absent()
    if isinstance(value, str) and value == MIXED:
        return Facet.mixed()
    return Facet.uniform(parse(value) if parse else value)


# =============================================================================
# Value Types
# =============================================================================


class RGB(BaseModel):
    """Color with normalized 0.0-1.0 channels."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class Paint(BaseModel):
    """Single fill entry of a node."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str
    visible: bool | None = None
    opacity: float | None = None
    color: RGB | None = None


class LineHeight(BaseModel):
    """Unit-tagged line height."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    unit: str
    value: int | float | None = None


class ComponentRef(BaseModel):
    """Reference from an instance to its main component."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    name: str


def _parse_paints(value: Any) -> Any:
    if isinstance(value, list):
        return [Paint.model_validate(paint) for paint in value]
    return value


def _parse_line_height(value: Any) -> Any:
    if isinstance(value, dict):
        return LineHeight.model_validate(value)
    return value


# =============================================================================
# Node Kinds
# =============================================================================

_NODE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    arbitrary_types_allowed=True,
    extra="ignore",
    frozen=True,
)


class SceneNode(BaseModel):
    """Base of every design node.

    Attributes:
        id: Document-unique node id.
        name: Layer name as shown in the design tool.
        type: Raw type tag (see NodeType).
        fills: Fill list facet.
        fill_style_id: Shared fill style reference facet.
        children: Child nodes, or None when the node cannot have children.
    """

    model_config = _NODE_CONFIG

    id: str = ""
    name: str = ""
    type: str
    fills: Facet = Field(default_factory=Facet.absent)
    fill_style_id: Facet = Field(default_factory=Facet.absent)
    children: list[SceneNode] | None = None

    @field_validator("fills", mode="before")
    @classmethod
    def wrap_fills(cls, value: Any) -> Facet:
        return to_facet(value, _parse_paints)

    @field_validator("fill_style_id", mode="before")
    @classmethod
    def wrap_fill_style(cls, value: Any) -> Facet:
        return to_facet(value)

    @field_validator("children", mode="before")
    @classmethod
    def parse_children(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, list):
            raise ValueError("children must be a list of nodes")
        return [parse_node(child) for child in value]

    def walk(self) -> Iterator[SceneNode]:
        """Yield this node and all descendants in depth-first pre-order."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def find_all(self, predicate: Callable[[SceneNode], bool]) -> list[SceneNode]:
        """Collect every node in the subtree (self included) matching predicate."""
        return [node for node in self.walk() if predicate(node)]


class FrameNode(SceneNode):
    """Container node with optional auto-layout.

    Also the fallback kind for any type tag without a dedicated model.
    """

    type: str = NodeType.FRAME.value
    layout_mode: str | None = None
    padding_top: int | float | None = None
    padding_right: int | float | None = None
    padding_bottom: int | float | None = None
    padding_left: int | float | None = None
    item_spacing: int | float | None = None
    primary_axis_align_items: str | None = None
    counter_axis_align_items: str | None = None


class ComponentNode(FrameNode):
    """Reusable component, possibly one variant of a component set."""

    type: str = NodeType.COMPONENT.value
    description: str = ""
    variant_properties: dict[str, str] | None = None


class ComponentSetNode(FrameNode):
    """Grouping node whose children are the variants of one component."""

    type: str = NodeType.COMPONENT_SET.value
    description: str = ""
    default_variant_id: str | None = None


class InstanceNode(FrameNode):
    """Placed copy of a component."""

    type: str = NodeType.INSTANCE.value
    main_component: ComponentRef | None = None


class TextNode(SceneNode):
    """Text layer with typography facets."""

    type: str = NodeType.TEXT.value
    characters: str = ""
    text_style_id: Facet = Field(default_factory=Facet.absent)
    font_size: Facet = Field(default_factory=Facet.absent)
    line_height: Facet = Field(default_factory=Facet.absent)

    @field_validator("text_style_id", "font_size", mode="before")
    @classmethod
    def wrap_text_facets(cls, value: Any) -> Facet:
        return to_facet(value)

    @field_validator("line_height", mode="before")
    @classmethod
    def wrap_line_height(cls, value: Any) -> Facet:
        return to_facet(value, _parse_line_height)


# Mapping from type tag to node model
NODE_KINDS: dict[str, type[SceneNode]] = {
    NodeType.COMPONENT.value: ComponentNode,
    NodeType.COMPONENT_SET.value: ComponentSetNode,
    NodeType.INSTANCE.value: InstanceNode,
    NodeType.TEXT.value: TextNode,
}


def parse_node(raw: Any) -> SceneNode:
    """Parse an exported node dict into its node kind.

    Args:
        raw: Node dict (camelCase keys) or an already parsed node.

    Returns:
        SceneNode subclass chosen by the ``type`` tag. Unknown tags
        become FrameNode.

    Raises:
        ValueError: If raw is neither a node nor a dict.
        pydantic.ValidationError: If the dict does not describe a node.
    """
    if isinstance(raw, SceneNode):
        return raw
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a node object, got {type(raw).__name__}")
    type_tag = raw.get("type")
    kind = NODE_KINDS.get(type_tag, FrameNode) if isinstance(type_tag, str) else FrameNode
    return kind.model_validate(raw)


__all__ = [
    "MIXED",
    "NodeType",
    "LayoutMode",
    "AxisAlign",
    "PaintType",
    "LineHeightUnit",
    "FacetState",
    "Facet",
    "to_facet",
    "RGB",
    "Paint",
    "LineHeight",
    "ComponentRef",
    "SceneNode",
    "FrameNode",
    "ComponentNode",
    "ComponentSetNode",
    "InstanceNode",
    "TextNode",
    "NODE_KINDS",
    "parse_node",
]
