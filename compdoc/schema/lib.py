"""Metadata record schema.

Models for the JSON-shaped record streamed to the documentation panel.
Field names are snake_case in Python and camelCase on the wire.

Example:
    >>> entry = TextStyleEntry(token="Body/M", font_size=14, line_height="AUTO")
    >>> entry.model_dump(by_alias=True)
    {'token': 'Body/M', 'fontSize': 14, 'lineHeight': 'AUTO'}
"""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=True,
)

# Placeholder description when the base component has none
NO_DESCRIPTION = "(정보 없음)"


class Direction(str, Enum):
    """Display label of an auto-layout direction."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


class VariantDescriptor(BaseModel):
    """One variant of a component and its property combination."""

    model_config = _RECORD_CONFIG

    name: str
    properties: dict[str, str] = Field(default_factory=dict)


class Padding(BaseModel):
    """Auto-layout padding on four sides."""

    model_config = _RECORD_CONFIG

    top: int | float = 0
    right: int | float = 0
    bottom: int | float = 0
    left: int | float = 0


class AutoLayoutDescriptor(BaseModel):
    """Normalized auto-layout rules of a node."""

    model_config = _RECORD_CONFIG

    direction: Direction
    spacing: int | float = 0
    padding: Padding = Field(default_factory=Padding)
    alignment: str


class FillSummary(BaseModel):
    """Normalized fill entry.

    ``color``, ``visible`` and ``token`` are omitted from the serialized
    form when they do not apply.
    """

    model_config = _RECORD_CONFIG

    type: str
    opacity: int | float = 1
    color: str | None = None
    visible: bool | None = None
    token: str | None = None

    @model_serializer(mode="wrap")
    def omit_unset_optionals(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class TextStyleEntry(BaseModel):
    """Typography used by one text layer."""

    model_config = _RECORD_CONFIG

    token: str | None = None
    font_size: int | float | None = None
    line_height: str | int | float | None = None

    def key(self) -> tuple:
        """Structural identity used for deduplication."""
        return (self.token, self.font_size, self.line_height)


class SubcomponentDescriptor(BaseModel):
    """Direct child of a component, described for documentation."""

    model_config = _RECORD_CONFIG

    role: str
    node_type: str
    description: str


class ComponentMetadata(BaseModel):
    """Assembled documentation record of one component or component set.

    Attributes:
        name: Selected node name.
        semantic_role: Last "/" segment of the name.
        variants: Variant descriptors of the selected node.
        auto_layout: Layout rules of the base component, if any.
        fills: Fill summaries of the base component.
        text_styles: Deduplicated typography of the base component subtree.
        description: Base component description or a placeholder.
        subcomponents: Direct children of the base component.
        usage_notes: Reserved for manual annotation, always empty here.
    """

    model_config = _RECORD_CONFIG

    name: str
    semantic_role: str
    variants: list[VariantDescriptor] = Field(default_factory=list)
    auto_layout: AutoLayoutDescriptor | None = None
    fills: list[FillSummary] = Field(default_factory=list)
    text_styles: list[TextStyleEntry] = Field(default_factory=list)
    description: str = NO_DESCRIPTION
    subcomponents: list[SubcomponentDescriptor] = Field(default_factory=list)
    usage_notes: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Wire form with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class MetadataResult(BaseModel):
    """Outcome of one extraction: either data or an error message."""

    model_config = _RECORD_CONFIG

    data: ComponentMetadata | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "MetadataResult":
        if (self.data is None) == (self.error is None):
            raise ValueError("MetadataResult needs exactly one of data or error")
        return self

    @classmethod
    def success(cls, data: ComponentMetadata) -> "MetadataResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: str) -> "MetadataResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.data is not None

    def to_payload(self) -> dict[str, Any]:
        """Wire form: ``{"data": {...}}`` or ``{"error": "..."}``."""
        if self.data is not None:
            return {"data": self.data.to_dict()}
        return {"error": self.error}


class CopyResult(BaseModel):
    """Outcome of a clipboard write request."""

    model_config = _RECORD_CONFIG

    success: bool
    message: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def export_json_schema() -> dict:
    """Export the ComponentMetadata JSON Schema (camelCase keys).

    Returns:
        dict: JSON Schema representation of ComponentMetadata.
    """
    return ComponentMetadata.model_json_schema(by_alias=True)


__all__ = [
    "NO_DESCRIPTION",
    "Direction",
    "VariantDescriptor",
    "Padding",
    "AutoLayoutDescriptor",
    "FillSummary",
    "TextStyleEntry",
    "SubcomponentDescriptor",
    "ComponentMetadata",
    "MetadataResult",
    "CopyResult",
    "export_json_schema",
]
