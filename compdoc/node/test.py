"""Unit tests for design node models."""

import pytest
from pydantic import ValidationError

from .lib import (
    MIXED,
    ComponentNode,
    ComponentSetNode,
    Facet,
    FacetState,
    FrameNode,
    InstanceNode,
    LineHeight,
    NodeType,
    Paint,
    TextNode,
    parse_node,
    to_facet,
)


class TestFacet:
    """Tests for the tri-state Facet."""

    @pytest.mark.unit
    def test_uniform_holds_value(self):
        """Uniform facet exposes its value."""
        facet = Facet.uniform(16)
        assert facet.state == FacetState.UNIFORM
        assert facet.is_uniform
        assert facet.get() == 16

    @pytest.mark.unit
    def test_mixed_and_absent_have_no_value(self):
        """Mixed and absent facets fall back to the default."""
        assert Facet.mixed().get(default="x") == "x"
        assert Facet.absent().get() is None
        assert Facet.mixed().is_mixed
        assert Facet.absent().is_absent

    @pytest.mark.unit
    def test_equality(self):
        """Facets compare by state and value."""
        assert Facet.uniform(1) == Facet.uniform(1)
        assert Facet.uniform(1) != Facet.uniform(2)
        assert Facet.mixed() != Facet.absent()

    @pytest.mark.unit
    def test_to_facet_states(self):
        """Raw values map onto the three states."""
        assert to_facet(None).is_absent
        assert to_facet(MIXED).is_mixed
        assert to_facet("S:1") == Facet.uniform("S:1")

    @pytest.mark.unit
    def test_to_facet_keeps_existing(self):
        """An existing Facet passes through untouched."""
        facet = Facet.mixed()
        assert to_facet(facet) is facet


class TestParseNode:
    """Tests for parse_node kind selection."""

    @pytest.mark.unit
    def test_component_kind(self):
        """COMPONENT tag yields a ComponentNode."""
        node = parse_node(
            {
                "type": "COMPONENT",
                "name": "Size=Small",
                "description": "Small button",
                "variantProperties": {"Size": "Small"},
            }
        )
        assert isinstance(node, ComponentNode)
        assert node.description == "Small button"
        assert node.variant_properties == {"Size": "Small"}

    @pytest.mark.unit
    def test_component_set_children_are_components(self):
        """Component set children are parsed by their own tags."""
        node = parse_node(
            {
                "type": "COMPONENT_SET",
                "name": "Button",
                "defaultVariantId": "1:2",
                "children": [
                    {"type": "COMPONENT", "id": "1:2", "name": "A"},
                    {"type": "COMPONENT", "id": "1:3", "name": "B"},
                ],
            }
        )
        assert isinstance(node, ComponentSetNode)
        assert node.default_variant_id == "1:2"
        assert all(isinstance(child, ComponentNode) for child in node.children)

    @pytest.mark.unit
    def test_unknown_type_falls_back_to_frame(self):
        """Unknown tags keep their raw type on a FrameNode."""
        node = parse_node({"type": "STICKY", "name": "Note"})
        assert isinstance(node, FrameNode)
        assert node.type == "STICKY"

    @pytest.mark.unit
    def test_instance_main_component(self):
        """Instance keeps its main component reference."""
        node = parse_node(
            {"type": "INSTANCE", "name": "Icon", "mainComponent": {"name": "Icon/Star"}}
        )
        assert isinstance(node, InstanceNode)
        assert node.main_component.name == "Icon/Star"

    @pytest.mark.unit
    def test_fills_parsed_as_paints(self):
        """Fill lists become Paint models inside a uniform facet."""
        node = parse_node(
            {
                "type": "FRAME",
                "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}}],
            }
        )
        paints = node.fills.get()
        assert isinstance(paints[0], Paint)
        assert paints[0].color.r == 1.0

    @pytest.mark.unit
    def test_mixed_fills(self):
        """The mixed sentinel becomes a mixed facet."""
        node = parse_node({"type": "FRAME", "fills": MIXED, "fillStyleId": MIXED})
        assert node.fills.is_mixed
        assert node.fill_style_id.is_mixed

    @pytest.mark.unit
    def test_missing_facets_are_absent(self):
        """Keys not exported are absent facets."""
        node = parse_node({"type": "RECTANGLE"})
        assert node.fills.is_absent
        assert node.children is None

    @pytest.mark.unit
    def test_text_facets(self):
        """Text typography facets are wrapped and line height parsed."""
        node = parse_node(
            {
                "type": "TEXT",
                "characters": "Hello",
                "fontSize": 14,
                "lineHeight": {"unit": "PERCENT", "value": 150},
                "textStyleId": MIXED,
            }
        )
        assert isinstance(node, TextNode)
        assert node.font_size.get() == 14
        assert node.line_height.get() == LineHeight(unit="PERCENT", value=150)
        assert node.text_style_id.is_mixed

    @pytest.mark.unit
    def test_non_dict_rejected(self):
        """Non-object input is refused."""
        with pytest.raises(ValueError):
            parse_node(["not", "a", "node"])

    @pytest.mark.unit
    def test_missing_type_rejected(self):
        """A dict without a type tag fails validation."""
        with pytest.raises(ValidationError):
            parse_node({"name": "untyped"})

    @pytest.mark.unit
    def test_nodes_are_frozen(self):
        """Parsed nodes cannot be mutated."""
        node = parse_node({"type": "COMPONENT", "name": "A"})
        with pytest.raises(ValidationError):
            node.name = "B"


class TestTraversal:
    """Tests for walk and find_all."""

    @pytest.mark.unit
    def test_walk_is_preorder(self):
        """walk yields parents before children, in declared order."""
        root = ComponentNode(
            name="root",
            children=[
                FrameNode(name="a", children=[TextNode(name="a1")]),
                TextNode(name="b"),
            ],
        )
        assert [node.name for node in root.walk()] == ["root", "a", "a1", "b"]

    @pytest.mark.unit
    def test_find_all_includes_root(self):
        """find_all checks the root node too."""
        root = TextNode(name="solo")
        found = root.find_all(lambda node: node.type == NodeType.TEXT)
        assert found == [root]
