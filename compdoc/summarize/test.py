"""Unit tests for attribute summarizers."""

import pytest

from compdoc.node import (
    MIXED,
    RGB,
    ComponentNode,
    ComponentRef,
    ComponentSetNode,
    Facet,
    FrameNode,
    InstanceNode,
    Paint,
    TextNode,
    parse_node,
)
from compdoc.schema import Direction, TextStyleEntry
from compdoc.tokens import StyleRegistry, TokenResolver

from .lib import (
    extract_auto_layout,
    extract_fills,
    extract_subcomponents,
    extract_text_styles,
    extract_variant_data,
    summarize_fill,
)


@pytest.fixture
def resolver() -> TokenResolver:
    """Resolver over a small style table."""
    return TokenResolver(
        StyleRegistry(
            {
                "S:fill": "Color/Brand/Primary",
                "S:body": "Text/Body/M",
                "S:title": "Text/Title/L",
            }
        )
    )


# =============================================================================
# Fills
# =============================================================================


class TestSummarizeFill:
    """Tests for summarize_fill."""

    @pytest.mark.unit
    def test_solid_red_half_opacity(self):
        """Solid red at 0.5 opacity yields an rgb string."""
        paint = Paint(type="SOLID", opacity=0.5, color=RGB(r=1, g=0, b=0))
        summary = summarize_fill(paint)
        assert summary.model_dump(by_alias=True) == {
            "type": "SOLID",
            "opacity": 0.5,
            "color": "rgb(255, 0, 0)",
        }

    @pytest.mark.unit
    def test_half_channel_rounds_up(self):
        """Channel midpoints round half up."""
        paint = Paint(type="SOLID", color=RGB(r=1, g=0.5, b=0))
        assert summarize_fill(paint).color == "rgb(255, 128, 0)"

    @pytest.mark.unit
    def test_default_opacity(self):
        """Missing opacity defaults to 1."""
        assert summarize_fill(Paint(type="IMAGE")).opacity == 1

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (0.3333, 0.33),
            (0.876, 0.88),
            (0.125, 0.13),
            (0.625, 0.63),
            (0.375, 0.38),
            (1.5, 1.0),
            (-0.2, 0.0),
            (0.0, 0.0),
        ],
    )
    def test_opacity_rounded_and_bounded(self, raw, expected):
        """Opacity is rounded to 2 decimals within [0, 1]."""
        summary = summarize_fill(Paint(type="SOLID", opacity=raw))
        assert summary.opacity == expected
        assert 0 <= summary.opacity <= 1

    @pytest.mark.unit
    def test_non_solid_has_no_color(self):
        """Gradients do not get a color string."""
        summary = summarize_fill(
            Paint(type="GRADIENT_LINEAR", color=RGB(r=1, g=1, b=1))
        )
        assert summary.color is None

    @pytest.mark.unit
    def test_visible_copied(self):
        """visible flag is copied when present."""
        assert summarize_fill(Paint(type="SOLID", visible=False)).visible is False
        assert summarize_fill(Paint(type="SOLID")).visible is None


class TestExtractFills:
    """Tests for extract_fills."""

    @pytest.mark.unit
    def test_absent_fills(self, resolver):
        """Node without fills yields nothing."""
        assert extract_fills(FrameNode(), resolver) == []

    @pytest.mark.unit
    def test_mixed_fills(self, resolver):
        """Mixed fills yield nothing."""
        assert extract_fills(FrameNode(fills=MIXED), resolver) == []

    @pytest.mark.unit
    def test_non_list_fills(self, resolver):
        """A uniform non-list value yields nothing."""
        assert extract_fills(FrameNode(fills=Facet.uniform("oops")), resolver) == []

    @pytest.mark.unit
    def test_token_attached_to_each_fill(self, resolver):
        """Resolved fill style is attached to every summary."""
        node = FrameNode(
            fills=[{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 1}}, {"type": "IMAGE"}],
            fill_style_id="S:fill",
        )
        fills = extract_fills(node, resolver)
        assert [f.token for f in fills] == ["Color/Brand/Primary"] * 2
        assert fills[0].color == "rgb(0, 0, 255)"

    @pytest.mark.unit
    def test_mixed_or_unknown_style_has_no_token(self, resolver):
        """Mixed and unresolvable styles leave token unset."""
        for style in (MIXED, "S:missing", ""):
            node = FrameNode(fills=[{"type": "SOLID"}], fill_style_id=style)
            assert extract_fills(node, resolver)[0].token is None


# =============================================================================
# Auto-Layout
# =============================================================================


class TestExtractAutoLayout:
    """Tests for extract_auto_layout."""

    @pytest.mark.unit
    def test_no_layout_mode(self):
        """Nodes without a layout mode have no auto-layout."""
        assert extract_auto_layout(FrameNode()) is None
        assert extract_auto_layout(TextNode()) is None

    @pytest.mark.unit
    def test_layout_mode_none(self):
        """Explicit NONE disables auto-layout."""
        assert extract_auto_layout(FrameNode(layout_mode="NONE")) is None

    @pytest.mark.unit
    def test_horizontal_layout(self):
        """Horizontal layout with padding and spacing."""
        node = FrameNode(
            layout_mode="HORIZONTAL",
            padding_top=8,
            padding_right=16,
            padding_bottom=8,
            padding_left=16,
            item_spacing=4,
            primary_axis_align_items="CENTER",
            counter_axis_align_items="MIN",
        )
        layout = extract_auto_layout(node)
        assert layout.direction == Direction.HORIZONTAL
        assert layout.spacing == 4
        assert layout.padding.model_dump() == {
            "top": 8,
            "right": 16,
            "bottom": 8,
            "left": 16,
        }
        assert layout.alignment == "CENTER/MIN"

    @pytest.mark.unit
    def test_defaults_and_space_between(self):
        """Missing values default to 0 and SPACE_BETWEEN gets a label."""
        node = FrameNode(
            layout_mode="VERTICAL",
            primary_axis_align_items="SPACE_BETWEEN",
            counter_axis_align_items="MAX",
        )
        layout = extract_auto_layout(node)
        assert layout.direction == Direction.VERTICAL
        assert layout.spacing == 0
        assert layout.padding.top == 0
        assert layout.alignment == "Space Between"


# =============================================================================
# Text Styles
# =============================================================================


class TestExtractTextStyles:
    """Tests for extract_text_styles."""

    @pytest.mark.unit
    def test_line_height_units(self, resolver):
        """Each line height encoding maps to its label."""
        root = FrameNode(
            children=[
                TextNode(font_size=12, line_height={"unit": "AUTO"}),
                TextNode(font_size=13, line_height={"unit": "PERCENT", "value": 150}),
                TextNode(font_size=14, line_height={"unit": "PIXELS", "value": 20}),
                TextNode(font_size=15, line_height=MIXED),
                TextNode(font_size=16, line_height=24),
            ]
        )
        labels = [e.line_height for e in extract_text_styles(root, resolver)]
        assert labels == ["AUTO", "150%", 20, None, None]

    @pytest.mark.unit
    def test_integral_float_line_heights(self, resolver):
        """Whole-number floats print without a decimal part."""
        root = parse_node(
            {
                "type": "FRAME",
                "children": [
                    {"type": "TEXT", "lineHeight": {"unit": "PERCENT", "value": 150.0}},
                    {"type": "TEXT", "lineHeight": {"unit": "PERCENT", "value": 150}},
                    {"type": "TEXT", "lineHeight": {"unit": "PERCENT", "value": 137.5}},
                    {"type": "TEXT", "lineHeight": {"unit": "PIXELS", "value": 24.0}},
                ],
            }
        )
        labels = [e.line_height for e in extract_text_styles(root, resolver)]
        assert labels == ["150%", "137.5%", 24]

    @pytest.mark.unit
    def test_zero_font_size_is_null(self, resolver):
        """A zero font size is treated as unset."""
        entries = extract_text_styles(TextNode(font_size=0), resolver)
        assert entries == [TextStyleEntry()]

    @pytest.mark.unit
    def test_tokens_and_mixed_values(self, resolver):
        """Mixed style and size are left null."""
        root = TextNode(text_style_id=MIXED, font_size=MIXED)
        assert extract_text_styles(root, resolver) == [TextStyleEntry()]

    @pytest.mark.unit
    def test_recursive_dedup_keeps_first_seen_order(self, resolver):
        """Nested duplicates collapse, order of first sight is kept."""
        body = {"text_style_id": "S:body", "font_size": 14}
        root = ComponentNode(
            children=[
                TextNode(name="a", **body),
                FrameNode(
                    children=[
                        TextNode(name="b", text_style_id="S:title", font_size=24),
                        TextNode(name="c", **body),
                    ]
                ),
                TextNode(name="d", **body),
            ]
        )
        entries = extract_text_styles(root, resolver)
        assert [(e.token, e.font_size) for e in entries] == [
            ("Text/Body/M", 14),
            ("Text/Title/L", 24),
        ]
        assert len({e.key() for e in entries}) == len(entries)

    @pytest.mark.unit
    def test_no_text_nodes(self, resolver):
        """Components without text yield no styles."""
        assert extract_text_styles(ComponentNode(children=[FrameNode()]), resolver) == []


# =============================================================================
# Subcomponents
# =============================================================================


class TestExtractSubcomponents:
    """Tests for extract_subcomponents."""

    @pytest.mark.unit
    def test_no_children_facet(self):
        """Leaf nodes yield nothing."""
        assert extract_subcomponents(TextNode()) == []

    @pytest.mark.unit
    def test_describes_direct_children_only(self):
        """Each direct child gets a one-line description."""
        component = ComponentNode(
            children=[
                InstanceNode(
                    name="Icon", main_component=ComponentRef(name="Icon/Arrow")
                ),
                TextNode(name="Label", characters="확인"),
                FrameNode(
                    name="Body",
                    children=[FrameNode(name="x", children=[]), TextNode(name="y")],
                ),
                FrameNode(name="Divider", type="LINE"),
                InstanceNode(name="Detached"),
            ]
        )
        described = [
            (s.role, s.node_type, s.description)
            for s in extract_subcomponents(component)
        ]
        assert described == [
            ("Icon", "INSTANCE", "Instance of Icon/Arrow"),
            ("Label", "TEXT", "텍스트 노드, 글자 수: 2"),
            ("Body", "FRAME", "frame (2 children)"),
            ("Divider", "LINE", "line"),
            ("Detached", "INSTANCE", "instance"),
        ]


# =============================================================================
# Variants
# =============================================================================


class TestExtractVariantData:
    """Tests for extract_variant_data."""

    @pytest.mark.unit
    def test_component_set_children_in_order(self):
        """One descriptor per child, properties equal by value."""
        props = [{"Size": "S", "State": "Default"}, {"Size": "L", "State": "Hover"}]
        node = ComponentSetNode(
            children=[
                ComponentNode(name=f"v{i}", variant_properties=p)
                for i, p in enumerate(props)
            ]
        )
        variants = extract_variant_data(node)
        assert [v.name for v in variants] == ["v0", "v1"]
        assert [v.properties for v in variants] == props

    @pytest.mark.unit
    def test_component_with_own_properties(self):
        """A lone variant describes itself."""
        node = ComponentNode(name="Size=S", variant_properties={"Size": "S"})
        variants = extract_variant_data(node)
        assert len(variants) == 1
        assert variants[0].name == "Size=S"

    @pytest.mark.unit
    def test_plain_component(self):
        """Components without variant properties have no variants."""
        assert extract_variant_data(ComponentNode(name="Plain")) == []
        assert extract_variant_data(FrameNode()) == []
