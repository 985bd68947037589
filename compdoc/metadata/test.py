"""Unit tests for the metadata assembler."""

import pytest

from compdoc.node import ComponentNode, ComponentSetNode, FrameNode, TextNode
from compdoc.tokens import StyleRegistry, TokenResolver

from .lib import (
    MetadataError,
    derive_semantic_role,
    extract_metadata,
    get_base_component,
    get_selected_primary_node,
)


class StaticSelection:
    """Selection source returning a fixed list."""

    def __init__(self, nodes):
        self.nodes = list(nodes)

    def get_selection(self):
        return self.nodes


@pytest.fixture
def resolver(style_registry) -> TokenResolver:
    return TokenResolver(style_registry)


class TestSelection:
    """Tests for get_selected_primary_node."""

    @pytest.mark.unit
    def test_empty_selection(self):
        """Nothing selected is reported as NO_SELECTION."""
        result = get_selected_primary_node([])
        assert not result.ok
        assert result.error == MetadataError.NO_SELECTION

    @pytest.mark.unit
    def test_unsupported_type(self):
        """Frames cannot be documented."""
        result = get_selected_primary_node([FrameNode(name="Card")])
        assert result.error == MetadataError.UNSUPPORTED_TYPE

    @pytest.mark.unit
    def test_first_node_wins(self):
        """Only the first selected node is considered."""
        first = ComponentNode(name="A")
        result = get_selected_primary_node([first, FrameNode(name="B")])
        assert result.node is first

    @pytest.mark.unit
    def test_first_unsupported_is_not_skipped(self):
        """A later component does not rescue an unsupported first node."""
        result = get_selected_primary_node([TextNode(), ComponentNode(name="A")])
        assert result.error == MetadataError.UNSUPPORTED_TYPE


class TestBaseComponent:
    """Tests for get_base_component."""

    @pytest.mark.unit
    def test_component_is_own_base(self):
        """A plain component is its own base."""
        node = ComponentNode(name="A")
        assert get_base_component(node) is node

    @pytest.mark.unit
    def test_designated_default(self, button_set):
        """The designated default child is the base."""
        assert get_base_component(button_set).name == "State=Hover"

    @pytest.mark.unit
    def test_first_child_without_default(self):
        """First child in declared order is the base when none is designated."""
        node = ComponentSetNode(
            children=[ComponentNode(id="a", name="A"), ComponentNode(id="b", name="B")]
        )
        assert get_base_component(node).name == "A"

    @pytest.mark.unit
    def test_dangling_default_falls_back(self):
        """An unknown default id falls back to the first child."""
        node = ComponentSetNode(
            default_variant_id="zz", children=[ComponentNode(id="a", name="A")]
        )
        assert get_base_component(node).name == "A"

    @pytest.mark.unit
    def test_empty_set(self):
        """A set without children has no base."""
        assert get_base_component(ComponentSetNode(children=[])) is None
        assert get_base_component(ComponentSetNode()) is None


class TestSemanticRole:
    """Tests for derive_semantic_role."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, role",
        [
            ("Button/Primary", "Primary"),
            ("Forms/Input/Text", "Text"),
            ("Badge", "Badge"),
            ("Trailing/", ""),
        ],
    )
    def test_last_segment(self, name, role):
        """Role is the last slash segment."""
        assert derive_semantic_role(name) == role


class TestExtractMetadata:
    """Tests for extract_metadata end to end over parsed trees."""

    @pytest.mark.unit
    def test_empty_selection_message(self, resolver):
        """Empty selection returns the localized error."""
        result = extract_metadata(StaticSelection([]), resolver)
        assert result.to_payload() == {"error": "컴포넌트를 선택해 주세요."}

    @pytest.mark.unit
    def test_frame_selection_message(self, resolver):
        """Frame selection returns the unsupported type error."""
        result = extract_metadata(StaticSelection([FrameNode()]), resolver)
        assert result.to_payload() == {
            "error": "Component 또는 Component Set만 지원합니다."
        }

    @pytest.mark.unit
    def test_empty_set_message(self, resolver):
        """A childless set returns the missing default variant error."""
        result = extract_metadata(
            StaticSelection([ComponentSetNode(name="Empty", children=[])]), resolver
        )
        assert result.to_payload() == {"error": "기본 Variant를 찾지 못했습니다."}

    @pytest.mark.unit
    def test_component_set_uses_designated_default(self, button_set, resolver):
        """Non-variant fields come from the default child, variants from the set."""
        result = extract_metadata(StaticSelection([button_set]), resolver)
        data = result.to_payload()["data"]

        assert data["name"] == "Button/Primary"
        assert data["semanticRole"] == "Primary"
        assert data["variants"] == [
            {"name": "State=Default", "properties": {"State": "Default"}},
            {"name": "State=Hover", "properties": {"State": "Hover"}},
        ]
        assert data["autoLayout"] == {
            "direction": "Horizontal",
            "spacing": 8,
            "padding": {"top": 8, "right": 16, "bottom": 8, "left": 16},
            "alignment": "CENTER/CENTER",
        }
        assert data["fills"] == [
            {
                "type": "SOLID",
                "opacity": 0.5,
                "color": "rgb(255, 0, 0)",
                "token": "Color/Brand/Primary",
            }
        ]
        assert data["textStyles"] == [
            {"token": "Text/Label/M", "fontSize": 16, "lineHeight": 24}
        ]
        assert data["description"] == "Primary call to action"
        assert data["subcomponents"] == [
            {"role": "Icon", "nodeType": "INSTANCE", "description": "Instance of Icon/Cart"},
            {"role": "Label", "nodeType": "TEXT", "description": "텍스트 노드, 글자 수: 7"},
        ]
        assert data["usageNotes"] == []

    @pytest.mark.unit
    def test_plain_component_defaults(self):
        """A bare component without description gets the placeholder."""
        node = ComponentNode(name="Divider")
        result = extract_metadata(
            StaticSelection([node]), TokenResolver(StyleRegistry())
        )
        data = result.data
        assert data.semantic_role == "Divider"
        assert data.variants == []
        assert data.auto_layout is None
        assert data.fills == []
        assert data.text_styles == []
        assert data.subcomponents == []
        assert data.description == "(정보 없음)"

    @pytest.mark.unit
    def test_source_tree_untouched(self, button_set, resolver):
        """Extraction leaves the node tree equal to its original state."""
        before = button_set.model_copy(deep=True)
        extract_metadata(StaticSelection([button_set]), resolver)
        assert button_set == before
