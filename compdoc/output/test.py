"""Tests for output module."""

import pytest

from compdoc.metadata import extract_metadata
from compdoc.output import build_tree, format_metadata_tree
from compdoc.schema import ComponentMetadata, FillSummary, TextStyleEntry
from compdoc.tokens import TokenResolver


@pytest.fixture
def button_metadata(snapshot_host) -> ComponentMetadata:
    """Record extracted from the sample button snapshot."""
    result = extract_metadata(snapshot_host, TokenResolver(snapshot_host))
    assert result.ok
    return result.data


class TestFormatMetadataTree:
    """Tests for format_metadata_tree function."""

    @pytest.mark.unit
    def test_root_line(self, button_metadata):
        """First line shows name and semantic role."""
        tree = format_metadata_tree(button_metadata)
        assert tree.splitlines()[0] == "Button/Primary [Primary]"

    @pytest.mark.unit
    def test_sections(self, button_metadata):
        """Every populated section is rendered."""
        tree = format_metadata_tree(button_metadata)

        assert "├── Description: Primary call to action" in tree
        assert "├── Variants (2)" in tree
        assert "│   ├── State=Default [State=Default]" in tree
        assert (
            "├── Auto Layout [Horizontal, spacing 8, padding 8/16/8/16, CENTER/CENTER]"
            in tree
        )
        assert "│   └── SOLID rgb(255, 0, 0) 50% [Color/Brand/Primary]" in tree
        assert "│   └── Text/Label/M [16px, line 24]" in tree
        assert "└── Subcomponents (2)" in tree
        assert "    ├── Icon [INSTANCE] Instance of Icon/Cart" in tree

    @pytest.mark.unit
    def test_last_section_connector(self, button_metadata):
        """Children of the last section use blank indentation."""
        lines = format_metadata_tree(button_metadata).splitlines()
        assert lines[-1].startswith("    └── Label [TEXT]")

    @pytest.mark.unit
    def test_minimal_record(self):
        """Empty sections are omitted."""
        metadata = ComponentMetadata(name="Badge", semantic_role="Badge")
        tree = format_metadata_tree(metadata)

        assert tree == "Badge [Badge]\n└── Description: (정보 없음)"


class TestBuildTree:
    """Tests for tree item labels."""

    @pytest.mark.unit
    def test_hidden_fill_without_color(self):
        """Non-solid hidden fills show type, opacity and visibility."""
        metadata = ComponentMetadata(
            name="Card",
            semantic_role="Card",
            fills=[FillSummary(type="IMAGE", opacity=0.25, visible=False)],
        )
        fills = build_tree(metadata).children[1]

        assert fills.label == "Fills (1)"
        assert fills.children[0].label == "IMAGE 25% hidden"

    @pytest.mark.unit
    def test_text_style_without_token(self):
        """Text styles without a token get a placeholder name."""
        metadata = ComponentMetadata(
            name="Card",
            semantic_role="Card",
            text_styles=[TextStyleEntry(font_size=12, line_height="AUTO")],
        )
        styles = build_tree(metadata).children[1]

        assert styles.children[0].label == "(no token) [12px, line AUTO]"
