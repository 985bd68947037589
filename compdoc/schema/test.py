"""Unit tests for metadata record models."""

import pytest

from .lib import (
    AutoLayoutDescriptor,
    ComponentMetadata,
    CopyResult,
    Direction,
    FillSummary,
    MetadataResult,
    Padding,
    SubcomponentDescriptor,
    TextStyleEntry,
    export_json_schema,
)


class TestFillSummary:
    """Tests for FillSummary serialization."""

    @pytest.mark.unit
    def test_optional_keys_omitted(self):
        """Unset color, visible and token are not serialized."""
        summary = FillSummary(type="GRADIENT_LINEAR", opacity=0.5)
        assert summary.model_dump(by_alias=True) == {
            "type": "GRADIENT_LINEAR",
            "opacity": 0.5,
        }

    @pytest.mark.unit
    def test_visible_false_is_kept(self):
        """A false visible flag is still serialized."""
        summary = FillSummary(type="SOLID", visible=False)
        assert summary.model_dump(by_alias=True)["visible"] is False


class TestTextStyleEntry:
    """Tests for TextStyleEntry."""

    @pytest.mark.unit
    def test_nulls_serialized(self):
        """Missing typography stays as explicit nulls."""
        assert TextStyleEntry().model_dump(by_alias=True) == {
            "token": None,
            "fontSize": None,
            "lineHeight": None,
        }

    @pytest.mark.unit
    def test_key_and_equality(self):
        """Structurally equal entries share a key and compare equal."""
        a = TextStyleEntry(token="Body", font_size=14, line_height="150%")
        b = TextStyleEntry(token="Body", font_size=14, line_height="150%")
        assert a == b
        assert a.key() == b.key()


class TestComponentMetadata:
    """Tests for the assembled record."""

    @pytest.mark.unit
    def test_wire_keys_are_camel_case(self):
        """to_dict emits the documented camelCase keys."""
        metadata = ComponentMetadata(
            name="Button/Primary",
            semantic_role="Primary",
            auto_layout=AutoLayoutDescriptor(
                direction=Direction.HORIZONTAL,
                spacing=8,
                padding=Padding(top=4, right=12, bottom=4, left=12),
                alignment="CENTER/CENTER",
            ),
            subcomponents=[
                SubcomponentDescriptor(
                    role="Label", node_type="TEXT", description="텍스트 노드, 글자 수: 2"
                )
            ],
        )
        data = metadata.to_dict()
        assert set(data) == {
            "name",
            "semanticRole",
            "variants",
            "autoLayout",
            "fills",
            "textStyles",
            "description",
            "subcomponents",
            "usageNotes",
        }
        assert data["autoLayout"]["direction"] == "Horizontal"
        assert data["subcomponents"][0]["nodeType"] == "TEXT"
        assert data["description"] == "(정보 없음)"
        assert data["usageNotes"] == []

    @pytest.mark.unit
    def test_export_json_schema(self):
        """Schema is exported with aliases."""
        schema = export_json_schema()
        assert schema["title"] == "ComponentMetadata"
        assert "semanticRole" in schema["properties"]


class TestMetadataResult:
    """Tests for MetadataResult."""

    @pytest.mark.unit
    def test_error_payload(self):
        """Failure payload carries only the error."""
        result = MetadataResult.failure("boom")
        assert not result.ok
        assert result.to_payload() == {"error": "boom"}

    @pytest.mark.unit
    def test_data_payload(self):
        """Success payload nests the record under data."""
        result = MetadataResult.success(ComponentMetadata(name="A", semantic_role="A"))
        assert result.ok
        assert result.to_payload()["data"]["name"] == "A"

    @pytest.mark.unit
    def test_requires_exactly_one(self):
        """Neither or both fields set is rejected."""
        with pytest.raises(ValueError):
            MetadataResult()
        with pytest.raises(ValueError):
            MetadataResult(
                data=ComponentMetadata(name="A", semantic_role="A"), error="boom"
            )


class TestCopyResult:
    """Tests for CopyResult."""

    @pytest.mark.unit
    def test_payload(self):
        """Payload is a plain dict."""
        assert CopyResult(success=True, message="ok").to_payload() == {
            "success": True,
            "message": "ok",
        }
