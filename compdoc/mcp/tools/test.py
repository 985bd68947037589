"""Unit tests for MCP tools."""

import pytest
from pydantic import ValidationError

from compdoc.dispatch import CopyError

from .extract import extract_metadata, send_message


class TestExtractMetadata:
    """Tests for extract_metadata tool."""

    @pytest.mark.unit
    def test_returns_metadata_message(self, button_snapshot):
        """The metadata message of the selected component set is returned."""
        message = extract_metadata(button_snapshot)

        assert message["type"] == "metadata"
        data = message["payload"]["data"]
        assert data["name"] == "Button/Primary"
        assert [v["name"] for v in data["variants"]] == ["State=Default", "State=Hover"]
        assert data["autoLayout"]["direction"] == "Horizontal"

    @pytest.mark.unit
    def test_empty_selection(self):
        """An empty snapshot yields the NO_SELECTION failure."""
        message = extract_metadata({"selection": [], "styles": {}})
        assert message["payload"] == {"error": "컴포넌트를 선택해 주세요."}

    @pytest.mark.unit
    def test_malformed_snapshot_raises(self):
        """Malformed snapshots surface as validation errors."""
        with pytest.raises(ValidationError):
            extract_metadata({"selection": "Button"})


class TestSendMessage:
    """Tests for send_message tool."""

    @pytest.mark.unit
    def test_request_metadata(self, button_snapshot):
        """request-metadata produces one metadata message."""
        messages = send_message(button_snapshot, {"type": "request-metadata"})

        assert len(messages) == 1
        assert messages[0]["type"] == "metadata"

    @pytest.mark.unit
    def test_copy_guide_without_clipboard(self, button_snapshot):
        """copy-guide reports that no clipboard is available."""
        messages = send_message(
            button_snapshot, {"type": "copy-guide", "payload": "# Button"}
        )

        assert messages == [
            {
                "type": "copy-result",
                "payload": {
                    "success": False,
                    "message": CopyError.CLIPBOARD_UNAVAILABLE.value,
                },
            }
        ]

    @pytest.mark.unit
    def test_ignored_message(self, button_snapshot):
        """Untyped messages produce nothing."""
        assert send_message(button_snapshot, {"payload": "x"}) == []
