"""Unit tests for the snapshot host adapter."""

import json

import pytest
from pydantic import ValidationError

from compdoc.dispatch import PanelConfig
from compdoc.node import ComponentSetNode, TextNode

from .lib import (
    DocumentSnapshot,
    MemoryClipboard,
    RecordingChannel,
    SnapshotHost,
    load_snapshot,
    start,
)


class TestDocumentSnapshot:
    """Tests for snapshot parsing."""

    @pytest.mark.unit
    def test_parse_selection_and_styles(self, button_snapshot):
        """Selection nodes are parsed into typed nodes."""
        snapshot = DocumentSnapshot.model_validate(button_snapshot)

        assert isinstance(snapshot.selection[0], ComponentSetNode)
        assert snapshot.styles["S:brand"].name == "Color/Brand/Primary"

    @pytest.mark.unit
    def test_empty_snapshot(self):
        """Missing keys default to empty selection and styles."""
        snapshot = DocumentSnapshot.model_validate({})
        assert snapshot.selection == []
        assert snapshot.styles == {}

    @pytest.mark.unit
    def test_selection_must_be_list(self):
        """A non-list selection is rejected."""
        with pytest.raises(ValidationError):
            DocumentSnapshot.model_validate({"selection": {"type": "FRAME"}})

    @pytest.mark.unit
    def test_load_snapshot(self, tmp_path, button_snapshot):
        """Snapshots load from JSON files."""
        path = tmp_path / "button.json"
        path.write_text(json.dumps(button_snapshot, ensure_ascii=False), encoding="utf-8")

        snapshot = load_snapshot(path)
        assert snapshot.selection[0].name == "Button/Primary"


class TestCapabilities:
    """Tests for channel, clipboard and style lookup."""

    @pytest.mark.unit
    def test_recording_channel(self):
        """Posted messages are kept in order."""
        channel = RecordingChannel()
        assert channel.last is None

        channel.post_message({"type": "metadata", "payload": {}})
        channel.post_message({"type": "copy-result", "payload": {}})

        assert channel.last["type"] == "copy-result"
        assert len(channel.of_type("metadata")) == 1

    @pytest.mark.unit
    def test_memory_clipboard(self):
        """The clipboard holds the last copied text."""
        clipboard = MemoryClipboard()
        assert clipboard.text is None

        clipboard.copy_text("a")
        clipboard.copy_text("b")
        assert clipboard.text == "b"
        assert clipboard.history == ["a", "b"]

    @pytest.mark.unit
    def test_get_style(self, snapshot_host):
        """Style lookup misses return None."""
        assert snapshot_host.get_style("S:label").name == "Text/Label/M"
        assert snapshot_host.get_style("S:missing") is None


class TestSnapshotHost:
    """End-to-end tests through the snapshot host."""

    @pytest.mark.unit
    def test_start_posts_metadata(self, snapshot_host):
        """Startup opens the panel and posts the record of the selection."""
        start(snapshot_host, PanelConfig())

        assert snapshot_host.panel_config == PanelConfig()
        assert len(snapshot_host.messages) == 1

        data = snapshot_host.messages[0]["payload"]["data"]
        assert data["name"] == "Button/Primary"
        assert data["semanticRole"] == "Primary"
        assert data["description"] == "Primary call to action"
        assert data["fills"][0]["token"] == "Color/Brand/Primary"
        assert data["textStyles"] == [
            {"token": "Text/Label/M", "fontSize": 16, "lineHeight": 24}
        ]

    @pytest.mark.unit
    def test_selection_change_dispatches(self, snapshot_host):
        """Changing the selection posts a new metadata message."""
        start(snapshot_host, PanelConfig())
        snapshot_host.select([TextNode(name="Loose text")])

        assert len(snapshot_host.messages) == 2
        assert "error" in snapshot_host.channel.last["payload"]

    @pytest.mark.unit
    def test_select_accepts_raw_nodes(self, snapshot_host):
        """Raw node dicts are parsed when selected."""
        start(snapshot_host, PanelConfig())
        snapshot_host.select([{"type": "COMPONENT", "name": "Tag/Small"}])

        data = snapshot_host.channel.last["payload"]["data"]
        assert data["semanticRole"] == "Small"

    @pytest.mark.unit
    def test_copy_guide_round_trip(self, snapshot_host):
        """copy-guide writes to the clipboard and reports success."""
        start(snapshot_host, PanelConfig())
        snapshot_host.send({"type": "copy-guide", "payload": "# Button"})

        assert snapshot_host.clipboard.text == "# Button"
        assert snapshot_host.channel.of_type("copy-result")[0]["payload"]["success"]

    @pytest.mark.unit
    def test_copy_guide_without_clipboard(self, button_snapshot):
        """A host without clipboard reports the unavailable failure."""
        host = SnapshotHost.from_dict(button_snapshot)
        start(host, PanelConfig())
        host.send({"type": "copy-guide", "payload": "# Button"})

        assert host.channel.last["payload"]["success"] is False

    @pytest.mark.unit
    def test_from_file(self, tmp_path, button_snapshot):
        """Hosts can be built straight from a snapshot file."""
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(button_snapshot), encoding="utf-8")

        host = SnapshotHost.from_file(path)
        assert host.get_selection()[0].name == "Button/Primary"
        assert host.clipboard is None
