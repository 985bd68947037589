"""Unit tests for the dispatch layer."""

import pytest

from compdoc.metadata import MetadataError
from compdoc.node import ComponentNode, FrameNode

from .lib import (
    COPY_SUCCESS_MESSAGE,
    CopyError,
    Dispatcher,
    MessageType,
    PanelConfig,
    copy_to_clipboard,
    initialize,
)


class FakeClipboard:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.copied: list[str] = []

    def copy_text(self, text: str) -> None:
        if self.error is not None:
            raise self.error
        self.copied.append(text)


class FakeHost:
    """Minimal host capturing everything the dispatcher does."""

    def __init__(self, selection=(), styles=None, clipboard=None):
        self.selection = list(selection)
        self.styles = styles or {}
        self.clipboard = clipboard
        self.posted: list[dict] = []
        self.panels: list[PanelConfig] = []

    def get_selection(self):
        return self.selection

    def get_style(self, style_id):
        return self.styles.get(style_id)

    def post_message(self, message):
        self.posted.append(message)

    def show_panel(self, config):
        self.panels.append(config)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost(
        selection=[ComponentNode(name="Chip/Small")],
        clipboard=FakeClipboard(),
    )


@pytest.fixture
def dispatcher(host) -> Dispatcher:
    return Dispatcher(host, PanelConfig())


# =============================================================================
# Copy Flow
# =============================================================================


class TestCopyToClipboard:
    """Tests for copy_to_clipboard."""

    @pytest.mark.unit
    def test_success(self):
        """Copied text reaches the clipboard."""
        clipboard = FakeClipboard()
        result = copy_to_clipboard(clipboard, "## Guide")
        assert result.success
        assert result.message == COPY_SUCCESS_MESSAGE
        assert clipboard.copied == ["## Guide"]

    @pytest.mark.unit
    def test_clipboard_unavailable(self):
        """No clipboard capability reports a failure without raising."""
        result = copy_to_clipboard(None, "text")
        assert not result.success
        assert result.message == CopyError.CLIPBOARD_UNAVAILABLE.value

    @pytest.mark.unit
    def test_failure_uses_error_message(self):
        """Clipboard errors are reported with their own message."""
        result = copy_to_clipboard(FakeClipboard(RuntimeError("denied")), "text")
        assert not result.success
        assert result.message == "denied"

    @pytest.mark.unit
    def test_failure_without_message(self):
        """Errors without a message fall back to the generic failure."""
        result = copy_to_clipboard(FakeClipboard(RuntimeError()), "text")
        assert result.message == CopyError.CLIPBOARD_WRITE_FAILED.value

    @pytest.mark.unit
    def test_non_string_payload_copies_empty(self):
        """Non-string payloads are copied as an empty string."""
        clipboard = FakeClipboard()
        result = copy_to_clipboard(clipboard, {"text": "x"})
        assert result.success
        assert clipboard.copied == [""]


# =============================================================================
# Dispatcher
# =============================================================================


class TestDispatcher:
    """Tests for Dispatcher routing."""

    @pytest.mark.unit
    def test_request_metadata_posts_record(self, dispatcher, host):
        """request-metadata posts one metadata message."""
        dispatcher.on_message({"type": "request-metadata"})

        assert len(host.posted) == 1
        message = host.posted[0]
        assert message["type"] == MessageType.METADATA.value
        assert "error" not in message["payload"]
        assert message["payload"]["data"]["name"] == "Chip/Small"

    @pytest.mark.unit
    def test_selection_change_posts_failure(self, dispatcher, host):
        """Failures are posted as data with an error message."""
        host.selection = [FrameNode(name="Card")]
        dispatcher.on_selection_changed()

        payload = host.posted[-1]["payload"]
        assert payload == {"error": MetadataError.UNSUPPORTED_TYPE.value}

    @pytest.mark.unit
    def test_copy_guide_posts_result(self, dispatcher, host):
        """copy-guide copies the payload and posts copy-result."""
        dispatcher.on_message({"type": "copy-guide", "payload": "## Chip"})

        assert host.clipboard.copied == ["## Chip"]
        assert host.posted == [
            {
                "type": "copy-result",
                "payload": {"success": True, "message": COPY_SUCCESS_MESSAGE},
            }
        ]

    @pytest.mark.unit
    def test_copy_guide_without_clipboard(self, dispatcher, host):
        """Missing clipboard is reported through copy-result."""
        host.clipboard = None
        dispatcher.on_message({"type": "copy-guide", "payload": "text"})

        assert host.posted[-1]["payload"] == {
            "success": False,
            "message": CopyError.CLIPBOARD_UNAVAILABLE.value,
        }

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "message",
        [None, "request-metadata", 42, {}, {"payload": "x"}, {"type": ""}],
    )
    def test_untyped_messages_ignored(self, dispatcher, host, message):
        """Messages without a type produce no output."""
        dispatcher.on_message(message)
        assert host.posted == []

    @pytest.mark.unit
    def test_unknown_type_ignored(self, dispatcher, host):
        """Unknown message types produce no output."""
        dispatcher.on_message({"type": "metadata"})
        dispatcher.on_message({"type": "resize", "payload": {"width": 10}})
        assert host.posted == []

    @pytest.mark.unit
    def test_messages_posted_in_order(self, dispatcher, host):
        """Outbound messages keep the order of the triggering events."""
        dispatcher.on_message({"type": "copy-guide", "payload": "a"})
        dispatcher.on_selection_changed()
        dispatcher.on_message({"type": "copy-guide", "payload": "b"})

        assert [m["type"] for m in host.posted] == [
            "copy-result",
            "metadata",
            "copy-result",
        ]


class TestInitialize:
    """Tests for startup."""

    @pytest.mark.unit
    def test_opens_panel_and_posts_once(self, host):
        """Startup opens the panel then posts metadata exactly once."""
        config = PanelConfig(width=320, height=640)
        dispatcher = initialize(host, config)

        assert host.panels == [config]
        assert len(host.posted) == 1
        assert host.posted[0]["type"] == "metadata"
        assert dispatcher.config is config

    @pytest.mark.unit
    def test_panel_config_from_env(self, monkeypatch):
        """Panel size defaults come from the environment."""
        monkeypatch.setenv("PANEL_WIDTH", "600")
        monkeypatch.delenv("PANEL_HEIGHT", raising=False)

        config = PanelConfig.from_env()
        assert config == PanelConfig(width=600, height=780)

    @pytest.mark.unit
    def test_empty_selection_on_startup(self):
        """Startup with nothing selected posts the NO_SELECTION failure."""
        host = FakeHost()
        initialize(host, PanelConfig())

        assert host.posted[0]["payload"]["error"] == MetadataError.NO_SELECTION.value
