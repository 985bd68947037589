"""In-memory host adapter over a design document snapshot.

A snapshot is the JSON export of a document's current selection and shared
style table::

    {
        "selection": [{"type": "COMPONENT_SET", "name": "Button", ...}],
        "styles": {"S:1": {"name": "Color/Primary"}}
    }

:class:`SnapshotHost` implements every host capability the dispatcher needs
over such a snapshot, and owns the event wiring to the dispatcher entry
points.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compdoc.dispatch import ClipboardWriter, Dispatcher, PanelConfig, initialize
from compdoc.node import SceneNode, parse_node

logger = logging.getLogger(__name__)


# =============================================================================
# Snapshot Models
# =============================================================================


class SnapshotStyle(BaseModel):
    """Shared style entry of a snapshot."""

    model_config = ConfigDict(extra="ignore")

    name: str


class DocumentSnapshot(BaseModel):
    """Selection and style table exported from a design document.

    Attributes:
        selection: Selected nodes in host order.
        styles: Shared styles keyed by style reference.
    """

    model_config = ConfigDict(extra="ignore")

    selection: list[SceneNode] = Field(default_factory=list)
    styles: dict[str, SnapshotStyle] = Field(default_factory=dict)

    @field_validator("selection", mode="before")
    @classmethod
    def parse_selection(cls, value: Any) -> Any:
        if not isinstance(value, list):
            raise ValueError("selection must be a list of nodes")
        return [parse_node(node) for node in value]


def load_snapshot(path: Path | str) -> DocumentSnapshot:
    """Read a snapshot JSON file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the content is not a valid snapshot.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return DocumentSnapshot.model_validate(json.loads(raw))


# =============================================================================
# Channel and Clipboard
# =============================================================================


class RecordingChannel:
    """Message channel keeping every posted message in order."""

    def __init__(self):
        self.messages: list[dict[str, Any]] = []

    def post_message(self, message: dict[str, Any]) -> None:
        self.messages.append(message)

    @property
    def last(self) -> dict[str, Any] | None:
        return self.messages[-1] if self.messages else None

    def of_type(self, message_type: str) -> list[dict[str, Any]]:
        return [m for m in self.messages if m.get("type") == message_type]


class MemoryClipboard:
    """Clipboard capability storing copied text in memory."""

    def __init__(self):
        self.history: list[str] = []

    @property
    def text(self) -> str | None:
        return self.history[-1] if self.history else None

    def copy_text(self, text: str) -> None:
        self.history.append(text)


# =============================================================================
# Host
# =============================================================================

SelectionListener = Callable[[], None]
MessageListener = Callable[[Any], None]


class SnapshotHost:
    """Host capabilities backed by a DocumentSnapshot.

    Args:
        snapshot: Document snapshot to serve.
        clipboard: Clipboard capability, None when unavailable.
        channel: Channel receiving posted messages.
    """

    def __init__(
        self,
        snapshot: DocumentSnapshot,
        clipboard: ClipboardWriter | None = None,
        channel: RecordingChannel | None = None,
    ):
        self.snapshot = snapshot
        self.clipboard = clipboard
        self.channel = channel or RecordingChannel()
        self.panel_config: PanelConfig | None = None
        self._selection: list[SceneNode] = list(snapshot.selection)
        self._selection_listeners: list[SelectionListener] = []
        self._message_listeners: list[MessageListener] = []

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], clipboard: ClipboardWriter | None = None
    ) -> SnapshotHost:
        return cls(DocumentSnapshot.model_validate(data), clipboard=clipboard)

    @classmethod
    def from_file(
        cls, path: Path | str, clipboard: ClipboardWriter | None = None
    ) -> SnapshotHost:
        return cls(load_snapshot(path), clipboard=clipboard)

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    def get_selection(self) -> list[SceneNode]:
        return list(self._selection)

    def get_style(self, style_id: str) -> SnapshotStyle | None:
        return self.snapshot.styles.get(style_id)

    def post_message(self, message: dict[str, Any]) -> None:
        self.channel.post_message(message)

    def show_panel(self, config: PanelConfig) -> None:
        logger.debug(f"Panel opened at {config.width}x{config.height}")
        self.panel_config = config

    @property
    def messages(self) -> list[dict[str, Any]]:
        return self.channel.messages

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def listen(
        self,
        on_selection_changed: SelectionListener,
        on_message: MessageListener,
    ) -> None:
        """Register handlers for selection changes and panel messages."""
        self._selection_listeners.append(on_selection_changed)
        self._message_listeners.append(on_message)

    def select(self, nodes: list[SceneNode | dict[str, Any]]) -> None:
        """Replace the selection and notify selection listeners."""
        self._selection = [parse_node(node) for node in nodes]
        for listener in self._selection_listeners:
            listener()

    def send(self, message: Any) -> None:
        """Deliver a panel message to message listeners."""
        for listener in self._message_listeners:
            listener(message)


def start(host: SnapshotHost, config: PanelConfig | None = None) -> Dispatcher:
    """Initialize a dispatcher and wire it to the host events.

    Args:
        host: Snapshot host.
        config: Panel settings (defaults from environment).

    Returns:
        The wired dispatcher. The startup metadata message is already posted.
    """
    dispatcher = initialize(host, config)
    host.listen(dispatcher.on_selection_changed, dispatcher.on_message)
    return dispatcher


__all__ = [
    "SnapshotStyle",
    "DocumentSnapshot",
    "load_snapshot",
    "RecordingChannel",
    "MemoryClipboard",
    "SnapshotHost",
    "start",
]
