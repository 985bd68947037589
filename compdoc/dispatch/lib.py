"""Dispatch and notification layer.

Reacts to selection changes and inbound panel messages, runs the metadata
assembler and posts the outcome to the panel. Also serves the copy-guide
round trip against the host clipboard.

The core holds no event loop: the host adapter wires its own events to
:meth:`Dispatcher.on_selection_changed` and :meth:`Dispatcher.on_message`.

Example:
    >>> dispatcher = initialize(host)  # opens the panel, posts metadata once
    >>> dispatcher.on_message({"type": "request-metadata"})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from compdoc.config import EnvVar, get_environment
from compdoc.metadata import SelectionSource, extract_metadata
from compdoc.schema import CopyResult, MetadataResult
from compdoc.tokens import StyleLookup, TokenResolver

logger = logging.getLogger(__name__)

COPY_SUCCESS_MESSAGE = "가이드를 복사했습니다."


class MessageType(str, Enum):
    """Tags of messages exchanged with the panel."""

    # Panel -> core
    REQUEST_METADATA = "request-metadata"
    COPY_GUIDE = "copy-guide"
    # Core -> panel
    METADATA = "metadata"
    COPY_RESULT = "copy-result"


class CopyError(str, Enum):
    """Copy-guide failures; values are the user-facing messages."""

    CLIPBOARD_UNAVAILABLE = "copyText API를 사용할 수 없습니다."
    CLIPBOARD_WRITE_FAILED = "복사에 실패했습니다."


# =============================================================================
# Host Capabilities
# =============================================================================


@dataclass(frozen=True)
class PanelConfig:
    """Presentation panel settings handed to the host on startup.

    Attributes:
        width: Panel width in pixels.
        height: Panel height in pixels.
    """

    width: int = 480
    height: int = 780

    @classmethod
    def from_env(cls) -> PanelConfig:
        """Create config from environment variables."""
        return cls(
            width=get_environment(EnvVar.PANEL_WIDTH),
            height=get_environment(EnvVar.PANEL_HEIGHT),
        )


class ClipboardWriter(Protocol):
    """Host capability writing text to the system clipboard."""

    def copy_text(self, text: str) -> None: ...


class MessageChannel(Protocol):
    """One-directional, order-preserving channel to the panel."""

    def post_message(self, message: dict[str, Any]) -> None: ...


class PanelHost(Protocol):
    """Host capability opening the presentation panel."""

    def show_panel(self, config: PanelConfig) -> None: ...


class Host(SelectionSource, StyleLookup, MessageChannel, PanelHost, Protocol):
    """Everything the dispatcher needs from the hosting application.

    ``clipboard`` is None when the host offers no clipboard capability.
    """

    clipboard: ClipboardWriter | None


# =============================================================================
# Copy Flow
# =============================================================================


def copy_to_clipboard(clipboard: ClipboardWriter | None, payload: Any) -> CopyResult:
    """Write a guide text to the clipboard, trapping every failure.

    Args:
        clipboard: Clipboard capability, or None when unavailable.
        payload: Text to copy; anything else is copied as an empty string.

    Returns:
        CopyResult describing the outcome.
    """
    text = payload if isinstance(payload, str) else ""

    if clipboard is None:
        return CopyResult(success=False, message=CopyError.CLIPBOARD_UNAVAILABLE.value)

    try:
        clipboard.copy_text(text)
    except Exception as e:
        logger.warning(f"Clipboard write failed: {e!r}")
        return CopyResult(
            success=False,
            message=str(e) or CopyError.CLIPBOARD_WRITE_FAILED.value,
        )

    return CopyResult(success=True, message=COPY_SUCCESS_MESSAGE)


# =============================================================================
# Dispatcher
# =============================================================================


class Dispatcher:
    """Routes host events to the metadata pipeline.

    Args:
        host: Hosting application capabilities.
        config: Panel settings (defaults from environment).
    """

    def __init__(self, host: Host, config: PanelConfig | None = None):
        self.host = host
        self.config = config or PanelConfig.from_env()
        self._resolver = TokenResolver(host)

    def dispatch_metadata(self) -> MetadataResult:
        """Extract metadata for the current selection and post it."""
        result = extract_metadata(self.host, self._resolver)
        self.host.post_message(
            {"type": MessageType.METADATA.value, "payload": result.to_payload()}
        )
        return result

    def on_selection_changed(self) -> None:
        """Host selection-change entry point."""
        self.dispatch_metadata()

    def on_message(self, message: Any) -> None:
        """Panel message entry point.

        Messages that are not objects, carry no ``type``, or carry an unknown
        type are ignored.
        """
        if not isinstance(message, Mapping) or not message.get("type"):
            logger.debug(f"Ignoring untyped message: {message!r}")
            return

        msg_type = message["type"]
        if msg_type == MessageType.REQUEST_METADATA:
            self.dispatch_metadata()
        elif msg_type == MessageType.COPY_GUIDE:
            self.copy_guide(message.get("payload"))
        else:
            logger.debug(f"Ignoring message type '{msg_type}'")

    def copy_guide(self, payload: Any) -> CopyResult:
        """Copy a guide text and post the copy-result message."""
        result = copy_to_clipboard(self.host.clipboard, payload)
        self.host.post_message(
            {"type": MessageType.COPY_RESULT.value, "payload": result.to_payload()}
        )
        return result


def initialize(host: Host, config: PanelConfig | None = None) -> Dispatcher:
    """Open the panel and post the startup metadata once.

    Args:
        host: Hosting application capabilities.
        config: Panel settings (defaults from environment).

    Returns:
        Dispatcher whose entry points the host wires to its events.
    """
    dispatcher = Dispatcher(host, config)
    host.show_panel(dispatcher.config)
    dispatcher.dispatch_metadata()
    return dispatcher


__all__ = [
    "COPY_SUCCESS_MESSAGE",
    "MessageType",
    "CopyError",
    "PanelConfig",
    "ClipboardWriter",
    "MessageChannel",
    "PanelHost",
    "Host",
    "copy_to_clipboard",
    "Dispatcher",
    "initialize",
]
