"""Dispatch layer: host capabilities, message routing and the copy-guide flow."""

from .lib import (
    COPY_SUCCESS_MESSAGE,
    ClipboardWriter,
    CopyError,
    Dispatcher,
    Host,
    MessageChannel,
    MessageType,
    PanelConfig,
    PanelHost,
    copy_to_clipboard,
    initialize,
)

__all__ = [
    # Messages
    "MessageType",
    "CopyError",
    "COPY_SUCCESS_MESSAGE",
    # Host capabilities
    "PanelConfig",
    "ClipboardWriter",
    "MessageChannel",
    "PanelHost",
    "Host",
    # Dispatch
    "copy_to_clipboard",
    "Dispatcher",
    "initialize",
]
