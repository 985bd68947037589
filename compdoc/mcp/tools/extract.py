"""Snapshot extraction tools for MCP server.

Each call builds a fresh SnapshotHost over the given snapshot and runs one
dispatch. The server has no clipboard, so copy-guide requests always report
the unavailable-capability failure.
"""

import logging
from typing import Any

from compdoc.dispatch import Dispatcher, PanelConfig
from compdoc.host import SnapshotHost

logger = logging.getLogger(__name__)


def _dispatcher_for(snapshot: dict[str, Any]) -> tuple[SnapshotHost, Dispatcher]:
    host = SnapshotHost.from_dict(snapshot)
    return host, Dispatcher(host, PanelConfig())


def extract_metadata(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Extract the metadata message for a document snapshot.

    Args:
        snapshot: Snapshot dict with ``selection`` and ``styles``.

    Returns:
        The outbound message: ``{"type": "metadata", "payload": {...}}``.

    Raises:
        pydantic.ValidationError: If the snapshot is malformed.
    """
    host, dispatcher = _dispatcher_for(snapshot)
    result = dispatcher.dispatch_metadata()
    if result.ok:
        logger.info(f"Extracted metadata for '{result.data.name}'")
    else:
        logger.info(f"Extraction failed: {result.error}")
    return host.channel.last


def send_message(snapshot: dict[str, Any], message: dict[str, Any]) -> list[dict[str, Any]]:
    """Deliver one panel message against a snapshot.

    Args:
        snapshot: Snapshot dict with ``selection`` and ``styles``.
        message: Panel message, e.g. ``{"type": "request-metadata"}``.

    Returns:
        Outbound messages in order. Empty when the message was ignored.
    """
    host, dispatcher = _dispatcher_for(snapshot)
    dispatcher.on_message(message)
    return list(host.messages)
