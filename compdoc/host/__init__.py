"""Snapshot-backed host adapter for running the pipeline outside the editor."""

from .lib import (
    DocumentSnapshot,
    MemoryClipboard,
    RecordingChannel,
    SnapshotHost,
    SnapshotStyle,
    load_snapshot,
    start,
)

__all__ = [
    # Snapshot
    "SnapshotStyle",
    "DocumentSnapshot",
    "load_snapshot",
    # Capabilities
    "RecordingChannel",
    "MemoryClipboard",
    # Host
    "SnapshotHost",
    "start",
]
