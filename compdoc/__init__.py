"""compdoc: documentation metadata extraction for design components."""

from compdoc.dispatch import Dispatcher, PanelConfig, initialize
from compdoc.host import SnapshotHost, load_snapshot, start
from compdoc.metadata import MetadataError, extract_metadata
from compdoc.node import parse_node
from compdoc.schema import ComponentMetadata, MetadataResult, export_json_schema
from compdoc.tokens import TokenResolver

__all__ = [
    # Nodes
    "parse_node",
    # Records
    "ComponentMetadata",
    "MetadataResult",
    "export_json_schema",
    # Extraction
    "TokenResolver",
    "MetadataError",
    "extract_metadata",
    # Dispatch
    "PanelConfig",
    "Dispatcher",
    "initialize",
    # Host
    "SnapshotHost",
    "load_snapshot",
    "start",
]
