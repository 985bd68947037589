"""MCP tools for compdoc.

Plain functions behind the server tools, callable without a running server.

Tools:
    - extract_metadata: Metadata message for a document snapshot
    - send_message: Outbound messages produced by one panel message
"""

from .extract import extract_metadata, send_message

__all__ = [
    "extract_metadata",
    "send_message",
]
