"""MCP (Model Context Protocol) server for compdoc.

This module provides the MCP server implementation that exposes component
metadata extraction to LLM clients.

Example:
    # Start server in STDIO mode
    >>> from compdoc.mcp.server import run_server
    >>> run_server()

    # Start server in HTTP mode
    >>> from compdoc.mcp import ServerConfig, TransportType, run_server
    >>> run_server(ServerConfig.from_env(transport=TransportType.HTTP, port=18080))

    # Create server for testing
    >>> from compdoc.mcp.server import create_server
    >>> server = create_server()

Available Tools:
    - extract_metadata: Metadata record of a document snapshot
    - send_message: Deliver a panel message against a snapshot
    - status: Server version and capabilities
"""

from .lib import (
    ServerConfig,
    TransportType,
    get_server_capabilities,
    get_server_version,
)
from .server import create_server, mcp, run_server

__all__ = [
    # Server instance
    "mcp",
    "create_server",
    "run_server",
    # Configuration
    "ServerConfig",
    "TransportType",
    # Utilities
    "get_server_version",
    "get_server_capabilities",
]
