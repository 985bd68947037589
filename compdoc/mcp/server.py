"""FastMCP server instance for compdoc.

This module provides the MCP server that exposes component metadata
extraction to LLM clients. Clients send a document snapshot, the JSON export
of a design document's selection and style table, and get back the same
messages the documentation panel would receive.

Usage:
    # STDIO mode
    python -m compdoc.mcp.server

    # HTTP mode (for web deployment)
    python -m compdoc.mcp.server --transport http --port 18080

    # Via CLI
    python . mcp run
    python . mcp serve --port 18080
"""

import argparse
import json
import logging
import sys
from functools import lru_cache
from typing import Any

from fastmcp import FastMCP

from compdoc.config import EnvVar, get_environment
from compdoc.core.log import setup_logging

from .lib import (
    ServerConfig,
    TransportType,
    get_server_capabilities,
    get_server_version,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Server Instructions (LLM Guidance)
# =============================================================================

SERVER_INSTRUCTIONS = """\
## compdoc MCP Server

Extracts documentation metadata from design components: variants,
auto-layout, fills, typography and structure.

### Quick Start
1. `status()` -> check readiness
2. `extract_metadata(snapshot)` -> metadata message for the selection
3. `send_message(snapshot, {"type": "request-metadata"})` -> panel round trip

### Snapshot Shape
```
{
  "selection": [{"type": "COMPONENT_SET", "name": "Button/Primary", ...}],
  "styles": {"S:1": {"name": "Color/Brand/Primary"}}
}
```
Node fields use the design tool's camelCase names (layoutMode, fillStyleId,
defaultVariantId, ...). A property value of "__mixed__" marks a mixed value.

### Notes
- Only COMPONENT and COMPONENT_SET selections can be documented.
- Failures come back as `{"payload": {"error": "..."}}`, not as tool errors.
- The server has no clipboard; copy-guide always reports a failure.
- Read `schema://metadata` for the record schema.
"""

# =============================================================================
# Server Instance
# =============================================================================

mcp = FastMCP(
    name="compdoc",
    instructions=SERVER_INSTRUCTIONS,
)


# =============================================================================
# Extraction Tools
# =============================================================================


@mcp.tool
def extract_metadata(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Extract the documentation record of a snapshot's selection.

    Args:
        snapshot: Document snapshot with "selection" (list of nodes) and
            "styles" (style id -> {"name": ...}).

    Returns:
        The panel message ``{"type": "metadata", "payload": ...}`` where the
        payload is either ``{"data": <record>}`` or ``{"error": <message>}``.

    Example:
        >>> extract_metadata({"selection": [], "styles": {}})
        {'type': 'metadata', 'payload': {'error': '컴포넌트를 선택해 주세요.'}}
    """
    from .tools.extract import extract_metadata as _extract

    return _extract(snapshot=snapshot)


@mcp.tool
def send_message(
    snapshot: dict[str, Any],
    message: dict[str, Any],
) -> list[dict[str, Any]]:
    """Deliver one panel message against a snapshot.

    Args:
        snapshot: Document snapshot, as for extract_metadata.
        message: Panel message. Supported types:
            - {"type": "request-metadata"}
            - {"type": "copy-guide", "payload": "<text>"}

    Returns:
        Outbound messages in order; empty when the message was ignored.
    """
    from .tools.extract import send_message as _send

    return _send(snapshot=snapshot, message=message)


# =============================================================================
# Status Tools
# =============================================================================


@mcp.tool
def status() -> dict[str, Any]:
    """Report server version and capabilities.

    Returns:
        Dictionary with:
        - status: Always "healthy" (no external dependencies)
        - version: Server version
        - capabilities: Capability flags
        - panel: Panel size reported to hosts
    """
    return {
        "status": "healthy",
        "version": get_server_version(),
        "capabilities": get_server_capabilities(),
        "panel": {
            "width": get_environment(EnvVar.PANEL_WIDTH),
            "height": get_environment(EnvVar.PANEL_HEIGHT),
        },
    }


# =============================================================================
# Resources (Schema Reference)
# =============================================================================


@lru_cache(maxsize=1)
def _cached_metadata_schema() -> str:
    """Cached metadata record schema."""
    from compdoc.schema import export_json_schema

    return json.dumps(export_json_schema(), indent=2, ensure_ascii=False)


@mcp.resource("schema://metadata")
def get_metadata_schema() -> str:
    """Get the ComponentMetadata JSON schema.

    Returns the schema of the record carried by metadata messages.
    """
    return _cached_metadata_schema()


# =============================================================================
# Server Factory & Runner
# =============================================================================


def create_server() -> FastMCP:
    """Create and configure the MCP server instance.

    Returns:
        Configured FastMCP server instance.
    """
    return mcp


def run_server(config: ServerConfig | None = None) -> None:
    """Run the MCP server with the configured transport.

    Args:
        config: Server settings (defaults from environment, STDIO transport).
    """
    config = config or ServerConfig.from_env()

    logger.info(f"Starting {config.name} server v{get_server_version()}")
    logger.info(f"Transport: {config.transport.value}")
    if config.endpoint:
        logger.info(f"Listening at {config.endpoint}")

    mcp.run(**config.run_kwargs())


# =============================================================================
# CLI Entry Point
# =============================================================================


def build_config(argv: list[str] | None = None) -> tuple[ServerConfig, bool]:
    """Parse server arguments into a ServerConfig.

    Host and port fall back to MCP_HOST and MCP_PORT when not given.

    Args:
        argv: Command line arguments (uses sys.argv if None).

    Returns:
        Tuple of the server config and the verbose flag.
    """
    parser = argparse.ArgumentParser(
        prog="compdoc-mcp",
        description="MCP server for component documentation metadata",
    )
    parser.add_argument(
        "--transport",
        "-t",
        type=str,
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport type (default: stdio)",
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Bind address for HTTP/SSE (default: MCP_HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="Port for HTTP/SSE (default: MCP_PORT or 18080)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    config = ServerConfig.from_env(
        transport=TransportType(args.transport),
        host=args.host,
        port=args.port,
    )
    return config, args.verbose or get_environment(EnvVar.MCP_VERBOSE)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for MCP server.

    Args:
        argv: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 for success).
    """
    config, verbose = build_config(argv)
    setup_logging(verbose=verbose)

    try:
        run_server(config)
        return 0
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.error(f"Server error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
