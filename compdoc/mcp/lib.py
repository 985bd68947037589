"""Core MCP server logic for compdoc.

Provides factory functions and configuration for creating MCP server instances.
"""

from dataclasses import dataclass
from enum import Enum

from compdoc.config import EnvVar, get_environment


class TransportType(str, Enum):
    """Supported MCP transport types."""

    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"


@dataclass
class ServerConfig:
    """Configuration for MCP server.

    Attributes:
        name: Server display name.
        transport: Transport type for communication.
        host: Bind address for HTTP/SSE transports.
        port: Port for HTTP/SSE transports.
        path: URL path for HTTP transport.
    """

    name: str = "compdoc"
    transport: TransportType = TransportType.STDIO
    host: str = "0.0.0.0"
    port: int = 18080
    path: str = "/mcp"

    @classmethod
    def from_env(
        cls,
        transport: TransportType | None = None,
        host: str | None = None,
        port: int | None = None,
    ) -> "ServerConfig":
        """Create config from environment variables.

        Explicit arguments win over MCP_HOST and MCP_PORT.

        Args:
            transport: Override transport type (default: STDIO).
            host: Override bind address.
            port: Override port.

        Returns:
            ServerConfig with values from environment.
        """
        return cls(
            transport=transport or TransportType.STDIO,
            host=get_environment(EnvVar.MCP_HOST, override=host),
            port=get_environment(EnvVar.MCP_PORT, override=port),
        )

    @property
    def endpoint(self) -> str | None:
        """URL clients connect to, None for STDIO."""
        if self.transport == TransportType.HTTP:
            return f"http://{self.host}:{self.port}{self.path}"
        if self.transport == TransportType.SSE:
            return f"http://{self.host}:{self.port}"
        return None

    def run_kwargs(self) -> dict:
        """Keyword arguments for ``FastMCP.run`` matching the transport."""
        if self.transport == TransportType.STDIO:
            return {}
        kwargs = {"transport": self.transport.value, "host": self.host, "port": self.port}
        if self.transport == TransportType.HTTP:
            kwargs["path"] = self.path
        return kwargs


def get_server_version() -> str:
    """Get server version string."""
    return "0.1.0"


def get_server_capabilities() -> dict:
    """Get server capabilities for MCP protocol.

    Returns:
        Dictionary of capability flags.
    """
    return {
        "tools": True,
        "resources": True,
        "prompts": False,
        "logging": True,
        # No clipboard on the server side
        "clipboard": False,
    }


__all__ = [
    "TransportType",
    "ServerConfig",
    "get_server_version",
    "get_server_capabilities",
]
