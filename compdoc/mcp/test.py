"""Unit tests for MCP server module.

Tests cover:
- Server configuration
- Server instance creation
- Status and schema helpers
- Protocol round trips through an in-memory client
"""

import json

import pytest

from .lib import (
    ServerConfig,
    TransportType,
    get_server_capabilities,
    get_server_version,
)
from .server import (
    _cached_metadata_schema,
    build_config,
    create_server,
    main,
    mcp,
    run_server,
    status,
)

# =============================================================================
# Configuration Tests
# =============================================================================


class TestServerConfig:
    """Tests for ServerConfig dataclass."""

    @pytest.mark.unit
    def test_default_config(self):
        """Default config has expected values."""
        config = ServerConfig()

        assert config.name == "compdoc"
        assert config.transport == TransportType.STDIO
        assert config.host == "0.0.0.0"
        assert config.port == 18080
        assert config.path == "/mcp"

    @pytest.mark.unit
    def test_from_env_default(self, monkeypatch):
        """from_env creates config with default transport."""
        monkeypatch.delenv("MCP_PORT", raising=False)
        config = ServerConfig.from_env()

        assert config.transport == TransportType.STDIO
        assert config.name == "compdoc"
        assert config.port == 18080

    @pytest.mark.unit
    def test_from_env_reads_port(self, monkeypatch):
        """from_env picks up MCP_PORT and transport override."""
        monkeypatch.setenv("MCP_PORT", "9000")
        config = ServerConfig.from_env(transport=TransportType.HTTP)

        assert config.transport == TransportType.HTTP
        assert config.port == 9000

    @pytest.mark.unit
    def test_from_env_overrides_win(self, monkeypatch):
        """Explicit host and port win over MCP_HOST and MCP_PORT."""
        monkeypatch.setenv("MCP_HOST", "10.0.0.1")
        monkeypatch.setenv("MCP_PORT", "9000")
        config = ServerConfig.from_env(host="127.0.0.1", port=8081)

        assert config.host == "127.0.0.1"
        assert config.port == 8081

    @pytest.mark.unit
    def test_endpoint_per_transport(self):
        """HTTP endpoints include the path, SSE has none, STDIO has no URL."""
        http = ServerConfig(transport=TransportType.HTTP, host="localhost", port=8080)
        sse = ServerConfig(transport=TransportType.SSE, host="localhost", port=8080)

        assert http.endpoint == "http://localhost:8080/mcp"
        assert sse.endpoint == "http://localhost:8080"
        assert ServerConfig().endpoint is None

    @pytest.mark.unit
    def test_run_kwargs_per_transport(self):
        """run_kwargs carries host and port only for network transports."""
        http = ServerConfig(transport=TransportType.HTTP, host="localhost", port=8080)
        sse = ServerConfig(transport=TransportType.SSE, host="localhost", port=8080)

        assert ServerConfig().run_kwargs() == {}
        assert http.run_kwargs() == {
            "transport": "http",
            "host": "localhost",
            "port": 8080,
            "path": "/mcp",
        }
        assert sse.run_kwargs() == {"transport": "sse", "host": "localhost", "port": 8080}


class TestRunServer:
    """Tests for run_server and the server CLI wiring."""

    @pytest.fixture
    def run_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(mcp, "run", lambda **kwargs: calls.append(kwargs))
        return calls

    @pytest.mark.unit
    def test_run_server_uses_config(self, run_calls):
        """run_server hands the config's kwargs to FastMCP.run."""
        config = ServerConfig(transport=TransportType.HTTP, host="localhost", port=8080)
        run_server(config)

        assert run_calls == [config.run_kwargs()]

    @pytest.mark.unit
    def test_run_server_defaults_to_stdio(self, run_calls):
        """Without a config the server runs over STDIO."""
        run_server()

        assert run_calls == [{}]

    @pytest.mark.unit
    def test_build_config_from_arguments(self, monkeypatch):
        """CLI arguments become the ServerConfig, unset ones come from env."""
        monkeypatch.setenv("MCP_HOST", "10.0.0.1")
        monkeypatch.delenv("MCP_VERBOSE", raising=False)
        config, verbose = build_config(["--transport", "sse", "--port", "9100"])

        assert config.transport == TransportType.SSE
        assert config.host == "10.0.0.1"
        assert config.port == 9100
        assert verbose is False

    @pytest.mark.unit
    def test_main_runs_configured_server(self, run_calls, monkeypatch):
        """main builds the config and runs the server with it."""
        monkeypatch.delenv("MCP_HOST", raising=False)
        exit_code = main(["--transport", "http", "--port", "9200"])

        assert exit_code == 0
        assert run_calls == [
            {"transport": "http", "host": "0.0.0.0", "port": 9200, "path": "/mcp"}
        ]


class TestTransportType:
    """Tests for TransportType enum."""

    @pytest.mark.unit
    def test_transport_from_string(self):
        """Transport can be created from string."""
        assert TransportType("stdio") == TransportType.STDIO
        assert TransportType("http") == TransportType.HTTP
        assert TransportType("sse") == TransportType.SSE


# =============================================================================
# Server Utility Tests
# =============================================================================


class TestServerUtilities:
    """Tests for server utility functions."""

    @pytest.mark.unit
    def test_get_server_version(self):
        """Server version is a valid semver string."""
        version = get_server_version()

        assert isinstance(version, str)
        assert len(version.split(".")) >= 2

    @pytest.mark.unit
    def test_get_server_capabilities(self):
        """Server capabilities advertise tools and no clipboard."""
        caps = get_server_capabilities()

        assert caps["tools"] is True
        assert caps["resources"] is True
        assert caps["clipboard"] is False

    @pytest.mark.unit
    def test_metadata_schema(self):
        """The schema resource describes the camelCase record."""
        schema = json.loads(_cached_metadata_schema())

        assert "semanticRole" in schema["properties"]
        assert "textStyles" in schema["properties"]


# =============================================================================
# Server Instance Tests
# =============================================================================


class TestServerInstance:
    """Tests for FastMCP server instance."""

    @pytest.mark.unit
    def test_create_server_returns_mcp(self):
        """create_server returns the mcp instance."""
        assert create_server() is mcp

    @pytest.mark.unit
    def test_server_has_name(self):
        """Server has correct name."""
        assert mcp.name == "compdoc"

    @pytest.mark.unit
    def test_main_rejects_unknown_transport(self):
        """Invalid transports are rejected by argument parsing."""
        with pytest.raises(SystemExit):
            main(["--transport", "websocket"])


class TestStatusTool:
    """Tests for status tool logic."""

    @pytest.mark.unit
    def test_status_reports_version(self, monkeypatch):
        """status reports version, capabilities and panel size."""
        monkeypatch.delenv("PANEL_WIDTH", raising=False)
        monkeypatch.delenv("PANEL_HEIGHT", raising=False)

        fn = getattr(status, "fn", status)
        result = fn()

        assert result["status"] == "healthy"
        assert result["version"] == get_server_version()
        assert result["panel"] == {"width": 480, "height": 780}


# =============================================================================
# MCP Protocol Integration Tests (require async)
# =============================================================================


@pytest.mark.mcp
class TestMCPProtocol:
    """Integration tests using MCP client protocol."""

    @pytest.mark.asyncio
    async def test_client_can_list_tools(self, mcp_client):
        """Client can list available tools."""
        tools = await mcp_client.list_tools()

        tool_names = {t.name for t in tools}
        assert tool_names == {"extract_metadata", "send_message", "status"}

    @pytest.mark.asyncio
    async def test_client_can_list_resources(self, mcp_client):
        """The metadata schema resource is published."""
        resources = await mcp_client.list_resources()

        assert "schema://metadata" in {str(r.uri) for r in resources}

    @pytest.mark.asyncio
    async def test_client_can_call_extract(self, mcp_client, button_snapshot):
        """extract_metadata runs through the protocol."""
        result = await mcp_client.call_tool(
            "extract_metadata", {"snapshot": button_snapshot}
        )
        assert result is not None
