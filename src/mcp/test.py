"""Unit tests for MCP server module.

Tests cover:
- Server configuration
- Server instance creation
- Tool and resource registration
- Tool calls over the MCP client protocol
"""

import json

import pytest
from fastmcp.exceptions import ToolError

from .lib import (
    ServerConfig,
    TransportType,
    get_server_capabilities,
    get_server_version,
)
from .server import create_server, main, mcp

EXPECTED_TOOLS = {
    "generate_framelayout",
    "convert_autolayout",
    "validate_framelayout",
    "generate_migration_guide",
    "status",
    "help",
}

# =============================================================================
# Configuration Tests
# =============================================================================


class TestServerConfig:
    """Tests for ServerConfig resolution and run arguments."""

    @pytest.mark.unit
    def test_default_config(self):
        """Default config is stdio with no run arguments."""
        config = ServerConfig()

        assert config.transport == TransportType.STDIO
        assert config.is_network is False
        assert config.url is None
        assert config.run_kwargs() == {}

    @pytest.mark.unit
    def test_from_env_default(self, monkeypatch):
        """from_env falls back to the configured port."""
        monkeypatch.delenv("MCP_PORT", raising=False)
        config = ServerConfig.from_env()

        assert config.transport == TransportType.STDIO
        assert config.port == 18080

    @pytest.mark.unit
    def test_from_env_reads_environment(self, monkeypatch):
        """MCP_HOST and MCP_PORT fill unset arguments."""
        monkeypatch.setenv("MCP_HOST", "127.0.0.1")
        monkeypatch.setenv("MCP_PORT", "9123")
        config = ServerConfig.from_env("http")

        assert config.transport == TransportType.HTTP
        assert config.host == "127.0.0.1"
        assert config.port == 9123

    @pytest.mark.unit
    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("MCP_PORT", "9123")
        config = ServerConfig.from_env(TransportType.SSE, host="localhost", port=7000)

        assert (config.host, config.port) == ("localhost", 7000)

    @pytest.mark.unit
    def test_unknown_transport(self):
        with pytest.raises(ValueError):
            ServerConfig.from_env("websocket")

    @pytest.mark.unit
    def test_http_run_kwargs(self):
        """HTTP passes the endpoint path to FastMCP.run."""
        config = ServerConfig(transport=TransportType.HTTP, host="h", port=1)

        assert config.run_kwargs() == {"transport": "http", "host": "h", "port": 1, "path": "/mcp"}
        assert config.url == "http://h:1/mcp"

    @pytest.mark.unit
    def test_sse_run_kwargs(self):
        config = ServerConfig(transport=TransportType.SSE, host="h", port=1)
        assert config.run_kwargs() == {"transport": "sse", "host": "h", "port": 1}


class TestTransportType:
    """Tests for TransportType enum."""

    @pytest.mark.unit
    def test_transport_from_string(self):
        """Transport can be created from string."""
        assert TransportType("stdio") == TransportType.STDIO
        assert TransportType("http") == TransportType.HTTP
        assert TransportType("sse") == TransportType.SSE


class TestServerUtilities:
    """Tests for server utility functions."""

    @pytest.mark.unit
    def test_get_server_version(self):
        """Server version is a valid semver string."""
        assert len(get_server_version().split(".")) >= 2

    @pytest.mark.unit
    def test_get_server_capabilities(self):
        """Server capabilities advertise tools and resources."""
        caps = get_server_capabilities()

        assert caps["tools"] is True
        assert caps["resources"] is True


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
        assert mcp.name == "framelayout-mcp"

    @pytest.mark.unit
    def test_main_rejects_unknown_transport(self):
        """argparse rejects transports outside the enum."""
        with pytest.raises(SystemExit):
            main(["--transport", "websocket"])

    @pytest.mark.unit
    def test_main_builds_config_from_env(self, monkeypatch):
        """main resolves its flags into one ServerConfig."""
        from . import server

        captured = []
        monkeypatch.setenv("MCP_PORT", "9500")
        monkeypatch.setattr(server, "run_server", captured.append)

        assert main(["--transport", "http", "--host", "127.0.0.1"]) == 0
        (config,) = captured
        assert config == ServerConfig(transport=TransportType.HTTP, host="127.0.0.1", port=9500)


# =============================================================================
# MCP Protocol Integration Tests (require async)
# =============================================================================


@pytest.mark.mcp
class TestMCPProtocol:
    """Integration tests using MCP client protocol."""

    @pytest.mark.asyncio
    async def test_only_expected_tools_exposed(self, mcp_client):
        """Exactly the migration workflow tools are registered."""
        tools = await mcp_client.list_tools()
        assert {t.name for t in tools} == EXPECTED_TOOLS

    @pytest.mark.asyncio
    async def test_generate_framelayout(self, mcp_client):
        """Generation returns Swift code and metadata."""
        result = await mcp_client.call_tool(
            "generate_framelayout",
            {
                "layout_type": "VStackLayout",
                "views": [{"name": "title", "type": "UILabel", "text": "Hi"}],
                "configuration": {"spacing": 8},
            },
        )
        data = result.structured_content

        assert data["language"] == "swift"
        assert data["framework"] == "FrameLayoutKit"
        assert "stackLayout.spacing = 8" in data["code"]

    @pytest.mark.asyncio
    async def test_generate_wrong_arity_is_tool_error(self, mcp_client):
        """DoubleFrameLayout with one view surfaces as a tool error."""
        with pytest.raises(ToolError):
            await mcp_client.call_tool(
                "generate_framelayout",
                {"layout_type": "DoubleFrameLayout", "views": [{"name": "only"}]},
            )

    @pytest.mark.asyncio
    async def test_convert_autolayout(self, mcp_client):
        """Conversion accepts camelCase options."""
        result = await mcp_client.call_tool(
            "convert_autolayout",
            {
                "swift_code": "let s = UIStackView()\ns.addArrangedSubview(a)\n",
                "options": {"useOperatorSyntax": False},
            },
        )
        data = result.structured_content

        assert "s.add(a)" in data["code"]
        assert data["stats"]["stackViewsConverted"] == 1

    @pytest.mark.asyncio
    async def test_validate_framelayout(self, mcp_client):
        """Validation reports doubled operators."""
        result = await mcp_client.call_tool(
            "validate_framelayout", {"swift_code": "stack + + view1"}
        )
        data = result.structured_content

        assert data["is_valid"] is False
        assert data["report"].startswith("# FrameLayoutKit Validation Report")

    @pytest.mark.asyncio
    async def test_migration_guide(self, mcp_client, swift_project):
        """Migration guide scans a project directory."""
        result = await mcp_client.call_tool(
            "generate_migration_guide",
            {"project_path": str(swift_project), "output_format": "json"},
        )
        data = result.structured_content

        assert data["file_count"] == 1
        assert json.loads(data["rendered"])["fileCount"] == 1

    @pytest.mark.asyncio
    async def test_help_topics(self, mcp_client):
        """help lists topics and renders registry-backed content."""
        result = await mcp_client.call_tool("help", {"topic": "layouts"})
        assert "DoubleFrameLayout" in result.structured_content["content"]

    @pytest.mark.asyncio
    async def test_schema_resources(self, mcp_client):
        """Schema resources return JSON documents."""
        contents = await mcp_client.read_resource("schema://view-spec")
        schema = json.loads(contents[0].text)

        assert "name" in schema["properties"]

        resources = await mcp_client.list_resources()
        uris = {str(r.uri) for r in resources}
        assert {"schema://view-spec", "schema://layout-config", "schema://vocabulary"} <= uris
