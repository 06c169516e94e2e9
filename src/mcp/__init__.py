"""MCP (Model Context Protocol) server for framelayout-mcp.

Exposes FrameLayoutKit code generation, Auto Layout conversion, DSL
validation and migration planning to LLM clients like Claude Desktop.

Example:
    # Start server in STDIO mode (for Claude Desktop)
    >>> from src.mcp.server import run_server
    >>> run_server()

    # Start server in HTTP mode
    >>> from src.mcp import ServerConfig, run_server
    >>> run_server(ServerConfig.from_env("http", port=18080))

    # Create server for testing
    >>> from src.mcp.server import create_server
    >>> server = create_server()

Available Tools:
    - generate_framelayout: Generate FrameLayoutKit Swift code
    - convert_autolayout: Convert Auto Layout code to FrameLayoutKit
    - validate_framelayout: Validate FrameLayoutKit code
    - generate_migration_guide: Analyze a project and render a migration guide
    - status: Server metadata and configured defaults
    - help: Usage guidance
"""

from .lib import (
    SERVER_NAME,
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
    "SERVER_NAME",
    "ServerConfig",
    "TransportType",
    # Utilities
    "get_server_version",
    "get_server_capabilities",
]
