"""Pytest fixtures for MCP server tests.

This module provides server and client fixtures for protocol testing.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from fastmcp import Client, FastMCP

# =============================================================================
# Server Fixtures
# =============================================================================


@pytest.fixture
def mcp_server() -> FastMCP:
    """Create MCP server instance for testing.

    Returns:
        Configured FastMCP server instance.
    """
    from .server import create_server

    return create_server()


@pytest.fixture
async def mcp_client(mcp_server: FastMCP) -> AsyncGenerator[Client, None]:
    """Create connected MCP client for testing.

    Args:
        mcp_server: The MCP server instance.

    Yields:
        Connected Client instance for testing.
    """
    async with Client(mcp_server) as client:
        yield client


@pytest.fixture
def swift_project(tmp_path):
    """A tiny Swift project with Auto Layout code."""
    (tmp_path / "HomeViewController.swift").write_text(
        "let stack = UIStackView()\n"
        "stack.addArrangedSubview(title)\n"
        "NSLayoutConstraint.activate([\n"
        "    title.centerXAnchor.constraint(equalTo: view.centerXAnchor)\n"
        "])\n"
    )
    return tmp_path
