"""Server settings and metadata for framelayout-mcp.

`ServerConfig` is the one place where transport, bind address and port are
resolved; both CLI entry points build one and hand it to `run_server`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.config import EnvVar, get_environment

SERVER_NAME = "framelayout-mcp"
SERVER_VERSION = "0.1.0"
HTTP_PATH = "/mcp"


class TransportType(str, Enum):
    """Supported MCP transport types."""

    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"


@dataclass(frozen=True)
class ServerConfig:
    """How the server is exposed.

    Attributes:
        transport: stdio for desktop clients, http or sse for network use.
        host: Bind address, ignored for stdio.
        port: Port, ignored for stdio.
        path: Endpoint path for the http transport.
    """

    transport: TransportType = TransportType.STDIO
    host: str = "0.0.0.0"
    port: int = 18080
    path: str = HTTP_PATH

    @classmethod
    def from_env(
        cls,
        transport: TransportType | str = TransportType.STDIO,
        host: str | None = None,
        port: int | None = None,
    ) -> "ServerConfig":
        """Resolve settings, explicit arguments first, then MCP_HOST/MCP_PORT.

        Raises:
            ValueError: If `transport` is not a known transport.
        """
        return cls(
            transport=TransportType(transport),
            host=get_environment(EnvVar.MCP_HOST, host),
            port=get_environment(EnvVar.MCP_PORT, port),
        )

    @property
    def is_network(self) -> bool:
        return self.transport != TransportType.STDIO

    @property
    def url(self) -> str | None:
        """Client-facing address, or None for stdio."""
        if self.transport == TransportType.HTTP:
            return f"http://{self.host}:{self.port}{self.path}"
        if self.transport == TransportType.SSE:
            return f"http://{self.host}:{self.port}"
        return None

    def run_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for `FastMCP.run`."""
        if not self.is_network:
            return {}
        kwargs: dict[str, Any] = {
            "transport": self.transport.value,
            "host": self.host,
            "port": self.port,
        }
        if self.transport == TransportType.HTTP:
            kwargs["path"] = self.path
        return kwargs


def get_server_version() -> str:
    """Get server version string."""
    return SERVER_VERSION


def get_server_capabilities() -> dict[str, bool]:
    """Capability flags advertised by the status tool and `mcp info`."""
    return {
        "tools": True,
        "resources": True,
        "prompts": False,
        "logging": True,
    }


__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "TransportType",
    "ServerConfig",
    "get_server_version",
    "get_server_capabilities",
]
