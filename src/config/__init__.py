"""Centralized configuration management for framelayout-mcp.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> port = get_environment(EnvVar.MCP_PORT)  # Returns int: 18080
    >>>
    >>> # Override at runtime
    >>> port = get_environment(EnvVar.MCP_PORT, override=9000)
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("migration"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    service: MCP server bind address and port
    logging: Log verbosity
    migration: Defaults for conversion strategy, check level and guide format
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_check_level,
    get_environment,
    get_environment_info,
    get_guide_format,
    get_migration_strategy,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_migration_strategy",
    "get_check_level",
    "get_guide_format",
    # Introspection
    "list_environment_variables",
]
