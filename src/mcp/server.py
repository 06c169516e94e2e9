"""FastMCP server instance for framelayout-mcp.

This module provides the MCP server that exposes FrameLayoutKit migration
tools to LLM clients. The API follows the migration workflow:

    1. generate_migration_guide: Size up the project
    2. convert_autolayout: Rewrite Auto Layout code
    3. generate_framelayout: Write new layouts directly
    4. validate_framelayout: Check the result

Usage:
    # STDIO mode (for Claude Desktop)
    python -m src.mcp.server

    # HTTP mode (for web deployment)
    python -m src.mcp.server --transport http --port 18080

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

from src.core.log import setup_logging

from .lib import (
    SERVER_NAME,
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
## FrameLayoutKit MCP Server

Helps migrate UIKit Auto Layout code to FrameLayoutKit and write new
FrameLayoutKit layouts.

### Quick Start
1. `generate_migration_guide(project_path)` → scope and phased plan
2. `convert_autolayout(swift_code)` → converted code plus review warnings
3. `validate_framelayout(code)` → check converted or hand-written code

### Writing New Layouts
- `generate_framelayout(layout_type, views, configuration)`
- Layout types: FrameLayout, VStackLayout, HStackLayout, ZStackLayout,
  DoubleFrameLayout (exactly 2 views), GridFrameLayout, ScrollStackView,
  FlowFrameLayout

### Conversion Strategy
- conservative (default): constraint blocks stay in place under a
  `// TODO: Convert to FrameLayoutKit` marker
- aggressive: constraint blocks are replaced by the suggested layout

Constraint suggestions are best-effort pattern matches. Always review them.

### Getting Help
- `help()` - List topics
- `help('layouts')` - Layout types and their options
- `help('conversion')` - What the converter rewrites
"""

# =============================================================================
# Server Instance
# =============================================================================

mcp = FastMCP(
    name=SERVER_NAME,
    instructions=SERVER_INSTRUCTIONS,
)


# =============================================================================
# Core Tools (Migration Workflow)
# =============================================================================


@mcp.tool
def generate_framelayout(
    layout_type: str,
    views: list[dict[str, Any]],
    configuration: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Generate FrameLayoutKit Swift code from a layout description.

    Args:
        layout_type: FrameLayout, VStackLayout, HStackLayout, ZStackLayout,
            DoubleFrameLayout, GridFrameLayout, ScrollStackView or
            FlowFrameLayout.
        views: Views to create, each {"name", "type", "text"?, "image"?,
            "properties"?}. Example:
            [{"name": "titleLabel", "type": "UILabel", "text": "Welcome"}]
        configuration: Optional {"spacing", "padding", "alignment",
            "distribution", "axis", "rows", "columns", "interItemSpacing",
            "lineSpacing", "isOverlapped"}. Padding is a number or
            {"top", "left", "bottom", "right"}.

    Returns:
        Dictionary with code, language, framework, layout_type, line_count.
    """
    from .tools.generate import generate_framelayout as _generate

    return _generate(layout_type=layout_type, views=views, configuration=configuration)


@mcp.tool
def convert_autolayout(
    swift_code: str,
    options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Convert Auto Layout Swift code to FrameLayoutKit.

    Args:
        swift_code: Swift source using NSLayoutConstraint, layout anchors
            or UIStackView.
        options: Optional {"migrationStrategy": "conservative" | "aggressive",
            "preserveComments", "generateHelperMethods", "useOperatorSyntax"}.

    Returns:
        Dictionary with code, warnings, suggestions and stats.
    """
    from .tools.convert import convert_autolayout as _convert

    return _convert(swift_code=swift_code, options=options)


@mcp.tool
def validate_framelayout(
    swift_code: str,
    check_level: str | None = None,
) -> dict[str, Any]:
    """Validate FrameLayoutKit Swift code.

    Use this on converted code before handing it back to the user.

    Args:
        swift_code: Swift source to check.
        check_level: "syntax", "semantic" or "full" (default).

    Returns:
        Dictionary with is_valid, errors, warnings, suggestions and a
        markdown report.
    """
    from .tools.validate import validate_framelayout as _validate

    return _validate(swift_code=swift_code, check_level=check_level)


@mcp.tool
def generate_migration_guide(
    project_path: str | None = None,
    swift_files: list[str] | None = None,
    output_format: str | None = None,
) -> dict[str, Any]:
    """Analyze Auto Layout usage and produce a migration guide.

    Args:
        project_path: Project root to scan recursively for *.swift files.
        swift_files: Explicit file list (used when project_path is omitted).
        output_format: "markdown" (default), "html" or "json".

    Returns:
        Dictionary with complexity, estimated_effort, file_count,
        recommendations, output_format and the rendered guide.
    """
    from .tools.migrate import generate_migration_guide as _guide

    return _guide(
        project_path=project_path,
        swift_files=swift_files,
        output_format=output_format,
    )


# =============================================================================
# Status Tools
# =============================================================================


@mcp.tool
def status() -> dict[str, Any]:
    """Report server version, capabilities and configured defaults.

    Returns:
        Dictionary with name, version, capabilities and defaults
        (migration_strategy, check_level, guide_format).
    """
    from src.config import get_check_level, get_guide_format, get_migration_strategy

    return {
        "name": SERVER_NAME,
        "version": get_server_version(),
        "capabilities": get_server_capabilities(),
        "defaults": {
            "migration_strategy": get_migration_strategy(),
            "check_level": get_check_level(),
            "guide_format": get_guide_format(),
        },
    }


def _layouts_help() -> str:
    """Generate layout help content from the layout registry."""
    from src.schema import export_vocabulary

    vocabulary = export_vocabulary()
    lines = ["## Layout Types", ""]
    for layout in vocabulary["layouts"]:
        options = ", ".join(layout["facets"]) or "none"
        line = f"- **{layout['kind']}**: options {options}"
        if layout["exact_views"] is not None:
            line += f"; exactly {layout['exact_views']} views"
        lines.append(line)

    lines += ["", "## View Types", ""]
    for view in vocabulary["views"]:
        lines.append(f"- **{view['kind']}**: {view['description']}")

    lines += ["", f"**Distributions**: {', '.join(vocabulary['distributions'])}"]
    return "\n".join(lines)


def _conversion_help() -> str:
    """Generate conversion help content from the rule registry."""
    from src.rules import ACTIVATION_HEURISTICS, ANCHOR_RULES, CONTAINER_RULES

    lines = ["## Conversion Rules", "", "Passes run in order: activation, containers, anchors.", ""]
    for title, table in (
        ("Constraint activation (best-effort)", ACTIVATION_HEURISTICS),
        ("Containers", CONTAINER_RULES),
        ("Anchors (suggestions only)", ANCHOR_RULES),
    ):
        lines.append(f"### {title}")
        for rule in table:
            lines.append(f"- `{rule.rule_id}` ({rule.classification.value})")
        lines.append("")
    return "\n".join(lines)


@mcp.tool
def help(topic: str | None = None) -> dict[str, Any]:
    """Get detailed help on using this server.

    Call without arguments to see available topics.

    Args:
        topic: Help topic (optional). One of:
            - "workflow": Step-by-step migration guide
            - "layouts": Layout and view types with their options
            - "conversion": What the converter rewrites and flags
            - "validation": What the validator checks

    Returns:
        Dictionary with help content for the requested topic,
        or list of available topics if none specified.
    """
    topics = {
        "workflow": {
            "title": "Migration Workflow",
            "content": """
## Typical Workflow

1. **Scope the Work**
   Call `generate_migration_guide(project_path=...)` to see how much
   Auto Layout code exists and which files to start with.

2. **Convert a File**
   Call `convert_autolayout(swift_code)`. Stack views are rewritten
   directly; constraint blocks are marked for review.

3. **Review Warnings**
   Every warning names what was changed or what still needs a human.

4. **Validate**
   Call `validate_framelayout(code)`. Errors mean leftover Auto Layout
   or malformed operators.

5. **Write New Layouts**
   Use `generate_framelayout(layout_type, views, configuration)` for
   layouts the converter cannot infer.
""",
        },
        "layouts": {
            "title": "Layout Types",
            "content": _layouts_help(),
        },
        "conversion": {
            "title": "Conversion Rules",
            "content": _conversion_help(),
        },
        "validation": {
            "title": "Validation Checks",
            "content": """
## Check Levels

- **syntax**: leftover Auto Layout (NSLayoutConstraint, anchors,
  autoresizing masks), doubled `+`, repeated `<+`/`+>` on one layout,
  unknown builder methods after `)`.
- **semantic**: empty grid views, DoubleFrameLayout with more than two
  views, `.justified` without `isJustified = true`, tall horizontal
  ScrollStackView.
- **full**: both.

Semantic checks are pattern-based and may miss or over-report.
""",
        },
    }

    if topic is None:
        return {
            "available_topics": list(topics.keys()),
            "usage": "Call help(topic='workflow') for detailed guidance",
        }

    if topic not in topics:
        return {
            "error": f"Unknown topic: {topic}",
            "available_topics": list(topics.keys()),
        }

    return topics[topic]


# =============================================================================
# Resources (Schema Reference)
# =============================================================================


@lru_cache(maxsize=1)
def _cached_view_spec_schema() -> str:
    """Cached view spec schema."""
    from src.model import export_json_schema_str

    return export_json_schema_str("view_spec")


@lru_cache(maxsize=1)
def _cached_layout_config_schema() -> str:
    """Cached layout config schema."""
    from src.model import export_json_schema_str

    return export_json_schema_str("layout_config")


@lru_cache(maxsize=1)
def _cached_vocabulary() -> str:
    """Cached view and layout vocabulary."""
    from src.schema import export_vocabulary

    return json.dumps(export_vocabulary(), indent=2)


@mcp.resource("schema://view-spec")
def get_view_spec_schema() -> str:
    """Get the ViewSpec JSON schema.

    Describes the view objects accepted by generate_framelayout.
    """
    return _cached_view_spec_schema()


@mcp.resource("schema://layout-config")
def get_layout_config_schema() -> str:
    """Get the LayoutConfig JSON schema."""
    return _cached_layout_config_schema()


@mcp.resource("schema://vocabulary")
def get_vocabulary() -> str:
    """Get the view and layout type catalog."""
    return _cached_vocabulary()


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
    """Run the MCP server.

    Args:
        config: Transport and bind settings. None means
            `ServerConfig.from_env()` (stdio).
    """
    config = config or ServerConfig.from_env()
    logger.info(f"Starting {SERVER_NAME} server v{get_server_version()}")
    logger.info(f"Transport: {config.transport.value}")

    if config.is_network:
        logger.info(f"Running in {config.transport.value.upper()} mode at {config.url}")
    else:
        logger.info("Running in STDIO mode (for Claude Desktop)")
    mcp.run(**config.run_kwargs())


# =============================================================================
# CLI Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for MCP server.

    Args:
        argv: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server for migrating Auto Layout code to FrameLayoutKit",
    )
    parser.add_argument(
        "--transport",
        "-t",
        type=str,
        choices=[t.value for t in TransportType],
        default=TransportType.STDIO.value,
        help="Transport type (default: stdio)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Bind address for HTTP/SSE (default: MCP_HOST)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Port for HTTP/SSE (default: MCP_PORT)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = ServerConfig.from_env(args.transport, host=args.host, port=args.port)
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
