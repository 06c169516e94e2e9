"""CLI entry point for framelayout-mcp.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the MCP server or runs the migration tools
directly against local files.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config import EnvVar, get_environment
from src.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _write_output(text: str, output: Path | None) -> None:
    """Write text to a file, or to stdout when no path is given."""
    if output is None:
        print(text)
        return
    output.write_text(text, encoding="utf-8")
    logger.info(f"Wrote {output}")


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    from src.mcp.tools import generate_framelayout

    try:
        payload = json.loads(args.input.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read layout description: {e}")
        return 1

    if not isinstance(payload, dict):
        logger.error("Layout description must be a JSON object")
        return 1

    layout_type = args.layout_type or payload.get("layoutType") or payload.get("layout_type")
    if not layout_type:
        logger.error("No layout type given (use --layout-type or a layoutType key)")
        return 1

    try:
        result = generate_framelayout(
            layout_type,
            payload.get("views", []),
            payload.get("configuration"),
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    _write_output(result["code"], args.output)
    return 0


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate FrameLayoutKit code from a JSON layout description",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="JSON file with layoutType, views and configuration",
    )
    parser.add_argument(
        "--layout-type",
        "-t",
        type=str,
        default=None,
        help="Layout type (overrides the file's layoutType)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_generate(args)


# =============================================================================
# Convert Command
# =============================================================================


def handle_convert_command(argv: list[str]) -> int:
    """Handle Auto Layout to FrameLayoutKit conversion."""
    from src.mcp.tools import convert_autolayout

    parser = argparse.ArgumentParser(
        prog="python . convert",
        description="Convert Auto Layout Swift code to FrameLayoutKit",
    )
    parser.add_argument("file", type=Path, help="Swift source file")
    parser.add_argument(
        "--strategy",
        "-s",
        type=str,
        default=None,
        choices=["conservative", "aggressive"],
        help="Migration strategy (default: MIGRATION_STRATEGY)",
    )
    parser.add_argument(
        "--strip-comments",
        action="store_true",
        help="Drop // comment lines",
    )
    parser.add_argument(
        "--helpers",
        action="store_true",
        help="Append a layoutSubviews helper",
    )
    parser.add_argument(
        "--method-syntax",
        action="store_true",
        help="Attach views with .add(...) instead of +",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)

    try:
        source = args.file.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1

    options = {
        "preserve_comments": not args.strip_comments,
        "generate_helper_methods": args.helpers,
        "use_operator_syntax": not args.method_syntax,
    }
    if args.strategy:
        options["migration_strategy"] = args.strategy

    result = convert_autolayout(source, options)

    for warning in result["warnings"]:
        logger.warning(warning)
    for suggestion in result["suggestions"]:
        logger.info(f"{suggestion['pattern']}: {suggestion['suggestion']}")

    stats = result["stats"]
    logger.info(
        f"Converted {stats['constraintsConverted']} constraint block(s), "
        f"{stats['stackViewsConverted']} stack view(s), "
        f"{stats['totalChanges']} change(s) total"
    )

    _write_output(result["code"], args.output)
    return 0


# =============================================================================
# Validate Command
# =============================================================================


def handle_validate_command(argv: list[str]) -> int:
    """Handle FrameLayoutKit validation."""
    from src.mcp.tools import validate_framelayout

    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Validate FrameLayoutKit Swift code",
    )
    parser.add_argument("file", type=Path, help="Swift source file")
    parser.add_argument(
        "--level",
        "-l",
        type=str,
        default=None,
        choices=["syntax", "semantic", "full"],
        help="Check level (default: VALIDATION_CHECK_LEVEL)",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)

    try:
        source = args.file.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1

    result = validate_framelayout(source, args.level)
    print(result["report"])
    return 0 if result["is_valid"] else 1


# =============================================================================
# Migrate Command
# =============================================================================


def handle_migrate_command(argv: list[str]) -> int:
    """Handle migration scope analysis."""
    from src.mcp.tools import generate_migration_guide

    parser = argparse.ArgumentParser(
        prog="python . migrate",
        description="Analyze Auto Layout usage and render a migration guide",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--project",
        "-p",
        type=Path,
        default=None,
        help="Project root searched for *.swift (default: PROJECT_ROOT)",
    )
    source.add_argument(
        "--files",
        "-f",
        nargs="+",
        default=None,
        help="Explicit Swift file paths",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=None,
        choices=["markdown", "html", "json"],
        help="Guide format (default: GUIDE_OUTPUT_FORMAT)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )

    args = parser.parse_args(argv)

    if args.project is None and not args.files and get_environment(EnvVar.PROJECT_ROOT) is None:
        logger.error("No project given (use --project, --files or PROJECT_ROOT)")
        return 1

    try:
        result = generate_migration_guide(
            project_path=str(args.project) if args.project else None,
            swift_files=args.files,
            output_format=args.format,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    logger.info(
        f"Complexity: {result['complexity']} (estimated effort {result['estimated_effort']})"
    )
    _write_output(result["rendered"], args.output)
    return 0


# =============================================================================
# MCP Command
# =============================================================================


def handle_mcp_command(argv: list[str]) -> int:
    """Handle MCP server commands.

    Usage:
        python . mcp run              # Start in STDIO mode (for Claude Desktop)
        python . mcp serve            # Start in HTTP mode
        python . mcp serve --port 8080
        python . mcp info             # Show server info
    """
    if not argv:
        print("MCP Server Commands")
        print("\nUsage: python . mcp {command} [options]")
        print("\nCommands:")
        print("  run                 Start server in STDIO mode (for Claude Desktop)")
        print("  serve               Start server in HTTP mode")
        print("  info                Show server information")
        print("\nOptions for 'serve':")
        print("  --host HOST         Bind address (default: MCP_HOST)")
        print("  --port PORT         Port number (default: MCP_PORT)")
        print("  --transport TYPE    Transport: http or sse (default: http)")
        print("\nClaude Desktop Configuration:")
        print("  Add to claude_desktop_config.json:")
        print("  {")
        print('    "mcpServers": {')
        print('      "framelayout": {')
        print('        "command": "python",')
        print('        "args": [".", "mcp", "run"],')
        print('        "cwd": "/path/to/framelayout-mcp"')
        print("      }")
        print("    }")
        print("  }")
        return 1

    subcommand = argv[0]
    subargs = argv[1:]

    if subcommand == "run":
        from src.mcp import ServerConfig, TransportType, run_server

        logger.info("Starting MCP server in STDIO mode...")
        run_server(ServerConfig.from_env(TransportType.STDIO))
        return 0

    elif subcommand == "serve":
        from src.mcp import ServerConfig, TransportType, run_server

        parser = argparse.ArgumentParser(prog="python . mcp serve")
        parser.add_argument("--host", type=str, default=None)
        parser.add_argument("--port", type=int, default=None)
        parser.add_argument(
            "--transport",
            type=str,
            default=TransportType.HTTP.value,
            choices=[TransportType.HTTP.value, TransportType.SSE.value],
        )
        args = parser.parse_args(subargs)
        config = ServerConfig.from_env(args.transport, host=args.host, port=args.port)

        logger.info(f"Starting MCP server in {config.transport.value} mode...")
        logger.info(f"Listening on {config.host}:{config.port}")
        run_server(config)
        return 0

    elif subcommand == "info":
        from src.mcp import SERVER_NAME, get_server_capabilities, get_server_version

        print(f"{SERVER_NAME} server")
        print("=" * 40)
        print(f"Version: {get_server_version()}")
        print("\nCapabilities:")
        for cap, enabled in get_server_capabilities().items():
            status = "enabled" if enabled else "disabled"
            print(f"  {cap}: {status}")
        print("\nAvailable Tools:")
        print("  - generate_framelayout: Layout description to Swift code")
        print("  - convert_autolayout: Auto Layout to FrameLayoutKit")
        print("  - validate_framelayout: Check FrameLayoutKit code")
        print("  - generate_migration_guide: Project migration plan")
        print("  - status: Server metadata and defaults")
        print("  - help: Usage guidance")
        return 0

    else:
        logger.error(f"Unknown mcp command: {subcommand}")
        return handle_mcp_command([])


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== MCP Server ===")
    print("  mcp        Run MCP server (STDIO or HTTP mode)")
    print("\n=== Migration Tools ===")
    print("  generate   Generate FrameLayoutKit code from a JSON description")
    print("  convert    Convert Auto Layout code to FrameLayoutKit")
    print("  validate   Validate FrameLayoutKit code")
    print("  migrate    Analyze a project and render a migration guide")
    print("\nMCP Server:")
    print("  python . mcp run                    # Start STDIO server (Claude Desktop)")
    print("  python . mcp serve                  # Start HTTP server on MCP_PORT")
    print("  python . mcp info                   # Show server information")
    print("\nExamples:")
    print("  python . generate profile.json -o ProfileLayout.swift")
    print("  python . convert LoginView.swift --strategy aggressive")
    print("  python . validate ProfileLayout.swift --level syntax")
    print("  python . migrate --project ./MyApp --format html -o guide.html")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "mcp": lambda: handle_mcp_command(rest_args),
        "generate": lambda: handle_generate_command(rest_args),
        "convert": lambda: handle_convert_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "migrate": lambda: handle_migrate_command(rest_args),
    }

    if command in commands:
        setup_logging(get_environment(EnvVar.LOG_LEVEL))
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
