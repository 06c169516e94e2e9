"""Migration guide tool for MCP server.

This tool analyzes a Swift project (or a list of files) for Auto Layout
usage and renders a phased migration guide.
"""

import logging
from typing import Any

from src.config import EnvVar, get_environment, get_guide_format
from src.migration import analyze_migration_scope
from src.schema import OutputFormat

logger = logging.getLogger(__name__)


def generate_migration_guide(
    project_path: str | None = None,
    swift_files: list[str] | None = None,
    output_format: str | None = None,
) -> dict[str, Any]:
    """Analyze migration scope and render a guide.

    Args:
        project_path: Project root searched recursively for *.swift.
            Defaults to PROJECT_ROOT when neither input is given.
        swift_files: Explicit file paths. Missing files are judged by name.
        output_format: "markdown", "html" or "json". Defaults to
            GUIDE_OUTPUT_FORMAT.

    Returns:
        Dictionary containing:
        - complexity: low, medium or high
        - estimated_effort: e.g. "2-3 weeks"
        - file_count: Files considered
        - recommendations: Ordered advice
        - output_format: Format of `rendered`
        - rendered: The guide

    Raises:
        ValueError: If the format is unknown or project_path is not a directory.
    """
    fmt = get_guide_format(output_format)
    try:
        OutputFormat(fmt)
    except ValueError as e:
        valid = ", ".join(f.value for f in OutputFormat)
        raise ValueError(f"Unknown output format: {fmt}. Valid: {valid}") from e

    if project_path is None and not swift_files:
        default_root = get_environment(EnvVar.PROJECT_ROOT)
        if default_root is not None:
            project_path = str(default_root)

    analysis = analyze_migration_scope(
        project_path=project_path,
        swift_files=swift_files,
        output_format=fmt,
    )
    logger.info(
        f"Migration analysis: {analysis.file_count} file(s), complexity {analysis.complexity}"
    )

    return {
        "complexity": analysis.complexity,
        "estimated_effort": analysis.estimated_effort,
        "file_count": analysis.file_count,
        "recommendations": analysis.recommendations,
        "output_format": analysis.output_format,
        "rendered": analysis.rendered,
    }


__all__ = ["generate_migration_guide"]
