"""Migration scope analysis for Auto Layout codebases.

Scans Swift files for legacy layout constructs, grades the overall
complexity and renders a phased migration guide as markdown, HTML or JSON.

Example:
    >>> analysis = analyze_migration_scope(project_path="MyApp/")
    >>> analysis.complexity
    'medium'
    >>> print(analysis.rendered)
"""

import html
import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.converter import find_activation_blocks
from src.rules import ANCHOR_PROBE
from src.schema import OutputFormat

logger = logging.getLogger(__name__)

GUIDE_TITLE = "FrameLayoutKit Migration Guide"

# (upper bound on legacy constructs, complexity, estimated effort)
COMPLEXITY_LEVELS: tuple[tuple[int | None, str, str], ...] = (
    (10, "low", "1 week"),
    (50, "medium", "2-3 weeks"),
    (None, "high", "4-6 weeks"),
)
DEFAULT_COMPLEXITY = ("medium", "2-3 weeks")

HEAVY_CONSTRAINT_THRESHOLD = 10

_STACK_VIEW = re.compile(r"\bUIStackView\s*\(")


@dataclass
class FileScan:
    """Legacy layout usage found in one file.

    Attributes:
        path: File path as reported to the user.
        scanned: False when the file could not be read and only its name
            was considered.
        activation_blocks: NSLayoutConstraint.activate calls.
        anchor_constraints: `...Anchor.constraint(` calls.
        stack_views: UIStackView constructions.
    """

    path: str
    scanned: bool = True
    activation_blocks: int = 0
    anchor_constraints: int = 0
    stack_views: int = 0

    @property
    def legacy_constructs(self) -> int:
        return self.activation_blocks + self.anchor_constraints + self.stack_views

    @property
    def constraint_constructs(self) -> int:
        return self.activation_blocks + self.anchor_constraints

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "scanned": self.scanned,
            "activationBlocks": self.activation_blocks,
            "anchorConstraints": self.anchor_constraints,
            "stackViews": self.stack_views,
        }


@dataclass
class MigrationAnalysis:
    """Result of a migration scope analysis."""

    complexity: str
    estimated_effort: str
    file_count: int
    recommendations: list[str] = field(default_factory=list)
    files: list[FileScan] = field(default_factory=list)
    output_format: str = OutputFormat.MARKDOWN.value
    rendered: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the analysis (without the rendered guide)."""
        return {
            "complexity": self.complexity,
            "estimatedEffort": self.estimated_effort,
            "fileCount": self.file_count,
            "recommendations": list(self.recommendations),
            "files": [f.to_dict() for f in self.files],
        }


# =============================================================================
# Scanning
# =============================================================================


def scan_source(path: str, source: str) -> FileScan:
    """Count legacy layout constructs in Swift source."""
    return FileScan(
        path=path,
        activation_blocks=len(find_activation_blocks(source)),
        anchor_constraints=len(ANCHOR_PROBE.findall(source)),
        stack_views=len(_STACK_VIEW.findall(source)),
    )


def _scan_project(project_path: Path) -> list[FileScan]:
    if not project_path.is_dir():
        raise ValueError(f"Project path is not a directory: {project_path}")

    scans = []
    for file_path in sorted(project_path.rglob("*.swift")):
        source = file_path.read_text(encoding="utf-8", errors="replace")
        scans.append(scan_source(file_path.relative_to(project_path).as_posix(), source))
    logger.info(f"Scanned {len(scans)} Swift file(s) under {project_path}")
    return scans


def _scan_files(swift_files: Sequence[str]) -> list[FileScan]:
    scans = []
    for entry in swift_files:
        file_path = Path(entry)
        if file_path.is_file():
            source = file_path.read_text(encoding="utf-8", errors="replace")
            scans.append(scan_source(entry, source))
        else:
            logger.debug(f"Not readable, judging by name only: {entry}")
            scans.append(FileScan(path=entry, scanned=False))
    return scans


# =============================================================================
# Grading
# =============================================================================


def grade_complexity(scans: Sequence[FileScan]) -> tuple[str, str]:
    """Complexity and effort estimate for a set of scanned files.

    Returns the default grade when nothing could be scanned.
    """
    scanned = [scan for scan in scans if scan.scanned]
    if not scanned:
        return DEFAULT_COMPLEXITY

    total = sum(scan.legacy_constructs for scan in scanned)
    for limit, complexity, effort in COMPLEXITY_LEVELS:
        if limit is None or total < limit:
            return complexity, effort
    return DEFAULT_COMPLEXITY


def recommend(scans: Sequence[FileScan], whole_project: bool = False) -> list[str]:
    """Migration recommendations, most general first."""
    recommendations: list[str] = []
    if whole_project:
        recommendations.append("Start with view controllers that use simple layouts")

    if any(scan.stack_views for scan in scans):
        recommendations.append(
            "Migrate UIStackView usage first as it maps well to VStackLayout and HStackLayout"
        )

    for scan in scans:
        if "ViewController" in Path(scan.path).name:
            recommendations.append(f"{scan.path}: Good candidate for migration")

    for scan in scans:
        if scan.constraint_constructs >= HEAVY_CONSTRAINT_THRESHOLD:
            recommendations.append(
                f"{scan.path}: Heavy constraint usage ({scan.constraint_constructs} "
                "constructs). Convert with the conservative strategy and review manually"
            )
    return recommendations


# =============================================================================
# Rendering
# =============================================================================


def render_markdown(analysis: MigrationAnalysis) -> str:
    """Render the phased migration guide as markdown."""
    guide = f"# {GUIDE_TITLE}\n\n"
    guide += "## Project Overview\n\n"
    guide += f"- **Files to migrate:** {analysis.file_count}\n"
    guide += f"- **Complexity:** {analysis.complexity}\n"
    guide += f"- **Estimated effort:** {analysis.estimated_effort}\n\n"

    guide += "## Migration Strategy\n\n"
    guide += "### Phase 1: Preparation\n"
    guide += "1. Add FrameLayoutKit to your project\n"
    guide += "2. Create a feature branch for migration\n"
    guide += "3. Set up the MCP server for assistance\n\n"

    guide += "### Phase 2: Migration\n"
    for index, recommendation in enumerate(analysis.recommendations, start=1):
        guide += f"{index}. {recommendation}\n"

    guide += "\n### Phase 3: Testing\n"
    guide += "1. Visual regression testing\n"
    guide += "2. Performance benchmarking\n"
    guide += "3. User acceptance testing\n"
    return guide


def render_html(analysis: MigrationAnalysis) -> str:
    """Render the guide as a standalone HTML page. All values are escaped."""
    items = "\n        ".join(
        f"<li>{html.escape(rec)}</li>" for rec in analysis.recommendations
    )
    return f"""<!DOCTYPE html>
<html>
<head>
    <title>{GUIDE_TITLE}</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, sans-serif; margin: 40px; }}
        h1 {{ color: #333; }}
        h2 {{ color: #666; }}
        .metric {{ background: #f5f5f5; padding: 10px; margin: 10px 0; border-radius: 5px; }}
    </style>
</head>
<body>
    <h1>{GUIDE_TITLE}</h1>
    <div class="metric">
        <strong>Files to migrate:</strong> {analysis.file_count}<br>
        <strong>Complexity:</strong> {html.escape(analysis.complexity)}<br>
        <strong>Estimated effort:</strong> {html.escape(analysis.estimated_effort)}
    </div>
    <h2>Recommendations</h2>
    <ul>
        {items}
    </ul>
</body>
</html>"""


def render_json(analysis: MigrationAnalysis) -> str:
    """Render the analysis as indented JSON."""
    return json.dumps(analysis.to_dict(), indent=2)


RENDERERS = {
    OutputFormat.MARKDOWN: render_markdown,
    OutputFormat.HTML: render_html,
    OutputFormat.JSON: render_json,
}


# =============================================================================
# Main Interface
# =============================================================================


def analyze_migration_scope(
    project_path: str | Path | None = None,
    swift_files: Sequence[str] | None = None,
    output_format: OutputFormat | str = OutputFormat.MARKDOWN,
) -> MigrationAnalysis:
    """Analyze a project or file list and render a migration guide.

    A project path takes precedence over a file list. File list entries
    that do not exist on disk are judged by name only.

    Args:
        project_path: Root directory searched recursively for *.swift.
        swift_files: Explicit file paths.
        output_format: markdown, html or json.

    Returns:
        MigrationAnalysis: Grades, recommendations and the rendered guide.

    Raises:
        ValueError: If the format is unknown or project_path is not a directory.
    """
    fmt = OutputFormat(output_format)

    if project_path is not None:
        scans = _scan_project(Path(project_path))
    else:
        scans = _scan_files(swift_files or [])

    complexity, effort = grade_complexity(scans)
    analysis = MigrationAnalysis(
        complexity=complexity,
        estimated_effort=effort,
        file_count=len(scans),
        recommendations=recommend(scans, whole_project=project_path is not None),
        files=scans,
        output_format=fmt.value,
    )
    analysis.rendered = RENDERERS[fmt](analysis)
    return analysis


__all__ = [
    "GUIDE_TITLE",
    "COMPLEXITY_LEVELS",
    "DEFAULT_COMPLEXITY",
    "FileScan",
    "MigrationAnalysis",
    "scan_source",
    "grade_complexity",
    "recommend",
    "render_markdown",
    "render_html",
    "render_json",
    "analyze_migration_scope",
]
