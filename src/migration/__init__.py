"""Migration scope analysis and guide rendering.

Example usage:
    >>> from src.migration import analyze_migration_scope
    >>> analysis = analyze_migration_scope(swift_files=["LoginViewController.swift"])
    >>> analysis.estimated_effort
    '2-3 weeks'
"""

from .lib import (
    COMPLEXITY_LEVELS,
    DEFAULT_COMPLEXITY,
    GUIDE_TITLE,
    FileScan,
    MigrationAnalysis,
    analyze_migration_scope,
    grade_complexity,
    recommend,
    render_html,
    render_json,
    render_markdown,
    scan_source,
)

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
