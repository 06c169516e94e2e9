"""FrameLayoutKit source validation."""

from src.validation.lib import (
    REPORT_TITLE,
    Diagnostic,
    DSLValidator,
    ValidationResult,
    render_report,
    validate_source,
)

__all__ = [
    "REPORT_TITLE",
    "Diagnostic",
    "ValidationResult",
    "DSLValidator",
    "render_report",
    "validate_source",
]
