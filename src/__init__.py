"""framelayout-mcp: Auto Layout to FrameLayoutKit migration toolkit."""

from src.converter import ConversionOptions, convert_legacy_source
from src.generator import generate_layout
from src.migration import analyze_migration_scope
from src.model import LayoutConfig, ViewSpec, export_json_schema
from src.schema import LayoutKind, ViewKind
from src.validation import ValidationResult, validate_source

__all__ = [
    # Models
    "ViewSpec",
    "LayoutConfig",
    "LayoutKind",
    "ViewKind",
    "export_json_schema",
    # Generation
    "generate_layout",
    # Conversion
    "ConversionOptions",
    "convert_legacy_source",
    # Validation
    "validate_source",
    "ValidationResult",
    # Migration
    "analyze_migration_scope",
]
