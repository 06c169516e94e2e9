"""Layout description model: ViewSpec and LayoutConfig.

Example usage:
    >>> from src.model import LayoutConfig, ViewSpec
    >>> view = ViewSpec(name="title", kind="UILabel", text="Hello")
    >>> config = LayoutConfig(spacing=8)
"""

from .lib import (
    IDENTIFIER_PATTERN,
    AlignmentSpec,
    EdgeInsets,
    LayoutConfig,
    ViewSpec,
    export_json_schema,
    export_json_schema_str,
)

__all__ = [
    "IDENTIFIER_PATTERN",
    "ViewSpec",
    "EdgeInsets",
    "AlignmentSpec",
    "LayoutConfig",
    "export_json_schema",
    "export_json_schema_str",
]
