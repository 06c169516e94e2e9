"""Schema module - authoritative vocabulary for FrameLayoutKit generation.

This module provides:
- View kind and layout kind enumerations with rich metadata
- Configuration value enumerations (axis, distribution, alignment)
- Policy enumerations (migration strategy, check level, output format)

Example usage:
    >>> from src.schema import LayoutKind, get_layout_meta
    >>> meta = get_layout_meta(LayoutKind.DOUBLE)
    >>> meta.exact_views
    2
"""

from .lib import (
    FACET_ORDER,
    LAYOUT_REGISTRY,
    VIEW_REGISTRY,
    AttachIdiom,
    Axis,
    CheckLevel,
    ConfigFacet,
    ConfigStyle,
    ContentSlot,
    Distribution,
    HorizontalAlignment,
    LayoutKind,
    LayoutKindMeta,
    MigrationStrategy,
    OutputFormat,
    VerticalAlignment,
    ViewKind,
    ViewKindMeta,
    export_vocabulary,
    get_layout_meta,
    get_view_meta,
    resolve_view_kind,
)

__all__ = [
    # Enums
    "ViewKind",
    "LayoutKind",
    "Axis",
    "Distribution",
    "VerticalAlignment",
    "HorizontalAlignment",
    "MigrationStrategy",
    "CheckLevel",
    "OutputFormat",
    "ContentSlot",
    "ConfigStyle",
    "ConfigFacet",
    "AttachIdiom",
    "FACET_ORDER",
    # Metadata
    "ViewKindMeta",
    "LayoutKindMeta",
    "VIEW_REGISTRY",
    "LAYOUT_REGISTRY",
    # Lookup
    "resolve_view_kind",
    "get_view_meta",
    "get_layout_meta",
    "export_vocabulary",
]
