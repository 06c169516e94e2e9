"""Auto Layout to FrameLayoutKit conversion.

Example usage:
    >>> from src.converter import ConversionOptions, convert_legacy_source
    >>> result = convert_legacy_source(source, ConversionOptions(migration_strategy="aggressive"))
    >>> print(result.code)
"""

from .lib import (
    REVIEW_MARKER,
    ActivationBlock,
    ConversionOptions,
    ConversionResult,
    ConversionStats,
    LegacyConverter,
    Suggestion,
    convert_legacy_source,
    find_activation_blocks,
)

__all__ = [
    "REVIEW_MARKER",
    "ConversionOptions",
    "Suggestion",
    "ConversionStats",
    "ConversionResult",
    "ActivationBlock",
    "LegacyConverter",
    "find_activation_blocks",
    "convert_legacy_source",
]
