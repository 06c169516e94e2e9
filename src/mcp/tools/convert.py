"""Convert Auto Layout tool for MCP server.

This tool rewrites Auto Layout Swift code to FrameLayoutKit where the
rewrite is safe, and flags the rest for manual review.
"""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.config import get_migration_strategy
from src.converter import ConversionOptions, convert_legacy_source

logger = logging.getLogger(__name__)


def convert_autolayout(
    swift_code: str,
    options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Convert Auto Layout code to FrameLayoutKit.

    Args:
        swift_code: Swift source using NSLayoutConstraint, anchors or
            UIStackView.
        options: Conversion options. Keys (snake_case or camelCase):
            - migration_strategy: "conservative" (default from
              MIGRATION_STRATEGY) or "aggressive"
            - preserve_comments: Keep `//` comment lines. Default: True
            - generate_helper_methods: Append a layoutSubviews helper
            - use_operator_syntax: Attach with `+`. Default: True

    Returns:
        Dictionary containing:
        - code: Converted source
        - warnings: Review messages
        - suggestions: Advisories with pattern, suggestion, code
        - stats: constraintsConverted, stackViewsConverted, totalChanges

    Raises:
        ValueError: If options are malformed.
    """
    raw = dict(options or {})
    if "migration_strategy" not in raw and "migrationStrategy" not in raw:
        raw["migration_strategy"] = get_migration_strategy()

    try:
        parsed = ConversionOptions.model_validate(raw)
    except PydanticValidationError as e:
        raise ValueError(f"Invalid conversion options: {e}") from e

    result = convert_legacy_source(swift_code, parsed)
    return result.to_dict()


__all__ = ["convert_autolayout"]
