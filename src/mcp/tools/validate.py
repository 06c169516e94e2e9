"""Validate FrameLayoutKit tool for MCP server.

This tool checks FrameLayoutKit Swift code for leftover Auto Layout
constructs, malformed operators and suspicious layout usage.
"""

import logging
from typing import Any

from src.config import get_check_level
from src.schema import CheckLevel
from src.validation import validate_source

logger = logging.getLogger(__name__)


def validate_framelayout(
    swift_code: str,
    check_level: str | None = None,
) -> dict[str, Any]:
    """Validate FrameLayoutKit Swift code.

    Args:
        swift_code: Swift source to validate.
        check_level: "syntax", "semantic" or "full". Defaults to
            VALIDATION_CHECK_LEVEL.

    Returns:
        Dictionary containing:
        - is_valid: True when no errors were found
        - errors: Error messages
        - warnings: Warning messages
        - suggestions: Suggestion messages
        - report: Markdown report

    Raises:
        ValueError: If check_level is unknown.

    Example:
        >>> result = validate_framelayout("stack + + view1")
        >>> result["is_valid"]
        False
    """
    level = get_check_level(check_level)
    try:
        checked = CheckLevel(level)
    except ValueError as e:
        valid = ", ".join(c.value for c in CheckLevel)
        raise ValueError(f"Unknown check level: {level}. Valid: {valid}") from e

    result = validate_source(swift_code, checked)
    logger.info(f"Validation ({checked.value}): {len(result.errors)} error(s)")
    return result.to_dict()


__all__ = ["validate_framelayout"]
