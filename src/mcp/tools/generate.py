"""Generate FrameLayoutKit tool for MCP server.

This tool turns a layout description (layout type, views, configuration)
into Swift source using FrameLayoutKit operator syntax.
"""

import logging
from collections import Counter
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.generator import generate_layout
from src.model import LayoutConfig, ViewSpec
from src.schema import LayoutKind

logger = logging.getLogger(__name__)


def generate_framelayout(
    layout_type: str,
    views: list[dict[str, Any]],
    configuration: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Generate FrameLayoutKit Swift code for a layout.

    Args:
        layout_type: One of FrameLayout, VStackLayout, HStackLayout,
            ZStackLayout, DoubleFrameLayout, GridFrameLayout,
            ScrollStackView, FlowFrameLayout.
        views: View descriptions, each with `name`, `type` and optional
            `text`, `image` and `properties`.
        configuration: Layout configuration (spacing, padding, alignment,
            distribution, axis, rows, columns, ...).

    Returns:
        Dictionary containing:
        - code: Generated Swift source
        - language: "swift"
        - framework: "FrameLayoutKit"
        - layout_type: Layout type used
        - line_count: Number of lines in output

    Raises:
        ValueError: On unknown layout types, malformed views or
            configuration, duplicate view names, or a view count the
            layout does not accept.

    Example:
        >>> result = generate_framelayout(
        ...     "VStackLayout",
        ...     [{"name": "title", "type": "UILabel", "text": "Hello"}],
        ...     {"spacing": 8},
        ... )
        >>> print(result["code"])
        let stackLayout = VStackLayout()
        stackLayout.spacing = 8
        ...
    """
    try:
        kind = LayoutKind(layout_type)
    except ValueError as e:
        valid = ", ".join(k.value for k in LayoutKind)
        raise ValueError(f"Unknown layout type: {layout_type}. Valid: {valid}") from e

    try:
        specs = [ViewSpec.model_validate(view) for view in views]
        config = LayoutConfig.model_validate(configuration or {})
    except PydanticValidationError as e:
        raise ValueError(f"Invalid layout input: {e}") from e

    duplicates = sorted(name for name, count in Counter(s.name for s in specs).items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate view names: {', '.join(duplicates)}")

    code = generate_layout(kind, specs, config)
    logger.info(f"Generated {kind.value} with {len(specs)} view(s)")

    return {
        "code": code,
        "language": "swift",
        "framework": "FrameLayoutKit",
        "layout_type": kind.value,
        "line_count": len(code.strip().split("\n")),
    }


__all__ = ["generate_framelayout"]
