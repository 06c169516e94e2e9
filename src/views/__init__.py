"""View construction snippets for generated FrameLayoutKit code."""

from .lib import (
    SYSTEM_IMAGE_PREFIXES,
    construction_block,
    create_view,
    image_expression,
    swift_literal,
)

__all__ = [
    "SYSTEM_IMAGE_PREFIXES",
    "create_view",
    "construction_block",
    "image_expression",
    "swift_literal",
]
