"""FrameLayoutKit source generation from layout descriptions.

Example usage:
    >>> from src.generator import generate_layout
    >>> from src.model import LayoutConfig, ViewSpec
    >>> code = generate_layout("VStackLayout", [ViewSpec(name="a")], LayoutConfig())
"""

from .lib import (
    DEFAULT_GRID_COLUMNS,
    DEFAULT_GRID_ROWS,
    DEFAULT_STACK_SPACING,
    InvalidArityError,
    LayoutGenerator,
    Setting,
    generate_layout,
    padding_arguments,
)

__all__ = [
    "DEFAULT_STACK_SPACING",
    "DEFAULT_GRID_ROWS",
    "DEFAULT_GRID_COLUMNS",
    "InvalidArityError",
    "Setting",
    "LayoutGenerator",
    "generate_layout",
    "padding_arguments",
]
