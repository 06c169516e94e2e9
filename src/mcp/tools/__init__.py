"""MCP tools for framelayout-mcp.

Plain functions behind the server's tool endpoints. Each takes JSON-shaped
input, validates it with pydantic and raises ValueError on bad input.

Tools:
    - generate_framelayout: Layout description -> Swift source
    - convert_autolayout: Auto Layout source -> FrameLayoutKit source
    - validate_framelayout: FrameLayoutKit source -> diagnostics and report
    - generate_migration_guide: Project or file list -> migration guide
"""

from .convert import convert_autolayout
from .generate import generate_framelayout
from .migrate import generate_migration_guide
from .validate import validate_framelayout

__all__ = [
    "generate_framelayout",
    "convert_autolayout",
    "validate_framelayout",
    "generate_migration_guide",
]
