"""Layout description model.

Plain, immutable data describing one view (ViewSpec) and one layout's
configuration (LayoutConfig). This is the contract shared between the MCP
tool boundary and the generator: tool input is validated into these models
once, and the generator consumes them without further checks.

Vocabulary (view kinds, layout kinds, enum values) is delegated to the
authoritative schema module (src/schema).
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.schema import (
    Axis,
    Distribution,
    HorizontalAlignment,
    VerticalAlignment,
    ViewKind,
)

IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class ViewSpec(BaseModel):
    """Description of a single view to construct.

    Attributes:
        name: Swift identifier the view is bound to. Unique within a layout.
        kind: UIKit class name. Unknown classes fall back to a generic
            constructor call.
        text: Label/text view text, button title or text field placeholder.
        image: Image reference. A "systemName:" or "system:" prefix selects
            an SF Symbol, anything else an asset catalog name.
        properties: Extra property assignments, emitted as
            `<view>.<key> = <value>`.
    """

    name: str = Field(
        ...,
        pattern=IDENTIFIER_PATTERN,
        description="Swift identifier for the view",
        examples=["titleLabel", "avatarImageView"],
    )
    kind: str = Field(
        default=ViewKind.VIEW.value,
        alias="type",
        description="UIKit view class (e.g. UILabel, UIButton)",
    )
    text: str | None = Field(
        default=None,
        description="Text content, button title or placeholder",
    )
    image: str | None = Field(
        default=None,
        description="Image name; prefix with 'systemName:' for SF Symbols",
    )
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional property assignments (values are Swift expressions)",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator("kind", mode="before")
    @classmethod
    def _kind_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value


class EdgeInsets(BaseModel):
    """Per-edge padding. Missing edges default to 0."""

    top: int | float = 0
    left: int | float = 0
    bottom: int | float = 0
    right: int | float = 0

    model_config = {"frozen": True}


class AlignmentSpec(BaseModel):
    """Content alignment inside a frame."""

    vertical: VerticalAlignment | None = None
    horizontal: HorizontalAlignment | None = None

    model_config = {
        "frozen": True,
        "use_enum_values": True,
    }


class LayoutConfig(BaseModel):
    """Configuration for one layout.

    Every field is optional. A missing field emits nothing for that facet,
    except VStack/HStack layouts which emit a default spacing filler when
    `spacing` is missing. Zero is a present value, not an absent one.
    """

    axis: Axis | None = None
    spacing: int | float | None = None
    padding: int | float | EdgeInsets | None = None
    distribution: Distribution | None = None
    alignment: AlignmentSpec | None = None

    # Grid
    rows: int | None = Field(default=None, ge=1)
    columns: int | None = Field(default=None, ge=1)

    # Flow
    inter_item_spacing: int | float | None = Field(default=None, alias="interItemSpacing")
    line_spacing: int | float | None = Field(default=None, alias="lineSpacing")

    # Double frame
    is_overlapped: bool | None = Field(default=None, alias="isOverlapped")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "use_enum_values": True,
    }


def export_json_schema() -> dict[str, Any]:
    """Export JSON Schemas for the tool input models.

    Returns:
        dict with "view_spec" and "layout_config" JSON Schemas.
    """
    return {
        "view_spec": ViewSpec.model_json_schema(),
        "layout_config": LayoutConfig.model_json_schema(),
    }


def export_json_schema_str(name: str) -> str:
    """Export one model's JSON Schema as an indented string.

    Args:
        name: "view_spec" or "layout_config".

    Raises:
        KeyError: If the name is unknown.
    """
    return json.dumps(export_json_schema()[name], indent=2)


__all__ = [
    "IDENTIFIER_PATTERN",
    "ViewSpec",
    "EdgeInsets",
    "AlignmentSpec",
    "LayoutConfig",
    "export_json_schema",
    "export_json_schema_str",
]
