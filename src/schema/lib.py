"""Authoritative Schema Module for FrameLayoutKit layout definitions.

This module serves as the single source of truth for the vocabulary shared
by the generator, converter and validator. It provides:
- Enumerations for view kinds, layout kinds and configuration values
- Rich per-kind metadata (constructors, content slots, arity, config facets)
- Lookup helpers with graceful handling of unknown kinds

All vocabulary queries should route through this module.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ViewKind(str, Enum):
    """UIKit view classes the generator knows how to construct."""

    LABEL = "UILabel"
    BUTTON = "UIButton"
    IMAGE_VIEW = "UIImageView"
    TEXT_FIELD = "UITextField"
    TEXT_VIEW = "UITextView"
    VIEW = "UIView"
    STACK_VIEW = "UIStackView"
    SCROLL_VIEW = "UIScrollView"
    TABLE_VIEW = "UITableView"
    COLLECTION_VIEW = "UICollectionView"


class LayoutKind(str, Enum):
    """FrameLayoutKit layout containers.

    - FRAME: Single-child frame (consumes exactly one view)
    - VSTACK / HSTACK: Vertical and horizontal stacks
    - ZSTACK: Overlapping stack
    - DOUBLE: Two-pane frame (exactly two views)
    - GRID: Row/column grid
    - SCROLL_STACK: Scrollable stack
    - FLOW: Wrapping flow layout
    """

    FRAME = "FrameLayout"
    VSTACK = "VStackLayout"
    HSTACK = "HStackLayout"
    ZSTACK = "ZStackLayout"
    DOUBLE = "DoubleFrameLayout"
    GRID = "GridFrameLayout"
    SCROLL_STACK = "ScrollStackView"
    FLOW = "FlowFrameLayout"


class Axis(str, Enum):
    """Layout axis."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Distribution(str, Enum):
    """FrameLayoutKit distribution values."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    EQUAL = "equal"
    FILL = "fill"
    JUSTIFIED = "justified"


class VerticalAlignment(str, Enum):
    """Vertical content alignment inside a frame."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    FILL = "fill"
    FIT = "fit"


class HorizontalAlignment(str, Enum):
    """Horizontal content alignment inside a frame."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    FILL = "fill"
    FIT = "fit"


class MigrationStrategy(str, Enum):
    """Converter policy for uncertain rewrites.

    - CONSERVATIVE: Keep the original code and flag it for manual review
    - AGGRESSIVE: Replace with the suggested FrameLayoutKit code
    """

    CONSERVATIVE = "conservative"
    AGGRESSIVE = "aggressive"


class CheckLevel(str, Enum):
    """Validator depth."""

    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    FULL = "full"


class OutputFormat(str, Enum):
    """Migration guide rendering formats."""

    MARKDOWN = "markdown"
    HTML = "html"
    JSON = "json"


class ContentSlot(str, Enum):
    """Which input field a view kind uses as its natural content."""

    NONE = "none"
    TEXT = "text"
    TITLE = "title"
    PLACEHOLDER = "placeholder"
    IMAGE = "image"


class ConfigStyle(str, Enum):
    """How a layout's configuration is written out.

    - STATEMENTS: One property assignment or method call per line
    - CHAINED: A single builder chain on the declaration
    """

    STATEMENTS = "statements"
    CHAINED = "chained"


class ConfigFacet(str, Enum):
    """Configuration facets, declared in emission order."""

    AXIS = "axis"
    SPACING = "spacing"
    INTER_ITEM_SPACING = "inter_item_spacing"
    LINE_SPACING = "line_spacing"
    DISTRIBUTION = "distribution"
    PADDING = "padding"
    ALIGNMENT = "alignment"
    GRID = "grid"
    OVERLAP = "overlap"


class AttachIdiom(str, Enum):
    """How child views are attached to a layout.

    - BINARY: `<+` for the left view, `+>` for the right view
    - REPEATED: `layout + view` once per view
    - BULK: collect into an array, then assign `layout.views`
    """

    BINARY = "binary"
    REPEATED = "repeated"
    BULK = "bulk"


# Emission order is the declaration order of ConfigFacet.
FACET_ORDER: tuple[ConfigFacet, ...] = tuple(ConfigFacet)


@dataclass(frozen=True)
class ViewKindMeta:
    """Construction metadata for a UIKit view class.

    Attributes:
        kind: The view kind.
        constructor: Swift expression creating an unconfigured instance.
        local_name: Variable name used inside a construction block.
        content: Which input field supplies the view's content.
        description: Human-readable description.
    """

    kind: ViewKind
    constructor: str
    local_name: str
    content: ContentSlot = ContentSlot.NONE
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary for schema export."""
        return {
            "kind": self.kind.value,
            "constructor": self.constructor,
            "content": self.content.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class LayoutKindMeta:
    """Generation metadata for a layout container.

    Attributes:
        kind: The layout kind.
        variable: Name of the declared layout value. None means it is
            derived from the first view's name (`<name>Layout`).
        style: Whether configuration is emitted as statements or a chain.
        facets: Configuration facets this layout honours.
        attach: Child attachment idiom.
        exact_views: Required view count, or None when any count works.
        min_views: Minimum view count.
        max_views: Views beyond this count are ignored. None means no limit.
        default_spacing: Emit a filler spacing attach between views when
            no spacing is configured.
        section_comment: Comment line preceding view creation.
    """

    kind: LayoutKind
    variable: str | None
    style: ConfigStyle
    facets: frozenset[ConfigFacet]
    attach: AttachIdiom = AttachIdiom.REPEATED
    exact_views: int | None = None
    min_views: int = 0
    max_views: int | None = None
    default_spacing: bool = False
    section_comment: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary for schema export."""
        return {
            "kind": self.kind.value,
            "style": self.style.value,
            "facets": [f.value for f in FACET_ORDER if f in self.facets],
            "attach": self.attach.value,
            "exact_views": self.exact_views,
            "max_views": self.max_views,
        }


VIEW_REGISTRY: dict[ViewKind, ViewKindMeta] = {
    ViewKind.LABEL: ViewKindMeta(
        kind=ViewKind.LABEL,
        constructor="UILabel()",
        local_name="label",
        content=ContentSlot.TEXT,
        description="Static text",
    ),
    ViewKind.BUTTON: ViewKindMeta(
        kind=ViewKind.BUTTON,
        constructor="UIButton(type: .system)",
        local_name="button",
        content=ContentSlot.TITLE,
        description="Tappable button with a title",
    ),
    ViewKind.IMAGE_VIEW: ViewKindMeta(
        kind=ViewKind.IMAGE_VIEW,
        constructor="UIImageView()",
        local_name="imageView",
        content=ContentSlot.IMAGE,
        description="Image from the asset catalog or SF Symbols",
    ),
    ViewKind.TEXT_FIELD: ViewKindMeta(
        kind=ViewKind.TEXT_FIELD,
        constructor="UITextField()",
        local_name="textField",
        content=ContentSlot.PLACEHOLDER,
        description="Single-line text input",
    ),
    ViewKind.TEXT_VIEW: ViewKindMeta(
        kind=ViewKind.TEXT_VIEW,
        constructor="UITextView()",
        local_name="textView",
        content=ContentSlot.TEXT,
        description="Multi-line text",
    ),
    ViewKind.VIEW: ViewKindMeta(
        kind=ViewKind.VIEW,
        constructor="UIView()",
        local_name="view",
        description="Plain container view",
    ),
    ViewKind.STACK_VIEW: ViewKindMeta(
        kind=ViewKind.STACK_VIEW,
        constructor="UIStackView()",
        local_name="stackView",
        description="UIKit stack view (prefer a FrameLayoutKit stack)",
    ),
    ViewKind.SCROLL_VIEW: ViewKindMeta(
        kind=ViewKind.SCROLL_VIEW,
        constructor="UIScrollView()",
        local_name="scrollView",
        description="Scroll container",
    ),
    ViewKind.TABLE_VIEW: ViewKindMeta(
        kind=ViewKind.TABLE_VIEW,
        constructor="UITableView()",
        local_name="tableView",
        description="Table of rows",
    ),
    ViewKind.COLLECTION_VIEW: ViewKindMeta(
        kind=ViewKind.COLLECTION_VIEW,
        constructor="UICollectionView(frame: .zero, collectionViewLayout: UICollectionViewFlowLayout())",
        local_name="collectionView",
        description="Collection of cells",
    ),
}


_STACK_FACETS = frozenset(
    {
        ConfigFacet.SPACING,
        ConfigFacet.DISTRIBUTION,
        ConfigFacet.PADDING,
        ConfigFacet.ALIGNMENT,
    }
)

LAYOUT_REGISTRY: dict[LayoutKind, LayoutKindMeta] = {
    LayoutKind.FRAME: LayoutKindMeta(
        kind=LayoutKind.FRAME,
        variable=None,
        style=ConfigStyle.CHAINED,
        facets=frozenset({ConfigFacet.PADDING, ConfigFacet.ALIGNMENT}),
        min_views=1,
        max_views=1,
    ),
    LayoutKind.VSTACK: LayoutKindMeta(
        kind=LayoutKind.VSTACK,
        variable="stackLayout",
        style=ConfigStyle.STATEMENTS,
        facets=_STACK_FACETS,
        default_spacing=True,
        section_comment="// Add views to stack",
    ),
    LayoutKind.HSTACK: LayoutKindMeta(
        kind=LayoutKind.HSTACK,
        variable="stackLayout",
        style=ConfigStyle.STATEMENTS,
        facets=_STACK_FACETS,
        default_spacing=True,
        section_comment="// Add views to stack",
    ),
    LayoutKind.ZSTACK: LayoutKindMeta(
        kind=LayoutKind.ZSTACK,
        variable="zStackLayout",
        style=ConfigStyle.CHAINED,
        facets=frozenset(
            {ConfigFacet.SPACING, ConfigFacet.PADDING, ConfigFacet.ALIGNMENT}
        ),
        section_comment="// Add overlapping views",
    ),
    LayoutKind.DOUBLE: LayoutKindMeta(
        kind=LayoutKind.DOUBLE,
        variable="doubleLayout",
        style=ConfigStyle.STATEMENTS,
        facets=frozenset(
            {
                ConfigFacet.AXIS,
                ConfigFacet.SPACING,
                ConfigFacet.DISTRIBUTION,
                ConfigFacet.PADDING,
                ConfigFacet.OVERLAP,
            }
        ),
        attach=AttachIdiom.BINARY,
        exact_views=2,
        min_views=2,
        section_comment="// Create views",
    ),
    LayoutKind.GRID: LayoutKindMeta(
        kind=LayoutKind.GRID,
        variable="gridLayout",
        style=ConfigStyle.STATEMENTS,
        facets=frozenset(
            {
                ConfigFacet.AXIS,
                ConfigFacet.SPACING,
                ConfigFacet.PADDING,
                ConfigFacet.GRID,
            }
        ),
        attach=AttachIdiom.BULK,
        section_comment="// Create views",
    ),
    LayoutKind.SCROLL_STACK: LayoutKindMeta(
        kind=LayoutKind.SCROLL_STACK,
        variable="scrollStack",
        style=ConfigStyle.STATEMENTS,
        facets=frozenset(
            {
                ConfigFacet.AXIS,
                ConfigFacet.SPACING,
                ConfigFacet.DISTRIBUTION,
                ConfigFacet.PADDING,
            }
        ),
        section_comment="// Add views to scroll stack",
    ),
    LayoutKind.FLOW: LayoutKindMeta(
        kind=LayoutKind.FLOW,
        variable="flowLayout",
        style=ConfigStyle.CHAINED,
        facets=frozenset(
            {
                ConfigFacet.AXIS,
                ConfigFacet.INTER_ITEM_SPACING,
                ConfigFacet.LINE_SPACING,
                ConfigFacet.DISTRIBUTION,
                ConfigFacet.PADDING,
            }
        ),
        section_comment="// Add views to flow layout",
    ),
}


def resolve_view_kind(value: str) -> ViewKind | None:
    """Resolve a view class name to a known kind.

    Args:
        value: The UIKit class name (e.g. "UILabel").

    Returns:
        The matching ViewKind, or None for classes outside the registry.
    """
    try:
        return ViewKind(value)
    except ValueError:
        return None


def get_view_meta(value: str) -> ViewKindMeta | None:
    """Get construction metadata for a view class name.

    Args:
        value: The UIKit class name.

    Returns:
        ViewKindMeta, or None when the class is unknown.
    """
    kind = resolve_view_kind(value)
    return VIEW_REGISTRY[kind] if kind is not None else None


def get_layout_meta(kind: LayoutKind | str) -> LayoutKindMeta:
    """Get generation metadata for a layout kind.

    Args:
        kind: LayoutKind member or its string value.

    Returns:
        LayoutKindMeta for the kind.

    Raises:
        ValueError: If the kind is not a known layout.
    """
    return LAYOUT_REGISTRY[LayoutKind(kind)]


def export_vocabulary() -> dict[str, Any]:
    """Export the view and layout vocabulary as JSON-serializable data."""
    return {
        "views": [meta.to_dict() for meta in VIEW_REGISTRY.values()],
        "layouts": [meta.to_dict() for meta in LAYOUT_REGISTRY.values()],
        "distributions": [d.value for d in Distribution],
        "axes": [a.value for a in Axis],
    }


__all__ = [
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
    "ViewKindMeta",
    "LayoutKindMeta",
    "VIEW_REGISTRY",
    "LAYOUT_REGISTRY",
    "resolve_view_kind",
    "get_view_meta",
    "get_layout_meta",
    "export_vocabulary",
]
