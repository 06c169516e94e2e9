"""FrameLayoutKit source generation.

Turns a (layout kind, views, configuration) triple into Swift source using
FrameLayoutKit's operator syntax. Output is built in four steps:

    1. Declare the layout value.
    2. Apply configuration, either as statements or as a builder chain.
    3. Construct each view (see src/views).
    4. Attach views with `+`, `<+`/`+>` or an array assignment.

Configuration facets are always emitted in FACET_ORDER, so identical input
produces byte-identical output.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from src.model import EdgeInsets, LayoutConfig, ViewSpec
from src.schema import (
    FACET_ORDER,
    AttachIdiom,
    ConfigFacet,
    ConfigStyle,
    LayoutKind,
    LayoutKindMeta,
    get_layout_meta,
)
from src.views import create_view

logger = logging.getLogger(__name__)

DEFAULT_STACK_SPACING = 8
DEFAULT_GRID_ROWS = 2
DEFAULT_GRID_COLUMNS = 3

CHAIN_INDENT = "    "


class InvalidArityError(ValueError):
    """Raised when a layout kind receives an unsupported number of views.

    Attributes:
        kind: The layout kind.
        expected: Human-readable expected count ("2", "at least 1").
        actual: Number of views supplied.
    """

    def __init__(self, kind: LayoutKind, expected: str, actual: int) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{kind.value} requires {expected} view(s), got {actual}"
        )


@dataclass(frozen=True)
class Setting:
    """One configuration step on a layout.

    Attributes:
        name: Property or method name.
        value: Swift source for the value or argument list.
        is_call: Emit as a method call rather than a property assignment.
        path: Member path between the layout and the setting
            (".leftFrameLayout"). Settings with a path are always
            written as statements.
    """

    name: str
    value: str
    is_call: bool = False
    path: str = ""

    def statement(self, target: str) -> str:
        """Render as a standalone statement on `target`."""
        receiver = f"{target}{self.path}"
        if self.is_call:
            return f"{receiver}.{self.name}({self.value})"
        return f"{receiver}.{self.name} = {self.value}"

    def chain(self) -> str:
        """Render as a builder-chain segment."""
        return f".{self.name}({self.value})"


class LayoutGenerator:
    """Generates FrameLayoutKit Swift code from layout descriptions.

    Stateless: a single instance can serve concurrent callers.

    Example:
        >>> generator = LayoutGenerator()
        >>> code = generator.generate(
        ...     LayoutKind.VSTACK,
        ...     [ViewSpec(name="title", kind="UILabel", text="Hi")],
        ...     LayoutConfig(spacing=8),
        ... )
    """

    def __init__(self, view_factory: Callable[[ViewSpec], str] = create_view) -> None:
        self._create_view = view_factory

    def generate(
        self,
        kind: LayoutKind | str,
        views: Sequence[ViewSpec],
        config: LayoutConfig | None = None,
    ) -> str:
        """Generate Swift source for a layout.

        Args:
            kind: Layout kind (member or string value).
            views: Views to construct and attach, in order.
            config: Layout configuration. None means an empty config.

        Returns:
            str: Swift source ending in a newline.

        Raises:
            InvalidArityError: If the view count does not fit the layout.
            ValueError: If `kind` is not a known layout kind.
        """
        kind = LayoutKind(kind)
        meta = get_layout_meta(kind)
        config = config or LayoutConfig()

        _check_arity(meta, views)
        if meta.max_views is not None and len(views) > meta.max_views:
            logger.debug(
                f"{kind.value} consumes {meta.max_views} view(s); "
                f"ignoring {len(views) - meta.max_views} extra"
            )
            views = views[: meta.max_views]

        variable = _layout_variable(meta.variable or f"{views[0].name}Layout", views)
        settings = self.settings(meta, config)

        lines = self._declaration(meta, variable, settings)
        lines.extend(self._views(meta, variable, views, config))

        logger.debug(f"Generated {kind.value} with {len(views)} view(s)")
        return "\n".join(lines) + "\n"

    def settings(self, meta: LayoutKindMeta, config: LayoutConfig) -> list[Setting]:
        """Translate configuration into ordered settings for a layout.

        Only facets the layout honours are considered, in FACET_ORDER.
        """
        settings: list[Setting] = []
        for facet in FACET_ORDER:
            if facet in meta.facets:
                settings.extend(_facet_settings(facet, meta.kind, config))
        return settings

    def _declaration(
        self, meta: LayoutKindMeta, variable: str, settings: list[Setting]
    ) -> list[str]:
        """Declare the layout and apply its configuration."""
        lines = [f"let {variable} = {meta.kind.value}()"]

        if meta.style == ConfigStyle.CHAINED:
            chained = [s for s in settings if not s.path]
            lines.extend(f"{CHAIN_INDENT}{s.chain()}" for s in chained)
            settings = [s for s in settings if s.path]

        lines.extend(s.statement(variable) for s in settings)
        return lines

    def _views(
        self,
        meta: LayoutKindMeta,
        variable: str,
        views: Sequence[ViewSpec],
        config: LayoutConfig,
    ) -> list[str]:
        """Construct views and attach them to the layout."""
        lines: list[str] = []
        if meta.section_comment:
            lines.extend(["", meta.section_comment])

        if meta.attach == AttachIdiom.BINARY:
            left, right = views
            lines.append(self._declare_view(left))
            lines.append(self._declare_view(right))
            lines.extend(["", "// Assign views using operators"])
            lines.append(f"{variable} <+ {left.name}")
            lines.append(f"{variable} +> {right.name}")
            return lines

        if meta.attach == AttachIdiom.BULK:
            collection = _layout_variable(_collection_name(variable), views)
            lines.append(f"var {collection}: [UIView] = []")
            for view in views:
                lines.append(self._declare_view(view))
                lines.append(f"{collection}.append({view.name})")
            lines.extend(["", "// Assign views to grid"])
            lines.append(f"{variable}.views = {collection}")
            return lines

        filler = meta.default_spacing and config.spacing is None
        for index, view in enumerate(views):
            lines.append(self._declare_view(view))
            lines.append(f"{variable} + {view.name}")
            if filler and index < len(views) - 1:
                lines.append(f"{variable} + {DEFAULT_STACK_SPACING} // Default spacing")
        return lines

    def _declare_view(self, view: ViewSpec) -> str:
        return f"let {view.name} = {self._create_view(view)}"


def _layout_variable(base: str, views: Sequence[ViewSpec]) -> str:
    """`base`, or `base2`, `base3`, ... when a view already uses the name."""
    taken = {view.name for view in views}
    variable = base
    suffix = 2
    while variable in taken:
        variable = f"{base}{suffix}"
        suffix += 1
    return variable


def _check_arity(meta: LayoutKindMeta, views: Sequence[ViewSpec]) -> None:
    """Enforce a layout's view-count contract."""
    count = len(views)
    if meta.exact_views is not None and count != meta.exact_views:
        raise InvalidArityError(meta.kind, str(meta.exact_views), count)
    if count < meta.min_views:
        raise InvalidArityError(meta.kind, f"at least {meta.min_views}", count)


def _collection_name(variable: str) -> str:
    """Name of the array collecting grid views (gridLayout -> gridViews)."""
    stem = variable[: -len("Layout")] if variable.endswith("Layout") else variable
    return f"{stem}Views"


def _facet_settings(
    facet: ConfigFacet, kind: LayoutKind, config: LayoutConfig
) -> list[Setting]:
    """Settings for a single facet. Absent values produce nothing."""
    if facet == ConfigFacet.AXIS and config.axis is not None:
        return [Setting("axis", f".{config.axis}")]

    if facet == ConfigFacet.SPACING and config.spacing is not None:
        if kind == LayoutKind.GRID:
            return [
                Setting("verticalSpacing", str(config.spacing)),
                Setting("horizontalSpacing", str(config.spacing)),
            ]
        return [Setting("spacing", str(config.spacing))]

    if facet == ConfigFacet.INTER_ITEM_SPACING and config.inter_item_spacing is not None:
        return [Setting("interItemSpacing", str(config.inter_item_spacing))]

    if facet == ConfigFacet.LINE_SPACING and config.line_spacing is not None:
        return [Setting("lineSpacing", str(config.line_spacing))]

    if facet == ConfigFacet.DISTRIBUTION and config.distribution is not None:
        return [Setting("distribution", f".{config.distribution}")]

    if facet == ConfigFacet.PADDING and config.padding is not None:
        value = padding_arguments(config.padding)
        if kind == LayoutKind.DOUBLE:
            return [
                Setting("padding", value, is_call=True, path=".leftFrameLayout"),
                Setting("padding", value, is_call=True, path=".rightFrameLayout"),
            ]
        return [Setting("padding", value, is_call=True)]

    if facet == ConfigFacet.ALIGNMENT and config.alignment is not None:
        vertical = config.alignment.vertical or "center"
        horizontal = config.alignment.horizontal or "center"
        return [Setting("align", f".{vertical}, .{horizontal}", is_call=True)]

    if facet == ConfigFacet.GRID:
        return [
            Setting("rows", str(config.rows or DEFAULT_GRID_ROWS)),
            Setting("columns", str(config.columns or DEFAULT_GRID_COLUMNS)),
        ]

    if facet == ConfigFacet.OVERLAP and config.is_overlapped is not None:
        return [Setting("isOverlapped", "true" if config.is_overlapped else "false")]

    return []


def padding_arguments(padding: int | float | EdgeInsets) -> str:
    """Argument list for a `padding(...)` call.

    Example:
        >>> padding_arguments(20)
        '20'
        >>> padding_arguments(EdgeInsets(top=10))
        'top: 10, left: 0, bottom: 0, right: 0'
    """
    if isinstance(padding, EdgeInsets):
        return (
            f"top: {padding.top}, left: {padding.left}, "
            f"bottom: {padding.bottom}, right: {padding.right}"
        )
    return str(padding)


_default_generator = LayoutGenerator()


def generate_layout(
    kind: LayoutKind | str,
    views: Sequence[ViewSpec],
    config: LayoutConfig | None = None,
) -> str:
    """Generate Swift source with the default generator.

    See LayoutGenerator.generate for arguments and errors.
    """
    return _default_generator.generate(kind, views, config)


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
