"""Tests for FrameLayoutKit source generation."""

import re

import pytest

from src.model import AlignmentSpec, EdgeInsets, LayoutConfig, ViewSpec
from src.schema import LayoutKind

from .lib import (
    DEFAULT_STACK_SPACING,
    InvalidArityError,
    LayoutGenerator,
    generate_layout,
    padding_arguments,
)

FILLER = f"stackLayout + {DEFAULT_STACK_SPACING} // Default spacing"


def _views(*names: str) -> list[ViewSpec]:
    return [ViewSpec(name=name) for name in names]


def _attach_operands(code: str, name: str) -> int:
    """Count attach-operator uses with `name` as the operand."""
    pattern = rf"(\+|<\+|\+>)\s+{name}\s*$|\.append\({name}\)"
    return len(re.findall(pattern, code, flags=re.MULTILINE))


# =============================================================================
# Stack layouts
# =============================================================================


class TestStackLayouts:
    """Tests for VStackLayout / HStackLayout generation."""

    @pytest.mark.unit
    def test_vstack_with_spacing(self):
        """Declares the stack, sets spacing and attaches the view."""
        code = generate_layout(
            LayoutKind.VSTACK,
            [ViewSpec(name="a", kind="UILabel", text="Hi")],
            LayoutConfig(spacing=8),
        )

        assert "let stackLayout = VStackLayout()" in code
        assert "stackLayout.spacing = 8" in code
        assert 'a.text = "Hi"' in code
        assert "stackLayout + a" in code
        assert "Default spacing" not in code

    @pytest.mark.unit
    def test_default_spacing_filler_between_views(self):
        """Omitted spacing inserts one filler between consecutive attaches."""
        code = generate_layout(LayoutKind.VSTACK, _views("a", "b"), LayoutConfig())
        lines = code.splitlines()

        assert code.count(FILLER) == 1
        assert lines.index("stackLayout + a") < lines.index(FILLER)
        assert lines.index(FILLER) < lines.index("stackLayout + b")

    @pytest.mark.unit
    def test_filler_count_for_three_views(self):
        """N views produce N-1 fillers."""
        code = generate_layout(LayoutKind.HSTACK, _views("a", "b", "c"))
        assert code.count(FILLER) == 2
        assert "let stackLayout = HStackLayout()" in code

    @pytest.mark.unit
    def test_zero_spacing_is_emitted(self):
        """Spacing of zero counts as given."""
        code = generate_layout(LayoutKind.VSTACK, _views("a", "b"), LayoutConfig(spacing=0))
        assert "stackLayout.spacing = 0" in code
        assert "Default spacing" not in code

    @pytest.mark.unit
    def test_statement_facets_in_order(self):
        """Configuration statements follow the fixed facet order."""
        config = LayoutConfig(
            padding=16,
            alignment=AlignmentSpec(vertical="top"),
            distribution="fill",
            spacing=4,
        )
        code = generate_layout(LayoutKind.VSTACK, _views("a"), config)
        lines = code.splitlines()

        assert lines[1:5] == [
            "stackLayout.spacing = 4",
            "stackLayout.distribution = .fill",
            "stackLayout.padding(16)",
            "stackLayout.align(.top, .center)",
        ]

    @pytest.mark.unit
    def test_section_comment(self):
        """Stack output labels the view section."""
        code = generate_layout(LayoutKind.VSTACK, _views("a"))
        assert "// Add views to stack" in code


# =============================================================================
# DoubleFrameLayout
# =============================================================================


class TestDoubleFrameLayout:
    """Tests for DoubleFrameLayout generation."""

    @pytest.mark.unit
    def test_binary_operators(self):
        """Left and right views use <+ and +>."""
        code = generate_layout(LayoutKind.DOUBLE, _views("icon", "title"))

        assert "let doubleLayout = DoubleFrameLayout()" in code
        assert "doubleLayout <+ icon" in code
        assert "doubleLayout +> title" in code
        assert "// Assign views using operators" in code

    @pytest.mark.unit
    def test_padding_applies_to_both_frames(self):
        """Padding is set on each sub-frame."""
        code = generate_layout(
            LayoutKind.DOUBLE, _views("a", "b"), LayoutConfig(padding=10)
        )
        assert "doubleLayout.leftFrameLayout.padding(10)" in code
        assert "doubleLayout.rightFrameLayout.padding(10)" in code

    @pytest.mark.unit
    def test_overlap_and_axis(self):
        """Axis and overlap flag are emitted as statements."""
        code = generate_layout(
            LayoutKind.DOUBLE,
            _views("a", "b"),
            LayoutConfig(axis="vertical", is_overlapped=True),
        )
        assert "doubleLayout.axis = .vertical" in code
        assert "doubleLayout.isOverlapped = true" in code

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 1, 3])
    def test_wrong_arity_raises(self, count):
        """Anything other than two views is rejected."""
        views = _views(*[f"v{i}" for i in range(count)])
        with pytest.raises(InvalidArityError) as exc_info:
            generate_layout(LayoutKind.DOUBLE, views)

        assert exc_info.value.kind == LayoutKind.DOUBLE
        assert exc_info.value.expected == "2"
        assert exc_info.value.actual == count

    @pytest.mark.unit
    def test_arity_error_is_value_error(self):
        """InvalidArityError is a ValueError for tool boundaries."""
        with pytest.raises(ValueError, match="DoubleFrameLayout requires 2"):
            generate_layout(LayoutKind.DOUBLE, _views("v1"))


# =============================================================================
# Other layouts
# =============================================================================


class TestOtherLayouts:
    """Tests for frame, z-stack, grid, scroll and flow layouts."""

    @pytest.mark.unit
    def test_frame_layout_chained(self):
        """FrameLayout is named after its view and configured by chaining."""
        config = LayoutConfig(
            padding=EdgeInsets(top=10, left=15, bottom=10, right=15),
            alignment=AlignmentSpec(horizontal="left"),
        )
        code = generate_layout(LayoutKind.FRAME, _views("avatar"), config)

        assert code.startswith(
            "let avatarLayout = FrameLayout()\n"
            "    .padding(top: 10, left: 15, bottom: 10, right: 15)\n"
            "    .align(.center, .left)\n"
        )
        assert "avatarLayout + avatar" in code

    @pytest.mark.unit
    def test_frame_layout_ignores_extra_views(self):
        """Only the first view is consumed."""
        code = generate_layout(LayoutKind.FRAME, _views("a", "b"))
        assert "aLayout + a" in code
        assert "let b" not in code

    @pytest.mark.unit
    def test_layout_variable_avoids_view_names(self):
        """A view already named like the layout pushes the layout to a suffix."""
        config = LayoutConfig(spacing=4)
        code = generate_layout(LayoutKind.VSTACK, _views("stackLayout", "stackLayout2"), config)

        assert "let stackLayout3 = VStackLayout()" in code
        assert "stackLayout3 + stackLayout\n" in code
        assert code.count("let stackLayout =") == 1

    @pytest.mark.unit
    def test_frame_layout_without_views_raises(self):
        """FrameLayout needs a view to name the layout."""
        with pytest.raises(InvalidArityError):
            generate_layout(LayoutKind.FRAME, [])

    @pytest.mark.unit
    def test_grid_defaults_and_bulk_attach(self):
        """Grid always emits rows/columns and assigns views in bulk."""
        code = generate_layout(LayoutKind.GRID, _views("a", "b"))

        assert "gridLayout.rows = 2" in code
        assert "gridLayout.columns = 3" in code
        assert "var gridViews: [UIView] = []" in code
        assert "gridViews.append(a)" in code
        assert "gridLayout.views = gridViews" in code

    @pytest.mark.unit
    def test_grid_spacing(self):
        """Grid spacing sets both directions."""
        code = generate_layout(
            LayoutKind.GRID, _views("a"), LayoutConfig(spacing=6, rows=4, columns=1)
        )
        assert "gridLayout.verticalSpacing = 6" in code
        assert "gridLayout.horizontalSpacing = 6" in code
        assert "gridLayout.rows = 4" in code
        assert "gridLayout.columns = 1" in code

    @pytest.mark.unit
    def test_flow_layout_chained(self):
        """Flow layout configuration is a builder chain."""
        config = LayoutConfig(
            axis="horizontal",
            inter_item_spacing=8,
            line_spacing=12,
            distribution="left",
            padding=16,
        )
        code = generate_layout(LayoutKind.FLOW, _views("tag"), config)

        assert code.startswith(
            "let flowLayout = FlowFrameLayout()\n"
            "    .axis(.horizontal)\n"
            "    .interItemSpacing(8)\n"
            "    .lineSpacing(12)\n"
            "    .distribution(.left)\n"
            "    .padding(16)\n"
        )

    @pytest.mark.unit
    def test_zstack_ignores_unsupported_facets(self):
        """Facets a layout does not honour are not emitted."""
        code = generate_layout(
            LayoutKind.ZSTACK, _views("a"), LayoutConfig(axis="vertical", spacing=2)
        )
        assert ".axis" not in code
        assert "    .spacing(2)" in code

    @pytest.mark.unit
    def test_scroll_stack(self):
        """Scroll stack uses statements and the + operator."""
        code = generate_layout(
            LayoutKind.SCROLL_STACK, _views("row"), LayoutConfig(axis="horizontal")
        )
        assert "let scrollStack = ScrollStackView()" in code
        assert "scrollStack.axis = .horizontal" in code
        assert "scrollStack + row" in code

    @pytest.mark.unit
    def test_unknown_layout_kind(self):
        """Unknown layout kinds are rejected."""
        with pytest.raises(ValueError):
            generate_layout("TableLayout", _views("a"))


# =============================================================================
# Properties over all layouts
# =============================================================================


def _valid_views(kind: LayoutKind) -> list[ViewSpec]:
    if kind == LayoutKind.DOUBLE:
        return _views("first", "second")
    if kind == LayoutKind.FRAME:
        return _views("first")
    return _views("first", "second", "third")


class TestGenerationProperties:
    """Properties that hold for every layout kind."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(LayoutKind))
    def test_deterministic(self, kind):
        """Identical input produces byte-identical output."""
        views = _valid_views(kind)
        config = LayoutConfig(spacing=4, padding=8)
        assert generate_layout(kind, views, config) == generate_layout(kind, views, config)

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(LayoutKind))
    def test_each_view_declared_and_attached_once(self, kind):
        """Every view is declared once and attached once."""
        views = _valid_views(kind)
        code = generate_layout(kind, views)

        for view in views:
            assert len(re.findall(rf"\blet {view.name} = ", code)) == 1
            assert _attach_operands(code, view.name) == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(LayoutKind))
    def test_ends_with_newline(self, kind):
        """Output always ends in a newline."""
        assert generate_layout(kind, _valid_views(kind)).endswith("\n")

    @pytest.mark.unit
    def test_custom_view_factory(self):
        """The view factory is injectable."""
        generator = LayoutGenerator(view_factory=lambda spec: f"Custom{spec.name}()")
        code = generator.generate(LayoutKind.VSTACK, _views("a"), LayoutConfig(spacing=1))
        assert "let a = Customa()" in code


class TestPaddingArguments:
    """Tests for padding argument rendering."""

    @pytest.mark.unit
    def test_uniform(self):
        assert padding_arguments(12) == "12"

    @pytest.mark.unit
    def test_edge_insets(self):
        insets = EdgeInsets(top=1, left=2, bottom=3, right=4)
        assert padding_arguments(insets) == "top: 1, left: 2, bottom: 3, right: 4"
