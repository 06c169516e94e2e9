"""Unit tests for the schema vocabulary."""

import pytest

from .lib import (
    FACET_ORDER,
    LAYOUT_REGISTRY,
    VIEW_REGISTRY,
    AttachIdiom,
    ConfigFacet,
    ConfigStyle,
    ContentSlot,
    LayoutKind,
    ViewKind,
    export_vocabulary,
    get_layout_meta,
    get_view_meta,
    resolve_view_kind,
)


class TestViewRegistry:
    """Tests for VIEW_REGISTRY."""

    @pytest.mark.unit
    def test_all_view_kinds_registered(self):
        """Every ViewKind has construction metadata."""
        for kind in ViewKind:
            assert kind in VIEW_REGISTRY
            assert VIEW_REGISTRY[kind].kind == kind

    @pytest.mark.unit
    def test_local_names_are_identifiers(self):
        """Block-local variable names are valid identifiers."""
        for meta in VIEW_REGISTRY.values():
            assert meta.local_name.isidentifier()

    @pytest.mark.unit
    def test_content_slots(self):
        """Content-bearing kinds declare their slot."""
        assert VIEW_REGISTRY[ViewKind.LABEL].content == ContentSlot.TEXT
        assert VIEW_REGISTRY[ViewKind.BUTTON].content == ContentSlot.TITLE
        assert VIEW_REGISTRY[ViewKind.TEXT_FIELD].content == ContentSlot.PLACEHOLDER
        assert VIEW_REGISTRY[ViewKind.IMAGE_VIEW].content == ContentSlot.IMAGE
        assert VIEW_REGISTRY[ViewKind.VIEW].content == ContentSlot.NONE


class TestLayoutRegistry:
    """Tests for LAYOUT_REGISTRY."""

    @pytest.mark.unit
    def test_all_layout_kinds_registered(self):
        """Every LayoutKind has generation metadata."""
        assert set(LAYOUT_REGISTRY) == set(LayoutKind)

    @pytest.mark.unit
    def test_double_frame_arity(self):
        """DoubleFrameLayout needs exactly two views and binary attach."""
        meta = LAYOUT_REGISTRY[LayoutKind.DOUBLE]
        assert meta.exact_views == 2
        assert meta.attach == AttachIdiom.BINARY

    @pytest.mark.unit
    def test_frame_consumes_one_view(self):
        """FrameLayout ignores extra views instead of rejecting them."""
        meta = LAYOUT_REGISTRY[LayoutKind.FRAME]
        assert meta.exact_views is None
        assert meta.max_views == 1
        assert meta.variable is None

    @pytest.mark.unit
    def test_only_plain_stacks_use_default_spacing(self):
        """Default spacing filler applies to VStack and HStack only."""
        with_filler = {k for k, m in LAYOUT_REGISTRY.items() if m.default_spacing}
        assert with_filler == {LayoutKind.VSTACK, LayoutKind.HSTACK}

    @pytest.mark.unit
    def test_grid_uses_bulk_attach(self):
        """Grid attaches through an array."""
        meta = LAYOUT_REGISTRY[LayoutKind.GRID]
        assert meta.attach == AttachIdiom.BULK
        assert ConfigFacet.GRID in meta.facets

    @pytest.mark.unit
    def test_config_styles(self):
        """Each layout picks one configuration style."""
        assert LAYOUT_REGISTRY[LayoutKind.FRAME].style == ConfigStyle.CHAINED
        assert LAYOUT_REGISTRY[LayoutKind.VSTACK].style == ConfigStyle.STATEMENTS


class TestLookup:
    """Tests for lookup helpers."""

    @pytest.mark.unit
    def test_resolve_view_kind(self):
        """Known class names resolve, unknown ones return None."""
        assert resolve_view_kind("UILabel") == ViewKind.LABEL
        assert resolve_view_kind("UISwitch") is None

    @pytest.mark.unit
    def test_get_view_meta_unknown(self):
        """Unknown class names have no metadata."""
        assert get_view_meta("MKMapView") is None
        assert get_view_meta("UIButton").local_name == "button"

    @pytest.mark.unit
    def test_get_layout_meta_accepts_strings(self):
        """Layout metadata can be looked up by string value."""
        assert get_layout_meta("GridFrameLayout").kind == LayoutKind.GRID

    @pytest.mark.unit
    def test_get_layout_meta_unknown_raises(self):
        """Unknown layout names raise ValueError."""
        with pytest.raises(ValueError):
            get_layout_meta("TableLayout")


class TestFacetOrder:
    """Tests for the fixed configuration emission order."""

    @pytest.mark.unit
    def test_order(self):
        """Facets are emitted in the documented order."""
        assert FACET_ORDER == (
            ConfigFacet.AXIS,
            ConfigFacet.SPACING,
            ConfigFacet.INTER_ITEM_SPACING,
            ConfigFacet.LINE_SPACING,
            ConfigFacet.DISTRIBUTION,
            ConfigFacet.PADDING,
            ConfigFacet.ALIGNMENT,
            ConfigFacet.GRID,
            ConfigFacet.OVERLAP,
        )


class TestExportVocabulary:
    """Tests for vocabulary export."""

    @pytest.mark.unit
    def test_export_shape(self):
        """Exported vocabulary lists every view and layout."""
        vocab = export_vocabulary()
        assert len(vocab["views"]) == len(ViewKind)
        assert len(vocab["layouts"]) == len(LayoutKind)
        assert "justified" in vocab["distributions"]

    @pytest.mark.unit
    def test_layout_facets_in_order(self):
        """Exported facets follow FACET_ORDER."""
        vocab = export_vocabulary()
        flow = next(l for l in vocab["layouts"] if l["kind"] == "FlowFrameLayout")
        assert flow["facets"] == [
            "axis",
            "inter_item_spacing",
            "line_spacing",
            "distribution",
            "padding",
        ]
