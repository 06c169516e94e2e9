"""Unit tests for the layout description model."""

import pytest
from pydantic import ValidationError

from src.schema import ViewKind

from .lib import (
    AlignmentSpec,
    EdgeInsets,
    LayoutConfig,
    ViewSpec,
    export_json_schema,
    export_json_schema_str,
)


class TestViewSpec:
    """Tests for ViewSpec."""

    @pytest.mark.unit
    def test_minimal(self):
        """Only the name is required."""
        view = ViewSpec(name="container")
        assert view.kind == "UIView"
        assert view.text is None
        assert view.image is None
        assert view.properties == {}

    @pytest.mark.unit
    def test_type_alias(self):
        """The wire field 'type' populates kind."""
        view = ViewSpec.model_validate({"name": "title", "type": "UILabel", "text": "Hi"})
        assert view.kind == "UILabel"
        assert view.text == "Hi"

    @pytest.mark.unit
    def test_kind_accepts_enum(self):
        """ViewKind members are stored as their class name."""
        view = ViewSpec(name="title", kind=ViewKind.LABEL)
        assert view.kind == "UILabel"

    @pytest.mark.unit
    def test_unknown_kind_is_kept(self):
        """Unknown classes are accepted for the generic fallback."""
        view = ViewSpec(name="map", kind="MKMapView")
        assert view.kind == "MKMapView"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["1label", "my-label", "has space", ""])
    def test_invalid_identifier_rejected(self, name):
        """Names must be valid identifiers."""
        with pytest.raises(ValidationError):
            ViewSpec(name=name)

    @pytest.mark.unit
    def test_frozen(self):
        """ViewSpec is immutable."""
        view = ViewSpec(name="title")
        with pytest.raises(ValidationError):
            view.name = "other"


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    @pytest.mark.unit
    def test_all_fields_optional(self):
        """An empty config is valid and has no facets set."""
        config = LayoutConfig()
        assert config.spacing is None
        assert config.padding is None
        assert config.alignment is None

    @pytest.mark.unit
    def test_camel_case_aliases(self):
        """camelCase wire names are accepted."""
        config = LayoutConfig.model_validate(
            {"interItemSpacing": 8, "lineSpacing": 12, "isOverlapped": True}
        )
        assert config.inter_item_spacing == 8
        assert config.line_spacing == 12
        assert config.is_overlapped is True

    @pytest.mark.unit
    def test_numeric_padding_keeps_int(self):
        """Integer padding is not widened to float."""
        config = LayoutConfig(padding=20)
        assert config.padding == 20
        assert isinstance(config.padding, int)

    @pytest.mark.unit
    def test_structured_padding_defaults(self):
        """Missing edges default to 0."""
        config = LayoutConfig.model_validate({"padding": {"top": 10, "left": 15}})
        assert config.padding == EdgeInsets(top=10, left=15, bottom=0, right=0)

    @pytest.mark.unit
    def test_enum_values_stored(self):
        """Enum fields store plain values."""
        config = LayoutConfig.model_validate(
            {
                "axis": "horizontal",
                "distribution": "equal",
                "alignment": {"vertical": "center"},
            }
        )
        assert config.axis == "horizontal"
        assert config.distribution == "equal"
        assert config.alignment == AlignmentSpec(vertical="center")

    @pytest.mark.unit
    def test_invalid_distribution_rejected(self):
        """Unknown distribution values are rejected."""
        with pytest.raises(ValidationError):
            LayoutConfig.model_validate({"distribution": "fillEqually"})

    @pytest.mark.unit
    def test_rows_must_be_positive(self):
        """Grid rows must be at least 1."""
        with pytest.raises(ValidationError):
            LayoutConfig(rows=0)


class TestSchemaExport:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_export_json_schema(self):
        """Both models are exported."""
        schema = export_json_schema()
        assert "properties" in schema["view_spec"]
        assert "name" in schema["view_spec"]["properties"]
        assert "properties" in schema["layout_config"]

    @pytest.mark.unit
    def test_export_json_schema_str(self):
        """String export is valid indented JSON."""
        text = export_json_schema_str("layout_config")
        assert text.startswith("{")
        assert "\n  " in text
