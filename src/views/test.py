"""Unit tests for view construction snippets."""

import pytest

from src.model import ViewSpec

from .lib import create_view, image_expression, swift_literal


class TestBareConstruction:
    """Views with nothing to configure use a bare constructor."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("UILabel", "UILabel()"),
            ("UIButton", "UIButton(type: .system)"),
            ("UIImageView", "UIImageView()"),
            ("UIView", "UIView()"),
            ("UIScrollView", "UIScrollView()"),
        ],
    )
    def test_bare(self, kind, expected):
        """No content and no properties means no construction block."""
        assert create_view(ViewSpec(name="v", kind=kind)) == expected


class TestContentBlocks:
    """Views with content are built inside a construction block."""

    @pytest.mark.unit
    def test_label_text(self):
        """Labels set their text."""
        code = create_view(ViewSpec(name="title", kind="UILabel", text="Hi"))
        assert code == (
            "{\n"
            "    let label = UILabel()\n"
            '    label.text = "Hi"\n'
            "    return label\n"
            "}()"
        )

    @pytest.mark.unit
    def test_button_title(self):
        """Buttons set their title for the normal state."""
        code = create_view(ViewSpec(name="ok", kind="UIButton", text="OK"))
        assert 'button.setTitle("OK", for: .normal)' in code
        assert code.startswith("{\n    let button = UIButton(type: .system)")
        assert code.endswith("return button\n}()")

    @pytest.mark.unit
    def test_text_field_placeholder(self):
        """Text fields use the text as a placeholder."""
        code = create_view(ViewSpec(name="email", kind="UITextField", text="Email"))
        assert 'textField.placeholder = "Email"' in code

    @pytest.mark.unit
    def test_image_named(self):
        """Plain image references use the asset catalog."""
        code = create_view(ViewSpec(name="logo", kind="UIImageView", image="Logo"))
        assert 'imageView.image = UIImage(named: "Logo")' in code

    @pytest.mark.unit
    def test_image_system(self):
        """System-prefixed references use SF Symbols."""
        code = create_view(
            ViewSpec(name="icon", kind="UIImageView", image="systemName: star.fill")
        )
        assert 'UIImage(systemName: "star.fill")' in code

    @pytest.mark.unit
    def test_text_ignored_for_plain_view(self):
        """Kinds without a content slot ignore text."""
        assert create_view(ViewSpec(name="box", kind="UIView", text="x")) == "UIView()"

    @pytest.mark.unit
    def test_properties_force_block(self):
        """Properties are assigned inside the block in insertion order."""
        code = create_view(
            ViewSpec(
                name="header",
                kind="UIView",
                properties={"backgroundColor": ".systemBlue", "isHidden": False},
            )
        )
        lines = code.splitlines()
        assert lines[1] == "    let view = UIView()"
        assert lines[2] == "    view.backgroundColor = .systemBlue"
        assert lines[3] == "    view.isHidden = false"

    @pytest.mark.unit
    def test_text_not_escaped(self):
        """Text content is inserted verbatim."""
        code = create_view(ViewSpec(name="q", kind="UILabel", text='say \\"hi\\"'))
        assert 'label.text = "say \\"hi\\""' in code


class TestUnknownKind:
    """Unknown classes degrade gracefully."""

    @pytest.mark.unit
    def test_generic_block(self):
        """Unknown kinds get a generic constructor in a block."""
        code = create_view(ViewSpec(name="map", kind="MKMapView"))
        assert code == "{\n    let view = MKMapView()\n    return view\n}()"

    @pytest.mark.unit
    def test_generic_block_with_properties(self):
        """Properties still apply to unknown kinds."""
        code = create_view(
            ViewSpec(name="map", kind="MKMapView", properties={"showsUserLocation": True})
        )
        assert "view.showsUserLocation = true" in code


class TestHelpers:
    """Tests for helper functions."""

    @pytest.mark.unit
    def test_image_expression_short_prefix(self):
        """The short 'system:' prefix is recognized."""
        assert image_expression("system:heart") == 'UIImage(systemName: "heart")'

    @pytest.mark.unit
    def test_swift_literal(self):
        """Values map to Swift source."""
        assert swift_literal(True) == "true"
        assert swift_literal(None) == "nil"
        assert swift_literal(2) == "2"
        assert swift_literal(".center") == ".center"
