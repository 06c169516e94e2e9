"""Unit tests for MCP tools."""

import pytest

from .convert import convert_autolayout
from .generate import generate_framelayout
from .migrate import generate_migration_guide
from .validate import validate_framelayout

ACTIVATION = """\
NSLayoutConstraint.activate([
    a.widthAnchor.constraint(equalTo: b.widthAnchor)
])
"""


class TestGenerateFramelayout:
    """Tests for generate_framelayout tool."""

    @pytest.mark.unit
    def test_result_shape(self):
        """Result carries code and metadata."""
        result = generate_framelayout(
            "DoubleFrameLayout",
            [{"name": "icon", "type": "UIImageView", "image": "systemName:star"}, {"name": "title"}],
            {"padding": {"top": 4, "left": 8, "bottom": 4, "right": 8}},
        )

        assert result["layout_type"] == "DoubleFrameLayout"
        assert result["line_count"] == len(result["code"].strip().split("\n"))
        assert "doubleLayout <+ icon" in result["code"]
        assert 'UIImage(systemName: "star")' in result["code"]
        assert "leftFrameLayout.padding(top: 4, left: 8, bottom: 4, right: 8)" in result["code"]

    @pytest.mark.unit
    def test_unknown_layout_type(self):
        with pytest.raises(ValueError, match="Unknown layout type"):
            generate_framelayout("TableLayout", [{"name": "a"}])

    @pytest.mark.unit
    def test_invalid_view(self):
        """Malformed views become ValueError."""
        with pytest.raises(ValueError, match="Invalid layout input"):
            generate_framelayout("VStackLayout", [{"name": "not an identifier"}])

    @pytest.mark.unit
    def test_invalid_configuration(self):
        with pytest.raises(ValueError, match="Invalid layout input"):
            generate_framelayout("GridFrameLayout", [{"name": "a"}], {"rows": 0})

    @pytest.mark.unit
    def test_duplicate_names(self):
        with pytest.raises(ValueError, match="Duplicate view names: a"):
            generate_framelayout("VStackLayout", [{"name": "a"}, {"name": "a"}])

    @pytest.mark.unit
    def test_arity(self):
        with pytest.raises(ValueError, match="requires 2"):
            generate_framelayout("DoubleFrameLayout", [{"name": "a"}])


class TestConvertAutolayout:
    """Tests for convert_autolayout tool."""

    @pytest.mark.unit
    def test_strategy_from_environment(self, monkeypatch):
        """MIGRATION_STRATEGY sets the default strategy."""
        monkeypatch.setenv("MIGRATION_STRATEGY", "aggressive")
        result = convert_autolayout(ACTIVATION)
        assert "NSLayoutConstraint" not in result["code"]

    @pytest.mark.unit
    def test_explicit_strategy_wins(self, monkeypatch):
        monkeypatch.setenv("MIGRATION_STRATEGY", "aggressive")
        result = convert_autolayout(ACTIVATION, {"migrationStrategy": "conservative"})
        assert "// TODO: Convert to FrameLayoutKit" in result["code"]
        assert ACTIVATION.rstrip("\n") in result["code"]

    @pytest.mark.unit
    def test_invalid_options(self):
        with pytest.raises(ValueError, match="Invalid conversion options"):
            convert_autolayout(ACTIVATION, {"migration_strategy": "yolo"})


class TestValidateFramelayout:
    """Tests for validate_framelayout tool."""

    @pytest.mark.unit
    def test_default_level(self, monkeypatch):
        """VALIDATION_CHECK_LEVEL sets the default level."""
        monkeypatch.setenv("VALIDATION_CHECK_LEVEL", "semantic")
        assert validate_framelayout("stack + + view1")["is_valid"] is True

    @pytest.mark.unit
    def test_constraint_code_invalid(self):
        result = validate_framelayout(ACTIVATION, "syntax")
        assert result["is_valid"] is False
        assert result["errors"]

    @pytest.mark.unit
    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown check level"):
            validate_framelayout("", "deep")


class TestGenerateMigrationGuide:
    """Tests for generate_migration_guide tool."""

    @pytest.mark.unit
    def test_project_root_default(self, monkeypatch, tmp_path):
        """PROJECT_ROOT is used when no input is given."""
        (tmp_path / "A.swift").write_text("let s = UIStackView()\n")
        monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
        monkeypatch.delenv("GUIDE_OUTPUT_FORMAT", raising=False)

        result = generate_migration_guide()

        assert result["file_count"] == 1
        assert result["output_format"] == "markdown"
        assert result["rendered"].startswith("# FrameLayoutKit Migration Guide")

    @pytest.mark.unit
    def test_file_list(self, monkeypatch):
        monkeypatch.delenv("PROJECT_ROOT", raising=False)
        result = generate_migration_guide(swift_files=["SettingsViewController.swift"])

        assert result["complexity"] == "medium"
        assert result["estimated_effort"] == "2-3 weeks"
        assert "SettingsViewController.swift: Good candidate for migration" in result["recommendations"]

    @pytest.mark.unit
    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            generate_migration_guide(swift_files=[], output_format="pdf")
