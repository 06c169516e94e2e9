"""Unit tests for validation module."""

import pytest

from src.generator import generate_layout
from src.model import LayoutConfig, ViewSpec
from src.schema import LayoutKind
from src.validation import DSLValidator, REPORT_TITLE, validate_source

CONSTRAINT_SOURCE = """\
NSLayoutConstraint.activate([
    title.topAnchor.constraint(equalTo: view.topAnchor, constant: 20)
])
"""


def _messages(diagnostics):
    return [d.message for d in diagnostics]


class TestSyntaxChecks:
    """Tests for syntax-level rules."""

    @pytest.mark.unit
    def test_double_attach_operator(self):
        """A doubled + is an error."""
        result = validate_source("stack + + view1", "full")

        assert result.is_valid is False
        assert (
            "Double + operator detected. Each + should have a view on both sides."
            in _messages(result.errors)
        )

    @pytest.mark.unit
    def test_constraint_activation_forbidden(self):
        """Leftover constraint activation is reported at syntax level."""
        result = validate_source(CONSTRAINT_SOURCE, "syntax")

        assert result.is_valid is False
        rule_ids = {d.rule_id for d in result.errors}
        assert "forbidden.constraint-activation" in rule_ids
        assert "forbidden.layout-anchor" in rule_ids
        assert "forbidden.constraint-call" in rule_ids

    @pytest.mark.unit
    def test_autoresizing_forbidden(self):
        result = validate_source("label.translatesAutoresizingMaskIntoConstraints = false", "syntax")
        assert [d.rule_id for d in result.errors] == ["forbidden.autoresizing"]

    @pytest.mark.unit
    def test_multiple_left_on_same_layout(self):
        """Two <+ onto one layout is an error."""
        result = validate_source("layout <+ a\nlayout <+ b\n", "syntax")
        assert "operator.multiple-left" in {d.rule_id for d in result.errors}

    @pytest.mark.unit
    def test_left_on_different_layouts_allowed(self):
        """Each DoubleFrameLayout may have its own left view."""
        result = validate_source("first <+ a\nsecond <+ b\nfirst +> c\nsecond +> d\n", "syntax")
        assert result.is_valid

    @pytest.mark.unit
    def test_multiple_right(self):
        result = validate_source("layout +> a\nlayout +> b\n", "syntax")
        assert "operator.multiple-right" in {d.rule_id for d in result.errors}

    @pytest.mark.unit
    def test_invalid_chain_reported_once(self):
        """Each distinct unknown chain fragment is reported once."""
        source = "let a = FrameLayout()\n    .bogus(1)\nlet b = FrameLayout().bogus(2)\n"
        result = validate_source(source, "syntax")

        assert _messages(result.errors) == ["Invalid chain method: ).bogus("]

    @pytest.mark.unit
    def test_allowed_chain(self):
        source = "let a = FrameLayout()\n    .padding(8)\n    .align(.top, .left)\n"
        assert validate_source(source, "syntax").is_valid

    @pytest.mark.unit
    def test_syntax_level_skips_semantics(self):
        source = "let g = GridFrameLayout()\ng.views = []\n"
        result = validate_source(source, "syntax")
        assert result.warnings == []


class TestSemanticChecks:
    """Tests for structural semantic rules."""

    @pytest.mark.unit
    def test_empty_grid(self):
        result = validate_source("let g = GridFrameLayout()\ng.views = []\n", "semantic")
        assert _messages(result.warnings) == ["GridFrameLayout has empty views array"]
        assert result.is_valid

    @pytest.mark.unit
    def test_overfilled_double_frame(self):
        source = "let d = DoubleFrameLayout()\nd <+ a\nd +> b\nd + c\n"
        result = validate_source(source, "semantic")
        assert (
            "DoubleFrameLayout should only contain 2 views, but more were added"
            in _messages(result.warnings)
        )

    @pytest.mark.unit
    def test_justified_suggestion(self):
        result = validate_source("let s = VStackLayout()\ns.distribution = .justified\n", "semantic")
        assert _messages(result.suggestions) == [
            "When using .justified distribution, consider setting isJustified = true"
        ]

    @pytest.mark.unit
    def test_semantic_level_skips_syntax(self):
        assert validate_source("stack + + view1", "semantic").is_valid


class TestReport:
    """Tests for the markdown report."""

    @pytest.mark.unit
    def test_clean_report(self):
        result = validate_source("let s = VStackLayout()\ns + title\n")
        assert result.report == f"{REPORT_TITLE}\n\n✅ **No syntax errors found**\n\n"

    @pytest.mark.unit
    def test_report_sections(self):
        source = (
            "stack + + view1\n"
            "let g = GridFrameLayout()\ng.views = []\n"
            "g.distribution = .justified\n"
        )
        report = validate_source(source).report

        assert report.startswith(REPORT_TITLE)
        assert "❌ **1 Errors Found:**\n\n1. Double + operator detected." in report
        assert "⚠️ **1 Warnings:**\n\n1. GridFrameLayout has empty views array\n" in report
        assert "💡 **1 Suggestions:**\n\n1. When using .justified" in report

    @pytest.mark.unit
    def test_to_dict(self):
        data = validate_source("stack + + view1").to_dict()
        assert data["is_valid"] is False
        assert data["errors"][0].startswith("Double + operator")
        assert set(data) == {"is_valid", "errors", "warnings", "suggestions", "report"}


class TestValidatorConfiguration:
    """Tests for levels and injected tables."""

    @pytest.mark.unit
    def test_unknown_level(self):
        with pytest.raises(ValueError):
            validate_source("", "deep")

    @pytest.mark.unit
    def test_custom_allowlist(self):
        validator = DSLValidator(chain_allowlist=frozenset({"bogus"}))
        assert validator.validate("FrameLayout().bogus(1)", "syntax").is_valid

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(LayoutKind))
    def test_generated_code_is_valid(self, kind):
        """Generator output passes full validation."""
        views = [ViewSpec(name="first", kind="UIButton", text="Go"), ViewSpec(name="second")]
        if kind == LayoutKind.FRAME:
            views = views[:1]
        config = LayoutConfig(spacing=4, padding=8, axis="horizontal", rows=1, columns=2)

        result = validate_source(generate_layout(kind, views, config), "full")

        assert result.is_valid, result.report
