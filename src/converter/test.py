"""Tests for Auto Layout to FrameLayoutKit conversion."""

import re

import pytest
from pydantic import ValidationError

from src.rules import PatternRule, RuleClass, Classification

from .lib import (
    REVIEW_MARKER,
    ConversionOptions,
    LegacyConverter,
    convert_legacy_source,
    find_activation_blocks,
)

ACTIVATION_SOURCE = """\
func setupConstraints() {
    NSLayoutConstraint.activate([
        leftView.widthAnchor.constraint(equalTo: rightView.widthAnchor),
        leftView.heightAnchor.constraint(equalToConstant: 44)
    ])
}
"""

UNKNOWN_ACTIVATION_SOURCE = """\
NSLayoutConstraint.activate([
    badge.heightAnchor.constraint(equalToConstant: 20)
])
"""

STACK_SOURCE = """\
let stackView = UIStackView()
stackView.distribution = .fillEqually
stackView.addArrangedSubview(titleLabel)
stackView.addArrangedSubview(subtitleLabel)
"""

COMMENTED_ACTIVATION_SOURCE = """\
NSLayoutConstraint.activate([
    a.widthAnchor.constraint(equalTo: b.widthAnchor), // same width :)
    /* keep ( aligned */ a.topAnchor.constraint(equalTo: v.topAnchor)
])
"""

UNTERMINATED_ACTIVATION_SOURCE = """\
NSLayoutConstraint.activate([
    a.topAnchor.constraint(equalTo: v.topAnchor)
"""

AGGRESSIVE = ConversionOptions(migration_strategy="aggressive")


def _block_text(source: str) -> str:
    (block,) = find_activation_blocks(source)
    return block.text


# =============================================================================
# Activation blocks
# =============================================================================


class TestFindActivationBlocks:
    """Tests for balanced-parenthesis block scanning."""

    @pytest.mark.unit
    def test_finds_nested_block(self):
        """Nested parentheses do not end the block early."""
        blocks = find_activation_blocks(ACTIVATION_SOURCE)

        assert len(blocks) == 1
        assert blocks[0].line == 2
        assert blocks[0].text.startswith("NSLayoutConstraint.activate([")
        assert blocks[0].text.endswith("])")

    @pytest.mark.unit
    def test_parens_in_strings_ignored(self):
        source = 'NSLayoutConstraint.activate(makeConstraints(")("))\nnext()'
        (block,) = find_activation_blocks(source)
        assert block.text == 'NSLayoutConstraint.activate(makeConstraints(")("))'

    @pytest.mark.unit
    def test_unterminated_block_runs_to_end(self):
        (block,) = find_activation_blocks("let a = 1\nNSLayoutConstraint.activate([a")
        assert block.terminated is False
        assert block.line == 2
        assert block.text == "NSLayoutConstraint.activate([a"

    @pytest.mark.unit
    def test_parens_in_comments_ignored(self):
        """Parentheses inside line and block comments are not counted."""
        (block,) = find_activation_blocks(COMMENTED_ACTIVATION_SOURCE)
        assert block.terminated
        assert block.text.endswith("])")
        assert "topAnchor" in block.text

    @pytest.mark.unit
    def test_multiple_blocks(self):
        source = UNKNOWN_ACTIVATION_SOURCE + ACTIVATION_SOURCE
        assert len(find_activation_blocks(source)) == 2


class TestConservativeStrategy:
    """Conservative mode keeps constraint code under a review marker."""

    @pytest.mark.unit
    def test_block_preserved_with_marker(self):
        """The original block survives, prefixed by the marker."""
        block = _block_text(ACTIVATION_SOURCE)
        result = convert_legacy_source(ACTIVATION_SOURCE)

        assert block in result.code
        marker_at = result.code.index(REVIEW_MARKER)
        assert marker_at < result.code.index(block)

    @pytest.mark.unit
    def test_suggestion_in_marker(self):
        result = convert_legacy_source(ACTIVATION_SOURCE)
        assert "    // Suggested: DoubleFrameLayout().distribution(.equal)\n" in result.code

    @pytest.mark.unit
    def test_warning_names_line_and_snippet(self):
        result = convert_legacy_source(ACTIVATION_SOURCE)
        block = _block_text(ACTIVATION_SOURCE)

        assert result.warnings[0] == (
            f"Manual review needed for constraint conversion at line 2: {block[:50]}..."
        )

    @pytest.mark.unit
    def test_heuristic_suggestion_recorded(self):
        result = convert_legacy_source(ACTIVATION_SOURCE)
        activation = [s for s in result.suggestions if s.rule_id.startswith("activation.")]

        assert len(activation) == 1
        assert activation[0].code == "DoubleFrameLayout().distribution(.equal)"
        assert "Equal width constraints" in activation[0].suggestion


class TestAggressiveStrategy:
    """Aggressive mode replaces every activation block."""

    @pytest.mark.unit
    def test_block_replaced(self):
        block = _block_text(ACTIVATION_SOURCE)
        result = convert_legacy_source(ACTIVATION_SOURCE, AGGRESSIVE)

        assert block not in result.code
        assert "NSLayoutConstraint.activate" not in result.code
        assert "    DoubleFrameLayout().distribution(.equal)\n" in result.code

    @pytest.mark.unit
    def test_unknown_block_replaced_with_marker(self):
        """Without a heuristic the block becomes a marker plus a warning."""
        result = convert_legacy_source(UNKNOWN_ACTIVATION_SOURCE, AGGRESSIVE)

        assert "NSLayoutConstraint.activate" not in result.code
        assert result.code.startswith(REVIEW_MARKER)
        assert any("No FrameLayoutKit equivalent" in w for w in result.warnings)

    @pytest.mark.unit
    def test_constraint_count(self):
        source = UNKNOWN_ACTIVATION_SOURCE + ACTIVATION_SOURCE
        result = convert_legacy_source(source, AGGRESSIVE)
        assert result.stats.constraints_converted == 2

    @pytest.mark.unit
    def test_commented_block_fully_replaced(self):
        """A stray paren in a comment does not leave constraint code behind."""
        result = convert_legacy_source(COMMENTED_ACTIVATION_SOURCE, AGGRESSIVE)

        assert result.code == "DoubleFrameLayout().distribution(.equal)\n"
        assert result.stats.constraints_converted == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("strategy", ["conservative", "aggressive"])
    def test_unterminated_block_flagged(self, strategy):
        """An unparseable block is kept under the marker with a warning."""
        options = ConversionOptions(migration_strategy=strategy)
        result = convert_legacy_source(UNTERMINATED_ACTIVATION_SOURCE, options)

        assert result.code == REVIEW_MARKER + "\n" + UNTERMINATED_ACTIVATION_SOURCE
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("Could not parse constraint block at line 1:")
        assert result.stats.constraints_converted == 1
        assert result.stats.total_changes == 1


# =============================================================================
# Containers and anchors
# =============================================================================


class TestContainerPass:
    """Tests for UIStackView conversion."""

    @pytest.mark.unit
    def test_stack_conversion(self):
        result = convert_legacy_source(STACK_SOURCE)

        assert "let stackView = VStackLayout()" in result.code
        assert "stackView.distribution = .equal" in result.code
        assert "stackView + titleLabel" in result.code
        assert "stackView + subtitleLabel" in result.code
        assert result.warnings == [
            "Converted UIStackView 'stackView' to VStackLayout. "
            "Review axis and distribution settings."
        ]
        assert result.stats.stack_views_converted == 1

    @pytest.mark.unit
    def test_horizontal_stack(self):
        source = "let row = UIStackView()\nrow.axis = .horizontal\n"
        result = convert_legacy_source(source)
        assert "let row = HStackLayout()" in result.code

    @pytest.mark.unit
    def test_arranged_subviews_flagged_conservatively(self):
        """Conservative mode keeps the initializer and warns once."""
        source = "let s = UIStackView(arrangedSubviews: [a, b])\n"
        result = convert_legacy_source(source)

        assert result.code == source
        assert len(result.warnings) == 1
        assert "'s'" in result.warnings[0]
        assert result.stats.stack_views_converted == 0

    @pytest.mark.unit
    def test_arranged_subviews_rewritten_aggressively(self):
        source = "let s = UIStackView(arrangedSubviews: [a, b])\n"
        result = convert_legacy_source(source, AGGRESSIVE)

        assert result.code == "let s = VStackLayout() /* arrangedSubviews: [a, b] */\n"
        assert len(result.warnings) == 1
        assert result.stats.stack_views_converted == 1

    @pytest.mark.unit
    def test_method_syntax(self):
        options = ConversionOptions(use_operator_syntax=False)
        result = convert_legacy_source(STACK_SOURCE, options)
        assert "stackView.add(titleLabel)" in result.code

    @pytest.mark.unit
    def test_distribution_table(self):
        source = (
            "let s = UIStackView()\n"
            "s.distribution = .equalCentering\n"
            "s.distribution = .equalSpacing\n"
            "s.distribution = .fillProportionally\n"
        )
        code = convert_legacy_source(source).code
        assert ".distribution = .center" in code
        assert ".distribution = .justified" in code
        assert ".distribution = .fill\n" in code


class TestAnchorPass:
    """Tests for anchor advisories."""

    @pytest.mark.unit
    def test_suggestions_without_rewrite(self):
        source = (
            "title.centerXAnchor.constraint(equalTo: view.centerXAnchor).isActive = true\n"
            "title.topAnchor.constraint(equalTo: view.topAnchor, constant: 20).isActive = true\n"
        )
        result = convert_legacy_source(source)

        assert result.code == source
        texts = [s.suggestion for s in result.suggestions]
        assert "Use .align(.center, .center) in FrameLayoutKit" in texts
        assert "Use .padding(top: 20) in FrameLayoutKit" in texts
        for suggestion in result.suggestions:
            assert suggestion.code == f"// {suggestion.suggestion}"

    @pytest.mark.unit
    def test_one_suggestion_per_match(self):
        source = (
            "a.centerXAnchor.constraint(equalTo: view.centerXAnchor)\n"
            "b.centerXAnchor.constraint(equalTo: view.centerXAnchor)\n"
        )
        result = convert_legacy_source(source)
        assert len(result.suggestions) == 2


# =============================================================================
# Options, stats and injection
# =============================================================================


class TestOptionsAndStats:
    """Tests for option handling and counters."""

    @pytest.mark.unit
    def test_camel_case_aliases(self):
        options = ConversionOptions.model_validate(
            {"migrationStrategy": "aggressive", "useOperatorSyntax": False}
        )
        assert options.aggressive
        assert options.use_operator_syntax is False

    @pytest.mark.unit
    def test_invalid_strategy(self):
        with pytest.raises(ValidationError):
            ConversionOptions(migration_strategy="reckless")

    @pytest.mark.unit
    def test_strip_comments(self):
        source = "// header\nlet s = UIStackView()\n    // note\n"
        result = convert_legacy_source(source, ConversionOptions(preserve_comments=False))
        assert "//" not in result.code

    @pytest.mark.unit
    def test_strip_comments_keeps_trailing_comments(self):
        """Only whole-line comments are removed."""
        source = "// header\nlet s = UIStackView() // main stack\n"
        result = convert_legacy_source(source, ConversionOptions(preserve_comments=False))
        assert result.code.startswith("let s = VStackLayout() // main stack")

    @pytest.mark.unit
    def test_comments_kept_by_default(self):
        source = "// header\nlet s = UIStackView()\n"
        assert "// header" in convert_legacy_source(source).code

    @pytest.mark.unit
    def test_total_changes(self):
        result = convert_legacy_source(ACTIVATION_SOURCE + STACK_SOURCE)
        assert result.stats.total_changes == len(result.warnings) + len(result.suggestions)
        assert result.stats.total_changes > 0

    @pytest.mark.unit
    def test_helper_methods(self):
        options = ConversionOptions(generate_helper_methods=True)
        code = convert_legacy_source(STACK_SOURCE, options).code

        assert "override func layoutSubviews() {" in code
        assert "    stackView.frame = bounds" in code

    @pytest.mark.unit
    def test_to_dict(self):
        data = convert_legacy_source(STACK_SOURCE).to_dict()
        assert set(data) == {"code", "warnings", "suggestions", "stats"}
        assert data["stats"]["stackViewsConverted"] == 1

    @pytest.mark.unit
    def test_untouched_source(self):
        source = "let label = UILabel()\n"
        result = convert_legacy_source(source)
        assert result.code == source
        assert result.stats.total_changes == 0

    @pytest.mark.unit
    def test_custom_container_rules(self):
        """Rule tables are injectable."""
        rule = PatternRule(
            rule_id="container.custom",
            rule_class=RuleClass.CONTAINER,
            pattern=re.compile(r"UIStackView\(\)"),
            classification=Classification.NEEDS_REVIEW,
            rewrite="ZStackLayout()",
            message="Custom rule matched",
        )
        converter = LegacyConverter(container_rules=(rule,))

        conservative = converter.convert("let s = UIStackView()")
        aggressive = converter.convert("let s = UIStackView()", AGGRESSIVE)

        assert conservative.code == "let s = UIStackView()"
        assert conservative.warnings == ["Custom rule matched"]
        assert aggressive.code == "let s = ZStackLayout()"
