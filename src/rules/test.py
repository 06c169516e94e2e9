"""Tests for the conversion and validation rule registry."""

import pytest

from .lib import (
    ACTIVATION_HEURISTICS,
    ANCHOR_RULES,
    CHAIN_METHOD_ALLOWLIST,
    CHAIN_PATTERN,
    CONTAINER_RULES,
    FORBIDDEN_CONSTRUCT_RULES,
    MALFORMED_OPERATOR_RULES,
    PASS_ORDER,
    SEMANTIC_RULES,
    Classification,
    RuleClass,
    Severity,
    all_rule_ids,
    declared_layouts,
)


def _first_heuristic(block: str):
    for rule in ACTIVATION_HEURISTICS:
        match = rule.pattern.search(block)
        if match:
            return rule, match
    return None, None


def _rule(table, rule_id):
    return next(rule for rule in table if rule.rule_id == rule_id)


class TestRegistryShape:
    """Tests for registry-wide invariants."""

    @pytest.mark.unit
    def test_rule_ids_unique(self):
        """Every rule id is unique."""
        ids = all_rule_ids()
        assert len(ids) == len(set(ids))

    @pytest.mark.unit
    def test_pass_order(self):
        """Passes run activation, then containers, then anchors."""
        assert PASS_ORDER == (RuleClass.ACTIVATION, RuleClass.CONTAINER, RuleClass.ANCHOR)

    @pytest.mark.unit
    def test_anchor_rules_are_advisory(self):
        """Anchor rules never carry a rewrite."""
        assert all(rule.rewrite is None for rule in ANCHOR_RULES)

    @pytest.mark.unit
    def test_validator_rules_are_errors(self):
        """Syntax-level validator rules report errors."""
        for rule in FORBIDDEN_CONSTRUCT_RULES + MALFORMED_OPERATOR_RULES:
            assert rule.severity == Severity.ERROR


class TestActivationHeuristics:
    """Tests for the first-match-wins activation heuristics."""

    @pytest.mark.unit
    def test_equal_width(self):
        block = "a.widthAnchor.constraint(equalTo: b.widthAnchor)"
        rule, match = _first_heuristic(block)
        assert rule.rule_id == "activation.equal-width"
        assert rule.expand_rewrite(match) == "DoubleFrameLayout().distribution(.equal)"

    @pytest.mark.unit
    def test_center(self):
        block = "a.centerXAnchor.constraint(equalTo: view.centerXAnchor)"
        rule, _ = _first_heuristic(block)
        assert rule.rule_id == "activation.center"

    @pytest.mark.unit
    def test_edge_pinning_captures_constants(self):
        """Edge pinning substitutes each constant, dropping negative signs."""
        block = (
            "card.topAnchor.constraint(equalTo: view.topAnchor, constant: 10),\n"
            "card.leadingAnchor.constraint(equalTo: view.leadingAnchor, constant: 15),\n"
            "card.trailingAnchor.constraint(equalTo: view.trailingAnchor, constant: -15),\n"
            "card.bottomAnchor.constraint(equalTo: view.bottomAnchor, constant: -20)\n"
        )
        rule, match = _first_heuristic(block)

        assert rule.rule_id == "activation.edge-pinning"
        assert rule.expand_rewrite(match) == (
            "FrameLayout().padding(top: 10, left: 15, bottom: 20, right: 15)"
        )

    @pytest.mark.unit
    def test_first_match_wins(self):
        """Equal width outranks center when both appear."""
        block = (
            "a.widthAnchor.constraint(equalTo: b.widthAnchor),\n"
            "a.centerXAnchor.constraint(equalTo: view.centerXAnchor)"
        )
        rule, _ = _first_heuristic(block)
        assert rule.rule_id == "activation.equal-width"

    @pytest.mark.unit
    def test_no_heuristic(self):
        block = "a.heightAnchor.constraint(equalToConstant: 44)"
        assert _first_heuristic(block) == (None, None)


class TestContainerRules:
    """Tests for UIStackView rewrite rules."""

    @pytest.mark.unit
    def test_vertical_declaration(self):
        rule = _rule(CONTAINER_RULES, "container.stack-declaration")
        match = rule.pattern.search("let stack = UIStackView()")
        assert rule.expand_rewrite(match) == "let stack = VStackLayout()"
        assert "'stack' to VStackLayout" in rule.expand_message(match)

    @pytest.mark.unit
    def test_horizontal_declaration_needs_axis(self):
        """The horizontal rule only matches stacks given a horizontal axis."""
        rule = _rule(CONTAINER_RULES, "container.horizontal-stack")
        horizontal = "let row = UIStackView()\nrow.axis = .horizontal\n"
        vertical = "let row = UIStackView()\nother.axis = .horizontal\n"

        assert rule.pattern.search(horizontal)
        assert rule.pattern.search(vertical) is None

    @pytest.mark.unit
    def test_arranged_subviews_declaration(self):
        """The arrangedSubviews initializer is picked up and needs review."""
        rule = _rule(CONTAINER_RULES, "container.arranged-vertical-stack")
        match = rule.pattern.search("let s = UIStackView(arrangedSubviews: [a, b])")

        assert rule.classification == Classification.NEEDS_REVIEW
        assert rule.expand_rewrite(match) == (
            "let s = VStackLayout() /* arrangedSubviews: [a, b] */"
        )
        assert "'s + view'" in rule.expand_message(match)

    @pytest.mark.unit
    def test_arranged_subviews_axis_picks_one_rule(self):
        """Exactly one arrangedSubviews rule matches a given stack."""
        horizontal = "let row = UIStackView(arrangedSubviews: [a])\nrow.axis = .horizontal\n"
        vertical_rule = _rule(CONTAINER_RULES, "container.arranged-vertical-stack")
        horizontal_rule = _rule(CONTAINER_RULES, "container.arranged-horizontal-stack")

        assert horizontal_rule.pattern.search(horizontal)
        assert vertical_rule.pattern.search(horizontal) is None

    @pytest.mark.unit
    def test_distribution_mapping(self):
        rule = _rule(CONTAINER_RULES, "container.distribution-fillEqually")
        match = rule.pattern.search("stack.distribution = .fillEqually")
        assert rule.expand_rewrite(match) == ".distribution = .equal"
        assert rule.classification == Classification.SAFE

    @pytest.mark.unit
    def test_arranged_subview_syntax_toggle(self):
        rule = _rule(CONTAINER_RULES, "container.arranged-subview")
        match = rule.pattern.search("stack.addArrangedSubview(label)")
        assert rule.expand_rewrite(match) == "stack + label"
        assert rule.expand_rewrite(match, use_operator_syntax=False) == "stack.add(label)"


class TestAnchorRules:
    """Tests for anchor advisories."""

    @pytest.mark.unit
    def test_top_constant(self):
        rule = _rule(ANCHOR_RULES, "anchor.top-constant")
        match = rule.pattern.search(
            "title.topAnchor.constraint(equalTo: view.topAnchor, constant: 20)"
        )
        assert rule.expand_message(match) == "Use .padding(top: 20) in FrameLayoutKit"

    @pytest.mark.unit
    def test_width_constant(self):
        rule = _rule(ANCHOR_RULES, "anchor.width-constant")
        match = rule.pattern.search("icon.widthAnchor.constraint(equalToConstant: 44)")
        assert "width: 44" in rule.expand_message(match)


class TestValidatorTables:
    """Tests for validator patterns and semantic checks."""

    @pytest.mark.unit
    def test_chain_pattern_and_allowlist(self):
        methods = [m.group("method") for m in CHAIN_PATTERN.finditer("FrameLayout().padding(4).bogus(1)")]
        assert methods == ["padding", "bogus"]
        assert "padding" in CHAIN_METHOD_ALLOWLIST
        assert "bogus" not in CHAIN_METHOD_ALLOWLIST

    @pytest.mark.unit
    def test_declared_layouts(self):
        source = "let a = GridFrameLayout()\nvar b: GridFrameLayout = GridFrameLayout()\n"
        assert declared_layouts(source, "GridFrameLayout") == ["a", "b"]

    @pytest.mark.unit
    def test_semantic_checks(self):
        checks = {rule.rule_id: rule.check for rule in SEMANTIC_RULES}

        assert checks["semantic.grid-empty-views"]("let g = GridFrameLayout()\ng.views = []\n")
        assert not checks["semantic.grid-empty-views"]("let g = GridFrameLayout()\ng.views = items\n")
        assert checks["semantic.double-frame-overfilled"](
            "let d = DoubleFrameLayout()\nd <+ a\nd +> b\nd + c\n"
        )
        assert checks["semantic.justified-without-flag"]("s.distribution = .justified\n")
        assert not checks["semantic.justified-without-flag"](
            "s.distribution = .justified\ns.isJustified = true\n"
        )
        assert checks["semantic.tall-horizontal-scroll"](
            "let s = ScrollStackView()\ns.axis = .horizontal\ns.frame.height = 400\n"
        )
