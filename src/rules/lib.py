"""Pattern rule registry for Auto Layout conversion and DSL validation.

Every rule the converter and validator apply lives here as an entry in an
immutable, ordered table. Entries carry a stable `rule_id` so individual
rules can be tested, documented and swapped without touching the engines.

Tables:
    ACTIVATION_HEURISTICS: NSLayoutConstraint.activate block -> suggested
        FrameLayoutKit code. Ordered, first match wins. Best-effort: these
        are text heuristics, not constraint analysis.
    CONTAINER_RULES: UIStackView rewrites, applied in sequence.
    ANCHOR_RULES: Anchor constraint advisories. Never rewrite code.
    FORBIDDEN_CONSTRUCT_RULES, MALFORMED_OPERATOR_RULES: Validator errors.
    CHAIN_METHOD_ALLOWLIST: Builder methods accepted after `)`.
    SEMANTIC_RULES: Structural checks over declared layouts. Best-effort.

Pass order is part of the contract: PASS_ORDER lists the conversion passes
in the order they run.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

# =============================================================================
# Rule vocabulary
# =============================================================================


class RuleClass(str, Enum):
    """Groups of rules that run together."""

    ACTIVATION = "constraint-activation"
    CONTAINER = "container-type"
    ANCHOR = "anchor"
    FORBIDDEN = "forbidden-construct"
    OPERATOR = "malformed-operator"
    CHAIN = "invalid-chain"
    SEMANTIC = "structural-semantic"


class Classification(str, Enum):
    """Whether a rewrite can be applied without review."""

    SAFE = "safe"
    NEEDS_REVIEW = "needs-review"


class Severity(str, Enum):
    """Validator diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class PatternRule:
    """A conversion rule: matcher, rewriter and classification.

    `rewrite` and `message` are match templates (`\\1`, `\\g<name>`)
    expanded against each match. A rule with no rewrite is advisory only.

    Attributes:
        rule_id: Stable identifier.
        rule_class: Group the rule belongs to.
        pattern: Compiled matcher.
        classification: SAFE rewrites are applied in every strategy.
        rewrite: Replacement template, or None for advisories.
        message: Warning or suggestion template. Empty for silent rewrites.
        method_rewrite: Replacement used when operator syntax is disabled.
    """

    rule_id: str
    rule_class: RuleClass
    pattern: re.Pattern[str]
    classification: Classification
    rewrite: str | None = None
    message: str = ""
    method_rewrite: str | None = None

    def expand_rewrite(self, match: re.Match[str], use_operator_syntax: bool = True) -> str:
        """Replacement text for one match."""
        template = self.rewrite
        if not use_operator_syntax and self.method_rewrite is not None:
            template = self.method_rewrite
        if template is None:
            return match.group(0)
        return match.expand(template)

    def expand_message(self, match: re.Match[str]) -> str:
        """Message text for one match."""
        return match.expand(self.message) if self.message else ""


@dataclass(frozen=True)
class DiagnosticRule:
    """A validator rule that reports when its pattern matches.

    Attributes:
        rule_id: Stable identifier.
        rule_class: Group the rule belongs to.
        severity: Diagnostic severity.
        pattern: Compiled matcher.
        message: Diagnostic text.
        per_target_limit: When set, matches are grouped by the `target`
            group and the rule fires only for targets exceeding the limit.
    """

    rule_id: str
    rule_class: RuleClass
    severity: Severity
    pattern: re.Pattern[str]
    message: str
    per_target_limit: int | None = None


@dataclass(frozen=True)
class SemanticRule:
    """A structural check over the whole source text."""

    rule_id: str
    severity: Severity
    message: str
    check: Callable[[str], bool]
    rule_class: RuleClass = RuleClass.SEMANTIC


# =============================================================================
# Conversion: pass probes and order
# =============================================================================

ACTIVATION_PROBE = re.compile(r"NSLayoutConstraint\s*\.\s*activate\s*\(")
STACK_VIEW_PROBE = re.compile(r"\bUIStackView\b|\.addArrangedSubview\(")
ANCHOR_PROBE = re.compile(r"Anchor\s*\.\s*constraint\(")

PASS_ORDER: tuple[RuleClass, ...] = (
    RuleClass.ACTIVATION,
    RuleClass.CONTAINER,
    RuleClass.ANCHOR,
)

PASS_PROBES: dict[RuleClass, re.Pattern[str]] = {
    RuleClass.ACTIVATION: ACTIVATION_PROBE,
    RuleClass.CONTAINER: STACK_VIEW_PROBE,
    RuleClass.ANCHOR: ANCHOR_PROBE,
}

# =============================================================================
# Conversion: constraint activation heuristics
# =============================================================================

_NUMBER = r"\d+(?:\.\d+)?"


def _pinned(anchor: str, group: str) -> str:
    """Lookahead capturing the constant of an anchor constraint."""
    return (
        rf"(?=.*?\.{anchor}Anchor\s*\.\s*constraint\([^\n]*?"
        rf"constant:\s*-?(?P<{group}>{_NUMBER}))"
    )


ACTIVATION_HEURISTICS: tuple[PatternRule, ...] = (
    PatternRule(
        rule_id="activation.equal-width",
        rule_class=RuleClass.ACTIVATION,
        pattern=re.compile(r"widthAnchor.*equalTo.*widthAnchor"),
        classification=Classification.NEEDS_REVIEW,
        rewrite="DoubleFrameLayout().distribution(.equal)",
        message="Equal width constraints suggest using DoubleFrameLayout with .equal distribution",
    ),
    PatternRule(
        rule_id="activation.equal-height",
        rule_class=RuleClass.ACTIVATION,
        pattern=re.compile(r"heightAnchor.*equalTo.*heightAnchor"),
        classification=Classification.NEEDS_REVIEW,
        rewrite="DoubleFrameLayout().axis(.vertical).distribution(.equal)",
        message=(
            "Equal height constraints suggest using a vertical DoubleFrameLayout "
            "with .equal distribution"
        ),
    ),
    PatternRule(
        rule_id="activation.center",
        rule_class=RuleClass.ACTIVATION,
        pattern=re.compile(r"centerXAnchor.*equalTo.*centerXAnchor"),
        classification=Classification.NEEDS_REVIEW,
        rewrite="FrameLayout().align(.center, .center)",
        message="Center constraints suggest using FrameLayout with .align(.center, .center)",
    ),
    PatternRule(
        rule_id="activation.edge-pinning",
        rule_class=RuleClass.ACTIVATION,
        pattern=re.compile(
            r"\A"
            + _pinned("top", "top")
            + _pinned("leading", "left")
            + _pinned("bottom", "bottom")
            + _pinned("trailing", "right"),
            re.DOTALL,
        ),
        classification=Classification.NEEDS_REVIEW,
        rewrite=(
            r"FrameLayout().padding(top: \g<top>, left: \g<left>, "
            r"bottom: \g<bottom>, right: \g<right>)"
        ),
        message="Edge constraints with constants suggest using FrameLayout with .padding",
    ),
)

# =============================================================================
# Conversion: container rules
# =============================================================================

_STACK_DECLARATION = r"\b(?P<decl>let|var)\s+(?P<name>\w+)\s*=\s*UIStackView\(\)"
_ARRANGED_DECLARATION = (
    r"\b(?P<decl>let|var)\s+(?P<name>\w+)\s*=\s*"
    r"UIStackView\(\s*arrangedSubviews:\s*\[(?P<views>[^\]]*)\]\s*\)"
)
_HORIZONTAL_AXIS = r".*?\b(?P=name)\.axis\s*=\s*\.horizontal"


def _arranged_stack_rule(layout: str, horizontal: bool) -> PatternRule:
    axis_check = f"(?={_HORIZONTAL_AXIS})" if horizontal else f"(?!{_HORIZONTAL_AXIS})"
    return PatternRule(
        rule_id=f"container.arranged-{'horizontal' if horizontal else 'vertical'}-stack",
        rule_class=RuleClass.CONTAINER,
        pattern=re.compile(_ARRANGED_DECLARATION + axis_check, re.DOTALL),
        classification=Classification.NEEDS_REVIEW,
        rewrite=rf"\g<decl> \g<name> = {layout}() /* arrangedSubviews: [\g<views>] */",
        message=(
            r"UIStackView '\g<name>' is built from arrangedSubviews. "
            rf"Use {layout} and attach each arranged view with '\g<name> + view'."
        ),
    )


def _distribution_rule(source: str, target: str) -> PatternRule:
    return PatternRule(
        rule_id=f"container.distribution-{source}",
        rule_class=RuleClass.CONTAINER,
        pattern=re.compile(rf"\.distribution(\s*=\s*)\.{source}\b"),
        classification=Classification.SAFE,
        rewrite=rf".distribution\g<1>.{target}",
    )


CONTAINER_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        rule_id="container.horizontal-stack",
        rule_class=RuleClass.CONTAINER,
        pattern=re.compile(
            _STACK_DECLARATION
            + r"(?=.*?\b(?P=name)\.axis\s*=\s*\.horizontal)",
            re.DOTALL,
        ),
        classification=Classification.SAFE,
        rewrite=r"\g<decl> \g<name> = HStackLayout()",
        message=(
            r"Converted UIStackView '\g<name>' to HStackLayout. "
            "Review axis and distribution settings."
        ),
    ),
    PatternRule(
        rule_id="container.stack-declaration",
        rule_class=RuleClass.CONTAINER,
        pattern=re.compile(_STACK_DECLARATION),
        classification=Classification.SAFE,
        rewrite=r"\g<decl> \g<name> = VStackLayout()",
        message=(
            r"Converted UIStackView '\g<name>' to VStackLayout. "
            "Review axis and distribution settings."
        ),
    ),
    _arranged_stack_rule("HStackLayout", horizontal=True),
    _arranged_stack_rule("VStackLayout", horizontal=False),
    _distribution_rule("fillEqually", "equal"),
    _distribution_rule("equalCentering", "center"),
    _distribution_rule("equalSpacing", "justified"),
    _distribution_rule("fillProportionally", "fill"),
    PatternRule(
        rule_id="container.arranged-subview",
        rule_class=RuleClass.CONTAINER,
        pattern=re.compile(r"(?P<stack>\w+)\.addArrangedSubview\(\s*(?P<view>\w+)\s*\)"),
        classification=Classification.SAFE,
        rewrite=r"\g<stack> + \g<view>",
        method_rewrite=r"\g<stack>.add(\g<view>)",
    ),
)

# Rule ids whose matches count as converted stack views.
STACK_DECLARATION_RULE_IDS = frozenset(
    {
        "container.horizontal-stack",
        "container.stack-declaration",
        "container.arranged-horizontal-stack",
        "container.arranged-vertical-stack",
    }
)

# =============================================================================
# Conversion: anchor advisories
# =============================================================================


def _anchor_constant_rule(anchor: str, edge: str) -> PatternRule:
    return PatternRule(
        rule_id=f"anchor.{anchor}-constant",
        rule_class=RuleClass.ANCHOR,
        pattern=re.compile(
            rf"(?P<view>\w+)\.{anchor}Anchor\.constraint\(\s*equalTo:\s*[\w.]+\.{anchor}Anchor"
            rf"\s*,\s*constant:\s*-?(?P<constant>{_NUMBER})\s*\)"
        ),
        classification=Classification.NEEDS_REVIEW,
        message=rf"Use .padding({edge}: \g<constant>) in FrameLayoutKit",
    )


def _anchor_center_rule(anchor: str) -> PatternRule:
    return PatternRule(
        rule_id=f"anchor.{anchor}",
        rule_class=RuleClass.ANCHOR,
        pattern=re.compile(
            rf"(?P<view>\w+)\.{anchor}Anchor\.constraint\(\s*equalTo:\s*[\w.]+\.{anchor}Anchor\s*\)"
        ),
        classification=Classification.NEEDS_REVIEW,
        message="Use .align(.center, .center) in FrameLayoutKit",
    )


def _anchor_size_rule(anchor: str) -> PatternRule:
    size = "CGSize(width: \\g<constant>, height: 0)"
    if anchor == "height":
        size = "CGSize(width: 0, height: \\g<constant>)"
    return PatternRule(
        rule_id=f"anchor.{anchor}-constant",
        rule_class=RuleClass.ANCHOR,
        pattern=re.compile(
            rf"(?P<view>\w+)\.{anchor}Anchor\.constraint\(\s*equalToConstant:\s*"
            rf"(?P<constant>{_NUMBER})\s*\)"
        ),
        classification=Classification.NEEDS_REVIEW,
        message=f"Use .fixedSize({size}) in FrameLayoutKit",
    )


ANCHOR_RULES: tuple[PatternRule, ...] = (
    _anchor_center_rule("centerX"),
    _anchor_center_rule("centerY"),
    _anchor_constant_rule("top", "top"),
    _anchor_constant_rule("bottom", "bottom"),
    _anchor_constant_rule("leading", "left"),
    _anchor_constant_rule("trailing", "right"),
    _anchor_size_rule("width"),
    _anchor_size_rule("height"),
)

# =============================================================================
# Validation: syntax rules
# =============================================================================

FORBIDDEN_CONSTRUCT_RULES: tuple[DiagnosticRule, ...] = (
    DiagnosticRule(
        rule_id="forbidden.constraint-activation",
        rule_class=RuleClass.FORBIDDEN,
        severity=Severity.ERROR,
        pattern=re.compile(r"NSLayoutConstraint\s*\.\s*activate\b"),
        message=(
            "NSLayoutConstraint.activate is Auto Layout code. "
            "Replace constraint activation with FrameLayoutKit layouts."
        ),
    ),
    DiagnosticRule(
        rule_id="forbidden.constraint-init",
        rule_class=RuleClass.FORBIDDEN,
        severity=Severity.ERROR,
        pattern=re.compile(r"NSLayoutConstraint\s*\("),
        message="NSLayoutConstraint initializers are Auto Layout code. Use FrameLayoutKit layouts.",
    ),
    DiagnosticRule(
        rule_id="forbidden.layout-anchor",
        rule_class=RuleClass.FORBIDDEN,
        severity=Severity.ERROR,
        pattern=re.compile(
            r"\.(?:top|bottom|leading|trailing|left|right|width|height|"
            r"centerX|centerY|firstBaseline|lastBaseline)Anchor\b"
        ),
        message="Layout anchors are Auto Layout code. Use .padding and .align on a FrameLayout.",
    ),
    DiagnosticRule(
        rule_id="forbidden.constraint-call",
        rule_class=RuleClass.FORBIDDEN,
        severity=Severity.ERROR,
        pattern=re.compile(r"\.constraint\("),
        message=".constraint(...) calls create Auto Layout constraints. Use FrameLayoutKit layouts.",
    ),
    DiagnosticRule(
        rule_id="forbidden.autoresizing",
        rule_class=RuleClass.FORBIDDEN,
        severity=Severity.ERROR,
        pattern=re.compile(r"\btranslatesAutoresizingMaskIntoConstraints\b|\bautoresizingMask\b"),
        message=(
            "Autoresizing mask settings are not needed with FrameLayoutKit. "
            "Remove translatesAutoresizingMaskIntoConstraints and autoresizingMask."
        ),
    ),
)

MALFORMED_OPERATOR_RULES: tuple[DiagnosticRule, ...] = (
    DiagnosticRule(
        rule_id="operator.double-attach",
        rule_class=RuleClass.OPERATOR,
        severity=Severity.ERROR,
        pattern=re.compile(r"\+\s*\+"),
        message="Double + operator detected. Each + should have a view on both sides.",
    ),
    DiagnosticRule(
        rule_id="operator.multiple-left",
        rule_class=RuleClass.OPERATOR,
        severity=Severity.ERROR,
        pattern=re.compile(r"(?P<target>\w+)\s*<\+"),
        message="Multiple <+ operators. DoubleFrameLayout can only have one left view.",
        per_target_limit=1,
    ),
    DiagnosticRule(
        rule_id="operator.multiple-right",
        rule_class=RuleClass.OPERATOR,
        severity=Severity.ERROR,
        pattern=re.compile(r"(?P<target>\w+)\s*\+>"),
        message="Multiple +> operators. DoubleFrameLayout can only have one right view.",
        per_target_limit=1,
    ),
)

CHAIN_PATTERN = re.compile(r"\)\s*\.\s*(?P<method>\w+)\(")

CHAIN_METHOD_ALLOWLIST: frozenset[str] = frozenset(
    {
        "padding",
        "align",
        "fixedSize",
        "spacing",
        "distribution",
        "axis",
        "rows",
        "columns",
        "debug",
        "flexible",
        "minSize",
        "maxSize",
        "interItemSpacing",
        "lineSpacing",
        "verticalSpacing",
        "horizontalSpacing",
        "isOverlapped",
    }
)

# =============================================================================
# Validation: structural semantic rules
# =============================================================================


def declared_layouts(source: str, layout_class: str) -> list[str]:
    """Names of variables initialised with `layout_class()`."""
    pattern = rf"\b(?:let|var)\s+(\w+)\s*(?::\s*\w+\s*)?=\s*{layout_class}\(\)"
    return re.findall(pattern, source)


def _grid_has_empty_views(source: str) -> bool:
    return any(
        re.search(rf"\b{name}\.views\s*=\s*\[\s*\]", source)
        for name in declared_layouts(source, "GridFrameLayout")
    )


def _double_frame_overfilled(source: str) -> bool:
    for name in declared_layouts(source, "DoubleFrameLayout"):
        attaches = re.findall(rf"\b{name}\s*(?:<\+|\+>|\+)\s*\w+", source)
        if len(attaches) > 2:
            return True
    return False


def _justified_without_flag(source: str) -> bool:
    justified = re.search(r"distribution(?:\s*=\s*|\()\s*\.justified\b", source)
    return bool(justified) and not re.search(r"isJustified\s*=\s*true", source)


def _tall_horizontal_scroll_stack(source: str) -> bool:
    for name in declared_layouts(source, "ScrollStackView"):
        horizontal = re.search(rf"\b{name}\.axis\s*=\s*\.horizontal\b", source)
        tall = re.search(rf"\b{name}\.frame\.(?:size\.)?height\s*=\s*\d{{3,}}", source)
        if horizontal and tall:
            return True
    return False


SEMANTIC_RULES: tuple[SemanticRule, ...] = (
    SemanticRule(
        rule_id="semantic.grid-empty-views",
        severity=Severity.WARNING,
        message="GridFrameLayout has empty views array",
        check=_grid_has_empty_views,
    ),
    SemanticRule(
        rule_id="semantic.double-frame-overfilled",
        severity=Severity.WARNING,
        message="DoubleFrameLayout should only contain 2 views, but more were added",
        check=_double_frame_overfilled,
    ),
    SemanticRule(
        rule_id="semantic.justified-without-flag",
        severity=Severity.SUGGESTION,
        message="When using .justified distribution, consider setting isJustified = true",
        check=_justified_without_flag,
    ),
    SemanticRule(
        rule_id="semantic.tall-horizontal-scroll",
        severity=Severity.SUGGESTION,
        message="Horizontal ScrollStackView has large height. Consider reducing for better UX.",
        check=_tall_horizontal_scroll_stack,
    ),
)


def all_rule_ids() -> list[str]:
    """Every rule id in registry order."""
    tables = (
        ACTIVATION_HEURISTICS,
        CONTAINER_RULES,
        ANCHOR_RULES,
        FORBIDDEN_CONSTRUCT_RULES,
        MALFORMED_OPERATOR_RULES,
        SEMANTIC_RULES,
    )
    return [rule.rule_id for table in tables for rule in table]


__all__ = [
    "RuleClass",
    "Classification",
    "Severity",
    "PatternRule",
    "DiagnosticRule",
    "SemanticRule",
    "ACTIVATION_PROBE",
    "STACK_VIEW_PROBE",
    "ANCHOR_PROBE",
    "PASS_ORDER",
    "PASS_PROBES",
    "ACTIVATION_HEURISTICS",
    "CONTAINER_RULES",
    "STACK_DECLARATION_RULE_IDS",
    "ANCHOR_RULES",
    "FORBIDDEN_CONSTRUCT_RULES",
    "MALFORMED_OPERATOR_RULES",
    "CHAIN_PATTERN",
    "CHAIN_METHOD_ALLOWLIST",
    "SEMANTIC_RULES",
    "declared_layouts",
    "all_rule_ids",
]
