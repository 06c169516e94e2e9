"""FrameLayoutKit source validation and static analysis.

Classifies Swift source written against FrameLayoutKit. Syntax checks
report errors (leftover Auto Layout constructs, malformed operators,
unknown builder methods); semantic checks report warnings and suggestions
about how declared layouts are used. Semantic checks are pattern-based and
best-effort.
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from src.rules import (
    CHAIN_METHOD_ALLOWLIST,
    CHAIN_PATTERN,
    FORBIDDEN_CONSTRUCT_RULES,
    MALFORMED_OPERATOR_RULES,
    SEMANTIC_RULES,
    DiagnosticRule,
    SemanticRule,
    Severity,
)
from src.schema import CheckLevel

logger = logging.getLogger(__name__)

REPORT_TITLE = "# FrameLayoutKit Validation Report"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding.

    Attributes:
        rule_id: Rule that produced the finding.
        severity: error, warning or suggestion.
        message: Human-readable description.
    """

    rule_id: str
    severity: Severity
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    """Diagnostics grouped by severity, plus the rendered report."""

    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    suggestions: list[Diagnostic] = field(default_factory=list)
    report: str = ""

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Serialize with messages as plain strings."""
        return {
            "is_valid": self.is_valid,
            "errors": [d.message for d in self.errors],
            "warnings": [d.message for d in self.warnings],
            "suggestions": [d.message for d in self.suggestions],
            "report": self.report,
        }


class DSLValidator:
    """Validates FrameLayoutKit Swift source.

    Rule tables are injectable; defaults come from src.rules.

    Example:
        >>> result = DSLValidator().validate("stack + + view1", "full")
        >>> result.is_valid
        False
    """

    def __init__(
        self,
        forbidden_rules: tuple[DiagnosticRule, ...] = FORBIDDEN_CONSTRUCT_RULES,
        operator_rules: tuple[DiagnosticRule, ...] = MALFORMED_OPERATOR_RULES,
        chain_allowlist: frozenset[str] = CHAIN_METHOD_ALLOWLIST,
        semantic_rules: tuple[SemanticRule, ...] = SEMANTIC_RULES,
    ) -> None:
        self.forbidden_rules = forbidden_rules
        self.operator_rules = operator_rules
        self.chain_allowlist = chain_allowlist
        self.semantic_rules = semantic_rules

    def validate(
        self, source: str, check_level: CheckLevel | str = CheckLevel.FULL
    ) -> ValidationResult:
        """Validate source at the given depth.

        Args:
            source: Swift source text.
            check_level: syntax, semantic or full.

        Returns:
            ValidationResult: Diagnostics and the markdown report.

        Raises:
            ValueError: If check_level is unknown.
        """
        level = CheckLevel(check_level)
        diagnostics: list[Diagnostic] = []

        if level in (CheckLevel.SYNTAX, CheckLevel.FULL):
            diagnostics.extend(self.check_syntax(source))
        if level in (CheckLevel.SEMANTIC, CheckLevel.FULL):
            diagnostics.extend(self.check_semantics(source))

        result = ValidationResult(
            errors=[d for d in diagnostics if d.severity == Severity.ERROR],
            warnings=[d for d in diagnostics if d.severity == Severity.WARNING],
            suggestions=[d for d in diagnostics if d.severity == Severity.SUGGESTION],
        )
        result.report = render_report(result)

        logger.debug(
            f"Validated at {level.value} level: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s), {len(result.suggestions)} suggestion(s)"
        )
        return result

    def check_syntax(self, source: str) -> list[Diagnostic]:
        """Forbidden constructs, malformed operators and invalid chains."""
        diagnostics: list[Diagnostic] = []
        for rule in self.forbidden_rules + self.operator_rules:
            if _rule_fires(rule, source):
                diagnostics.append(Diagnostic(rule.rule_id, rule.severity, rule.message))
        diagnostics.extend(self.check_chains(source))
        return diagnostics

    def check_chains(self, source: str) -> list[Diagnostic]:
        """One error per distinct chain fragment using an unknown method."""
        seen: set[str] = set()
        diagnostics: list[Diagnostic] = []
        for match in CHAIN_PATTERN.finditer(source):
            if match.group("method") in self.chain_allowlist:
                continue
            fragment = re.sub(r"\s+", "", match.group(0))
            if fragment in seen:
                continue
            seen.add(fragment)
            diagnostics.append(
                Diagnostic(
                    rule_id=f"chain.{match.group('method')}",
                    severity=Severity.ERROR,
                    message=f"Invalid chain method: {fragment}",
                )
            )
        return diagnostics

    def check_semantics(self, source: str) -> list[Diagnostic]:
        """Structural checks over declared layouts."""
        return [
            Diagnostic(rule.rule_id, rule.severity, rule.message)
            for rule in self.semantic_rules
            if rule.check(source)
        ]


def _rule_fires(rule: DiagnosticRule, source: str) -> bool:
    """Whether a pattern rule reports for this source."""
    if rule.per_target_limit is None:
        return rule.pattern.search(source) is not None
    counts = Counter(m.group("target") for m in rule.pattern.finditer(source))
    return any(count > rule.per_target_limit for count in counts.values())


def render_report(result: ValidationResult) -> str:
    """Render diagnostics as a markdown report.

    Empty warning and suggestion sections are omitted.
    """
    report = f"{REPORT_TITLE}\n\n"

    if not result.errors:
        report += "✅ **No syntax errors found**\n\n"
    else:
        report += f"❌ **{len(result.errors)} Errors Found:**\n\n"
        report += _numbered(result.errors) + "\n"

    if result.warnings:
        report += f"⚠️ **{len(result.warnings)} Warnings:**\n\n"
        report += _numbered(result.warnings) + "\n"

    if result.suggestions:
        report += f"💡 **{len(result.suggestions)} Suggestions:**\n\n"
        report += _numbered(result.suggestions)

    return report


def _numbered(diagnostics: list[Diagnostic]) -> str:
    return "".join(f"{i}. {d.message}\n" for i, d in enumerate(diagnostics, start=1))


_default_validator = DSLValidator()


def validate_source(
    source: str, check_level: CheckLevel | str = CheckLevel.FULL
) -> ValidationResult:
    """Validate source with the default rule tables."""
    return _default_validator.validate(source, check_level)


__all__ = [
    "REPORT_TITLE",
    "Diagnostic",
    "ValidationResult",
    "DSLValidator",
    "render_report",
    "validate_source",
]
