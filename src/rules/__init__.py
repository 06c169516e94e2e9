"""Rule registry for Auto Layout conversion and FrameLayoutKit validation.

Example usage:
    >>> from src.rules import CONTAINER_RULES, PASS_ORDER
    >>> [rule.rule_id for rule in CONTAINER_RULES][:2]
    ['container.horizontal-stack', 'container.stack-declaration']
"""

from .lib import (
    ACTIVATION_HEURISTICS,
    ACTIVATION_PROBE,
    ANCHOR_PROBE,
    ANCHOR_RULES,
    CHAIN_METHOD_ALLOWLIST,
    CHAIN_PATTERN,
    CONTAINER_RULES,
    FORBIDDEN_CONSTRUCT_RULES,
    MALFORMED_OPERATOR_RULES,
    PASS_ORDER,
    PASS_PROBES,
    SEMANTIC_RULES,
    STACK_DECLARATION_RULE_IDS,
    STACK_VIEW_PROBE,
    Classification,
    DiagnosticRule,
    PatternRule,
    RuleClass,
    SemanticRule,
    Severity,
    all_rule_ids,
    declared_layouts,
)

__all__ = [
    # Vocabulary
    "RuleClass",
    "Classification",
    "Severity",
    "PatternRule",
    "DiagnosticRule",
    "SemanticRule",
    # Conversion
    "ACTIVATION_PROBE",
    "STACK_VIEW_PROBE",
    "ANCHOR_PROBE",
    "PASS_ORDER",
    "PASS_PROBES",
    "ACTIVATION_HEURISTICS",
    "CONTAINER_RULES",
    "STACK_DECLARATION_RULE_IDS",
    "ANCHOR_RULES",
    # Validation
    "FORBIDDEN_CONSTRUCT_RULES",
    "MALFORMED_OPERATOR_RULES",
    "CHAIN_PATTERN",
    "CHAIN_METHOD_ALLOWLIST",
    "SEMANTIC_RULES",
    # Helpers
    "declared_layouts",
    "all_rule_ids",
]
