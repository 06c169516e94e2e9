"""Auto Layout to FrameLayoutKit conversion.

Runs three regex passes over Swift source, in PASS_ORDER:

    1. Constraint activation: each `NSLayoutConstraint.activate(...)` block
       is matched against best-effort heuristics. Aggressive mode replaces
       the block; conservative mode keeps it under a review marker.
    2. Containers: UIStackView declarations, distributions and
       arranged-subview calls are rewritten to stack layouts.
    3. Anchors: anchor constraints produce advisory suggestions only.

Each pass is skipped when its probe pattern finds nothing. Rule tables are
injected through the constructor, so callers can add or replace rules.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from src.rules import (
    ACTIVATION_HEURISTICS,
    ACTIVATION_PROBE,
    ANCHOR_RULES,
    CONTAINER_RULES,
    PASS_ORDER,
    PASS_PROBES,
    STACK_DECLARATION_RULE_IDS,
    Classification,
    PatternRule,
    RuleClass,
    declared_layouts,
)
from src.schema import LayoutKind, MigrationStrategy

logger = logging.getLogger(__name__)

REVIEW_MARKER = "// TODO: Convert to FrameLayoutKit"
SNIPPET_LENGTH = 50

_COMMENT_LINE = re.compile(r"^[ \t]*//[^\n]*(?:\n|$)", re.MULTILINE)


# =============================================================================
# Options and results
# =============================================================================


class ConversionOptions(BaseModel):
    """Conversion behaviour switches.

    Attributes:
        migration_strategy: conservative keeps uncertain code under a review
            marker, aggressive replaces it.
        preserve_comments: When False, whole-line `//` comments are removed
            before conversion. Trailing comments after code on the same
            line and `/* */` block comments are kept.
        generate_helper_methods: Append a layoutSubviews helper that frames
            each converted layout.
        use_operator_syntax: Attach arranged subviews with `+` rather than
            `.add(...)`.
    """

    migration_strategy: MigrationStrategy = Field(
        default=MigrationStrategy.CONSERVATIVE, alias="migrationStrategy"
    )
    preserve_comments: bool = Field(default=True, alias="preserveComments")
    generate_helper_methods: bool = Field(default=False, alias="generateHelperMethods")
    use_operator_syntax: bool = Field(default=True, alias="useOperatorSyntax")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "use_enum_values": True,
    }

    @property
    def aggressive(self) -> bool:
        return self.migration_strategy == MigrationStrategy.AGGRESSIVE


@dataclass(frozen=True)
class Suggestion:
    """An advisory produced during conversion.

    Attributes:
        rule_id: Rule that produced the advisory.
        pattern: Source text the rule matched.
        suggestion: Human-readable advice.
        code: Suggested FrameLayoutKit code (or a comment carrying advice).
    """

    rule_id: str
    pattern: str
    suggestion: str
    code: str

    def to_dict(self) -> dict[str, str]:
        return {
            "ruleId": self.rule_id,
            "pattern": self.pattern,
            "suggestion": self.suggestion,
            "code": self.code,
        }


@dataclass
class ConversionStats:
    """Counters for a conversion run."""

    constraints_converted: int = 0
    stack_views_converted: int = 0
    total_changes: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "constraintsConverted": self.constraints_converted,
            "stackViewsConverted": self.stack_views_converted,
            "totalChanges": self.total_changes,
        }


@dataclass
class ConversionResult:
    """Converted code plus warnings, suggestions and counters."""

    code: str
    warnings: list[str] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    stats: ConversionStats = field(default_factory=ConversionStats)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "warnings": list(self.warnings),
            "suggestions": [s.to_dict() for s in self.suggestions],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class ActivationBlock:
    """A located `NSLayoutConstraint.activate(...)` call.

    An unterminated call runs to the end of the source and has
    `terminated` set to False.
    """

    start: int
    end: int
    line: int
    text: str
    terminated: bool = True


# =============================================================================
# Block scanning
# =============================================================================


def find_activation_blocks(source: str) -> list[ActivationBlock]:
    """Locate activation calls by balanced-parenthesis scanning.

    String literals and comments are skipped while counting. An
    unterminated call is reported as a final block spanning the rest of
    the source.

    Args:
        source: Swift source text.

    Returns:
        list[ActivationBlock]: Blocks in source order.
    """
    blocks: list[ActivationBlock] = []
    position = 0
    while True:
        match = ACTIVATION_PROBE.search(source, position)
        if match is None:
            break
        line = source.count("\n", 0, match.start()) + 1
        end = _closing_paren(source, match.end() - 1)
        if end is None:
            logger.debug(f"Unterminated activation call at line {line}")
            blocks.append(
                ActivationBlock(
                    start=match.start(),
                    end=len(source),
                    line=line,
                    text=source[match.start() :],
                    terminated=False,
                )
            )
            break
        blocks.append(
            ActivationBlock(
                start=match.start(),
                end=end + 1,
                line=line,
                text=source[match.start() : end + 1],
            )
        )
        position = end + 1
    return blocks


def _closing_paren(source: str, open_index: int) -> int | None:
    """Index of the parenthesis closing the one at `open_index`."""
    depth = 0
    in_string = False
    index = open_index
    while index < len(source):
        char = source[index]
        if in_string:
            if char == "\\":
                index += 1
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif source.startswith("//", index):
            newline = source.find("\n", index)
            if newline == -1:
                return None
            index = newline
        elif source.startswith("/*", index):
            close = source.find("*/", index + 2)
            if close == -1:
                return None
            index = close + 1
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return None


def _line_indent(source: str, offset: int) -> str:
    """Whitespace preceding `offset` on its line."""
    line_start = source.rfind("\n", 0, offset) + 1
    prefix = source[line_start:offset]
    return prefix if not prefix.strip() else ""


# =============================================================================
# Converter
# =============================================================================


class LegacyConverter:
    """Converts Auto Layout Swift code to FrameLayoutKit.

    Stateless between calls; each `convert` builds its own result.

    Args:
        activation_heuristics: Ordered heuristics, first match wins.
        container_rules: Container rewrites, applied in sequence.
        anchor_rules: Anchor advisories.

    Example:
        >>> result = LegacyConverter().convert("let s = UIStackView()")
        >>> result.code
        'let s = VStackLayout()'
    """

    def __init__(
        self,
        activation_heuristics: tuple[PatternRule, ...] = ACTIVATION_HEURISTICS,
        container_rules: tuple[PatternRule, ...] = CONTAINER_RULES,
        anchor_rules: tuple[PatternRule, ...] = ANCHOR_RULES,
    ) -> None:
        self.activation_heuristics = activation_heuristics
        self.container_rules = container_rules
        self.anchor_rules = anchor_rules

    def convert(
        self, source: str, options: ConversionOptions | None = None
    ) -> ConversionResult:
        """Convert Swift source.

        Args:
            source: Swift source using Auto Layout.
            options: Conversion options. None means defaults.

        Returns:
            ConversionResult: Converted code, warnings, suggestions, stats.
        """
        options = options or ConversionOptions()
        text = source if options.preserve_comments else _COMMENT_LINE.sub("", source)
        result = ConversionResult(code=text)

        passes = {
            RuleClass.ACTIVATION: self._activation_pass,
            RuleClass.CONTAINER: self._container_pass,
            RuleClass.ANCHOR: self._anchor_pass,
        }
        for rule_class in PASS_ORDER:
            if not PASS_PROBES[rule_class].search(result.code):
                logger.debug(f"Skipping {rule_class.value} pass: nothing to convert")
                continue
            passes[rule_class](result, options)

        if options.generate_helper_methods:
            result.code = _append_layout_helper(result.code)

        result.stats.total_changes = len(result.warnings) + len(result.suggestions)
        logger.info(
            f"Converted source: {result.stats.constraints_converted} activation block(s), "
            f"{result.stats.stack_views_converted} stack view(s), "
            f"{result.stats.total_changes} change(s)"
        )
        return result

    def suggest(self, block: str) -> tuple[PatternRule, re.Match[str]] | None:
        """First heuristic matching an activation block, with its match."""
        for rule in self.activation_heuristics:
            match = rule.pattern.search(block)
            if match:
                return rule, match
        return None

    # -------------------------------------------------------------------------
    # Passes
    # -------------------------------------------------------------------------

    def _activation_pass(self, result: ConversionResult, options: ConversionOptions) -> None:
        source = result.code
        pieces: list[str] = []
        cursor = 0

        for block in find_activation_blocks(source):
            pieces.append(source[cursor : block.start])
            cursor = block.end
            snippet = block.text[:SNIPPET_LENGTH]
            indent = _line_indent(source, block.start)
            result.stats.constraints_converted += 1

            if not block.terminated:
                pieces.append(f"{REVIEW_MARKER}\n{indent}{block.text}")
                result.warnings.append(
                    f"Could not parse constraint block at line {block.line}: "
                    f"{snippet}... Left unchanged for manual review."
                )
                continue

            suggested: str | None = None
            heuristic = self.suggest(block.text)
            if heuristic is not None:
                rule, match = heuristic
                suggested = rule.expand_rewrite(match)
                result.suggestions.append(
                    Suggestion(
                        rule_id=rule.rule_id,
                        pattern=block.text,
                        suggestion=rule.expand_message(match),
                        code=suggested,
                    )
                )

            if options.aggressive and suggested is not None:
                pieces.append(suggested)
            elif options.aggressive:
                pieces.append(f"{REVIEW_MARKER} (no equivalent detected)")
                result.warnings.append(
                    f"No FrameLayoutKit equivalent detected for constraint block "
                    f"at line {block.line}: {snippet}... Block removed."
                )
            else:
                marker = REVIEW_MARKER + "\n" + indent
                if suggested is not None:
                    marker += f"// Suggested: {suggested}\n{indent}"
                pieces.append(marker + block.text)
                result.warnings.append(
                    f"Manual review needed for constraint conversion at line "
                    f"{block.line}: {snippet}..."
                )

        pieces.append(source[cursor:])
        result.code = "".join(pieces)

    def _container_pass(self, result: ConversionResult, options: ConversionOptions) -> None:
        for rule in self.container_rules:
            result.code = self._apply_rewrite(rule, result, options)

    def _anchor_pass(self, result: ConversionResult, options: ConversionOptions) -> None:
        for rule in self.anchor_rules:
            for match in rule.pattern.finditer(result.code):
                message = rule.expand_message(match)
                result.suggestions.append(
                    Suggestion(
                        rule_id=rule.rule_id,
                        pattern=match.group(0),
                        suggestion=message,
                        code=f"// {message}",
                    )
                )

    def _apply_rewrite(
        self, rule: PatternRule, result: ConversionResult, options: ConversionOptions
    ) -> str:
        """Apply one rewrite rule across the code, recording its messages."""

        def replace(match: re.Match[str]) -> str:
            message = rule.expand_message(match)
            if message:
                result.warnings.append(message)
            if rule.classification == Classification.NEEDS_REVIEW and not options.aggressive:
                return match.group(0)
            if rule.rule_id in STACK_DECLARATION_RULE_IDS:
                result.stats.stack_views_converted += 1
            return rule.expand_rewrite(match, options.use_operator_syntax)

        return rule.pattern.sub(replace, result.code)


# =============================================================================
# Helper generation
# =============================================================================

_HELPER_LAYOUTS = (LayoutKind.VSTACK, LayoutKind.HSTACK)


def _append_layout_helper(code: str) -> str:
    """Append a layoutSubviews override framing each converted layout."""
    names: list[str] = []
    for kind in _HELPER_LAYOUTS:
        names.extend(declared_layouts(code, kind.value))
    if not names:
        return code

    body = "\n".join(f"    {name}.frame = bounds" for name in names)
    helper = (
        "\n// MARK: - FrameLayoutKit\n\n"
        "override func layoutSubviews() {\n"
        "    super.layoutSubviews()\n"
        f"{body}\n"
        "}\n"
    )
    return code.rstrip("\n") + "\n" + helper


_default_converter = LegacyConverter()


def convert_legacy_source(
    source: str, options: ConversionOptions | None = None
) -> ConversionResult:
    """Convert Swift source with the default rule tables."""
    return _default_converter.convert(source, options)


__all__ = [
    "REVIEW_MARKER",
    "ConversionOptions",
    "Suggestion",
    "ConversionStats",
    "ConversionResult",
    "ActivationBlock",
    "LegacyConverter",
    "find_activation_blocks",
    "convert_legacy_source",
]
