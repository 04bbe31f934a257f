"""Lint rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeAlias

from commaspacing.analysis import CommaContexts
from commaspacing.diagnostics import (
    COMMA_NOT_FOLLOWED_BY_SPACE,
    COMMA_PRECEDED_BY_SPACE,
    Diagnostic,
    DiagnosticSpec,
)
from commaspacing.lexer import TokenKind, TriviaKind
from commaspacing.lint.cancellation import CancellationToken
from commaspacing.lint.options import CommaSpacingOptions
from commaspacing.syntax import SyntaxTrivia, TokenStream

LintDomain: TypeAlias = Literal["style"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]


class LintRule(Protocol):
    """Lexical lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(
        self,
        stream: TokenStream,
        contexts: CommaContexts,
        cancellation: CancellationToken | None = None,
    ) -> list[Diagnostic]: ...


def is_preceded_by_space(
    stream: TokenStream,
    index: int,
    options: CommaSpacingOptions | None = None,
) -> bool:
    """Whitespace touches the comma on its left and the comma is not first on its line."""
    previous = stream.previous(index)
    if previous is None:
        return False
    gap = previous.trailing + stream[index].leading
    if not gap or gap[-1].kind != TriviaKind.WHITESPACE:
        return False
    return not _starts_line(gap, options or CommaSpacingOptions())


def is_missing_following_space(
    stream: TokenStream,
    index: int,
    contexts: CommaContexts,
) -> bool:
    """The next token shares the comma's line and no whitespace touches the comma on its right."""
    following = stream.next(index)
    if following is None or following.kind == TokenKind.EOF:
        return False
    if contexts.is_omitted_type_argument_list(index):
        return False
    # `,,` needs no space; inserting one would make the second comma preceded by a space.
    if following.kind == TokenKind.COMMA:
        return False
    gap = stream[index].trailing + following.leading
    if any(piece.kind == TriviaKind.END_OF_LINE for piece in gap):
        return False
    return not gap or gap[0].kind != TriviaKind.WHITESPACE


def _starts_line(gap: tuple[SyntaxTrivia, ...], options: CommaSpacingOptions) -> bool:
    last_break = -1
    for position, piece in enumerate(gap):
        if piece.kind == TriviaKind.END_OF_LINE:
            last_break = position
    if last_break < 0:
        return False

    allowed = {TriviaKind.WHITESPACE}
    if options.block_comment_starts_line:
        allowed.add(TriviaKind.MULTI_LINE_COMMENT)
    return all(piece.kind in allowed for piece in gap[last_break + 1 :])


@dataclass(frozen=True, slots=True)
class CommaSpacingRule:
    """Commas take no space before them and one space after them.

    A comma that starts a line keeps its indentation, a comma that ends a line
    needs nothing after it, and commas inside an omitted type argument list
    (`Func<,,>`) need no following space.
    """

    code: str = COMMA_PRECEDED_BY_SPACE.code
    name: str = "commaSpacing"
    category: str = "style"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"
    options: CommaSpacingOptions = field(default_factory=CommaSpacingOptions)

    def run(
        self,
        stream: TokenStream,
        contexts: CommaContexts,
        cancellation: CancellationToken | None = None,
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index in stream.comma_indices():
            if cancellation is not None:
                cancellation.raise_if_cancelled()
            if is_preceded_by_space(stream, index, self.options):
                diagnostics.append(_comma_diagnostic(stream, index, COMMA_PRECEDED_BY_SPACE))
            if is_missing_following_space(stream, index, contexts):
                diagnostics.append(_comma_diagnostic(stream, index, COMMA_NOT_FOLLOWED_BY_SPACE))
        return diagnostics


def default_lint_rules(options: CommaSpacingOptions | None = None) -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        CommaSpacingRule(options=options or CommaSpacingOptions()),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_domains = {"style"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected style.")
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code:
            raise ValueError(f"Lint rule `{rule.name}` has an empty code.")


def _comma_diagnostic(stream: TokenStream, index: int, spec: DiagnosticSpec) -> Diagnostic:
    comma = stream[index]
    line, column = stream.line_col(comma.range.start)
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=comma.range,
        severity=spec.severity,
        line=line,
        column=column,
        hint=spec.hint,
        category=spec.category,
    )
