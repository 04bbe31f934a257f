"""Document snapshot carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from commaspacing.pipeline.result import DocumentSnapshot, snapshot_document, snapshot_from_stream
from commaspacing.pipeline.results import FixRunResult, LintRunResult

if TYPE_CHECKING:
    from commaspacing.diagnostics import Diagnostic
    from commaspacing.lint import CancellationToken, CommaSpacingOptions, LintRule
    from commaspacing.syntax import TokenStream


def analyze_document(
    document: TokenStream | DocumentSnapshot | str,
    *,
    options: CommaSpacingOptions | None = None,
    cancellation: CancellationToken | None = None,
) -> list[Diagnostic]:
    from commaspacing.pipeline.entrypoints import analyze_document as _analyze_document

    return _analyze_document(document, options=options, cancellation=cancellation)


def run_lint(
    text: str,
    *,
    document: DocumentSnapshot | None = None,
    options: CommaSpacingOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    cancellation: CancellationToken | None = None,
) -> LintRunResult:
    from commaspacing.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(
        text,
        document=document,
        options=options,
        rules=rules,
        cancellation=cancellation,
    )


def run_fix(
    text: str,
    *,
    document: DocumentSnapshot | None = None,
    options: CommaSpacingOptions | None = None,
    cancellation: CancellationToken | None = None,
) -> FixRunResult:
    from commaspacing.pipeline.entrypoints import run_fix as _run_fix

    return _run_fix(text, document=document, options=options, cancellation=cancellation)


def apply_fix(source: str, diagnostic: Diagnostic) -> str:
    from commaspacing.pipeline.entrypoints import apply_fix as _apply_fix

    return _apply_fix(source, diagnostic)


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    from commaspacing.pipeline.entrypoints import apply_fixes as _apply_fixes

    return _apply_fixes(source, diagnostics)


__all__ = [
    "DocumentSnapshot",
    "FixRunResult",
    "LintRunResult",
    "analyze_document",
    "apply_fix",
    "apply_fixes",
    "run_fix",
    "run_lint",
    "snapshot_document",
    "snapshot_from_stream",
]
