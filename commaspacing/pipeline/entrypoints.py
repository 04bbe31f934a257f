"""Unified entrypoints that analyze and fix one document snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from commaspacing.diagnostics import Diagnostic
from commaspacing.fix import apply_fix as _apply_fix
from commaspacing.fix import apply_fixes as _apply_fixes
from commaspacing.fix import run_fix as _run_fix
from commaspacing.lint import CancellationToken, CommaSpacingOptions, LintRule
from commaspacing.lint import analyze_document as _analyze_document
from commaspacing.lint import run_lint as _run_lint
from commaspacing.pipeline.result import DocumentSnapshot
from commaspacing.pipeline.results import FixRunResult, LintRunResult
from commaspacing.syntax import TokenStream


def analyze_document(
    document: TokenStream | DocumentSnapshot | str,
    *,
    options: CommaSpacingOptions | None = None,
    cancellation: CancellationToken | None = None,
) -> list[Diagnostic]:
    """Comma spacing diagnostics for one document, in document order."""
    return _analyze_document(document, options=options, cancellation=cancellation)


def run_lint(
    text: str,
    *,
    document: DocumentSnapshot | None = None,
    options: CommaSpacingOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    cancellation: CancellationToken | None = None,
) -> LintRunResult:
    """Tokenizer and comma spacing diagnostics over one snapshot, sorted by position."""
    return _run_lint(text, document=document, options=options, rules=rules, cancellation=cancellation)


def run_fix(
    text: str,
    *,
    document: DocumentSnapshot | None = None,
    options: CommaSpacingOptions | None = None,
    cancellation: CancellationToken | None = None,
) -> FixRunResult:
    """Analyze one snapshot and rewrite it with every comma spacing fix."""
    return _run_fix(text, document=document, options=options, cancellation=cancellation)


def apply_fix(source: str, diagnostic: Diagnostic) -> str:
    return _apply_fix(source, diagnostic)


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    return _apply_fixes(source, diagnostics)
