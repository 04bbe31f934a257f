"""Lint runner over a shared document snapshot."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from commaspacing.diagnostics import Diagnostic, sort_diagnostics
from commaspacing.lint.cancellation import CancellationToken
from commaspacing.lint.options import CommaSpacingOptions
from commaspacing.lint.rules import (
    CommaSpacingRule,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from commaspacing.pipeline.result import DocumentSnapshot, snapshot_document, snapshot_from_stream
from commaspacing.pipeline.results import LintRunResult
from commaspacing.syntax import TokenStream

logger = logging.getLogger(__name__)


def analyze_document(
    document: TokenStream | DocumentSnapshot | str,
    *,
    options: CommaSpacingOptions | None = None,
    cancellation: CancellationToken | None = None,
) -> list[Diagnostic]:
    """Comma spacing diagnostics for one document, in document order.

    Raises `AnalysisCancelled` if `cancellation` fires before the pass completes.
    """
    snapshot = _as_snapshot(document)
    rule = CommaSpacingRule(options=options or CommaSpacingOptions())
    diagnostics = rule.run(snapshot.stream, snapshot.comma_contexts(), cancellation)
    logger.debug(
        "Analyzed %d commas, %d diagnostics",
        len(snapshot.comma_contexts().by_index),
        len(diagnostics),
    )
    return diagnostics


def run_lint(
    text: str,
    *,
    document: DocumentSnapshot | None = None,
    options: CommaSpacingOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    cancellation: CancellationToken | None = None,
) -> LintRunResult:
    """Run lint diagnostics from a single tokenize lifecycle."""
    resolved_document = _resolve_document(text, document=document)
    if rules is not None and options is not None:
        raise ValueError("Pass either rules or options, not both")
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(options)
    validate_lint_rules(resolved_rules)

    stream = resolved_document.stream
    contexts = resolved_document.comma_contexts()
    diagnostics = list(resolved_document.diagnostics)
    for rule in resolved_rules:
        diagnostics.extend(rule.run(stream, contexts, cancellation))

    logger.debug("Lint produced %d diagnostics over %d rules", len(diagnostics), len(resolved_rules))
    return LintRunResult(
        document=resolved_document,
        diagnostics=sort_diagnostics(diagnostics),
    )


def _as_snapshot(document: TokenStream | DocumentSnapshot | str) -> DocumentSnapshot:
    if isinstance(document, DocumentSnapshot):
        return document
    if isinstance(document, TokenStream):
        return snapshot_from_stream(document)
    return snapshot_document(document)


def _resolve_document(text: str, *, document: DocumentSnapshot | None) -> DocumentSnapshot:
    if document is not None:
        if document.source_text != text:
            raise ValueError("Provided document must be a snapshot of the same text")
        return document
    return snapshot_document(text)
