"""Fix runner: analyze one snapshot, then rewrite it with every comma fix."""

from __future__ import annotations

import logging

from commaspacing.fix.edits import apply_edits
from commaspacing.fix.fixer import fix_edits_for
from commaspacing.lint import CancellationToken, CommaSpacingOptions, analyze_document
from commaspacing.pipeline.result import DocumentSnapshot, snapshot_document
from commaspacing.pipeline.results import FixRunResult

logger = logging.getLogger(__name__)


def run_fix(
    text: str,
    *,
    document: DocumentSnapshot | None = None,
    options: CommaSpacingOptions | None = None,
    cancellation: CancellationToken | None = None,
) -> FixRunResult:
    """Fix every comma spacing violation of `text` in a single rewrite."""
    if document is not None and document.source_text != text:
        raise ValueError("Provided document must be a snapshot of the same text")
    resolved_document = document if document is not None else snapshot_document(text)

    diagnostics = analyze_document(resolved_document, options=options, cancellation=cancellation)
    edits = fix_edits_for(text, diagnostics)
    fixed_text = apply_edits(text, edits)
    logger.debug("Applied %d comma spacing edits", len(edits))

    return FixRunResult(
        document=resolved_document,
        diagnostics=diagnostics,
        fixed_text=fixed_text,
        applied=len(edits),
        changed=fixed_text != text,
    )
