"""Minimal text edits that resolve comma spacing diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import StrEnum

from commaspacing.diagnostics import COMMA_NOT_FOLLOWED_BY_SPACE, COMMA_PRECEDED_BY_SPACE, Diagnostic
from commaspacing.fix.edits import TextEdit, apply_edits, edit_preview
from commaspacing.lexer import HORIZONTAL_WHITESPACE
from commaspacing.text import TextRange, TextSize, slice_text_range

logger = logging.getLogger(__name__)


class StaleDiagnosticError(ValueError):
    """The diagnostic does not point at a comma of the text being fixed."""


class CommaViolation(StrEnum):
    PRECEDED_BY_SPACE = "preceded_by_space"
    NOT_FOLLOWED_BY_SPACE = "not_followed_by_space"


def is_comma_spacing_diagnostic(diagnostic: Diagnostic) -> bool:
    return diagnostic.code == COMMA_PRECEDED_BY_SPACE.code and diagnostic.message in (
        COMMA_PRECEDED_BY_SPACE.message,
        COMMA_NOT_FOLLOWED_BY_SPACE.message,
    )


def violation_of(diagnostic: Diagnostic) -> CommaViolation:
    if diagnostic.code == COMMA_PRECEDED_BY_SPACE.code:
        if diagnostic.message == COMMA_PRECEDED_BY_SPACE.message:
            return CommaViolation.PRECEDED_BY_SPACE
        if diagnostic.message == COMMA_NOT_FOLLOWED_BY_SPACE.message:
            return CommaViolation.NOT_FOLLOWED_BY_SPACE
    raise ValueError(f"Not a comma spacing diagnostic: {diagnostic.code} {diagnostic.message!r}")


def fix_edit_for(source: str, diagnostic: Diagnostic) -> TextEdit:
    """Edit for one diagnostic; `diagnostic.range` must cover a comma of `source`."""
    violation = violation_of(diagnostic)
    comma = diagnostic.range
    if comma.end.value > len(source) or slice_text_range(source, comma) != ",":
        raise StaleDiagnosticError(f"Diagnostic range {comma!r} does not cover a comma")

    match violation:
        case CommaViolation.PRECEDED_BY_SPACE:
            start = comma.start.value
            while start > 0 and source[start - 1] in HORIZONTAL_WHITESPACE:
                start -= 1
            return TextEdit.delete(TextRange.new(TextSize(start), comma.start))
        case CommaViolation.NOT_FOLLOWED_BY_SPACE:
            return TextEdit.insert(comma.end, " ")


def apply_fix(source: str, diagnostic: Diagnostic) -> str:
    return apply_edits(source, (fix_edit_for(source, diagnostic),))


def fix_edits_for(source: str, diagnostics: Iterable[Diagnostic]) -> list[TextEdit]:
    """Edits for every comma spacing diagnostic; other diagnostics are ignored."""
    edits: list[TextEdit] = []
    for diagnostic in diagnostics:
        if not is_comma_spacing_diagnostic(diagnostic):
            continue
        edit = fix_edit_for(source, diagnostic)
        logger.debug("Fix at %d:%d %s", diagnostic.line, diagnostic.column, edit_preview(source, edit))
        edits.append(edit)
    return edits


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    """Batch variant of `apply_fix`: one rewrite for all non-overlapping edits."""
    return apply_edits(source, fix_edits_for(source, diagnostics))
