"""Comma spacing fixes."""

from commaspacing.fix.edits import OverlappingEditsError, TextEdit, apply_edits
from commaspacing.fix.fixer import (
    CommaViolation,
    StaleDiagnosticError,
    apply_fix,
    apply_fixes,
    fix_edit_for,
    fix_edits_for,
    is_comma_spacing_diagnostic,
    violation_of,
)
from commaspacing.fix.runner import run_fix

__all__ = [
    "CommaViolation",
    "OverlappingEditsError",
    "StaleDiagnosticError",
    "TextEdit",
    "apply_edits",
    "apply_fix",
    "apply_fixes",
    "fix_edit_for",
    "fix_edits_for",
    "is_comma_spacing_diagnostic",
    "run_fix",
    "violation_of",
]
