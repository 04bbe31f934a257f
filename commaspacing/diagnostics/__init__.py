"""Diagnostics."""

from commaspacing.diagnostics.codes import (
    COMMA_NOT_FOLLOWED_BY_SPACE,
    COMMA_PRECEDED_BY_SPACE,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from commaspacing.diagnostics.diagnostic import Diagnostic, Severity
from commaspacing.diagnostics.report import has_errors, sort_diagnostics

__all__ = [
    "COMMA_NOT_FOLLOWED_BY_SPACE",
    "COMMA_PRECEDED_BY_SPACE",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "sort_diagnostics",
]
