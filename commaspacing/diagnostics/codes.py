"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from commaspacing.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the literal with its opening quote before the end of the line.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="lexer",
)

COMMA_PRECEDED_BY_SPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CommaSpacing",
    message="Commas must not be preceded by a space.",
    hint="Remove the whitespace between the comma and the preceding token.",
    severity="warning",
    category="lint/style",
)

COMMA_NOT_FOLLOWED_BY_SPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CommaSpacing",
    message="Commas must be followed by a space.",
    hint="Insert a single space after the comma.",
    severity="warning",
    category="lint/style",
)
