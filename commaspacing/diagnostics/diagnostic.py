"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from commaspacing.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and lint rules.

    `line` and `column` are 1-based and refer to `range.start`.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    line: int = 1
    column: int = 1
    hint: str | None = None
    category: str | None = None
