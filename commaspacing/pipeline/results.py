"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from commaspacing.diagnostics import Diagnostic
from commaspacing.pipeline.result import DocumentSnapshot


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one document snapshot."""

    document: DocumentSnapshot
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FixRunResult:
    """Result of analyzing a snapshot and rewriting it with every comma fix."""

    document: DocumentSnapshot
    diagnostics: list[Diagnostic]
    fixed_text: str
    applied: int
    changed: bool
