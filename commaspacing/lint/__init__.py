"""Comma spacing lint rule, options, cancellation and runner."""

from commaspacing.lint.cancellation import AnalysisCancelled, CancellationToken
from commaspacing.lint.options import CommaSpacingOptions
from commaspacing.lint.rules import (
    CommaSpacingRule,
    LintConfidence,
    LintDomain,
    LintRule,
    default_lint_rules,
    is_missing_following_space,
    is_preceded_by_space,
    validate_lint_rules,
)
from commaspacing.lint.runner import analyze_document, run_lint

__all__ = [
    "AnalysisCancelled",
    "CancellationToken",
    "CommaSpacingOptions",
    "CommaSpacingRule",
    "LintConfidence",
    "LintDomain",
    "LintRule",
    "analyze_document",
    "default_lint_rules",
    "is_missing_following_space",
    "is_preceded_by_space",
    "run_lint",
    "validate_lint_rules",
]
