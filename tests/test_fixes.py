import pytest

from commaspacing.diagnostics import Diagnostic
from commaspacing.fix import (
    CommaViolation,
    OverlappingEditsError,
    StaleDiagnosticError,
    TextEdit,
    apply_edits,
    apply_fix,
    apply_fixes,
    fix_edit_for,
    violation_of,
)
from commaspacing.lint import analyze_document
from commaspacing.text import TextRange, TextSize
from tests._shared_cases import COMMA_CASES, CommaCase, case_id


def _non_whitespace(text: str) -> str:
    return "".join(ch for ch in text if ch not in " \t")


@pytest.mark.parametrize("case", COMMA_CASES, ids=case_id)
def test_batch_fix_produces_expected_source(case: CommaCase) -> None:
    diagnostics = analyze_document(case.source)

    assert apply_fixes(case.source, diagnostics) == case.fixed_source


@pytest.mark.parametrize("case", COMMA_CASES, ids=case_id)
def test_fixing_is_idempotent_and_local(case: CommaCase) -> None:
    fixed = apply_fixes(case.source, analyze_document(case.source))

    assert analyze_document(fixed) == []
    assert apply_fixes(fixed, analyze_document(fixed)) == fixed
    assert _non_whitespace(fixed) == _non_whitespace(case.source)
    assert fixed.count("\n") == case.source.count("\n")


def test_single_fix_only_touches_its_comma() -> None:
    source = "g(x,y , z)"
    followed, preceded = analyze_document(source)

    assert violation_of(followed) == CommaViolation.NOT_FOLLOWED_BY_SPACE
    assert violation_of(preceded) == CommaViolation.PRECEDED_BY_SPACE
    assert apply_fix(source, followed) == "g(x, y , z)"
    assert apply_fix(source, preceded) == "g(x,y, z)"


def test_preceded_fix_deletes_only_the_adjacent_whitespace_run() -> None:
    source = "f(a /* keep */ \t , b)"
    (diagnostic,) = analyze_document(source)
    edit = fix_edit_for(source, diagnostic)

    assert edit == TextEdit.delete(TextRange(14, 17))
    assert apply_fix(source, diagnostic) == "f(a /* keep */, b)"


def test_followed_fix_inserts_exactly_one_space() -> None:
    source = "f(a,b)"
    (diagnostic,) = analyze_document(source)

    assert fix_edit_for(source, diagnostic) == TextEdit.insert(TextSize(4), " ")


def test_stale_diagnostic_fails_loudly() -> None:
    source = "f(a ,b)"
    preceded, _ = analyze_document(source)

    with pytest.raises(StaleDiagnosticError):
        apply_fix("f(a, b)", preceded)
    with pytest.raises(StaleDiagnosticError):
        apply_fix("f", preceded)


def test_foreign_diagnostics_are_rejected_by_single_fix_and_skipped_by_batch() -> None:
    foreign = Diagnostic(code="LEXER_UNTERMINATED_STRING", message="Unterminated string literal.", range=TextRange(0, 1))

    with pytest.raises(ValueError, match="Not a comma spacing diagnostic"):
        apply_fix('"a,b', foreign)
    assert apply_fixes('"a,b', [foreign]) == '"a,b'


def test_overlapping_edits_fail_loudly() -> None:
    with pytest.raises(OverlappingEditsError):
        apply_edits("abcdef", [TextEdit.delete(TextRange(1, 4)), TextEdit.delete(TextRange(3, 5))])
    with pytest.raises(OverlappingEditsError):
        apply_edits("abc", [TextEdit.insert(TextSize(1), " "), TextEdit.insert(TextSize(1), " ")])


def test_duplicate_diagnostics_cannot_be_applied_twice() -> None:
    source = "f(a,b)"
    (diagnostic,) = analyze_document(source)

    with pytest.raises(OverlappingEditsError):
        apply_fixes(source, [diagnostic, diagnostic])


def test_edits_apply_out_of_order_against_original_offsets() -> None:
    edits = [
        TextEdit.insert(TextSize(6), "!"),
        TextEdit.delete(TextRange(0, 1)),
        TextEdit(TextRange(2, 3), "XY"),
        TextEdit.insert(TextSize(3), "_"),
    ]

    assert apply_edits("abcdef", edits) == "bXY_def!"


def test_out_of_bounds_edit_is_rejected() -> None:
    with pytest.raises(ValueError, match="out of bounds"):
        apply_edits("ab", [TextEdit.insert(TextSize(5), " ")])
