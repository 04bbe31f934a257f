import pytest

from commaspacing.analysis import classify_commas
from commaspacing.fix import apply_fixes
from commaspacing.lint import (
    AnalysisCancelled,
    CancellationToken,
    CommaSpacingOptions,
    CommaSpacingRule,
    analyze_document,
    is_missing_following_space,
    is_preceded_by_space,
)
from commaspacing.syntax import find_bracket_regions, token_stream
from tests._debug import debug_print_diagnostics
from tests._shared_cases import COMMA_CASES, FOLLOWED, PRECEDED, CommaCase, case_id


@pytest.mark.parametrize("case", COMMA_CASES, ids=case_id)
def test_comma_spacing_diagnostics(case: CommaCase) -> None:
    diagnostics = analyze_document(case.source)
    debug_print_diagnostics(case.name, diagnostics)

    assert [(d.message, d.line, d.column) for d in diagnostics] == list(case.expected)
    for diagnostic in diagnostics:
        assert diagnostic.code == "CommaSpacing"
        assert diagnostic.severity == "warning"
        assert diagnostic.category == "lint/style"
        assert case.source[diagnostic.range.start.value : diagnostic.range.end.value] == ","


@pytest.mark.parametrize("case", COMMA_CASES, ids=case_id)
def test_fixed_sources_are_clean(case: CommaCase) -> None:
    assert analyze_document(case.fixed_source) == []


def test_checks_are_pure_functions_of_the_stream() -> None:
    stream = token_stream("f(a ,b, c)")
    contexts = classify_commas(stream, find_bracket_regions(stream))
    first, second = stream.comma_indices()

    assert is_preceded_by_space(stream, first)
    assert is_missing_following_space(stream, first, contexts)
    assert not is_preceded_by_space(stream, second)
    assert not is_missing_following_space(stream, second, contexts)


def test_comma_at_start_of_document_keeps_leading_whitespace() -> None:
    assert analyze_document("   , a") == []


def test_comma_at_end_of_document_needs_nothing_after_it() -> None:
    assert analyze_document("f(a,") == []


def test_consecutive_commas_need_no_space_between_them() -> None:
    diagnostics = analyze_document("f(a,,b)")

    assert [(d.message, d.column) for d in diagnostics] == [(FOLLOWED, 5)]


def test_space_inside_omitted_list_is_still_reported_before_each_comma() -> None:
    diagnostics = analyze_document("typeof(Func<, ,>)")

    assert [(d.message, d.column) for d in diagnostics] == [(PRECEDED, 15)]


def test_omitted_list_after_closing_angle_only_reports_preceding_space() -> None:
    source = "Foo<Bar>< ,>"
    diagnostics = analyze_document(source)

    assert [(d.message, d.column) for d in diagnostics] == [(PRECEDED, 11)]
    assert apply_fixes(source, diagnostics) == "Foo<Bar><,>"


def test_block_comment_line_start_is_opt_in() -> None:
    source = "f(a\n  /* c */ , b);"
    options = CommaSpacingOptions(block_comment_starts_line=True)

    assert [d.message for d in analyze_document(source)] == [PRECEDED]
    assert analyze_document(source, options=options) == []
    # Without a line break a block comment never makes the comma first on its line.
    assert [d.message for d in analyze_document("f(a /* c */ , b);", options=options)] == [PRECEDED]


def test_block_comment_ending_previous_line_counts_as_line_start() -> None:
    assert analyze_document("f(a /* c */\n    , b);") == []


def test_crlf_line_endings() -> None:
    source = "f(a,\r\n  b ,c);\r\n"
    diagnostics = analyze_document(source)

    assert [(d.message, d.line, d.column) for d in diagnostics] == [
        (PRECEDED, 2, 5),
        (FOLLOWED, 2, 5),
    ]


def test_rule_metadata() -> None:
    rule = CommaSpacingRule()

    assert rule.code == "CommaSpacing"
    assert rule.name == "commaSpacing"
    assert rule.domain == "style"
    assert rule.options == CommaSpacingOptions()


def test_cancelled_pass_reports_nothing() -> None:
    token = CancellationToken()
    token.cancel()

    assert token.is_cancelled
    with pytest.raises(AnalysisCancelled):
        analyze_document("f(a,b);", cancellation=token)


def test_cancellation_is_only_checked_per_comma() -> None:
    token = CancellationToken()
    token.cancel()

    assert analyze_document("f(a);", cancellation=token) == []


def test_live_token_does_not_interrupt() -> None:
    token = CancellationToken()

    assert len(analyze_document("f(a,b,c);", cancellation=token)) == 2
