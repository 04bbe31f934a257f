"""Centralized comma spacing cases used across rule/fix/pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

PRECEDED: Final[str] = "Commas must not be preceded by a space."
FOLLOWED: Final[str] = "Commas must be followed by a space."

# Statements are placed on line 7, indented by 12 spaces.
_TEMPLATE: Final[str] = """namespace Foo
{{
    class Bar
    {{
        void Baz()
        {{
            {0}
        }}
    }}
}}
"""


def in_method_body(statement: str) -> str:
    return _TEMPLATE.format(statement)


@dataclass(frozen=True, slots=True)
class CommaCase:
    name: str
    statement: str
    expected: tuple[tuple[str, int, int], ...]
    fixed_statement: str

    @property
    def source(self) -> str:
        return in_method_body(self.statement)

    @property
    def fixed_source(self) -> str:
        return in_method_body(self.fixed_statement)


COMMA_CASES: tuple[CommaCase, ...] = (
    CommaCase(
        name="spaced_call_is_clean",
        statement="f(a, b);",
        expected=(),
        fixed_statement="f(a, b);",
    ),
    CommaCase(
        name="no_space_after_comma",
        statement="f(a,b);",
        expected=((FOLLOWED, 7, 16),),
        fixed_statement="f(a, b);",
    ),
    CommaCase(
        name="space_before_comma",
        statement="f(a , b);",
        expected=((PRECEDED, 7, 17),),
        fixed_statement="f(a, b);",
    ),
    CommaCase(
        name="space_before_comma_at_end_of_line",
        statement="f(a ,\nb);",
        expected=((PRECEDED, 7, 17),),
        fixed_statement="f(a,\nb);",
    ),
    CommaCase(
        name="last_comma_in_line",
        statement="f(a,\n              b);",
        expected=(),
        fixed_statement="f(a,\n              b);",
    ),
    CommaCase(
        name="first_comma_in_line",
        statement="f(a\n, b);",
        expected=(),
        fixed_statement="f(a\n, b);",
    ),
    CommaCase(
        name="indented_first_comma_in_line",
        statement="f(a\n              , b);",
        expected=(),
        fixed_statement="f(a\n              , b);",
    ),
    CommaCase(
        name="comment_before_first_comma_in_line",
        statement="f(a // comment\n, b);",
        expected=(),
        fixed_statement="f(a // comment\n, b);",
    ),
    CommaCase(
        name="comment_before_indented_first_comma_in_line",
        statement="f(a // comment\n              , b);",
        expected=(),
        fixed_statement="f(a // comment\n              , b);",
    ),
    CommaCase(
        name="space_before_comma_in_func_type",
        statement="var a = typeof(System.Func< ,>);",
        expected=((PRECEDED, 7, 41),),
        fixed_statement="var a = typeof(System.Func<,>);",
    ),
    CommaCase(
        name="comma_in_func_type",
        statement="var a = typeof(System.Func<,>);",
        expected=(),
        fixed_statement="var a = typeof(System.Func<,>);",
    ),
    CommaCase(
        name="space_before_comma_followed_by_comma_in_func_type",
        statement="var a = typeof(System.Func< ,,>);",
        expected=((PRECEDED, 7, 41),),
        fixed_statement="var a = typeof(System.Func<,,>);",
    ),
    CommaCase(
        name="comma_followed_by_comma_in_func_type",
        statement="var a = typeof(System.Func<,,>);",
        expected=(),
        fixed_statement="var a = typeof(System.Func<,,>);",
    ),
    CommaCase(
        name="both_checks_on_one_comma",
        statement="f(a ,b);",
        expected=((PRECEDED, 7, 17), (FOLLOWED, 7, 17)),
        fixed_statement="f(a, b);",
    ),
    CommaCase(
        name="generic_type_arguments_are_ordinary",
        statement="var d = new Dictionary<string,int>();",
        expected=((FOLLOWED, 7, 42),),
        fixed_statement="var d = new Dictionary<string, int>();",
    ),
    CommaCase(
        name="several_commas_in_document_order",
        statement="g(x,y , z,w);",
        expected=((FOLLOWED, 7, 16), (PRECEDED, 7, 19), (FOLLOWED, 7, 22)),
        fixed_statement="g(x, y, z, w);",
    ),
    CommaCase(
        name="tab_before_comma",
        statement="f(a\t\t, b);",
        expected=((PRECEDED, 7, 18),),
        fixed_statement="f(a, b);",
    ),
    CommaCase(
        name="block_comment_before_comma_keeps_comment",
        statement="f(a /* c */ , b);",
        expected=((PRECEDED, 7, 25),),
        fixed_statement="f(a /* c */, b);",
    ),
    CommaCase(
        name="block_comment_after_comma_needs_space",
        statement="f(a,/* c */ b);",
        expected=((FOLLOWED, 7, 16),),
        fixed_statement="f(a, /* c */ b);",
    ),
    CommaCase(
        name="block_comment_starting_line_is_not_line_start",
        statement="f(a\n  /* c */ , b);",
        expected=((PRECEDED, 8, 11),),
        fixed_statement="f(a\n  /* c */, b);",
    ),
    CommaCase(
        name="commas_inside_strings_are_not_tokens",
        statement='f("a ,b", \'c\');',
        expected=(),
        fixed_statement='f("a ,b", \'c\');',
    ),
    CommaCase(
        name="quoted_comma_inside_interpolation_hole",
        statement='var s = $"{string.Join(",", xs)}";',
        expected=(),
        fixed_statement='var s = $"{string.Join(",", xs)}";',
    ),
    CommaCase(
        name="comma_after_interpolated_string",
        statement='f($"{a},{b}",c);',
        expected=((FOLLOWED, 7, 25),),
        fixed_statement='f($"{a},{b}", c);',
    ),
    CommaCase(
        name="multidimensional_array_rank_is_ordinary",
        statement="int[,] m = null;",
        expected=((FOLLOWED, 7, 17),),
        fixed_statement="int[, ] m = null;",
    ),
    CommaCase(
        name="nested_omitted_list_inside_ordinary_list",
        statement="var t = new[] { typeof(Func<,>),typeof(Action<,,>) };",
        expected=((FOLLOWED, 7, 44),),
        fixed_statement="var t = new[] { typeof(Func<,>), typeof(Action<,,>) };",
    ),
)


def case_id(case: CommaCase) -> str:
    return case.name
