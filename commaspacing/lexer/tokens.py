"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from commaspacing.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    SINGLE_LINE_COMMENT = 12
    MULTI_LINE_COMMENT = 13
    SKIPPED = 14  # unknown characters, preserved losslessly

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    CHAR = 22
    INT = 23
    FLOAT = 24

    # -------------------------
    # Operators (multi-char included)
    # -------------------------
    EQUAL = 30  # =
    EQUAL_EQUAL = 31  # ==
    NOT_EQUAL = 32  # !=
    LESS_THAN_OR_EQUAL = 33  # <=
    GREATER_THAN_OR_EQUAL = 34  # >=
    LESS_THAN = 35  # <
    GREATER_THAN = 36  # >
    ARROW = 37  # =>
    AMP_AMP = 38  # &&
    PIPE_PIPE = 39  # ||
    QUESTION_QUESTION = 40  # ??
    COLON_COLON = 41  # ::

    PLUS = 50  # +
    MINUS = 51  # -
    STAR = 52  # *
    SLASH = 53  # /
    PERCENT = 54  # %
    CARET = 55  # ^
    PIPE = 56  # |
    AMP = 57  # &
    QUESTION = 58  # ?
    BANG = 59  # !
    TILDE = 60  # ~

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COLON = 70  # :
    SEMICOLON = 71  # ;
    COMMA = 72  # ,
    DOT = 73  # .
    AT = 74  # @

    LBRACE = 80  # {
    RBRACE = 81  # }
    LBRACKET = 82  # [
    RBRACKET = 83  # ]
    LPAREN = 84  # (
    RPAREN = 85  # )

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.SINGLE_LINE_COMMENT,
            TokenKind.MULTI_LINE_COMMENT,
            TokenKind.SKIPPED,
        )


class TriviaKind(IntEnum):
    """The trivia vocabulary (separate from TokenKind for type-safety)."""

    WHITESPACE = 1
    END_OF_LINE = 2
    SINGLE_LINE_COMMENT = 3
    MULTI_LINE_COMMENT = 4
    SKIPPED = 5


def trivia_kind_from_token_kind(kind: TokenKind) -> TriviaKind:
    """Map lexer trivia token kinds to TriviaKind.

    Raises if called with a non-trivia TokenKind.
    """
    match kind:
        case TokenKind.NEWLINE:
            return TriviaKind.END_OF_LINE
        case TokenKind.WHITESPACE:
            return TriviaKind.WHITESPACE
        case TokenKind.SINGLE_LINE_COMMENT:
            return TriviaKind.SINGLE_LINE_COMMENT
        case TokenKind.MULTI_LINE_COMMENT:
            return TriviaKind.MULTI_LINE_COMMENT
        case TokenKind.SKIPPED:
            return TriviaKind.SKIPPED
        case _:
            raise ValueError(f"Not a trivia token kind: {kind!r}")


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    HAS_ESCAPE = 1 << 0


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

