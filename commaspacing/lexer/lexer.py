"""Lexer."""

from typing import Final

from commaspacing.diagnostics import Diagnostic, DiagnosticSpec
from commaspacing.diagnostics.codes import LEXER_UNTERMINATED_COMMENT, LEXER_UNTERMINATED_STRING
from commaspacing.lexer.tokens import Token, TokenFlags, TokenKind
from commaspacing.text import LineIndex, TextRange, TextSize, slice_text_range

HORIZONTAL_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t", "\f", "\v"})

_SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "=": TokenKind.EQUAL,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "^": TokenKind.CARET,
    "|": TokenKind.PIPE,
    "&": TokenKind.AMP,
    "?": TokenKind.QUESTION,
    "!": TokenKind.BANG,
    "~": TokenKind.TILDE,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "@": TokenKind.AT,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class Lexer:
    """Lossless lexer for C-family source that emits trivia and non-trivia tokens.

    `<<` and `>>` are never produced: angle brackets always lex one character at a
    time so nested generic argument lists close one `>` per level.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = TextSize.from_int(0)
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []
        self._line_index: LineIndex | None = None

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._current_flags)

        kind = self._lex_token()
        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\r" or ch == "\n" or ch in HORIZONTAL_WHITESPACE:
            return self._consume_newline_or_whitespaces()

        if ch == "/" and self._peek_char() == "/":
            return self._lex_single_line_comment()
        if ch == "/" and self._peek_char() == "*":
            return self._lex_multi_line_comment()

        if ch == '"':
            return self._lex_quoted('"', TokenKind.STRING)
        if ch == "'":
            return self._lex_quoted("'", TokenKind.CHAR)
        if ch == "@" and self._peek_char() == '"':
            return self._lex_verbatim_string()
        if ch == "$" and self._peek_char() == '"':
            return self._lex_interpolated_string(prefix_len=1, verbatim=False)
        if ch in "$@" and self._peek_char() in "$@" and self._peek_char() != ch and self._peek_char(2) == '"':
            return self._lex_interpolated_string(prefix_len=2, verbatim=True)

        if ch.isdigit():
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        # Two-character operators
        if ch == "=" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.EQUAL_EQUAL
        if ch == "=" and self._peek_char() == ">":
            self._advance(2)
            return TokenKind.ARROW
        if ch == "!" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.NOT_EQUAL
        if ch == "<" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.LESS_THAN_OR_EQUAL
        if ch == ">" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.GREATER_THAN_OR_EQUAL
        if ch == "&" and self._peek_char() == "&":
            self._advance(2)
            return TokenKind.AMP_AMP
        if ch == "|" and self._peek_char() == "|":
            self._advance(2)
            return TokenKind.PIPE_PIPE
        if ch == "?" and self._peek_char() == "?":
            self._advance(2)
            return TokenKind.QUESTION_QUESTION
        if ch == ":" and self._peek_char() == ":":
            self._advance(2)
            return TokenKind.COLON_COLON

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        self._advance(1)
        if kind is not None:
            return kind

        # Fallback: preserve bytes as SKIPPED for recovery.
        return TokenKind.SKIPPED

    def _lex_single_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.SINGLE_LINE_COMMENT

    def _lex_multi_line_comment(self) -> TokenKind:
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return TokenKind.MULTI_LINE_COMMENT
            self._advance(1)
        self._report(LEXER_UNTERMINATED_COMMENT)
        return TokenKind.MULTI_LINE_COMMENT

    def _lex_quoted(self, quote: str, kind: TokenKind) -> TokenKind:
        if not self._scan_quoted(quote):
            self._report(LEXER_UNTERMINATED_STRING)
        return kind

    def _lex_verbatim_string(self) -> TokenKind:
        if not self._scan_verbatim():
            self._report(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _lex_interpolated_string(self, prefix_len: int, verbatim: bool) -> TokenKind:
        if not self._scan_interpolated(prefix_len, verbatim):
            self._report(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _scan_quoted(self, quote: str) -> bool:
        # Consume opening quote
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                return True
            if ch == "\\":
                self._scan_escape()
                continue
            if ch == "\n" or ch == "\r":
                return False
            self._advance(1)
        return False

    def _scan_verbatim(self) -> bool:
        # `@"..."` spans lines; a doubled quote is an escaped quote.
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == '"':
                if self._peek_char() == '"':
                    self._current_flags |= TokenFlags.HAS_ESCAPE
                    self._advance(2)
                    continue
                self._advance(1)
                return True
            self._advance(1)
        return False

    def _scan_interpolated(self, prefix_len: int, verbatim: bool) -> bool:
        # `{{` and `}}` are literal braces; a single `{` opens an expression hole.
        self._advance(prefix_len + 1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "{":
                if self._peek_char() == "{":
                    self._advance(2)
                    continue
                self._advance(1)
                if not self._scan_interpolation_hole():
                    return False
                continue
            if ch == "}":
                self._advance(2 if self._peek_char() == "}" else 1)
                continue
            if ch == '"':
                if verbatim and self._peek_char() == '"':
                    self._current_flags |= TokenFlags.HAS_ESCAPE
                    self._advance(2)
                    continue
                self._advance(1)
                return True
            if not verbatim:
                if ch == "\\":
                    self._scan_escape()
                    continue
                if ch == "\n" or ch == "\r":
                    return False
            self._advance(1)
        return False

    def _scan_interpolation_hole(self) -> bool:
        """Skip one `{...}` hole, including literals nested inside it."""
        depth = 1
        while not self.is_eof:
            ch = self._current_char()
            scanned: bool | None = None
            if ch == '"' or ch == "'":
                scanned = self._scan_quoted(ch)
            elif ch == "@" and self._peek_char() == '"':
                scanned = self._scan_verbatim()
            elif ch == "$" and self._peek_char() == '"':
                scanned = self._scan_interpolated(prefix_len=1, verbatim=False)
            elif ch in "$@" and self._peek_char() in "$@" and self._peek_char() != ch and self._peek_char(2) == '"':
                scanned = self._scan_interpolated(prefix_len=2, verbatim=True)
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    self._advance(1)
                    return True

            if scanned is None:
                self._advance(1)
            elif not scanned:
                return False
        return False

    def _scan_escape(self) -> None:
        self._current_flags |= TokenFlags.HAS_ESCAPE
        self._advance(1)
        if not self.is_eof and self._current_char() not in "\r\n":
            self._advance(1)

    def _lex_number(self) -> TokenKind:
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            if ch == "." and not saw_dot and self._peek_char().isdigit():
                saw_dot = True
                self._advance(1)
                continue
            break
        return TokenKind.FLOAT if saw_dot else TokenKind.INT

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        return TokenKind.IDENTIFIER

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            if self._current_char() in HORIZONTAL_WHITESPACE:
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _report(self, spec: DiagnosticSpec) -> None:
        if self._line_index is None:
            self._line_index = LineIndex.from_text(self._source)
        line, column = self._line_index.line_col(self._current_start)
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=spec.message,
                range=self.current_range,
                severity=spec.severity,
                line=line,
                column=column,
                hint=spec.hint,
                category=spec.category,
            )
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)
