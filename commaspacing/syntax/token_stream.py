"""Index-based token stream with trivia attached to the tokens that own it."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from commaspacing.diagnostics import Diagnostic
from commaspacing.lexer import Lexer, TokenKind, TriviaKind, trivia_kind_from_token_kind
from commaspacing.text import LineIndex, TextRange, TextSize, slice_text_range


@dataclass(frozen=True, slots=True)
class SyntaxTrivia:
    kind: TriviaKind
    range: TextRange
    text: str


@dataclass(frozen=True, slots=True)
class SyntaxToken:
    """A non-trivia token together with the trivia it owns.

    Trailing trivia stops before the first line break; the line break and the
    rest of the gap belong to the next token's leading trivia.
    """

    index: int
    kind: TokenKind
    range: TextRange
    text: str
    leading: tuple[SyntaxTrivia, ...] = ()
    trailing: tuple[SyntaxTrivia, ...] = ()

    @property
    def full_range(self) -> TextRange:
        start = self.leading[0].range.start if self.leading else self.range.start
        end = self.trailing[-1].range.end if self.trailing else self.range.end
        return TextRange.new(start, end)

    @property
    def leading_trivia_text(self) -> str:
        return "".join(piece.text for piece in self.leading)

    @property
    def trailing_trivia_text(self) -> str:
        return "".join(piece.text for piece in self.trailing)

    @property
    def text_with_trivia(self) -> str:
        return self.leading_trivia_text + self.text + self.trailing_trivia_text

    def has_leading_line_break(self) -> bool:
        return any(piece.kind == TriviaKind.END_OF_LINE for piece in self.leading)


class TokenStream:
    """Immutable, indexable arena of non-trivia tokens ending with an EOF token."""

    __slots__ = ("_source", "_tokens", "_diagnostics", "_line_index")

    def __init__(
        self,
        source: str,
        tokens: Sequence[SyntaxToken],
        diagnostics: Sequence[Diagnostic] = (),
    ) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("TokenStream must be terminated by an EOF token")
        for position, token in enumerate(tokens):
            if token.index != position:
                raise ValueError(f"Token at position {position} carries index {token.index}")
        self._source = source
        self._tokens = tuple(tokens)
        self._diagnostics = tuple(diagnostics)
        self._line_index: LineIndex | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def tokens(self) -> tuple[SyntaxToken, ...]:
        return self._tokens

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Tokenizer diagnostics for the same source."""
        return self._diagnostics

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex.from_text(self._source)
        return self._line_index

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> SyntaxToken:
        return self._tokens[index]

    def __iter__(self) -> Iterator[SyntaxToken]:
        return iter(self._tokens)

    def previous(self, index: int) -> SyntaxToken | None:
        if index <= 0:
            return None
        return self._tokens[index - 1]

    def next(self, index: int) -> SyntaxToken | None:
        if index + 1 >= len(self._tokens):
            return None
        return self._tokens[index + 1]

    def comma_indices(self) -> tuple[int, ...]:
        return tuple(token.index for token in self._tokens if token.kind == TokenKind.COMMA)

    def line_col(self, offset: TextSize) -> tuple[int, int]:
        return self.line_index.line_col(offset)

    def text(self) -> str:
        """Reassemble the source from tokens and trivia."""
        return "".join(token.text_with_trivia for token in self._tokens)


def token_stream(source: str) -> TokenStream:
    """Tokenize `source` and attach each trivia piece to the token that owns it."""
    lexer = Lexer(source)
    pending: list[tuple[int, TokenKind, TextRange, list[SyntaxTrivia], list[SyntaxTrivia]]] = []
    leading: list[SyntaxTrivia] = []
    trailing = False

    for token in lexer.lex():
        if token.kind.is_trivia:
            kind = trivia_kind_from_token_kind(token.kind)
            piece = SyntaxTrivia(kind, token.range, slice_text_range(source, token.range))
            if kind == TriviaKind.END_OF_LINE:
                trailing = False
            if trailing:
                pending[-1][4].append(piece)
            else:
                leading.append(piece)
            continue

        pending.append((len(pending), token.kind, token.range, leading, []))
        leading = []
        trailing = token.kind != TokenKind.EOF

    tokens = [
        SyntaxToken(
            index=index,
            kind=kind,
            range=token_range,
            text=slice_text_range(source, token_range),
            leading=tuple(leading_pieces),
            trailing=tuple(trailing_pieces),
        )
        for index, kind, token_range, leading_pieces, trailing_pieces in pending
    ]
    return TokenStream(source, tokens, lexer.diagnostics)
