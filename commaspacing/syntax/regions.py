"""Matched bracket regions over a token stream, addressed by token index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from commaspacing.lexer import TokenKind
from commaspacing.syntax.token_stream import TokenStream


class BracketKind(StrEnum):
    ANGLE = "angle"
    PAREN = "paren"
    BRACKET = "bracket"
    BRACE = "brace"


@dataclass(frozen=True, slots=True)
class BracketRegion:
    """A matched delimiter pair; `open_index`/`close_index` index the token stream."""

    kind: BracketKind
    open_index: int
    close_index: int

    def encloses(self, index: int) -> bool:
        return self.open_index < index < self.close_index

    def inner_indices(self) -> range:
        return range(self.open_index + 1, self.close_index)

    @property
    def is_empty(self) -> bool:
        return self.close_index == self.open_index + 1


_OPENERS: Final[dict[TokenKind, BracketKind]] = {
    TokenKind.LPAREN: BracketKind.PAREN,
    TokenKind.LBRACKET: BracketKind.BRACKET,
    TokenKind.LBRACE: BracketKind.BRACE,
}

_CLOSERS: Final[dict[TokenKind, BracketKind]] = {
    TokenKind.RPAREN: BracketKind.PAREN,
    TokenKind.RBRACKET: BracketKind.BRACKET,
    TokenKind.RBRACE: BracketKind.BRACE,
}

# Tokens after which a `<` may open a type argument list (`Foo<`, `Foo<Bar><`).
_ANGLE_PREDECESSORS: Final[frozenset[TokenKind]] = frozenset({TokenKind.IDENTIFIER, TokenKind.GREATER_THAN})

# Tokens that may appear between `<` and `>` of a type argument list.
_TYPE_ARGUMENT_TOKENS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.COMMA,
        TokenKind.DOT,
        TokenKind.COLON_COLON,
        TokenKind.QUESTION,
        TokenKind.STAR,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LESS_THAN,
        TokenKind.GREATER_THAN,
    }
)


class BracketRegions:
    """Regions of one stream plus a precomputed innermost-region table."""

    __slots__ = ("_regions", "_innermost")

    def __init__(self, regions: Iterable[BracketRegion], token_count: int) -> None:
        ordered = sorted(regions, key=lambda region: (region.open_index, -region.close_index))
        innermost: list[BracketRegion | None] = [None] * token_count
        # Parents open before their children, so children overwrite.
        for region in ordered:
            if region.close_index >= token_count:
                raise ValueError(f"Region {region!r} exceeds stream of {token_count} tokens")
            for index in region.inner_indices():
                innermost[index] = region
        self._regions = tuple(ordered)
        self._innermost = tuple(innermost)

    @property
    def regions(self) -> tuple[BracketRegion, ...]:
        return self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[BracketRegion]:
        return iter(self._regions)

    def innermost(self, index: int) -> BracketRegion | None:
        """Tightest region whose delimiters strictly enclose the token at `index`."""
        if index < 0 or index >= len(self._innermost):
            return None
        return self._innermost[index]


def find_bracket_regions(stream: TokenStream) -> BracketRegions:
    """Match brackets in one forward pass.

    A `<` is only a tentative angle opener, and only after an identifier or `>`. It is
    abandoned as soon as a token that cannot occur in a type argument list shows
    up, or when an enclosing bracket closes first. Unmatched openers are dropped.
    """
    regions: list[BracketRegion] = []
    stack: list[tuple[BracketKind, int]] = []

    for token in stream:
        kind = token.kind
        if kind not in _TYPE_ARGUMENT_TOKENS:
            while stack and stack[-1][0] == BracketKind.ANGLE:
                stack.pop()

        if kind in _OPENERS:
            stack.append((_OPENERS[kind], token.index))
        elif kind in _CLOSERS:
            target = _CLOSERS[kind]
            for depth in range(len(stack) - 1, -1, -1):
                if stack[depth][0] == target:
                    regions.append(BracketRegion(target, stack[depth][1], token.index))
                    del stack[depth:]
                    break
        elif kind == TokenKind.LESS_THAN:
            previous = stream.previous(token.index)
            if previous is not None and previous.kind in _ANGLE_PREDECESSORS:
                stack.append((BracketKind.ANGLE, token.index))
        elif kind == TokenKind.GREATER_THAN:
            if stack and stack[-1][0] == BracketKind.ANGLE:
                _, open_index = stack.pop()
                regions.append(BracketRegion(BracketKind.ANGLE, open_index, token.index))

    return BracketRegions(regions, len(stream))
