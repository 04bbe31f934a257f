"""Lexer."""

from commaspacing.lexer.lexer import HORIZONTAL_WHITESPACE, Lexer, token_text
from commaspacing.lexer.tokens import (
    Token,
    TokenFlags,
    TokenKind,
    TriviaKind,
    trivia_kind_from_token_kind,
)

__all__ = [
    "HORIZONTAL_WHITESPACE",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "TriviaKind",
    "token_text",
    "trivia_kind_from_token_kind",
]
