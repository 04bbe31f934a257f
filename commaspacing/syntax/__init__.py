"""Token stream arena and bracket regions."""

from commaspacing.syntax.regions import (
    BracketKind,
    BracketRegion,
    BracketRegions,
    find_bracket_regions,
)
from commaspacing.syntax.token_stream import (
    SyntaxToken,
    SyntaxTrivia,
    TokenStream,
    token_stream,
)

__all__ = [
    "BracketKind",
    "BracketRegion",
    "BracketRegions",
    "SyntaxToken",
    "SyntaxTrivia",
    "TokenStream",
    "find_bracket_regions",
    "token_stream",
]
