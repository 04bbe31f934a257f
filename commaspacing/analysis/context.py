"""List context of commas: ordinary lists versus omitted type argument lists."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from commaspacing.lexer import TokenKind
from commaspacing.syntax import BracketKind, BracketRegion, BracketRegions, TokenStream


class ListContext(StrEnum):
    ORDINARY = "ordinary"
    OMITTED_TYPE_ARGUMENT_LIST = "omitted_type_argument_list"


def classify(stream: TokenStream, region: BracketRegion) -> ListContext:
    """Classify one bracketed region.

    Only an angle region holding nothing but commas (`<,>`, `<,,>`) is an omitted
    type argument list. Empty regions and every other shape are ordinary.
    """
    if region.kind != BracketKind.ANGLE or region.is_empty:
        return ListContext.ORDINARY
    for index in region.inner_indices():
        if stream[index].kind != TokenKind.COMMA:
            return ListContext.ORDINARY
    return ListContext.OMITTED_TYPE_ARGUMENT_LIST


@dataclass(frozen=True, slots=True)
class CommaContexts:
    """Context of every comma in a stream, keyed by token index."""

    by_index: Mapping[int, ListContext] = field(default_factory=dict)

    def context_of(self, index: int) -> ListContext:
        return self.by_index.get(index, ListContext.ORDINARY)

    def is_omitted_type_argument_list(self, index: int) -> bool:
        return self.context_of(index) == ListContext.OMITTED_TYPE_ARGUMENT_LIST


def classify_commas(stream: TokenStream, regions: BracketRegions) -> CommaContexts:
    """Attach the innermost region's context to each comma, one `classify` per region."""
    by_region: dict[BracketRegion, ListContext] = {}
    by_index: dict[int, ListContext] = {}
    for index in stream.comma_indices():
        region = regions.innermost(index)
        if region is None:
            by_index[index] = ListContext.ORDINARY
            continue
        context = by_region.get(region)
        if context is None:
            context = classify(stream, region)
            by_region[region] = context
        by_index[index] = context
    return CommaContexts(by_index=by_index)
