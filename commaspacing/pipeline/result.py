"""Document snapshot carrier: tokenize once, consume from lint and fix."""

from __future__ import annotations

from dataclasses import dataclass, field

from commaspacing.analysis import CommaContexts, classify_commas
from commaspacing.diagnostics import Diagnostic, has_errors
from commaspacing.syntax import BracketRegions, TokenStream, find_bracket_regions, token_stream


@dataclass(slots=True)
class DocumentSnapshot:
    """One immutable source text with its token stream and lazily derived facts."""

    source_text: str
    stream: TokenStream
    _regions: BracketRegions | None = field(default=None, init=False, repr=False)
    _contexts: CommaContexts | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.stream.source != self.source_text:
            raise ValueError("Token stream must be built from the snapshot's source text")

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.stream.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.stream.diagnostics)

    def regions(self) -> BracketRegions:
        if self._regions is None:
            self._regions = find_bracket_regions(self.stream)
        return self._regions

    def comma_contexts(self) -> CommaContexts:
        if self._contexts is None:
            self._contexts = classify_commas(self.stream, self.regions())
        return self._contexts


def snapshot_document(text: str) -> DocumentSnapshot:
    return DocumentSnapshot(source_text=text, stream=token_stream(text))


def snapshot_from_stream(stream: TokenStream) -> DocumentSnapshot:
    return DocumentSnapshot(source_text=stream.source, stream=stream)
