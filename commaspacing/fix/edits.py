"""Text edits over an immutable source snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from commaspacing.text import TextRange, TextSize, slice_text_range


class OverlappingEditsError(ValueError):
    """Two edits of one rewrite touch the same span of the original text."""


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace `range` of the original text with `new_text`."""

    range: TextRange
    new_text: str

    @staticmethod
    def delete(range: TextRange) -> "TextEdit":
        return TextEdit(range, "")

    @staticmethod
    def insert(offset: TextSize, text: str) -> "TextEdit":
        return TextEdit(TextRange.empty(offset), text)

    @property
    def is_insert(self) -> bool:
        return self.range.is_empty()


def _conflicts(first: TextEdit, second: TextEdit) -> bool:
    # `first` sorts before `second`; two inserts at one offset have no defined order.
    if first.range.end.value > second.range.start.value:
        return True
    return first.is_insert and second.is_insert and first.range.start == second.range.start


def apply_edits(source: str, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping edits in one pass; every range refers to `source`."""
    ordered = sorted(edits, key=lambda edit: (edit.range.start.value, edit.range.end.value))
    for first, second in zip(ordered, ordered[1:]):
        if _conflicts(first, second):
            raise OverlappingEditsError(f"Edits overlap: {first.range!r} and {second.range!r}")

    if ordered and ordered[-1].range.end.value > len(source):
        raise ValueError(f"Edit {ordered[-1].range!r} is out of bounds for text of length {len(source)}")

    parts: list[str] = []
    cursor = 0
    for edit in ordered:
        parts.append(source[cursor : edit.range.start.value])
        parts.append(edit.new_text)
        cursor = edit.range.end.value
    parts.append(source[cursor:])
    return "".join(parts)


def edit_preview(source: str, edit: TextEdit) -> str:
    """`old -> new` rendering of one edit for logs."""
    return f"{slice_text_range(source, edit.range)!r} -> {edit.new_text!r}"
