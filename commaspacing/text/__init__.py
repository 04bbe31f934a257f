"""Text offsets, ranges and line/column lookup."""

from commaspacing.text.text import LineIndex, TextRange, TextSize, slice_text_range

__all__ = ["LineIndex", "TextRange", "TextSize", "slice_text_range"]
