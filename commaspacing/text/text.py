from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer."""
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Offset to 1-based (line, column) lookup.

    Line breaks are `\\n`, `\\r\\n` and a lone `\\r`, the same set the lexer emits
    NEWLINE trivia for.
    """

    line_starts: tuple[int, ...]
    text_len: int

    @staticmethod
    def from_text(source: str) -> "LineIndex":
        starts = [0]
        position = 0
        length = len(source)
        while position < length:
            ch = source[position]
            if ch == "\r":
                if position + 1 < length and source[position + 1] == "\n":
                    position += 1
                starts.append(position + 1)
            elif ch == "\n":
                starts.append(position + 1)
            position += 1
        return LineIndex(line_starts=tuple(starts), text_len=length)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_col(self, offset: TextSize) -> tuple[int, int]:
        clamped = min(offset.value, self.text_len)
        line = bisect_right(self.line_starts, clamped) - 1
        return (line + 1, clamped - self.line_starts[line] + 1)
