"""Position utilities for source text.

Converts byte offsets into line/column positions for diagnostic rendering,
and line numbers back into the text of that line.

Offsets are measured in bytes of the UTF-8 encoding, the unit parsers and
deserializers report in. Python strings index code points, so the index
keeps the encoded bytes alongside the line-break table and decodes only the
slices it hands out.
"""

from bisect import bisect_left
from dataclasses import dataclass

from spanreport.constants import LINE_BREAK
from spanreport.diagnostics.errors import LineOutOfRangeError, OffsetOutOfRangeError

__all__ = ["Location", "PositionIndex"]

# Leading bits 10xxxxxx mark a UTF-8 continuation byte
_CONTINUATION_MASK = 0xC0
_CONTINUATION_BITS = 0x80


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """Line/column position in a source.

    Attributes:
        line: Line number (1-indexed)
        column: Byte offset within the line (1-indexed)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate Location invariants.

        Raises:
            ValueError: If line or column is less than 1.
        """
        if self.line < 1:
            msg = f"Location.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"Location.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PositionIndex:
    """Line-break index over one source's content.

    Records every line-break offset in one pass at construction, then answers
    lookups with a binary search over that table. Use one index per source
    and share it across every label pointing into that source.

    Example:
        >>> index = PositionIndex("line1\\nline2\\nline3")
        >>> index.to_location(0)
        Location(line=1, column=1)
        >>> index.to_location(8)   # Third byte of line 2
        Location(line=2, column=3)
        >>> index.line_text(3)
        'line3'

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_breaks", "_data")

    def __init__(self, content: str) -> None:
        """Build the line-break table.

        Args:
            content: Source text to index

        Complexity:
            O(n) where n = encoded length of content
        """
        data = content.encode("utf-8")
        self._data = data
        self._breaks: tuple[int, ...] = tuple(
            i for i, byte in enumerate(data) if byte == LINE_BREAK
        )

    @property
    def line_breaks(self) -> tuple[int, ...]:
        """Byte offsets of every line break, strictly increasing."""
        return self._breaks

    @property
    def line_count(self) -> int:
        """Number of lines; the fragment after the last break counts, even if empty."""
        return len(self._breaks) + 1

    @property
    def byte_length(self) -> int:
        return len(self._data)

    def to_location(self, offset: int) -> Location:
        """Get the line/column of a byte offset.

        An offset equal to a line-break offset belongs to the line that the
        break terminates, i.e. it is the "end of line" position.

        Args:
            offset: Byte offset in ``[0, byte_length]``

        Returns:
            1-based Location

        Raises:
            OffsetOutOfRangeError: If offset is outside the content or
                falls inside a multi-byte character.

        Complexity:
            O(log n) where n = number of lines
        """
        self._check_offset(offset)
        index = bisect_left(self._breaks, offset)
        if index == 0:
            return Location(1, offset + 1)
        return Location(index + 1, offset - self._breaks[index - 1])

    def to_offset(self, location: Location) -> int:
        """Get the byte offset of a line/column position.

        Inverse of ``to_location``.

        Raises:
            LineOutOfRangeError: If the line does not exist.
            OffsetOutOfRangeError: If the column lies past the end of the line.
        """
        start = self.line_start(location.line)
        end = self._line_end(location.line)
        offset = start + location.column - 1
        if offset > end:
            msg = (
                f"Column {location.column} out of range for line {location.line} "
                f"({end - start} bytes)"
            )
            raise OffsetOutOfRangeError(msg, offset=offset, limit=len(self._data))
        return offset

    def line_start(self, line: int) -> int:
        """Get the byte offset where a 1-based line begins."""
        self._check_line(line)
        if line == 1:
            return 0
        return self._breaks[line - 2] + 1

    def line_text(self, line: int) -> str:
        """Get the text of a 1-based line, without its line break.

        Raises:
            LineOutOfRangeError: If line is 0 or exceeds line_count.
        """
        return self._data[self.line_start(line) : self._line_end(line)].decode("utf-8")

    def slice(self, start: int, end: int) -> str:
        """Decode the bytes ``[start, end)``.

        Raises:
            OffsetOutOfRangeError: If either bound is invalid.
        """
        self._check_offset(start)
        self._check_offset(end)
        return self._data[start:end].decode("utf-8")

    def _line_end(self, line: int) -> int:
        if line <= len(self._breaks):
            return self._breaks[line - 1]
        return len(self._data)

    def _check_line(self, line: int) -> None:
        if line < 1 or line > self.line_count:
            msg = f"Line {line} out of range (source has {self.line_count} lines)"
            raise LineOutOfRangeError(msg, line=line, line_count=self.line_count)

    def _check_offset(self, offset: int) -> None:
        limit = len(self._data)
        if offset < 0 or offset > limit:
            msg = f"Offset {offset} out of range (source has {limit} bytes)"
            raise OffsetOutOfRangeError(msg, offset=offset, limit=limit)
        if offset < limit and self._data[offset] & _CONTINUATION_MASK == _CONTINUATION_BITS:
            msg = f"Offset {offset} falls inside a multi-byte character"
            raise OffsetOutOfRangeError(msg, offset=offset, limit=limit)
