"""Position utilities for analysed source code.

Converts between character offsets, UTF-8 byte offsets and line/column
positions. The grammar engine reports byte offsets and byte columns;
node spans are character offsets.

Conventions:
- Offsets and columns are 0-based, lines returned by line_offset are 0-based
- Node locations (ast.Position) use 1-based lines and 0-based UTF-16
  columns, counted the way JavaScript tooling reports them
"""

import re
from bisect import bisect_right

from .ast import Position

__all__ = [
    "LineIndex",
    "column_offset",
    "get_error_context",
    "line_offset",
]

# ECMAScript line terminators
_LINE_BREAK = re.compile("\r\n|[\n\r\u2028\u2029]")


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)   # Start of file
        0
        >>> line_offset(source, 6)   # Start of line2
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))  # Clamp to source length

    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> source = "hello\\nworld"
        >>> column_offset(source, 2)   # 'l' in "hello"
        2
        >>> column_offset(source, 6)   # 'w' in "world"
        0
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))  # Clamp to source length

    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def get_error_context(source: str, pos: int, context_lines: int = 2, marker: str = "^") -> str:
    """Get formatted error context showing position in source.

    Creates a multi-line string showing the error location with
    surrounding context lines and a marker pointing to the error.

    Args:
        source: Complete source text
        pos: Character offset of error
        context_lines: Number of lines to show before/after error
        marker: Character to use for error marker

    Returns:
        Formatted error context string

    Example:
        >>> source = "line1\\nline2\\nerror here\\nline4\\nline5"
        >>> print(get_error_context(source, 12, context_lines=1))
        line2
        error here
        ^
        line4
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)

    lines = source.split("\n")

    start_line = max(0, line_num - context_lines)
    end_line = min(len(lines), line_num + context_lines + 1)

    context = []
    for i in range(start_line, end_line):
        context.append(lines[i].rstrip("\r"))
        if i == line_num:
            context.append(" " * col_num + marker)

    return "\n".join(context)


class LineIndex:
    """Byte offset converter for one source text.

    Built once per parse. Character offsets index the decoded source.
    Positions follow ECMAScript source positions: lines end at LF, CR,
    CRLF, LINE SEPARATOR and PARAGRAPH SEPARATOR, and columns count UTF-16
    code units, so a character outside the Basic Multilingual Plane takes
    two columns.

    Lookups are O(log lines) plus the decoding of at most one line prefix,
    so converting every node of a file stays linear in practice.

    Example:
        >>> index = LineIndex("é = 1;\\nx")
        >>> index.char_offset(3)   # byte 3 is the '=' after the 2-byte 'é'
        2
        >>> index.position(8)
        Position(line=2, column=0)
    """

    __slots__ = ("_ascii", "_char_starts", "_data", "_line_starts")

    def __init__(self, source: str) -> None:
        self._data = source.encode("utf-8")
        self._ascii = len(self._data) == len(source)
        line_starts = [0]
        char_starts = [0]
        for match in _LINE_BREAK.finditer(source):
            end = match.end()
            line_starts.append(
                line_starts[-1] + len(source[char_starts[-1] : end].encode("utf-8"))
            )
            char_starts.append(end)
        self._line_starts = line_starts
        self._char_starts = char_starts

    @property
    def data(self) -> bytes:
        """UTF-8 encoding of the source."""
        return self._data

    def _line_of(self, byte_offset: int) -> int:
        return bisect_right(self._line_starts, byte_offset) - 1

    def _prefix(self, line: int, byte_offset: int) -> str:
        return self._data[self._line_starts[line] : byte_offset].decode("utf-8", errors="replace")

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset to a character offset."""
        if self._ascii:
            return byte_offset
        line = self._line_of(byte_offset)
        return self._char_starts[line] + len(self._prefix(line, byte_offset))

    def position(self, byte_offset: int) -> Position:
        """Convert a UTF-8 byte offset to a 1-based line, 0-based UTF-16 column."""
        line = self._line_of(byte_offset)
        if self._ascii:
            return Position(line=line + 1, column=byte_offset - self._line_starts[line])
        prefix = self._prefix(line, byte_offset)
        astral = sum(1 for char in prefix if ord(char) > 0xFFFF)
        return Position(line=line + 1, column=len(prefix) + astral)
