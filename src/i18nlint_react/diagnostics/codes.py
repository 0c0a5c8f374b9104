"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (parser failures)
        2000-2999: Traversal errors (depth protection)
        3000-3999: Configuration errors (wiring between parser and rule)
    """

    # Syntax errors (1000-1999)
    SYNTAX_ERROR = 1001
    SOURCE_TOO_LARGE = 1002
    NESTING_DEPTH_EXCEEDED = 1003
    MARKUP_IN_SCRIPT = 1004

    # Traversal errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Configuration errors (3000-3999)
    REPRESENTATION_MISMATCH = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (0-indexed, same convention as node locations)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1, or column is negative.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"SourceSpan.column must be >= 0, got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the error is not tied to a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        file_path: Path of the analysed file, when known
        context: Source excerpt with a marker under the error position
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    file_path: str | None = None
    context: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Delegates to formatter.format_diagnostic.

        Example output:
            error[SYNTAX_ERROR]: Unexpected syntax in x/y.jsx
              --> line 3, column 8
              = help: Fix the source so that it parses as jsx

        Returns:
            Formatted error message
        """
        from .formatter import format_diagnostic  # noqa: PLC0415 - circular

        return format_diagnostic(self)
