"""Exception hierarchy with structured diagnostics.

All exceptions may store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LintError(Exception):
    """Base exception for all i18nlint-react errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LintError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SourceSyntaxError(LintError):
    """Source text is not valid for the declared dialect.

    The parser never recovers from syntax errors. Callers decide whether
    to skip the file or abort.

    Attributes:
        file_path: Path of the file that failed to parse
        line: 1-based line of the first error (None if unknown)
        column: 0-based column of the first error (None if unknown)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        file_path: str = "",
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize SourceSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            file_path: Path of the file that failed to parse
            line: 1-based line of the first error
            column: 0-based column of the first error
        """
        super().__init__(message)
        self.file_path = file_path
        self.line = line
        self.column = column


class ConfigurationError(LintError):
    """A rule was handed a representation it cannot evaluate.

    Signals a wiring bug between the parser and the rule, not a defect
    in the analysed file.
    """


class DepthLimitExceededError(LintError):
    """Raised when maximum traversal depth is exceeded.

    This error indicates either:
    - Pathologically deep nesting in the analysed source
    - Malformed programmatic tree construction
    """
