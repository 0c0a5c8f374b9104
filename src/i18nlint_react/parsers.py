"""Parser plugins, one per source dialect.

Each parser turns a file (or a string with its path) into a list of
intermediate representations for the rules. Only one representation is
produced per file.

Python 3.13+.
"""

import logging
from pathlib import Path
from typing import ClassVar

from i18nlint_react.enums import Dialect
from i18nlint_react.representation import IntermediateRepresentation
from i18nlint_react.syntax import SourceParser

__all__ = [
    "FlowParser",
    "JSParser",
    "JSXParser",
    "Parser",
    "TSXParser",
    "parser_for_path",
]

logger = logging.getLogger(__name__)


class Parser:
    """Base class for dialect parsers.

    Subclasses set the class attributes; everything else is shared.

    Attributes:
        name: Short parser name
        description: Human-readable description
        extensions: File extensions (without dot) this parser handles
        dialect: Source dialect passed to SourceParser
        file_path: File parsed by parse(), if one was given
    """

    name: ClassVar[str]
    description: ClassVar[str]
    extensions: ClassVar[tuple[str, ...]]
    dialect: ClassVar[Dialect]

    def __init__(
        self,
        file_path: str | Path | None = None,
        *,
        max_source_size: int | None = None,
        max_depth: int | None = None,
    ) -> None:
        self.file_path = str(file_path) if file_path is not None else None
        self._parser = SourceParser(
            self.dialect, max_source_size=max_source_size, max_depth=max_depth
        )

    def parse_string(self, source: str, file_path: str = "") -> IntermediateRepresentation:
        """Parse source text.

        Raises:
            SourceSyntaxError: If the source is not valid for the dialect
        """
        tree = self._parser.parse(source, file_path)
        return IntermediateRepresentation.from_tree(tree)

    def parse_file(self, path: str | Path) -> IntermediateRepresentation:
        """Read a UTF-8 file and parse it.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
            SourceSyntaxError: If the source is not valid for the dialect
        """
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("Read %d characters from %s", len(source), path)
        return self.parse_string(source, str(path))

    def parse(self) -> list[IntermediateRepresentation]:
        """Parse the file given at construction time.

        Raises:
            ValueError: If the parser was created without a file path
        """
        if self.file_path is None:
            msg = f"{type(self).__name__} was created without a file path"
            raise ValueError(msg)
        return [self.parse_file(self.file_path)]


class JSParser(Parser):
    """Parser for plain script files."""

    name = "js"
    description = "A parser for JS files."
    extensions = ("js", "mjs", "cjs")
    dialect = Dialect.JS


class JSXParser(Parser):
    """Parser for script files with embedded markup."""

    name = "jsx"
    description = "A parser for JSX files."
    extensions = ("jsx", "js")
    dialect = Dialect.JSX


class FlowParser(Parser):
    """Parser for script files with markup and type annotations.

    Accepts plain markup files as well, so it is preferred for .js and .jsx.
    """

    name = "flow"
    description = "A parser for JS and JSX files with flow type definitions."
    extensions = ("js", "jsx")
    dialect = Dialect.FLOW


class TSXParser(Parser):
    """Parser for typed script files with embedded markup."""

    name = "tsx"
    description = "A parser for TSX files."
    extensions = ("tsx",)
    dialect = Dialect.TSX


# Markup-aware parsers win for shared extensions; annotated markup is a
# superset of plain markup
_PARSERS_BY_PRIORITY: tuple[type[Parser], ...] = (TSXParser, FlowParser, JSXParser, JSParser)


def parser_for_path(path: str | Path, **options: int | None) -> Parser | None:
    """Pick the parser for a file by its extension.

    Args:
        path: File path
        **options: max_source_size / max_depth passed to the parser

    Returns:
        Parser bound to path, or None if no parser handles the extension

    Example:
        >>> parser_for_path("src/App.tsx").name
        'tsx'
        >>> parser_for_path("README.md") is None
        True
    """
    extension = Path(path).suffix.lstrip(".").lower()
    for parser_class in _PARSERS_BY_PRIORITY:
        if extension in parser_class.extensions:
            return parser_class(path, **options)
    return None
