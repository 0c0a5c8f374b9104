"""Source parser: text in, syntax tree out.

This module provides the SourceParser class that drives the grammar engine
and the tree builder, and the SyntaxTree it produces.

Architecture:
    1. Size guard on the encoded source
    2. Grammar engine parse (grammar tables cached per process, see
       :mod:`~i18nlint_react.syntax.parser.languages`)
    3. Error check: the grammar engine recovers from errors by inserting
       ERROR and MISSING nodes; the first one found is reported as a
       SourceSyntaxError and no tree is returned
    4. Tree building (:mod:`~i18nlint_react.syntax.parser.builder`)

Security:
    Includes configurable input size and nesting depth limits.
"""

import logging
import time
from dataclasses import dataclass

from tree_sitter import Node as GrammarNode

from i18nlint_react.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from i18nlint_react.diagnostics import ErrorTemplate, SourceSpan, SourceSyntaxError
from i18nlint_react.enums import Dialect, RepresentationType
from i18nlint_react.syntax.ast import Program
from i18nlint_react.syntax.position import LineIndex, get_error_context
from i18nlint_react.syntax.parser.builder import TreeBuilder
from i18nlint_react.syntax.parser.languages import new_parser

__all__ = ["SourceParser", "SyntaxTree"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """Parsed source file.

    Attributes:
        root: Program node
        source: Decoded source text; node spans index into it
        file_path: Path used for reporting only
        dialect: Dialect the source was parsed as
    """

    root: Program
    source: str
    file_path: str
    dialect: Dialect

    @property
    def representation(self) -> RepresentationType:
        """Rule routing tag for this tree."""
        if self.dialect.allows_markup:
            return RepresentationType.MARKUP_AST
        return RepresentationType.SCRIPT_AST


def _first_error(root: GrammarNode) -> GrammarNode | None:
    """Find the first ERROR or MISSING node in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        # Push in reverse so the leftmost child is examined first
        stack.extend(child for child in reversed(node.children) if child.has_error)
    return None


class SourceParser:
    """Parser for one source dialect.

    Design:
    - Pure: no state survives between parse() calls
    - Never recovers from syntax errors; the first one is raised
    - Error messages include line:column with source context

    Security:
    - Configurable max_source_size (default: 10 MB)
    - Configurable max_depth bounding tree nesting (default: MAX_DEPTH)

    Attributes:
        dialect: Dialect this parser accepts
        max_source_size: Maximum allowed source size in bytes
        max_depth: Maximum allowed tree nesting depth
    """

    __slots__ = ("_dialect", "_max_depth", "_max_source_size")

    def __init__(
        self,
        dialect: Dialect = Dialect.JSX,
        *,
        max_source_size: int | None = None,
        max_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            dialect: Source dialect (default: jsx)
            max_source_size: Maximum source size in bytes (default: 10 MB).
                Set to 0 to disable the limit.
            max_depth: Maximum tree nesting depth (default: MAX_DEPTH)
        """
        self._dialect = Dialect(dialect)
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_depth = max_depth if max_depth is not None else MAX_DEPTH

    @property
    def dialect(self) -> Dialect:
        """Dialect this parser accepts."""
        return self._dialect

    @property
    def max_source_size(self) -> int:
        """Maximum source size in bytes (0 means unlimited)."""
        return self._max_source_size

    @property
    def max_depth(self) -> int:
        """Maximum tree nesting depth."""
        return self._max_depth

    def parse(self, source: str, file_path: str = "") -> SyntaxTree:
        """Parse source text into a syntax tree.

        Args:
            source: Decoded source text
            file_path: Path of the file, used for reporting only

        Returns:
            SyntaxTree for the source

        Raises:
            SourceSyntaxError: If the source is not valid for the dialect,
                exceeds max_source_size, or nests deeper than max_depth
        """
        started = time.perf_counter()
        index = LineIndex(source)
        data = index.data

        if self._max_source_size and len(data) > self._max_source_size:
            raise SourceSyntaxError(
                ErrorTemplate.source_too_large(file_path, len(data), self._max_source_size),
                file_path=file_path,
            )

        grammar_tree = new_parser(self._dialect).parse(data)
        root = grammar_tree.root_node
        if root.has_error:
            self._raise_syntax_error(root, source, index, file_path)

        builder = TreeBuilder(
            source,
            index,
            file_path=file_path,
            allow_markup=self._dialect.allows_markup,
            max_depth=self._max_depth,
        )
        program = builder.build(root)

        logger.debug(
            "Parsed %s as %s in %.2f ms (%d bytes)",
            file_path or "<string>",
            self._dialect,
            (time.perf_counter() - started) * 1000,
            len(data),
        )
        return SyntaxTree(root=program, source=source, file_path=file_path, dialect=self._dialect)

    def _raise_syntax_error(
        self, root: GrammarNode, source: str, index: LineIndex, file_path: str
    ) -> None:
        error_node = _first_error(root) or root
        position = index.position(error_node.start_byte)
        start = index.char_offset(error_node.start_byte)
        span = SourceSpan(
            start=start,
            end=index.char_offset(error_node.end_byte),
            line=position.line,
            column=position.column,
        )
        missing = error_node.type if error_node.is_missing else None
        logger.debug(
            "Syntax error in %s at %d:%d", file_path or "<string>", position.line, position.column
        )
        raise SourceSyntaxError(
            ErrorTemplate.syntax_error(
                file_path,
                self._dialect,
                span,
                get_error_context(source, start),
                missing=missing,
            ),
            file_path=file_path,
            line=position.line,
            column=position.column,
        )
