"""Syntax package for script and markup sources.

Provides parser, tree definitions, visitor pattern, and serialization.
Separate from the rules to enable other tooling on the same trees.

Python 3.13+.
"""

from i18nlint_react.enums import Dialect

from .ast import (
    ASTNode,
    Attribute,
    AttributeNode,
    CallExpression,
    Element,
    ExpressionContainer,
    Location,
    Position,
    Program,
    ScriptNode,
    Span,
    SpreadAttribute,
    StringLiteral,
    Text,
)
from .parser import SourceParser, SyntaxTree
from .serializer import MarkupSerializer, serialize
from .visitor import ASTVisitor

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "Attribute",
    "AttributeNode",
    "CallExpression",
    "Element",
    "ExpressionContainer",
    "Location",
    "MarkupSerializer",
    "Position",
    "Program",
    "ScriptNode",
    "SourceParser",
    "Span",
    "SpreadAttribute",
    "StringLiteral",
    "SyntaxTree",
    "Text",
    "parse",
    "serialize",
]


def parse(source: str, file_path: str = "", *, dialect: Dialect = Dialect.JSX) -> SyntaxTree:
    """Parse source text into a syntax tree.

    Convenience function for SourceParser.parse().

    Args:
        source: Decoded source text
        file_path: Path of the file, used for reporting only
        dialect: Source dialect (default: jsx)

    Returns:
        SyntaxTree for the source

    Raises:
        SourceSyntaxError: If the source is not valid for the dialect

    Example:
        >>> from i18nlint_react.syntax import parse
        >>> tree = parse("const a = <b>hi</b>;", "a.jsx")
        >>> tree.root.body[0].type
        'lexical-declaration'
    """
    parser = SourceParser(dialect)
    return parser.parse(source, file_path)
