"""Syntax tree node definitions for script and markup sources.

Markup constructs (elements, text, expression containers, attributes) get
dedicated node types because the rules reason about them. Calls get a
dedicated type so the dynamic translation API can be recognised. Every
other script construct is a ScriptNode tagged with its grammar name.

Each node exposes a ``type`` tag ("element", "text", "call-expression", ...)
together with its ``span`` and ``loc``.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    "Position",
    "Location",
    # Script structure
    "Program",
    "ScriptNode",
    "CallExpression",
    "StringLiteral",
    # Markup
    "Element",
    "Text",
    "ExpressionContainer",
    "Attribute",
    "SpreadAttribute",
    # Type aliases
    "AttributeNode",
    "ASTNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Tracks character offsets into the decoded source text, so
    ``source[span.start:span.end]`` is the node's original text.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "<b>hi</b>"
        Element span: Span(start=0, end=9)
        Text "hi" span: Span(start=3, end=5)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Position:
    """Line and column of a source character.

    Lines are 1-based and columns are 0-based, counted in UTF-16 code units
    as JavaScript tooling reports them.
    """

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Location:
    """Start and end positions of a node (end is exclusive)."""

    start: Position
    end: Position


# ============================================================================
# SCRIPT STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Program:
    """Root node containing the top-level statements of a source file."""

    body: tuple["ASTNode", ...]
    span: Span
    loc: Location

    @property
    def type(self) -> str:
        return "program"


@dataclass(frozen=True, slots=True)
class ScriptNode:
    """Any script construct without a dedicated node type.

    Attributes:
        kind: Grammar node name in kebab-case (e.g. "member-expression")
        parts: Named sub-nodes in source order
        text: Source text for leaf tokens (identifiers, literals), else None
    """

    kind: str
    parts: tuple["ASTNode", ...]
    span: Span
    loc: Location
    text: str | None = None

    @property
    def type(self) -> str:
        return self.kind

    @staticmethod
    def guard(node: object) -> TypeIs["ScriptNode"]:
        """Type guard for ScriptNode."""
        return isinstance(node, ScriptNode)


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Function or method call: callee(arguments)

    Attributes:
        callee: The called expression
        arguments: Argument expressions in source order
        callee_name: Dotted name when the callee is an identifier or a
            chain of plain member accesses (``this.props.intl.formatMessage``),
            None for computed callees
    """

    callee: "ASTNode"
    arguments: tuple["ASTNode", ...]
    span: Span
    loc: Location
    callee_name: str | None = None

    @property
    def type(self) -> str:
        return "call-expression"

    @staticmethod
    def guard(node: object) -> TypeIs["CallExpression"]:
        """Type guard for CallExpression."""
        return isinstance(node, CallExpression)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Quoted string, in script or as a markup attribute value.

    The raw field preserves the original quotes for serialization.
    """

    value: str
    raw: str
    span: Span
    loc: Location

    @property
    def type(self) -> str:
        return "string-literal"


# ============================================================================
# MARKUP
# ============================================================================


@dataclass(frozen=True, slots=True)
class Element:
    """Markup element or anonymous fragment.

    Examples:
        <FormattedMessage id="x" />
        <a href="terms.html">terms</a>
        <>...</>   (fragment: tag_name is None)

    Attributes:
        tag_name: Element name as written (``Foo.Bar`` for member names),
            None for fragments
        attributes: Attributes and spread attributes in source order
        children: Child nodes (Element, Text, ExpressionContainer)
        self_closing: True for ``<Tag />`` syntax
    """

    tag_name: str | None
    attributes: tuple["AttributeNode", ...]
    children: tuple["ASTNode", ...]
    span: Span
    loc: Location
    self_closing: bool = False

    @property
    def type(self) -> str:
        return "fragment" if self.tag_name is None else "element"

    @staticmethod
    def guard(node: object) -> TypeIs["Element"]:
        """Type guard for Element (fragments included)."""
        return isinstance(node, Element)


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text between markup tokens.

    Whitespace and character references (``&nbsp;``) are kept verbatim.
    """

    value: str
    span: Span
    loc: Location

    @property
    def type(self) -> str:
        return "text"

    @staticmethod
    def guard(node: object) -> TypeIs["Text"]:
        """Type guard for Text."""
        return isinstance(node, Text)


@dataclass(frozen=True, slots=True)
class ExpressionContainer:
    """Embedded script expression: { expression }

    expression is None for empty containers and comment-only containers.
    """

    expression: "ASTNode | None"
    span: Span
    loc: Location

    @property
    def type(self) -> str:
        return "expression-container"


@dataclass(frozen=True, slots=True)
class Attribute:
    """Markup attribute: name="value", name={expr}, name=<El/> or bare name."""

    name: str
    value: "ASTNode | None"
    span: Span
    loc: Location

    @property
    def type(self) -> str:
        return "attribute"


@dataclass(frozen=True, slots=True)
class SpreadAttribute:
    """Spread of an object's properties as attributes: {...messages.greeting}"""

    argument: "ASTNode"
    span: Span
    loc: Location

    @property
    def type(self) -> str:
        return "spread-attribute"


# ============================================================================
# TYPE ALIASES
# ============================================================================

type AttributeNode = Attribute | SpreadAttribute

type ASTNode = (
    Program
    | ScriptNode
    | CallExpression
    | StringLiteral
    | Element
    | Text
    | ExpressionContainer
    | Attribute
    | SpreadAttribute
)
