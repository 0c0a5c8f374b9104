"""Render syntax tree nodes back to source text.

Markup is regenerated the way a JSX code generator prints it: attributes on
one line separated by single spaces, ``<Tag ... />`` for self-closing
elements, text children verbatim, markup directly inside ``{...}``
regenerated as well. Other script constructs are not regenerated; their
original source text is used.

Used to build the highlighted snippet of a finding.

Python 3.13+.
"""

from i18nlint_react.constants import MAX_DEPTH
from i18nlint_react.core.depth_guard import DepthGuard

from .ast import (
    ASTNode,
    Attribute,
    Element,
    ExpressionContainer,
    SpreadAttribute,
    StringLiteral,
    Text,
)

__all__ = ["MarkupSerializer", "serialize"]


class MarkupSerializer:
    """Converts tree nodes back to source text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> tree = parse('<b   className="x">hi</b>;', dialect=Dialect.JSX)
        >>> element = tree.root.body[0].parts[0]
        >>> MarkupSerializer().serialize(element, tree.source)
        '<b className="x">hi</b>'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._max_depth = max_depth

    def serialize(self, node: ASTNode, source: str) -> str:
        """Serialize a node to source text.

        Args:
            node: Node to render
            source: Source text the node was parsed from

        Returns:
            Rendered text

        Raises:
            DepthLimitExceededError: If the node nests deeper than max_depth
        """
        output: list[str] = []
        self._serialize(node, source, output, DepthGuard(max_depth=self._max_depth))
        return "".join(output)

    def _serialize(
        self, node: ASTNode, source: str, output: list[str], guard: DepthGuard
    ) -> None:
        with guard:
            match node:
                case Element():
                    self._serialize_element(node, source, output, guard)
                case Text(value=value):
                    output.append(value)
                case ExpressionContainer(expression=None):
                    output.append(source[node.span.start : node.span.end])
                case ExpressionContainer(expression=Element() as inner):
                    output.append("{")
                    self._serialize_element(inner, source, output, guard)
                    output.append("}")
                case ExpressionContainer(expression=expression):
                    output.append("{")
                    output.append(source[expression.span.start : expression.span.end])
                    output.append("}")
                case Attribute():
                    self._serialize_attribute(node, source, output, guard)
                case SpreadAttribute(argument=argument):
                    output.append("{...")
                    output.append(source[argument.span.start : argument.span.end])
                    output.append("}")
                case StringLiteral(raw=raw):
                    output.append(raw)
                case _:
                    # Script constructs keep their original text
                    output.append(source[node.span.start : node.span.end])

    def _serialize_element(
        self, node: Element, source: str, output: list[str], guard: DepthGuard
    ) -> None:
        tag = node.tag_name or ""
        output.append("<")
        output.append(tag)
        for attribute in node.attributes:
            output.append(" ")
            self._serialize(attribute, source, output, guard)

        if node.self_closing:
            output.append(" />")
            return

        output.append(">")
        for child in node.children:
            self._serialize(child, source, output, guard)
        output.append("</")
        output.append(tag)
        output.append(">")

    def _serialize_attribute(
        self, node: Attribute, source: str, output: list[str], guard: DepthGuard
    ) -> None:
        output.append(node.name)
        if node.value is not None:
            output.append("=")
            self._serialize(node.value, source, output, guard)


def serialize(node: ASTNode, source: str) -> str:
    """Render a node back to source text.

    Convenience function for MarkupSerializer.serialize().

    Args:
        node: Node to render
        source: Source text the node was parsed from

    Returns:
        Rendered text

    Example:
        >>> tree = parse("<FormattedMessage\\n    id='a'\\n/>;", dialect=Dialect.JSX)
        >>> serialize(tree.root.body[0].parts[0], tree.source)
        "<FormattedMessage id='a' />"
    """
    return MarkupSerializer().serialize(node, source)
