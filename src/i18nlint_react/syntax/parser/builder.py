"""Build syntax trees from grammar engine parse trees.

The grammar engine produces a concrete tree with byte positions. The builder
turns it into the immutable nodes of :mod:`i18nlint_react.syntax.ast`:

- Markup elements, attributes and expression containers get dedicated nodes
- Text between markup tokens is rebuilt from the source, so whitespace and
  character references between two children form one Text node, exactly as
  a JSX compiler sees them
- Calls get a CallExpression with the dotted callee name
- Comments are dropped; every other construct becomes a ScriptNode

Positions are converted to character offsets and 1-based line / 0-based
column locations via :class:`~i18nlint_react.syntax.position.LineIndex`.
"""

from tree_sitter import Node as GrammarNode

from i18nlint_react.constants import MAX_DEPTH
from i18nlint_react.core.depth_guard import DepthGuard, depth_clamp
from i18nlint_react.diagnostics import (
    DepthLimitExceededError,
    ErrorTemplate,
    SourceSpan,
    SourceSyntaxError,
)
from i18nlint_react.syntax.ast import (
    ASTNode,
    Attribute,
    AttributeNode,
    CallExpression,
    Element,
    ExpressionContainer,
    Location,
    Program,
    ScriptNode,
    Span,
    SpreadAttribute,
    StringLiteral,
    Text,
)
from i18nlint_react.syntax.position import LineIndex

__all__ = ["TreeBuilder"]

_SKIPPED_TYPES = frozenset({"comment", "html_comment"})

# Children of an element that are nodes of their own; anything else between
# the opening and closing tag is text.
_MARKUP_CHILD_TYPES = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_expression"})

_ATTRIBUTE_TYPES = frozenset({"jsx_attribute", "jsx_expression"})

_NAME_PART_TYPES = frozenset(
    {"identifier", "property_identifier", "private_property_identifier", "this", "super"}
)


def _first_of_type(node: GrammarNode, node_type: str) -> GrammarNode | None:
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


class TreeBuilder:
    """Converts one grammar engine tree into a Program.

    Single use: create one builder per parse.

    Depth is counted one level per built node, the Program and Text nodes
    included, the same way ASTVisitor.generic_visit counts. A tree built
    with a given max_depth can therefore be walked by any visitor with the
    same limit.

    Attributes:
        allow_markup: False for plain script, where markup is an error
    """

    __slots__ = ("_file_path", "_guard", "_index", "_source", "allow_markup")

    def __init__(
        self,
        source: str,
        index: LineIndex,
        *,
        file_path: str = "",
        allow_markup: bool = True,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self._source = source
        self._index = index
        self._file_path = file_path
        # _build -> _build_script -> _build_parts -> genexpr per level
        self._guard = DepthGuard(max_depth=depth_clamp(max_depth, frames_per_level=4))
        self.allow_markup = allow_markup

    def build(self, root: GrammarNode) -> Program:
        """Build the Program for a grammar engine root node.

        Raises:
            SourceSyntaxError: If markup appears in plain script or the tree
                nests deeper than max_depth
        """
        try:
            # The Program is a level of its own, as for ASTVisitor
            with self._guard:
                body = self._build_parts(root)
        except DepthLimitExceededError as e:
            raise SourceSyntaxError(
                ErrorTemplate.nesting_depth_exceeded(self._file_path, self._guard.max_depth),
                file_path=self._file_path,
            ) from e
        return Program(body=body, span=self._span(root), loc=self._loc(root))

    # ========================================================================
    # POSITIONS
    # ========================================================================

    def _span(self, node: GrammarNode) -> Span:
        return Span(
            start=self._index.char_offset(node.start_byte),
            end=self._index.char_offset(node.end_byte),
        )

    def _loc(self, node: GrammarNode) -> Location:
        return Location(
            start=self._index.position(node.start_byte),
            end=self._index.position(node.end_byte),
        )

    def _text(self, start_byte: int, end_byte: int) -> str:
        return self._index.data[start_byte:end_byte].decode("utf-8")

    # ========================================================================
    # DISPATCH
    # ========================================================================

    def _build_parts(self, node: GrammarNode) -> tuple[ASTNode, ...]:
        return tuple(
            self._build(child)
            for child in node.named_children
            if child.type not in _SKIPPED_TYPES
        )

    def _build(self, node: GrammarNode) -> ASTNode:
        with self._guard:
            node_type = node.type
            if node_type.startswith("jsx_"):
                self._check_markup_allowed(node)
            match node_type:
                case "jsx_element" | "jsx_self_closing_element":
                    return self._build_element(node)
                case "jsx_expression":
                    return self._build_expression_container(node)
                case "call_expression":
                    return self._build_call(node)
                case "string":
                    return self._build_string(node)
                case _:
                    return self._build_script(node)

    def _check_markup_allowed(self, node: GrammarNode) -> None:
        if self.allow_markup:
            return
        position = self._index.position(node.start_byte)
        raise SourceSyntaxError(
            ErrorTemplate.markup_in_script(
                self._file_path,
                SourceSpan(
                    start=self._index.char_offset(node.start_byte),
                    end=self._index.char_offset(node.end_byte),
                    line=position.line,
                    column=position.column,
                ),
            ),
            file_path=self._file_path,
            line=position.line,
            column=position.column,
        )

    # ========================================================================
    # SCRIPT
    # ========================================================================

    def _build_script(self, node: GrammarNode) -> ScriptNode:
        parts = self._build_parts(node)
        text = None if parts else self._text(node.start_byte, node.end_byte)
        return ScriptNode(
            kind=node.type.replace("_", "-"),
            parts=parts,
            span=self._span(node),
            loc=self._loc(node),
            text=text,
        )

    def _build_string(self, node: GrammarNode) -> StringLiteral:
        raw = self._text(node.start_byte, node.end_byte)
        return StringLiteral(
            value=raw[1:-1],
            raw=raw,
            span=self._span(node),
            loc=self._loc(node),
        )

    def _build_call(self, node: GrammarNode) -> CallExpression:
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        if function is None:
            return self._build_script(node)  # type: ignore[return-value]

        if arguments is None:
            args: tuple[ASTNode, ...] = ()
        elif arguments.type == "arguments":
            args = self._build_parts(arguments)
        else:
            # Tagged template: the template string is the only argument
            args = (self._build(arguments),)

        return CallExpression(
            callee=self._build(function),
            arguments=args,
            span=self._span(node),
            loc=self._loc(node),
            callee_name=self._dotted_name(function),
        )

    def _dotted_name(self, node: GrammarNode) -> str | None:
        """Return ``a.b.c`` for identifier/member chains, None otherwise."""
        if node.type in _NAME_PART_TYPES:
            return self._text(node.start_byte, node.end_byte)
        if node.type != "member_expression":
            return None
        obj = node.child_by_field_name("object")
        prop = node.child_by_field_name("property")
        if obj is None or prop is None or prop.type not in _NAME_PART_TYPES:
            return None
        prefix = self._dotted_name(obj)
        if prefix is None:
            return None
        return f"{prefix}.{self._text(prop.start_byte, prop.end_byte)}"

    # ========================================================================
    # MARKUP
    # ========================================================================

    def _build_element(self, node: GrammarNode) -> Element:
        if node.type == "jsx_self_closing_element":
            return Element(
                tag_name=self._tag_name(node),
                attributes=self._build_attributes(node),
                children=(),
                span=self._span(node),
                loc=self._loc(node),
                self_closing=True,
            )

        open_tag = node.child_by_field_name("open_tag") or _first_of_type(
            node, "jsx_opening_element"
        )
        close_tag = node.child_by_field_name("close_tag") or _first_of_type(
            node, "jsx_closing_element"
        )
        if open_tag is None or close_tag is None:
            # The grammar guarantees both tags on error-free trees
            return self._build_script(node)  # type: ignore[return-value]

        return Element(
            tag_name=self._tag_name(open_tag),
            attributes=self._build_attributes(open_tag),
            children=self._build_children(node, open_tag.end_byte, close_tag.start_byte),
            span=self._span(node),
            loc=self._loc(node),
        )

    def _tag_name(self, tag: GrammarNode) -> str | None:
        name = tag.child_by_field_name("name")
        if name is None:
            return None
        return self._text(name.start_byte, name.end_byte)

    def _build_attributes(self, tag: GrammarNode) -> tuple[AttributeNode, ...]:
        attributes: list[AttributeNode] = []
        for child in tag.named_children:
            if child.type not in _ATTRIBUTE_TYPES:
                continue
            with self._guard:
                if child.type == "jsx_attribute":
                    attributes.append(self._build_attribute(child))
                else:
                    attributes.append(self._build_spread_attribute(child))
        return tuple(attributes)

    def _build_attribute(self, node: GrammarNode) -> Attribute:
        parts = [c for c in node.named_children if c.type not in _SKIPPED_TYPES]
        name = self._text(parts[0].start_byte, parts[0].end_byte) if parts else ""
        value = self._build(parts[1]) if len(parts) > 1 else None
        return Attribute(name=name, value=value, span=self._span(node), loc=self._loc(node))

    def _build_spread_attribute(self, node: GrammarNode) -> AttributeNode:
        parts = [c for c in node.named_children if c.type not in _SKIPPED_TYPES]
        spread = parts[0] if parts else None
        if spread is None or spread.type != "spread_element" or not spread.named_children:
            # {expr} without "..." in attribute position is not valid markup;
            # keep it as an attribute without a name rather than failing
            with self._guard:
                value = self._build_expression_container(node)
            return Attribute(
                name="",
                value=value,
                span=self._span(node),
                loc=self._loc(node),
            )
        return SpreadAttribute(
            argument=self._build(spread.named_children[0]),
            span=self._span(node),
            loc=self._loc(node),
        )

    def _build_expression_container(self, node: GrammarNode) -> ExpressionContainer:
        parts = [c for c in node.named_children if c.type not in _SKIPPED_TYPES]
        expression = self._build(parts[0]) if parts else None
        return ExpressionContainer(
            expression=expression, span=self._span(node), loc=self._loc(node)
        )

    def _build_children(
        self, node: GrammarNode, start_byte: int, end_byte: int
    ) -> tuple[ASTNode, ...]:
        """Build element children, rebuilding text runs from the source.

        The grammar drops whitespace-only text and splits text at line ends
        and character references; a JSX compiler keeps every stretch of
        source between two markup tokens as a single text child.
        """
        children: list[ASTNode] = []
        cursor = start_byte
        for child in node.named_children:
            if child.type not in _MARKUP_CHILD_TYPES:
                continue
            if child.start_byte > cursor:
                children.append(self._build_text(cursor, child.start_byte))
            children.append(self._build(child))
            cursor = child.end_byte
        if end_byte > cursor:
            children.append(self._build_text(cursor, end_byte))
        return tuple(children)

    def _build_text(self, start_byte: int, end_byte: int) -> Text:
        index = self._index
        with self._guard:
            return Text(
                value=self._text(start_byte, end_byte),
                span=Span(start=index.char_offset(start_byte), end=index.char_offset(end_byte)),
                loc=Location(start=index.position(start_byte), end=index.position(end_byte)),
            )
