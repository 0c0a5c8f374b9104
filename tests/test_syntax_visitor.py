"""Tests for syntax.visitor: ASTVisitor traversal, dispatch, and depth protection."""

from __future__ import annotations

from typing import Any

import pytest

from i18nlint_react.diagnostics import DepthLimitExceededError, DiagnosticCode
from i18nlint_react.syntax import parse
from i18nlint_react.syntax.ast import CallExpression, Element, Text
from i18nlint_react.syntax.visitor import ASTVisitor
from tests.helpers.nodes import (
    attribute,
    call,
    container,
    element,
    placeholder,
    program,
    spread,
    text,
)

# ============================================================================
# HELPER VISITORS
# ============================================================================


class CountingVisitor(ASTVisitor):
    """Counts visits to each node type."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize counters."""
        super().__init__(**kwargs)
        self.counts: dict[str, int] = {}

    def visit(self, node: Any) -> Any:
        """Track each visit."""
        node_type = type(node).__name__
        self.counts[node_type] = self.counts.get(node_type, 0) + 1
        return super().visit(node)


class OrderVisitor(ASTVisitor):
    """Records element tags and text values in visit order."""

    def __init__(self) -> None:
        """Initialize collection."""
        super().__init__()
        self.seen: list[str] = []

    def visit_Element(self, node: Element) -> Any:
        self.seen.append(node.tag_name or "<>")
        return self.generic_visit(node)

    def visit_Text(self, node: Text) -> Any:
        self.seen.append(node.value)
        return self.generic_visit(node)


class StopAtCallVisitor(ASTVisitor):
    """Collects call names without descending into calls."""

    def __init__(self) -> None:
        """Initialize collection."""
        super().__init__()
        self.calls: list[str | None] = []

    def visit_CallExpression(self, node: CallExpression) -> Any:
        self.calls.append(node.callee_name)
        return node


# ============================================================================
# TRAVERSAL
# ============================================================================


class TestTraversal:
    """generic_visit() reaches every node in pre-order."""

    def test_counts_all_nodes(self) -> None:
        """Attributes, payloads and children are all reached."""
        tree = program(
            element(
                "div",
                text("a"),
                placeholder(spread(call("intl.formatMessage"))),
                container(call("f")),
                attributes=(attribute("title", container(text("t"))),),
            )
        )
        visitor = CountingVisitor()

        visitor.visit(tree)

        assert visitor.counts["Program"] == 1
        assert visitor.counts["Element"] == 2
        assert visitor.counts["Text"] == 2
        assert visitor.counts["CallExpression"] == 2
        assert visitor.counts["SpreadAttribute"] == 1
        assert visitor.counts["ExpressionContainer"] == 2
        assert visitor.counts["Attribute"] == 1
        # Call callees are identifier ScriptNodes
        assert visitor.counts["ScriptNode"] == 2

    def test_attributes_before_children(self) -> None:
        """Element attributes are visited before its children."""
        tree = element(
            "p",
            text("child"),
            attributes=(attribute("title", container(text("attr"))),),
        )
        visitor = OrderVisitor()

        visitor.visit(tree)

        assert visitor.seen == ["p", "attr", "child"]

    def test_pre_order(self) -> None:
        """Parents are visited before children, siblings left to right."""
        tree = element(None, element("a", text("1")), text("2"), element("b"))
        visitor = OrderVisitor()

        visitor.visit(tree)

        assert visitor.seen == ["<>", "a", "1", "2", "b"]

    def test_override_stops_descent(self) -> None:
        """A visit method that does not call generic_visit prunes the subtree."""
        tree = program(container(call("outer", call("inner"))))
        visitor = StopAtCallVisitor()

        visitor.visit(tree)

        assert visitor.calls == ["outer"]

    def test_generic_visit_returns_node(self) -> None:
        """The default visitor returns the node itself."""
        node = text("x")

        assert ASTVisitor().visit(node) is node

    def test_parsed_tree(self) -> None:
        """Visitors run on parser output."""
        tree = parse("const a = <p>Hi <b>there</b>{name}</p>;")
        visitor = OrderVisitor()

        visitor.visit(tree.root)

        assert visitor.seen == ["p", "Hi ", "b", "there"]


class TestDispatch:
    """Dispatch tables are per class."""

    def test_class_dispatch_table(self) -> None:
        """visit_* methods are registered by node class name."""
        assert OrderVisitor._class_visit_methods == {
            "Element": "visit_Element",
            "Text": "visit_Text",
        }
        assert StopAtCallVisitor._class_visit_methods == {
            "CallExpression": "visit_CallExpression",
        }


class TestDepthProtection:
    """Traversal depth is bounded."""

    def test_depth_limit_exceeded(self) -> None:
        """Trees deeper than max_depth raise DepthLimitExceededError."""
        node = text("leaf")
        for _ in range(20):
            node = element("b", node)
        visitor = CountingVisitor(max_depth=10)

        with pytest.raises(DepthLimitExceededError) as exc_info:
            visitor.visit(node)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED

    def test_depth_within_limit(self) -> None:
        """Trees within max_depth are fully traversed."""
        node = text("leaf")
        for _ in range(5):
            node = element("b", node)
        visitor = CountingVisitor(max_depth=10)

        visitor.visit(node)

        assert visitor.counts["Element"] == 5
