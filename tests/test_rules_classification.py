"""Tests for the pure classification helpers of rules.no_broken_messages.

All trees are hand-built; no parsing involved.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses

import pytest

from i18nlint_react.config import RuleConfig
from i18nlint_react.core import DepthGuard
from i18nlint_react.diagnostics import DepthLimitExceededError
from i18nlint_react.enums import Dialect
from i18nlint_react.rules import NoBrokenMessages
from i18nlint_react.rules.no_broken_messages import (
    SEPARATED_DESCRIPTION,
    NodeCounts,
    count_node_types,
    has_placeholder,
    is_breaking_node,
    is_broken_string,
)
from i18nlint_react.syntax import SyntaxTree
from i18nlint_react.syntax.ast import ASTNode, Location, Position
from tests.helpers.nodes import (
    attribute,
    container,
    element,
    placeholder,
    program,
    text,
)


def _evaluate(*body: ASTNode) -> list:
    tree = SyntaxTree(root=program(*body), source="", file_path="x/y.js", dialect=Dialect.JSX)
    return NoBrokenMessages().evaluate(tree)


# ============================================================================
# is_breaking_node
# ============================================================================


class TestIsBreakingNode:
    """Text, placeholders and inline tags are non-breaking."""

    def test_text(self) -> None:
        """Text never breaks a run, even whitespace."""
        assert not is_breaking_node(text("words"))
        assert not is_breaking_node(text("\n    "))

    def test_placeholder(self) -> None:
        """The placeholder component is non-breaking."""
        assert not is_breaking_node(placeholder())

    @pytest.mark.parametrize("tag", ["a", "b", "em", "span", "strong", "br", "sup"])
    def test_inline_tags(self, tag: str) -> None:
        """Allow-listed inline tags are non-breaking."""
        assert not is_breaking_node(element(tag, text()))

    @pytest.mark.parametrize("tag", ["div", "p", "li", "Button", "Link", "B"])
    def test_other_tags(self, tag: str) -> None:
        """Every other element breaks the run; matching is case-sensitive."""
        assert is_breaking_node(element(tag, text()))

    def test_fragment(self) -> None:
        """Fragments break the run."""
        assert is_breaking_node(element(None, text()))

    def test_expression_container(self) -> None:
        """Expression containers break the run."""
        assert is_breaking_node(container())

    def test_custom_config(self) -> None:
        """The placeholder tag and allow-list come from the config."""
        config = RuleConfig(placeholder_tag="Msg", non_breaking_tags=frozenset({"Link"}))

        assert not is_breaking_node(element("Msg"), config)
        assert not is_breaking_node(element("Link", text()), config)
        assert is_breaking_node(placeholder(), config)
        assert is_breaking_node(element("a", text()), config)


# ============================================================================
# count_node_types / is_broken_string
# ============================================================================


class TestCountNodeTypes:
    """Recursive counting through element children."""

    def test_empty(self) -> None:
        """No nodes, no counts."""
        assert count_node_types([]) == NodeCounts(0, 0)

    def test_flat(self) -> None:
        """Placeholders and other named elements are counted; text is not."""
        nodes = [placeholder(), text(), element("a", text()), container()]

        assert count_node_types(nodes) == NodeCounts(formatted_message=1, non_breaking=1)

    def test_recursive(self) -> None:
        """Children of elements are counted recursively."""
        nodes = [placeholder(), element("a", placeholder()), placeholder()]

        assert count_node_types(nodes) == NodeCounts(formatted_message=3, non_breaking=1)

    def test_fragment_not_counted(self) -> None:
        """Fragments are descended into but not counted themselves."""
        nodes = [element(None, placeholder(), element("b", text()))]

        assert count_node_types(nodes) == NodeCounts(formatted_message=1, non_breaking=1)

    def test_block_elements_counted(self) -> None:
        """Breaking elements inside an inline tag count as other elements."""
        nodes = [element("a", element("div", text()))]

        assert count_node_types(nodes) == NodeCounts(formatted_message=0, non_breaking=2)

    def test_attributes_not_counted(self) -> None:
        """Placeholder payloads are not part of the count."""
        nested = placeholder(attribute("values", container(placeholder())))

        assert count_node_types([nested]) == NodeCounts(formatted_message=1, non_breaking=0)

    def test_counts_add(self) -> None:
        """NodeCounts add field-wise."""
        assert NodeCounts(1, 2) + NodeCounts(3, 4) == NodeCounts(4, 6)

    def test_depth_guard(self) -> None:
        """Deep children lists hit the guard."""
        node = placeholder()
        for _ in range(20):
            node = element("b", node)

        with pytest.raises(DepthLimitExceededError):
            count_node_types([node], guard=DepthGuard(max_depth=5))


class TestIsBrokenString:
    """More than one placeholder, or any other element, is a broken string."""

    @pytest.mark.parametrize(
        ("nodes", "expected"),
        [
            ([], False),
            ([text()], False),
            ([placeholder()], False),
            ([text(), placeholder(), text()], False),
            ([placeholder(), placeholder()], True),
            ([text(), element("a", text())], True),
            ([element("b", placeholder(), placeholder())], True),
        ],
    )
    def test_cases(self, nodes: list[ASTNode], expected: bool) -> None:
        """Threshold cases."""
        assert is_broken_string(nodes) is expected


# ============================================================================
# Separated runs on hand-built trees
# ============================================================================


class TestRunThreshold:
    """Runs need more than three members before they are judged."""

    def test_short_children_list(self) -> None:
        """Three children or fewer never produce a run finding."""
        parent = element("div", placeholder(), element("a", text()), placeholder())

        assert _evaluate(parent) == []

    def test_run_of_three_broken(self) -> None:
        """Two placeholders and one inline tag in a run of three are tolerated."""
        parent = element(
            "div", placeholder(), placeholder(), element("b", text()), container()
        )

        assert _evaluate(parent) == []

    def test_placeholder_inline_placeholder(self) -> None:
        """[FM, <a>FM</a>, FM] alone passes; one more member is a finding."""
        run = (placeholder(), element("a", placeholder()), placeholder())
        loc = Location(start=Position(3, 4), end=Position(9, 10))
        parent = dataclasses.replace(element("div", *run, text()), loc=loc)

        assert _evaluate(element("div", *run)) == []

        results = _evaluate(parent)
        assert len(results) == 1
        assert results[0].description == SEPARATED_DESCRIPTION
        assert (results[0].line_number, results[0].char_number) == (3, 4)
        assert (results[0].end_line_number, results[0].end_char_number) == (9, 10)

    def test_run_reset_by_breaking_child(self) -> None:
        """Breaking children split runs; each run is judged alone."""
        parent = element(
            "div",
            text(),
            placeholder(),
            text(),
            container(),
            placeholder(),
            text(),
            element("b", text()),
        )

        assert _evaluate(parent) == []

    def test_one_finding_per_run(self) -> None:
        """Two broken runs under one parent give two findings."""
        broken_run = (text(), placeholder(), text(), placeholder())
        parent = element("div", *broken_run, container(), *broken_run)

        assert len(_evaluate(parent)) == 2

    def test_flagged_children_not_revisited(self) -> None:
        """Children of a reported run are not scanned again."""
        inner = element("b", text(), placeholder(), text(), placeholder())
        parent = element("div", inner, text(), placeholder(), text())

        assert len(_evaluate(parent)) == 1

    def test_unflagged_children_visited(self) -> None:
        """Children outside reported runs are still scanned."""
        inner = element("b", text(), placeholder(), text(), placeholder())
        parent = element("div", inner, container())

        results = _evaluate(parent)
        assert len(results) == 1
        assert results[0].highlight == (
            "<e0><b>x<FormattedMessage />x<FormattedMessage /></b></e0>"
        )

    def test_no_placeholder_no_finding(self) -> None:
        """A tree without placeholders never has findings."""
        parent = element("p", text(), element("a", text()), text(), element("b", text()))

        assert _evaluate(parent) == []

    def test_inline_run_without_placeholder(self) -> None:
        """With a placeholder elsewhere in the file, inline runs are judged on counts."""
        parent = element("p", text(), element("a", text()), text(), element("b", text()))
        other = element("div", placeholder())

        assert len(_evaluate(parent, other)) == 1


class TestHasPlaceholder:
    """has_placeholder() searches children and payloads."""

    def test_absent(self) -> None:
        """Plain markup has no placeholder."""
        assert not has_placeholder(program(element("p", text(), element("a", text()))))

    def test_in_children(self) -> None:
        """Placeholders among children are found."""
        assert has_placeholder(program(element("p", element("b", placeholder()))))

    def test_in_payload(self) -> None:
        """Placeholders inside attribute values are found."""
        title = attribute("title", container(placeholder()))
        tree = program(element("Section", attributes=(title,)))

        assert has_placeholder(tree)

    def test_custom_tag(self) -> None:
        """The placeholder tag comes from the config."""
        config = RuleConfig(placeholder_tag="Msg")

        assert not has_placeholder(placeholder(), config)
        assert has_placeholder(element("Msg"), config)
