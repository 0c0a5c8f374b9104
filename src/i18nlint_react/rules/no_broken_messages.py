"""Check for FormattedMessage instances separated from each other by
non-breaking components, or nested inside one another.

A sentence split over several placeholders is translated piece by piece,
which breaks grammar and word order in most target languages. Two passes
over the tree detect this:

1. Nested placeholders: a placeholder whose attribute payload contains
   another placeholder, or a call to the dynamic translation function.
2. Separated runs: runs of non-breaking siblings (text, placeholders,
   inline tags) longer than MAX_UNBROKEN_RUN_LENGTH that hold more than one
   placeholder or any inline tag.

A file without any placeholder has no findings; both passes are skipped.
Findings of pass 1 are returned before findings of pass 2; within a pass
they follow pre-order traversal.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18nlint_react.config import RuleConfig
from i18nlint_react.constants import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN, MAX_UNBROKEN_RUN_LENGTH
from i18nlint_react.core.depth_guard import DepthGuard
from i18nlint_react.enums import RepresentationType, Severity
from i18nlint_react.representation import IntermediateRepresentation
from i18nlint_react.syntax.ast import ASTNode, CallExpression, Element, Text
from i18nlint_react.syntax.serializer import serialize
from i18nlint_react.syntax.visitor import ASTVisitor

from .base import Result, Rule

if TYPE_CHECKING:
    from i18nlint_react.syntax import SyntaxTree

__all__ = [
    "NoBrokenMessages",
    "NodeCounts",
    "count_node_types",
    "has_placeholder",
    "is_breaking_node",
    "is_broken_string",
]

logger = logging.getLogger(__name__)

type Renderer = Callable[[ASTNode, str], str]

_DEFAULT_CONFIG = RuleConfig()

SEPARATED_DESCRIPTION = (
    "Found FormattedMessage components separated by non-breaking components. "
    "This indicates a broken string. Use one string with rich-text-formatting instead."
)
NESTED_DESCRIPTION = (
    "Found a FormattedMessage component inside of another FormattedMessage component. "
    "This indicates a broken string."
)
DYNAMIC_CALL_DESCRIPTION = (
    "Found a call to intl.formatMessage() inside of a FormattedMessage component. "
    "This indicates a broken string."
)


# ============================================================================
# CLASSIFICATION
# ============================================================================


@dataclass(frozen=True, slots=True)
class NodeCounts:
    """Placeholder and other element counts over a set of subtrees."""

    formatted_message: int = 0
    non_breaking: int = 0

    def __add__(self, other: NodeCounts) -> NodeCounts:
        return NodeCounts(
            formatted_message=self.formatted_message + other.formatted_message,
            non_breaking=self.non_breaking + other.non_breaking,
        )


def _is_placeholder(node: object, config: RuleConfig) -> bool:
    return isinstance(node, Element) and node.tag_name == config.placeholder_tag


def is_breaking_node(node: ASTNode, config: RuleConfig = _DEFAULT_CONFIG) -> bool:
    """Return True if node splits the surrounding text into separate strings.

    Text, placeholders and allow-listed inline elements are non-breaking.
    Everything else (expression containers, fragments, other elements) is
    breaking.
    """
    match node:
        case Text():
            return False
        case Element(tag_name=str() as tag_name):
            return not (
                tag_name == config.placeholder_tag or tag_name in config.non_breaking_tags
            )
        case _:
            return True


def count_node_types(
    nodes: Sequence[ASTNode],
    config: RuleConfig = _DEFAULT_CONFIG,
    guard: DepthGuard | None = None,
) -> NodeCounts:
    """Count placeholders and other named elements in nodes and their children.

    Only element children are descended into; attribute payloads are not.
    Fragments are descended into without being counted.

    Raises:
        DepthLimitExceededError: If the subtrees nest deeper than the guard allows
    """
    guard = guard if guard is not None else DepthGuard(max_depth=config.max_depth)
    formatted_message = 0
    non_breaking = 0
    children_counts = NodeCounts()
    with guard:
        for node in nodes:
            if not isinstance(node, Element):
                continue
            if node.tag_name == config.placeholder_tag:
                formatted_message += 1
            elif node.tag_name is not None:
                non_breaking += 1
            if node.children:
                children_counts += count_node_types(node.children, config, guard)
    return NodeCounts(formatted_message, non_breaking) + children_counts


def is_broken_string(nodes: Sequence[ASTNode], config: RuleConfig = _DEFAULT_CONFIG) -> bool:
    """Return True if nodes hold more than one placeholder or any other element."""
    counts = count_node_types(nodes, config)
    return counts.formatted_message > 1 or counts.non_breaking > 0


# ============================================================================
# TRAVERSALS
# ============================================================================


class _FindingFactory:
    """Builds Results for one file."""

    __slots__ = ("_render", "_rule", "_source", "path_name")

    def __init__(self, rule: Rule, tree: SyntaxTree, path_name: str, render: Renderer) -> None:
        self._rule = rule
        self._source = tree.source
        self._render = render
        self.path_name = path_name

    def create(self, node: ASTNode, description: str) -> Result:
        loc = node.loc
        return Result(
            severity=Severity.ERROR,
            description=description,
            path_name=self.path_name,
            line_number=loc.start.line,
            char_number=loc.start.column,
            end_line_number=loc.end.line,
            end_char_number=loc.end.column,
            highlight=f"{HIGHLIGHT_OPEN}{self._render(node, self._source)}{HIGHLIGHT_CLOSE}",
            rule=self._rule,
        )


class _PlaceholderFinder(ASTVisitor[None]):
    """Stops descending once a placeholder has been seen."""

    __slots__ = ("_config", "found")

    def __init__(self, config: RuleConfig) -> None:
        super().__init__(max_depth=config.max_depth)
        self._config = config
        self.found = False

    def visit_Element(self, node: Element) -> None:
        if self.found:
            return
        if _is_placeholder(node, self._config):
            self.found = True
            return
        self.generic_visit(node)


def has_placeholder(node: ASTNode, config: RuleConfig = _DEFAULT_CONFIG) -> bool:
    """Return True if a placeholder element occurs anywhere under node.

    Attribute payloads are searched as well as children.
    """
    finder = _PlaceholderFinder(config)
    finder.visit(node)
    return finder.found


class _PayloadVisitor(ASTVisitor[None]):
    """Searches one placeholder's attribute payload.

    Does not enter inner placeholders or reported calls: an inner
    placeholder's own payload is searched when the outer traversal
    reaches it.
    """

    __slots__ = ("_config", "_factory", "results")

    def __init__(self, config: RuleConfig, factory: _FindingFactory) -> None:
        super().__init__(max_depth=config.max_depth)
        self._config = config
        self._factory = factory
        self.results: list[Result] = []

    def visit_Element(self, node: Element) -> None:
        if _is_placeholder(node, self._config):
            self.results.append(self._factory.create(node, NESTED_DESCRIPTION))
            return
        self.generic_visit(node)

    def visit_CallExpression(self, node: CallExpression) -> None:
        if self._config.is_dynamic_translation_call(node.callee_name):
            self.results.append(self._factory.create(node, DYNAMIC_CALL_DESCRIPTION))
            return
        self.generic_visit(node)


class _NestedMessageVisitor(ASTVisitor[None]):
    """Pass 1: placeholders nested in placeholder payloads."""

    __slots__ = ("_config", "_factory", "results")

    def __init__(self, config: RuleConfig, factory: _FindingFactory) -> None:
        super().__init__(max_depth=config.max_depth)
        self._config = config
        self._factory = factory
        self.results: list[Result] = []

    def visit_Element(self, node: Element) -> None:
        if _is_placeholder(node, self._config):
            payload = _PayloadVisitor(self._config, self._factory)
            for attribute in node.attributes:
                payload.visit(attribute)
            self.results.extend(payload.results)
        self.generic_visit(node)


class _SeparatedRunVisitor(ASTVisitor[None]):
    """Pass 2: runs of non-breaking siblings holding a broken string."""

    __slots__ = ("_config", "_factory", "results")

    def __init__(self, config: RuleConfig, factory: _FindingFactory) -> None:
        super().__init__(max_depth=config.max_depth)
        self._config = config
        self._factory = factory
        self.results: list[Result] = []

    def visit_Element(self, node: Element) -> None:
        flagged = self._scan_children(node) if node.children else set()

        with self._depth_guard:
            for attribute in node.attributes:
                self.visit(attribute)
            for child in node.children:
                if id(child) not in flagged:
                    self.visit(child)

    def _scan_children(self, node: Element) -> set[int]:
        """Report broken runs among node's children.

        Returns:
            Identities of the children that belong to reported runs
        """
        flagged: set[int] = set()
        run: list[ASTNode] = []
        for child in node.children:
            if is_breaking_node(child, self._config):
                self._flush(node, run, flagged)
                run = []
            else:
                run.append(child)
        self._flush(node, run, flagged)
        return flagged

    def _flush(self, parent: Element, run: list[ASTNode], flagged: set[int]) -> None:
        if len(run) > MAX_UNBROKEN_RUN_LENGTH and is_broken_string(run, self._config):
            self.results.append(self._factory.create(parent, SEPARATED_DESCRIPTION))
            flagged.update(id(child) for child in run)


# ============================================================================
# RULE
# ============================================================================


class NoBrokenMessages(Rule):
    """Rule detecting FormattedMessage components that split one sentence.

    Stateless between calls: every match() builds its own traversal state,
    so one instance may be shared across files and threads.

    Usage:
        rule = NoBrokenMessages()
        ir = JSXParser().parse_string(source, "src/App.jsx")
        for result in rule.match(ir):
            print(result.line_number, result.description)
    """

    name = "no-broken-messages"
    description = "Check for FormattedMessage instances separated by non-breaking components"
    link = "https://github.com/ilib-js/ilib-lint-react/blob/main/docs/no-broken-messages.md"
    type = RepresentationType.MARKUP_AST

    __slots__ = ("_config", "_render")

    def __init__(
        self,
        *,
        config: RuleConfig | None = None,
        render: Renderer | None = None,
    ) -> None:
        """Initialize the rule.

        Args:
            config: Names and limits (default: react-intl defaults)
            render: Renders a node of a source back to text for highlights
                (default: syntax.serializer.serialize)
        """
        self._config = config if config is not None else _DEFAULT_CONFIG
        self._render: Renderer = render if render is not None else serialize

    @property
    def config(self) -> RuleConfig:
        """Configuration this rule evaluates with."""
        return self._config

    def match(self, ir: IntermediateRepresentation) -> list[Result]:
        """Evaluate the rule on one parsed file.

        Raises:
            ConfigurationError: If ir is not a markup representation
            DepthLimitExceededError: If the tree nests deeper than max_depth
        """
        self.check_type(ir)
        return self._evaluate(ir.tree, ir.file_path)

    def evaluate(self, tree: SyntaxTree, file_path: str | None = None) -> list[Result]:
        """Evaluate the rule on a syntax tree.

        Args:
            tree: Parsed source
            file_path: Path reported in results (default: tree.file_path)

        Raises:
            ConfigurationError: If tree is not a markup representation
        """
        ir = IntermediateRepresentation.from_tree(tree)
        self.check_type(ir)
        return self._evaluate(tree, file_path if file_path is not None else tree.file_path)

    def _evaluate(self, tree: SyntaxTree, path_name: str) -> list[Result]:
        if not has_placeholder(tree.root, self._config):
            logger.debug("%s: no placeholder in %s", self.name, path_name or "<string>")
            return []

        factory = _FindingFactory(self, tree, path_name, self._render)

        nested = _NestedMessageVisitor(self._config, factory)
        nested.visit(tree.root)

        separated = _SeparatedRunVisitor(self._config, factory)
        separated.visit(tree.root)

        logger.debug(
            "%s: %d nested, %d separated finding(s) in %s",
            self.name,
            len(nested.results),
            len(separated.results),
            path_name or "<string>",
        )
        return nested.results + separated.results
