"""Lint rules evaluated on parsed source trees.

Python 3.13+.
"""

from .base import Result, Rule
from .no_broken_messages import (
    NoBrokenMessages,
    NodeCounts,
    count_node_types,
    has_placeholder,
    is_breaking_node,
    is_broken_string,
)

__all__ = [
    "NoBrokenMessages",
    "NodeCounts",
    "Result",
    "Rule",
    "count_node_types",
    "has_placeholder",
    "is_breaking_node",
    "is_broken_string",
]
