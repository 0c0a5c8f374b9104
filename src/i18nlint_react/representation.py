"""Intermediate representation handed from parsers to rules.

Python 3.13+.
"""

from dataclasses import dataclass

from i18nlint_react.enums import RepresentationType
from i18nlint_react.syntax import SyntaxTree

__all__ = ["IntermediateRepresentation"]


@dataclass(frozen=True, slots=True)
class IntermediateRepresentation:
    """A parsed file tagged with its representation type.

    The type is opaque routing metadata: rules compare it against the type
    they evaluate and reject anything else.

    Attributes:
        type: Representation type of the tree
        tree: Parsed syntax tree
        file_path: Path of the source file
    """

    type: RepresentationType
    tree: SyntaxTree
    file_path: str

    @classmethod
    def from_tree(cls, tree: SyntaxTree) -> "IntermediateRepresentation":
        """Wrap a syntax tree, taking the type from its dialect."""
        return cls(type=tree.representation, tree=tree, file_path=tree.file_path)

    def get_representation(self) -> SyntaxTree:
        """Return the wrapped syntax tree."""
        return self.tree
