"""Source parser package.

Modules:
    core: SourceParser and SyntaxTree
    builder: Grammar engine tree to syntax tree conversion
    languages: Cached grammar tables per dialect
"""

from .core import SourceParser, SyntaxTree

__all__ = ["SourceParser", "SyntaxTree"]
