"""Compiled grammar tables for each source dialect.

Grammars are loaded on first use and cached for the life of the process.
Language objects are read-only and shared; Parser objects are not, so a
fresh Parser is created for every parse.

Python 3.13+.
"""

import logging
from functools import lru_cache

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from i18nlint_react.enums import Dialect

__all__ = ["get_language", "new_parser"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _load_grammar(name: str) -> Language:
    logger.debug("Loading %s grammar", name)
    match name:
        case "javascript":
            return Language(tree_sitter_javascript.language())
        case "tsx":
            return Language(tree_sitter_typescript.language_tsx())
    msg = f"Unknown grammar: {name}"
    raise ValueError(msg)


def get_language(dialect: Dialect) -> Language:
    """Return the cached grammar for a dialect.

    The plain script and markup dialects share the JavaScript grammar, which
    accepts markup; plain script rejects markup nodes after parsing. Annotated
    components share the typed markup grammar, which covers the annotation
    forms they use (parameter and return types, type aliases, type imports).
    """
    match dialect:
        case Dialect.JS | Dialect.JSX:
            return _load_grammar("javascript")
        case Dialect.TSX | Dialect.FLOW:
            return _load_grammar("tsx")


def new_parser(dialect: Dialect) -> Parser:
    """Create a parser bound to the dialect's grammar."""
    return Parser(get_language(dialect))
