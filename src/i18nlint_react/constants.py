"""Shared constants for i18nlint-react.

This module provides centralized configuration constants used across
the syntax and rules packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for tree building and traversal
- Input limits: Size constraints on analysed sources
- react-intl names: The placeholder component and dynamic translation call
- Markup classification: Inline tags that do not break a sentence

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # react-intl names
    "PLACEHOLDER_TAG",
    "DYNAMIC_TRANSLATION_FUNCTION",
    # Markup classification
    "NON_BREAKING_TAGS",
    "MAX_UNBROKEN_RUN_LENGTH",
    # Highlighting
    "HIGHLIGHT_OPEN",
    "HIGHLIGHT_CLOSE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# One limit is shared by the tree builder, the visitor and the serializer.
# Script syntax nests more deeply than markup (statement blocks, parenthesized
# expressions, member chains), so the limit is higher than typical markup
# depth. The tree builder costs up to four interpreter frames per level, which
# keeps 200 levels inside the default recursion limit.

MAX_DEPTH: int = 200

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# REACT-INTL NAMES
# ============================================================================

# Markup element representing one localizable message.
PLACEHOLDER_TAG: str = "FormattedMessage"

# Dotted callee name of the imperative translation API.
DYNAMIC_TRANSLATION_FUNCTION: str = "intl.formatMessage"

# ============================================================================
# MARKUP CLASSIFICATION
# ============================================================================

# Inline HTML elements that may sit inside a single translatable sentence.
NON_BREAKING_TAGS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "br",
        "dfn",
        "del",
        "em",
        "i",
        "ins",
        "mark",
        "rt",
        "ruby",
        "span",
        "strong",
        "sub",
        "sup",
        "time",
        "u",
        "var",
        "wbr",
    }
)

# A run of non-breaking siblings is only reported when it is longer than this.
MAX_UNBROKEN_RUN_LENGTH: int = 3

# ============================================================================
# HIGHLIGHTING
# ============================================================================

HIGHLIGHT_OPEN: str = "<e0>"
HIGHLIGHT_CLOSE: str = "</e0>"
