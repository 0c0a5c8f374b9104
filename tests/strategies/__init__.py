"""Hypothesis strategies for i18nlint-react property-based testing.

Usage:
    from tests.strategies import token_sequences, fragment_source
"""

from .jsx import (
    BREAKING_KINDS,
    INLINE_TAGS,
    TOKEN_KINDS,
    expected_run_findings,
    fragment_source,
    markup_tokens,
    placeholder_free_sequences,
    text_tokens,
    token_sequences,
)

__all__ = [
    "BREAKING_KINDS",
    "INLINE_TAGS",
    "TOKEN_KINDS",
    "expected_run_findings",
    "fragment_source",
    "markup_tokens",
    "placeholder_free_sequences",
    "text_tokens",
    "token_sequences",
]
