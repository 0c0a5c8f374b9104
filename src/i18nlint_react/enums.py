"""Enumerations for i18nlint-react type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Dialect(StrEnum):
    """Source dialect accepted by the parser.

    StrEnum provides automatic string conversion: str(Dialect.JSX) == "jsx"
    """

    JS = "js"
    """Plain script. Markup is a syntax error."""

    JSX = "jsx"
    """Script with embedded markup elements."""

    TSX = "tsx"
    """Typed script with embedded markup elements."""

    FLOW = "flow"
    """Script with markup and type annotations (``// @flow`` components)."""

    @property
    def allows_markup(self) -> bool:
        """True for dialects whose trees may contain markup nodes."""
        return self is not Dialect.JS


class RepresentationType(StrEnum):
    """Tag identifying which rule set a parsed tree is routed to."""

    SCRIPT_AST = "script-ast"
    """Tree of a plain script file."""

    MARKUP_AST = "markup-ast"
    """Tree of a file that may contain markup elements."""


class Severity(StrEnum):
    """Severity of a reported finding."""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


__all__ = [
    "Dialect",
    "RepresentationType",
    "Severity",
]
