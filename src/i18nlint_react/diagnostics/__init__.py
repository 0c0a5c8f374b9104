"""Diagnostic system for i18nlint-react errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ConfigurationError,
    DepthLimitExceededError,
    LintError,
    SourceSyntaxError,
)
from .formatter import format_diagnostic
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LintError",
    "SourceSpan",
    "SourceSyntaxError",
    "format_diagnostic",
]
