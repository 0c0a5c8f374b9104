"""i18nlint-react - broken-message detection for React markup.

Parses script sources with embedded markup and reports react-intl
FormattedMessage components that split one localizable sentence into
several independently translated fragments.

Public API:
    parse - Parse source text to a syntax tree
    JSParser, JSXParser, FlowParser, TSXParser - Dialect parsers producing representations
    NoBrokenMessages - The broken-message rule
    RuleConfig - Rule configuration
    Result - One reported finding

Exceptions:
    LintError - Base exception class
    SourceSyntaxError - Source does not parse for its dialect
    ConfigurationError - Rule handed the wrong representation type

Submodules:
    i18nlint_react.syntax - Parser, tree nodes, visitor, serializer
    i18nlint_react.rules - Rule base class and rules
    i18nlint_react.diagnostics - Error types and diagnostic formatting
"""

from .config import RuleConfig
from .diagnostics import ConfigurationError, LintError, SourceSyntaxError
from .enums import Dialect, RepresentationType, Severity
from .parsers import FlowParser, JSParser, JSXParser, TSXParser, parser_for_path
from .representation import IntermediateRepresentation
from .rules import NoBrokenMessages, Result
from .syntax import parse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nlint-react")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "Dialect",
    "FlowParser",
    "IntermediateRepresentation",
    "JSParser",
    "JSXParser",
    "LintError",
    "NoBrokenMessages",
    "RepresentationType",
    "Result",
    "RuleConfig",
    "Severity",
    "SourceSyntaxError",
    "TSXParser",
    "__version__",
    "parse",
    "parser_for_path",
]
