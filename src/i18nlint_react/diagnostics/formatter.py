"""Compiler-style rendering of diagnostics.

Used for the message of every LintError that carries a Diagnostic.

Python 3.13+.
"""

from .codes import Diagnostic

__all__ = ["format_diagnostic"]

_GUTTER = "   |"


def _location(diagnostic: Diagnostic) -> str | None:
    span = diagnostic.span
    if span is None:
        return f"  --> {diagnostic.file_path}" if diagnostic.file_path else None
    if diagnostic.file_path:
        return f"  --> {diagnostic.file_path}:{span.line}:{span.column}"
    return f"  --> line {span.line}, column {span.column}"


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic the way the Rust compiler prints errors.

    Example output:
        error[SYNTAX_ERROR]: Unexpected syntax in x/y.jsx
          --> x/y.jsx:3:8
           |
           | const a = <div>;
           |                ^
          = help: Fix the source so that it parses as jsx
    """
    lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

    location = _location(diagnostic)
    if location is not None:
        lines.append(location)

    if diagnostic.context:
        lines.append(_GUTTER)
        lines.extend(f"{_GUTTER} {line}" for line in diagnostic.context.splitlines())

    if diagnostic.hint:
        lines.append(f"  = help: {diagnostic.hint}")
    if diagnostic.help_url:
        lines.append(f"  = note: see {diagnostic.help_url}")

    return "\n".join(lines)
