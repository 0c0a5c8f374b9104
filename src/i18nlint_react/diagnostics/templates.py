"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://github.com/ilib-js/ilib-lint-react/blob/main/docs"

    @staticmethod
    def syntax_error(
        file_path: str,
        dialect: str,
        span: SourceSpan,
        context: str | None = None,
        *,
        missing: str | None = None,
    ) -> Diagnostic:
        """Source text does not parse for the declared dialect.

        Args:
            file_path: Path of the file being parsed
            dialect: Dialect name (js, jsx, tsx)
            span: Location of the first error
            context: Source excerpt around the error
            missing: Grammar symbol the parser expected but did not find

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        where = f" in {file_path}" if file_path else ""
        if missing:
            msg = f"Expected '{missing}'{where}"
        else:
            msg = f"Unexpected syntax{where}"
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message=msg,
            span=span,
            hint=f"Fix the source so that it parses as {dialect}",
            file_path=file_path or None,
            context=context,
        )

    @staticmethod
    def markup_in_script(file_path: str, span: SourceSpan) -> Diagnostic:
        """Markup element found in a plain script source.

        Args:
            file_path: Path of the file being parsed
            span: Location of the markup element

        Returns:
            Diagnostic for MARKUP_IN_SCRIPT
        """
        where = f" in {file_path}" if file_path else ""
        msg = f"Markup is not allowed in plain script{where}"
        return Diagnostic(
            code=DiagnosticCode.MARKUP_IN_SCRIPT,
            message=msg,
            span=span,
            hint="Parse the file with the jsx or tsx dialect",
            file_path=file_path or None,
        )

    @staticmethod
    def source_too_large(file_path: str, size: int, max_size: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            file_path: Path of the file being parsed
            size: Encoded source size in bytes
            max_size: Configured maximum in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source of {size} bytes exceeds maximum of {max_size} bytes"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Raise max_source_size if the file is legitimate",
            file_path=file_path or None,
        )

    @staticmethod
    def nesting_depth_exceeded(file_path: str, max_depth: int) -> Diagnostic:
        """Syntax tree nests deeper than the builder allows.

        Args:
            file_path: Path of the file being parsed
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Nesting depth exceeds maximum of {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting in the source or raise max_depth",
            file_path=file_path or None,
        )

    @staticmethod
    def traversal_depth_exceeded(max_depth: int) -> Diagnostic:
        """Tree traversal went deeper than the guard allows.

        Args:
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum traversal depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Syntax trees this deep are almost certainly malformed",
        )

    @staticmethod
    def representation_mismatch(rule_name: str, expected: str, received: str) -> Diagnostic:
        """Rule received a tree of the wrong representation type.

        Args:
            rule_name: Name of the rule that rejected the tree
            expected: Representation type the rule evaluates
            received: Representation type of the tree it was given

        Returns:
            Diagnostic for REPRESENTATION_MISMATCH
        """
        msg = f"Unexpected representation type '{received}' for rule '{rule_name}'"
        return Diagnostic(
            code=DiagnosticCode.REPRESENTATION_MISMATCH,
            message=msg,
            hint=f"Route only '{expected}' trees to this rule",
            help_url=f"{ErrorTemplate._DOCS_BASE}/{rule_name}.md",
        )
