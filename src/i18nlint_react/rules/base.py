"""Rule base class and the finding record rules produce.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from i18nlint_react.diagnostics import ConfigurationError, ErrorTemplate
from i18nlint_react.enums import RepresentationType, Severity

if TYPE_CHECKING:
    from i18nlint_react.representation import IntermediateRepresentation

__all__ = ["Result", "Rule"]


@dataclass(frozen=True, slots=True)
class Result:
    """One reported defect.

    Immutable once constructed. Positions use 1-based lines and 0-based
    UTF-16 columns of the source file; CR, CRLF, U+2028 and U+2029 end a
    line as LF does.

    Attributes:
        severity: Severity of the finding
        description: Human-readable description
        path_name: Path of the analysed file
        line_number: Start line
        char_number: Start column
        end_line_number: End line
        end_char_number: End column
        highlight: Offending snippet wrapped as ``<e0>...</e0>``
        rule: Rule that produced the finding (compared by identity)
        id: Message identifier the finding refers to, if any
    """

    severity: Severity
    description: str
    path_name: str
    line_number: int
    char_number: int
    end_line_number: int
    end_char_number: int
    highlight: str
    rule: Rule
    id: str | None = None


class Rule:
    """Base class for rules evaluating one representation type.

    Subclasses set the class attributes and implement match().

    Attributes:
        name: Unique rule name
        description: One-line description of what the rule checks
        link: Documentation URL
        type: Representation type the rule evaluates
    """

    name: ClassVar[str]
    description: ClassVar[str]
    link: ClassVar[str]
    type: ClassVar[RepresentationType]

    def match(self, ir: IntermediateRepresentation) -> list[Result]:
        """Evaluate the rule on one representation.

        Raises:
            ConfigurationError: If ir has a different representation type
        """
        raise NotImplementedError

    def check_type(self, ir: IntermediateRepresentation) -> None:
        """Fail fast when handed a representation this rule cannot read.

        Raises:
            ConfigurationError: If ir.type differs from the rule's type
        """
        if ir.type != self.type:
            raise ConfigurationError(
                ErrorTemplate.representation_mismatch(self.name, self.type, ir.type)
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
