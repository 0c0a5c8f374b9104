"""Rule configuration.

Provides a single frozen dataclass that encapsulates the names and limits
the broken-message rule works with. Constructing ``RuleConfig()`` with no
arguments gives the react-intl defaults.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nlint_react.constants import (
    DYNAMIC_TRANSLATION_FUNCTION,
    MAX_DEPTH,
    NON_BREAKING_TAGS,
    PLACEHOLDER_TAG,
)

__all__ = ["RuleConfig"]


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Immutable configuration for NoBrokenMessages.

    Attributes:
        placeholder_tag: Element name of the message component
            (default: "FormattedMessage").
        dynamic_translation_function: Dotted name of the imperative
            translation call (default: "intl.formatMessage"). Longer member
            chains ending in this name (``this.props.intl.formatMessage``)
            match as well.
        non_breaking_tags: Inline element names that may sit inside one
            sentence (default: NON_BREAKING_TAGS).
        max_depth: Maximum traversal depth (default: MAX_DEPTH).

    Example:
        >>> config = RuleConfig(placeholder_tag="FormattedHTMLMessage")
        >>> rule = NoBrokenMessages(config=config)
    """

    placeholder_tag: str = PLACEHOLDER_TAG
    dynamic_translation_function: str = DYNAMIC_TRANSLATION_FUNCTION
    non_breaking_tags: frozenset[str] = NON_BREAKING_TAGS
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a name is empty or max_depth is not positive.
        """
        if not self.placeholder_tag:
            msg = "placeholder_tag must not be empty"
            raise ValueError(msg)
        if not self.dynamic_translation_function:
            msg = "dynamic_translation_function must not be empty"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be positive, got {self.max_depth}"
            raise ValueError(msg)
        if not isinstance(self.non_breaking_tags, frozenset):
            object.__setattr__(self, "non_breaking_tags", frozenset(self.non_breaking_tags))

    def is_dynamic_translation_call(self, callee_name: str | None) -> bool:
        """True if a dotted callee name is the dynamic translation function."""
        if callee_name is None:
            return False
        name = self.dynamic_translation_function
        return callee_name == name or callee_name.endswith("." + name)
