"""Placeholder debugging configuration."""

import re

from docx_placeholders.strategies.debugger.models import Placeholder
from docx_placeholders.strategies.substitution.patterns import (
    SyntaxFamily,
    build_pattern,
    format_token,
    syntax_description,
    syntax_example,
)


class PlaceholderConfiguration:
    """Syntax family plus an ordered list of placeholders to check.

    Duplicate names are kept, in insertion order, so reports mirror the
    list the caller supplied. ``custom_pattern`` overrides every
    placeholder's matcher for ad hoc debugging.
    """

    def __init__(
        self,
        syntax: SyntaxFamily | str = SyntaxFamily.DOUBLE_MUSTACHE,
        placeholders: list[str] | None = None,
        custom_pattern: re.Pattern | None = None,
    ) -> None:
        self.syntax = SyntaxFamily(syntax)
        self.custom_pattern = custom_pattern
        self.placeholders: list[Placeholder] = []
        if placeholders:
            self.set_placeholders(placeholders)

    @property
    def pattern(self) -> re.Pattern | None:
        """The uniform override matcher, if any."""
        return self.custom_pattern

    @property
    def pattern_example(self) -> str:
        if self.custom_pattern is not None:
            return "Custom regex pattern"
        return syntax_example(self.syntax)

    @property
    def pattern_description(self) -> str:
        if self.custom_pattern is not None:
            return "Custom pattern"
        return syntax_description(self.syntax)

    @property
    def names(self) -> list[str]:
        return [placeholder.name for placeholder in self.placeholders]

    def add_placeholder(self, name: str) -> Placeholder:
        placeholder = Placeholder(
            name=name,
            syntax=self.syntax,
            formatted=format_token(name, self.syntax),
            pattern=self.custom_pattern or build_pattern(name, self.syntax),
        )
        self.placeholders.append(placeholder)
        return placeholder

    def set_placeholders(self, names: list[str]) -> None:
        self.placeholders = []
        for name in names:
            self.add_placeholder(name)
