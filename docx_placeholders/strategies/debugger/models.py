"""Debugger domain models.

Pydantic models for placeholders, per-placeholder results and sessions.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, computed_field

from docx_placeholders.interfaces.validation import ValidationIssue
from docx_placeholders.strategies.substitution.patterns import SyntaxFamily


class Placeholder(BaseModel):
    """A configured placeholder and its compiled matcher."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Bare placeholder name")
    syntax: SyntaxFamily = Field(description="Syntax family the token is written in")
    formatted: str = Field(description="Decorated display token")
    pattern: re.Pattern = Field(description="Word-boundary safe matcher")


class ValidationResult(BaseModel):
    """Outcome of validating one placeholder against one document."""

    placeholder: Placeholder
    success: bool = False
    found_count: int = 0
    paragraph_indices: list[int | str] = Field(
        default_factory=list,
        description="1-based body paragraph indices or table cell labels",
    )
    replaced_count: int = 0
    issue: ValidationIssue | None = None
    error: str | None = None


class DebugSession(BaseModel):
    """Aggregate of one debugging run over a document+configuration pair."""

    document: str = Field(description="Identifier of the document under test")
    syntax: SyntaxFamily
    pattern_example: str
    total: int = 0
    successful: int = 0
    failed: int = 0
    details: list[ValidationResult] = Field(default_factory=list)

    def record(self, result: ValidationResult) -> None:
        self.total += 1
        if result.success:
            self.successful += 1
        else:
            self.failed += 1
        self.details.append(result)

    @computed_field
    @property
    def success_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.successful / self.total * 100, 2)

    @computed_field
    @property
    def passed(self) -> bool:
        return self.failed == 0
