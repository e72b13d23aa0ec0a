"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from pydantic import BaseModel, Field

from docx_placeholders.strategies.debugger import DebugSession
from docx_placeholders.strategies.diff import DocumentDiffReport, ExpectedPlaceholderResult


class DebugResponse(BaseModel):
    """Response for the placeholder debugging endpoint."""

    session: DebugSession
    passed: bool = Field(description="True when no placeholder failed validation")
    report: str = Field(description="Human-readable session report")


class DiffResponse(BaseModel):
    """Response for the original-vs-processed comparison endpoint."""

    report: DocumentDiffReport
    expected: list[ExpectedPlaceholderResult] = Field(default_factory=list)
    passed: bool
    report_text: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    error_code: str | None = None
