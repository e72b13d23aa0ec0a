"""Original-vs-processed document diff validation."""

from docx_placeholders.strategies.diff.models import (
    DocumentDiffReport,
    ExpectedPlaceholderResult,
    PlaceholderOccurrence,
)
from docx_placeholders.strategies.diff.validator import DocumentDiffValidator, find_placeholders

__all__ = [
    "DocumentDiffReport",
    "DocumentDiffValidator",
    "ExpectedPlaceholderResult",
    "PlaceholderOccurrence",
    "find_placeholders",
]
