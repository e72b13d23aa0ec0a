"""Abstract base classes and shared error types."""

from docx_placeholders.interfaces.document import BaseDocumentLoader
from docx_placeholders.interfaces.generator import BaseReplacerGenerator, ReplacerGenerationError
from docx_placeholders.interfaces.validation import (
    PlaceholderError,
    PlaceholderFragmentedError,
    PlaceholderNotFoundError,
    PlaceholderValidationError,
    ReplacementFailedError,
    ValidationIssue,
)

__all__ = [
    "BaseDocumentLoader",
    "BaseReplacerGenerator",
    "PlaceholderError",
    "PlaceholderFragmentedError",
    "PlaceholderNotFoundError",
    "PlaceholderValidationError",
    "ReplacementFailedError",
    "ReplacerGenerationError",
    "ValidationIssue",
]
