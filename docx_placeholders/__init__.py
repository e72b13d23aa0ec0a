"""Placeholder substitution and validation for Word documents.

Substitutes placeholders that Word has fragmented across formatted runs,
and proves before and after substitution which placeholders exist, are
fragmented, or were actually eliminated.
"""

from docx_placeholders.strategies.debugger import (
    DebugSession,
    PlaceholderConfiguration,
    PlaceholderDebugger,
    PlaceholderValidator,
    ValidationResult,
    analyze,
    quick_check,
)
from docx_placeholders.strategies.diff import DocumentDiffReport, DocumentDiffValidator
from docx_placeholders.strategies.documents import DocxDocumentLoader
from docx_placeholders.strategies.substitution import (
    CompiledMatcher,
    CrossRunSubstitutionEngine,
    LiteralToken,
    RunConsolidator,
    SyntaxFamily,
)

__all__ = [
    "CompiledMatcher",
    "CrossRunSubstitutionEngine",
    "DebugSession",
    "DocumentDiffReport",
    "DocumentDiffValidator",
    "DocxDocumentLoader",
    "LiteralToken",
    "PlaceholderConfiguration",
    "PlaceholderDebugger",
    "PlaceholderValidator",
    "RunConsolidator",
    "SyntaxFamily",
    "ValidationResult",
    "analyze",
    "quick_check",
]

__version__ = "0.1.0"
