"""Placeholder debugging strategies.

Validates configured placeholders against a Word document and reports
which ones exist, are fragmented, or cannot be replaced.
"""

from docx_placeholders.strategies.debugger.configuration import PlaceholderConfiguration
from docx_placeholders.strategies.debugger.debugger import (
    PlaceholderDebugger,
    SessionState,
    analyze,
    quick_check,
)
from docx_placeholders.strategies.debugger.models import (
    DebugSession,
    Placeholder,
    ValidationResult,
)
from docx_placeholders.strategies.debugger.validator import PlaceholderValidator

__all__ = [
    "DebugSession",
    "Placeholder",
    "PlaceholderConfiguration",
    "PlaceholderDebugger",
    "PlaceholderValidator",
    "SessionState",
    "ValidationResult",
    "analyze",
    "quick_check",
]
