"""Run-fragmentation resistant substitution strategies."""

from docx_placeholders.strategies.substitution.consolidator import RunConsolidator
from docx_placeholders.strategies.substitution.engine import CrossRunSubstitutionEngine
from docx_placeholders.strategies.substitution.patterns import (
    CompiledMatcher,
    LiteralToken,
    SyntaxFamily,
    build_pattern,
    format_token,
)

__all__ = [
    "CompiledMatcher",
    "CrossRunSubstitutionEngine",
    "LiteralToken",
    "RunConsolidator",
    "SyntaxFamily",
    "build_pattern",
    "format_token",
]
