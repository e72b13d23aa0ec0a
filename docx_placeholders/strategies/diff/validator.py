"""Post-hoc replacement validation.

Compares an original template with the document produced from it and
confirms that placeholders were actually eliminated, tables included.

An original occurrence counts as replaced when its exact matched text no
longer appears anywhere in the processed document. The check ignores
location, so an identical literal left elsewhere in the processed document
counts as a missed replacement.
"""

import logging
import re

from docx.document import Document as DocxDocument

from docx_placeholders.interfaces.document import BaseDocumentLoader
from docx_placeholders.strategies.diff.models import (
    DocumentDiffReport,
    ExpectedPlaceholderResult,
    PlaceholderOccurrence,
    ReplacementDetail,
)
from docx_placeholders.strategies.documents import DocxDocumentLoader, iter_document_paragraphs
from docx_placeholders.strategies.substitution.patterns import (
    DEFAULT_SCAN_PATTERNS,
    SyntaxFamily,
    build_pattern,
    detect_syntax,
)

logger = logging.getLogger(__name__)

RULE = "=" * 70


class DocumentDiffValidator:
    """Validates that placeholders of an original document were replaced."""

    def __init__(
        self,
        original: DocxDocument,
        processed: DocxDocument,
        context_chars: int = 60,
    ) -> None:
        self.original = original
        self.processed = processed
        self._context_chars = context_chars
        self.report = DocumentDiffReport()

    @classmethod
    def from_paths(
        cls,
        original_path: str,
        processed_path: str,
        loader: BaseDocumentLoader | None = None,
        context_chars: int = 60,
    ) -> "DocumentDiffValidator":
        """Open both documents; load errors propagate to the caller."""
        loader = loader or DocxDocumentLoader()
        return cls(loader.open(original_path), loader.open(processed_path), context_chars)

    @classmethod
    def validate(
        cls,
        original_path: str,
        processed_path: str,
        expected_patterns: list[str | re.Pattern] | None = None,
        loader: BaseDocumentLoader | None = None,
    ) -> "DocumentDiffValidator":
        validator = cls.from_paths(original_path, processed_path, loader)
        validator.validate_replacements(expected_patterns)
        return validator

    @property
    def passed(self) -> bool:
        return self.report.validation_passed

    @property
    def failed_placeholders(self) -> list[PlaceholderOccurrence]:
        return self.report.missed_placeholders

    def validate_replacements(
        self, expected_patterns: list[str | re.Pattern] | None = None
    ) -> DocumentDiffReport:
        """Scan both documents and classify every original occurrence.

        Args:
            expected_patterns: Tokens or regexes to scan for. Defaults to the
                six built-in syntax families applied together.
        """
        patterns = (
            [self._pattern_for(p) for p in expected_patterns]
            if expected_patterns
            else list(DEFAULT_SCAN_PATTERNS.values())
        )

        original_found = find_placeholders(self.original, patterns)
        remaining = {o.placeholder for o in find_placeholders(self.processed, patterns)}

        report = DocumentDiffReport(total_placeholders_found=len(original_found))
        for occurrence in original_found:
            still_exists = occurrence.placeholder in remaining
            if still_exists:
                report.failed_replacements += 1
                report.missed_placeholders.append(occurrence)
            else:
                report.successful_replacements += 1
            report.replacement_details.append(
                ReplacementDetail(
                    placeholder=occurrence.placeholder,
                    location=occurrence.location,
                    context=occurrence.context,
                    replaced=not still_exists,
                    pattern=occurrence.pattern,
                )
            )

        report.validation_passed = report.failed_replacements == 0
        self.report = report
        logger.info(
            f"Replacement validation: found={report.total_placeholders_found}, "
            f"replaced={report.successful_replacements}, missed={report.failed_replacements}"
        )
        return report

    def validate_expected_placeholders(
        self, expected: list[str | re.Pattern]
    ) -> list[ExpectedPlaceholderResult]:
        """Check specific tokens: present in the original, gone from the output.

        Raises:
            TypeError: If a token is neither a string nor a compiled regex.
        """
        results: list[ExpectedPlaceholderResult] = []
        for token in expected:
            pattern = self._pattern_for(token)
            in_original = find_placeholders(self.original, [pattern], deduplicate=False)
            in_processed = find_placeholders(self.processed, [pattern], deduplicate=False)
            results.append(
                ExpectedPlaceholderResult(
                    expected=token if isinstance(token, str) else token.pattern,
                    found_in_original=len(in_original),
                    found_in_processed=len(in_processed),
                    successfully_replaced=len(in_original) > 0 and len(in_processed) == 0,
                    locations_original=in_original,
                    locations_processed=in_processed,
                )
            )
        return results

    def render_report(self) -> str:
        report = self.report
        lines = [
            RULE,
            "REPLACEMENT VALIDATION REPORT",
            RULE,
            "Summary:",
            f"  Total placeholders found: {report.total_placeholders_found}",
            f"  Successfully replaced: {report.successful_replacements}",
            f"  Failed to replace: {report.failed_replacements}",
            f"  Success rate: {report.success_rate}%",
        ]

        if report.validation_passed:
            lines.append("VALIDATION PASSED - All placeholders were replaced!")
        else:
            lines.append("VALIDATION FAILED - Some placeholders were not replaced!")
            lines.append("Missed placeholders:")
            for missed in report.missed_placeholders:
                lines.append(f"  - {missed.placeholder} (Paragraph {missed.location})")
                lines.append(f"    Context: ...{missed.context[: self._context_chars]}...")
                lines.append(f"    Pattern: {missed.pattern}")
            lines.extend(
                [
                    "Suggestions:",
                    "  1. Check if placeholders are fragmented across XML nodes",
                    "  2. Use cross-run substitution instead of per-run replacement",
                    "  3. Verify placeholder spelling and format",
                    "  4. Check if placeholders are in tables or special sections",
                ]
            )

        lines.append("Detailed Results:")
        for idx, detail in enumerate(report.replacement_details, start=1):
            status = "OK" if detail.replaced else "FAIL"
            lines.append(f"  {idx}. [{status}] {detail.placeholder}")
            lines.append(f"     Location: Paragraph {detail.location}")
            lines.append(f"     Pattern: {detail.pattern}")
        lines.append(RULE)
        return "\n".join(lines)

    @staticmethod
    def _pattern_for(token: str | re.Pattern) -> re.Pattern:
        if isinstance(token, re.Pattern):
            return token
        if not isinstance(token, str):
            raise TypeError(f"Expected str or re.Pattern, got {type(token).__name__}")
        syntax, name = detect_syntax(token)
        if syntax == SyntaxFamily.CUSTOM:
            return re.compile(re.escape(token))
        return build_pattern(name, syntax)


def find_placeholders(
    document: DocxDocument,
    patterns: list[re.Pattern],
    deduplicate: bool = True,
) -> list[PlaceholderOccurrence]:
    """Collect every match of every pattern in body and table paragraphs.

    With ``deduplicate`` set, occurrences sharing matched text and location
    are reported once.
    """
    occurrences: list[PlaceholderOccurrence] = []
    seen: set[tuple[str, int | str]] = set()

    for location, paragraph in iter_document_paragraphs(document):
        text = paragraph.text
        if not text:
            continue
        for pattern in patterns:
            for match in pattern.finditer(text):
                key = (match.group(0), location)
                if deduplicate and key in seen:
                    continue
                seen.add(key)
                occurrences.append(
                    PlaceholderOccurrence(
                        placeholder=match.group(0),
                        location=location,
                        context=text,
                        pattern=pattern.pattern,
                    )
                )
    return occurrences
