"""Per-placeholder validation.

For each placeholder the validator searches the document, falls back to
fragmentation detection when nothing matches, and otherwise proves that a
replacement mechanism works by substituting a random sentinel in a trial
copy. The document under test is never modified.
"""

import logging
import uuid

from docx.document import Document as DocxDocument

from docx_placeholders.interfaces.document import BaseDocumentLoader
from docx_placeholders.interfaces.validation import (
    PlaceholderError,
    PlaceholderFragmentedError,
    PlaceholderNotFoundError,
    PlaceholderValidationError,
    ReplacementFailedError,
)
from docx_placeholders.strategies.debugger.models import Placeholder, ValidationResult
from docx_placeholders.strategies.documents import (
    DocxDocumentLoader,
    Location,
    iter_document_paragraphs,
)
from docx_placeholders.strategies.substitution.engine import CrossRunSubstitutionEngine
from docx_placeholders.strategies.substitution.patterns import CompiledMatcher, bare_name

logger = logging.getLogger(__name__)


class PlaceholderValidator:
    """Validates placeholders of one configuration against one document."""

    def __init__(
        self,
        document: DocxDocument,
        loader: BaseDocumentLoader | None = None,
        engine: CrossRunSubstitutionEngine | None = None,
        sentinel_prefix: str = "REPLACED_",
    ) -> None:
        """Initialize the validator.

        Args:
            document: The document under test. Only read, never written.
            loader: Used to make isolated trial copies.
            engine: Cross-run engine used by the second trial attempt.
            sentinel_prefix: Prefix of the random trial replacement value.
        """
        self._document = document
        self._loader = loader or DocxDocumentLoader()
        self._engine = engine or CrossRunSubstitutionEngine()
        self._sentinel_prefix = sentinel_prefix

    def validate_placeholder(self, placeholder: Placeholder) -> ValidationResult:
        """Validate one placeholder.

        Problems are reported through the result, never raised.
        """
        result = ValidationResult(placeholder=placeholder)

        try:
            count, indices = self.search_placeholder(placeholder)
            result.found_count = count
            result.paragraph_indices = indices

            if count == 0:
                fragments = self.search_fragmented(placeholder)
                if fragments:
                    result.found_count = len(fragments)
                    result.paragraph_indices = fragments
                    raise PlaceholderFragmentedError(
                        "Placeholder found but fragmented across text runs. "
                        "Use cross-run substitution."
                    )
                raise PlaceholderNotFoundError("Placeholder not found in document")

            result.replaced_count = self.test_replacement(placeholder)
            result.success = True

        except PlaceholderError as e:
            result.issue = e.issue
            result.error = str(e)
        except Exception as e:
            logger.error(
                f"Unexpected failure validating {placeholder.formatted}: {e}", exc_info=True
            )
            error = PlaceholderValidationError(f"Validation error: {e}")
            result.issue = error.issue
            result.error = str(error)

        logger.debug(
            f"Validated {placeholder.formatted}: success={result.success}, "
            f"found={result.found_count}, issue={result.issue}"
        )
        return result

    def search_placeholder(self, placeholder: Placeholder) -> tuple[int, list[Location]]:
        """Count matches per body and table-cell paragraph.

        Returns:
            Total match count and the locations of matching paragraphs.
        """
        count = 0
        indices: list[Location] = []
        for location, paragraph in iter_document_paragraphs(self._document):
            matches = placeholder.pattern.findall(paragraph.text)
            if matches:
                count += len(matches)
                indices.append(location)
        return count, indices

    def search_fragmented(self, placeholder: Placeholder) -> list[Location]:
        """Find paragraphs whose run text contains the bare name.

        Returns:
            Locations of paragraphs holding the undecorated name.
        """
        name = bare_name(placeholder.formatted)
        if not name:
            return []

        indices: list[Location] = []
        for location, paragraph in iter_document_paragraphs(self._document):
            run_text = "".join(run.text for run in paragraph.runs)
            if name in run_text or name in paragraph.text:
                indices.append(location)
        return indices

    def test_replacement(self, placeholder: Placeholder) -> int:
        """Substitute a random sentinel in a trial copy of the document.

        Each paragraph first gets a same-run attempt; only when that leaves
        the paragraph text unchanged is the cross-run engine tried.

        Returns:
            Number of successful replacement attempts.

        Raises:
            ReplacementFailedError: If no attempt left the sentinel behind.
        """
        sentinel = f"{self._sentinel_prefix}{uuid.uuid4().hex[:8]}"
        pattern = placeholder.pattern
        trial = self._loader.clone(self._document)
        replaced_count = 0

        try:
            for _location, paragraph in iter_document_paragraphs(trial):
                original_text = paragraph.text

                for run in paragraph.runs:
                    if pattern.search(run.text):
                        run.text = pattern.sub(lambda _match: sentinel, run.text)
                        if sentinel in run.text:
                            replaced_count += 1

                if original_text == paragraph.text and pattern.search(original_text):
                    self._engine.substitute(paragraph, CompiledMatcher(pattern), sentinel)
                    if sentinel in paragraph.text:
                        replaced_count += 1
        except Exception as e:
            raise ReplacementFailedError(f"Replacement test failed: {e}") from e

        if replaced_count == 0:
            raise ReplacementFailedError(
                "Replacement failed - placeholder might be malformed"
            )
        return replaced_count
