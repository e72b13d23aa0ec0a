"""Run consolidation.

Merges neighbouring runs whose formatting is identical so that fewer
placeholders are split across run boundaries before matching.
"""

import logging

from docx.document import Document as DocxDocument
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from docx_placeholders.strategies.documents import iter_document_paragraphs
from docx_placeholders.strategies.substitution.nodes import (
    are_adjacent,
    formatting_key,
    remove_run,
)

logger = logging.getLogger(__name__)


class RunConsolidator:
    """Merges maximal groups of adjacent, identically formatted runs.

    The text of each group is concatenated into its first run and the other
    runs are removed from the paragraph. Visible text and the order of the
    remaining runs are unchanged.
    """

    def consolidate(self, paragraph: Paragraph) -> int:
        """Consolidate one paragraph.

        Returns:
            Number of runs removed.
        """
        runs = paragraph.runs
        if len(runs) < 2:
            return 0

        groups: list[list[Run]] = [[runs[0]]]
        current_key = formatting_key(runs[0])
        for run in runs[1:]:
            key = formatting_key(run)
            if key == current_key and are_adjacent(groups[-1][-1], run):
                groups[-1].append(run)
            else:
                groups.append([run])
                current_key = key

        removed = 0
        for group in groups:
            if len(group) > 1:
                removed += self._merge(group)
        return removed

    def consolidate_document(self, document: DocxDocument) -> int:
        removed = 0
        for _location, paragraph in iter_document_paragraphs(document):
            removed += self.consolidate(paragraph)
        logger.info(f"Run consolidation removed {removed} run(s)")
        return removed

    def _merge(self, group: list[Run]) -> int:
        first = group[0]
        first.text = "".join(run.text for run in group)
        for run in group[1:]:
            remove_run(run)
        return len(group) - 1
