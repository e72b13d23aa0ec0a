"""Cross-run substitution engine.

Word splits a paragraph's text into many formatted runs, and a placeholder
such as ``{{ client_name }}`` can end up spread across several of them.
The engine reasons over the paragraph's full concatenated text instead of
individual runs, then writes the result back into the first text node and
empties the rest. Runs and nodes are never removed, so every formatting
anchor survives; the original split of the surrounding text does not.
"""

import logging
import re
from collections.abc import Callable

from docx.document import Document as DocxDocument
from docx.text.paragraph import Paragraph

from docx_placeholders.strategies.documents import iter_document_paragraphs
from docx_placeholders.strategies.substitution.nodes import (
    collect_text_nodes,
    joined_text,
    set_node_text,
)
from docx_placeholders.strategies.substitution.patterns import Matcher, compile_pattern

logger = logging.getLogger(__name__)

Replacement = str | Callable[[re.Match], str]


class CrossRunSubstitutionEngine:
    """Substitutes patterns across all text nodes of a paragraph.

    Patterns may be a ``LiteralToken``/``str`` (escaped and word-boundary
    guarded), or a ``CompiledMatcher``/``re.Pattern`` (used as-is).
    Replacements are either a static string, inserted literally, or a
    callable receiving each ``re.Match`` and returning its replacement.
    Catastrophic regexes are not sandboxed; that is the caller's concern.
    """

    def substitute(
        self,
        paragraph: Paragraph,
        pattern: Matcher | str | re.Pattern,
        replacement: Replacement,
    ) -> int:
        """Replace every non-overlapping match in the paragraph.

        Args:
            paragraph: The python-docx paragraph to rewrite.
            pattern: What to match.
            replacement: Static value or match callback.

        Returns:
            Number of replacements made; 0 means the paragraph is untouched.
        """
        regex = compile_pattern(pattern)
        nodes = collect_text_nodes(paragraph)
        if not nodes:
            return 0

        full_text = joined_text(nodes)
        if regex.search(full_text) is None:
            return 0

        if callable(replacement):
            new_text, count = regex.subn(lambda match: str(replacement(match)), full_text)
        else:
            # Static values are inserted literally, no backreference expansion.
            new_text, count = regex.subn(lambda _match: replacement, full_text)

        set_node_text(nodes[0], new_text)
        for node in nodes[1:]:
            node.text = ""

        logger.debug(
            f"Cross-run substitution: {count} replacement(s) across {len(nodes)} node(s)"
        )
        return count

    def substitute_in_document(
        self,
        document: DocxDocument,
        pattern: Matcher | str | re.Pattern,
        replacement: Replacement,
        include_tables: bool = True,
    ) -> int:
        """Apply :meth:`substitute` to every body and table-cell paragraph."""
        regex = compile_pattern(pattern)
        total = 0
        for _location, paragraph in iter_document_paragraphs(document, include_tables):
            total += self.substitute(paragraph, regex, replacement)
        logger.info(f"Document substitution complete: {total} replacement(s) for {regex.pattern!r}")
        return total
