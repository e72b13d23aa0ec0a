"""python-docx document loader and paragraph traversal."""

import io
import logging
from collections.abc import Iterator
from pathlib import Path

from docx import Document
from docx.document import Document as DocxDocument
from docx.text.paragraph import Paragraph

from docx_placeholders.interfaces.document import BaseDocumentLoader

logger = logging.getLogger(__name__)

Location = int | str


class DocxDocumentLoader(BaseDocumentLoader):
    """Opens, saves and copies ``.docx`` files with python-docx."""

    def open(self, path: str) -> DocxDocument:
        if not Path(path).exists():
            raise FileNotFoundError(f"Document not found: {path}")
        logger.debug(f"Opening document: {path}")
        return Document(path)

    def save(self, document: DocxDocument, path: str) -> str:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        document.save(path)
        logger.info(f"Document saved: {path}")
        return path

    def clone(self, document: DocxDocument) -> DocxDocument:
        """Copy a document by round-tripping it through an in-memory buffer."""
        buffer = io.BytesIO()
        document.save(buffer)
        buffer.seek(0)
        return Document(buffer)

    @property
    def supported_extensions(self) -> set[str]:
        return {".docx"}


def table_location(table: int, row: int, cell: int, paragraph: int) -> str:
    """Compound, 1-based label for a paragraph inside a table cell."""
    return f"Table {table}, Row {row}, Cell {cell}, Para {paragraph}"


def iter_table_paragraphs(document: DocxDocument) -> Iterator[tuple[str, Paragraph]]:
    """Yield each table cell paragraph once.

    ``row.cells`` repeats a merged cell for every grid column it spans and
    for vertical-merge continuations; only the first sighting is kept.
    """
    for table_idx, table in enumerate(document.tables, start=1):
        seen = set()
        for row_idx, row in enumerate(table.rows, start=1):
            for cell_idx, cell in enumerate(row.cells, start=1):
                if cell._tc in seen:
                    continue
                seen.add(cell._tc)
                for para_idx, paragraph in enumerate(cell.paragraphs, start=1):
                    yield table_location(table_idx, row_idx, cell_idx, para_idx), paragraph


def iter_document_paragraphs(
    document: DocxDocument, include_tables: bool = True
) -> Iterator[tuple[Location, Paragraph]]:
    """Yield ``(location, paragraph)`` for body paragraphs, then table cells.

    Body locations are 1-based paragraph indices; table locations are
    compound labels from :func:`table_location`.
    """
    for idx, paragraph in enumerate(document.paragraphs, start=1):
        yield idx, paragraph
    if include_tables:
        yield from iter_table_paragraphs(document)
