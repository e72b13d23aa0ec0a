"""Shared fixtures: Word documents built in memory with python-docx."""

import io

import pytest
from docx import Document


def build_document(*paragraphs, table=None):
    """Build a document from paragraph specs.

    Each paragraph spec is a string (one run) or a list of runs, where a run
    is a string or a ``(text, bold)`` tuple. ``table`` is a list of rows of
    cell strings.
    """
    document = Document()
    for spec in paragraphs:
        paragraph = document.add_paragraph()
        runs = [spec] if isinstance(spec, str) else spec
        for run_spec in runs:
            text, bold = run_spec if isinstance(run_spec, tuple) else (run_spec, None)
            run = paragraph.add_run(text)
            if bold:
                run.bold = True
    if table:
        docx_table = document.add_table(rows=len(table), cols=len(table[0]))
        for row_idx, row in enumerate(table):
            for cell_idx, value in enumerate(row):
                docx_table.cell(row_idx, cell_idx).text = value
    return document


def to_bytes(document) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_document():
    return build_document


@pytest.fixture
def save_document(tmp_path):
    """Save a document under tmp_path and return its path as a string."""

    def _save(document, name="document.docx"):
        path = tmp_path / name
        document.save(str(path))
        return str(path)

    return _save
