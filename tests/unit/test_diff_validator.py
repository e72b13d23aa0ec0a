"""Unit tests for original-vs-processed diff validation."""

import re

import pytest

from docx_placeholders.strategies.diff import DocumentDiffValidator, find_placeholders
from docx_placeholders.strategies.substitution.patterns import DEFAULT_SCAN_PATTERNS, SyntaxFamily


class TestDocumentDiffValidator:
    """Test suite for DocumentDiffValidator."""

    # =========================================================================
    # Default multi-family scan
    # =========================================================================

    def test_partial_replacement_fails(self, make_document):
        original = make_document("{{ name }} agrees to {{ terms }}")
        processed = make_document("Alice agrees to {{ terms }}")
        validator = DocumentDiffValidator(original, processed)

        report = validator.validate_replacements()

        assert report.total_placeholders_found == 2
        assert report.successful_replacements == 1
        assert report.failed_replacements == 1
        assert report.missed == ["{{ terms }}"]
        assert report.validation_passed is False
        assert validator.passed is False
        assert report.success_rate == 50.0

    def test_full_replacement_passes(self, make_document):
        original = make_document("{{ name }} agrees to {{ terms }}")
        processed = make_document("Alice agrees to the terms")
        validator = DocumentDiffValidator(original, processed)

        report = validator.validate_replacements()

        assert report.validation_passed is True
        assert report.success_rate == 100.0
        assert validator.failed_placeholders == []

    def test_each_family_attributed_once(self, make_document):
        document = make_document("Fields: _a_ {b} {{c}}")

        found = find_placeholders(document, list(DEFAULT_SCAN_PATTERNS.values()))

        assert [(o.placeholder, o.pattern) for o in found] == [
            ("_a_", DEFAULT_SCAN_PATTERNS[SyntaxFamily.UNDERLINE].pattern),
            ("{b}", DEFAULT_SCAN_PATTERNS[SyntaxFamily.MUSTACHE].pattern),
            ("{{c}}", DEFAULT_SCAN_PATTERNS[SyntaxFamily.DOUBLE_MUSTACHE].pattern),
        ]

    def test_duplicates_at_same_location_counted_once(self, make_document):
        original = make_document("{{ x }} and {{ x }}", "{{ x }}")
        processed = make_document("1 and 1", "1")

        report = DocumentDiffValidator(original, processed).validate_replacements()

        assert report.total_placeholders_found == 2
        assert [d.location for d in report.replacement_details] == [1, 2]

    def test_existence_check_ignores_location(self, make_document):
        original = make_document("{{ a }}", "plain")
        processed = make_document("done", "{{ a }}")

        report = DocumentDiffValidator(original, processed).validate_replacements()

        assert report.failed_replacements == 1

    # =========================================================================
    # Tables
    # =========================================================================

    def test_table_placeholder_is_located(self, make_document):
        original = make_document("Intro", table=[["City", "{{ city }}"]])
        processed = make_document("Intro", table=[["City", "{{ city }}"]])

        report = DocumentDiffValidator(original, processed).validate_replacements()

        assert report.total_placeholders_found == 1
        assert report.missed_placeholders[0].location == "Table 1, Row 1, Cell 2, Para 1"

    def test_merged_cell_placeholder_counted_once(self, make_document):
        original = make_document("Intro", table=[["", "", ""]])
        table = original.tables[0]
        merged = table.cell(0, 0).merge(table.cell(0, 2))
        merged.text = "{{ city }}"
        processed = make_document("Intro")

        report = DocumentDiffValidator(original, processed).validate_replacements()

        assert report.total_placeholders_found == 1
        assert report.successful_replacements == 1
        assert [d.location for d in report.replacement_details] == [
            "Table 1, Row 1, Cell 1, Para 1"
        ]

    # =========================================================================
    # Expected placeholders
    # =========================================================================

    def test_expected_placeholders(self, make_document):
        original = make_document("{{ name }} agrees to {{terms}}", "_office_name_")
        processed = make_document("Alice agrees to {{ terms }}", "Office")
        validator = DocumentDiffValidator(original, processed)

        results = validator.validate_expected_placeholders(
            ["{{ name }}", "{{ terms }}", "_office_name_", "_missing_", re.compile(r"Alice")]
        )

        summary = [
            (r.expected, r.found_in_original, r.found_in_processed, r.successfully_replaced)
            for r in results
        ]
        assert summary == [
            ("{{ name }}", 1, 0, True),
            ("{{ terms }}", 1, 1, False),
            ("_office_name_", 1, 0, True),
            ("_missing_", 0, 0, False),
            ("Alice", 0, 1, False),
        ]
        assert results[0].locations_original[0].location == 1

    def test_expected_rejects_other_types(self, make_document):
        validator = DocumentDiffValidator(make_document("x"), make_document("y"))
        with pytest.raises(TypeError):
            validator.validate_expected_placeholders([42])

    def test_explicit_patterns_replace_defaults(self, make_document):
        original = make_document("{{ name }} and _office_")
        processed = make_document("{{ name }} and Office")

        report = DocumentDiffValidator(original, processed).validate_replacements(["_office_"])

        assert report.total_placeholders_found == 1
        assert report.validation_passed is True

    # =========================================================================
    # Reporting and loading
    # =========================================================================

    def test_report_lists_missed_with_truncated_context(self, make_document):
        text = "{{ terms }} " + "x" * 200
        validator = DocumentDiffValidator(make_document(text), make_document(text), context_chars=20)
        validator.validate_replacements()

        report = validator.render_report()

        assert "VALIDATION FAILED" in report
        assert "- {{ terms }} (Paragraph 1)" in report
        assert f"Context: ...{text[:20]}..." in report
        assert "Suggestions:" in report

    def test_validate_from_paths(self, make_document, save_document):
        original = save_document(make_document("{{ name }}"), "original.docx")
        processed = save_document(make_document("Alice"), "processed.docx")

        validator = DocumentDiffValidator.validate(original, processed)

        assert validator.passed is True

    def test_missing_document_propagates(self, tmp_path, make_document, save_document):
        original = save_document(make_document("{{ name }}"), "original.docx")
        with pytest.raises(FileNotFoundError):
            DocumentDiffValidator.from_paths(original, str(tmp_path / "missing.docx"))
