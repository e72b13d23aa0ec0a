"""Unit tests for per-placeholder validation."""

import re

import pytest

from docx_placeholders.interfaces.validation import ValidationIssue
from docx_placeholders.strategies.debugger import PlaceholderConfiguration, PlaceholderValidator
from docx_placeholders.strategies.documents import DocxDocumentLoader
from docx_placeholders.strategies.substitution import CrossRunSubstitutionEngine, SyntaxFamily


class NullEngine(CrossRunSubstitutionEngine):
    """Engine that never changes anything."""

    def substitute(self, paragraph, pattern, replacement):
        return 0


class BrokenLoader(DocxDocumentLoader):
    def clone(self, document):
        raise RuntimeError("disk on fire")


def first_placeholder(syntax, name):
    return PlaceholderConfiguration(syntax, [name]).placeholders[0]


class TestPlaceholderValidator:
    """Test suite for PlaceholderValidator."""

    # =========================================================================
    # Search
    # =========================================================================

    def test_found_placeholder_validates(self, make_document):
        document = make_document("Intro", "please insert _name_ here", "and _name_ again")
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(first_placeholder(SyntaxFamily.UNDERLINE, "name"))

        assert result.success is True
        assert result.found_count == 2
        assert result.paragraph_indices == [2, 3]
        assert result.replaced_count == 2
        assert result.issue is None
        assert result.error is None

    def test_partial_identifier_never_matches(self, make_document):
        document = make_document("my_name_is_here")
        validator = PlaceholderValidator(document)
        placeholder = first_placeholder(SyntaxFamily.UNDERLINE, "name")

        assert validator.search_placeholder(placeholder) == (0, [])
        result = validator.validate_placeholder(placeholder)

        assert result.success is False
        assert result.issue == ValidationIssue.FRAGMENTED

    def test_search_is_idempotent(self, make_document):
        document = make_document(["{{ a", "mount }}"], "{{ amount }}")
        validator = PlaceholderValidator(document)
        placeholder = first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "amount")

        first = validator.search_placeholder(placeholder)
        validator.validate_placeholder(placeholder)
        second = validator.search_placeholder(placeholder)

        assert first == second == (2, [1, 2])

    # =========================================================================
    # Fragmentation
    # =========================================================================

    def test_placeholder_split_across_runs_succeeds(self, make_document):
        document = make_document(["_of", "fice_name_"])
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.UNDERLINE, "office_name")
        )

        assert result.success is True
        assert result.found_count == 1
        assert result.issue is None

    def test_broken_token_with_present_name_is_fragmented(self, make_document):
        document = make_document("Body", ["{{ cli", "ent }"])
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "client")
        )

        assert result.success is False
        assert result.issue == ValidationIssue.FRAGMENTED
        assert result.found_count == 1
        assert result.paragraph_indices == [2]
        assert "fragmented" in result.error

    def test_absent_placeholder_is_not_found(self, make_document):
        document = make_document("Nothing here")
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "client")
        )

        assert result.success is False
        assert result.issue == ValidationIssue.NOT_FOUND
        assert result.found_count == 0
        assert result.error == "Placeholder not found in document"

    def test_leading_underscore_is_part_of_the_name(self, make_document):
        document = make_document("tmp files are cleaned nightly")
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "_tmp")
        )

        assert result.issue == ValidationIssue.NOT_FOUND

    # =========================================================================
    # Tables
    # =========================================================================

    def test_table_only_placeholder_validates(self, make_document):
        document = make_document("Intro", table=[["City", "{{ city }}"]])
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "city")
        )

        assert result.success is True
        assert result.found_count == 1
        assert result.paragraph_indices == ["Table 1, Row 1, Cell 2, Para 1"]
        assert result.replaced_count == 1

    def test_fragmented_placeholder_in_table_cell(self, make_document):
        document = make_document("Intro", table=[["City", "{{ city }"]])
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "city")
        )

        assert result.issue == ValidationIssue.FRAGMENTED
        assert result.paragraph_indices == ["Table 1, Row 1, Cell 2, Para 1"]

    # =========================================================================
    # Trial replacement
    # =========================================================================

    def test_document_under_test_is_not_mutated(self, make_document):
        document = make_document(["Dear {{ na", "me }}"], "{{ name }}")
        validator = PlaceholderValidator(document)
        placeholder = first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "name")

        first = validator.validate_placeholder(placeholder)
        second = validator.validate_placeholder(placeholder)

        assert [p.text for p in document.paragraphs] == ["Dear {{ name }}", "{{ name }}"]
        assert [run.text for run in document.paragraphs[0].runs] == ["Dear {{ na", "me }}"]
        assert first.success and second.success
        assert first.found_count == second.found_count == 2

    def test_failed_cross_run_attempt_is_replacement_failure(self, make_document):
        document = make_document(["_of", "fice_name_"])
        validator = PlaceholderValidator(document, engine=NullEngine())

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.UNDERLINE, "office_name")
        )

        assert result.success is False
        assert result.issue == ValidationIssue.REPLACEMENT_FAILED
        assert result.found_count == 1

    def test_unexpected_error_is_downgraded(self, make_document):
        document = make_document("{{ name }}")
        validator = PlaceholderValidator(document, loader=BrokenLoader())

        result = validator.validate_placeholder(
            first_placeholder(SyntaxFamily.DOUBLE_MUSTACHE, "name")
        )

        assert result.success is False
        assert result.issue == ValidationIssue.VALIDATION_ERROR
        assert "disk on fire" in result.error

    def test_custom_pattern_override(self, make_document):
        document = make_document("Signed by ACME Ltd")
        config = PlaceholderConfiguration(
            SyntaxFamily.DOUBLE_MUSTACHE, ["company"], custom_pattern=re.compile(r"\bACME\b")
        )
        validator = PlaceholderValidator(document)

        result = validator.validate_placeholder(config.placeholders[0])

        assert result.success is True
        assert result.found_count == 1


class TestPlaceholderConfiguration:
    """Test suite for PlaceholderConfiguration."""

    def test_defaults_to_double_mustache(self):
        config = PlaceholderConfiguration()
        assert config.syntax == SyntaxFamily.DOUBLE_MUSTACHE
        assert config.pattern_example == "{{ placeholder_name }}"

    def test_duplicates_keep_insertion_order(self):
        config = PlaceholderConfiguration("underline", ["b", "a", "b"])
        assert config.names == ["b", "a", "b"]
        assert [p.formatted for p in config.placeholders] == ["_b_", "_a_", "_b_"]

    def test_custom_pattern_descriptions(self):
        config = PlaceholderConfiguration(custom_pattern=re.compile("x"))
        assert config.pattern_example == "Custom regex pattern"
        assert config.pattern_description == "Custom pattern"

    @pytest.mark.parametrize("syntax", ["nonsense", 3])
    def test_unknown_syntax_rejected(self, syntax):
        with pytest.raises(ValueError):
            PlaceholderConfiguration(syntax)
