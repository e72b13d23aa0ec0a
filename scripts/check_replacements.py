"""Check that a processed document has no placeholders left.

Exits 0 when validation passes, 1 otherwise.

Usage:
    python scripts/check_replacements.py ORIGINAL.docx PROCESSED.docx [TOKEN ...]
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docx_placeholders.core.config import get_settings
from docx_placeholders.core.logging_config import setup_logging
from docx_placeholders.strategies.diff import DocumentDiffValidator


def main(argv: list[str]) -> int:
    """Validate replacements and return the process exit code."""
    if len(argv) < 2:
        print(__doc__)
        return 2

    settings = get_settings()
    setup_logging(settings)

    original, processed, *tokens = argv
    validator = DocumentDiffValidator.from_paths(
        original, processed, context_chars=settings.context_preview_chars
    )
    validator.validate_replacements()
    print(validator.render_report())

    for result in validator.validate_expected_placeholders(tokens):
        status = "OK" if result.successfully_replaced else "FAIL"
        print(f"[{status}] {result.expected}")
        if result.found_in_original > 0:
            print(f"    Original: {result.found_in_original} instances")
            print(f"    Processed: {result.found_in_processed} instances")
        else:
            print("    Not found in original template")

    return 0 if validator.passed else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
