"""Debug the placeholders of a Word template.

Exits 0 when every placeholder validates, 1 otherwise.

Usage:
    python scripts/debug_template.py TEMPLATE.docx SYNTAX NAME [NAME ...]
    e.g. python scripts/debug_template.py template.docx underline office_name partner_name
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docx_placeholders.core.config import get_settings
from docx_placeholders.core.logging_config import setup_logging
from docx_placeholders.strategies.debugger import analyze


def main(argv: list[str]) -> int:
    """Run a debugging session and return the process exit code."""
    if len(argv) < 3:
        print(__doc__)
        return 2

    settings = get_settings()
    setup_logging(settings)

    template, syntax, *names = argv
    debugger = analyze(template, syntax, names)
    session = debugger.run()

    if session.passed:
        output = Path(template).with_name(f"{Path(template).stem}_test{Path(template).suffix}")
        values = debugger.test_replacement(str(output), consolidate=settings.consolidate_runs)
        print(f"Test document saved: {output}")
        for name, value in values.items():
            print(f"  {name} -> {value}")

    return 0 if session.passed else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
