"""Human-readable debugging reports."""

from docx_placeholders.interfaces.validation import ValidationIssue
from docx_placeholders.strategies.debugger.configuration import PlaceholderConfiguration
from docx_placeholders.strategies.debugger.models import DebugSession

RULE = "=" * 60
THIN_RULE = "-" * 60


def render_session_report(
    session: DebugSession, config: PlaceholderConfiguration | None = None
) -> str:
    """Render one line block per placeholder plus a trailing summary."""
    pattern = config.pattern_example if config is not None else session.pattern_example
    lines = [
        RULE,
        "DOCX PLACEHOLDER DEBUGGER",
        RULE,
        f"Template: {session.document}",
        f"Pattern Type: {session.syntax.value}",
        f"Pattern: {pattern}",
        THIN_RULE,
        "VALIDATION RESULTS:",
    ]

    for idx, detail in enumerate(session.details, start=1):
        status = "OK" if detail.success else "FAIL"
        lines.append(f"{idx}. [{status}] {detail.placeholder.formatted}")
        if detail.success:
            lines.append(f"   Found: {detail.found_count} occurrence(s)")
            lines.append(f"   Paragraphs: {', '.join(str(i) for i in detail.paragraph_indices)}")
            lines.append("   Test replacement: SUCCESS")
            continue

        lines.append(f"   Error: {detail.error}")
        if detail.issue == ValidationIssue.FRAGMENTED:
            lines.append(
                f"   Paragraphs: {', '.join(str(i) for i in detail.paragraph_indices)}"
            )
        elif detail.found_count == 0:
            lines.append("   Suggestion: Check if placeholder exists in document")
            lines.append("               or if it's fragmented across XML nodes")

    lines.extend(
        [
            RULE,
            "SUMMARY:",
            f"  Total placeholders: {session.total}",
            f"  Successful: {session.successful}",
            f"  Failed: {session.failed}",
            f"  Success Rate: {session.success_rate}%",
            RULE,
        ]
    )
    if session.failed == 0 and session.total > 0:
        lines.append("All placeholders validated successfully.")
    elif session.failed > 0:
        lines.append("Cannot generate replacer due to validation failures.")
        lines.append("Fix the issues above and run the debugger again.")
    return "\n".join(lines)
