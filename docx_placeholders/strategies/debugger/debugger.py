"""Placeholder debugging sessions.

A session moves through Configured -> Validated -> Reported. When every
configured placeholder validates, the configuration is handed to a replacer
generator; otherwise generation is skipped and the failures are reported.
"""

import enum
import logging
import uuid
from pathlib import Path

from docx.document import Document as DocxDocument

from docx_placeholders.interfaces.document import BaseDocumentLoader
from docx_placeholders.interfaces.generator import BaseReplacerGenerator, ReplacerGenerationError
from docx_placeholders.strategies.debugger.configuration import PlaceholderConfiguration
from docx_placeholders.strategies.debugger.models import DebugSession
from docx_placeholders.strategies.debugger.report import render_session_report
from docx_placeholders.strategies.debugger.validator import PlaceholderValidator
from docx_placeholders.strategies.documents import DocxDocumentLoader
from docx_placeholders.strategies.substitution.consolidator import RunConsolidator
from docx_placeholders.strategies.substitution.engine import CrossRunSubstitutionEngine
from docx_placeholders.strategies.substitution.patterns import CompiledMatcher, SyntaxFamily

logger = logging.getLogger(__name__)


class SessionState(str, enum.Enum):
    """Lifecycle of a debugging session."""

    CONFIGURED = "configured"
    VALIDATED = "validated"
    REPORTED = "reported"


class PlaceholderDebugger:
    """Drives placeholder validation over a whole document.

    Example:
        ```python
        debugger = PlaceholderDebugger(loader=DocxDocumentLoader())
        debugger.configure_path("template.docx", PlaceholderConfiguration(
            syntax=SyntaxFamily.UNDERLINE,
            placeholders=["office_name", "partner_name"],
        ))
        session = debugger.run()
        if session.passed:
            ...
        ```
    """

    def __init__(
        self,
        loader: BaseDocumentLoader | None = None,
        generator: BaseReplacerGenerator | None = None,
        engine: CrossRunSubstitutionEngine | None = None,
        consolidator: RunConsolidator | None = None,
        sentinel_prefix: str = "REPLACED_",
        test_value_prefix: str = "TEST_",
    ) -> None:
        self._loader = loader or DocxDocumentLoader()
        self._generator = generator
        self._engine = engine or CrossRunSubstitutionEngine()
        self._consolidator = consolidator or RunConsolidator()
        self._sentinel_prefix = sentinel_prefix
        self._test_value_prefix = test_value_prefix

        self.document: DocxDocument | None = None
        self.document_name: str = ""
        self.config: PlaceholderConfiguration | None = None
        self.session: DebugSession | None = None
        self.state: SessionState | None = None
        self.generated_artifact: str | None = None

    def configure(
        self,
        document: DocxDocument,
        config: PlaceholderConfiguration,
        document_name: str = "<in-memory document>",
    ) -> "PlaceholderDebugger":
        """Bind a document and configuration, entering Configured."""
        self.document = document
        self.document_name = document_name
        self.config = config
        self.session = None
        self.generated_artifact = None
        self.state = SessionState.CONFIGURED
        logger.info(
            f"Debugger configured: document={document_name}, syntax={config.syntax.value}, "
            f"placeholders={len(config.placeholders)}"
        )
        return self

    def configure_path(self, path: str, config: PlaceholderConfiguration) -> "PlaceholderDebugger":
        """Open ``path`` with the loader and configure against it."""
        return self.configure(self._loader.open(path), config, document_name=path)

    def validate(self) -> DebugSession:
        """Validate every configured placeholder, entering Validated.

        Raises:
            RuntimeError: If the debugger has not been configured.
        """
        if self.document is None or self.config is None:
            raise RuntimeError("Debugger must be configured before validation")

        validator = PlaceholderValidator(
            self.document,
            loader=self._loader,
            engine=self._engine,
            sentinel_prefix=self._sentinel_prefix,
        )
        session = DebugSession(
            document=self.document_name,
            syntax=self.config.syntax,
            pattern_example=self.config.pattern_example,
        )
        for placeholder in self.config.placeholders:
            session.record(validator.validate_placeholder(placeholder))

        logger.info(
            f"Validation complete: total={session.total}, successful={session.successful}, "
            f"failed={session.failed}"
        )
        self.session = session
        self.state = SessionState.VALIDATED
        return session

    def render_report(self) -> str:
        """Render the session report, entering Reported."""
        if self.session is None:
            raise RuntimeError("Nothing to report: run validation first")
        self.state = SessionState.REPORTED
        return render_session_report(self.session, self.config)

    def run(self) -> DebugSession:
        """Validate, report, and generate a replacer when everything passed."""
        session = self.validate()
        logger.info("\n" + self.render_report())
        self.generate_replacer_if_successful()
        return session

    def generate_replacer_if_successful(self) -> str | None:
        """Hand the configuration to the generator if the session passed.

        Returns:
            The generated artifact identifier, or None when skipped.

        Raises:
            ReplacerGenerationError: If the generator fails.
        """
        session = self.session
        if session is None:
            return None

        if session.failed > 0:
            logger.warning(
                f"Skipping replacer generation: {session.failed} placeholder(s) failed validation"
            )
            return None
        if session.total == 0:
            logger.info("Skipping replacer generation: no placeholders configured")
            return None
        if self._generator is None:
            logger.info("All placeholders validated; no replacer generator configured")
            return None

        try:
            self.generated_artifact = self._generator.generate(self.config, session)
        except ReplacerGenerationError:
            raise
        except Exception as e:
            logger.error(f"Replacer generation failed: {e}", exc_info=True)
            raise ReplacerGenerationError(f"Replacer generation failed: {e}") from e

        logger.info(f"Replacer generated: {self.generated_artifact}")
        return self.generated_artifact

    def test_replacement(
        self, output_path: str | None = None, consolidate: bool = False
    ) -> dict[str, str]:
        """Replace every placeholder with a random test value in a copy.

        This is the only operation that writes a document; the document under
        debugging is left untouched and the copy is saved to ``output_path``.

        Args:
            output_path: Where to save the substituted copy (optional).
            consolidate: Merge identically formatted runs before substituting.

        Returns:
            Mapping of placeholder name to the test value used.
        """
        if self.document is None or self.config is None:
            raise RuntimeError("Debugger must be configured before test replacement")

        copy = self._loader.clone(self.document)
        if consolidate:
            self._consolidator.consolidate_document(copy)

        replacements: dict[str, str] = {}
        for placeholder in self.config.placeholders:
            value = f"{self._test_value_prefix}{uuid.uuid4().hex[:8]}"
            replacements[placeholder.name] = value
            self._engine.substitute_in_document(copy, CompiledMatcher(placeholder.pattern), value)

        if output_path:
            self._loader.save(copy, str(Path(output_path)))
            logger.info(f"Test document saved: {output_path}")

        return replacements


def analyze(
    path: str,
    syntax: SyntaxFamily | str = SyntaxFamily.DOUBLE_MUSTACHE,
    names: list[str] | None = None,
    loader: BaseDocumentLoader | None = None,
    generator: BaseReplacerGenerator | None = None,
) -> PlaceholderDebugger:
    """Open a document and return a configured debugger."""
    debugger = PlaceholderDebugger(loader=loader, generator=generator)
    return debugger.configure_path(path, PlaceholderConfiguration(syntax, names or []))


def quick_check(
    path: str,
    syntax: SyntaxFamily | str,
    names: list[str],
    loader: BaseDocumentLoader | None = None,
    generator: BaseReplacerGenerator | None = None,
) -> DebugSession:
    """Configure, validate and report in one call."""
    return analyze(path, syntax, names, loader=loader, generator=generator).run()
