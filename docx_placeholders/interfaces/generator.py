"""Replacer code-generation interface.

When a debugging session validates every placeholder, the finalized
configuration is handed to a generator that emits a typed, setter-based
replacer artifact. Generators live outside this package.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseReplacerGenerator(ABC):
    """Abstract base class for replacer artifact generators."""

    @abstractmethod
    def generate(self, configuration: Any, session: Any) -> str:
        """Emit a replacer artifact.

        Args:
            configuration: The PlaceholderConfiguration that passed validation.
            session: The DebugSession carrying the pass/fail aggregate.

        Returns:
            Path (or identifier) of the generated artifact.

        Raises:
            ReplacerGenerationError: If generation fails.
        """


class ReplacerGenerationError(Exception):
    """Exception raised when replacer generation fails."""

    pass
