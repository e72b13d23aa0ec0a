"""Document collaborator interfaces.

Opening, saving and copying the underlying document container is delegated
to a loader so the substitution and validation strategies only ever see an
in-memory document tree.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseDocumentLoader(ABC):
    """Abstract base class for document container access."""

    @abstractmethod
    def open(self, path: str) -> Any:
        """Open a document from disk.

        Args:
            path: Path to the document file.

        Returns:
            The in-memory document.

        Raises:
            FileNotFoundError: If the file doesn't exist.
        """

    @abstractmethod
    def save(self, document: Any, path: str) -> str:
        """Save a document and return the written path."""

    @abstractmethod
    def clone(self, document: Any) -> Any:
        """Return an independent deep copy of an open document."""

    @property
    @abstractmethod
    def supported_extensions(self) -> set[str]:
        """Return supported file extensions."""
