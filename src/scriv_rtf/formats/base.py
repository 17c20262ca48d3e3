"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path


class ConversionError(Exception):
    """A document could not be read or written."""

    pass


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Every handler reads a file into annotated text (``**bold**``,
    ``*italic*``, one paragraph per line) and writes annotated text back
    to its own format.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.rtf',))."""
        ...

    @abstractmethod
    def read(self, path: Path) -> str:
        """Extract annotated text from a document.

        Args:
            path: Path to the input document

        Returns:
            Annotated text content of the document
        """
        ...

    @abstractmethod
    def write(self, text: str, path: Path) -> None:
        """Write annotated text to a file.

        Args:
            text: Annotated text to store
            path: Path to write the output document
        """
        ...

    def _read_file(self, path: Path, encoding: str, errors: str = "strict") -> str:
        try:
            return path.read_text(encoding=encoding, errors=errors)
        except FileNotFoundError as e:
            raise ConversionError(f"Input file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionError(f"Could not read {path}: {e}") from e

    def _write_file(self, path: Path, content: str, encoding: str) -> None:
        try:
            path.write_text(content, encoding=encoding)
        except (OSError, UnicodeEncodeError) as e:
            raise ConversionError(f"Could not write {path}: {e}") from e
