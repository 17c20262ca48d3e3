"""Plain text file handler."""

from pathlib import Path

from scriv_rtf.formats.base import FormatHandler


class TXTHandler(FormatHandler):
    """Handler for annotated plain text (.txt, .md) files.

    The text is stored exactly as the codec produces it:
    - **bold** for bold text
    - *italic* for italic text
    - one paragraph per line
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt", ".md")

    def read(self, path: Path) -> str:
        """Read annotated text from file."""
        return self._read_file(path, "utf-8")

    def write(self, text: str, path: Path) -> None:
        """Write annotated text, ending with a newline."""
        content = text if text.endswith("\n") or not text else text + "\n"
        self._write_file(path, content, "utf-8")
