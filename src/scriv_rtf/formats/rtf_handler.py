"""Rich Text Format (.rtf) file handler."""

import logging
from pathlib import Path

from scriv_rtf.codec import decode, encode
from scriv_rtf.config import get_settings
from scriv_rtf.formats.base import FormatHandler

logger = logging.getLogger(__name__)


class RTFHandler(FormatHandler):
    """Handler for Scrivener Rich Text Format (.rtf) files.

    Reading decodes bold and italic into ``**``/``*`` markers.
    Writing always produces a fresh document with the standard preamble.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".rtf",)

    def read(self, path: Path) -> str:
        """Extract annotated text from an RTF file."""
        settings = get_settings()
        rtf_content = self._read_file(path, settings.encoding, errors="ignore")
        text = decode(rtf_content)
        logger.debug("Decoded %s (%d chars of RTF)", path, len(rtf_content))
        return text

    def write(self, text: str, path: Path) -> None:
        """Encode annotated text and write it as an RTF file."""
        settings = get_settings()
        self._write_file(path, encode(text), settings.encoding)
        logger.debug("Wrote %s", path)
