"""Document format handlers for Scriv RTF."""

from scriv_rtf.formats.base import FormatHandler, ConversionError
from scriv_rtf.formats.txt_handler import TXTHandler
from scriv_rtf.formats.rtf_handler import RTFHandler

__all__ = [
    "FormatHandler",
    "ConversionError",
    "TXTHandler",
    "RTFHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".txt": TXTHandler,
    ".md": TXTHandler,
    ".rtf": RTFHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())
TEXT_EXTENSIONS = (".txt", ".md")


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
