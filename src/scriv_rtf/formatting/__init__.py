"""Formatting utilities for parsing and rendering annotated text."""

from scriv_rtf.formatting.ir import (
    TextRun,
    TextBlock,
    FormattedDocument,
    TextStyle,
)
from scriv_rtf.formatting.parser import MarkdownParser

__all__ = [
    "TextRun",
    "TextBlock",
    "FormattedDocument",
    "TextStyle",
    "MarkdownParser",
]
