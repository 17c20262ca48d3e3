"""Intermediate Representation for annotated text.

This module defines the structures a consumer of decoded text works
with instead of raw ``*`` markers: a document is a list of blocks
(paragraphs), each a list of runs with a combined style.
"""

import re
from dataclasses import dataclass, field
from enum import Flag, auto

WORD_PATTERN = re.compile(r"\S+")


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()


@dataclass
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Combined style flags (BOLD, ITALIC, or both)
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    def __str__(self) -> str:
        return self.text


@dataclass
class TextBlock:
    """A paragraph of text containing multiple styled runs."""

    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)

    def append(self, text: str, style: TextStyle = TextStyle.NONE) -> None:
        """Append a new run to this block."""
        self.runs.append(TextRun(text=text, style=style))

    def merged(self) -> "TextBlock":
        """Return a copy with adjacent same-style runs joined."""
        block = TextBlock()
        for run in self.runs:
            if not run.text:
                continue
            if block.runs and block.runs[-1].style == run.style:
                last = block.runs[-1]
                block.runs[-1] = TextRun(text=last.text + run.text, style=last.style)
            else:
                block.runs.append(TextRun(text=run.text, style=run.style))
        return block

    def __str__(self) -> str:
        return self.plain_text


@dataclass
class FormattedDocument:
    """Annotated text split into paragraphs of styled runs.

    Attributes:
        blocks: List of text blocks (paragraphs)
    """

    blocks: list[TextBlock] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get all text content without styling, one paragraph per line."""
        return "\n".join(block.plain_text for block in self.blocks)

    @property
    def word_count(self) -> int:
        """Whitespace-separated words across all paragraphs."""
        return len(WORD_PATTERN.findall(self.plain_text))

    @property
    def character_count(self) -> int:
        return len(self.plain_text)

    def add_block(self, block: TextBlock) -> None:
        """Add a text block to the document."""
        self.blocks.append(block)

    def merged(self) -> "FormattedDocument":
        """Return a copy with adjacent same-style runs joined.

        Two documents are formatting-equivalent when their merged forms
        compare equal.
        """
        return FormattedDocument(blocks=[block.merged() for block in self.blocks])
