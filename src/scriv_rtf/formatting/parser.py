"""Markdown parser for annotated text."""

import logging
from typing import Optional

from scriv_rtf.formatting.ir import (
    TextStyle,
    TextRun,
    TextBlock,
    FormattedDocument,
)

logger = logging.getLogger(__name__)


def count_bare_asterisks(text: str) -> int:
    """Count ``*`` characters that are not next to another ``*``."""
    count = 0
    for index, char in enumerate(text):
        if char != "*":
            continue
        before = text[index - 1] if index > 0 else ""
        after = text[index + 1] if index + 1 < len(text) else ""
        if before != "*" and after != "*":
            count += 1
    return count


class MarkdownParser:
    """Parse ``**bold**`` / ``*italic*`` annotated text into structured IR.

    This is the same span grammar the RTF encoder writes, so parsing a
    text and encoding it always agree on where spans start and end.
    """

    def parse(self, markdown_text: str) -> FormattedDocument:
        """Convert annotated text to a FormattedDocument.

        Args:
            markdown_text: Text with one paragraph per line

        Returns:
            FormattedDocument with one block per non-blank line
        """
        doc = FormattedDocument()

        for line in markdown_text.split("\n"):
            if not line.strip():
                continue
            doc.add_block(self._parse_line(line))

        return doc

    def _parse_line(self, line: str) -> TextBlock:
        """Parse a single line into a TextBlock with styled runs."""
        block = TextBlock()
        for segment_text, style in self.tokenize_markdown(line):
            if segment_text:
                block.runs.append(TextRun(text=segment_text, style=style))
        return block

    def tokenize_markdown(self, text: str) -> list[tuple[str, TextStyle]]:
        """Tokenize one paragraph into (text, style) pairs.

        Handles:
        - **bold**, with *italic* spans allowed inside
        - *italic* opened inside bold and closed after it (**a *b** c*)
        - *italic*
        - plain text, including markers that never close
        """
        return self._tokenize(text, TextStyle.NONE)

    def _tokenize(self, text: str, outer: TextStyle) -> list[tuple[str, TextStyle]]:
        segments: list[tuple[str, TextStyle]] = []
        plain: list[str] = []
        pos = 0

        def flush_plain() -> None:
            if plain:
                segments.append(("".join(plain), outer))
                plain.clear()

        while pos < len(text):
            # Check for bold (**), not inside another bold span
            if TextStyle.BOLD not in outer and text.startswith("**", pos):
                end = self.find_bold_close(text, pos)
                if end != -1:
                    flush_plain()
                    bold = outer | TextStyle.BOLD
                    carried = self._carry_italic(text, pos + 2, end)
                    if carried is not None:
                        # Italic opened inside the bold span ends after it
                        opener, close = carried
                        segments.extend(self._tokenize(text[pos + 2 : opener], bold))
                        segments.append((text[opener + 1 : end], bold | TextStyle.ITALIC))
                        segments.append((text[end + 2 : close], outer | TextStyle.ITALIC))
                        pos = close + 1
                        continue
                    content = text[pos + 2 : end]
                    segments.extend(self._tokenize(content, bold))
                    pos = end + 2
                    continue
                # No closing found, both asterisks are plain text
                logger.debug("Unclosed bold marker at %d", pos)
                plain.append("**")
                pos += 2
                continue

            # Check for italic (*)
            if text[pos] == "*" and not text.startswith("**", pos):
                end = self.find_italic_close(text, pos)
                if end != -1:
                    flush_plain()
                    content = text[pos + 1 : end]
                    segments.append((content, outer | TextStyle.ITALIC))
                    pos = end + 1
                    continue
                logger.debug("Unclosed italic marker at %d", pos)

            plain.append(text[pos])
            pos += 1

        flush_plain()
        return segments

    @staticmethod
    def find_bold_close(text: str, start: int) -> int:
        """Index of the ``**`` closing the bold span opened at ``start``.

        The nearest following ``**`` closes the span. When the body still
        has an italic span open and that ``**`` is followed by a third
        ``*``, the close moves right by one so ``***word***`` reads as
        bold around italic. Returns -1 if there is no close.
        """
        end = text.find("**", start + 2)
        if end == -1:
            return -1
        body = text[start + 2 : end]
        if text[end + 2 : end + 3] == "*" and count_bare_asterisks(body) % 2:
            end += 1
        return end

    def _carry_italic(self, text: str, start: int, end: int) -> Optional[tuple[int, int]]:
        """Find an italic span that opens in a bold body and outlives it.

        ``**a *b** c*`` is bold ``a *b`` with italic ``b c``: the decoder
        closes ``**`` first when bold ends inside italic, so the italic
        close comes after the bold close. Returns the positions of the
        opening and closing ``*``, or None.
        """
        body = text[start:end]
        if count_bare_asterisks(body) % 2 == 0:
            return None
        # A bold body holds no "**", so its last "*" is the unpaired one
        opener = start + body.rfind("*")
        if opener == end - 1:
            return None
        close = self.find_italic_close(text, opener)
        if close <= end + 1:
            return None
        return opener, close

    @staticmethod
    def find_italic_close(text: str, start: int) -> int:
        """Index of the next ``*`` with no ``*`` on either side, or -1."""
        for index in range(start + 1, len(text)):
            if text[index] != "*":
                continue
            if text[index - 1] == "*":
                continue
            if index + 1 < len(text) and text[index + 1] == "*":
                continue
            return index
        return -1

    def to_plain_text(self, doc: FormattedDocument) -> str:
        """Convert a FormattedDocument back to plain text."""
        return doc.plain_text

    def to_markdown(self, doc: FormattedDocument) -> str:
        """Convert a FormattedDocument back to annotated text.

        Consecutive bold runs share one ``**`` pair, so italic runs
        inside them nest as ``**a *b* c**``.
        """
        lines: list[str] = []

        for block in doc.merged().blocks:
            line_parts: list[str] = []
            bold_open = False
            for run in block.runs:
                if run.bold and not bold_open:
                    line_parts.append("**")
                    bold_open = True
                elif not run.bold and bold_open:
                    line_parts.append("**")
                    bold_open = False

                text = run.text
                if run.italic:
                    text = f"*{text}*"
                line_parts.append(text)
            if bold_open:
                line_parts.append("**")
            lines.append("".join(line_parts))

        return "\n".join(lines)
