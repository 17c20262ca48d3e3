"""Encode annotated text as Scrivener-compatible RTF.

The inverse of :mod:`scriv_rtf.codec.decoder`. Each non-blank line of
the input becomes one paragraph wrapped in ``{\\f1\\fs24 ...}``;
paragraphs are separated by a single ``\\par``. The document header is
always the fixed :data:`RTF_PREAMBLE`; headers of the document being
replaced are not preserved.
"""

from typing import Optional

from scriv_rtf.codec.decoder import decode
from scriv_rtf.formatting.ir import TextStyle
from scriv_rtf.formatting.parser import MarkdownParser

RTF_PREAMBLE = (
    "{\\rtf1\\ansi\\ansicpg1252\\uc1\\deff0\n"
    "{\\fonttbl{\\f0\\fnil\\fcharset0\\fprq2 TimesNewRomanPSMT;}"
    "{\\f1\\fnil\\fcharset0\\fprq2 SitkaText;}}\n"
    "{\\colortbl;\\red0\\green0\\blue0;\\red255\\green255\\blue255;"
    "\\red128\\green128\\blue128;}\n"
    "\\paperw12240\\paperh15840\\margl1800\\margr1800\\margt1440\\margb1440"
    "\\f0\\fs24\\cf0\n"
    "\\pard\\plain \\ltrch\\loch "
)
RTF_CLOSE = "}"

PARAGRAPH_FONT = "{\\f1\\fs24 %s}"
# Exactly one \par between paragraphs
PARAGRAPH_BREAK = "\n\\par "

BOLD_GROUP = "{\\b %s}"
ITALIC_GROUP = "{\\i %s}"

CHAR_ESCAPES = {
    "\\": "\\\\",
    "{": "\\{",
    "}": "\\}",
    "—": "\\emdash ",
    "–": "\\endash ",
}


def encode_char(char: str) -> str:
    """Encode one character of paragraph text."""
    escaped = CHAR_ESCAPES.get(char)
    if escaped is not None:
        return escaped

    code = ord(char)
    if code <= 127:
        return char

    if code > 0xFFFF:
        # Outside the BMP: write the UTF-16 surrogate pair
        code -= 0x10000
        units = (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
    else:
        units = (code,)

    # \uN takes a signed 16-bit value
    return "".join(
        f"\\u{unit - 65536 if unit > 32767 else unit}?" for unit in units
    )


def encode_literal(text: str) -> str:
    """Encode text with no marker handling."""
    return "".join(encode_char(char) for char in text)


class RTFEncoder:
    """Build RTF from text annotated with ``**bold**`` and ``*italic*``.

    Spans are found by :class:`MarkdownParser`; markers that never close
    come back from it as plain text and are written literally. A bold
    span becomes one ``{\\b ...}`` group with any italic spans nested
    inside it as ``{\\i ...}``.
    """

    def __init__(self, parser: Optional[MarkdownParser] = None) -> None:
        self.parser = parser or MarkdownParser()

    def encode(self, text: str) -> str:
        """Return a complete RTF document for ``text``."""
        paragraphs = [para for para in text.split("\n") if para.strip()]
        body = PARAGRAPH_BREAK.join(
            PARAGRAPH_FONT % self.encode_paragraph(para) for para in paragraphs
        )
        return RTF_PREAMBLE + body + RTF_CLOSE

    def encode_paragraph(self, text: str) -> str:
        """Encode the inline content of a single paragraph."""
        parts: list[str] = []
        bold_parts: list[str] = []

        def close_bold() -> None:
            if bold_parts:
                parts.append(BOLD_GROUP % "".join(bold_parts))
                bold_parts.clear()

        for segment, style in self.parser.tokenize_markdown(text):
            encoded = encode_literal(segment)
            if TextStyle.ITALIC in style:
                encoded = ITALIC_GROUP % encoded

            if TextStyle.BOLD in style:
                bold_parts.append(encoded)
            else:
                close_bold()
                parts.append(encoded)

        close_bold()
        return "".join(parts)


def encode(text: str) -> str:
    """Convert annotated text to an RTF document.

    Blank lines are dropped, so ``"A\\n\\nB"`` encodes to two
    paragraphs. ``encode("")`` returns the bare preamble.
    """
    return RTFEncoder().encode(text)


EMPTY_DOCUMENT = encode("")


def append_text(raw: str, addition: str, separator: str = "\n\n") -> str:
    """Append annotated text to an existing RTF document.

    The existing content is decoded, joined to ``addition`` with
    ``separator`` (omitted when the document has no text) and
    re-encoded with the standard preamble.
    """
    existing = decode(raw)
    combined = existing + separator + addition if existing else addition
    return encode(combined)
