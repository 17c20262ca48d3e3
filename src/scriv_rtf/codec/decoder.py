"""Decode Scrivener RTF into annotated text.

Bold runs come out as ``**text**``, italic runs as ``*text*`` and
paragraphs are separated by single newlines. Decoding never fails:
unsupported or malformed markup is dropped or rendered literally.
"""

import logging

from scriv_rtf.codec.state import MarkerCursor, ScopeStack
from scriv_rtf.codec.tokens import (
    DASH_WORDS,
    PARAGRAPH_WORD,
    UNICODE_WORD,
    RTFTokenizer,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# Content starts at the first paragraph reset; everything before it is
# font, color and document-info header.
CONTENT_START = "\\pard"

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


class RTFDecoder:
    """Turn an RTF string into annotated text.

    One decoder holds the state for one call; use :func:`decode` unless
    you need to inspect the tokens or the scope stack.
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        self.scopes = ScopeStack()
        self.cursor = MarkerCursor()
        self._out: list[str] = []
        self._pending_high: str = ""

    def decode(self) -> str:
        """Run the decoder and return the annotated text."""
        for token in RTFTokenizer(self.raw, self.content_start(self.raw)):
            self._handle(token)

        self._flush_surrogate()
        if self.cursor.any_open:
            logger.debug("Closing markers left open at end of input")
        self._out.append(self.cursor.close_all())
        return "".join(self._out).strip()

    @staticmethod
    def content_start(raw: str) -> int:
        """Index where document content begins (0 if no ``\\pard``)."""
        index = raw.find(CONTENT_START)
        return index if index > 0 else 0

    def _handle(self, token: Token) -> None:
        kind = token.kind

        if kind is TokenKind.GROUP_OPEN:
            self.scopes.push()
        elif kind is TokenKind.GROUP_CLOSE:
            self.scopes.pop()
        elif kind in (TokenKind.ESCAPE, TokenKind.HEX_CHAR):
            self._emit(token.text)
        elif kind is TokenKind.LITERAL:
            # Source line breaks are layout, not content
            if token.text not in ("\n", "\r"):
                self._emit(token.text)
        elif kind is TokenKind.CONTROL_WORD:
            self._handle_control_word(token)
        # METADATA_GROUP and UNKNOWN produce no output

    def _handle_control_word(self, token: Token) -> None:
        name = token.name

        if name == PARAGRAPH_WORD:
            self._flush_surrogate()
            self._out.append(self.cursor.close_all())
            self._out.append("\n")
        elif name in DASH_WORDS:
            self._emit(DASH_WORDS[name])
        elif name == "i":
            self.scopes.top.italic = token.param != 0
        elif name == "b":
            self.scopes.top.bold = token.param != 0
        elif name == UNICODE_WORD and token.param is not None:
            # \uN is a signed 16-bit value; out-of-range N wraps
            self._emit_code_unit(token.param & 0xFFFF)
        else:
            logger.debug("Ignored control word \\%s", name)

    def _emit_code_unit(self, code: int) -> None:
        """Emit a UTF-16 code unit, pairing surrogates into one character."""
        if code in HIGH_SURROGATES:
            self._flush_surrogate()
            self._pending_high = chr(code)
            return
        if code in LOW_SURROGATES and self._pending_high:
            high = ord(self._pending_high)
            self._pending_high = ""
            combined = 0x10000 + ((high - 0xD800) << 10) + (code - 0xDC00)
            self._emit(chr(combined))
            return
        self._emit(chr(code))

    def _flush_surrogate(self) -> None:
        if self._pending_high:
            pending = self._pending_high
            self._pending_high = ""
            self._emit(pending)

    def _emit(self, text: str) -> None:
        if self._pending_high:
            self._flush_surrogate()
        self._out.append(self.cursor.sync(self.scopes.top))
        self._out.append(text)


def decode(raw: str) -> str:
    """Convert RTF to text with ``**bold**`` and ``*italic*`` markers.

    Args:
        raw: RTF document as a string

    Returns:
        Annotated text, one paragraph per line, stripped of surrounding
        whitespace. Empty input gives an empty string.
    """
    return RTFDecoder(raw).decode()
