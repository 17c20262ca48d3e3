"""Tokenizer for the RTF subset read by the decoder.

The tokenizer walks the raw markup with an explicit cursor and yields a
small closed set of token kinds. It knows nothing about formatting
state or output markers; the decoder consumes the token stream.
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

ASCII_LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.hexdigits)

# Groups that carry document metadata rather than content. They are
# skipped whole without touching the formatting state.
METADATA_GROUPS: tuple[str, ...] = (
    "\\fonttbl",
    "\\colortbl",
    "\\stylesheet",
    "\\info",
    "\\mmathPr",
    "\\*\\generator",
    "\\*\\listtable",
    "\\*\\listoverridetable",
)

# Control words that take no numeric parameter
PARAGRAPH_WORD = "par"
DASH_WORDS = {"emdash": "—", "endash": "–"}

# Toggle words take at most one digit: \i, \i0, \i1
TOGGLE_WORDS = frozenset({"b", "i"})

UNICODE_WORD = "u"
UNICODE_PLACEHOLDERS = frozenset("? ")


class TokenKind(Enum):
    """Kinds of token produced by RTFTokenizer."""

    GROUP_OPEN = auto()
    GROUP_CLOSE = auto()
    CONTROL_WORD = auto()
    ESCAPE = auto()
    HEX_CHAR = auto()
    LITERAL = auto()
    METADATA_GROUP = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    """A single unit of RTF markup.

    Attributes:
        kind: Which token this is
        text: The character carried by ESCAPE, HEX_CHAR and LITERAL tokens,
            or the raw group for METADATA_GROUP
        name: Control word name (CONTROL_WORD only)
        param: Optional signed integer parameter (CONTROL_WORD only)
    """

    kind: TokenKind
    text: str = ""
    name: str = ""
    param: Optional[int] = None


class RTFTokenizer:
    """Split RTF markup into tokens.

    Recognition order for a backslash at the cursor:

    1. ``\\\\``, ``\\{``, ``\\}`` -> ESCAPE
    2. ``\\'hh`` -> HEX_CHAR
    3. ``\\`` + letters (+ parameter) -> CONTROL_WORD, including the
       delimiting space or placeholder the word swallows
    4. anything else -> UNKNOWN (only the backslash is consumed)
    """

    def __init__(self, raw: str, start: int = 0) -> None:
        self.raw = raw
        self.pos = start

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def tokens(self) -> Iterator[Token]:
        """Yield tokens until the end of the input."""
        raw = self.raw
        while self.pos < len(raw):
            char = raw[self.pos]

            if char == "{":
                header = self._metadata_group_at()
                if header is not None:
                    start = self.pos
                    self._skip_group()
                    logger.debug("Skipped metadata group %s", header)
                    yield Token(TokenKind.METADATA_GROUP, text=raw[start:self.pos])
                    continue
                self.pos += 1
                yield Token(TokenKind.GROUP_OPEN)
                continue

            if char == "}":
                self.pos += 1
                yield Token(TokenKind.GROUP_CLOSE)
                continue

            if char == "\\":
                yield self._read_backslash()
                continue

            self.pos += 1
            yield Token(TokenKind.LITERAL, text=char)

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        if index < len(self.raw):
            return self.raw[index]
        return ""

    def _metadata_group_at(self) -> Optional[str]:
        for header in METADATA_GROUPS:
            if self.raw.startswith("{" + header, self.pos):
                return header
        return None

    def _skip_group(self) -> None:
        """Advance past the balanced group opening at the cursor."""
        depth = 1
        self.pos += 1
        raw = self.raw
        while self.pos < len(raw) and depth > 0:
            char = raw[self.pos]
            if char == "\\":
                # Escaped braces do not count toward nesting
                self.pos += 2
                continue
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            self.pos += 1
        self.pos = min(self.pos, len(raw))

    def _read_backslash(self) -> Token:
        nxt = self._peek(1)

        if nxt in ("\\", "{", "}"):
            self.pos += 2
            return Token(TokenKind.ESCAPE, text=nxt)

        if nxt == "'":
            digits = self.raw[self.pos + 2:self.pos + 4]
            if len(digits) == 2 and all(d in HEX_DIGITS for d in digits):
                self.pos += 4
                return Token(TokenKind.HEX_CHAR, text=chr(int(digits, 16)))

        if nxt in ASCII_LETTERS:
            return self._read_control_word()

        logger.debug("Dropped lone backslash at offset %d", self.pos)
        self.pos += 1
        return Token(TokenKind.UNKNOWN)

    def _read_control_word(self) -> Token:
        raw = self.raw
        end = self.pos + 1
        while end < len(raw) and raw[end] in ASCII_LETTERS:
            end += 1
        name = raw[self.pos + 1:end]
        self.pos = end

        if name == PARAGRAPH_WORD:
            if self._peek() in (" ", "\n", "\r"):
                self.pos += 1
            return Token(TokenKind.CONTROL_WORD, name=name)

        if name in DASH_WORDS:
            self._skip_space()
            return Token(TokenKind.CONTROL_WORD, name=name)

        if name in TOGGLE_WORDS:
            param = None
            if self._peek() in DIGITS:
                param = int(self._peek())
                self.pos += 1
            self._skip_space()
            return Token(TokenKind.CONTROL_WORD, name=name, param=param)

        param = self._read_param()

        if name == UNICODE_WORD and param is not None:
            if self._peek() in UNICODE_PLACEHOLDERS:
                self.pos += 1
            return Token(TokenKind.CONTROL_WORD, name=name, param=param)

        self._skip_space()
        return Token(TokenKind.CONTROL_WORD, name=name, param=param)

    def _read_param(self) -> Optional[int]:
        """Read an optional signed decimal parameter."""
        raw = self.raw
        start = self.pos
        end = start
        if end < len(raw) and raw[end] == "-":
            end += 1
        digits_start = end
        while end < len(raw) and raw[end] in DIGITS:
            end += 1
        if end == digits_start:
            return None
        self.pos = end
        return int(raw[start:end])

    def _skip_space(self) -> None:
        if self._peek() == " ":
            self.pos += 1


def tokenize(raw: str, start: int = 0) -> list[Token]:
    """Tokenize ``raw`` from ``start`` into a list."""
    return list(RTFTokenizer(raw, start))
