"""RTF <-> annotated text codec."""

from scriv_rtf.codec.state import FormatState, ScopeStack, MarkerCursor
from scriv_rtf.codec.tokens import RTFTokenizer, Token, TokenKind, tokenize
from scriv_rtf.codec.decoder import RTFDecoder, decode
from scriv_rtf.codec.encoder import (
    RTFEncoder,
    RTF_PREAMBLE,
    EMPTY_DOCUMENT,
    encode,
    append_text,
)

__all__ = [
    "FormatState",
    "ScopeStack",
    "MarkerCursor",
    "RTFTokenizer",
    "Token",
    "TokenKind",
    "tokenize",
    "RTFDecoder",
    "decode",
    "RTFEncoder",
    "RTF_PREAMBLE",
    "EMPTY_DOCUMENT",
    "encode",
    "append_text",
]
